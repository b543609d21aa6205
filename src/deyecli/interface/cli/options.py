"""
Shared typer options.

Every settings flag is accepted both before and after the subcommand.
The option declarations live here once; settings_options() adds them to
the main callback and to each command.
"""

import functools
import inspect
from typing import Any, Callable, Optional

import typer

SETTINGS_OPTIONS = {
    "base_url": typer.Option(
        None, "--base-url", metavar="URL", help="API base URL (DEYE_BASE_URL)."
    ),
    "app_id": typer.Option(None, "--app-id", metavar="ID", help="Application ID (DEYE_APP_ID)."),
    "app_secret": typer.Option(
        None, "--app-secret", metavar="SECRET", help="Application secret (DEYE_APP_SECRET)."
    ),
    "username": typer.Option(
        None, "--username", metavar="NAME", help="Login username (DEYE_USERNAME)."
    ),
    "email": typer.Option(None, "--email", metavar="EMAIL", help="Login e-mail (DEYE_EMAIL)."),
    "mobile": typer.Option(None, "--mobile", metavar="NUMBER", help="Login mobile (DEYE_MOBILE)."),
    "country_code": typer.Option(
        None, "--country-code", metavar="CODE", help="Country code for mobile login (DEYE_COUNTRY_CODE)."
    ),
    "password": typer.Option(
        None, "--password", metavar="PASS", help="Plaintext password, sent hashed (DEYE_PASSWORD)."
    ),
    "company_id": typer.Option(
        None, "--company-id", metavar="ID", help="Company ID for a business token (DEYE_COMPANY_ID)."
    ),
    "token": typer.Option(None, "--token", metavar="BEARER", help="Access token (DEYE_TOKEN)."),
    "device_sn": typer.Option(
        None, "--device-sn", metavar="SN", help="Device serial (DEYE_DEVICE_SN)."
    ),
    "station_id": typer.Option(
        None, "--station-id", metavar="ID", help="Station ID (DEYE_STATION_ID)."
    ),
    "timeout": typer.Option(
        None, "--timeout", metavar="SECONDS", help="HTTP timeout in seconds (DEYE_TIMEOUT)."
    ),
}


def settings_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Add every settings flag to a typer command or callback.

    The decorated function declares a keyword parameter ``flags`` instead
    of the individual options; it receives the flags that were given,
    keyed by settings field name.
    """
    signature = inspect.signature(func)
    own_params = [p for p in signature.parameters.values() if p.name != "flags"]
    extra_params = [
        inspect.Parameter(name, inspect.Parameter.KEYWORD_ONLY, default=option, annotation=Optional[str])
        for name, option in SETTINGS_OPTIONS.items()
    ]

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        given = {name: kwargs.pop(name, None) for name in SETTINGS_OPTIONS}
        return func(*args, flags=settings_flags(**given), **kwargs)

    wrapper.__signature__ = signature.replace(parameters=own_params + extra_params)  # type: ignore[attr-defined]
    return wrapper


def help_option(printer: Callable[[], None]) -> Any:
    """
    Eager -h/--help option that prints a rich help page and exits.

    Args:
        printer: Function printing the help page
    """

    def _show_help(value: bool) -> None:
        if value:
            printer()
            raise typer.Exit()

    return typer.Option(
        False,
        "--help",
        "-h",
        help="Show this message and exit.",
        is_eager=True,
        callback=_show_help,
    )


def settings_flags(**values: Optional[str]) -> dict[str, str]:
    """Keep only the settings flags that were actually given."""
    return {name: value for name, value in values.items() if value}
