"""
Rich-formatted CLI help display.

Provides colorful help output for the deyecli CLI: one main usage page
and one page per command.
"""

from typing import Callable

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from deyecli.domain.api import (
    BATTERY_PARAMETER_UPDATE,
    CONFIG_BATTERY,
    CONFIG_SYSTEM,
    DEVICE_LATEST,
    STATION_LATEST,
    STATION_LIST,
    ACCOUNT_TOKEN,
    Endpoint,
)
from deyecli.domain.config import BatteryParameterType

EXE_NAME = "deyecli"

GLOBAL_OPTIONS = [
    ("--base-url <url>", "API base URL", "DEYE_BASE_URL"),
    ("--app-id <id>", "Application ID", "DEYE_APP_ID"),
    ("--app-secret <secret>", "Application secret", "DEYE_APP_SECRET"),
    ("--username <name>", "Login username", "DEYE_USERNAME"),
    ("--email <email>", "Login e-mail", "DEYE_EMAIL"),
    ("--mobile <number>", "Login mobile number", "DEYE_MOBILE"),
    ("--country-code <code>", "Country code for mobile login", "DEYE_COUNTRY_CODE"),
    ("--password <pass>", "Plaintext password, sent SHA-256 hashed", "DEYE_PASSWORD"),
    ("--company-id <id>", "Company ID for business token", "DEYE_COMPANY_ID"),
    ("--token <bearer>", "Access token from the token command", "DEYE_TOKEN"),
    ("--device-sn <sn>", "Device serial number", "DEYE_DEVICE_SN"),
    ("--station-id <id>", "Station ID (integer)", "DEYE_STATION_ID"),
    ("--timeout <seconds>", "HTTP request timeout (default 30)", "DEYE_TIMEOUT"),
]

APP_OPTIONS = [
    ("--config <path>", "Config file location", "DEYE_CONFIG"),
    ("-v, --verbose", "Debug logging on stderr", "-"),
    ("--log-file <path>", "Also write debug logs to a file", "-"),
    ("--version", "Show version and exit", "-"),
    ("-h, --help", "Show this help", "-"),
]


def _console() -> Console:
    return Console(soft_wrap=True)


def _command_header(console: Console, title: str, endpoint: Endpoint, summary: str) -> None:
    console.print(f"\n[bold cyan]{title}[/bold cyan]  [dim]({endpoint.method} {endpoint.path})[/dim]")
    console.print(f"[dim]{summary}[/dim]\n")


def _options_table(rows: list[tuple[str, str]]) -> Table:
    table = Table(show_header=True, header_style="bold", box=box.ROUNDED)
    table.add_column("Option", style="bright_cyan", width=26)
    table.add_column("Description", style="white")
    for option, description in rows:
        table.add_row(option, description)
    return table


def _ranges_table() -> Table:
    ranges = Table(show_header=True, header_style="bold", box=box.SIMPLE)
    ranges.add_column("param-type", style="bright_cyan")
    ranges.add_column("Range", style="white")
    for parameter in BatteryParameterType:
        ranges.add_row(parameter.value, f"0-{parameter.max_value} ({parameter.unit})")
    return ranges


def print_main_help() -> None:
    """Print the main CLI help with rich formatting."""
    console = _console()

    console.print("[bold white]deyecli[/bold white] [cyan]- Deye Cloud API CLI[/cyan]\n")
    console.print("[bold yellow]USAGE:[/bold yellow]")
    console.print(
        f"  {EXE_NAME} [dim]\\[global options][/dim] [bright_cyan]<command>[/bright_cyan] [dim]\\[options][/dim]\n"
    )

    commands = Table(
        show_header=True,
        header_style="bold magenta",
        box=box.SIMPLE,
        padding=(0, 2),
    )
    commands.add_column("Command", style="bright_cyan")
    commands.add_column("Description", style="white")
    commands.add_column("Endpoint", style="dim")

    commands.add_row("token", "Obtain an access token and save it", ACCOUNT_TOKEN.path)
    commands.add_row("config-battery", "Read battery config parameters", CONFIG_BATTERY.path)
    commands.add_row("config-system", "Read system work mode parameters", CONFIG_SYSTEM.path)
    commands.add_row(
        "battery-parameter-update", "Set a battery parameter value", BATTERY_PARAMETER_UPDATE.path
    )
    commands.add_row("station-list", "List stations under the account", STATION_LIST.path)
    commands.add_row("station-latest", "Latest real-time data of a station", STATION_LATEST.path)
    commands.add_row("device-latest", "Latest measure-point data of a device", DEVICE_LATEST.path)
    commands.add_row("help", "Show this help", "-")

    console.print(Panel(commands, title="[bold green]COMMANDS[/bold green]", border_style="green"))

    options = Table(show_header=True, header_style="bold", box=box.SIMPLE)
    options.add_column("Option", style="bright_cyan")
    options.add_column("Description", style="white")
    options.add_column("Env / config key", style="dim")
    for row in GLOBAL_OPTIONS + APP_OPTIONS:
        options.add_row(*row)
    console.print(
        Panel(options, title="[bold green]GLOBAL OPTIONS[/bold green]", border_style="green")
    )
    console.print(
        "[dim]Setting options may be given before or after the command; "
        "flags override environment variables, which override the config file.[/dim]\n"
    )

    console.print("[bold yellow]BATTERY PARAMETERS:[/bold yellow]")
    console.print(_ranges_table())

    console.print("[bold yellow]EXAMPLES:[/bold yellow]")
    examples = [
        (
            "Obtain a token:",
            f"DEYE_APP_ID=xxx DEYE_APP_SECRET=yyy DEYE_EMAIL=me@example.com "
            f"DEYE_PASSWORD=mypassword {EXE_NAME} token",
        ),
        ("Read battery config:", f"{EXE_NAME} config-battery MY_DEVICE_SN"),
        (
            "Set max charge current:",
            f"{EXE_NAME} battery-parameter-update --param-type MAX_CHARGE_CURRENT --value 100 MY_DEVICE_SN",
        ),
        ("Station data:", f"{EXE_NAME} station-latest --station-id 12345"),
    ]
    for label, cmd in examples:
        console.print(f"  [dim]{label}[/dim]")
        console.print(f"    [bright_green]{cmd}[/bright_green]")

    console.print(
        f"\n[dim]Use[/dim] [bright_cyan]{EXE_NAME} <command> --help[/bright_cyan] "
        "[dim]for command-specific options.[/dim]\n"
    )


def print_token_help() -> None:
    """Print help for the token command."""
    console = _console()
    _command_header(console, "TOKEN", ACCOUNT_TOKEN, "Obtain an access token and save it as DEYE_TOKEN.")
    console.print(
        _options_table(
            [
                ("--app-id <id>", "Application ID (required)"),
                ("--app-secret <secret>", "Application secret (required)"),
                ("--password <pass>", "Plaintext password (required)"),
                ("--username | --email | --mobile", "Login identifier (one required)"),
                ("--country-code <code>", "Required with --mobile"),
                ("--company-id <id>", "Company ID for a business token"),
            ]
        )
    )
    console.print("\n[bold yellow]EXAMPLE:[/bold yellow]")
    console.print(
        f"  [green]{EXE_NAME} token --app-id xxx --app-secret yyy --email me@example.com --password pw[/green]\n"
    )


def _print_device_help(title: str, endpoint: Endpoint, summary: str, command: str) -> None:
    console = _console()
    _command_header(console, title, endpoint, summary)
    console.print(
        _options_table(
            [
                ("--device-sn <sn>", "Device serial number"),
                ("<sn>", "Device serial number as positional argument"),
                ("--token <bearer>", "Access token (required)"),
            ]
        )
    )
    console.print(f"\n[bold yellow]USAGE:[/bold yellow]\n  [green]{EXE_NAME} {command} [--device-sn <sn>] [<sn>][/green]\n")


def print_config_battery_help() -> None:
    """Print help for the config-battery command."""
    _print_device_help(
        "CONFIG-BATTERY", CONFIG_BATTERY, "Read battery config parameters.", "config-battery"
    )


def print_config_system_help() -> None:
    """Print help for the config-system command."""
    _print_device_help(
        "CONFIG-SYSTEM", CONFIG_SYSTEM, "Read system work mode parameters.", "config-system"
    )


def print_device_latest_help() -> None:
    """Print help for the device-latest command."""
    _print_device_help(
        "DEVICE-LATEST", DEVICE_LATEST, "Fetch latest raw measure-point data of a device.", "device-latest"
    )


def print_battery_parameter_update_help() -> None:
    """Print help for the battery-parameter-update command."""
    console = _console()
    _command_header(
        console, "BATTERY-PARAMETER-UPDATE", BATTERY_PARAMETER_UPDATE, "Set a battery parameter value."
    )
    console.print(
        _options_table(
            [
                ("--param-type <TYPE>", "Parameter to set (required)"),
                ("--value <n>", "Non-negative integer within the range (required)"),
                ("--device-sn <sn> | <sn>", "Device serial number"),
                ("--token <bearer>", "Access token (required)"),
            ]
        )
    )
    console.print(_ranges_table())
    console.print(
        f"[bold yellow]USAGE:[/bold yellow]\n  [green]{EXE_NAME} battery-parameter-update "
        "--param-type <TYPE> --value <n> [--device-sn <sn>] [<sn>][/green]\n"
    )


def print_station_list_help() -> None:
    """Print help for the station-list command."""
    console = _console()
    _command_header(
        console,
        "STATION-LIST",
        STATION_LIST,
        "Fetch the station list: stationId, name, batterySOC, generationPower, etc.",
    )
    console.print(_options_table([("--token <bearer>", "Access token (required)")]))
    console.print()


def print_station_latest_help() -> None:
    """Print help for the station-latest command."""
    console = _console()
    _command_header(
        console,
        "STATION-LATEST",
        STATION_LATEST,
        "Latest real-time data of a station: batteryPower, batterySOC, gridPower, etc.",
    )
    console.print(
        _options_table(
            [
                ("--station-id <id>", "Station ID"),
                ("<id>", "Station ID as positional argument"),
                ("--token <bearer>", "Access token (required)"),
            ]
        )
    )
    console.print(
        f"\n[bold yellow]USAGE:[/bold yellow]\n  [green]{EXE_NAME} station-latest [--station-id <id>] [<id>][/green]\n"
    )


COMMAND_HELP: dict[str, Callable[[], None]] = {
    "token": print_token_help,
    "config-battery": print_config_battery_help,
    "config-system": print_config_system_help,
    "battery-parameter-update": print_battery_parameter_update_help,
    "station-list": print_station_list_help,
    "station-latest": print_station_latest_help,
    "device-latest": print_device_latest_help,
    "help": print_main_help,
}
