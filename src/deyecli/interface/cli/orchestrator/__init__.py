"""
CLI Orchestrator - Main Entry Point

Wires every command into one typer app. The main callback takes the
global options, sets up logging and builds the dependency container
shared by the command that follows.
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from deyecli import __version__
from deyecli.application.container import Container
from deyecli.infrastructure.logging_config import setup_logging
from deyecli.interface.cli import options
from deyecli.interface.cli_help import COMMAND_HELP, print_main_help
from deyecli.interface.cli.commands.account.cli import token
from deyecli.interface.cli.commands.config.cli import (
    battery_parameter_update,
    config_battery,
    config_system,
)
from deyecli.interface.cli.commands.device.cli import device_latest
from deyecli.interface.cli.commands.station.cli import station_latest, station_list

logger = logging.getLogger(__name__)

PROG_NAME = "deyecli"

# Built-in click help is replaced by the rich pages of cli_help.
app = typer.Typer(
    name=PROG_NAME,
    help="Deye Cloud API CLI",
    add_completion=False,
    context_settings={"help_option_names": []},
)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(f"{PROG_NAME} {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
@options.settings_options
def main_callback(
    ctx: typer.Context,
    show_help: bool = options.help_option(print_main_help),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True, callback=_show_version
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    log_file: Optional[str] = typer.Option(
        None, "--log-file", metavar="PATH", help="Also write debug logs to this file."
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", metavar="PATH", help="Config file location (DEYE_CONFIG)."
    ),
    *,
    flags: dict[str, str],
):
    """
    Deye Cloud API CLI.

    Settings come from flags, then DEYE_* environment variables, then the
    config file.
    """
    setup_logging(logging.DEBUG if verbose else logging.WARNING, log_file)

    ctx.obj = Container(config_path=config, global_flags=flags)
    logger.debug("Using config file %s", ctx.obj.config_path)

    if ctx.invoked_subcommand is None:
        print_main_help()


def help_command(
    topic: Optional[str] = typer.Argument(None, metavar="[COMMAND]", show_default=False),
    show_help: bool = options.help_option(print_main_help),
) -> None:
    """Show usage, or the help page of one command."""
    COMMAND_HELP.get(topic or "", print_main_help)()


app.command("token")(token)
app.command("config-battery")(config_battery)
app.command("config-system")(config_system)
app.command("battery-parameter-update")(battery_parameter_update)
app.command("station-list")(station_list)
app.command("station-latest")(station_latest)
app.command("device-latest")(device_latest)
app.command("help")(help_command)
