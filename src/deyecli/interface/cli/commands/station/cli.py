"""
Station Command Functions - Station Listing and Latest Data

Handles station-list and station-latest.
"""

import logging
from typing import List, Optional

import typer

from deyecli.application.container import Container
from deyecli.interface.cli import options
from deyecli.interface.cli_help import print_station_latest_help, print_station_list_help
from deyecli.interface.cli.formatters import StatusFormatter
from ..base import first_positional, reported_errors
from .services import StationLatestCommand, StationListCommand

logger = logging.getLogger(__name__)


@options.settings_options
def station_list(
    ctx: typer.Context,
    show_help: bool = options.help_option(print_station_list_help),
    *,
    flags: dict[str, str],
):
    """
    List stations under the account.
    """
    container: Container = ctx.obj
    status = StatusFormatter()

    with reported_errors(status):
        settings = container.settings(flags)
        StationListCommand(container, status=status).execute(settings)


@options.settings_options
def station_latest(
    ctx: typer.Context,
    station_ids: Optional[List[str]] = typer.Argument(
        None, metavar="[ID]", help="Station ID.", show_default=False
    ),
    show_help: bool = options.help_option(print_station_latest_help),
    *,
    flags: dict[str, str],
):
    """
    Fetch the latest real-time data of a station.
    """
    container: Container = ctx.obj
    status = StatusFormatter()

    with reported_errors(status):
        settings = container.settings(flags)
        StationLatestCommand(container, status=status).execute(
            settings,
            station_id=container.merged_flags(flags).get("station_id"),
            positional=first_positional(station_ids),
        )
