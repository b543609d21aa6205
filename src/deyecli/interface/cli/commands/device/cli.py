"""
Device Latest Command Function

Handles device-latest.
"""

import logging
from typing import List, Optional

import typer

from deyecli.application.container import Container
from deyecli.interface.cli import options
from deyecli.interface.cli_help import print_device_latest_help
from deyecli.interface.cli.formatters import StatusFormatter
from ..base import first_positional, reported_errors
from .services import DeviceLatestCommand

logger = logging.getLogger(__name__)


@options.settings_options
def device_latest(
    ctx: typer.Context,
    serials: Optional[List[str]] = typer.Argument(
        None, metavar="[SN]", help="Device serial number.", show_default=False
    ),
    show_help: bool = options.help_option(print_device_latest_help),
    *,
    flags: dict[str, str],
):
    """
    Fetch the latest measure-point data of a device.
    """
    container: Container = ctx.obj
    status = StatusFormatter()

    with reported_errors(status):
        settings = container.settings(flags)
        DeviceLatestCommand(container, status=status).execute(
            settings,
            device_sn=container.merged_flags(flags).get("device_sn"),
            positional=first_positional(serials),
        )
