"""
Device Config Command Functions - Battery and System Configuration

Handles config-battery, config-system and battery-parameter-update.
"""

import logging
from typing import List, Optional

import typer

from deyecli.application.container import Container
from deyecli.interface.cli import options
from deyecli.interface.cli_help import (
    print_battery_parameter_update_help,
    print_config_battery_help,
    print_config_system_help,
)
from deyecli.interface.cli.formatters import StatusFormatter
from ..base import first_positional, reported_errors
from .services import BatteryConfigCommand, BatteryParameterCommand, SystemConfigCommand

logger = logging.getLogger(__name__)

SERIAL_ARGUMENT = typer.Argument(None, metavar="[SN]", help="Device serial number.", show_default=False)


@options.settings_options
def config_battery(
    ctx: typer.Context,
    serials: Optional[List[str]] = SERIAL_ARGUMENT,
    show_help: bool = options.help_option(print_config_battery_help),
    *,
    flags: dict[str, str],
):
    """
    Read battery config parameters of a device.
    """
    container: Container = ctx.obj
    status = StatusFormatter()

    with reported_errors(status):
        settings = container.settings(flags)
        BatteryConfigCommand(container, status=status).execute(
            settings,
            device_sn=container.merged_flags(flags).get("device_sn"),
            positional=first_positional(serials),
        )


@options.settings_options
def config_system(
    ctx: typer.Context,
    serials: Optional[List[str]] = SERIAL_ARGUMENT,
    show_help: bool = options.help_option(print_config_system_help),
    *,
    flags: dict[str, str],
):
    """
    Read system work mode parameters of a device.
    """
    container: Container = ctx.obj
    status = StatusFormatter()

    with reported_errors(status):
        settings = container.settings(flags)
        SystemConfigCommand(container, status=status).execute(
            settings,
            device_sn=container.merged_flags(flags).get("device_sn"),
            positional=first_positional(serials),
        )


@options.settings_options
def battery_parameter_update(
    ctx: typer.Context,
    serials: Optional[List[str]] = SERIAL_ARGUMENT,
    show_help: bool = options.help_option(print_battery_parameter_update_help),
    param_type: Optional[str] = typer.Option(
        None, "--param-type", metavar="TYPE", help="Battery parameter to set."
    ),
    value: Optional[str] = typer.Option(
        None, "--value", metavar="N", help="New value, an unsigned integer."
    ),
    *,
    flags: dict[str, str],
):
    """
    Set a battery parameter (charge/discharge current, grid charge current, low SOC).
    """
    container: Container = ctx.obj
    status = StatusFormatter()

    with reported_errors(status):
        settings = container.settings(flags)
        BatteryParameterCommand(container, status=status).execute(
            settings,
            param_type=param_type,
            value=value,
            device_sn=container.merged_flags(flags).get("device_sn"),
            positional=first_positional(serials),
        )
