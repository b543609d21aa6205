"""
Token Command Function - Account Authentication

Handles the token command.
"""

import logging

import typer

from deyecli.application.container import Container
from deyecli.interface.cli import options
from deyecli.interface.cli_help import print_token_help
from deyecli.interface.cli.formatters import StatusFormatter
from ..base import reported_errors
from .services.token_command import TokenCommand

logger = logging.getLogger(__name__)


@options.settings_options
def token(
    ctx: typer.Context,
    show_help: bool = options.help_option(print_token_help),
    *,
    flags: dict[str, str],
):
    """
    Obtain an access token and save it to the config file as DEYE_TOKEN.
    """
    container: Container = ctx.obj
    status = StatusFormatter()

    with reported_errors(status):
        settings = container.settings(flags)
        TokenCommand(container, status=status).execute(settings)
