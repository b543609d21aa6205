"""
CLI main entry point.

Runs the typer app without click's standalone handling so that exit
codes stay under our control: usage errors exit 1, not click's 2.
"""

import sys
from typing import Optional, Sequence

import click
import typer
from rich.console import Console
from rich.markup import escape


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the deyecli CLI.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        int: Exit code (0 success or help, 1 usage or validation error,
             3 transport failure)
    """
    # Import here to avoid circular imports
    from .orchestrator import PROG_NAME, app
    from ..cli_help import COMMAND_HELP, print_main_help

    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print_main_help()
        return 0

    command = typer.main.get_command(app)
    try:
        result = command.main(args=args, prog_name=PROG_NAME, standalone_mode=False)
    except click.UsageError as e:
        Console(stderr=True, highlight=False).print(f"[red]❌ Error:[/red] {escape(e.format_message())}")
        name = e.ctx.info_name if e.ctx is not None and e.ctx.parent is not None else None
        COMMAND_HELP.get(name or "", print_main_help)()
        return 1
    except click.ClickException as e:
        Console(stderr=True, highlight=False).print(f"[red]❌ Error:[/red] {escape(e.format_message())}")
        return e.exit_code or 1
    except click.exceptions.Abort:
        return 1

    return result if isinstance(result, int) else 0
