"""
Result formatters for API commands.

Provides formatting and display logic for command results. API
responses go to stdout; notices and errors go to stderr.
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from deyecli.domain.api import ApiResponse
from deyecli.domain.errors import DeyeCliError, MissingParametersError


class ResponseFormatter:
    """
    Formatter for API response bodies.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(soft_wrap=True)

    def display_response(self, response: ApiResponse) -> None:
        """
        Print a response body.

        JSON is re-indented (and highlighted on a terminal); anything else
        is printed unchanged.
        """
        data = response.json()
        if data is None:
            typer.echo(response.text)
            return

        text = json.dumps(data, indent=2, ensure_ascii=False)
        if self.console.is_terminal:
            self.console.print_json(text)
        else:
            typer.echo(text)


class StatusFormatter:
    """
    Formatter for progress notices and errors on stderr.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True, soft_wrap=True, emoji=False, highlight=False)

    def display_request(self, method: str, url: str) -> None:
        """Announce an outgoing request."""
        self.console.print(f"[dim]→ {method} {escape(url)}[/dim]")

    def display_token_saved(self, key: str, path: Path) -> None:
        """Confirm the token was written to the config file."""
        self.console.print(f"[green]✔[/green]  {key} saved to {escape(str(path))}")

    def display_warning(self, message: str) -> None:
        self.console.print(f"[yellow]⚠  {escape(message)}[/yellow]")

    def display_error(self, error: DeyeCliError) -> None:
        """
        Render an error.

        Missing parameters are listed one per line so every omission is
        visible at once.
        """
        if isinstance(error, MissingParametersError):
            self.console.print("[red]❌ Missing required parameter(s):[/red]")
            for item in error.missing:
                self.console.print(f"  - {escape(item)}")
            return
        self.console.print(f"[red]❌ Error:[/red] {escape(str(error))}")
