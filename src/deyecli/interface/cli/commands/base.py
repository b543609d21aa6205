"""
Base class for API commands.

A command validates its inputs, builds the request body, sends it and
prints the response. Failures surface as DeyeCliError and are turned
into exit codes by reported_errors().
"""

import logging
from contextlib import contextmanager
from typing import Any, ClassVar, Iterator, Mapping, Optional

import typer

from deyecli.application.container import Container
from deyecli.domain.api import ApiResponse, Endpoint
from deyecli.domain.config import Settings, parameter_hint
from deyecli.domain.errors import DeyeCliError, MissingParametersError
from deyecli.domain.validation import first_non_empty
from deyecli.interface.cli.formatters import ResponseFormatter, StatusFormatter

logger = logging.getLogger(__name__)

DEVICE_SN_HINT = "device serial number (DEYE_DEVICE_SN / --device-sn / positional arg)"
STATION_ID_HINT = "station id (DEYE_STATION_ID / --station-id / positional arg)"


@contextmanager
def reported_errors(status: StatusFormatter) -> Iterator[None]:
    """Print a DeyeCliError and exit with its code."""
    try:
        yield
    except DeyeCliError as e:
        logger.debug("Command failed: %s", e)
        status.display_error(e)
        raise typer.Exit(e.exit_code) from e


def first_positional(values: Optional[list[str]]) -> Optional[str]:
    """First positional argument, if any were given."""
    return values[0] if values else None


class ApiCommand:
    """
    Common plumbing for commands that POST to one endpoint.
    """

    endpoint: ClassVar[Endpoint]

    def __init__(
        self,
        container: Container,
        responses: Optional[ResponseFormatter] = None,
        status: Optional[StatusFormatter] = None,
    ):
        """
        Initialize the command.

        Args:
            container: Application dependency container
            responses: Formatter for response bodies (stdout)
            status: Formatter for notices and errors (stderr)
        """
        self.container = container
        self.responses = responses or ResponseFormatter()
        self.status = status or StatusFormatter()

    @staticmethod
    def require(missing: list[str]) -> None:
        """Raise once for every missing parameter collected."""
        if missing:
            raise MissingParametersError(missing)

    @staticmethod
    def check_token(settings: Settings, missing: list[str]) -> None:
        if not settings.token:
            missing.append(parameter_hint("token"))

    @staticmethod
    def resolve_device_sn(
        settings: Settings, flag: Optional[str], positional: Optional[str]
    ) -> Optional[str]:
        """Serial from the command's --device-sn, then the positional, then settings."""
        return first_non_empty(flag, positional, settings.device_sn)

    @staticmethod
    def resolve_station_id(
        settings: Settings, flag: Optional[str], positional: Optional[str]
    ) -> Optional[str]:
        """Station id from the command's --station-id, then the positional, then settings."""
        return first_non_empty(flag, positional, settings.station_id)

    def send(
        self,
        settings: Settings,
        body: Mapping[str, Any],
        params: Optional[Mapping[str, Any]] = None,
    ) -> ApiResponse:
        """
        POST the body to this command's endpoint and print the response.

        Non-2xx responses are printed like any other; only transport
        failures raise.
        """
        client = self.container.api_client(settings)
        try:
            self.status.display_request(self.endpoint.method, client.url_for(self.endpoint, params))
            response = client.post(
                self.endpoint,
                body,
                token=settings.token if self.endpoint.requires_token else None,
                params=params,
            )
        finally:
            client.close()

        self.responses.display_response(response)
        return response
