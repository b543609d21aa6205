"""
Station commands - list stations and fetch a station's latest data.
"""

from typing import Optional

from deyecli.domain.api import STATION_LATEST, STATION_LIST, ApiResponse
from deyecli.domain.config import Settings
from deyecli.domain.validation import parse_numeric_id
from ...base import STATION_ID_HINT, ApiCommand


class StationListCommand(ApiCommand):
    """List every station under the account."""

    endpoint = STATION_LIST

    def execute(self, settings: Settings) -> ApiResponse:
        missing = []
        self.check_token(settings, missing)
        self.require(missing)

        return self.send(settings, {})


class StationLatestCommand(ApiCommand):
    """
    Latest real-time data of one station.

    The station id is sent as a JSON number, so it must be numeric.
    """

    endpoint = STATION_LATEST

    def execute(
        self,
        settings: Settings,
        station_id: Optional[str] = None,
        positional: Optional[str] = None,
    ) -> ApiResponse:
        """
        Fetch latest station data.

        Args:
            settings: Effective settings
            station_id: --station-id given to the command
            positional: First positional argument
        """
        raw_id = self.resolve_station_id(settings, station_id, positional)

        missing = []
        self.check_token(settings, missing)
        if not raw_id:
            missing.append(STATION_ID_HINT)
        self.require(missing)

        return self.send(settings, {"stationId": parse_numeric_id("Station id", raw_id)})
