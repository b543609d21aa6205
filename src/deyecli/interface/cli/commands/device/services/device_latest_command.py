"""
Device latest command - raw measure-point data of one device.
"""

from typing import Optional

from deyecli.domain.api import DEVICE_LATEST, ApiResponse
from deyecli.domain.config import Settings
from ...base import DEVICE_SN_HINT, ApiCommand


class DeviceLatestCommand(ApiCommand):
    """Fetch the latest data of a single device."""

    endpoint = DEVICE_LATEST

    def execute(
        self,
        settings: Settings,
        device_sn: Optional[str] = None,
        positional: Optional[str] = None,
    ) -> ApiResponse:
        serial = self.resolve_device_sn(settings, device_sn, positional)

        missing = []
        self.check_token(settings, missing)
        if not serial:
            missing.append(DEVICE_SN_HINT)
        self.require(missing)

        # The endpoint accepts a list; the CLI always queries one device.
        return self.send(settings, {"deviceList": [serial]})
