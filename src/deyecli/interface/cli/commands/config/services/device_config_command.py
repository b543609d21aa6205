"""
Device config commands - read battery and system configuration.

Both endpoints take the same single-serial body and differ only in path.
"""

from typing import Optional

from deyecli.domain.api import CONFIG_BATTERY, CONFIG_SYSTEM, ApiResponse
from deyecli.domain.config import Settings
from ...base import DEVICE_SN_HINT, ApiCommand


class DeviceConfigCommand(ApiCommand):
    """Read one configuration block of a device."""

    def execute(
        self,
        settings: Settings,
        device_sn: Optional[str] = None,
        positional: Optional[str] = None,
    ) -> ApiResponse:
        """
        Fetch the configuration of a device.

        Args:
            settings: Effective settings
            device_sn: --device-sn given to the command
            positional: First positional argument
        """
        serial = self.resolve_device_sn(settings, device_sn, positional)

        missing = []
        self.check_token(settings, missing)
        if not serial:
            missing.append(DEVICE_SN_HINT)
        self.require(missing)

        return self.send(settings, {"deviceSn": serial})


class BatteryConfigCommand(DeviceConfigCommand):
    """Battery config: charge/discharge limits and related parameters."""

    endpoint = CONFIG_BATTERY


class SystemConfigCommand(DeviceConfigCommand):
    """System config: work mode parameters."""

    endpoint = CONFIG_SYSTEM
