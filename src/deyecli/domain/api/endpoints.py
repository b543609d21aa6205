"""
Deye Cloud API endpoint catalogue.

Every operation the CLI performs is a POST to one of these paths.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Endpoint:
    """A fixed API operation."""

    name: str
    path: str
    requires_token: bool = True
    method: str = "POST"


ACCOUNT_TOKEN = Endpoint("token", "/v1.0/account/token", requires_token=False)
CONFIG_BATTERY = Endpoint("config-battery", "/v1.0/config/battery")
CONFIG_SYSTEM = Endpoint("config-system", "/v1.0/config/system")
BATTERY_PARAMETER_UPDATE = Endpoint(
    "battery-parameter-update", "/v1.0/order/battery/parameter/update"
)
STATION_LIST = Endpoint("station-list", "/v1.0/station/list")
STATION_LATEST = Endpoint("station-latest", "/v1.0/station/latest")
DEVICE_LATEST = Endpoint("device-latest", "/v1.0/device/latest")
