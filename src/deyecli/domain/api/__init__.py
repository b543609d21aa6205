"""
API domain package: endpoint catalogue and response models.
"""

from .endpoints import (
    ACCOUNT_TOKEN,
    BATTERY_PARAMETER_UPDATE,
    CONFIG_BATTERY,
    CONFIG_SYSTEM,
    DEVICE_LATEST,
    STATION_LATEST,
    STATION_LIST,
    Endpoint,
)
from .models import ApiResponse, TokenResponse

__all__ = [
    "ACCOUNT_TOKEN",
    "ApiResponse",
    "BATTERY_PARAMETER_UPDATE",
    "CONFIG_BATTERY",
    "CONFIG_SYSTEM",
    "DEVICE_LATEST",
    "Endpoint",
    "STATION_LATEST",
    "STATION_LIST",
    "TokenResponse",
]
