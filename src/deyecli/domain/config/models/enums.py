"""
Domain enums for configuration system.

This module defines all enumeration types used in the configuration domain.
"""

from enum import Enum


class BatteryParameterType(Enum):
    """Tunable battery parameters accepted by the parameter update order."""

    MAX_CHARGE_CURRENT = "MAX_CHARGE_CURRENT"
    MAX_DISCHARGE_CURRENT = "MAX_DISCHARGE_CURRENT"
    GRID_CHARGE_AMPERE = "GRID_CHARGE_AMPERE"
    BATT_LOW = "BATT_LOW"

    @property
    def max_value(self) -> int:
        """Inclusive upper bound for the parameter value."""
        return _MAX_VALUES[self]

    @property
    def unit(self) -> str:
        """Unit the value is expressed in."""
        return "%" if self is BatteryParameterType.BATT_LOW else "A"

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]


_MAX_VALUES = {
    BatteryParameterType.MAX_CHARGE_CURRENT: 200,
    BatteryParameterType.MAX_DISCHARGE_CURRENT: 200,
    BatteryParameterType.GRID_CHARGE_AMPERE: 100,
    BatteryParameterType.BATT_LOW: 100,
}


class LoginIdentifier(Enum):
    """Account identifier kinds accepted by the token endpoint."""

    USERNAME = "username"
    EMAIL = "email"
    MOBILE = "mobile"
