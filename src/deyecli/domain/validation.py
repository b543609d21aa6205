"""
Input validation rules.

Checks that run before any request is sent: identifier formats and
battery parameter ranges.
"""

import re
from typing import Optional

from .config.models.enums import BatteryParameterType
from .errors import InvalidParameterError

_UNSIGNED_INTEGER = re.compile(r"^[0-9]+$")


def first_non_empty(*candidates: Optional[str]) -> Optional[str]:
    """Return the first candidate that is neither None nor empty."""
    for candidate in candidates:
        if candidate:
            return candidate
    return None


def parse_parameter_type(raw: str) -> BatteryParameterType:
    """Parse a --param-type value into a BatteryParameterType."""
    try:
        return BatteryParameterType(raw)
    except ValueError:
        valid = " ".join(BatteryParameterType.names())
        raise InvalidParameterError(
            f"Invalid --param-type '{raw}'. Valid values: {valid}"
        ) from None


def validate_battery_value(parameter: BatteryParameterType, raw: str) -> int:
    """
    Validate a battery parameter value.

    The value must be an unsigned decimal integer no greater than the
    parameter's maximum. Out-of-range values are rejected, never clamped.

    Returns:
        The value as an int
    """
    if not _UNSIGNED_INTEGER.match(raw):
        raise InvalidParameterError(
            f"Parameter value must be a positive integer, got: '{raw}'"
        )
    value = int(raw)
    if value > parameter.max_value:
        raise InvalidParameterError(
            f"{parameter.value} must be <= {parameter.max_value} ({parameter.unit}), got: {value}"
        )
    return value


def parse_numeric_id(name: str, raw: str) -> int:
    """Parse a numeric identifier (station id, company id)."""
    if not _UNSIGNED_INTEGER.match(raw):
        raise InvalidParameterError(f"{name} must be numeric, got: '{raw}'")
    return int(raw)
