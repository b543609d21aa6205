"""
Configuration domain package.

This package contains the domain layer for configuration management.
"""

from .models import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    ENV_PREFIX,
    SETTING_FIELDS,
    BatteryParameterType,
    LoginIdentifier,
    Settings,
    env_var_name,
    flag_name,
    normalize_token,
    parameter_hint,
)

__all__ = [
    "BatteryParameterType",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "ENV_PREFIX",
    "LoginIdentifier",
    "SETTING_FIELDS",
    "Settings",
    "env_var_name",
    "flag_name",
    "normalize_token",
    "parameter_hint",
]
