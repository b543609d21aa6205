"""
Config infrastructure: the KEY=VALUE config file and settings resolution.
"""

from .manager import CONFIG_PATH_ENV, SettingsResolver, default_config_path
from .repository import ConfigRepository, decode_value

__all__ = [
    "CONFIG_PATH_ENV",
    "ConfigRepository",
    "SettingsResolver",
    "decode_value",
    "default_config_path",
]
