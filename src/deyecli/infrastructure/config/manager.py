"""
Settings resolution.

Merges the three configuration sources into one immutable Settings
value. Precedence, key by key: CLI flag > environment variable > config
file > built-in default. Empty values count as unset in every source.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from deyecli.domain.config import SETTING_FIELDS, Settings, env_var_name, parameter_hint
from deyecli.domain.errors import InvalidParameterError

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "DEYE_CONFIG"
APP_DIR_NAME = "deyecli"

_SECRET_FIELDS = {"password", "app_secret", "token"}


def default_config_path(environ: Mapping[str, str]) -> Path:
    """
    Locate the config file.

    DEYE_CONFIG wins; otherwise $XDG_CONFIG_HOME/deyecli/config, with
    XDG_CONFIG_HOME defaulting to ~/.config.
    """
    explicit = environ.get(CONFIG_PATH_ENV)
    if explicit:
        return Path(explicit).expanduser()

    config_home = environ.get("XDG_CONFIG_HOME")
    if not config_home:
        home = environ.get("HOME")
        config_home = str(Path(home) / ".config") if home else str(Path.home() / ".config")
    return Path(config_home) / APP_DIR_NAME / "config"


def _is_set(value: Any) -> bool:
    return value is not None and value != ""


class SettingsResolver:
    """
    Resolves effective settings from file, environment and flag sources.
    """

    @staticmethod
    def merge_flags(*layers: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Overlay flag layers left to right; later non-empty values win.

        Used to combine flags given before the subcommand with flags given
        after it. Reapplying a layer leaves the result unchanged.
        """
        merged: Dict[str, Any] = {}
        for layer in layers:
            for name, value in (layer or {}).items():
                if _is_set(value):
                    merged[name] = value
        return merged

    def resolve(
        self,
        file_values: Mapping[str, str],
        environ: Mapping[str, str],
        flags: Optional[Mapping[str, Any]] = None,
    ) -> Settings:
        """
        Build the effective Settings.

        Args:
            file_values: Entries read from the config file (DEYE_* keys)
            environ: Process environment (DEYE_* variables)
            flags: CLI flag values keyed by settings field name

        Returns:
            Immutable Settings

        Raises:
            InvalidParameterError: If a resolved value fails validation
        """
        flags = flags or {}
        values: Dict[str, Any] = {}
        sources: Dict[str, str] = {}

        for field in SETTING_FIELDS:
            key = env_var_name(field)
            for source, candidate in (
                ("flag", flags.get(field)),
                ("environment", environ.get(key)),
                ("config file", file_values.get(key)),
            ):
                if _is_set(candidate):
                    values[field] = candidate
                    sources[field] = source
                    break

        logger.debug(
            "Resolved settings sources: %s",
            ", ".join(f"{name}={src}" for name, src in sorted(sources.items())) or "defaults only",
        )

        try:
            return Settings(**values)
        except ValidationError as e:
            raise InvalidParameterError(self._describe(e, sources)) from e

    @staticmethod
    def _describe(error: ValidationError, sources: Mapping[str, str]) -> str:
        problems = []
        for item in error.errors():
            field = str(item["loc"][0]) if item.get("loc") else "settings"
            origin = sources.get(field, "default")
            detail = f"{parameter_hint(field)} ({origin}): {item['msg']}"
            if field not in _SECRET_FIELDS and "input" in item:
                detail += f", got: {item['input']!r}"
            problems.append(detail)
        return "Invalid setting(s): " + "; ".join(problems)
