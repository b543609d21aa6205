"""
Configuration repository for loading and saving the config file.

This module provides the infrastructure layer for configuration persistence.
The file is a flat list of KEY=VALUE lines. It is decoded line by line
with an allow-listed key pattern and is never evaluated.
"""

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Dict

from deyecli.domain.errors import ConfigFileError

logger = logging.getLogger(__name__)

KEY_PATTERN = r"[A-Za-z_][A-Za-z0-9_]*"

_ENTRY = re.compile(rf"^\s*({KEY_PATTERN})\s*=(.*)$")
_BLANK_OR_COMMENT = re.compile(r"^\s*(#|$)")
_INLINE_COMMENT = re.compile(r"\s#.*$")
_VALID_KEY = re.compile(rf"^{KEY_PATTERN}$")


def decode_value(raw: str) -> str:
    """
    Decode the value part of a KEY=VALUE line.

    Strips a trailing inline comment (whitespace followed by '#'),
    surrounding whitespace, then one layer of matching double or single
    quotes.
    """
    value = _INLINE_COMMENT.sub("", raw).strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        value = value[1:-1]
    return value


class ConfigRepository:
    """
    Repository for config file operations.

    Reads KEY=VALUE entries and upserts single keys with an atomic
    write (temporary file in the same directory, then rename).
    """

    def __init__(self, path: Path):
        """
        Initialize the config repository.

        Args:
            path: Location of the config file
        """
        self.path = Path(path)

    def read(self) -> Dict[str, str]:
        """
        Load all entries from the config file.

        Unknown keys are returned as-is. A missing file yields an empty dict.
        When a key appears more than once the last line wins.
        """
        if not self.path.is_file():
            logger.debug("Config file %s not found, using no file settings", self.path)
            return {}

        entries: Dict[str, str] = {}
        for line in self._read_lines():
            line = line.rstrip("\r\n")
            if _BLANK_OR_COMMENT.match(line):
                continue
            match = _ENTRY.match(line)
            if not match:
                logger.debug("Skipping malformed config line: %r", line)
                continue
            entries[match.group(1)] = decode_value(match.group(2))

        logger.debug("Loaded %d entries from %s", len(entries), self.path)
        return entries

    def set(self, key: str, value: str) -> None:
        """
        Write or update a single KEY=VALUE entry.

        Every line carrying the key is rewritten; if none exists a new
        line is appended. All other lines are preserved verbatim.

        Raises:
            ValueError: If the key or value cannot be represented in the file
            ConfigFileError: If the file cannot be written
        """
        if not _VALID_KEY.match(key):
            raise ValueError(f"Invalid config key: {key!r}")
        if "\n" in value or "\r" in value:
            raise ValueError(f"Config value for {key} cannot contain line breaks")

        existing = re.compile(rf"^\s*{re.escape(key)}\s*=")
        new_line = f"{key}={value}\n"

        lines = self._read_lines()
        replaced = False
        for i, line in enumerate(lines):
            if existing.match(line):
                lines[i] = new_line
                replaced = True

        if not replaced:
            if lines and not lines[-1].endswith("\n"):
                lines[-1] += "\n"
            lines.append(new_line)

        self._atomic_write("".join(lines))
        logger.info("Saved %s to config file: %s", key, self.path)

    def _read_lines(self) -> list[str]:
        """
        Raw lines of the config file, line endings included.

        Raises:
            ConfigFileError: If the file exists but is unreadable or not UTF-8
        """
        if not self.path.is_file():
            return []
        try:
            with open(self.path, "r", encoding="utf-8", newline="") as f:
                return f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigFileError(f"Cannot read config file {self.path}: {e}") from e

    def _atomic_write(self, content: str) -> None:
        """Write content to a temporary sibling file and rename it into place."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
        except OSError as e:
            raise ConfigFileError(f"Cannot write config file {self.path}: {e}") from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise ConfigFileError(f"Cannot write config file {self.path}: {e}") from e
