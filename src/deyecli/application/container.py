"""
Dependency injection container for the application.

This module provides a centralized way to create and manage application dependencies.
One container is built per CLI invocation from the process environment
and the flags given before the subcommand.
"""

import logging
import os
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from ..domain.config import Settings
from ..infrastructure.config.manager import SettingsResolver, default_config_path
from ..infrastructure.config.repository import ConfigRepository
from ..infrastructure.http.client import DeyeCloudClient

logger = logging.getLogger(__name__)

ClientFactory = Callable[..., DeyeCloudClient]


class Container:
    """
    Dependency injection container.

    Owns the config file repository, the settings resolver and the HTTP
    client factory.
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
        global_flags: Optional[Mapping[str, Any]] = None,
        client_factory: Optional[ClientFactory] = None,
    ):
        """
        Initialize the container.

        Args:
            config_path: Config file location (defaults to DEYE_CONFIG or the XDG path)
            environ: Environment mapping (defaults to os.environ, copied)
            global_flags: Settings flags given before the subcommand
            client_factory: Callable building the HTTP client (for tests)
        """
        self.environ = dict(os.environ if environ is None else environ)
        self.config_path = Path(config_path) if config_path else default_config_path(self.environ)
        self.global_flags = dict(global_flags or {})
        self.resolver = SettingsResolver()
        self._client_factory = client_factory or DeyeCloudClient
        self._config_repository: Optional[ConfigRepository] = None
        self._file_values: Optional[dict[str, str]] = None

    @property
    def config_repository(self) -> ConfigRepository:
        """Get the config file repository."""
        if self._config_repository is None:
            self._config_repository = ConfigRepository(self.config_path)
        return self._config_repository

    @property
    def file_values(self) -> dict[str, str]:
        """Entries of the config file, read once."""
        if self._file_values is None:
            self._file_values = self.config_repository.read()
        return self._file_values

    def merged_flags(self, flags: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        """Flags given before the subcommand, overridden by those given after it."""
        return self.resolver.merge_flags(self.global_flags, flags)

    def settings(self, flags: Optional[Mapping[str, Any]] = None) -> Settings:
        """
        Resolve effective settings.

        Args:
            flags: Settings flags given after the subcommand; they override
                   flags given before it

        Returns:
            Immutable Settings
        """
        return self.resolver.resolve(self.file_values, self.environ, self.merged_flags(flags))

    def api_client(self, settings: Settings) -> DeyeCloudClient:
        """Create an HTTP client bound to the settings' base URL and timeout."""
        return self._client_factory(settings.base_url, timeout=settings.timeout)
