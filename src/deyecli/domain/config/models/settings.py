"""
Settings domain model.

The effective configuration for one CLI invocation, produced by the
settings resolver from the config file, the environment and CLI flags.
"""

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from .enums import LoginIdentifier

DEFAULT_BASE_URL = "https://eu1-developer.deyecloud.com"
DEFAULT_TIMEOUT = 30.0
ENV_PREFIX = "DEYE_"

_BEARER_PREFIX = re.compile(r"^(?:bearer )+", re.IGNORECASE)


def normalize_token(token: Optional[str]) -> Optional[str]:
    """Strip any leading, case-insensitive "Bearer " prefix from a token."""
    if token is None:
        return None
    return _BEARER_PREFIX.sub("", token)


def env_var_name(field_name: str) -> str:
    """Environment variable (and config file key) for a settings field."""
    return f"{ENV_PREFIX}{field_name.upper()}"


def flag_name(field_name: str) -> str:
    """Command-line flag for a settings field."""
    return "--" + field_name.replace("_", "-")


def parameter_hint(field_name: str) -> str:
    """Human hint naming every way to supply a setting, e.g. 'DEYE_TOKEN / --token'."""
    return f"{env_var_name(field_name)} / {flag_name(field_name)}"


class Settings(BaseModel):
    """
    Immutable effective settings.

    Secrets are held as SecretStr so they never leak into reprs or logs.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(default=DEFAULT_BASE_URL, description="API base URL")
    app_id: Optional[str] = Field(default=None, description="Application ID")
    app_secret: Optional[SecretStr] = Field(default=None, description="Application secret")
    username: Optional[str] = Field(default=None, description="Login username")
    email: Optional[str] = Field(default=None, description="Login e-mail")
    mobile: Optional[str] = Field(default=None, description="Login mobile number")
    country_code: Optional[str] = Field(default=None, description="Country code for mobile login")
    password: Optional[SecretStr] = Field(default=None, description="Plaintext password")
    company_id: Optional[str] = Field(default=None, description="Company ID for business tokens")
    token: Optional[str] = Field(default=None, description="Access token")
    device_sn: Optional[str] = Field(default=None, description="Device serial number")
    station_id: Optional[str] = Field(default=None, description="Station ID")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        description="HTTP request timeout in seconds",
        gt=0,
        le=600,
    )

    @field_validator("token")
    @classmethod
    def strip_bearer_prefix(cls, v: Optional[str]) -> Optional[str]:
        """Store tokens without their Bearer prefix."""
        return normalize_token(v) or None

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Base URL must be non-empty; trailing slashes are dropped."""
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("Base URL cannot be empty")
        return v

    @property
    def login_identifier(self) -> Optional[tuple[LoginIdentifier, str]]:
        """The active login identifier: username, then e-mail, then mobile."""
        for kind in LoginIdentifier:
            value = getattr(self, kind.value)
            if value:
                return kind, value
        return None

    def get_password(self) -> Optional[str]:
        """Get the plain text password."""
        return self.password.get_secret_value() if self.password else None  # pylint: disable=no-member

    def get_app_secret(self) -> Optional[str]:
        """Get the plain text application secret."""
        return self.app_secret.get_secret_value() if self.app_secret else None  # pylint: disable=no-member


SETTING_FIELDS: tuple[str, ...] = tuple(Settings.model_fields)
