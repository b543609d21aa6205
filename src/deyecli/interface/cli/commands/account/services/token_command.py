"""
Token command - obtain an access token and persist it.

Logs in with the application credentials plus one account identifier,
prints the response and saves the returned access token to the config
file as DEYE_TOKEN.
"""

import hashlib
import logging
from typing import Any, Optional

from deyecli.domain.api import ACCOUNT_TOKEN, ApiResponse, TokenResponse
from deyecli.domain.config import LoginIdentifier, Settings, env_var_name, normalize_token, parameter_hint
from deyecli.domain.errors import ConfigFileError
from deyecli.domain.validation import parse_numeric_id
from ...base import ApiCommand

logger = logging.getLogger(__name__)

TOKEN_KEY = env_var_name("token")


def hash_password(plaintext: str) -> str:
    """Lowercase hex SHA-256 of the UTF-8 password."""
    return hashlib.sha256(plaintext.encode("utf-8")).hexdigest()


class TokenCommand(ApiCommand):
    """
    Account token command.

    The plaintext password never leaves the process; only its hash is sent.
    """

    endpoint = ACCOUNT_TOKEN

    def execute(self, settings: Settings) -> ApiResponse:
        """
        Request a token and save it on success.

        Raises:
            MissingParametersError: If any credential is missing
            InvalidParameterError: If the company id is not numeric
        """
        missing = []
        if not settings.app_id:
            missing.append(parameter_hint("app_id"))
        if not settings.app_secret or not settings.get_app_secret():
            missing.append(parameter_hint("app_secret"))
        if not settings.password or not settings.get_password():
            missing.append(parameter_hint("password"))
        if settings.login_identifier is None:
            missing.append("login identifier: one of DEYE_USERNAME / DEYE_EMAIL / DEYE_MOBILE")
        if settings.mobile and not settings.country_code:
            missing.append(f"{parameter_hint('country_code')} (required with mobile)")
        self.require(missing)

        body = self.build_body(settings)
        response = self.send(settings, body, params={"appId": settings.app_id})
        self._save_token(response)
        return response

    @staticmethod
    def build_body(settings: Settings) -> dict[str, Any]:
        """Request body with exactly one identifier, the hashed password and the optional company id."""
        body: dict[str, Any] = {
            "appSecret": settings.get_app_secret(),
            "password": hash_password(settings.get_password() or ""),
        }

        kind, value = settings.login_identifier
        body[kind.value] = value
        if kind is LoginIdentifier.MOBILE:
            body["countryCode"] = settings.country_code

        if settings.company_id:
            body["companyId"] = parse_numeric_id(parameter_hint("company_id"), settings.company_id)

        logger.debug("Token request uses %s login", kind.value)
        return body

    def _save_token(self, response: ApiResponse) -> Optional[str]:
        token_response = TokenResponse.from_response(response)
        if token_response is None or token_response.success is not True:
            logger.info("Token request did not succeed, %s not updated", TOKEN_KEY)
            return None

        token = normalize_token(token_response.access_token)
        if not token:
            self.status.display_warning(
                f"Response reported success but carried no accessToken; {TOKEN_KEY} not updated"
            )
            return None

        try:
            self.container.config_repository.set(TOKEN_KEY, token)
        except ValueError as e:
            raise ConfigFileError(f"Cannot store access token: {e}") from e

        self.status.display_token_saved(TOKEN_KEY, self.container.config_path)
        return token
