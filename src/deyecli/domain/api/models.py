"""
API response models.

Responses are passed through to the user untouched; only the token
response is decoded, and only for its success flag and access token.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


@dataclass
class ApiResponse:
    """Raw HTTP response as received from the API."""

    status_code: int
    text: str
    url: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Optional[Any]:
        """Decode the body as JSON, or None if it is not JSON."""
        try:
            return json.loads(self.text)
        except ValueError:
            return None


class TokenResponse(BaseModel):
    """Fields of the /account/token response the CLI acts on."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    success: Optional[bool] = None
    code: Optional[Union[str, int]] = None
    msg: Optional[str] = None
    access_token: Optional[str] = Field(default=None, alias="accessToken")
    token_type: Optional[str] = Field(default=None, alias="tokenType")
    expires_in: Optional[Union[str, int]] = Field(default=None, alias="expiresIn")

    @classmethod
    def from_response(cls, response: ApiResponse) -> Optional["TokenResponse"]:
        """
        Decode a token response.

        Returns:
            The decoded response, or None when the body is not a JSON object
            with the expected field types.
        """
        data = response.json()
        if not isinstance(data, dict):
            logger.debug("Token response is not a JSON object")
            return None
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            logger.warning("Unexpected token response shape: %s", e)
            return None
