"""
Deye Cloud HTTP transport.

Issues the JSON POST requests behind every command. One request per
call, no retries. Response bodies are returned unparsed.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional
from urllib.parse import urlencode

import requests

from deyecli.domain.api import ApiResponse, Endpoint
from deyecli.domain.config import DEFAULT_TIMEOUT, normalize_token
from deyecli.domain.errors import TransportError

logger = logging.getLogger(__name__)

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class DeyeCloudClient:
    """Synchronous client for the Deye Cloud developer API."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def url_for(self, endpoint: Endpoint, params: Optional[Mapping[str, Any]] = None) -> str:
        """Full request URL, including any query string."""
        url = f"{self.base_url}{endpoint.path}"
        if params:
            url = f"{url}?{urlencode(params)}"
        return url

    @staticmethod
    def build_headers(token: Optional[str] = None) -> dict[str, str]:
        """JSON headers, plus a bearer Authorization header when a token is given."""
        headers = dict(JSON_HEADERS)
        token = normalize_token(token)
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def post(
        self,
        endpoint: Endpoint,
        body: Mapping[str, Any],
        token: Optional[str] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> ApiResponse:
        """
        POST a JSON body to an endpoint.

        Args:
            endpoint: Operation to call
            body: JSON-serializable request body
            token: Bearer token; a "Bearer " prefix is tolerated
            params: Query string parameters

        Returns:
            The raw response, whatever its HTTP status

        Raises:
            TransportError: If no response was received
        """
        url = self.url_for(endpoint, params)
        logger.debug(
            "%s: POST %s (body keys: %s)", endpoint.name, url, ", ".join(sorted(body)) or "none"
        )

        try:
            response = self._session.post(
                url,
                json=dict(body),
                headers=self.build_headers(token),
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.debug("POST %s timed out after %ss", url, self.timeout)
            raise TransportError(f"Request to {url} timed out after {self.timeout:g}s: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.debug("POST %s failed: %s", url, e)
            raise TransportError(f"Request to {url} failed: {e}") from e

        result = ApiResponse(status_code=response.status_code, text=response.text, url=url)
        if result.ok:
            logger.debug("%s returned HTTP %d", endpoint.path, result.status_code)
        else:
            logger.warning("%s returned HTTP %d", endpoint.path, result.status_code)

        return result

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> DeyeCloudClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
