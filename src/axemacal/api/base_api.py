"""
Base API client for booking calendar application.
"""

import json
import time
from typing import Any

import requests

from axemacal.exceptions import APIConnectionError
from axemacal.exceptions import APIResponseError
from axemacal.exceptions import APITimeoutError
from axemacal.exceptions import APIValidationError
from axemacal.utils.logging_utils import LoggerMixin


class BaseAPI(LoggerMixin):
    """Base class for API clients.

    Owns one ``requests.Session``; its cookie jar keeps the server session
    between calls. Every request is a single attempt, there is no retry
    adapter mounted.
    """

    # Default timeouts (connection timeout, read timeout)
    DEFAULT_TIMEOUT = (7, 20)

    JSON_CONTENT_TYPE = 'application/json; charset=UTF-8'

    def __init__(self, base_url: str, timeout: tuple[int, int] | None = None):
        """Initialize API client.

        Args:
            base_url: Base URL of the service, endpoints are appended verbatim
            timeout: Optional (connection, read) timeout override
        """
        super().__init__()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout or self.DEFAULT_TIMEOUT
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """Create the HTTP session holding the cookie jar."""
        return requests.Session()

    def _validate_response(self, endpoint: str, response: requests.Response) -> None:
        """
        Validate response status.

        Raises:
            APIResponseError: If status is not 200, with the raw body
        """
        if response.status_code != requests.codes.ok:
            body = response.content.decode('utf-8', errors='replace')
            raise APIResponseError(endpoint, body, response.status_code)

    def _post(self, endpoint: str, payload: dict[str, Any] | None = None) -> bytes:
        """
        POST to an endpoint and return the raw response body.

        Args:
            endpoint: Path appended to the base URL
            payload: Optional JSON body, no body is sent when omitted

        Returns:
            Response body bytes

        Raises:
            APITimeoutError: If request times out
            APIConnectionError: If the transport fails
            APIResponseError: If the status is not 200
        """
        start_time = time.time()
        url = self.base_url + endpoint

        headers = {}
        data = None
        if payload is not None:
            headers['Content-Type'] = self.JSON_CONTENT_TYPE
            data = json.dumps(payload).encode('utf-8')

        try:
            response = self.session.post(url, data=data, headers=headers, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            elapsed = time.time() - start_time
            self.logger.debug(f"BaseAPI: {endpoint} timed out after {elapsed:.2f} seconds")
            raise APITimeoutError(str(e), endpoint) from e
        except requests.exceptions.RequestException as e:
            elapsed = time.time() - start_time
            self.logger.debug(f"BaseAPI: {endpoint} failed after {elapsed:.2f} seconds")
            raise APIConnectionError(str(e), endpoint) from e

        self.logger.debug(
            f"BaseAPI: POST {endpoint} -> {response.status_code} in {time.time() - start_time:.2f}s"
        )
        self._validate_response(endpoint, response)
        return response.content

    @staticmethod
    def _decode_json(endpoint: str, body: bytes) -> Any:
        """Decode a JSON body.

        Raises:
            APIValidationError: If the body is not valid JSON
        """
        try:
            return json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            text = body[:100].decode('utf-8', errors='replace')
            raise APIValidationError(f"{endpoint}: failed to parse response: {e!s}: {text}", endpoint) from e
