from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests


logger = logging.getLogger(__name__)


class APIClientError(RuntimeError):
    """Base error for API client failures."""


class APIClientTimeout(APIClientError):
    """Raised when request times out."""


class HttpError(APIClientError):
    """Raised for non-2xx HTTP responses. Carries the status code and body."""

    def __init__(self, status_code: int, url: str, body: str = "") -> None:
        self.status_code = status_code
        self.url = url
        self.body = body
        super().__init__(f"HTTP {status_code} returned from {url}")


class BaseAPIClient:
    """
    Small HTTP client for JSON APIs.

    Features:
    - Persistent session (any object with a requests-style ``get`` works)
    - Default headers
    - Configurable timeout
    - Safe JSON parsing

    Requests are sent once; there is no retry or backoff.
    """

    DEFAULT_TIMEOUT = 15  # seconds

    def __init__(
        self,
        base_url: str,
        default_headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout or self.DEFAULT_TIMEOUT

        self.session = session if session is not None else requests.Session()

        headers = {
            "User-Agent": "yelp-search/0.1",
            "Accept": "application/json",
        }

        if default_headers:
            headers.update(default_headers)

        self.session.headers.update(headers)

    # ---------------------------------------------------
    # Core request method
    # ---------------------------------------------------
    def get_json(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Send GET request and return parsed JSON.
        Raises clean, structured errors.
        """

        url = f"{self.base_url}/{endpoint.lstrip('/')}"

        try:
            response = self.session.get(
                url,
                params=params,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            raise APIClientTimeout(
                f"Request timed out calling {url}"
            ) from e
        except requests.RequestException as e:
            raise APIClientError(
                f"Request failed calling {url}"
            ) from e

        if not 200 <= response.status_code < 300:
            logger.error("GET %s failed with HTTP %s", url, response.status_code)
            raise HttpError(response.status_code, url, body=response.text)

        try:
            return response.json()
        except ValueError as e:
            raise APIClientError(
                f"Invalid JSON returned from {url}"
            ) from e
