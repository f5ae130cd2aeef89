from __future__ import annotations

import os
from dataclasses import dataclass

from .exceptions import ConfigError

ACCESS_TOKEN_ENV = "YELP_ACCESS_TOKEN"
BASE_URL_ENV = "YELP_API_BASE_URL"
TIMEOUT_ENV = "YELP_TIMEOUT_SEC"

DEFAULT_BASE_URL = "https://api.yelp.com/v3"
DEFAULT_TIMEOUT_SEC = 15.0


@dataclass(frozen=True)
class YelpSettings:
    """
    Client settings resolved from the environment.

    Environment variables (all optional):

        YELP_API_BASE_URL  - Override the API root (default: https://api.yelp.com/v3)
        YELP_TIMEOUT_SEC   - Request timeout in seconds (default: 15)

    The access token is not part of the settings; it is looked up per call
    (see ``authentication.get_access_token``).
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT_SEC

    @classmethod
    def from_env(cls) -> "YelpSettings":
        base_url = os.getenv(BASE_URL_ENV, "").strip() or DEFAULT_BASE_URL

        timeout_raw = os.getenv(TIMEOUT_ENV, str(DEFAULT_TIMEOUT_SEC)).strip()
        try:
            timeout = float(timeout_raw)
        except ValueError as e:
            raise ConfigError(
                f"{TIMEOUT_ENV} must be a number, got '{timeout_raw}'."
            ) from e
        if timeout <= 0:
            raise ConfigError(f"{TIMEOUT_ENV} must be positive, got '{timeout_raw}'.")

        return cls(base_url=base_url, timeout=timeout)
