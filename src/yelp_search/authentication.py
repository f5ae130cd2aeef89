"""
Access token handling.

Yelp Fusion authenticates with a private API key sent as a bearer token.
Create one at https://www.yelp.com/developers/v3/manage_app and either pass it
explicitly to the search functions or store it in ``YELP_ACCESS_TOKEN``.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from .config import ACCESS_TOKEN_ENV
from .exceptions import MissingCredentialError

logger = logging.getLogger(__name__)


def get_access_token(access_token: Optional[str] = None) -> str:
    """
    Return the token to authenticate with.

    An explicit ``access_token`` wins; otherwise ``YELP_ACCESS_TOKEN`` is read
    now (not at import), so later changes to the environment are honoured.
    """
    if access_token is None:
        access_token = os.getenv(ACCESS_TOKEN_ENV)

    if not isinstance(access_token, str) or not access_token.strip():
        raise MissingCredentialError(
            f"No Yelp API access token was found. Pass access_token or set {ACCESS_TOKEN_ENV}."
        )
    return access_token


def store_access_token(access_token: str) -> None:
    """Store ``access_token`` in ``YELP_ACCESS_TOKEN`` for this process."""
    if not isinstance(access_token, str) or not access_token.strip():
        raise MissingCredentialError("You need to provide a non-empty access token.")

    os.environ[ACCESS_TOKEN_ENV] = access_token
    logger.info("Stored Yelp access token in %s.", ACCESS_TOKEN_ENV)
