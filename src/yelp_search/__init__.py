"""
yelp_search - Yelp Fusion business search client

Builds validated business search requests, sends them with a bearer token,
and flattens the nested JSON response into a table.

Usage:
------
    from yelp_search import business_search

    delis = business_search("deli", "Queens, New York")

    # Or with explicit criteria and a reusable client
    from yelp_search import SearchCriteria, YelpClient

    client = YelpClient()
    criteria = SearchCriteria(
        term="coffee",
        latitude=40.7128,
        longitude=-74.0060,
        categories=["coffee", "cafes"],
        access_token="...",
    )
    records = client.search_records(criteria)

Configuration:
--------------
Set these environment variables:

    YELP_ACCESS_TOKEN   - API key used when no access_token is passed
    YELP_API_BASE_URL   - Override the API root (default: https://api.yelp.com/v3)
    YELP_TIMEOUT_SEC    - Request timeout (default: 15)
"""

# -----------------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------------
from .exceptions import (
    YelpSearchError,
    ValidationError,
    MissingCredentialError,
    RangeError,
    InvalidEnumError,
    InvalidTypeError,
    ConfigError,
    MalformedResponseError,
)
from .client_base import (
    BaseAPIClient,
    APIClientError,
    APIClientTimeout,
    HttpError,
)

# -----------------------------------------------------------------------------
# Catalogs
# -----------------------------------------------------------------------------
from .catalogs import (
    CATALOG_VERSION,
    SUPPORTED_LOCALES,
    SUPPORTED_CATEGORY_ALIASES,
    SUPPORTED_BUSINESS_ATTRIBUTES,
)

# -----------------------------------------------------------------------------
# Credentials and settings
# -----------------------------------------------------------------------------
from .authentication import get_access_token, store_access_token
from .config import YelpSettings

# -----------------------------------------------------------------------------
# Request building, response mapping, search
# -----------------------------------------------------------------------------
from .params import SearchCriteria, build_query_params
from .schema import BusinessRecord
from .mapper import map_businesses, map_search_response, records_to_frame
from .search import YelpClient, business_search


__all__ = [
    # Errors
    "YelpSearchError",
    "ValidationError",
    "MissingCredentialError",
    "RangeError",
    "InvalidEnumError",
    "InvalidTypeError",
    "ConfigError",
    "MalformedResponseError",
    "BaseAPIClient",
    "APIClientError",
    "APIClientTimeout",
    "HttpError",
    # Catalogs
    "CATALOG_VERSION",
    "SUPPORTED_LOCALES",
    "SUPPORTED_CATEGORY_ALIASES",
    "SUPPORTED_BUSINESS_ATTRIBUTES",
    # Credentials and settings
    "get_access_token",
    "store_access_token",
    "YelpSettings",
    # Request / response
    "SearchCriteria",
    "build_query_params",
    "BusinessRecord",
    "map_businesses",
    "map_search_response",
    "records_to_frame",
    # Search
    "YelpClient",
    "business_search",
]
