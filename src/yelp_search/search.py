from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

import pandas as pd
import requests

from .authentication import get_access_token
from .catalogs import DEFAULT_LOCALE, PRICE_TIERS, SORT_ORDERS
from .client_base import BaseAPIClient
from .config import YelpSettings
from .mapper import map_search_response, records_to_frame
from .params import DEFAULT_RADIUS_M, SearchCriteria, Timestamp, build_query_params
from .schema import BusinessRecord


logger = logging.getLogger(__name__)

SEARCH_ENDPOINT = "/businesses/search"


def _encode_params(params: Dict[str, Any]) -> Dict[str, Any]:
    # requests would send True as "True"; the API expects lowercase.
    return {
        k: ("true" if v else "false") if isinstance(v, bool) else v
        for k, v in params.items()
    }


class YelpClient(BaseAPIClient):
    """
    Client for the Yelp Fusion business search endpoint.

    Base URL and timeout come from the environment (see ``YelpSettings``)
    unless given explicitly. The access token travels with each
    ``SearchCriteria`` rather than living on the client.
    """

    def __init__(
        self,
        settings: Optional[YelpSettings] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.settings = settings or YelpSettings.from_env()

        super().__init__(
            base_url=self.settings.base_url,
            timeout=self.settings.timeout,
            session=session,
        )
        logger.info("YelpClient initialized for %s.", self.base_url)

    # -------------------------------------------------
    # Public methods
    # -------------------------------------------------
    def search(self, criteria: SearchCriteria) -> Any:
        """
        Validate ``criteria`` and run the search, returning the raw JSON.

        Validation errors are raised before any request is made.
        """
        return self.search_params(build_query_params(criteria), criteria.access_token)

    def search_params(self, params: Dict[str, Any], access_token: str) -> Any:
        """Send already-normalized query params (see ``build_query_params``)."""
        return self.get_json(
            SEARCH_ENDPOINT,
            params=_encode_params(params),
            # Never log the token; just attach it to headers.
            headers={"Authorization": f"bearer {access_token}"},
        )

    def search_records(self, criteria: SearchCriteria) -> List[BusinessRecord]:
        return map_search_response(self.search(criteria))

    def search_frame(self, criteria: SearchCriteria) -> pd.DataFrame:
        return records_to_frame(self.search_records(criteria))


def business_search(
    term: Optional[str],
    location: Optional[Union[str, Sequence[str]]] = None,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
    radius_m: float = DEFAULT_RADIUS_M,
    categories: Optional[Iterable[str]] = None,
    locale: str = DEFAULT_LOCALE,
    limit: int = 20,
    offset: int = 0,
    sort_by: str = SORT_ORDERS[0],
    price: Optional[Iterable[int]] = tuple(sorted(PRICE_TIERS)),
    open_now: bool = False,
    open_at: Optional[Timestamp] = None,
    attributes: Optional[Iterable[str]] = None,
    access_token: Optional[str] = None,
    client: Optional[YelpClient] = None,
) -> pd.DataFrame:
    """
    Search for businesses near a location.

    Args:
        term: Search term, e.g. "deli".
        location: Address or place name; a list of parts is concatenated.
            If not given, ``latitude`` and ``longitude`` are required.
        latitude: Latitude to search around, in [-90, 90].
        longitude: Longitude to search around, in [-180, 180].
        radius_m: Search radius in metres (truncated to an integer).
        categories: Category aliases to filter on, see
            ``catalogs.SUPPORTED_CATEGORY_ALIASES``.
        locale: One of ``catalogs.SUPPORTED_LOCALES``.
        limit: Number of results to return, 0 to 50.
        offset: Number of results to skip; combine with ``limit`` to page.
        sort_by: One of best_match, rating, review_count, distance.
        price: Price tiers from 1 (cheap) to 4 (expensive).
        open_now: Only return businesses open now.
        open_at: Only return businesses open at this time. Overrides
            ``open_now``.
        attributes: Business attributes to filter on, see
            ``catalogs.SUPPORTED_BUSINESS_ATTRIBUTES``.
        access_token: API key. Defaults to ``YELP_ACCESS_TOKEN``, read at call
            time.
        client: Reuse an existing client instead of building one.

    Returns:
        A DataFrame with one row per business, in API order.

    Example:
        delis_in_queens = business_search("deli", "Queens, New York")
    """
    criteria = SearchCriteria(
        term=term,
        location=location,
        latitude=latitude,
        longitude=longitude,
        radius_m=radius_m,
        categories=categories,
        locale=locale,
        limit=limit,
        offset=offset,
        sort_by=sort_by,
        price=price,
        open_now=open_now,
        open_at=open_at,
        attributes=attributes,
        access_token=get_access_token(access_token),
    )
    # Validate once, before a client (and its session) is even built.
    params = build_query_params(criteria)

    client = client or YelpClient()
    payload = client.search_params(params, criteria.access_token)
    return records_to_frame(map_search_response(payload))
