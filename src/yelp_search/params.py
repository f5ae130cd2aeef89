from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Sequence, Union

import pandas as pd

from .catalogs import (
    DEFAULT_LOCALE,
    PRICE_TIERS,
    SORT_ORDERS,
    SUPPORTED_BUSINESS_ATTRIBUTES,
    SUPPORTED_CATEGORY_ALIASES,
    SUPPORTED_LOCALES,
)
from .exceptions import (
    InvalidEnumError,
    InvalidTypeError,
    MissingCredentialError,
    RangeError,
    ValidationError,
)

logger = logging.getLogger(__name__)

MAX_LIMIT = 50
DEFAULT_RADIUS_M = 40000

Timestamp = Union[datetime, int, float, str]


@dataclass(frozen=True)
class SearchCriteria:
    """
    User-supplied business search criteria, before validation.

    Either ``location`` or both ``latitude`` and ``longitude`` must be given.
    ``location`` may be a list of parts; they are concatenated with no
    separator. ``open_at`` takes precedence over ``open_now``.
    """

    term: Optional[str] = None
    location: Optional[Union[str, Sequence[str]]] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    radius_m: float = DEFAULT_RADIUS_M
    categories: Optional[Iterable[str]] = None
    locale: str = DEFAULT_LOCALE
    limit: int = 20
    offset: int = 0
    sort_by: str = SORT_ORDERS[0]
    price: Optional[Iterable[int]] = tuple(sorted(PRICE_TIERS))
    open_now: bool = False
    open_at: Optional[Timestamp] = None
    attributes: Optional[Iterable[str]] = None
    access_token: Optional[str] = None

    def __post_init__(self) -> None:
        # Generators would be used up by the first validation pass.
        for name in ("location", "categories", "price", "attributes"):
            value = getattr(self, name)
            if value is None or isinstance(value, (str, int, tuple)):
                continue
            try:
                object.__setattr__(self, name, tuple(value))
            except TypeError:
                # Not iterable; validation reports it.
                continue

    def to_query_params(self) -> Dict[str, Any]:
        return build_query_params(self)

    def __repr__(self) -> str:
        # Never echo the token into logs or tracebacks.
        token = "***" if self.access_token else repr(self.access_token)
        return (
            f"SearchCriteria(term={self.term!r}, location={self.location!r}, "
            f"latitude={self.latitude!r}, longitude={self.longitude!r}, "
            f"limit={self.limit!r}, offset={self.offset!r}, access_token={token})"
        )


def build_query_params(criteria: SearchCriteria) -> Dict[str, Any]:
    """
    Validate ``criteria`` and serialize it into query-string parameters.

    Returns a flat mapping of parameter name to str/int/float/bool. Parameters
    without a value are left out entirely so no empty keys are sent.

    Raises:
        MissingCredentialError: access token missing or blank
        RangeError: latitude, longitude, radius, limit or offset out of range
        InvalidEnumError: categories, locale, sort_by, price or attributes
            not in their catalogs
        InvalidTypeError: a criterion has the wrong type
        ValidationError: neither a location nor coordinates were given
    """
    check_access_token(criteria.access_token)

    if criteria.term is not None and not isinstance(criteria.term, str):
        raise InvalidTypeError(f"term must be a string, got {type(criteria.term).__name__}.")

    params: Dict[str, Any] = {"term": criteria.term}
    params.update(_normalize_location(criteria.location, criteria.latitude, criteria.longitude))
    params["radius"] = _normalize_radius(criteria.radius_m)
    params["categories"] = _join_catalog_values(
        "categories", criteria.categories, SUPPORTED_CATEGORY_ALIASES
    )
    params["locale"] = _check_member("locale", criteria.locale or DEFAULT_LOCALE, SUPPORTED_LOCALES)
    params["limit"] = _check_int_range("limit", criteria.limit, 0, MAX_LIMIT)
    params["offset"] = _check_int_range("offset", criteria.offset, 0, None)
    params["sort_by"] = _check_member("sort_by", criteria.sort_by or SORT_ORDERS[0], SORT_ORDERS)
    params["price"] = _normalize_price(criteria.price)
    params.update(_normalize_opening(criteria.open_now, criteria.open_at))
    params["attributes"] = _join_catalog_values(
        "attributes", criteria.attributes, SUPPORTED_BUSINESS_ATTRIBUTES
    )

    query = {k: v for k, v in params.items() if v is not None}
    logger.debug("Normalized search params: %s", query)
    return query


def check_access_token(access_token: Optional[str]) -> str:
    if not isinstance(access_token, str) or not access_token.strip():
        raise MissingCredentialError(
            "An access token is required to call the Yelp API. See get_access_token()."
        )
    return access_token


# -------------------------------------------------
# Helpers
# -------------------------------------------------
def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _normalize_location(location, latitude, longitude) -> Dict[str, Any]:
    if location is not None:
        if isinstance(location, str):
            joined = location
        else:
            parts = list(location)
            if not all(isinstance(p, str) for p in parts):
                raise InvalidTypeError("location must be a string or a sequence of strings.")
            joined = "".join(parts)
        if joined.strip():
            return {"location": joined}

    if latitude is None or longitude is None:
        raise ValidationError(
            "Either location or both latitude and longitude must be supplied."
        )

    return {
        "latitude": _check_real_range("latitude", latitude, -90, 90),
        "longitude": _check_real_range("longitude", longitude, -180, 180),
    }


def _check_real_range(name: str, value: Any, lower: float, upper: float) -> float:
    if not _is_real(value):
        raise InvalidTypeError(f"{name} must be a number, got {type(value).__name__}.")
    # NaN fails both comparisons, so test for membership instead of exclusion.
    if not (lower <= value <= upper):
        raise RangeError(name, value, lower, upper)
    return float(value)


def _check_int_range(name: str, value: Any, lower: int, upper: Optional[int]) -> int:
    if not isinstance(value, numbers.Integral) or isinstance(value, bool):
        raise InvalidTypeError(f"{name} must be an integer, got {type(value).__name__}.")
    if value < lower or (upper is not None and value > upper):
        raise RangeError(name, value, lower, upper)
    return int(value)


def _normalize_radius(radius_m: Any) -> int:
    if not _is_real(radius_m):
        raise InvalidTypeError(f"radius_m must be a number, got {type(radius_m).__name__}.")
    if math.isnan(radius_m) or math.isinf(radius_m) or radius_m < 0:
        raise RangeError("radius_m", radius_m, 0, None)
    return int(radius_m)


def _check_member(name: str, value: Any, allowed: Iterable[str]) -> str:
    allowed = tuple(allowed)
    if value not in allowed:
        raise InvalidEnumError(name, [value], allowed)
    return value


def _as_list(values: Any) -> List[Any]:
    if isinstance(values, (str, int)):
        return [values]
    try:
        return list(values)
    except TypeError as e:
        raise InvalidTypeError(f"expected a collection, got {type(values).__name__}.") from e


def _join_catalog_values(name: str, values: Any, allowed: FrozenSet[str]) -> Optional[str]:
    """
    Validate every value against ``allowed`` and join them with commas.

    All invalid values are reported together. ``None`` or an empty collection
    means the filter is not applied.
    """
    if values is None:
        return None

    values = _as_list(values)
    if not values:
        return None

    invalid = [v for v in values if not isinstance(v, str) or v not in allowed]
    if invalid:
        raise InvalidEnumError(name, invalid, allowed)

    return ",".join(values)


def _normalize_price(price: Any) -> Optional[str]:
    if price is None:
        return None

    values = _as_list(price)
    if not values:
        return None

    invalid = [
        p for p in values
        if not isinstance(p, numbers.Integral) or isinstance(p, bool) or p not in PRICE_TIERS
    ]
    if invalid:
        raise InvalidEnumError("price", invalid, PRICE_TIERS)

    return ",".join(str(int(p)) for p in values)


def _normalize_opening(open_now: Any, open_at: Any) -> Dict[str, Any]:
    if open_at is not None:
        if open_now is True:
            logger.warning("Both open_now and open_at were given; open_at takes precedence.")
        return {"open_at": to_epoch_seconds(open_at)}

    if not isinstance(open_now, bool):
        raise InvalidTypeError(f"open_now must be a bool, got {type(open_now).__name__}.")
    return {"open_now": open_now}


def to_epoch_seconds(value: Timestamp) -> int:
    """
    Convert a timestamp to integer Unix epoch seconds.

    Accepts a ``datetime`` (naive values are taken as local time), an epoch
    number, or an ISO-8601 string.
    """
    if isinstance(value, str):
        try:
            value = pd.Timestamp(value)
        except ValueError as e:
            raise ValidationError(f"open_at could not be parsed as a timestamp: {value!r}") from e

    if value is pd.NaT:
        raise ValidationError(f"open_at is not a valid timestamp: {value!r}")

    if isinstance(value, pd.Timestamp):
        value = value.to_pydatetime()

    if isinstance(value, datetime):
        return int(value.timestamp())

    if _is_real(value):
        if math.isnan(value) or math.isinf(value):
            raise RangeError("open_at", value, 0, None)
        return int(value)

    raise InvalidTypeError(
        f"open_at must be a datetime, epoch number or ISO string, got {type(value).__name__}."
    )
