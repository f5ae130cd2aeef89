from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd
from pydantic import ValidationError as PydanticValidationError

from .exceptions import MalformedResponseError
from .schema import COLUMNS, BusinessRecord

logger = logging.getLogger(__name__)

# Location fields that may be null upstream and are shown as "".
OPTIONAL_ADDRESS_FIELDS = (
    "address1",
    "address2",
    "address3",
    "city",
    "zip_code",
    "state",
    "country",
)


def null_to_empty(value: Optional[str]) -> str:
    """Return ``""`` for a missing/null value, otherwise the value itself."""
    return "" if value is None else value


def _as_list(value: Any, field: str) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"'{field}' should be a list, got {type(value).__name__}")
    return value


def _flatten_business(business: Dict[str, Any]) -> Dict[str, Any]:
    """
    Flatten one upstream business object into BusinessRecord keyword arguments.

    Required keys are read with ``[]`` so a missing key surfaces as KeyError
    instead of a guessed default.
    """
    categories = _as_list(business["categories"], "categories")
    coordinates = business["coordinates"]
    location = business["location"]

    row: Dict[str, Any] = {
        "id": business["id"],
        "name": business["name"],
        "rating": business["rating"],
        "review_count": business["review_count"],
        "price": business.get("price"),
        "image_url": business.get("image_url"),
        "is_closed": business["is_closed"],
        "url": business["url"],
        "category_aliases": [c["alias"] for c in categories],
        "category_titles": [c["title"] for c in categories],
        "latitude": coordinates["latitude"],
        "longitude": coordinates["longitude"],
        "distance_m": business.get("distance"),
        "transactions": _as_list(business.get("transactions"), "transactions"),
    }

    for field in OPTIONAL_ADDRESS_FIELDS:
        row[field] = null_to_empty(location.get(field))

    row["display_address"] = _as_list(location.get("display_address"), "display_address")
    row["phone"] = business["phone"]
    row["display_phone"] = business["display_phone"]
    return row


def map_business(business: Dict[str, Any], index: Optional[int] = None) -> BusinessRecord:
    try:
        return BusinessRecord(**_flatten_business(business))
    except KeyError as e:
        raise MalformedResponseError(f"missing expected field {e}", index=index) from e
    except (TypeError, AttributeError) as e:
        raise MalformedResponseError(f"unexpected shape: {e}", index=index) from e
    except PydanticValidationError as e:
        raise MalformedResponseError(f"invalid field values: {e}", index=index) from e


def map_businesses(businesses: Sequence[Dict[str, Any]]) -> List[BusinessRecord]:
    """
    Map a ``businesses`` array to records, one per element, in input order.

    Any malformed element aborts the whole mapping with MalformedResponseError.
    """
    if not isinstance(businesses, list):
        raise MalformedResponseError(
            f"'businesses' should be a list, got {type(businesses).__name__}"
        )
    return [map_business(b, index=i) for i, b in enumerate(businesses)]


def map_search_response(payload: Any) -> List[BusinessRecord]:
    """Map a full ``/businesses/search`` response object."""
    if not isinstance(payload, dict):
        raise MalformedResponseError(
            f"Expected a JSON object, got {type(payload).__name__}"
        )
    try:
        businesses = payload["businesses"]
    except KeyError as e:
        raise MalformedResponseError("missing expected field 'businesses'") from e

    records = map_businesses(businesses)
    logger.debug("Mapped %d businesses (total reported: %s)", len(records), payload.get("total"))
    return records


def records_to_frame(records: Sequence[BusinessRecord]) -> pd.DataFrame:
    """Build the result table; list-valued columns hold Python lists."""
    return pd.DataFrame([r.model_dump() for r in records], columns=COLUMNS)
