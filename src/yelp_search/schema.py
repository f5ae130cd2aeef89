from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BusinessRecord(BaseModel):
    """
    One flattened business from a search response.

    Nested upstream objects are spread into columns:
    - ``categories``  -> ``category_aliases`` / ``category_titles`` (parallel lists)
    - ``coordinates`` -> ``latitude`` / ``longitude``
    - ``location``    -> address fields and ``display_address``

    Records are immutable once built.
    """

    model_config = ConfigDict(frozen=True)

    # --- Identity ---
    id: str = Field(..., description="Yelp business id")
    name: str = Field(..., description="Business name")

    # --- Ratings and pricing ---
    rating: float = Field(..., description="Average rating, 1 to 5 in half steps")
    review_count: int = Field(..., description="Number of reviews")
    price: Optional[str] = Field(None, description="Price tier such as '$$' (if listed)")

    image_url: Optional[str] = Field(None, description="Photo URL (if listed)")
    is_closed: bool = Field(..., description="Whether the business has permanently closed")
    url: str = Field(..., description="Yelp page URL")

    category_aliases: List[str] = Field(default_factory=list, description="Category aliases, in order")
    category_titles: List[str] = Field(default_factory=list, description="Category titles, in order")

    # --- Position ---
    latitude: Optional[float] = Field(None, description="Latitude")
    longitude: Optional[float] = Field(None, description="Longitude")
    distance_m: Optional[float] = Field(
        None, description="Distance in metres from the search location"
    )

    transactions: List[str] = Field(
        default_factory=list, description="Supported transactions (pickup, delivery, ...)"
    )

    # --- Address (empty string when not listed) ---
    address1: str = ""
    address2: str = ""
    address3: str = ""
    city: str = ""
    zip_code: str = ""
    state: str = ""
    country: str = ""
    display_address: List[str] = Field(default_factory=list, description="Formatted address lines")

    # --- Contact ---
    phone: str = Field(..., description="Phone number in E.164 format, or empty")
    display_phone: str = Field(..., description="Phone number formatted for display")

    @field_validator("category_aliases", "category_titles", "transactions", "display_address", mode="before")
    @classmethod
    def validate_string_lists(cls, v):
        if v is None:
            return []
        if isinstance(v, (list, tuple)):
            # Elements are left for List[str] to check; nulls are not coerced.
            return list(v)
        raise ValueError(f"expected a list, got {type(v).__name__}")

    def category_pairs(self) -> List[Dict[str, str]]:
        """Rebuild the upstream ``[{"alias": ..., "title": ...}]`` list."""
        return [
            {"alias": alias, "title": title}
            for alias, title in zip(self.category_aliases, self.category_titles)
        ]


# Column order of the result table.
COLUMNS: List[str] = list(BusinessRecord.model_fields)
