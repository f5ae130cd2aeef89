import pytest

import yelp_search
from yelp_search.catalogs import (
    PRICE_TIERS,
    SORT_ORDERS,
    SUPPORTED_BUSINESS_ATTRIBUTES,
    SUPPORTED_CATEGORY_ALIASES,
    SUPPORTED_LOCALES,
)


@pytest.mark.unit
def test_catalogs_are_immutable():
    for catalog in (SUPPORTED_LOCALES, SUPPORTED_CATEGORY_ALIASES, SUPPORTED_BUSINESS_ATTRIBUTES):
        assert isinstance(catalog, frozenset)
        assert all(isinstance(v, str) and v for v in catalog)


@pytest.mark.unit
def test_catalog_contents():
    assert "en_US" in SUPPORTED_LOCALES
    assert {"delis", "restaurants", "coffee", "tex-mex"} <= SUPPORTED_CATEGORY_ALIASES
    assert "hot_and_new" in SUPPORTED_BUSINESS_ATTRIBUTES
    assert SORT_ORDERS[0] == "best_match"
    assert PRICE_TIERS == {1, 2, 3, 4}


@pytest.mark.unit
def test_package_exports():
    for name in yelp_search.__all__:
        assert hasattr(yelp_search, name), name
