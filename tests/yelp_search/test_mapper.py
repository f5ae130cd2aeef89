import pandas as pd
import pytest
from pydantic import ValidationError as PydanticValidationError

from yelp_search.exceptions import MalformedResponseError
from yelp_search.mapper import (
    map_business,
    map_businesses,
    map_search_response,
    null_to_empty,
    records_to_frame,
)
from yelp_search.schema import COLUMNS, BusinessRecord


@pytest.mark.unit
def test_null_to_empty():
    assert null_to_empty(None) == ""
    assert null_to_empty("") == ""
    assert null_to_empty("Suite 5") == "Suite 5"


@pytest.mark.unit
def test_rows_preserve_input_order(businesses):
    records = map_businesses(businesses)
    assert [r.id for r in records] == ["wvy-deli-1", "xk2-bagel-2"]


@pytest.mark.unit
def test_address2_null_becomes_empty_string(businesses):
    first, second = map_businesses(businesses)
    assert first.address2 == ""
    assert second.address2 == "Suite 5"
    assert second.address3 == ""


@pytest.mark.unit
def test_missing_optional_address_fields_become_empty(businesses):
    del businesses[0]["location"]["address3"]
    del businesses[0]["location"]["state"]
    record = map_business(businesses[0])
    assert record.address3 == ""
    assert record.state == ""
    assert record.address1 == "45-02 Queens Blvd"


@pytest.mark.unit
def test_nested_fields_flattened(businesses):
    record = map_business(businesses[0])

    assert record.latitude == 40.7421
    assert record.longitude == -73.9187
    assert record.distance_m == 1204.77
    assert record.city == "Sunnyside"
    assert record.zip_code == "11104"
    assert record.country == "US"
    assert record.display_address == ["45-02 Queens Blvd", "Sunnyside, NY 11104"]
    assert record.transactions == ["pickup", "delivery"]
    assert record.price == "$"
    assert record.rating == 4.5
    assert record.review_count == 212
    assert record.is_closed is False


@pytest.mark.unit
def test_category_lists_parallel(businesses):
    for record in map_businesses(businesses):
        assert len(record.category_aliases) == len(record.category_titles)

    first = map_business(businesses[0])
    assert first.category_aliases == ["delis", "sandwiches"]
    assert first.category_titles == ["Delis", "Sandwiches"]


@pytest.mark.unit
def test_category_pairs_round_trip(businesses):
    for raw, record in zip(businesses, map_businesses(businesses)):
        assert record.category_pairs() == raw["categories"]


@pytest.mark.unit
def test_optional_scalars_absent(businesses):
    record = map_business(businesses[1])
    assert record.price is None
    assert record.phone == ""


@pytest.mark.unit
def test_absent_lists_become_empty(businesses):
    del businesses[0]["transactions"]
    businesses[0]["location"]["display_address"] = None
    record = map_business(businesses[0])
    assert record.transactions == []
    assert record.display_address == []


@pytest.mark.unit
def test_records_are_immutable(businesses):
    record = map_business(businesses[0])
    with pytest.raises(PydanticValidationError):
        record.name = "Other"


@pytest.mark.unit
def test_missing_required_key_raises_malformed(businesses):
    del businesses[1]["coordinates"]

    with pytest.raises(MalformedResponseError) as e:
        map_businesses(businesses)

    assert e.value.index == 1
    assert "coordinates" in str(e.value)
    assert isinstance(e.value.__cause__, KeyError)


@pytest.mark.unit
def test_category_without_title_raises_malformed(businesses):
    businesses[0]["categories"] = [{"alias": "delis"}]
    with pytest.raises(MalformedResponseError):
        map_businesses(businesses)


@pytest.mark.unit
def test_wrong_shape_raises_malformed(businesses):
    businesses[0]["location"] = None
    with pytest.raises(MalformedResponseError) as e:
        map_businesses(businesses)
    assert e.value.index == 0


@pytest.mark.unit
def test_uncoercible_value_raises_malformed(businesses):
    businesses[0]["rating"] = "excellent"
    with pytest.raises(MalformedResponseError) as e:
        map_businesses(businesses)
    assert isinstance(e.value.__cause__, PydanticValidationError)


@pytest.mark.unit
def test_map_search_response(search_payload):
    records = map_search_response(search_payload)
    assert len(records) == 2
    assert all(isinstance(r, BusinessRecord) for r in records)


@pytest.mark.unit
@pytest.mark.parametrize("payload", [{"total": 0}, [], {"businesses": {"id": "x"}}])
def test_map_search_response_bad_payload(payload):
    with pytest.raises(MalformedResponseError):
        map_search_response(payload)


@pytest.mark.unit
def test_records_to_frame(businesses):
    df = records_to_frame(map_businesses(businesses))

    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == COLUMNS
    assert list(df["id"]) == ["wvy-deli-1", "xk2-bagel-2"]
    assert list(df["address2"]) == ["", "Suite 5"]
    assert df.loc[0, "category_aliases"] == ["delis", "sandwiches"]


@pytest.mark.unit
def test_empty_frame_keeps_columns():
    df = records_to_frame([])
    assert df.empty
    assert list(df.columns) == COLUMNS


@pytest.mark.unit
def test_null_transaction_raises_malformed(businesses):
    businesses[0]["transactions"] = ["pickup", None]
    with pytest.raises(MalformedResponseError) as e:
        map_businesses(businesses)
    assert e.value.index == 0


@pytest.mark.unit
def test_null_category_alias_raises_malformed(businesses):
    businesses[1]["categories"] = [{"alias": None, "title": "Bagels"}]
    with pytest.raises(MalformedResponseError) as e:
        map_businesses(businesses)
    assert e.value.index == 1
