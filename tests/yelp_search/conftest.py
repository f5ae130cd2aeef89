import copy

import pytest


BUSINESSES = [
    {
        "id": "wvy-deli-1",
        "alias": "queens-deli-1",
        "name": "Queens Deli",
        "image_url": "https://s3-media.fl.yelpcdn.com/bphoto/abc/o.jpg",
        "is_closed": False,
        "url": "https://www.yelp.com/biz/queens-deli",
        "review_count": 212,
        "categories": [
            {"alias": "delis", "title": "Delis"},
            {"alias": "sandwiches", "title": "Sandwiches"},
        ],
        "rating": 4.5,
        "coordinates": {"latitude": 40.7421, "longitude": -73.9187},
        "transactions": ["pickup", "delivery"],
        "price": "$",
        "location": {
            "address1": "45-02 Queens Blvd",
            "address2": None,
            "address3": "",
            "city": "Sunnyside",
            "zip_code": "11104",
            "country": "US",
            "state": "NY",
            "display_address": ["45-02 Queens Blvd", "Sunnyside, NY 11104"],
        },
        "phone": "+17185550100",
        "display_phone": "(718) 555-0100",
        "distance": 1204.77,
    },
    {
        "id": "xk2-bagel-2",
        "alias": "astoria-bagels",
        "name": "Astoria Bagels",
        "image_url": "",
        "is_closed": False,
        "url": "https://www.yelp.com/biz/astoria-bagels",
        "review_count": 58,
        "categories": [{"alias": "bagels", "title": "Bagels"}],
        "rating": 4.0,
        "coordinates": {"latitude": 40.7644, "longitude": -73.9235},
        "transactions": [],
        "location": {
            "address1": "31-10 Broadway",
            "address2": "Suite 5",
            "address3": None,
            "city": "Astoria",
            "zip_code": "11106",
            "country": "US",
            "state": "NY",
            "display_address": ["31-10 Broadway", "Suite 5", "Astoria, NY 11106"],
        },
        "phone": "",
        "display_phone": "",
        "distance": 3310.1,
    },
]


@pytest.fixture
def businesses():
    return copy.deepcopy(BUSINESSES)


@pytest.fixture
def search_payload(businesses):
    return {
        "businesses": businesses,
        "total": 2,
        "region": {"center": {"latitude": 40.75, "longitude": -73.92}},
    }
