# tests/conftest.py
import pytest
from homefinder.catalog import load_catalog
from homefinder.schemas import Listing


@pytest.fixture
def catalog():
    return load_catalog()


@pytest.fixture
def make_listing():
    def _make(listing_id, **overrides):
        data = {
            "id": listing_id,
            "address": f"{listing_id} Test St",
            "city": "Austin",
            "state": "TX",
            "zip_code": "78701",
            "price": 400000,
            "property_tax": 8000,
            "hoa_fees": None,
            "bedrooms": 3,
            "bathrooms": 2,
            "square_feet": 2000,
            "year_built": 2000,
            "property_type": "house",
            "neighborhood_score": 7,
            "school_rating": 7,
            "commute_time": 20,
        }
        data.update(overrides)
        return Listing.model_validate(data)
    return _make
