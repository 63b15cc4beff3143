# homefinder/catalog.py
"""Read-only, in-memory collection of listings.

The catalog is built once at startup, from a JSON file when
``HOMEFINDER_CATALOG_PATH`` is set and from the built-in sample data otherwise.
Nothing in the engine mutates it.
"""
import json
from typing import Any, Dict, Iterable, Optional

from .schemas import Listing, PropertyType
from .sample_catalog import SAMPLE_LISTINGS
from .utils import logger


class Catalog:
    def __init__(self, listings: Iterable[Listing]):
        self._listings = tuple(listings)
        self._by_id = {}
        for listing in self._listings:
            if listing.id in self._by_id:
                raise ValueError(f"duplicate listing id {listing.id!r}")
            self._by_id[listing.id] = listing

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> "Catalog":
        return cls(Listing.model_validate(r) for r in records)

    @classmethod
    def from_json(cls, path: str) -> "Catalog":
        with open(path, "r", encoding="utf-8") as fh:
            records = json.load(fh)
        catalog = cls.from_records(records)
        logger.info("Loaded %d listings from %s", len(catalog), path)
        return catalog

    def __iter__(self):
        return iter(self._listings)

    def __len__(self):
        return len(self._listings)

    def __getitem__(self, index):
        return self._listings[index]

    @property
    def listings(self):
        return self._listings

    def get(self, listing_id: str) -> Listing:
        try:
            return self._by_id[listing_id]
        except KeyError:
            raise KeyError(f"unknown listing id {listing_id!r}") from None

    def search(
        self,
        max_price: Optional[int] = None,
        min_bedrooms: Optional[int] = None,
        property_type: Optional[PropertyType] = None,
    ):
        """Structured filter used by the listings endpoint."""
        out = []
        for listing in self._listings:
            if max_price is not None and listing.price > max_price:
                continue
            if min_bedrooms is not None and listing.bedrooms < min_bedrooms:
                continue
            if property_type is not None and listing.property_type != property_type:
                continue
            out.append(listing)
        return out


def load_catalog(path: Optional[str] = None) -> Catalog:
    if path:
        return Catalog.from_json(path)
    catalog = Catalog.from_records(SAMPLE_LISTINGS)
    logger.info("Loaded %d built-in sample listings", len(catalog))
    return catalog
