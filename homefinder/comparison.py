# homefinder/comparison.py
"""Side-by-side comparison of 2-3 listings.

``compare`` picks a winner for each of four fixed categories and writes a short
recommendation. ``best_value_mark`` answers, field by field, whether a listing
holds the best value in the set; the comparison table uses it to highlight
cells.

Winners come from a stable fold: the running best is only replaced when a
later listing is strictly better, so on ties the earliest listing wins.
"""
import operator
from typing import Callable, Dict, List, Optional, Sequence

from .schemas import ComparisonReport, ComparisonRow, CurrencyFormat, Listing, TradeoffEntry
from .utils import DEFAULT_CURRENCY, format_number, format_price, logger

MIN_LISTINGS = 2
MAX_LISTINGS = 3

CATEGORIES = ("Affordability", "Space", "Location", "Schools")

# field -> extreme that counts as "best"
BEST_VALUE_DIRECTIONS: Dict[str, Callable] = {
    "price": min,
    "bedrooms": max,
    "bathrooms": max,
    "square_feet": max,
    "price_per_sqft": min,
    "year_built": max,
    "commute_time": min,
    "school_rating": max,
    "neighborhood_score": max,
    "property_tax": min,
    "hoa_fees": min,
}


class InvalidArity(ValueError):
    """Comparison requested with fewer than 2 or more than 3 listings."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"comparison needs {MIN_LISTINGS}-{MAX_LISTINGS} listings, got {count}"
        )


def _fold(listings: Sequence[Listing], key, better) -> Listing:
    best = listings[0]
    for listing in listings[1:]:
        if better(key(listing), key(best)):
            best = listing
    return best


def min_by(listings, key):
    return _fold(listings, key, operator.lt)


def max_by(listings, key):
    return _fold(listings, key, operator.gt)


def _score(value) -> str:
    return f"{value:g}"


def _whole(fmt: CurrencyFormat) -> CurrencyFormat:
    return fmt.model_copy(update={"max_fraction_digits": 0})


def _entry(category: str, winner: Listing, explanation: str) -> TradeoffEntry:
    return TradeoffEntry(
        category=category,
        winner_id=winner.id,
        winner_address=winner.address,
        explanation=explanation,
    )


def _affordability(listings, fmt):
    cheapest = min_by(listings, lambda p: p.price)
    priciest = max_by(listings, lambda p: p.price)
    savings = priciest.price - cheapest.price
    return _entry(
        "Affordability",
        cheapest,
        f"{format_price(cheapest.price, fmt)} vs {format_price(priciest.price, fmt)}"
        f" - saves you {format_price(savings, fmt)} upfront",
    )


def _space(listings, fmt):
    largest = max_by(listings, lambda p: p.square_feet)
    return _entry(
        "Space",
        largest,
        f"{format_number(largest.square_feet, fmt.locale)} sq ft at "
        f"{format_price(largest.price_per_sqft, _whole(fmt))}/sq ft - best value for space",
    )


def _location(listings, fmt):
    best = max_by(listings, lambda p: p.neighborhood_score)
    return _entry(
        "Location",
        best,
        f"Neighborhood score of {_score(best.neighborhood_score)}/10 "
        f"with {best.commute_time}min commute",
    )


def _schools(listings, fmt):
    best = max_by(listings, lambda p: p.school_rating)
    return _entry(
        "Schools",
        best,
        f"School rating of {_score(best.school_rating)}/10 - excellent for families",
    )


_CATEGORY_BUILDERS = (_affordability, _space, _location, _schools)


def recommend(listings: Sequence[Listing], fmt: CurrencyFormat) -> str:
    parts = []
    family = next(
        (p for p in listings if p.school_rating >= 8 and p.bedrooms >= 4), None
    )
    if family is not None:
        parts.append(
            f"For families, I recommend {family.address} with its excellent "
            "schools and spacious layout. "
        )
    value = min_by(listings, lambda p: p.price_per_sqft)
    parts.append(
        f"For best overall value, consider {value.address} at "
        f"{format_price(value.price_per_sqft, _whole(fmt))}/sq ft."
    )
    return "".join(parts)


def compare(listings: Sequence[Listing], currency: Optional[CurrencyFormat] = None) -> ComparisonReport:
    listings = tuple(listings)
    if not MIN_LISTINGS <= len(listings) <= MAX_LISTINGS:
        raise InvalidArity(len(listings))
    fmt = currency or DEFAULT_CURRENCY
    tradeoffs = tuple(build(listings, fmt) for build in _CATEGORY_BUILDERS)
    logger.debug(
        "Compared %s: %s",
        [p.id for p in listings],
        {t.category: t.winner_id for t in tradeoffs},
    )
    return ComparisonReport(
        listings=listings,
        tradeoffs=tradeoffs,
        recommendation=recommend(listings, fmt),
    )


def field_value(listing: Listing, field: str):
    if field not in BEST_VALUE_DIRECTIONS:
        raise ValueError(f"unknown comparison field {field!r}")
    if field == "price_per_sqft":
        return listing.price_per_sqft
    if field == "hoa_fees":
        # an absent fee compares as 0
        return listing.hoa_fees or 0
    return getattr(listing, field)


def best_value_mark(field: str, listing: Listing, listings: Sequence[Listing]) -> bool:
    """True when ``listing`` holds the extreme value of ``field`` in ``listings``.

    Equality is exact; every tied listing is marked.
    """
    direction = BEST_VALUE_DIRECTIONS.get(field)
    if direction is None:
        raise ValueError(f"unknown comparison field {field!r}")
    if not listings:
        raise ValueError("best_value_mark needs at least one listing")
    best = direction(field_value(p, field) for p in listings)
    return field_value(listing, field) == best


def _hoa(listing, fmt):
    if not listing.hoa_fees:
        return "None"
    return f"{format_price(listing.hoa_fees, fmt)}/mo"


# label, field, cell renderer
_TABLE_ROWS = (
    ("Price", "price", lambda p, fmt: format_price(p.price, fmt)),
    ("Bedrooms", "bedrooms", lambda p, fmt: str(p.bedrooms)),
    ("Bathrooms", "bathrooms", lambda p, fmt: _score(p.bathrooms)),
    ("Square Feet", "square_feet", lambda p, fmt: format_number(p.square_feet, fmt.locale)),
    ("Price/SqFt", "price_per_sqft", lambda p, fmt: format_price(p.price_per_sqft, fmt)),
    ("Year Built", "year_built", lambda p, fmt: str(p.year_built)),
    ("Commute Time", "commute_time", lambda p, fmt: f"{p.commute_time} min"),
    ("School Rating", "school_rating", lambda p, fmt: f"{_score(p.school_rating)}/10"),
    ("Neighborhood", "neighborhood_score", lambda p, fmt: f"{_score(p.neighborhood_score)}/10"),
    ("Annual Tax", "property_tax", lambda p, fmt: format_price(p.property_tax, fmt)),
    ("HOA Fees", "hoa_fees", _hoa),
)


def comparison_table(report: ComparisonReport, currency: Optional[CurrencyFormat] = None) -> List[ComparisonRow]:
    """Rows for a side-by-side table, one cell per listing, best cells flagged."""
    fmt = currency or DEFAULT_CURRENCY
    listings = report.listings
    rows = []
    for label, field, render in _TABLE_ROWS:
        rows.append(ComparisonRow(
            label=label,
            field=field,
            values=tuple(render(p, fmt) for p in listings),
            best=tuple(best_value_mark(field, p, listings) for p in listings),
        ))
    return rows
