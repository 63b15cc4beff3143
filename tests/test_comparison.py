# tests/test_comparison.py
import pytest
from homefinder.comparison import (
    BEST_VALUE_DIRECTIONS,
    CATEGORIES,
    InvalidArity,
    best_value_mark,
    compare,
    comparison_table,
    field_value,
)


@pytest.fixture
def pair(catalog):
    # $450,000 / 1800 sqft and $600,000 / 2600 sqft
    return [catalog.get("1"), catalog.get("5")]


def test_affordability_and_space_winners(pair):
    report = compare(pair)
    by_category = {t.category: t for t in report.tradeoffs}
    assert by_category["Affordability"].winner_id == "1"
    assert by_category["Affordability"].explanation == (
        "$450,000 vs $600,000 - saves you $150,000 upfront"
    )
    assert by_category["Space"].winner_id == "5"
    assert by_category["Space"].explanation == (
        "2,600 sq ft at $231/sq ft - best value for space"
    )


def test_location_and_schools_winners(pair):
    report = compare(pair)
    location, schools = report.tradeoffs[2], report.tradeoffs[3]
    assert location.winner_address == "1234 Oak Ridge Dr"
    assert location.explanation == "Neighborhood score of 8/10 with 15min commute"
    assert schools.winner_address == "7812 Cedar Hollow Ln"
    assert schools.explanation == "School rating of 9/10 - excellent for families"


def test_recommendation_family_then_value(pair):
    report = compare(pair)
    assert report.recommendation == (
        "For families, I recommend 7812 Cedar Hollow Ln with its excellent schools "
        "and spacious layout. For best overall value, consider 7812 Cedar Hollow Ln "
        "at $231/sq ft."
    )


def test_recommendation_without_family_pick(catalog):
    report = compare([catalog.get("3"), catalog.get("6")])
    assert report.recommendation == (
        "For best overall value, consider 3300 Riverside Dr Apt 210 at $382/sq ft."
    )


@pytest.mark.parametrize("chosen", [["1", "2"], ["3", "4", "6"], ["5", "2", "1"]])
def test_four_entries_in_fixed_order(catalog, chosen):
    report = compare([catalog.get(i) for i in chosen])
    assert tuple(t.category for t in report.tradeoffs) == CATEGORIES
    assert [p.id for p in report.listings] == chosen


@pytest.mark.parametrize("count", [0, 1, 4])
def test_invalid_arity(catalog, count):
    with pytest.raises(InvalidArity) as exc:
        compare(list(catalog)[:count])
    assert exc.value.count == count
    assert isinstance(exc.value, ValueError)


def test_idempotent(catalog):
    chosen = (catalog.get("2"), catalog.get("4"), catalog.get("6"))
    assert compare(chosen) == compare(chosen)


def test_ties_go_to_first(make_listing):
    a = make_listing("a", price=500000, square_feet=2000, neighborhood_score=8, school_rating=9)
    b = make_listing("b", price=500000, square_feet=2000, neighborhood_score=8, school_rating=9)
    report = compare([a, b])
    assert [t.winner_id for t in report.tradeoffs] == ["a", "a", "a", "a"]
    assert "saves you $0 upfront" in report.tradeoffs[0].explanation
    report = compare([b, a])
    assert [t.winner_id for t in report.tradeoffs] == ["b", "b", "b", "b"]


def test_later_listing_wins_only_when_strictly_better(make_listing):
    a = make_listing("a", school_rating=8)
    b = make_listing("b", school_rating=9)
    c = make_listing("c", school_rating=9)
    assert compare([a, b, c]).tradeoffs[3].winner_id == "b"


def test_price_per_sqft_mark(pair):
    cheap_per_foot = pair[1]
    assert best_value_mark("price_per_sqft", cheap_per_foot, pair)
    assert not best_value_mark("price_per_sqft", pair[0], pair)
    assert round(cheap_per_foot.price_per_sqft, 2) == 230.77
    assert pair[0].price_per_sqft == 250.0


@pytest.mark.parametrize("field", sorted(BEST_VALUE_DIRECTIONS))
def test_marks_exactly_the_extreme(catalog, field):
    chosen = [catalog.get("2"), catalog.get("3"), catalog.get("5")]
    direction = BEST_VALUE_DIRECTIONS[field]
    best = direction(field_value(p, field) for p in chosen)
    marked = [p.id for p in chosen if best_value_mark(field, p, chosen)]
    assert marked
    assert marked == [p.id for p in chosen if field_value(p, field) == best]


def test_directions_table():
    assert {k: v.__name__ for k, v in BEST_VALUE_DIRECTIONS.items()} == {
        "price": "min",
        "bedrooms": "max",
        "bathrooms": "max",
        "square_feet": "max",
        "price_per_sqft": "min",
        "year_built": "max",
        "commute_time": "min",
        "school_rating": "max",
        "neighborhood_score": "max",
        "property_tax": "min",
        "hoa_fees": "min",
    }


def test_ties_all_marked(make_listing):
    a = make_listing("a", bedrooms=4)
    b = make_listing("b", bedrooms=2)
    c = make_listing("c", bedrooms=4)
    chosen = [a, b, c]
    assert [best_value_mark("bedrooms", p, chosen) for p in chosen] == [True, False, True]


def test_missing_hoa_counts_as_zero(make_listing):
    none = make_listing("none", hoa_fees=None)
    some = make_listing("some", hoa_fees=150)
    assert best_value_mark("hoa_fees", none, [none, some])
    assert not best_value_mark("hoa_fees", some, [none, some])


def test_real_fees_compare_normally(make_listing):
    low = make_listing("low", hoa_fees=100)
    high = make_listing("high", hoa_fees=150)
    assert best_value_mark("hoa_fees", low, [low, high])
    assert not best_value_mark("hoa_fees", high, [low, high])


def test_unknown_field(pair):
    with pytest.raises(ValueError):
        best_value_mark("garage", pair[0], pair)


def test_comparison_table(pair):
    rows = {row.label: row for row in comparison_table(compare(pair))}
    assert list(rows) == [
        "Price", "Bedrooms", "Bathrooms", "Square Feet", "Price/SqFt", "Year Built",
        "Commute Time", "School Rating", "Neighborhood", "Annual Tax", "HOA Fees",
    ]
    assert rows["Price"].values == ("$450,000", "$600,000")
    assert rows["Price"].best == (True, False)
    assert rows["Price/SqFt"].values == ("$250", "$231")
    assert rows["Price/SqFt"].best == (False, True)
    assert rows["Square Feet"].values == ("1,800", "2,600")
    assert rows["Commute Time"].values == ("15 min", "35 min")
    assert rows["HOA Fees"].values == ("None", "$50/mo")
    assert rows["HOA Fees"].best == (True, False)
    assert rows["School Rating"].values == ("8/10", "9/10")
