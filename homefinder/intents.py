# homefinder/intents.py
"""Keyword-driven intent classification over the listing catalog.

Intents are an ordered rule table; the first rule whose keywords appear in the
lower-cased text wins, so "price under 400k with 3 bedrooms" is a price query.
Comparison is checked before the table because it also depends on the
caller's current selection, and a fallback help reply closes the list so
classification never fails.
"""
import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Sequence, Tuple

from .comparison import compare
from .schemas import ClassifyResult, ComparisonReport, CurrencyFormat, Listing
from .utils import DEFAULT_CURRENCY, format_price, logger

DEFAULT_PRICE_CEILING = 600000
DEFAULT_MIN_BEDROOMS = 3
FALLBACK_LISTING_COUNT = 3

_PRICE_RE = re.compile(r"(\d+)[kK]?", re.ASCII)
_NUMBER_RE = re.compile(r"(\d+)", re.ASCII)

COMPARE_KEYWORD = "compare"

FALLBACK_TEXT = (
    "I can help you find the right property! Try asking me about:\n\n"
    "• Properties under a specific price\n"
    "• Homes with 3+ bedrooms\n"
    "• Family-friendly neighborhoods\n"
    "• Short commute options\n"
    "• Investment opportunities\n\n"
    "Or select properties and ask me to compare them!"
)


def _first_int(pattern, text: str) -> Optional[int]:
    m = pattern.search(text)
    if not m:
        return None
    try:
        return int(m.group(1))
    except ValueError:
        # longer than the int string conversion limit (sys.get_int_max_str_digits)
        logger.debug("Ignoring %d-digit number in query", len(m.group(1)))
        return None


def extract_price(text: str) -> Optional[int]:
    """First ASCII digit run in the text, read as thousands when below 1000.

    "under 500k" and "under 500" both give 500000. Returns None when the text
    has no usable digits.
    """
    num = _first_int(_PRICE_RE, text)
    if num is None:
        return None
    return num * 1000 if num < 1000 else num


def extract_number(text: str) -> Optional[int]:
    return _first_int(_NUMBER_RE, text)


def _with_default(extractor, default, name):
    def extract(text):
        value = extractor(text)
        if value is None:
            logger.debug("No %s found in %r, using default %s", name, text, default)
            return default
        return value
    return extract


@dataclass(frozen=True)
class IntentRule:
    name: str
    keywords: Tuple[str, ...]
    predicate: Callable[[Listing, Any], bool]
    template: Callable[[int, Any, CurrencyFormat], str]
    extract: Optional[Callable[[str], Any]] = None

    def matches(self, text: str) -> bool:
        return any(k in text for k in self.keywords)


INTENT_RULES: Tuple[IntentRule, ...] = (
    IntentRule(
        name="price",
        keywords=("price", "under", "budget"),
        extract=_with_default(extract_price, DEFAULT_PRICE_CEILING, "price ceiling"),
        predicate=lambda p, ceiling: p.price <= ceiling,
        template=lambda n, ceiling, fmt: (
            f"I found {n} properties under {format_price(ceiling, fmt)}. "
            "Here are some options that might work for your budget:"
        ),
    ),
    IntentRule(
        name="bedrooms",
        keywords=("bedroom", "bed"),
        extract=_with_default(extract_number, DEFAULT_MIN_BEDROOMS, "bedroom count"),
        predicate=lambda p, minimum: p.bedrooms >= minimum,
        template=lambda n, minimum, fmt: f"Here are {n} properties with {minimum}+ bedrooms:",
    ),
    IntentRule(
        name="location",
        keywords=("austin", "location", "area"),
        predicate=lambda p, _: True,
        template=lambda n, _, fmt: (
            "Here are all available properties in Austin. The market has options "
            "ranging from downtown condos to suburban family homes. "
            "What area interests you most?"
        ),
    ),
    IntentRule(
        name="family",
        keywords=("family", "kids", "school"),
        predicate=lambda p, _: (
            p.school_rating >= 8 and p.bedrooms >= 3 and p.neighborhood_score >= 8
        ),
        template=lambda n, _, fmt: (
            "For families, I recommend focusing on properties with good schools "
            "and safe neighborhoods. Here are the best family-friendly options:"
        ),
    ),
    IntentRule(
        name="commute",
        keywords=("commute", "downtown", "work"),
        predicate=lambda p, _: p.commute_time <= 20,
        template=lambda n, _, fmt: (
            "Here are properties with shorter commute times "
            "(under 20 minutes to downtown):"
        ),
    ),
    IntentRule(
        name="investment",
        keywords=("investment", "rental", "appreciation"),
        predicate=lambda p, _: p.price / p.square_feet < 300 and p.neighborhood_score >= 7,
        template=lambda n, _, fmt: (
            "For investment properties, look for good price per square foot in "
            "up-and-coming neighborhoods. Here are some promising options:"
        ),
    ),
)


def describe_comparison(report: ComparisonReport) -> str:
    lines = "\n\n".join(
        f"**{t.category}:** {t.winner_address} - {t.explanation}" for t in report.tradeoffs
    )
    return (
        f"I've analyzed {len(report.listings)} properties for you. "
        f"Here's what I found:\n\n{lines}\n\n💡 {report.recommendation}"
    )


def classify(
    text: str,
    catalog: Iterable[Listing],
    selection: Sequence[Listing] = (),
    currency: Optional[CurrencyFormat] = None,
    rules: Sequence[IntentRule] = INTENT_RULES,
) -> ClassifyResult:
    """Map free text to an intent and the listings it selects.

    Callers drop blank input before getting here. Neither the catalog nor the
    selection is modified.
    """
    fmt = currency or DEFAULT_CURRENCY
    query = text.lower()
    listings = tuple(catalog)
    selection = tuple(selection)

    if COMPARE_KEYWORD in query and len(selection) >= 2:
        report = compare(selection, fmt)
        logger.info("Intent compare over %d selected listings", len(selection))
        return ClassifyResult(
            intent="compare",
            response_text=describe_comparison(report),
            comparison=report,
        )

    for rule in rules:
        if not rule.matches(query):
            continue
        param = rule.extract(query) if rule.extract else None
        matched = tuple(p for p in listings if rule.predicate(p, param))
        logger.info("Intent %s (param=%s) matched %d listings", rule.name, param, len(matched))
        return ClassifyResult(
            intent=rule.name,
            response_text=rule.template(len(matched), param, fmt),
            listings=matched,
        )

    logger.info("No intent matched %r, returning help text", text)
    return ClassifyResult(
        intent="fallback",
        response_text=FALLBACK_TEXT,
        listings=listings[:FALLBACK_LISTING_COUNT],
    )
