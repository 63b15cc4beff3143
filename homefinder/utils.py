# homefinder/utils.py
"""Shared utilities: logging setup and locale-aware currency formatting."""

import logging
from decimal import Decimal, ROUND_HALF_UP, localcontext

from . import config
from .schemas import CurrencyFormat

def get_logger(name=__name__):
    level = config.LOG_LEVEL
    logging.basicConfig(
        format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        level=getattr(logging, level, logging.INFO)
    )
    return logging.getLogger(name)

logger = get_logger("homefinder")

DEFAULT_CURRENCY = CurrencyFormat()

# (group separator, decimal separator) by language prefix
_SEPARATORS = {
    "en": (",", "."),
    "de": (".", ","),
    "es": (".", ","),
    "it": (".", ","),
    "nl": (".", ","),
    "pt": (".", ","),
    "fr": ("\u202f", ","),
}

_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "INR": "₹",
}

def _separators(locale: str):
    lang = locale.replace("_", "-").split("-")[0].lower()
    return _SEPARATORS.get(lang, _SEPARATORS["en"]), lang

def _group(value: Decimal, digits: int, locale: str) -> str:
    (group_sep, decimal_sep), _ = _separators(locale)
    text = f"{value:,.{digits}f}"
    return text.replace(",", "\0").replace(".", decimal_sep).replace("\0", group_sep)

def _quantize(value, digits: int) -> Decimal:
    d = Decimal(str(value))
    with localcontext() as ctx:
        # room for every integer digit of very large amounts
        ctx.prec = max(ctx.prec, d.adjusted() + digits + 2)
        return d.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)

def format_number(value, locale: str = "en-US", digits: int = 0) -> str:
    """Group a plain number the way the locale does, e.g. 2600 -> '2,600'."""
    q = _quantize(value, digits)
    sign = "-" if q < 0 else ""
    return sign + _group(q.copy_abs(), digits, locale)

def format_price(amount, fmt: CurrencyFormat = None) -> str:
    """Format an amount as currency.

    Rounds half away from zero to ``fmt.max_fraction_digits`` places. English
    locales put the symbol in front (``$450,000``), the others after the
    number after a no-break space. Currencies without a known symbol use their
    ISO code, also separated by a no-break space.
    """
    fmt = fmt or DEFAULT_CURRENCY
    digits = fmt.max_fraction_digits
    q = _quantize(amount, digits)
    sign = "-" if q < 0 else ""
    body = _group(q.copy_abs(), digits, fmt.locale)
    symbol = _SYMBOLS.get(fmt.currency.upper())
    _, lang = _separators(fmt.locale)
    if symbol is None:
        return f"{sign}{fmt.currency.upper()}\xa0{body}"
    if lang == "en":
        return f"{sign}{symbol}{body}"
    return f"{sign}{body}\xa0{symbol}"
