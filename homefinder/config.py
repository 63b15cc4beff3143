# homefinder/config.py
"""Environment configuration, read once at import time."""
import os
from dotenv import load_dotenv

from .schemas import CurrencyFormat

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CURRENCY = CurrencyFormat(
    locale=os.getenv("HOMEFINDER_LOCALE", "en-US"),
    currency=os.getenv("HOMEFINDER_CURRENCY", "USD"),
    max_fraction_digits=int(os.getenv("HOMEFINDER_MAX_FRACTION_DIGITS", "0")),
)

# JSON list of listing records; the built-in sample catalog is used when unset
CATALOG_PATH = os.getenv("HOMEFINDER_CATALOG_PATH")

# cosmetic "thinking" pause before an assistant reply, in seconds
RESPONSE_DELAY = float(os.getenv("HOMEFINDER_RESPONSE_DELAY", "0"))
