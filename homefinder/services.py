# homefinder/services.py
"""Chat session state kept on the presentation side of the engine.

A session owns the user's selection and the append-only log of chat turns.
Turn ids come from a per-session counter; the engine itself never sees them.
"""
import itertools
import threading
import time
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from . import config
from .catalog import Catalog, load_catalog
from .comparison import MAX_LISTINGS, compare
from .intents import classify
from .schemas import ChatTurn, ComparisonReport, CurrencyFormat, Listing
from .utils import DEFAULT_CURRENCY, logger

WELCOME_TEXT = (
    "Hi! I'm your AI real estate assistant. I can help you find the perfect home "
    "by comparing properties and explaining the tradeoffs. What are you looking "
    "for? Try asking about:\n\n"
    "• Properties in a specific price range\n"
    "• Homes with certain features\n"
    "• Comparing specific listings\n"
    "• Understanding pros and cons"
)


class SelectionSet:
    """Listings picked for comparison: unique by id, oldest dropped past capacity."""

    def __init__(self, capacity: int = MAX_LISTINGS):
        self.capacity = capacity
        self._items: List[Listing] = []

    def __len__(self):
        return len(self._items)

    def __contains__(self, listing):
        return any(p.id == listing.id for p in self._items)

    def toggle(self, listing: Listing) -> bool:
        """Select or deselect a listing. Returns True if it ends up selected."""
        if listing in self:
            self._items = [p for p in self._items if p.id != listing.id]
            return False
        if len(self._items) >= self.capacity:
            dropped = self._items.pop(0)
            logger.debug("Selection full, dropping %s", dropped.id)
        self._items.append(listing)
        return True

    def clear(self):
        self._items = []

    def snapshot(self) -> Tuple[Listing, ...]:
        return tuple(self._items)


class ChatSession:
    def __init__(
        self,
        catalog: Catalog,
        currency: Optional[CurrencyFormat] = None,
        response_delay: float = 0.0,
    ):
        self.catalog = catalog
        self.currency = currency or DEFAULT_CURRENCY
        self.response_delay = response_delay
        self.selection = SelectionSet()
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        self._turns: List[ChatTurn] = [
            ChatTurn(
                id="welcome",
                role="assistant",
                content=WELCOME_TEXT,
                timestamp=datetime.now(timezone.utc),
            )
        ]

    @property
    def turns(self) -> Tuple[ChatTurn, ...]:
        return tuple(self._turns)

    def _append(self, role, content, **extra) -> ChatTurn:
        turn = ChatTurn(
            id=f"msg-{next(self._ids)}",
            role=role,
            content=content,
            timestamp=datetime.now(timezone.utc),
            **extra,
        )
        self._turns.append(turn)
        return turn

    def send(self, text: str) -> Optional[ChatTurn]:
        """Record the user's message and the assistant's reply.

        Blank input is ignored and returns None. One message is handled at a
        time, so replies land in the log in request order.
        """
        if not text.strip():
            return None
        with self._lock:
            self._append("user", text)
            if self.response_delay > 0:
                time.sleep(self.response_delay)
            result = classify(text, self.catalog, self.selection.snapshot(), self.currency)
            if result.comparison is not None:
                return self._append("assistant", result.response_text, comparison=result.comparison)
            return self._append("assistant", result.response_text, listings=result.listings)

    def compare_selection(self) -> ComparisonReport:
        return compare(self.selection.snapshot(), self.currency)


_session: Optional[ChatSession] = None


def get_session() -> ChatSession:
    """FastAPI dependency returning the process-wide chat session."""
    global _session
    if _session is None:
        _session = ChatSession(
            load_catalog(config.CATALOG_PATH),
            currency=config.CURRENCY,
            response_delay=config.RESPONSE_DELAY,
        )
    return _session
