# homefinder/schemas.py
"""Pydantic models shared by the engine and the HTTP layer.

Everything the engine produces or consumes is frozen: listings are created
once when the catalog loads, and reports/turns are value objects that are
never modified after they are returned.
"""
from enum import Enum
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class PropertyType(str, Enum):
    HOUSE = "house"
    CONDO = "condo"
    TOWNHOUSE = "townhouse"
    APARTMENT = "apartment"


class CurrencyFormat(BaseModel):
    model_config = ConfigDict(frozen=True)

    locale: str = "en-US"
    currency: str = "USD"
    max_fraction_digits: int = Field(0, ge=0, le=20)


class Listing(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    address: str
    city: str
    state: str
    zip_code: str
    price: int = Field(..., ge=0)
    property_tax: int = Field(..., ge=0)
    hoa_fees: Optional[int] = Field(None, ge=0)
    bedrooms: int = Field(..., ge=0)
    bathrooms: float = Field(..., ge=0)
    square_feet: int = Field(..., gt=0)
    year_built: int
    property_type: PropertyType
    image_url: Optional[str] = None
    description: str = ""
    features: Tuple[str, ...] = ()
    pros: Tuple[str, ...] = ()
    cons: Tuple[str, ...] = ()
    neighborhood_score: float = Field(..., ge=0, le=10)
    school_rating: float = Field(..., ge=0, le=10)
    commute_time: int = Field(..., ge=0)

    @property
    def price_per_sqft(self) -> float:
        return self.price / self.square_feet

    @property
    def monthly_cost_estimate(self) -> int:
        """Rough monthly outlay: 0.6% of price plus tax and association fee.

        Halves round up, e.g. 3450.5 -> 3451.
        """
        total = self.price * 0.006 + self.property_tax / 12 + (self.hoa_fees or 0)
        return int(Decimal(str(total)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


class TradeoffEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    winner_id: str
    winner_address: str
    explanation: str


class ComparisonReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    listings: Tuple[Listing, ...]
    tradeoffs: Tuple[TradeoffEntry, ...]
    recommendation: str


class ComparisonRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    field: str
    values: Tuple[str, ...]
    best: Tuple[bool, ...]


class ClassifyResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    intent: str
    response_text: str
    listings: Tuple[Listing, ...] = ()
    comparison: Optional[ComparisonReport] = None


class ChatTurn(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    role: Literal["user", "assistant"]
    content: str
    timestamp: datetime
    listings: Optional[Tuple[Listing, ...]] = None
    comparison: Optional[ComparisonReport] = None


# request / response bodies for the HTTP layer

class ChatRequest(BaseModel):
    text: str


class CompareRequest(BaseModel):
    listing_ids: List[str]


class ComparisonOut(BaseModel):
    report: ComparisonReport
    table: List[ComparisonRow]
