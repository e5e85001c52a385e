from enum import Enum
from typing import List

from pydantic import AliasChoices, BaseModel, Field


class PriceTrend(str, Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class PricePoint(BaseModel):
    date: str
    price: float


class Vendor(BaseModel):
    name: str
    price: float
    distance: str
    rating: float
    is_govt: bool = Field(..., validation_alias=AliasChoices("is_govt", "isGovt"))


class MarketData(BaseModel):
    item: str
    avg_price: float = Field(..., validation_alias=AliasChoices("avg_price", "avgPrice"))
    unit: str
    trend: PriceTrend
    price_history: List[PricePoint] = Field(
        default_factory=list,
        validation_alias=AliasChoices("price_history", "priceHistory"),
    )
    vendors: List[Vendor] = Field(default_factory=list)
