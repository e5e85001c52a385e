from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from krishi_ai.models.language import Language
from krishi_ai.models.market import MarketData
from krishi_ai.models.soil_analysis import SoilTest
from krishi_ai.models.weather_alert import WeatherAlert


class CostSavingsTipCategory(str, Enum):
    SPRAY = "SPRAY"
    IRRIGATION = "IRRIGATION"
    FERTILIZER = "FERTILIZER"
    MARKET = "MARKET"
    INPUT = "INPUT"
    SOIL = "SOIL"
    ORGANIC = "ORGANIC"
    VERIFY = "VERIFY"


class CostSavingsTip(BaseModel):
    id: str
    category: CostSavingsTipCategory
    title: str
    description: str
    action: str
    estimated_savings: int = Field(..., description="Expected saving in rupees.")
    reason: Optional[str] = Field(default=None)


class CostSavingsRequest(BaseModel):
    location: str = Field(default="")
    weather_alerts: List[WeatherAlert] = Field(default_factory=list)
    market_items: List[MarketData] = Field(default_factory=list)
    soil_tests: List[SoilTest] = Field(
        default_factory=list, description="Most recent test first."
    )
    language: Language = Field(default=Language.HINDI)
