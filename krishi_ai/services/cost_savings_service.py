import logging
from typing import List, Sequence

from krishi_ai.core.ids import IdGenerator, uuid_id_generator
from krishi_ai.fallbacks.cost_savings import build_cost_savings_tips
from krishi_ai.models.cost_savings import CostSavingsTip
from krishi_ai.models.language import Language
from krishi_ai.models.market import MarketData
from krishi_ai.models.soil_analysis import SoilTest
from krishi_ai.models.weather_alert import WeatherAlert

logger = logging.getLogger(__name__)


def get_cost_savings_tips(
    location: str,
    weather_alerts: Sequence[WeatherAlert],
    market_items: Sequence[MarketData],
    soil_tests: Sequence[SoilTest],
    language: Language,
    id_generator: IdGenerator = uuid_id_generator,
) -> List[CostSavingsTip]:
    tips = build_cost_savings_tips(
        weather_alerts, market_items, soil_tests, language, id_generator
    )
    logger.info(
        "cost_savings: %d tips for %s",
        len(tips),
        location or "unspecified location",
    )
    return tips
