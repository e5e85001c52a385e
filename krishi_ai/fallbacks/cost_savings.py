from typing import List, Optional, Sequence

from krishi_ai.core.ids import IdGenerator
from krishi_ai.core.templates import load_template_table, localized
from krishi_ai.models.cost_savings import CostSavingsTip, CostSavingsTipCategory
from krishi_ai.models.market import MarketData, PriceTrend
from krishi_ai.models.soil_analysis import SoilTest
from krishi_ai.models.weather_alert import WeatherAlert, WeatherAlertType

# Expected saving per tip, in rupees.
ESTIMATED_SAVINGS = {
    CostSavingsTipCategory.SPRAY: 1250,
    CostSavingsTipCategory.FERTILIZER: 2000,
    CostSavingsTipCategory.IRRIGATION: 350,
    CostSavingsTipCategory.MARKET: 1250,
    CostSavingsTipCategory.SOIL: 1150,
    CostSavingsTipCategory.INPUT: 1000,
    CostSavingsTipCategory.ORGANIC: 550,
    CostSavingsTipCategory.VERIFY: 2750,
}

WET_WEATHER = frozenset({WeatherAlertType.RAIN, WeatherAlertType.STORM})
ALWAYS_SHOWN = (
    CostSavingsTipCategory.INPUT,
    CostSavingsTipCategory.ORGANIC,
    CostSavingsTipCategory.VERIFY,
)


def _tip(
    category: CostSavingsTipCategory,
    language,
    id_generator: IdGenerator,
    *,
    title: Optional[str] = None,
    reason: Optional[str] = None,
) -> CostSavingsTip:
    table = load_template_table("cost_savings")
    labels = localized(table["tips"][category.value], language)
    if reason is None and category.value in table["reasons"]:
        reason = localized(table["reasons"][category.value], language)
    return CostSavingsTip(
        id=id_generator(),
        category=category,
        title=title or labels["title"],
        description=labels["description"],
        action=labels["action"],
        estimated_savings=ESTIMATED_SAVINGS[category],
        reason=reason,
    )


def build_cost_savings_tips(
    weather_alerts: Sequence[WeatherAlert],
    market_items: Sequence[MarketData],
    soil_tests: Sequence[SoilTest],
    language,
    id_generator: IdGenerator,
) -> List[CostSavingsTip]:
    """Turn current alerts, prices and the latest soil test into money-saving tips.

    ``soil_tests`` is ordered most recent first.
    """
    tips = []

    if any(alert.type in WET_WEATHER for alert in weather_alerts):
        for category in (
            CostSavingsTipCategory.SPRAY,
            CostSavingsTipCategory.FERTILIZER,
            CostSavingsTipCategory.IRRIGATION,
        ):
            tips.append(_tip(category, language, id_generator))

    rising = next((m for m in market_items if m.trend is PriceTrend.UP), None)
    if rising is not None:
        market = load_template_table("cost_savings")["market"]
        tips.append(
            _tip(
                CostSavingsTipCategory.MARKET,
                language,
                id_generator,
                title=localized(market["title"], language).format(item=rising.item),
                reason=localized(market["reason"], language).format(item=rising.item),
            )
        )

    if soil_tests:
        latest = soil_tests[0]
        if latest.phosphorus >= 22 or latest.nitrogen >= 250:
            tips.append(_tip(CostSavingsTipCategory.SOIL, language, id_generator))

    for category in ALWAYS_SHOWN:
        tips.append(_tip(category, language, id_generator))
    return tips
