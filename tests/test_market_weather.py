import json

import pytest

from krishi_ai.models.assembly import FallbackReason, ResultSource
from krishi_ai.models.language import Language
from krishi_ai.models.market import PriceTrend
from krishi_ai.models.weather_alert import AlertSeverity, WeatherAlertType
from krishi_ai.services.market_service import get_market_data
from krishi_ai.services.weather_alert_service import get_weather_alerts

MARKET_ITEM = {
    "item": "Wheat (गेहूं)",
    "avgPrice": 2275,
    "unit": "Quintal",
    "trend": "up",
    "priceHistory": [{"date": "2026-02-01", "price": 2250}],
    "vendors": [
        {"name": "Indore APMC", "price": 2290, "distance": "12 km", "rating": 4.5, "isGovt": True}
    ],
}


@pytest.mark.asyncio
async def test_market_items_validated(stub_generator):
    stub_generator.response = "```json\n" + json.dumps([MARKET_ITEM]) + "\n```"
    result = await get_market_data("Indore", Language.HINDI, generator=stub_generator)

    assert result.source is ResultSource.AI
    item = result.value[0]
    assert item.avg_price == 2275
    assert item.trend is PriceTrend.UP
    assert item.vendors[0].is_govt is True


@pytest.mark.asyncio
async def test_empty_market_list_is_a_fallback(stub_generator):
    stub_generator.response = "[]"
    result = await get_market_data("Indore", Language.HINDI, generator=stub_generator)

    assert result.source is ResultSource.FALLBACK
    assert result.fallback_reason is FallbackReason.SHAPE_MISMATCH
    assert result.value == []


@pytest.mark.asyncio
async def test_one_bad_market_item_rejects_the_document(stub_generator):
    stub_generator.response = json.dumps([MARKET_ITEM, {"item": "Onion", "trend": "sideways"}])
    result = await get_market_data("Indore", Language.ENGLISH, generator=stub_generator)

    assert result.fallback_reason is FallbackReason.SHAPE_MISMATCH
    assert result.value == []


@pytest.mark.asyncio
async def test_market_object_instead_of_list(stub_generator):
    stub_generator.response = json.dumps(MARKET_ITEM)
    result = await get_market_data("Indore", Language.ENGLISH, generator=stub_generator)
    assert result.fallback_reason is FallbackReason.SHAPE_MISMATCH


@pytest.mark.asyncio
async def test_weather_alerts_accepted(stub_generator):
    stub_generator.response = (
        'Alerts: [{"type": "RAIN", "severity": "HIGH", "title": "Heavy rain",'
        ' "description": "60mm expected", "action": "Delay spraying"}]'
    )
    result = await get_weather_alerts("Nashik", Language.ENGLISH, generator=stub_generator)

    assert result.source is ResultSource.AI
    assert result.value[0].type is WeatherAlertType.RAIN
    assert result.value[0].severity is AlertSeverity.HIGH


@pytest.mark.asyncio
async def test_no_alerts_is_a_real_answer(stub_generator):
    stub_generator.response = "[]"
    result = await get_weather_alerts("Nashik", Language.ENGLISH, generator=stub_generator)

    assert result.source is ResultSource.AI
    assert result.value == []


@pytest.mark.asyncio
async def test_weather_failure_returns_empty_list(stub_generator):
    stub_generator.error = RuntimeError("boom")
    result = await get_weather_alerts("Nashik", Language.ENGLISH, generator=stub_generator)

    assert result.fallback_reason is FallbackReason.MODEL_ERROR
    assert result.value == []


@pytest.mark.asyncio
async def test_unknown_alert_type_rejected(stub_generator):
    stub_generator.response = json.dumps(
        [{"type": "TSUNAMI", "severity": "HIGH", "title": "t", "description": "d", "action": "a"}]
    )
    result = await get_weather_alerts("Nashik", Language.ENGLISH, generator=stub_generator)
    assert result.fallback_reason is FallbackReason.SHAPE_MISMATCH


@pytest.mark.asyncio
async def test_deeply_nested_market_output_falls_back(stub_generator):
    stub_generator.response = "[" * 100000 + "]" * 100000
    result = await get_market_data("Indore", Language.ENGLISH, generator=stub_generator)

    assert result.source is ResultSource.FALLBACK
    assert result.fallback_reason is FallbackReason.PARSE_FAILURE
    assert result.value == []


@pytest.mark.asyncio
async def test_weather_alerts_after_braced_prose(stub_generator):
    stub_generator.response = (
        'Alerts for {Pune}: [{"type": "STORM", "severity": "EXTREME", "title": "Cyclone",'
        ' "description": "Gusts of 90 km/h", "action": "Secure sheds"}]'
    )
    result = await get_weather_alerts("Pune", Language.ENGLISH, generator=stub_generator)

    assert result.source is ResultSource.AI
    assert result.value[0].type is WeatherAlertType.STORM


@pytest.mark.asyncio
async def test_market_items_after_braced_prose(stub_generator):
    stub_generator.response = "Prices in {Indore} mandi: " + json.dumps([MARKET_ITEM])
    result = await get_market_data("Indore", Language.ENGLISH, generator=stub_generator)

    assert result.source is ResultSource.AI
    assert result.value[0].item == "Wheat (गेहूं)"
