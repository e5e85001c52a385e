from typing import List

from fastapi import APIRouter, Depends, Query

from krishi_ai.core.genai_client import TextGenerator, get_text_generator
from krishi_ai.models.assembly import AssembledResult
from krishi_ai.models.language import Language
from krishi_ai.models.weather_alert import WeatherAlert
from krishi_ai.services.weather_alert_service import get_weather_alerts

router = APIRouter(prefix="/weather-alerts", tags=["Weather"])


@router.get("", response_model=AssembledResult[List[WeatherAlert]])
async def weather_alerts(
    location: str = Query(..., min_length=1, description="District or state"),
    language: Language = Query(Language.HINDI),
    generator: TextGenerator = Depends(get_text_generator),
):
    return await get_weather_alerts(location, language, generator=generator)
