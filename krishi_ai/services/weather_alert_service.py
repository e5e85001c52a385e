import logging
from typing import List

from pydantic import TypeAdapter, ValidationError

from krishi_ai.core.genai_client import TextGenerator
from krishi_ai.models.assembly import AssembledResult, AssemblyState, FallbackReason
from krishi_ai.models.language import Language, get_language_name
from krishi_ai.models.weather_alert import WeatherAlert
from krishi_ai.prompts.weather_alert_prompt import WEATHER_ALERT_PROMPT
from krishi_ai.services.assembly_runtime import AssemblyRuntime, ModelCallFailed

logger = logging.getLogger(__name__)

ALERT_LIST = TypeAdapter(List[WeatherAlert])


async def get_weather_alerts(
    location: str,
    language: Language,
    *,
    generator: TextGenerator,
) -> AssembledResult[List[WeatherAlert]]:
    # An empty list is a real answer here: no severe weather.
    runtime = AssemblyRuntime(
        action="weather_alerts",
        fallback_for=lambda reason: [],
        generator=generator,
    )
    prompt = WEATHER_ALERT_PROMPT.format(
        location=location, language_name=get_language_name(language)
    )
    try:
        data = await runtime.fetch(prompt)
    except ModelCallFailed as e:
        return runtime.fail(e.reason)

    if not isinstance(data, list):
        logger.warning("weather_alerts: expected a JSON array, got %s", type(data).__name__)
        return runtime.fail(FallbackReason.SHAPE_MISMATCH)

    runtime.advance(AssemblyState.VALIDATING)
    try:
        alerts = ALERT_LIST.validate_python(data)
    except ValidationError as e:
        logger.warning("weather_alerts: model output rejected: %s", e)
        return runtime.fail(FallbackReason.SHAPE_MISMATCH)
    return runtime.complete(alerts)
