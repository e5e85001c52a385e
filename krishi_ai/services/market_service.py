import logging
from typing import List

from pydantic import TypeAdapter, ValidationError

from krishi_ai.core.genai_client import TextGenerator
from krishi_ai.models.assembly import AssembledResult, AssemblyState, FallbackReason
from krishi_ai.models.language import Language, get_language_name
from krishi_ai.models.market import MarketData
from krishi_ai.prompts.market_prompt import MARKET_DATA_PROMPT
from krishi_ai.services.assembly_runtime import AssemblyRuntime, ModelCallFailed

logger = logging.getLogger(__name__)

MARKET_LIST = TypeAdapter(List[MarketData])


async def get_market_data(
    location: str,
    language: Language,
    *,
    generator: TextGenerator,
) -> AssembledResult[List[MarketData]]:
    """Mandi prices for ``location``; an empty list when nothing usable comes back."""
    runtime = AssemblyRuntime(
        action="market_data",
        fallback_for=lambda reason: [],
        generator=generator,
    )
    prompt = MARKET_DATA_PROMPT.format(
        location=location, language_name=get_language_name(language)
    )
    try:
        data = await runtime.fetch(prompt)
    except ModelCallFailed as e:
        return runtime.fail(e.reason)

    if not isinstance(data, list) or not data:
        logger.warning("market_data: no market items in model output")
        return runtime.fail(FallbackReason.SHAPE_MISMATCH)

    runtime.advance(AssemblyState.VALIDATING)
    try:
        items = MARKET_LIST.validate_python(data)
    except ValidationError as e:
        logger.warning("market_data: model output rejected: %s", e)
        return runtime.fail(FallbackReason.SHAPE_MISMATCH)
    return runtime.complete(items)
