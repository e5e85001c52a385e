from typing import List

from fastapi import APIRouter, Depends, Query

from krishi_ai.core.genai_client import TextGenerator, get_text_generator
from krishi_ai.models.assembly import AssembledResult
from krishi_ai.models.language import Language
from krishi_ai.models.market import MarketData
from krishi_ai.services.market_service import get_market_data

router = APIRouter(prefix="/market", tags=["Market"])


@router.get("", response_model=AssembledResult[List[MarketData]])
async def market_prices(
    location: str = Query(..., min_length=1, description="District or state"),
    language: Language = Query(Language.HINDI),
    generator: TextGenerator = Depends(get_text_generator),
):
    """
    Mandi prices near a location. An empty list means no data could be fetched.
    """
    return await get_market_data(location, language, generator=generator)
