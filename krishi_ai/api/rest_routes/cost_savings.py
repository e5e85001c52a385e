from typing import List

from fastapi import APIRouter

from krishi_ai.models.cost_savings import CostSavingsRequest, CostSavingsTip
from krishi_ai.services.cost_savings_service import get_cost_savings_tips

router = APIRouter(prefix="/cost-savings", tags=["Cost Savings"])


@router.post("/tips", response_model=List[CostSavingsTip])
async def cost_savings_tips(request: CostSavingsRequest):
    return get_cost_savings_tips(
        request.location,
        request.weather_alerts,
        request.market_items,
        request.soil_tests,
        request.language,
    )
