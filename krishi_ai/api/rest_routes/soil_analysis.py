from fastapi import APIRouter, Depends

from krishi_ai.core.genai_client import TextGenerator, get_text_generator
from krishi_ai.models.assembly import AssembledResult
from krishi_ai.models.soil_analysis import SoilAnalysisRequest, SoilAnalysisResult
from krishi_ai.services.soil_analysis_service import get_soil_test_analysis

router = APIRouter(prefix="/soil-analysis", tags=["Soil Analysis"])


@router.post("", response_model=AssembledResult[SoilAnalysisResult])
async def analyze_soil(
    request: SoilAnalysisRequest,
    generator: TextGenerator = Depends(get_text_generator),
):
    """
    Analyze a soil test. Always answers; ``fallback_fields`` lists the parts
    computed from the readings instead of the model.
    """
    return await get_soil_test_analysis(
        request.soil, request.language, generator=generator
    )
