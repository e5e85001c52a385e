from fastapi import APIRouter, Depends

from krishi_ai.core.genai_client import TextGenerator, get_text_generator
from krishi_ai.models.advisory import AdvisoryRequest, AdvisoryResponse
from krishi_ai.models.assembly import AssembledResult
from krishi_ai.services.advisory_service import get_crop_advisory

router = APIRouter(prefix="/advisory", tags=["Advisory"])


@router.post("", response_model=AssembledResult[AdvisoryResponse])
async def crop_advisory(
    request: AdvisoryRequest,
    generator: TextGenerator = Depends(get_text_generator),
):
    return await get_crop_advisory(
        request.crop,
        request.stage,
        request.soil_type,
        request.language,
        generator=generator,
    )
