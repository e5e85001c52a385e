import base64
import binascii

from fastapi import APIRouter, Depends, HTTPException, status

from krishi_ai.core.genai_client import TextGenerator, get_text_generator
from krishi_ai.models.assembly import AssembledResult
from krishi_ai.models.verification import (
    BatchCodeRequest,
    ImageVerificationRequest,
    VerificationResult,
)
from krishi_ai.services.verification_service import verify_batch_code, verify_product_image

router = APIRouter(prefix="/verification", tags=["Verification"])


@router.post("/batch-code", response_model=AssembledResult[VerificationResult])
async def check_batch_code(request: BatchCodeRequest):
    """
    Check a printed batch code against known counterfeit and genuine lots.
    """
    return await verify_batch_code(request.code, request.language)


@router.post("/image", response_model=AssembledResult[VerificationResult])
async def check_product_image(
    request: ImageVerificationRequest,
    generator: TextGenerator = Depends(get_text_generator),
):
    """
    Ask the model to judge a photo of an input package.
    """
    try:
        base64.b64decode(request.image_base64, validate=True)
    except (binascii.Error, ValueError):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="image_base64 is not valid base64",
        )
    return await verify_product_image(
        request.image_base64,
        request.language,
        generator=generator,
        mime_type=request.mime_type,
    )
