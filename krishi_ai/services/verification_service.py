import logging
from typing import Any, Mapping

from pydantic import ValidationError

from krishi_ai.core.genai_client import TextGenerator
from krishi_ai.fallbacks.verification import classify_batch_code, image_verification_fallback
from krishi_ai.models.assembly import (
    AssembledResult,
    AssemblyState,
    FallbackReason,
    ResultSource,
)
from krishi_ai.models.language import Language, get_language_name
from krishi_ai.models.verification import VerificationResult, VerificationStatus
from krishi_ai.normalization.keys import ABSENT, FieldSpec, normalize_keys
from krishi_ai.normalization.validators import accept_choice, accept_number, accept_string
from krishi_ai.prompts.verification_prompt import IMAGE_VERIFICATION_PROMPT
from krishi_ai.services.assembly_runtime import AssemblyRuntime, ModelCallFailed

logger = logging.getLogger(__name__)

VERIFICATION_FIELDS = (
    FieldSpec("status", ("status",)),
    FieldSpec("product_name", ("productName", "product_name")),
    FieldSpec("manufacturer", ("manufacturer",)),
    FieldSpec("batch_code", ("batchCode", "batch_code", "lotNumber")),
    FieldSpec("confidence", ("confidence",)),
    FieldSpec("reasoning", ("reasoning",)),
    FieldSpec("safety_check", ("safetyCheck", "safety_check")),
    FieldSpec("online_evidence", ("onlineEvidence", "online_evidence")),
)


def normalize_verification(data: Any) -> dict:
    """Canonical keys with light coercion; pydantic decides whether the document is usable."""
    fields = normalize_keys(data, VERIFICATION_FIELDS)
    document = {name: value for name, value in fields.items() if value is not ABSENT}
    status = accept_choice(fields["status"], [s.value for s in VerificationStatus])
    if status is not None:
        document["status"] = status
    confidence = accept_number(fields["confidence"])
    if confidence is not None:
        document["confidence"] = confidence
    for name in ("batch_code", "online_evidence"):
        if name in document and accept_string(document[name]) is None:
            del document[name]
    return document


async def verify_product_image(
    image: str,
    language: Language = Language.HINDI,
    *,
    generator: TextGenerator,
    mime_type: str = "image/jpeg",
) -> AssembledResult[VerificationResult]:
    runtime = AssemblyRuntime(
        action="verify_product_image",
        fallback_for=lambda reason: image_verification_fallback(language),
        generator=generator,
    )
    prompt = IMAGE_VERIFICATION_PROMPT.format(language_name=get_language_name(language))
    try:
        data = await runtime.fetch(prompt, image=image, mime_type=mime_type)
    except ModelCallFailed as e:
        return runtime.fail(e.reason)

    if not isinstance(data, Mapping):
        logger.warning("verify_product_image: expected a JSON object, got %s", type(data).__name__)
        return runtime.fail(FallbackReason.SHAPE_MISMATCH)

    document = normalize_verification(data)
    runtime.advance(AssemblyState.VALIDATING)
    try:
        result = VerificationResult.model_validate(document)
    except ValidationError as e:
        logger.warning("verify_product_image: model output rejected: %s", e)
        return runtime.fail(FallbackReason.SHAPE_MISMATCH)
    # Sources are only filled from grounded search, which image checks do not use.
    result.sources = []
    return runtime.complete(result)


async def verify_batch_code(
    code: str, language: Language = Language.HINDI
) -> AssembledResult[VerificationResult]:
    result = classify_batch_code(code, language)
    logger.info("verify_batch_code: %s -> %s", code, result.status.value)
    return AssembledResult[VerificationResult](
        value=result, source=ResultSource.RULES, state=AssemblyState.ASSEMBLED
    )
