import logging
from typing import Any, Mapping

from pydantic import ValidationError

from krishi_ai.core.genai_client import TextGenerator
from krishi_ai.fallbacks.advisory import default_advisory
from krishi_ai.models.advisory import AdvisoryResponse
from krishi_ai.models.assembly import AssembledResult, AssemblyState, FallbackReason
from krishi_ai.models.language import Language, get_language_name
from krishi_ai.normalization.keys import ABSENT, FieldSpec, normalize_keys
from krishi_ai.normalization.validators import accept_string
from krishi_ai.prompts.advisory_prompt import CROP_ADVISORY_PROMPT
from krishi_ai.services.assembly_runtime import AssemblyRuntime, ModelCallFailed

logger = logging.getLogger(__name__)

ADVISORY_FIELDS = (
    FieldSpec("crop", ("crop",)),
    FieldSpec("stage", ("stage",)),
    FieldSpec("recommendations", ("recommendations",)),
    FieldSpec("schedule", ("schedule",)),
    FieldSpec("weather_risk", ("weatherRisk", "weather_risk")),
    FieldSpec("warnings", ("warnings",)),
)

RECOMMENDATION_FIELDS = (
    FieldSpec("fertilizer", ("fertilizer",)),
    FieldSpec("dosage", ("dosage",)),
    FieldSpec("pest_control", ("pestControl", "pest_control")),
    FieldSpec("cost_saving_tip", ("costSavingTip", "cost_saving_tip")),
    FieldSpec("soil_health_impact", ("soilHealthImpact", "soil_health_impact")),
)


def _present(fields: dict) -> dict:
    return {name: value for name, value in fields.items() if value is not ABSENT}


def normalize_advisory(data: Any, crop: str, stage: str) -> dict:
    fields = normalize_keys(data, ADVISORY_FIELDS)
    document = _present(fields)
    document["crop"] = accept_string(fields["crop"]) or crop
    document["stage"] = accept_string(fields["stage"]) or stage
    if isinstance(fields["recommendations"], Mapping):
        document["recommendations"] = _present(
            normalize_keys(fields["recommendations"], RECOMMENDATION_FIELDS)
        )
    if "warnings" not in document:
        document["warnings"] = []
    return document


async def get_crop_advisory(
    crop: str,
    stage: str,
    soil_type: str,
    language: Language,
    *,
    generator: TextGenerator,
) -> AssembledResult[AdvisoryResponse]:
    runtime = AssemblyRuntime(
        action="crop_advisory",
        fallback_for=lambda reason: default_advisory(
            crop,
            stage,
            language,
            unavailable=reason
            in (FallbackReason.MODEL_ERROR, FallbackReason.MODEL_TIMEOUT),
        ),
        generator=generator,
    )
    prompt = CROP_ADVISORY_PROMPT.format(
        crop=crop,
        stage=stage,
        soil_type=soil_type or "Not specified",
        language_name=get_language_name(language),
    )
    try:
        data = await runtime.fetch(prompt)
    except ModelCallFailed as e:
        return runtime.fail(e.reason)

    if not isinstance(data, Mapping):
        logger.warning("crop_advisory: expected a JSON object, got %s", type(data).__name__)
        return runtime.fail(FallbackReason.SHAPE_MISMATCH)

    document = normalize_advisory(data, crop, stage)
    runtime.advance(AssemblyState.VALIDATING)
    try:
        advisory = AdvisoryResponse.model_validate(document)
    except ValidationError as e:
        logger.warning("crop_advisory: model output rejected, returning default: %s", e)
        return runtime.fail(FallbackReason.SHAPE_MISMATCH)
    return runtime.complete(advisory)
