"""Soil test analysis: model output merged field by field over a rule-based result.

The rule-based analysis is always computed first. Every top-level field the
model gets right is kept; every field it omits or gets wrong is replaced by
the rule-based value and named in ``fallback_fields``.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from krishi_ai.core.genai_client import TextGenerator
from krishi_ai.core.templates import format_number
from krishi_ai.fallbacks.soil import ALLOWED_STATUSES, compute_soil_fallback
from krishi_ai.models.assembly import AssembledResult, AssemblyState, FallbackReason
from krishi_ai.models.language import Language, get_language_name
from krishi_ai.models.soil_analysis import (
    FertilizerRecommendation,
    NutrientAssessment,
    NutrientStatus,
    NutrientStatusReport,
    ProfitableCrop,
    SoilAnalysisResult,
    SoilInputs,
)
from krishi_ai.normalization.keys import ABSENT, FieldSpec, normalize_keys
from krishi_ai.normalization.validators import (
    SUMMARY_MIN_LENGTH,
    accept_choice,
    accept_record_list,
    accept_string,
    accept_string_list,
)
from krishi_ai.prompts.soil_analysis_prompt import SOIL_ANALYSIS_PROMPT
from krishi_ai.services.assembly_runtime import AssemblyRuntime, ModelCallFailed

logger = logging.getLogger(__name__)

MISSING_TEXT = "—"

SOIL_FIELDS = (
    FieldSpec("summary", ("summary",)),
    FieldSpec("nutrient_status", ("nutrientStatus", "nutrient_status")),
    FieldSpec(
        "fertilizer_recommendations",
        ("fertilizerRecommendations", "fertilizer_recommendations"),
    ),
    FieldSpec("suitable_crops", ("suitableCrops", "suitable_crops")),
    FieldSpec("profitable_crops", ("profitableCrops", "profitable_crops")),
    FieldSpec("farm_management", ("farmManagement", "farm_management")),
    FieldSpec("improvement_tips", ("improvementTips", "improvement_tips")),
    FieldSpec("warnings", ("warnings",)),
)

NUTRIENT_FIELDS = (
    FieldSpec("ph", ("pH", "ph", "Ph")),
    FieldSpec("nitrogen", ("nitrogen", "Nitrogen", "nitrogen_kg_ha")),
    FieldSpec("phosphorus", ("phosphorus", "Phosphorus", "phosphorus_kg_ha")),
    FieldSpec("potassium", ("potassium", "Potassium", "potassium_kg_ha")),
    FieldSpec("organic_matter", ("organicMatter", "organic_matter", "OrganicMatter")),
)

ASSESSMENT_FIELDS = (
    FieldSpec("status", ("status",)),
    FieldSpec("interpretation", ("interpretation",)),
    FieldSpec("action", ("action",)),
)

FERTILIZER_FIELDS = (
    FieldSpec("name", ("name", "Name")),
    FieldSpec("dosage", ("dosage", "Dosage")),
    FieldSpec("timing", ("timing", "Timing")),
    FieldSpec("notes", ("notes", "Notes")),
)

PROFITABLE_CROP_FIELDS = (
    FieldSpec("crop", ("crop", "Crop")),
    FieldSpec("profit_note", ("profitNote", "profit_note", "reason")),
    FieldSpec("estimated_margin", ("estimatedMargin", "estimated_margin", "margin")),
)


def _text(value: Any) -> Optional[str]:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    return accept_string(value)


def accept_assessment(value: Any, nutrient: str) -> Optional[NutrientAssessment]:
    """A nutrient assessment is taken only as a whole: known status plus both texts."""
    fields = normalize_keys(value, ASSESSMENT_FIELDS)
    allowed = sorted(status.value for status in ALLOWED_STATUSES[nutrient])
    status = accept_choice(fields["status"], allowed)
    interpretation = accept_string(fields["interpretation"])
    action = accept_string(fields["action"])
    if status is None or interpretation is None or action is None:
        return None
    return NutrientAssessment(
        status=NutrientStatus(status), interpretation=interpretation, action=action
    )


def merge_nutrient_status(
    value: Any, fallback: NutrientStatusReport
) -> tuple[NutrientStatusReport, List[str]]:
    nutrients = normalize_keys(value, NUTRIENT_FIELDS)
    merged: Dict[str, NutrientAssessment] = {}
    replaced = []
    for spec in NUTRIENT_FIELDS:
        assessment = accept_assessment(nutrients[spec.name], spec.name)
        if assessment is None:
            assessment = getattr(fallback, spec.name)
            replaced.append(f"nutrient_status.{spec.name}")
        merged[spec.name] = assessment
    return NutrientStatusReport(**merged), replaced


def accept_fertilizers(value: Any) -> Optional[List[FertilizerRecommendation]]:
    records = accept_record_list(value, [("name", "Name"), ("dosage", "Dosage")])
    if records is None:
        return None
    recommendations = []
    for record in records:
        fields = normalize_keys(record, FERTILIZER_FIELDS)
        recommendations.append(
            FertilizerRecommendation(
                name=_text(fields["name"]) or MISSING_TEXT,
                dosage=_text(fields["dosage"]) or MISSING_TEXT,
                timing=_text(fields["timing"]) or MISSING_TEXT,
                notes=_text(fields["notes"]),
            )
        )
    return recommendations


def accept_profitable_crops(value: Any) -> Optional[List[ProfitableCrop]]:
    records = accept_record_list(value, [("crop", "Crop")])
    if records is None:
        return None
    crops = []
    for record in records:
        fields = normalize_keys(record, PROFITABLE_CROP_FIELDS)
        crops.append(
            ProfitableCrop(
                crop=_text(fields["crop"]) or MISSING_TEXT,
                profit_note=_text(fields["profit_note"]) or MISSING_TEXT,
                estimated_margin=_text(fields["estimated_margin"]),
            )
        )
    return crops


def merge_soil_analysis(
    data: Any, fallback: SoilAnalysisResult
) -> tuple[SoilAnalysisResult, List[str]]:
    """Merge extracted model JSON over ``fallback``; returns the result and the replaced fields."""
    fields = normalize_keys(data, SOIL_FIELDS)
    replaced: List[str] = []

    def pick(name: str, accepted: Any) -> Any:
        if accepted is None:
            fallback_value = getattr(fallback, name)
            # An empty warnings list from the model agrees with an empty rule-based one.
            if name != "warnings" or fallback_value:
                replaced.append(name)
            return fallback_value
        return accepted

    nutrient_status, nutrients_replaced = merge_nutrient_status(
        fields["nutrient_status"], fallback.nutrient_status
    )
    replaced.extend(nutrients_replaced)

    result = SoilAnalysisResult(
        summary=pick(
            "summary", accept_string(fields["summary"], min_length=SUMMARY_MIN_LENGTH)
        ),
        nutrient_status=nutrient_status,
        fertilizer_recommendations=pick(
            "fertilizer_recommendations",
            accept_fertilizers(fields["fertilizer_recommendations"]),
        ),
        suitable_crops=pick("suitable_crops", accept_string_list(fields["suitable_crops"])),
        profitable_crops=pick(
            "profitable_crops", accept_profitable_crops(fields["profitable_crops"])
        ),
        farm_management=pick(
            "farm_management", accept_string_list(fields["farm_management"])
        ),
        improvement_tips=pick(
            "improvement_tips", accept_string_list(fields["improvement_tips"])
        ),
        warnings=pick("warnings", accept_string_list(fields["warnings"])),
    )
    return result, replaced


def build_soil_prompt(inputs: SoilInputs, language) -> str:
    return SOIL_ANALYSIS_PROMPT.format(
        ph=format_number(inputs.ph),
        nitrogen=format_number(inputs.nitrogen),
        phosphorus=format_number(inputs.phosphorus),
        potassium=format_number(inputs.potassium),
        organic_matter=format_number(inputs.organic_matter),
        location=inputs.location or "Not specified",
        crop=inputs.crop or "General",
        market_location=inputs.location or "India",
        language_name=get_language_name(language),
    )


async def get_soil_test_analysis(
    inputs: SoilInputs,
    language: Language,
    *,
    generator: TextGenerator,
) -> AssembledResult[SoilAnalysisResult]:
    runtime = AssemblyRuntime(
        action="soil_analysis",
        fallback_for=lambda reason: compute_soil_fallback(inputs, language),
        generator=generator,
    )
    try:
        data = await runtime.fetch(build_soil_prompt(inputs, language))
    except ModelCallFailed as e:
        return runtime.fail(e.reason)

    if not isinstance(data, Mapping) or all(
        value is ABSENT for value in normalize_keys(data, SOIL_FIELDS).values()
    ):
        logger.warning("soil_analysis: model JSON has no recognizable fields")
        return runtime.fail(FallbackReason.SHAPE_MISMATCH)

    runtime.advance(AssemblyState.VALIDATING)
    result, replaced = merge_soil_analysis(data, runtime.fallback)
    if replaced:
        logger.warning("soil_analysis: fields filled from rules: %s", ", ".join(replaced))
    return runtime.complete(result, fallback_fields=replaced)
