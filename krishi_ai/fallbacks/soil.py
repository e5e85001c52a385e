"""Rule-based soil analysis used whenever model output is unusable.

Classification follows Indian soil-test conventions (kg/ha for N, P and K,
percent for organic matter). Every function here is pure: the same readings
and language always produce the same result.

The summary verdict uses one rule in every language (see ``is_generally_good``).
English summaries used to call soil "generally good" on an optimal pH alone;
they now follow the same pH, nitrogen, phosphorus and potassium check as the
Hindi, Marathi and Gujarati text.
"""

from typing import Dict, FrozenSet, List

from krishi_ai.core.templates import format_number, load_template_table, localized
from krishi_ai.models.soil_analysis import (
    FertilizerRecommendation,
    NutrientAssessment,
    NutrientStatus,
    NutrientStatusReport,
    ProfitableCrop,
    SoilAnalysisResult,
    SoilInputs,
)

MAX_FALLBACK_FERTILIZERS = 3

# Statuses a model may legitimately report for each nutrient.
ALLOWED_STATUSES: Dict[str, FrozenSet[NutrientStatus]] = {
    "ph": frozenset({NutrientStatus.LOW, NutrientStatus.OPTIMAL, NutrientStatus.HIGH}),
    "nitrogen": frozenset(
        {
            NutrientStatus.DEFICIENT,
            NutrientStatus.MODERATE,
            NutrientStatus.SUFFICIENT,
            NutrientStatus.EXCESS,
        }
    ),
    "phosphorus": frozenset(
        {
            NutrientStatus.DEFICIENT,
            NutrientStatus.MODERATE,
            NutrientStatus.SUFFICIENT,
            NutrientStatus.EXCESS,
        }
    ),
    "potassium": frozenset(
        {
            NutrientStatus.DEFICIENT,
            NutrientStatus.MODERATE,
            NutrientStatus.SUFFICIENT,
            NutrientStatus.EXCESS,
        }
    ),
    "organic_matter": frozenset(
        {
            NutrientStatus.LOW,
            NutrientStatus.MODERATE,
            NutrientStatus.GOOD,
            NutrientStatus.HIGH,
        }
    ),
}


def classify_ph(ph: float) -> NutrientStatus:
    if ph < 6:
        return NutrientStatus.LOW
    if ph <= 7.5:
        return NutrientStatus.OPTIMAL
    return NutrientStatus.HIGH


def _three_band(value: float, deficient_below: float, moderate_upto: float) -> NutrientStatus:
    if value < deficient_below:
        return NutrientStatus.DEFICIENT
    if value <= moderate_upto:
        return NutrientStatus.MODERATE
    return NutrientStatus.SUFFICIENT


def classify_nitrogen(nitrogen: float) -> NutrientStatus:
    return _three_band(nitrogen, 250, 500)


def classify_phosphorus(phosphorus: float) -> NutrientStatus:
    return _three_band(phosphorus, 22, 56)


def classify_potassium(potassium: float) -> NutrientStatus:
    return _three_band(potassium, 33, 83)


def classify_organic_matter(organic_matter: float) -> NutrientStatus:
    if organic_matter < 0.5:
        return NutrientStatus.LOW
    if organic_matter <= 1.5:
        return NutrientStatus.MODERATE
    if organic_matter <= 3:
        return NutrientStatus.GOOD
    return NutrientStatus.HIGH


def _assessment(nutrient: str, status: NutrientStatus, language) -> NutrientAssessment:
    table = load_template_table("soil_fallback")
    text = localized(table["nutrients"][nutrient][status.value], language)
    return NutrientAssessment(
        status=status, interpretation=text["interpretation"], action=text["action"]
    )


def _fertilizer(key: str, language) -> FertilizerRecommendation:
    entry = localized(load_template_table("soil_fallback")["fertilizers"][key], language)
    return FertilizerRecommendation(**entry)


def recommend_fertilizers(
    nitrogen: NutrientStatus,
    phosphorus: NutrientStatus,
    potassium: NutrientStatus,
    language,
) -> List[FertilizerRecommendation]:
    recommendations = []
    if NutrientStatus.DEFICIENT in (nitrogen, phosphorus):
        recommendations.append(_fertilizer("dap", language))
    if nitrogen is NutrientStatus.DEFICIENT and len(recommendations) < 2:
        recommendations.append(_fertilizer("urea", language))
    if potassium is NutrientStatus.DEFICIENT:
        recommendations.append(_fertilizer("mop", language))
    if not recommendations:
        recommendations.append(_fertilizer("balanced_npk", language))
    return recommendations[:MAX_FALLBACK_FERTILIZERS]


def is_generally_good(report: NutrientStatusReport) -> bool:
    return (
        report.ph.status is NutrientStatus.OPTIMAL
        and report.nitrogen.status is NutrientStatus.MODERATE
        and report.phosphorus.status is not NutrientStatus.DEFICIENT
        and report.potassium.status is not NutrientStatus.DEFICIENT
    )


def compute_soil_fallback(inputs: SoilInputs, language) -> SoilAnalysisResult:
    """Build a complete soil analysis from the readings alone."""
    table = load_template_table("soil_fallback")

    report = NutrientStatusReport(
        ph=_assessment("ph", classify_ph(inputs.ph), language),
        nitrogen=_assessment("nitrogen", classify_nitrogen(inputs.nitrogen), language),
        phosphorus=_assessment(
            "phosphorus", classify_phosphorus(inputs.phosphorus), language
        ),
        potassium=_assessment("potassium", classify_potassium(inputs.potassium), language),
        organic_matter=_assessment(
            "organic_matter", classify_organic_matter(inputs.organic_matter), language
        ),
    )

    summary_text = localized(table["summary"], language)
    verdict = summary_text["good"] if is_generally_good(report) else summary_text["needs_work"]
    summary = summary_text["template"].format(
        ph=format_number(inputs.ph),
        nitrogen=format_number(inputs.nitrogen),
        phosphorus=format_number(inputs.phosphorus),
        potassium=format_number(inputs.potassium),
        organic_matter=format_number(inputs.organic_matter),
        verdict=verdict,
    )

    tip_key = "low_organic_matter" if inputs.organic_matter < 1 else "maintain"
    warnings = []
    if inputs.ph < 5.5 or inputs.ph > 8:
        warnings.append(localized(table["warnings"]["extreme_ph"], language))

    return SoilAnalysisResult(
        summary=summary,
        nutrient_status=report,
        fertilizer_recommendations=recommend_fertilizers(
            report.nitrogen.status,
            report.phosphorus.status,
            report.potassium.status,
            language,
        ),
        suitable_crops=list(localized(table["suitable_crops"], language)),
        profitable_crops=[
            ProfitableCrop(**entry)
            for entry in localized(table["profitable_crops"], language)
        ],
        farm_management=list(localized(table["farm_management"], language)),
        improvement_tips=[localized(table["improvement_tips"][tip_key], language)],
        warnings=warnings,
    )
