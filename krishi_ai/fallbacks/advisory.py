from krishi_ai.core.templates import load_template_table, localized
from krishi_ai.models.advisory import AdvisoryResponse


def default_advisory(crop: str, stage: str, language, *, unavailable: bool) -> AdvisoryResponse:
    """Generic crop advice.

    ``unavailable`` selects the shorter variant used when the model could not
    be reached at all, as opposed to answering with something unusable.
    """
    variant = "unavailable" if unavailable else "default"
    entry = localized(load_template_table("advisory_fallback")[variant], language)
    return AdvisoryResponse(
        crop=crop,
        stage=stage,
        recommendations=dict(entry["recommendations"]),
        schedule=[dict(item) for item in entry["schedule"]],
        weather_risk=entry["weather_risk"],
        warnings=list(entry["warnings"]),
    )
