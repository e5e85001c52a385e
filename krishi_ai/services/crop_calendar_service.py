import logging
from datetime import date, timedelta
from typing import Any, List, Optional, Sequence

from pydantic import ValidationError

from krishi_ai.core.genai_client import TextGenerator
from krishi_ai.core.ids import IdGenerator, uuid_id_generator
from krishi_ai.core.templates import format_number
from krishi_ai.fallbacks.crop_calendar import static_calendar_tasks
from krishi_ai.models.assembly import AssembledResult, AssemblyState, FallbackReason
from krishi_ai.models.crop_calendar import (
    CalendarTask,
    CropCalendar,
    CropCalendarTaskTemplate,
    FarmPlan,
)
from krishi_ai.models.language import Language, get_language_name
from krishi_ai.normalization.keys import FieldSpec, lookup_key, normalize_keys
from krishi_ai.normalization.validators import accept_list, accept_number, accept_string
from krishi_ai.prompts.crop_calendar_prompt import CROP_CALENDAR_PROMPT
from krishi_ai.services.assembly_runtime import AssemblyRuntime, ModelCallFailed

logger = logging.getLogger(__name__)

DEFAULT_STAGE = "Vegetative"
DEFAULT_TITLE = "Task"

TASK_FIELDS = (
    FieldSpec("day_from_sowing", ("dayFromSowing", "day_from_sowing", "day")),
    FieldSpec("stage", ("stage",)),
    FieldSpec("title", ("title",)),
    FieldSpec("description", ("description",)),
    FieldSpec("quantity_hint", ("quantityHint", "quantity_hint")),
)


def normalize_task(value: Any) -> dict:
    """Coerce one model task; missing text gets a neutral default, a missing day means sowing day."""
    fields = normalize_keys(value, TASK_FIELDS)
    day = accept_number(fields["day_from_sowing"])
    return {
        "day_from_sowing": int(day) if day is not None else 0,
        "stage": accept_string(fields["stage"]) or DEFAULT_STAGE,
        "title": accept_string(fields["title"]) or DEFAULT_TITLE,
        "description": accept_string(fields["description"]) or "",
        "quantity_hint": accept_string(fields["quantity_hint"]),
    }


async def generate_crop_calendar(
    crop: str,
    land_acres: float,
    sowing_date: date,
    location: str,
    soil_type: Optional[str],
    language: Language,
    *,
    generator: TextGenerator,
) -> AssembledResult[CropCalendar]:
    runtime = AssemblyRuntime(
        action="crop_calendar",
        fallback_for=lambda reason: CropCalendar(
            tasks=static_calendar_tasks(crop, land_acres, language)
        ),
        generator=generator,
    )
    prompt = CROP_CALENDAR_PROMPT.format(
        crop=crop,
        land_acres=format_number(land_acres),
        sowing_date=sowing_date.isoformat(),
        location=location,
        soil_context=f" Soil type: {soil_type}." if soil_type else "",
        language_name=get_language_name(language),
    )
    try:
        data = await runtime.fetch(prompt)
    except ModelCallFailed as e:
        return runtime.fail(e.reason)

    tasks = accept_list(lookup_key(data, ("tasks",)))
    if tasks is None:
        logger.warning("crop_calendar: no tasks in model output, using static calendar")
        return runtime.fail(FallbackReason.SHAPE_MISMATCH)

    runtime.advance(AssemblyState.VALIDATING)
    try:
        calendar = CropCalendar(
            tasks=[CropCalendarTaskTemplate(**normalize_task(task)) for task in tasks]
        )
    except ValidationError as e:
        logger.warning("crop_calendar: model output rejected: %s", e)
        return runtime.fail(FallbackReason.SHAPE_MISMATCH)
    return runtime.complete(calendar)


def map_templates_to_tasks(
    farm_plan: FarmPlan,
    templates: Sequence[CropCalendarTaskTemplate],
    id_generator: IdGenerator = uuid_id_generator,
) -> List[CalendarTask]:
    """Place relative task templates on the calendar of ``farm_plan``."""
    return [
        CalendarTask(
            id=id_generator(),
            farm_plan_id=farm_plan.id,
            date=farm_plan.sowing_date + timedelta(days=template.day_from_sowing),
            stage=template.stage,
            title=template.title,
            description=template.description,
            quantity_hint=template.quantity_hint,
        )
        for template in templates
    ]
