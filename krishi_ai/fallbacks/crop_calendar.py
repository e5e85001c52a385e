"""Static crop calendar served when no usable plan comes back from the model.

Tasks run every two to four days from two weeks before sowing through harvest,
with quantity hints scaled to the plot size.
"""

import math
from typing import Any, List, Mapping

from krishi_ai.core.templates import format_number, load_template_table, localized
from krishi_ai.models.crop_calendar import CropCalendarTaskTemplate

DEFAULT_CROP_DURATION_DAYS = 110
LONG_SEASON_DAYS = 100


def crop_duration_days(crop: str) -> int:
    durations = load_template_table("crop_calendar_fallback")["durations"]
    return durations.get(crop.strip().lower(), DEFAULT_CROP_DURATION_DAYS)


def _render_task(
    task: Mapping[str, Any], day: int, land_acres: float, language
) -> CropCalendarTaskTemplate:
    hints = load_template_table("crop_calendar_fallback")["hints"]
    # Halves round up.
    qty = math.floor(task.get("qty_per_acre", 0) * land_acres + 0.5)
    return CropCalendarTaskTemplate(
        day_from_sowing=day,
        stage=task["stage"],
        title=localized(task["title"], language),
        description=localized(task["description"], language),
        quantity_hint=localized(hints[task["hint"]], language).format(
            acres=format_number(land_acres), qty=qty
        ),
    )


def static_calendar_tasks(
    crop: str, land_acres: float, language
) -> List[CropCalendarTaskTemplate]:
    table = load_template_table("crop_calendar_fallback")
    tasks = [
        _render_task(task, task["day"], land_acres, language) for task in table["tasks"]
    ]

    total_days = crop_duration_days(crop)
    if total_days > LONG_SEASON_DAYS and tasks[-1].day_from_sowing < total_days - 5:
        tasks.append(
            _render_task(table["final_harvest"], total_days - 5, land_acres, language)
        )
    return tasks
