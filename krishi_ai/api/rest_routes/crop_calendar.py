from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from krishi_ai.core.genai_client import TextGenerator, get_text_generator
from krishi_ai.models.assembly import AssembledResult
from krishi_ai.models.crop_calendar import (
    CalendarTask,
    CalendarTasksRequest,
    CropCalendar,
    CropCalendarRequest,
)
from krishi_ai.services.crop_calendar_service import (
    generate_crop_calendar,
    map_templates_to_tasks,
)

router = APIRouter(prefix="/crop-calendar", tags=["Crop Calendar"])


@router.post("", response_model=AssembledResult[CropCalendar])
async def create_crop_calendar(
    request: CropCalendarRequest,
    generator: TextGenerator = Depends(get_text_generator),
):
    return await generate_crop_calendar(
        request.crop,
        request.land_acres,
        request.sowing_date,
        request.location,
        request.soil_type,
        request.language,
        generator=generator,
    )


@router.post("/tasks", response_model=List[CalendarTask])
async def schedule_calendar_tasks(request: CalendarTasksRequest):
    """
    Turn task templates into dated tasks for a farm plan.
    """
    try:
        return map_templates_to_tasks(request.farm_plan, request.templates)
    except OverflowError:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Task dates fall outside the supported calendar range",
        )
