from datetime import date, datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field

from krishi_ai.models.language import Language

# Up to a year before sowing and ten years after it.
MIN_DAY_FROM_SOWING = -365
MAX_DAY_FROM_SOWING = 3650


class CropCalendarTaskTemplate(BaseModel):
    """A task positioned relative to sowing; negative days fall before sowing."""

    day_from_sowing: int = Field(
        ...,
        ge=MIN_DAY_FROM_SOWING,
        le=MAX_DAY_FROM_SOWING,
        validation_alias=AliasChoices("day_from_sowing", "dayFromSowing"),
    )
    stage: str = Field(
        ..., description="Land prep, Sowing, Vegetative, Flowering, Fruiting or Harvest."
    )
    title: str
    description: str = Field(default="")
    quantity_hint: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("quantity_hint", "quantityHint")
    )


class CropCalendar(BaseModel):
    tasks: List[CropCalendarTaskTemplate] = Field(..., min_length=1)


class FarmPlan(BaseModel):
    id: str
    user_id: str = Field(validation_alias=AliasChoices("user_id", "userId"))
    crop: str
    land_acres: float = Field(
        ..., gt=0, validation_alias=AliasChoices("land_acres", "landAcres")
    )
    sowing_date: date = Field(
        ..., validation_alias=AliasChoices("sowing_date", "sowingDate")
    )
    created_at: Optional[datetime] = Field(
        default=None, validation_alias=AliasChoices("created_at", "createdAt")
    )


class CalendarTask(BaseModel):
    id: str
    farm_plan_id: str
    date: date
    stage: str
    title: str
    description: str
    quantity_hint: Optional[str] = Field(default=None)
    completed: bool = Field(default=False)
    completed_at: Optional[datetime] = Field(default=None)


class CropCalendarRequest(BaseModel):
    crop: str = Field(..., min_length=1)
    land_acres: float = Field(
        ..., gt=0, validation_alias=AliasChoices("land_acres", "landAcres")
    )
    sowing_date: date = Field(
        ..., validation_alias=AliasChoices("sowing_date", "sowingDate")
    )
    location: str = Field(default="India")
    soil_type: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("soil_type", "soilType")
    )
    language: Language = Field(default=Language.HINDI)


class CalendarTasksRequest(BaseModel):
    farm_plan: FarmPlan
    templates: List[CropCalendarTaskTemplate]
