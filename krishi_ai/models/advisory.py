from typing import List

from pydantic import AliasChoices, BaseModel, Field

from krishi_ai.models.language import Language


class AdvisoryRecommendations(BaseModel):
    fertilizer: str
    dosage: str
    pest_control: str = Field(
        ..., validation_alias=AliasChoices("pest_control", "pestControl")
    )
    cost_saving_tip: str = Field(
        ..., validation_alias=AliasChoices("cost_saving_tip", "costSavingTip")
    )
    soil_health_impact: str = Field(
        ..., validation_alias=AliasChoices("soil_health_impact", "soilHealthImpact")
    )


class ScheduleItem(BaseModel):
    day: str
    activity: str


class AdvisoryResponse(BaseModel):
    crop: str
    stage: str
    recommendations: AdvisoryRecommendations
    schedule: List[ScheduleItem] = Field(..., description="Seven day action plan.")
    weather_risk: str = Field(
        ..., validation_alias=AliasChoices("weather_risk", "weatherRisk")
    )
    warnings: List[str]


class AdvisoryRequest(BaseModel):
    crop: str = Field(..., min_length=1)
    stage: str = Field(..., min_length=1, description="Growth stage, e.g. flowering.")
    soil_type: str = Field(
        default="", validation_alias=AliasChoices("soil_type", "soilType")
    )
    language: Language = Field(default=Language.HINDI)
