from datetime import date
from enum import Enum
from typing import Dict, List, Optional

from pydantic import AliasChoices, BaseModel, Field

from krishi_ai.models.language import Language


class NutrientStatus(str, Enum):
    LOW = "low"
    OPTIMAL = "optimal"
    HIGH = "high"
    DEFICIENT = "deficient"
    MODERATE = "moderate"
    SUFFICIENT = "sufficient"
    EXCESS = "excess"
    GOOD = "good"


class SoilInputs(BaseModel):
    """User-entered soil test readings; the only trusted input to the fallback calculator."""

    ph: float = Field(
        ...,
        ge=0,
        le=14,
        description="Soil pH.",
        validation_alias=AliasChoices("ph", "pH"),
    )
    nitrogen: float = Field(..., ge=0, description="Available nitrogen in kg/ha.")
    phosphorus: float = Field(..., ge=0, description="Available phosphorus in kg/ha.")
    potassium: float = Field(..., ge=0, description="Available potassium in kg/ha.")
    organic_matter: float = Field(
        ...,
        ge=0,
        le=100,
        description="Organic matter in percent.",
        validation_alias=AliasChoices("organic_matter", "organicMatter"),
    )
    location: Optional[str] = Field(default=None, description="Village, district or state.")
    crop: Optional[str] = Field(default=None, description="Target crop, if any.")


class NutrientAssessment(BaseModel):
    status: NutrientStatus
    interpretation: str = Field(..., description="What the reading means for the farmer.")
    action: str = Field(..., description="Recommended corrective action.")


class NutrientStatusReport(BaseModel):
    ph: NutrientAssessment
    nitrogen: NutrientAssessment
    phosphorus: NutrientAssessment
    potassium: NutrientAssessment
    organic_matter: NutrientAssessment


class FertilizerRecommendation(BaseModel):
    name: str
    dosage: str = Field(..., description="Dose, e.g. 50-100 kg/ha.")
    timing: str = Field(..., description="When to apply.")
    notes: Optional[str] = Field(default=None)


class ProfitableCrop(BaseModel):
    crop: str
    profit_note: str = Field(..., description="Why this crop pays well on this soil.")
    estimated_margin: Optional[str] = Field(
        default=None, description="Rough margin, e.g. ₹40,000-60,000/acre."
    )


class SoilAnalysisResult(BaseModel):
    summary: str
    nutrient_status: NutrientStatusReport
    fertilizer_recommendations: List[FertilizerRecommendation] = Field(..., min_length=1)
    suitable_crops: List[str] = Field(..., min_length=1)
    profitable_crops: List[ProfitableCrop] = Field(..., min_length=1)
    farm_management: List[str] = Field(..., min_length=1)
    improvement_tips: List[str] = Field(..., min_length=1)
    warnings: List[str] = Field(default_factory=list)


class SoilAnalysisRequest(BaseModel):
    soil: SoilInputs
    language: Language = Field(default=Language.HINDI)


class SoilTest(BaseModel):
    """A stored soil test record as handed over by the persistence layer."""

    id: str
    user_id: str = Field(validation_alias=AliasChoices("user_id", "userId"))
    test_date: date = Field(validation_alias=AliasChoices("test_date", "testDate"))
    location: Optional[str] = Field(default=None)
    ph: float = Field(validation_alias=AliasChoices("ph", "pH"))
    nitrogen: float
    phosphorus: float
    potassium: float
    organic_matter: float = Field(
        validation_alias=AliasChoices("organic_matter", "organicMatter")
    )
    other_nutrients: Optional[Dict[str, float]] = Field(
        default=None, validation_alias=AliasChoices("other_nutrients", "otherNutrients")
    )
    recommendations: str = Field(default="")
    image_url: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("image_url", "imageUrl")
    )
