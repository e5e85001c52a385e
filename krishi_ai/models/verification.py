from enum import Enum
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field

from krishi_ai.models.language import Language


class VerificationStatus(str, Enum):
    GENUINE = "GENUINE"
    SUSPICIOUS = "SUSPICIOUS"
    FAKE = "FAKE"
    UNKNOWN = "UNKNOWN"


class EvidenceSource(BaseModel):
    title: str
    uri: str


class VerificationResult(BaseModel):
    status: VerificationStatus
    product_name: str = Field(
        ..., validation_alias=AliasChoices("product_name", "productName")
    )
    manufacturer: str
    batch_code: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("batch_code", "batchCode")
    )
    confidence: float = Field(..., ge=0, le=100, description="Confidence in percent.")
    reasoning: str
    safety_check: str = Field(
        ..., validation_alias=AliasChoices("safety_check", "safetyCheck")
    )
    online_evidence: Optional[str] = Field(
        default=None,
        description="Summary of web or visual evidence.",
        validation_alias=AliasChoices("online_evidence", "onlineEvidence"),
    )
    sources: List[EvidenceSource] = Field(default_factory=list)


class BatchCodeRequest(BaseModel):
    code: str = Field(..., min_length=1, description="Batch or lot code printed on the pack.")
    language: Language = Field(default=Language.HINDI)


class ImageVerificationRequest(BaseModel):
    image_base64: str = Field(
        ...,
        min_length=1,
        description="Base64 encoded photo of the package.",
        validation_alias=AliasChoices("image_base64", "imageBase64", "image"),
    )
    mime_type: str = Field(default="image/jpeg")
    language: Language = Field(default=Language.HINDI)
