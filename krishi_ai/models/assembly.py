from enum import Enum
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

ResultT = TypeVar("ResultT")


class AssemblyState(str, Enum):
    NOT_STARTED = "not_started"
    CALLING_MODEL = "calling_model"
    EXTRACTING = "extracting"
    NORMALIZING = "normalizing"
    VALIDATING = "validating"
    ASSEMBLED = "assembled"
    FAILED_FALLBACK = "failed_fallback"


class ResultSource(str, Enum):
    AI = "ai"
    MERGED = "merged"
    FALLBACK = "fallback"
    RULES = "rules"


class FallbackReason(str, Enum):
    MODEL_ERROR = "model_error"
    MODEL_TIMEOUT = "model_timeout"
    EMPTY_RESPONSE = "empty_response"
    PARSE_FAILURE = "parse_failure"
    SHAPE_MISMATCH = "shape_mismatch"


class AssembledResult(BaseModel, Generic[ResultT]):
    """What an assembler hands back: the value plus how it was obtained."""

    value: ResultT
    source: ResultSource
    state: AssemblyState
    fallback_reason: Optional[FallbackReason] = Field(default=None)
    fallback_fields: List[str] = Field(
        default_factory=list,
        description="Fields filled from the rule-based fallback during a merge.",
    )

    @property
    def used_fallback(self) -> bool:
        return self.source in (ResultSource.FALLBACK, ResultSource.MERGED)
