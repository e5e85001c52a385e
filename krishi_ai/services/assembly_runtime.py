from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Generic, List, Optional, TypeVar

from krishi_ai.core.config import settings
from krishi_ai.core.genai_client import TextGenerator
from krishi_ai.models.assembly import (
    AssembledResult,
    AssemblyState,
    FallbackReason,
    ResultSource,
)
from krishi_ai.normalization.extraction import extract_json

logger = logging.getLogger(__name__)

T = TypeVar("T")

_TRANSITIONS = {
    AssemblyState.NOT_STARTED: {AssemblyState.CALLING_MODEL, AssemblyState.FAILED_FALLBACK},
    AssemblyState.CALLING_MODEL: {AssemblyState.EXTRACTING, AssemblyState.FAILED_FALLBACK},
    AssemblyState.EXTRACTING: {AssemblyState.NORMALIZING, AssemblyState.FAILED_FALLBACK},
    AssemblyState.NORMALIZING: {AssemblyState.VALIDATING, AssemblyState.FAILED_FALLBACK},
    AssemblyState.VALIDATING: {AssemblyState.ASSEMBLED, AssemblyState.FAILED_FALLBACK},
    AssemblyState.ASSEMBLED: set(),
    AssemblyState.FAILED_FALLBACK: set(),
}


class InvalidAssemblyTransition(RuntimeError):
    def __init__(self, current: AssemblyState, target: AssemblyState) -> None:
        super().__init__(f"Cannot move assembly from {current.value} to {target.value}")
        self.current = current
        self.target = target


class ModelCallFailed(Exception):
    """The model could not produce text; carries the reason for the fallback."""

    def __init__(self, reason: FallbackReason) -> None:
        super().__init__(reason.value)
        self.reason = reason


class AssemblyRuntime(Generic[T]):
    """Drives one model-backed result from request to a value that is always usable.

    The fallback is built before the model is called, so every exit path has
    something to return. Each step moves the runtime forward through
    ``AssemblyState``; any step may abandon the model output with ``fail``.
    """

    def __init__(
        self,
        *,
        action: str,
        fallback_for: Callable[[FallbackReason], T],
        generator: TextGenerator,
        timeout: Optional[float] = None,
    ) -> None:
        self.action = action
        self.generator = generator
        self.timeout = settings.AI_CALL_TIMEOUT_SECONDS if timeout is None else timeout
        self.state = AssemblyState.NOT_STARTED
        self._fallback_for = fallback_for
        # Computed eagerly; model failure variants are rebuilt on demand in ``fail``.
        self.fallback: T = fallback_for(FallbackReason.PARSE_FAILURE)

    def advance(self, target: AssemblyState) -> None:
        if target not in _TRANSITIONS[self.state]:
            raise InvalidAssemblyTransition(self.state, target)
        self.state = target

    async def call_model(
        self,
        prompt: str,
        image: Optional[str] = None,
        mime_type: str = "image/jpeg",
    ) -> str:
        self.advance(AssemblyState.CALLING_MODEL)
        try:
            text = await asyncio.wait_for(
                self.generator.generate(prompt, image=image, mime_type=mime_type),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            logger.warning("%s: model call timed out after %ss", self.action, self.timeout)
            raise ModelCallFailed(FallbackReason.MODEL_TIMEOUT)
        except Exception:
            logger.exception("%s: model call failed", self.action)
            raise ModelCallFailed(FallbackReason.MODEL_ERROR)

        if not isinstance(text, str) or not text.strip():
            logger.warning("%s: model returned an empty response", self.action)
            raise ModelCallFailed(FallbackReason.EMPTY_RESPONSE)
        return text

    def extract(self, text: str) -> Any:
        self.advance(AssemblyState.EXTRACTING)
        data = extract_json(text)
        if data is None:
            logger.warning(
                "%s: could not parse model output, using fallback. Raw: %s",
                self.action,
                text[:300],
            )
        return data

    def fail(self, reason: FallbackReason) -> AssembledResult[T]:
        self.advance(AssemblyState.FAILED_FALLBACK)
        if reason in (FallbackReason.MODEL_ERROR, FallbackReason.MODEL_TIMEOUT):
            value = self._fallback_for(reason)
        else:
            value = self.fallback
        return AssembledResult[Any](
            value=value,
            source=ResultSource.FALLBACK,
            state=self.state,
            fallback_reason=reason,
        )

    def complete(
        self,
        value: T,
        fallback_fields: Optional[List[str]] = None,
    ) -> AssembledResult[T]:
        self.advance(AssemblyState.ASSEMBLED)
        fallback_fields = list(fallback_fields or [])
        return AssembledResult[Any](
            value=value,
            source=ResultSource.MERGED if fallback_fields else ResultSource.AI,
            state=self.state,
            fallback_fields=fallback_fields,
        )

    async def fetch(
        self,
        prompt: str,
        image: Optional[str] = None,
        mime_type: str = "image/jpeg",
    ) -> Any:
        """Call the model and extract its JSON, then step into normalizing.

        Raises ``ModelCallFailed`` when there is no usable text or no JSON in it.
        """
        text = await self.call_model(prompt, image=image, mime_type=mime_type)
        data = self.extract(text)
        if data is None:
            raise ModelCallFailed(FallbackReason.PARSE_FAILURE)
        self.advance(AssemblyState.NORMALIZING)
        return data
