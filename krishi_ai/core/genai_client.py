from functools import lru_cache
from typing import Any, Optional, Protocol

from langchain_core.messages import HumanMessage
from langchain_google_genai import (
    ChatGoogleGenerativeAI,
    HarmBlockThreshold,
    HarmCategory,
)

from .config import settings

DEFAULT_SAFETY_SETTINGS = {
    HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_LOW_AND_ABOVE,
}


class TextGenerator(Protocol):
    """Anything that turns a prompt (and optionally one image) into raw text."""

    async def generate(
        self,
        prompt: str,
        image: Optional[str] = None,
        mime_type: str = "image/jpeg",
    ) -> str: ...


def get_chat_model(model: str, **kwargs) -> ChatGoogleGenerativeAI:
    if "google_api_key" not in kwargs and "api_key" not in kwargs:
        kwargs["google_api_key"] = settings.GEMINI_API_KEY
    if "safety_settings" not in kwargs:
        kwargs["safety_settings"] = DEFAULT_SAFETY_SETTINGS
    return ChatGoogleGenerativeAI(model=model, **kwargs)


def message_text(content: Any) -> str:
    """Flatten a chat model message content into plain text."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    return ""


class GeminiTextGenerator:
    def __init__(self, model: Optional[str] = None, **kwargs) -> None:
        self.model_name = model or settings.GEMINI_MODEL
        self.llm = get_chat_model(self.model_name, **kwargs)

    async def generate(
        self,
        prompt: str,
        image: Optional[str] = None,
        mime_type: str = "image/jpeg",
    ) -> str:
        content: list = [{"type": "text", "text": prompt}]
        if image:
            content.append(
                {
                    "type": "image_url",
                    "image_url": {"url": f"data:{mime_type};base64,{image}"},
                }
            )
        response = await self.llm.ainvoke([HumanMessage(content=content)])
        return message_text(response.content)


@lru_cache(maxsize=1)
def get_text_generator() -> TextGenerator:
    return GeminiTextGenerator()
