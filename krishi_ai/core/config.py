import os

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    GEMINI_API_KEY: str = os.environ.get("GEMINI_API_KEY", "")
    GEMINI_MODEL: str = os.environ.get("GEMINI_MODEL", "gemini-2.5-flash")
    AI_CALL_TIMEOUT_SECONDS: float = 30.0
    DEFAULT_LANGUAGE: str = "hi"
    LOG_LEVEL: str = "INFO"


settings = Settings()
