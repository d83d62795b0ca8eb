"""
Application configuration loader and it handles:
- Environment variables
- Upstream model settings
- Logging level

And, the main purpose:
Central place for system configuration. The OpenAI key is NOT configured
here; every request brings its own.
"""


from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

class Settings(BaseSettings):
    # LLM
    LLM_PROVIDER: str = "openai"  # openai | mock (for no-key dev)
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    LLM_MODEL: str = "gpt-4o-mini"
    LLM_TEMPERATURE: float = 0.7
    LLM_MAX_TOKENS: int = 900
    # None = wait as long as the upstream takes
    LLM_TIMEOUT_SECONDS: Optional[float] = None

    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def known_log_level(cls, v):
        level = str(v or "").strip().upper()
        return level if level in LOG_LEVELS else "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
