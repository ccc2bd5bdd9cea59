# config.py
"""Configuration settings for the Content Guardian review system.
Uses Pydantic BaseSettings for automatic environment variable loading.
"""

from __future__ import annotations

import os

import structlog
from dotenv import load_dotenv
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

logger = structlog.get_logger()

_PLACEHOLDER_API_KEYS = {"", "nope", "dummy-key-for-development"}


class GuardianSettings(BaseSettings):
    """Full configuration for the Content Guardian system."""

    # API and Model Configuration
    OPENAI_API_BASE: str = "https://api.openai.com/v1"
    OPENAI_API_KEY: str = ""

    # Generation defaults shared by all review modules
    DEFAULT_MODEL: str = "gpt-4"
    DEFAULT_MAX_TOKENS: int = 1000
    TEMPERATURE_REVIEW: float = 0.7
    LLM_TOP_P: float = 1.0
    FREQUENCY_PENALTY_REVIEW: float = 0.0
    PRESENCE_PENALTY_REVIEW: float = 0.0

    # LLM Call Settings
    HTTPX_TIMEOUT: float = 600.0
    MAX_CONCURRENT_LLM_CALLS: int = 4
    TIKTOKEN_DEFAULT_ENCODING: str = "cl100k_base"
    FALLBACK_CHARS_PER_TOKEN: float = 4.0
    TOKENIZER_CACHE_SIZE: int = 10

    # Output and File Paths
    BASE_OUTPUT_DIR: str = "guardian_output"
    REPORTS_DIR: str = "reports"

    # Logging & UI
    LOG_LEVEL_STR: str = Field("INFO", alias="GUARDIAN_LOG_LEVEL")
    LOG_FORMAT: str = (
        "%(asctime)s - %(levelname)s - [%(name)s:%(funcName)s:%(lineno)d] - %(message)s"
    )
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"
    LOG_FILE: str | None = "guardian_run.log"
    ENABLE_RICH_PROGRESS: bool = True
    ACTIVITY_LOG_TO_CONSOLE: bool = True

    @model_validator(mode="after")
    def check_generation_settings(self) -> GuardianSettings:
        if self.DEFAULT_MAX_TOKENS <= 0:
            raise ValueError("DEFAULT_MAX_TOKENS must be a positive integer")
        if self.MAX_CONCURRENT_LLM_CALLS <= 0:
            raise ValueError("MAX_CONCURRENT_LLM_CALLS must be a positive integer")
        if self.OPENAI_API_KEY in _PLACEHOLDER_API_KEYS:
            logger.warning(
                "OPENAI_API_KEY is empty or a placeholder. Completion requests will likely be rejected.",
                api_base=self.OPENAI_API_BASE,
            )
        return self

    model_config = SettingsConfigDict(
        env_prefix="", env_file=".env", populate_by_name=True, extra="ignore"
    )


settings = GuardianSettings()

REPORTS_DIR = os.path.join(settings.BASE_OUTPUT_DIR, settings.REPORTS_DIR)
