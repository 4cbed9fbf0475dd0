"""
Runtime configuration for StudyPace.

Values come from the environment, with a .env file in the working
directory loaded first when present.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TEMPERATURE = 0.3
DEFAULT_MAX_RETRIES = 3
DEFAULT_API_SLEEP = 1.0


@dataclass(frozen=True)
class Settings:
    api_key: str | None = None
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    max_retries: int = DEFAULT_MAX_RETRIES
    sleep_seconds: float = DEFAULT_API_SLEEP

    @property
    def ai_enabled(self) -> bool:
        return bool(self.api_key)


def load_settings(env_file: Path | None = None) -> Settings:
    """
    Build settings from the environment.

    Environment variables:
        GEMINI_API_KEY (or AI_API_KEY): enables the remote model
        STUDYPACE_MODEL, STUDYPACE_TEMPERATURE, STUDYPACE_MAX_RETRIES,
        STUDYPACE_API_SLEEP
    """
    load_dotenv(env_file or Path.cwd() / ".env")
    return Settings(
        api_key=os.environ.get("GEMINI_API_KEY") or os.environ.get("AI_API_KEY"),
        model=os.environ.get("STUDYPACE_MODEL", DEFAULT_MODEL),
        temperature=float(os.environ.get("STUDYPACE_TEMPERATURE", DEFAULT_TEMPERATURE)),
        max_retries=int(os.environ.get("STUDYPACE_MAX_RETRIES", DEFAULT_MAX_RETRIES)),
        sleep_seconds=float(os.environ.get("STUDYPACE_API_SLEEP", DEFAULT_API_SLEEP)),
    )
