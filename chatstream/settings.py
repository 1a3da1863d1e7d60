"""chatstream settings with environment variable support."""

import os
from pathlib import Path

from dotenv import load_dotenv


def _find_env_file() -> Path | None:
    """Return the nearest .env in the working directory, its parents, or the project root."""
    current = Path.cwd()
    for _ in range(5):
        env_file = current / ".env"
        if env_file.exists():
            return env_file
        current = current.parent
    env_file = Path(__file__).parent.parent / ".env"
    return env_file if env_file.exists() else None


env_file = _find_env_file()
if env_file:
    # Variables already set in the environment win over .env
    load_dotenv(env_file, override=False)

from pydantic import BaseModel


class StreamSettings(BaseModel):
    """Data stream encoding settings."""

    chunk_size: int = int(os.getenv("STREAM__CHUNK_SIZE", "10"))


class Settings(BaseModel):
    """Application settings."""

    stream: StreamSettings = StreamSettings()
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()
    environment: str = os.getenv("ENVIRONMENT", "development")


settings = Settings()
