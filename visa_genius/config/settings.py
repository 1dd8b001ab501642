"""
Application Settings.

All configuration comes from the environment / .env file.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # --- App ---
    env: str = "development"
    debug: bool = True
    log_level: str = "INFO"
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    cors_origins: list[str] = ["http://localhost:5173"]

    # --- Uploads ---
    max_upload_bytes: int = 10 * 1024 * 1024

    # --- Assessor ---
    default_assessor: str = "heuristic"    # "heuristic" | "llm"

    # --- LLM (Gemini) ---
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    llm_enabled: bool = True
    llm_timeout_seconds: float = 30.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    """Settings singleton."""
    return Settings()
