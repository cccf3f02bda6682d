# app/config.py
from __future__ import annotations

import os
from functools import lru_cache
from typing import List, Optional

from pydantic import BaseModel
from dotenv import load_dotenv

from .errors import ConfigurationError

load_dotenv()  # .env in the working dir, if any

DEFAULT_BASE_URL = "https://api.typegpt.net/v1"
DEFAULT_MODEL = "moonshotai/kimi-k2-thinking"
DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"


def _split_csv(env_name: str, default: str = "") -> List[str]:
    raw = os.getenv(env_name, default)
    if not raw:
        return []
    return [s.strip() for s in raw.split(",") if s.strip()]


def _get_number(env_name: str, cast, default=None):
    raw = (os.getenv(env_name) or "").strip()
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigurationError(f"Invalid {env_name} environment variable: {raw!r}") from e


# ------------------------- App -------------------------
# Needed before any request, so not part of Settings (which requires API_KEY).
CORS_ALLOW_ORIGINS: List[str] = _split_csv("CORS_ALLOW_ORIGINS", DEFAULT_CORS_ORIGINS)
LOG_LEVEL: str = (os.getenv("LOG_LEVEL") or "INFO").upper()


class Settings(BaseModel):
    model_config = {"frozen": True}

    # ------------------------- Upstream -------------------------
    API_KEY: str
    AI_BASE_URL: str = DEFAULT_BASE_URL
    AI_MODEL: str = DEFAULT_MODEL
    AI_TEMPERATURE: float = 0.7
    AI_MAX_TOKENS: int = 900
    # None leaves requests without a timeout
    AI_TIMEOUT: Optional[float] = None

    @property
    def completions_url(self) -> str:
        return f"{self.AI_BASE_URL.rstrip('/')}/chat/completions"


def settings_from_env() -> Settings:
    api_key = (os.getenv("API_KEY") or "").strip()
    if not api_key:
        raise ConfigurationError()
    return Settings(
        API_KEY=api_key,
        AI_BASE_URL=os.getenv("AI_BASE_URL") or DEFAULT_BASE_URL,
        AI_MODEL=os.getenv("AI_MODEL") or DEFAULT_MODEL,
        AI_TEMPERATURE=_get_number("AI_TEMPERATURE", float, 0.7),
        AI_MAX_TOKENS=_get_number("AI_MAX_TOKENS", int, 900),
        AI_TIMEOUT=_get_number("AI_TIMEOUT", float),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # lru_cache does not memoize a raised ConfigurationError
    return settings_from_env()
