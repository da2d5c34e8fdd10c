"""Runtime settings read from the environment (and a local .env file)."""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    return int(raw) if raw else default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if not raw:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    return float(raw) if raw else default


@dataclass(frozen=True)
class Settings:
    database_url: Optional[str] = None
    init_schema: bool = False
    google_api_key: Optional[str] = None
    gemini_model: str = "gemini-2.5-flash"
    llm_timeout_seconds: float = 30.0
    llm_max_retries: int = 1
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:3000"])
    persona_min_rounds: int = 2
    persona_round_window: int = 10
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.environ.get("CORS_ORIGINS", "http://localhost:3000")
        return cls(
            database_url=os.environ.get("DATABASE_URL") or None,
            init_schema=_env_bool("DB_INIT_SCHEMA", False),
            google_api_key=os.environ.get("GOOGLE_API_KEY") or None,
            gemini_model=os.environ.get("GEMINI_MODEL", "gemini-2.5-flash"),
            llm_timeout_seconds=_env_float("LLM_TIMEOUT_SECONDS", 30.0),
            llm_max_retries=_env_int("LLM_MAX_RETRIES", 1),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            persona_min_rounds=_env_int("PERSONA_MIN_ROUNDS", 2),
            persona_round_window=_env_int("PERSONA_ROUND_WINDOW", 10),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )
