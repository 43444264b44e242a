# pagecheck/utils/config.py
from __future__ import annotations

import functools
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# ---------- Enums ----------

class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# ---------- Settings ----------

class Settings(BaseSettings):
    """
    Central configuration for pagecheck.

    Values load in this order of precedence:
      1) Environment variables
      2) .env file in project root
      3) Defaults below
    """

    # ---- Waiting ----
    ELEMENT_TIMEOUT_MS: int = Field(default=35000, ge=0, description="Budget for attachment and state waits")
    POLL_INTERVAL_MS: int = Field(default=50, ge=1, description="Sleep between state polls")

    # ---- Class tokens ----
    HIDDEN_CLASS: str = Field(default="hidden")
    DISABLED_CLASS: str = Field(default="disabled")
    ACTIVE_CLASS: str = Field(default="active")
    FOCUSED_CLASS: str = Field(default="focused")

    # ---- Logging ----
    LOG_LEVEL: LogLevel = Field(default=LogLevel.INFO)
    LOG_TO_FILE: bool = Field(default=False)
    LOG_FILE: Path = Field(default=Path("./pagecheck.log"))
    COLORIZED_OUTPUT: bool = Field(default=True)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("HIDDEN_CLASS", "DISABLED_CLASS", "ACTIVE_CLASS", "FOCUSED_CLASS")
    @classmethod
    def _single_token(cls, v: str) -> str:
        v = v.strip()
        if not v or any(ch.isspace() for ch in v):
            raise ValueError("class token must be a single non-empty word")
        return v

    @field_validator("LOG_FILE", mode="after")
    @classmethod
    def _absolutize_log_file(cls, v: Path, info):
        return v if v.is_absolute() else Path.cwd() / v


# --------- Public accessor (memoized) ---------

@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load and cache settings once per process.
    Call `get_settings.cache_clear()` if you need to reload after changing env.
    """
    return Settings()


# --------- Options threaded through elements and resolvers ---------

class CheckOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    timeout_ms: int = Field(default=35000, ge=0)
    poll_interval_ms: int = Field(default=50, ge=1)
    hidden_class: str = "hidden"
    disabled_class: str = "disabled"
    active_class: str = "active"
    focused_class: str = "focused"

    @classmethod
    def from_settings(cls, s: Settings) -> "CheckOptions":
        return cls(
            timeout_ms=s.ELEMENT_TIMEOUT_MS,
            poll_interval_ms=s.POLL_INTERVAL_MS,
            hidden_class=s.HIDDEN_CLASS,
            disabled_class=s.DISABLED_CLASS,
            active_class=s.ACTIVE_CLASS,
            focused_class=s.FOCUSED_CLASS,
        )
