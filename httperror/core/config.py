from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library configuration loaded from HTTP_ERROR_* environment variables.

    Notes:
      - Every setting has a default; the package works with no environment at all.
      - Extra env vars are ignored to keep upgrades painless.
    """

    model_config = SettingsConfigDict(
        env_prefix="HTTP_ERROR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    LOG_LEVEL: str = Field(default="INFO")

    # ---- Serialization ----
    CONTENT_TYPE: str = Field(default="application/json", description="Default content-type of error responses")

    # ---- Deserialization ----
    FALLBACK_MESSAGE: str = Field(
        default="Unknown Error",
        description="Message used when neither the body nor the reason phrase provide one",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, v: str) -> str:
        lvl = (v or "").strip().upper()
        if not isinstance(logging.getLevelName(lvl), int):
            raise ValueError(f"unknown LOG_LEVEL: {v}")
        return lvl

    @field_validator("CONTENT_TYPE", "FALLBACK_MESSAGE")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        v2 = (v or "").strip()
        if not v2:
            raise ValueError("value must not be empty")
        return v2


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
