"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class IndexSettings(BaseModel):
    docs_dir: str = Field(
        default="docs.gl/gl4",
        description="Directory of XML reference pages to index.",
    )
    index_path: str = Field(default="index.json", min_length=1)


class ProbeSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GLSEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    base_url: AnyHttpUrl = Field(
        default="http://127.0.0.1:8000",
        description="Origin that relative API paths resolve against.",
    )
    search_path: str = Field(default="/api/search", min_length=1)
    request_timeout_seconds: float | None = Field(default=None, gt=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    index: IndexSettings = Field(default_factory=IndexSettings)

    @field_validator("request_timeout_seconds", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("search_path")
    @classmethod
    def _leading_slash(cls, value: str) -> str:
        return value if value.startswith("/") else f"/{value}"

    @property
    def origin(self) -> str:
        return str(self.base_url).rstrip("/")


@lru_cache
def get_settings() -> ProbeSettings:
    """Return cached settings instance."""

    return ProbeSettings()


__all__ = ["IndexSettings", "ProbeSettings", "get_settings"]
