"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, HttpUrl, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class CocktailApiSettings(BaseModel):
    base_url: HttpUrl = Field(
        default="https://api.api-ninjas.com/v1/cocktail",
        description="Endpoint answering GET ?name=<query> with a JSON array.",
    )
    api_key: SecretStr | None = None
    request_timeout_seconds: float = Field(default=10, gt=0, le=120)


class SearchSettings(BaseModel):
    debounce_seconds: float = Field(default=0.7, ge=0)
    error_display_seconds: float = Field(default=3.0, ge=0)


class GuideSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="COCKTAIL_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    default_locale: str = "en"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    api: CocktailApiSettings = Field(default_factory=CocktailApiSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)


@lru_cache
def get_settings() -> GuideSettings:
    """Return cached settings instance."""

    return GuideSettings()


__all__ = [
    "CocktailApiSettings",
    "GuideSettings",
    "SearchSettings",
    "get_settings",
]
