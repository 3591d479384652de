"""Configuration helpers for the suggestions relay."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    google_api_key: str = Field(..., validation_alias="GOOGLE_API_KEY")
    gemini_model: str = Field("gemini-1.5-flash", validation_alias="GEMINI_MODEL")
    temperature: float | None = Field(
        None,
        ge=0.0,
        le=2.0,
        validation_alias="GEMINI_TEMPERATURE",
    )

    host: str = Field("0.0.0.0", validation_alias="HOST")
    port: int = Field(3000, ge=1, le=65535, validation_alias="PORT")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        validation_alias="CORS_ALLOW_ORIGINS",
    )

    # "always" drops the last reply line unconditionally; "blank" only when empty.
    trailing_line: Literal["always", "blank"] = Field(
        "always",
        validation_alias="SUGGESTIONS_TRAILING_LINE",
    )
    require_content: bool = Field(False, validation_alias="SUGGESTIONS_REQUIRE_CONTENT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached app settings."""
    return Settings()
