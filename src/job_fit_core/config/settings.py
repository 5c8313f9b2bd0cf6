"""Application settings using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for job-fit-scorer."""

    model_config = SettingsConfigDict(env_prefix="JF_", env_file=".env", extra="ignore")

    # --- Scoring ---
    scoring_preset: str = Field(
        default="v2",
        description="Name of the scoring preset (weights and thresholds)",
    )
    skill_match_threshold: float | None = Field(
        default=None,
        ge=0.0,
        le=1.0,
        description="Override for the fuzzy skill-match threshold (preset default if unset)",
    )
    skill_similarity: Literal["jaccard", "cosine"] | None = Field(
        default=None,
        description="Override for the fuzzy skill similarity function (preset default if unset)",
    )
    default_salary_floor: float = Field(
        default=150_000,
        gt=0,
        description="Salary floor used when the profile has none",
    )
    default_salary_target: float = Field(
        default=200_000,
        gt=0,
        description="Salary target used when the profile has none",
    )

    # --- Skill extraction service (optional) ---
    skill_service_url: str | None = Field(
        default=None,
        description="Base URL of the skill-extraction service; local matching only if unset",
    )
    skill_service_api_key: SecretStr | None = Field(
        default=None,
        description="Bearer token for the skill-extraction service",
    )
    skill_service_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for one skill-extraction call in seconds",
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log output format",
    )

    @model_validator(mode="after")
    def validate_salary_defaults(self) -> Settings:
        """Ensure the default salary target is not below the floor."""
        if self.default_salary_target < self.default_salary_floor:
            msg = "default_salary_target must be >= default_salary_floor"
            raise ValueError(msg)
        return self
