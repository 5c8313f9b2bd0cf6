"""User career profile: preferences and background."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

from job_fit_core.models.job import PhraseList, aliases
from job_fit_core.text import normalize_workplace_type, parse_number


class DealBreaker(StrEnum):
    """Hard constraints a user can declare."""

    ON_SITE = "on_site"
    LESS_THAN_150K_BASE = "less_than_150k_base"
    NO_EQUITY = "no_equity"
    PRE_REVENUE = "pre_revenue"
    DECLINING_COMPANY = "declining_company"


class EquityPreference(StrEnum):
    """How strongly the user wants equity/bonus compensation."""

    REQUIRED = "required"
    PREFERRED = "preferred"
    NICE_TO_HAVE = "nice_to_have"
    NOT_IMPORTANT = "not_important"


def _as_tag_set(value: object) -> object:
    if value is None:
        return frozenset()
    if isinstance(value, str):
        value = [value]
    if isinstance(value, (list, tuple, set, frozenset)):
        return frozenset(str(tag).strip().lower() for tag in value if str(tag).strip())
    return value


def _as_workplace_list(value: object) -> object:
    if value is None:
        return None
    if isinstance(value, str):
        value = [value]
    if isinstance(value, (list, tuple, set, frozenset)):
        normalized = [normalize_workplace_type(item) for item in value]
        return [item for item in normalized if item]
    return value


def _as_preference(value: object) -> object:
    if isinstance(value, str):
        return value.strip().lower().replace(" ", "_").replace("-", "_") or None
    return value


Money = Annotated[float | None, BeforeValidator(parse_number)]
WorkplaceList = Annotated[list[str] | None, BeforeValidator(_as_workplace_list)]
TagSet = Annotated[frozenset[str], BeforeValidator(_as_tag_set)]
Preference = Annotated[str | None, BeforeValidator(_as_preference)]


class UserPreferences(BaseModel):
    """What the user needs from a job. None means "use the preset default"."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    salary_floor: Money = Field(default=None, validation_alias=aliases("salary_floor"))
    salary_target: Money = Field(default=None, validation_alias=aliases("salary_target"))
    workplace_types_acceptable: WorkplaceList = Field(
        default=None, validation_alias=aliases("workplace_types_acceptable")
    )
    workplace_types_unacceptable: WorkplaceList = Field(
        default=None, validation_alias=aliases("workplace_types_unacceptable")
    )
    deal_breakers: TagSet = Field(
        default_factory=frozenset, validation_alias=aliases("deal_breakers")
    )
    benefits: PhraseList = Field(
        default_factory=list, validation_alias=aliases("benefits", "preferred_benefits")
    )
    equity_preference: Preference = Field(
        default=None, validation_alias=aliases("equity_preference")
    )
    bonus_and_equity_preference: Preference = Field(
        default=None, validation_alias=aliases("bonus_and_equity_preference")
    )

    @property
    def requires_equity(self) -> bool:
        """Whether either equity preference is set to required."""
        return EquityPreference.REQUIRED in (
            self.equity_preference,
            self.bonus_and_equity_preference,
        )


class UserBackground(BaseModel):
    """What the user brings to a job."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    target_roles: PhraseList = Field(default_factory=list, validation_alias=aliases("target_roles"))
    core_skills: PhraseList = Field(default_factory=list, validation_alias=aliases("core_skills"))
    industries: PhraseList = Field(default_factory=list, validation_alias=aliases("industries"))
    years_of_experience: Money = Field(
        default=None, validation_alias=aliases("years_of_experience")
    )

    @field_validator("years_of_experience")
    @classmethod
    def validate_years(cls, value: float | None) -> float | None:
        """Negative experience is treated as unknown."""
        if value is not None and value < 0:
            return None
        return value


class UserProfile(BaseModel):
    """A user's stored career profile."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    preferences: UserPreferences = Field(default_factory=UserPreferences)
    background: UserBackground = Field(default_factory=UserBackground)

    @field_validator("preferences", "background", mode="before")
    @classmethod
    def validate_section(cls, value: object) -> object:
        """A null section is the same as an empty one."""
        return {} if value is None else value
