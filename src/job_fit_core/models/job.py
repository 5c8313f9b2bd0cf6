"""Job posting payload: the semi-structured input to scoring."""

from __future__ import annotations

import hashlib
from typing import Annotated

from pydantic import AliasChoices, AliasPath, BaseModel, BeforeValidator, ConfigDict, Field

from job_fit_core.text import parse_number


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def aliases(name: str, *extra: str | AliasPath) -> AliasChoices:
    """Accept a field under its snake_case name, camelCase name and extras."""
    choices: list[str | AliasPath] = [name]
    camel = _camel(name)
    if camel != name:
        choices.append(camel)
    choices.extend(extra)
    return AliasChoices(*choices)


def _as_text(value: object) -> object:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value.strip() or None
    return value


def _as_flag(value: object) -> object:
    """Lenient tri-state boolean; anything unrecognized is unknown."""
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "y", "1"}:
            return True
        if lowered in {"false", "no", "n", "0"}:
            return False
    return None


def _as_int(value: object) -> int | None:
    number = parse_number(value)
    return int(number) if number is not None else None


def _as_phrase_list(value: object) -> object:
    """Accept a list of strings or ``{name}`` objects (or one string)."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    if not isinstance(value, (list, tuple, set, frozenset)):
        return value
    phrases: list[str] = []
    for item in value:
        if isinstance(item, dict):
            item = item.get("name") or item.get("label") or item.get("value") or ""
        text = str(item).strip() if item is not None else ""
        if text:
            phrases.append(text)
    return phrases


Text = Annotated[str | None, BeforeValidator(_as_text)]
Number = Annotated[float | None, BeforeValidator(parse_number)]
Count = Annotated[int | None, BeforeValidator(_as_int)]
Flag = Annotated[bool | None, BeforeValidator(_as_flag)]
PhraseList = Annotated[list[str], BeforeValidator(_as_phrase_list)]


class JobPayload(BaseModel):
    """One job posting as captured by the scraper.

    Every field is optional and readable under snake_case or camelCase keys.
    Numeric fields accept lenient text; text that holds no number is treated
    as absent, never as zero.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    job_id: Text = Field(default=None, validation_alias=aliases("job_id", "id"))
    source: Text = Field(default=None, validation_alias=aliases("source"))
    job_url: Text = Field(default=None, validation_alias=aliases("job_url", "url"))
    job_title: Text = Field(default=None, validation_alias=aliases("job_title", "title"))
    company_name: Text = Field(default=None, validation_alias=aliases("company_name", "company"))
    location: Text = Field(default=None, validation_alias=aliases("location"))
    workplace_type: Text = Field(default=None, validation_alias=aliases("workplace_type"))
    employment_type: Text = Field(default=None, validation_alias=aliases("employment_type"))

    salary_min: Number = Field(default=None, validation_alias=aliases("salary_min"))
    salary_max: Number = Field(default=None, validation_alias=aliases("salary_max"))
    equity_mentioned: Flag = Field(default=None, validation_alias=aliases("equity_mentioned"))
    bonus_mentioned: Flag = Field(default=None, validation_alias=aliases("bonus_mentioned"))
    bonus_estimated_percent: Number = Field(
        default=None, validation_alias=aliases("bonus_estimated_percent")
    )

    description_text: Text = Field(
        default=None,
        validation_alias=aliases(
            "description_text", "job_description_text", "jobDescriptionText", "description"
        ),
    )
    company_headcount: Count = Field(default=None, validation_alias=aliases("company_headcount"))
    company_headcount_growth: Text = Field(
        default=None, validation_alias=aliases("company_headcount_growth", "headcount_growth")
    )
    company_stage: Text = Field(default=None, validation_alias=aliases("company_stage"))
    company_revenue: Number = Field(default=None, validation_alias=aliases("company_revenue"))
    company_growth_rate: Number = Field(
        default=None, validation_alias=aliases("company_growth_rate")
    )
    hiring_urgency: Text = Field(default=None, validation_alias=aliases("hiring_urgency"))
    inflection_point: Text = Field(default=None, validation_alias=aliases("inflection_point"))
    applicant_count: Count = Field(default=None, validation_alias=aliases("applicant_count"))
    featured_benefits: PhraseList = Field(
        default_factory=list, validation_alias=aliases("featured_benefits")
    )
    industry: Text = Field(
        default=None, validation_alias=aliases("industry", "company_industry", "companyIndustry")
    )
    role_requirements: PhraseList = Field(
        default_factory=list,
        validation_alias=aliases(
            "role_requirements",
            AliasPath("researchBrief", "role_requirements"),
            AliasPath("research_brief", "role_requirements"),
        ),
    )
    required_skills: PhraseList = Field(
        default_factory=list, validation_alias=aliases("required_skills")
    )
    desired_skills: PhraseList = Field(
        default_factory=list, validation_alias=aliases("desired_skills", "preferred_skills")
    )

    @property
    def description(self) -> str:
        """Lower-cased description text, empty when absent."""
        return (self.description_text or "").lower()

    @property
    def title(self) -> str:
        """Lower-cased job title, empty when absent."""
        return (self.job_title or "").lower()

    def content_hash(self) -> str:
        """SHA-256 of company + title + url + description head, for stable ids."""
        basis = "|".join(
            [
                self.company_name or "",
                self.job_title or "",
                self.job_url or "",
                (self.description_text or "")[:500],
            ]
        )
        return hashlib.sha256(basis.encode()).hexdigest()
