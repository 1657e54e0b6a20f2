from __future__ import annotations

from typing import Any, Literal

from pydantic import ConfigDict, Field

from .base import WireModel

EducationLevel = Literal[
    "high_school",
    "associates",
    "bachelors",
    "masters",
    "doctorate",
    "none",
]
EmploymentStatus = Literal["employed", "unemployed", "self_employed", "student"]


class Education(WireModel):
    """Highest completed education."""

    level: EducationLevel
    field: str | None = None
    graduation_year: int | None = None
    institution: str | None = None


class Experience(WireModel):
    """Professional experience in years."""

    total_years: float = Field(ge=0)
    relevant_years: float = Field(ge=0)
    current_role: str | None = None
    previous_roles: list[str] = Field(default_factory=list)


class Skill(WireModel):
    """Self-assessed skill, proficiency 0 (none) to 5 (expert)."""

    name: str
    proficiency: int = Field(ge=0, le=5)
    years_of_experience: float | None = Field(default=None, ge=0)


class Location(WireModel):
    """Where the user lives and whether they would move."""

    country: str
    city: str | None = None
    is_flexible: bool | None = None


class UserProfile(WireModel):
    """Everything the engine knows about the person being assessed."""

    age: int = Field(ge=0)
    education: Education
    experience: Experience
    skills: list[Skill] = Field(default_factory=list)
    employment_status: EmploymentStatus
    location: Location | None = None
    additional_context: dict[str, Any] | None = None

    model_config = ConfigDict(extra="allow")

    @property
    def is_location_flexible(self) -> bool:
        return bool(self.location and self.location.is_flexible)
