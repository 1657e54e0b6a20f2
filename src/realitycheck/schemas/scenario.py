"""Reference career scenarios the engine compares goals against."""

from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict, Field

from .base import WireModel
from .profile import EducationLevel

FailureCategory = Literal[
    "skill_gap",
    "timeline",
    "market",
    "competition",
    "preparation",
    "expectations",
    "resource_constraint",
]


class _FrozenModel(WireModel):
    model_config = ConfigDict(frozen=True)


class SkillRequirement(_FrozenModel):
    skill_name: str
    min_proficiency: int = Field(ge=0, le=5)
    is_critical: bool
    months_to_learn: int | None = Field(default=None, ge=0)


class TimelineRange(_FrozenModel):
    best_case_months: int = Field(ge=0)
    average_case_months: int = Field(ge=0)
    worst_case_months: int = Field(ge=0)


class TimeRequirements(_FrozenModel):
    """Typical daily hours spent on each activity."""

    skill_building_hours: float = Field(ge=0)
    job_search_hours: float = Field(ge=0)
    interview_prep_hours: float = Field(ge=0)
    is_on_top_of_full_time_job: bool


class CommonFailureReason(_FrozenModel):
    category: FailureCategory
    description: str
    frequency: int = Field(ge=0, le=100)


class SalaryRange(_FrozenModel):
    min: float = Field(ge=0)
    max: float = Field(ge=0)
    currency: str


class CareerScenario(_FrozenModel):
    """A codified career path with explicit assumptions."""

    id: str
    name: str
    description: str
    target_role: str
    target_industry: str
    min_experience_years: float = Field(ge=0)
    preferred_education: EducationLevel
    skill_requirements: tuple[SkillRequirement, ...] = ()
    timeline_ranges: TimelineRange
    time_requirements: TimeRequirements
    common_failure_reasons: tuple[CommonFailureReason, ...] = ()
    notes: str | None = None
    typical_salary_range: SalaryRange | None = None

    @property
    def critical_requirements(self) -> tuple[SkillRequirement, ...]:
        return tuple(req for req in self.skill_requirements if req.is_critical)
