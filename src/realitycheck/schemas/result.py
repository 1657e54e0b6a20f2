"""Evaluation output models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import ConfigDict, Field

from .base import WireModel

Band = Literal["best", "average", "worst"]
WarningFlag = Literal[
    "insufficient_experience",
    "skill_gap_detected",
    "timeline_unrealistic",
    "market_saturation",
    "education_requirement_mismatch",
    "salary_expectation_mismatch",
    "location_constraint",
    "competition_level_high",
    "career_path_unclear",
    "resource_constraint",
]
Severity = Literal[1, 2, 3]
GapPriority = Literal[1, 2, 3]


class _ResultModel(WireModel):
    model_config = ConfigDict(frozen=True)


class SacrificeIndicators(_ResultModel):
    """Trade-offs the user will likely have to accept."""

    reduce_leisure_time: bool
    reduce_current_job_commitment: bool
    financial_investment: bool
    location_flexibility: bool
    accept_lower_salary: bool
    work_non_standard_hours: bool
    delay_other_goals: bool


class ProbabilityBandResult(_ResultModel):
    band: Band
    likelihood: int = Field(ge=0, le=100)
    estimated_timeline_months: int = Field(ge=1)
    required_daily_hours: float = Field(ge=0, le=8)
    sacrifices: SacrificeIndicators
    contributing_factors: list[str] = Field(default_factory=list)
    required_actions: list[str] = Field(default_factory=list)
    notes: str | None = None


class ProbabilityBands(_ResultModel):
    best: ProbabilityBandResult
    average: ProbabilityBandResult
    worst: ProbabilityBandResult

    def ordered(self) -> tuple[ProbabilityBandResult, ...]:
        return (self.best, self.average, self.worst)


class AssessmentWarning(_ResultModel):
    """A concern raised about the goal, 1 = low to 3 = high severity."""

    flag: WarningFlag
    message: str
    severity: Severity
    context: dict[str, Any] | None = None
    suggested_actions: list[str] | None = None


class SkillGap(_ResultModel):
    skill_name: str
    current_proficiency: int = Field(ge=0, le=5)
    required_proficiency: int = Field(ge=0, le=5)
    priority: GapPriority
    estimated_time_to_acquire_months: int | None = None

    @property
    def is_critical(self) -> bool:
        return self.priority == 1


class ScoreBreakdown(_ResultModel):
    experience_score: int = Field(ge=0, le=100)
    skill_score: int = Field(ge=0, le=100)
    education_score: int = Field(ge=0, le=100)
    timeline_score: int = Field(ge=0, le=100)


class EvaluationMetadata(_ResultModel):
    evaluated_at: str
    engine_version: str
    scenario_id: str | None = None


class RealityCheckResult(_ResultModel):
    """Complete assessment of one profile/goal pair."""

    overall_score: int = Field(ge=0, le=100)
    probability_bands: ProbabilityBands
    warnings: list[AssessmentWarning] = Field(default_factory=list)
    skill_gaps: list[SkillGap] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    score_breakdown: ScoreBreakdown
    metadata: EvaluationMetadata
