"""Pydantic schema definitions for the reality check engine."""

from __future__ import annotations

from .goal import CareerGoal, GoalRequirements, RealityCheckInput, SalaryExpectation, Timeline
from .profile import Education, Experience, Location, Skill, UserProfile
from .result import (
    AssessmentWarning,
    EvaluationMetadata,
    ProbabilityBandResult,
    ProbabilityBands,
    RealityCheckResult,
    SacrificeIndicators,
    ScoreBreakdown,
    SkillGap,
)
from .scenario import (
    CareerScenario,
    CommonFailureReason,
    SalaryRange,
    SkillRequirement,
    TimelineRange,
    TimeRequirements,
)

__all__ = [
    "AssessmentWarning",
    "CareerGoal",
    "CareerScenario",
    "CommonFailureReason",
    "Education",
    "EvaluationMetadata",
    "Experience",
    "GoalRequirements",
    "Location",
    "ProbabilityBandResult",
    "ProbabilityBands",
    "RealityCheckInput",
    "RealityCheckResult",
    "SacrificeIndicators",
    "SalaryExpectation",
    "SalaryRange",
    "ScoreBreakdown",
    "SkillGap",
    "SkillRequirement",
    "Timeline",
    "TimelineRange",
    "TimeRequirements",
    "UserProfile",
]
