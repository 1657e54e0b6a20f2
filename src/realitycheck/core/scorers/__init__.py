"""Component score calculators."""

from .base import ComponentScore, ScoreCalculator
from .education import EducationConfig, EducationScorer
from .experience import ExperienceConfig, ExperienceScorer
from .skills import SkillConfig, SkillScorer
from .timeline import TimelineConfig, TimelineScorer

__all__ = [
    "ComponentScore",
    "ScoreCalculator",
    "EducationConfig",
    "EducationScorer",
    "ExperienceConfig",
    "ExperienceScorer",
    "SkillConfig",
    "SkillScorer",
    "TimelineConfig",
    "TimelineScorer",
]
