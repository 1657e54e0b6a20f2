"""Core reality check engine components."""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .bands import BandConfig, ProbabilityBandCalculator
from .evaluator import RealityCheckEvaluator
from .recommendations import RecommendationGenerator
from .requirements import GapAnalysis, RequirementsAnalyzer, RequirementsConfig
from .scenarios import ScenarioCatalog, ScenarioLoadError
from .scorers import (
    ComponentScore,
    EducationScorer,
    ExperienceScorer,
    ScoreCalculator,
    SkillScorer,
    TimelineScorer,
)
from .warning_rules import WarningConfig, WarningGenerator

__all__ = [
    "BandConfig",
    "ComponentScore",
    "EducationScorer",
    "ExperienceScorer",
    "GapAnalysis",
    "ProbabilityBandCalculator",
    "RealityCheckEvaluator",
    "RecommendationGenerator",
    "RequirementsAnalyzer",
    "RequirementsConfig",
    "ScenarioCatalog",
    "ScenarioLoadError",
    "ScoreCalculator",
    "SkillScorer",
    "TimelineScorer",
    "WarningConfig",
    "WarningGenerator",
]
