"""Dependency injection container for the reality check engine."""

from __future__ import annotations

from typing import Any

from dependency_injector import containers, providers

from .core import (
    BandConfig,
    EducationScorer,
    ExperienceScorer,
    ProbabilityBandCalculator,
    RealityCheckEvaluator,
    RecommendationGenerator,
    RequirementsAnalyzer,
    RequirementsConfig,
    ScenarioCatalog,
    SkillScorer,
    TimelineScorer,
    WarningConfig,
    WarningGenerator,
)
from .core.scorers import EducationConfig, ExperienceConfig, SkillConfig, TimelineConfig
from .pipeline import EvaluationPipeline, RequestLoader


class RealityCheckContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    scenario_catalog = providers.Singleton(ScenarioCatalog.default)

    requirements_analyzer = providers.Singleton(RequirementsAnalyzer)

    experience_scorer = providers.Singleton(ExperienceScorer)
    skill_scorer = providers.Singleton(SkillScorer)
    education_scorer = providers.Singleton(EducationScorer)
    timeline_scorer = providers.Singleton(TimelineScorer)

    scorers = providers.List(
        experience_scorer,
        skill_scorer,
        education_scorer,
        timeline_scorer,
    )

    band_calculator = providers.Singleton(ProbabilityBandCalculator)
    warning_generator = providers.Singleton(WarningGenerator)
    recommendation_generator = providers.Singleton(RecommendationGenerator)

    evaluator = providers.Singleton(
        RealityCheckEvaluator,
        scorers=scorers,
        catalog=scenario_catalog,
        analyzer=requirements_analyzer,
        band_calculator=band_calculator,
        warning_generator=warning_generator,
        recommendation_generator=recommendation_generator,
        score_weights=config.score_weights,
    )

    request_loader = providers.Factory(RequestLoader)

    pipeline = providers.Factory(
        EvaluationPipeline,
        evaluator=evaluator,
        loader=request_loader,
    )


def create_container(*, settings: dict[str, Any] | None = None) -> RealityCheckContainer:
    """Instantiate container with optional overrides."""

    container = RealityCheckContainer()

    if not settings:
        return container

    core_settings = settings.get("core", {}) if isinstance(settings, dict) else {}
    if core_settings:
        container.config.override(core_settings)

    scenario_settings = settings.get("scenarios", {}) if isinstance(settings, dict) else {}
    if scenario_settings.get("path"):
        container.scenario_catalog.override(
            providers.Singleton(ScenarioCatalog.from_file, scenario_settings["path"])
        )

    scorer_settings = settings.get("scorers", {}) if isinstance(settings, dict) else {}

    if "requirements" in scorer_settings:
        requirements_config = RequirementsConfig(**scorer_settings["requirements"])
        container.requirements_analyzer.override(
            providers.Singleton(RequirementsAnalyzer, config=requirements_config)
        )

    if "experience" in scorer_settings:
        experience_config = ExperienceConfig(**scorer_settings["experience"])
        container.experience_scorer.override(
            providers.Singleton(ExperienceScorer, config=experience_config)
        )

    if "skill" in scorer_settings:
        skill_config = SkillConfig(**scorer_settings["skill"])
        container.skill_scorer.override(providers.Singleton(SkillScorer, config=skill_config))

    if "education" in scorer_settings:
        education_config = EducationConfig(**scorer_settings["education"])
        container.education_scorer.override(
            providers.Singleton(EducationScorer, config=education_config)
        )

    if "timeline" in scorer_settings:
        timeline_config = TimelineConfig(**scorer_settings["timeline"])
        container.timeline_scorer.override(
            providers.Singleton(TimelineScorer, config=timeline_config)
        )

    if "bands" in scorer_settings:
        band_config = BandConfig(**scorer_settings["bands"])
        container.band_calculator.override(
            providers.Singleton(ProbabilityBandCalculator, config=band_config)
        )

    if "warnings" in scorer_settings:
        warning_config = WarningConfig(**scorer_settings["warnings"])
        container.warning_generator.override(
            providers.Singleton(WarningGenerator, config=warning_config)
        )

    return container
