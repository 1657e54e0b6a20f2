"""Reality check orchestration."""

from __future__ import annotations

from typing import Any, Callable, Iterable

import pendulum
import structlog

from .. import __version__
from ..schemas import (
    CareerGoal,
    EvaluationMetadata,
    RealityCheckInput,
    RealityCheckResult,
    ScoreBreakdown,
    UserProfile,
)
from .bands import ProbabilityBandCalculator
from .numbers import clamp, round_int
from .recommendations import RecommendationGenerator
from .requirements import RequirementsAnalyzer
from .scenarios import ScenarioCatalog
from .scorers import ComponentScore, ScoreCalculator
from .warning_rules import WarningGenerator

_BREAKDOWN_FIELDS: dict[str, str] = {
    "experience": "experience_score",
    "skill": "skill_score",
    "education": "education_score",
    "timeline": "timeline_score",
}


class RealityCheckEvaluator:
    """Turn a profile and a goal into a scored, explained assessment.

    Stateless apart from read-only collaborators, so one instance can serve
    concurrent callers.
    """

    DEFAULT_WEIGHTS: dict[str, float] = {
        "experience": 0.3,
        "skill": 0.3,
        "education": 0.2,
        "timeline": 0.2,
    }

    def __init__(
        self,
        scorers: Iterable[ScoreCalculator],
        *,
        catalog: ScenarioCatalog,
        analyzer: RequirementsAnalyzer | None = None,
        band_calculator: ProbabilityBandCalculator | None = None,
        warning_generator: WarningGenerator | None = None,
        recommendation_generator: RecommendationGenerator | None = None,
        score_weights: dict[str, float] | None = None,
        now_provider: Callable[[], pendulum.DateTime] | None = None,
        engine_version: str = __version__,
    ) -> None:
        self._scorers = list(scorers)
        methods = {scorer.method for scorer in self._scorers}
        missing = set(_BREAKDOWN_FIELDS) - methods
        if missing:
            raise ValueError(f"Missing scorers for: {sorted(missing)}")

        self._catalog = catalog
        self._analyzer = analyzer or RequirementsAnalyzer()
        self._bands = band_calculator or ProbabilityBandCalculator()
        self._warnings = warning_generator or WarningGenerator()
        self._recommendations = recommendation_generator or RecommendationGenerator()
        self._score_weights = {**self.DEFAULT_WEIGHTS, **(score_weights or {})}
        self._now_provider = now_provider or (lambda: pendulum.now("UTC"))
        self._engine_version = engine_version
        self._logger = structlog.get_logger(__name__)

    @property
    def catalog(self) -> ScenarioCatalog:
        return self._catalog

    def evaluate(self, profile: UserProfile, goal: CareerGoal) -> RealityCheckResult:
        analysis = self._analyzer.analyze(profile, goal)

        components: dict[str, ComponentScore] = {}
        for scorer in self._scorers:
            component = scorer.evaluate(profile, goal, analysis)
            components[component.method] = component

        breakdown = ScoreBreakdown(
            **{field: components[method].score for method, field in _BREAKDOWN_FIELDS.items()}
        )
        overall_score = self._compute_weighted_score(components)

        bands = self._bands.calculate(profile, goal, analysis, breakdown, overall_score)
        scenario = self._catalog.match(profile, goal)
        warnings = self._warnings.generate(profile, goal, breakdown, bands, scenario)
        recommendations = self._recommendations.generate(profile, breakdown, analysis.skill_gaps)

        self._logger.debug(
            "evaluation.completed",
            overall_score=overall_score,
            scores={method: c.score for method, c in components.items()},
            scenario_id=scenario.id if scenario else None,
            warning_flags=[warning.flag for warning in warnings],
        )

        return RealityCheckResult(
            overall_score=overall_score,
            probability_bands=bands,
            warnings=warnings,
            skill_gaps=analysis.skill_gaps,
            recommendations=recommendations,
            score_breakdown=breakdown,
            metadata=EvaluationMetadata(
                evaluated_at=self._now_provider().to_iso8601_string(),
                engine_version=self._engine_version,
                scenario_id=scenario.id if scenario else None,
            ),
        )

    def evaluate_input(self, payload: RealityCheckInput | dict[str, Any]) -> RealityCheckResult:
        """Validate a raw ``{profile, goal}`` mapping and evaluate it."""
        request = RealityCheckInput.model_validate(payload)
        return self.evaluate(request.profile, request.goal)

    def component_scores(self, profile: UserProfile, goal: CareerGoal) -> list[ComponentScore]:
        """Per-scorer results with their explanation metadata."""
        analysis = self._analyzer.analyze(profile, goal)
        return [scorer.evaluate(profile, goal, analysis) for scorer in self._scorers]

    def _compute_weighted_score(self, components: dict[str, ComponentScore]) -> int:
        total = sum(
            components[method].weighted_value * weight
            for method, weight in self._score_weights.items()
            if method in components
        )
        return round_int(clamp(total, 0, 100))
