"""Shared contract for component score calculators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from ...schemas import CareerGoal, UserProfile
from ..requirements import GapAnalysis


@dataclass(slots=True)
class ComponentScore:
    """Normalized scorer output: a 0-100 score plus explanation metadata.

    ``raw`` holds the unrounded value when a bracket yields a fraction; the
    overall score is weighted from it so rounding happens once.
    """

    method: str
    score: int
    metadata: dict[str, Any] = field(default_factory=dict)
    raw: float | None = None

    @property
    def weighted_value(self) -> float:
        return self.score if self.raw is None else self.raw


@runtime_checkable
class ScoreCalculator(Protocol):
    """Scorer contract used by the evaluator."""

    method: str

    def evaluate(
        self,
        profile: UserProfile,
        goal: CareerGoal,
        analysis: GapAnalysis,
    ) -> ComponentScore:
        """Return the component score for a profile/goal pair."""
