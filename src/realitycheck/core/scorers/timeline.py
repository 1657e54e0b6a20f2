"""Target timeline against the minimum realistic timeline."""

from __future__ import annotations

from dataclasses import dataclass

from ...schemas import CareerGoal, UserProfile
from ..numbers import clamp, round_int
from ..requirements import GapAnalysis
from .base import ComponentScore


@dataclass
class TimelineConfig:
    comfortable_ratio: float = 1.5
    tight_ratio: float = 0.7
    on_track_floor: float = 70
    on_track_slope: float = 20
    tight_floor: float = 40
    tight_slope: float = 100
    unrealistic_slope: float = 57


class TimelineScorer:
    """Score how the target months compare to the realistic minimum.

    The minimum is 12 months per missing year of experience, the learning
    time for every skill gap, and 6 extra months for a career change, never
    less than 2 months of job search.
    """

    method = "timeline"

    def __init__(self, *, config: TimelineConfig | None = None) -> None:
        self._config = config or TimelineConfig()

    def evaluate(
        self,
        profile: UserProfile,
        goal: CareerGoal,
        analysis: GapAnalysis,
    ) -> ComponentScore:
        config = self._config
        target = goal.timeline.target_months
        minimum = analysis.minimum_realistic_months
        ratio = target / minimum

        if target >= minimum * config.comfortable_ratio:
            verdict = "comfortable"
            raw = 100.0
        elif target >= minimum:
            verdict = "on_track"
            raw = config.on_track_floor + (ratio - 1) * config.on_track_slope
        elif target >= minimum * config.tight_ratio:
            verdict = "tight"
            raw = config.tight_floor + (ratio - config.tight_ratio) * config.tight_slope
        else:
            verdict = "unrealistic"
            raw = ratio * config.unrealistic_slope

        return ComponentScore(
            method=self.method,
            score=round_int(clamp(raw, 0, 100)),
            metadata={
                "target_months": target,
                "minimum_realistic_months": minimum,
                "ratio": ratio,
                "verdict": verdict,
            },
        )
