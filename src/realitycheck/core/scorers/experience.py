"""Relevant experience against the years the role title implies."""

from __future__ import annotations

from dataclasses import dataclass

from ...schemas import CareerGoal, UserProfile
from ..numbers import clamp, round_int
from ..requirements import GapAnalysis
from .base import ComponentScore


@dataclass
class ExperienceConfig:
    """Score bands for experience matching."""

    qualified_base: float = 80
    surplus_points_per_year: float = 5
    max_surplus_bonus: float = 20
    partial_floor: float = 40
    partial_slope: float = 80
    little_ceiling: float = 40
    general_points_per_year: float = 5
    max_general_points: float = 20


class ExperienceScorer:
    """Score 0-100 for how well relevant experience covers the requirement.

    * at or above the requirement: 80, plus 5 per surplus year up to 100
    * half the requirement or more: 40-80, linear in the ratio
    * some, but under half: 0-40
    * none: up to 20 for general work history

    The partial brackets round their own value; the other brackets keep the
    fraction in ``raw`` for the weighted overall score.
    """

    method = "experience"

    def __init__(self, *, config: ExperienceConfig | None = None) -> None:
        self._config = config or ExperienceConfig()

    def evaluate(
        self,
        profile: UserProfile,
        goal: CareerGoal,
        analysis: GapAnalysis,
    ) -> ComponentScore:
        config = self._config
        relevant = profile.experience.relevant_years
        total = profile.experience.total_years
        required = analysis.required_years

        if relevant >= required:
            bracket = "qualified"
            bonus = min(config.max_surplus_bonus, (relevant - required) * config.surplus_points_per_year)
            raw = min(100.0, config.qualified_base + bonus)
        elif relevant >= required * 0.5:
            bracket = "partial"
            ratio = relevant / required
            raw = round_int(config.partial_floor + (ratio - 0.5) * config.partial_slope)
        elif relevant > 0:
            bracket = "little"
            ratio = relevant / (required * 0.5)
            raw = round_int(ratio * config.little_ceiling)
        elif total > 0:
            bracket = "general_only"
            raw = min(config.max_general_points, total * config.general_points_per_year)
        else:
            bracket = "none"
            raw = 0.0

        return ComponentScore(
            method=self.method,
            score=round_int(clamp(raw, 0, 100)),
            raw=clamp(raw, 0, 100),
            metadata={
                "required_years": required,
                "relevant_years": relevant,
                "total_years": total,
                "bracket": bracket,
            },
        )
