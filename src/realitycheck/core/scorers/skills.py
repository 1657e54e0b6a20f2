"""Breadth and average proficiency of listed skills."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ...schemas import CareerGoal, UserProfile
from ..requirements import GapAnalysis
from .base import ComponentScore


@dataclass
class SkillConfig:
    # (minimum average proficiency, score), highest first
    proficiency_tiers: Sequence[tuple[float, int]] = ((4, 100), (3, 80), (2, 50), (1, 25))
    points_per_skill: int = 2
    max_count_bonus: int = 20


class SkillScorer:
    """Average proficiency tier plus a capped bonus for skill breadth.

    Skills are not matched against the role here; that happens in the
    scenario-based warnings.
    """

    method = "skill"

    def __init__(self, *, config: SkillConfig | None = None) -> None:
        self._config = config or SkillConfig()

    def evaluate(
        self,
        profile: UserProfile,
        goal: CareerGoal,
        analysis: GapAnalysis,
    ) -> ComponentScore:
        skills = profile.skills
        if not skills:
            return ComponentScore(
                method=self.method,
                score=0,
                metadata={"skill_count": 0, "average_proficiency": None},
            )

        average = sum(skill.proficiency for skill in skills) / len(skills)
        proficiency_score = self._tier_score(average)
        count_bonus = min(self._config.max_count_bonus, len(skills) * self._config.points_per_skill)

        return ComponentScore(
            method=self.method,
            score=min(100, proficiency_score + count_bonus),
            metadata={
                "skill_count": len(skills),
                "average_proficiency": average,
                "proficiency_score": proficiency_score,
                "count_bonus": count_bonus,
            },
        )

    def _tier_score(self, average: float) -> int:
        for minimum, score in self._config.proficiency_tiers:
            if average >= minimum:
                return int(score)
        return 0
