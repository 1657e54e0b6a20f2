"""Education level plus a bonus when the field of study fits the industry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Sequence

from ...schemas import CareerGoal, UserProfile
from ..requirements import GapAnalysis
from .base import ComponentScore

DEFAULT_LEVEL_SCORES: dict[str, int] = {
    "doctorate": 100,
    "masters": 100,
    "bachelors": 80,
    "associates": 60,
    "high_school": 40,
    "none": 0,
}

# (field-of-study keywords, industry keywords); any hit on both sides counts.
DEFAULT_FIELD_GROUPS: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("computer", "software", "tech"), ("tech", "software", "it")),
    (("business", "management", "finance"), ("business", "finance", "consulting")),
)


@dataclass
class EducationConfig:
    level_scores: Mapping[str, int] = field(default_factory=lambda: dict(DEFAULT_LEVEL_SCORES))
    field_groups: Sequence[tuple[Sequence[str], Sequence[str]]] = DEFAULT_FIELD_GROUPS
    related_field_bonus: int = 20
    partial_field_bonus: int = 15


class EducationScorer:
    """Base score by level, +20 for a related field, +15 for a textual overlap."""

    method = "education"

    def __init__(self, *, config: EducationConfig | None = None) -> None:
        self._config = config or EducationConfig()

    def evaluate(
        self,
        profile: UserProfile,
        goal: CareerGoal,
        analysis: GapAnalysis,
    ) -> ComponentScore:
        education = profile.education
        base = int(self._config.level_scores.get(education.level, 0))
        bonus, match = self._field_bonus(education.field, goal.target_industry)

        return ComponentScore(
            method=self.method,
            score=max(0, min(100, base + bonus)),
            metadata={
                "level": education.level,
                "base_score": base,
                "field_bonus": bonus,
                "field_match": match,
            },
        )

    def _field_bonus(self, study_field: str | None, industry: str | None) -> tuple[int, str]:
        if not study_field or not industry:
            return 0, "not_applicable"

        field_lower = study_field.lower()
        industry_lower = industry.lower()

        for field_keywords, industry_keywords in self._config.field_groups:
            if any(k in field_lower for k in field_keywords) and any(
                k in industry_lower for k in industry_keywords
            ):
                return self._config.related_field_bonus, "related"

        if field_lower in industry_lower or industry_lower in field_lower:
            return self._config.partial_field_bonus, "partial"
        return 0, "none"
