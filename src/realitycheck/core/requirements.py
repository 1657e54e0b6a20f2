"""What a target role asks for, and how far a profile is from it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from ..schemas import CareerGoal, SkillGap, UserProfile

# Checked top to bottom; the first keyword group found in the role title wins.
DEFAULT_ROLE_RULES: tuple[tuple[tuple[str, ...], float], ...] = (
    (("senior", "lead", "principal"), 5),
    (("junior", "entry", "associate"), 1),
    (("director", "manager", "head"), 7),
)


@dataclass
class RequirementsConfig:
    """Heuristics used to estimate requirements and the time to close gaps."""

    role_rules: Sequence[tuple[Sequence[str], float]] = DEFAULT_ROLE_RULES
    default_required_years: float = 3
    expected_skill_count: int = 3
    required_proficiency: int = 3
    placeholder_gap_months: int = 6
    months_per_proficiency_level: int = 2
    default_gap_months: int = 3
    career_change_threshold_years: float = 1
    career_change_months: float = 6
    minimum_months: float = 2


@dataclass(slots=True)
class GapAnalysis:
    """Distance between a profile and a goal, shared by every downstream rule."""

    required_years: float
    experience_gap: float
    skill_gaps: list[SkillGap] = field(default_factory=list)
    total_skill_months: float = 0.0
    is_career_change: bool = False
    career_change_months: float = 0.0
    minimum_realistic_months: float = 0.0

    @property
    def has_critical_gap(self) -> bool:
        return any(gap.is_critical for gap in self.skill_gaps)

    @property
    def critical_gaps(self) -> list[SkillGap]:
        return [gap for gap in self.skill_gaps if gap.is_critical]


class RequirementsAnalyzer:
    """Derive required experience, skill gaps and the realistic minimum timeline."""

    def __init__(self, *, config: RequirementsConfig | None = None) -> None:
        self._config = config or RequirementsConfig()

    @property
    def config(self) -> RequirementsConfig:
        return self._config

    def analyze(self, profile: UserProfile, goal: CareerGoal) -> GapAnalysis:
        config = self._config
        relevant_years = profile.experience.relevant_years
        required_years = self.required_years(goal.target_role)
        experience_gap = max(0.0, required_years - relevant_years)

        skill_gaps = self.identify_skill_gaps(profile, goal)
        total_skill_months = sum(
            gap.estimated_time_to_acquire_months or config.default_gap_months
            for gap in skill_gaps
        )

        is_career_change = relevant_years < config.career_change_threshold_years
        career_change_months = config.career_change_months if is_career_change else 0.0
        minimum_months = max(
            config.minimum_months,
            experience_gap * 12 + total_skill_months + career_change_months,
        )

        return GapAnalysis(
            required_years=required_years,
            experience_gap=experience_gap,
            skill_gaps=skill_gaps,
            total_skill_months=total_skill_months,
            is_career_change=is_career_change,
            career_change_months=career_change_months,
            minimum_realistic_months=minimum_months,
        )

    def required_years(self, target_role: str) -> float:
        title = target_role.lower()
        for keywords, years in self._config.role_rules:
            if any(keyword in title for keyword in keywords):
                return years
        return self._config.default_required_years

    def identify_skill_gaps(self, profile: UserProfile, goal: CareerGoal) -> list[SkillGap]:
        """Placeholder gaps for missing skills first, then weak listed skills.

        Without a per-role skill catalogue the engine assumes every role needs
        ``expected_skill_count`` skills at ``required_proficiency``.
        """
        config = self._config
        required = config.required_proficiency
        gaps: list[SkillGap] = []

        missing = config.expected_skill_count - len(profile.skills)
        for index in range(1, missing + 1):
            gaps.append(
                SkillGap(
                    skill_name=f"Required skill {index} for {goal.target_role}",
                    current_proficiency=0,
                    required_proficiency=required,
                    priority=1,
                    estimated_time_to_acquire_months=config.placeholder_gap_months,
                )
            )

        for skill in profile.skills:
            if skill.proficiency >= required:
                continue
            gaps.append(
                SkillGap(
                    skill_name=skill.name,
                    current_proficiency=skill.proficiency,
                    required_proficiency=required,
                    priority=1 if skill.proficiency == 0 else 2,
                    estimated_time_to_acquire_months=(required - skill.proficiency)
                    * config.months_per_proficiency_level,
                )
            )

        return gaps
