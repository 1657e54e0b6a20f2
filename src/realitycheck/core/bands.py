"""Best, average and worst case outcome bands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from ..schemas import (
    CareerGoal,
    ProbabilityBandResult,
    ProbabilityBands,
    SacrificeIndicators,
    ScoreBreakdown,
    UserProfile,
)
from ..schemas.result import Band
from .numbers import round_half_up, round_int
from .requirements import GapAnalysis

BANDS: tuple[Band, ...] = ("best", "average", "worst")


@dataclass
class BandConfig:
    """Timeline and effort multipliers per band."""

    month_multipliers: Mapping[str, float] = field(
        default_factory=lambda: {"best": 0.8, "average": 1.0, "worst": 1.5}
    )
    month_floors: Mapping[str, int] = field(
        default_factory=lambda: {"best": 1, "average": 2, "worst": 3}
    )
    hour_multipliers: Mapping[str, float] = field(
        default_factory=lambda: {"best": 0.8, "average": 1.0, "worst": 1.3}
    )
    base_hours: float = 2.0
    hours_per_skill_gap: float = 0.5
    experience_hours_threshold: int = 50
    experience_hours: float = 1.0
    max_hours: float = 8.0
    average_likelihood: int = 50


class ProbabilityBandCalculator:
    """Build the three outcome bands for one evaluation."""

    def __init__(self, *, config: BandConfig | None = None) -> None:
        self._config = config or BandConfig()

    def calculate(
        self,
        profile: UserProfile,
        goal: CareerGoal,
        analysis: GapAnalysis,
        breakdown: ScoreBreakdown,
        overall_score: int,
    ) -> ProbabilityBands:
        results = {}
        for band in BANDS:
            hours = self.required_hours(band, analysis, breakdown.experience_score)
            results[band] = ProbabilityBandResult(
                band=band,
                likelihood=self.likelihood(band, overall_score),
                estimated_timeline_months=self.timeline_months(band, analysis),
                required_daily_hours=hours,
                sacrifices=self.sacrifices(profile, goal, analysis, hours),
                contributing_factors=contributing_factors(band, overall_score, breakdown),
                required_actions=required_actions(band, profile, analysis, breakdown),
            )
        return ProbabilityBands(**results)

    def timeline_months(self, band: Band, analysis: GapAnalysis) -> int:
        base = analysis.minimum_realistic_months
        months = round_int(base * self._config.month_multipliers[band])
        return max(self._config.month_floors[band], months)

    def likelihood(self, band: Band, overall_score: int) -> int:
        # Not normalized: the average band is a fixed 50% on its own.
        if band == "average":
            return self._config.average_likelihood
        if band == "best":
            if overall_score >= 80:
                return 30
            if overall_score >= 50:
                return 20
            return 10
        if overall_score < 50:
            return 40
        if overall_score < 80:
            return 30
        return 20

    def required_hours(self, band: Band, analysis: GapAnalysis, experience_score: int) -> float:
        """Daily hours of learning, networking and job search, capped at 8."""
        config = self._config
        hours = config.base_hours + len(analysis.skill_gaps) * config.hours_per_skill_gap
        if experience_score < config.experience_hours_threshold:
            hours += config.experience_hours
        hours *= config.hour_multipliers[band]
        return max(0.0, min(config.max_hours, round_half_up(hours, 1)))

    @staticmethod
    def sacrifices(
        profile: UserProfile,
        goal: CareerGoal,
        analysis: GapAnalysis,
        hours: float,
    ) -> SacrificeIndicators:
        employed = profile.employment_status == "employed"
        significant_gaps = len(analysis.skill_gaps) > 2 or analysis.has_critical_gap
        role = goal.target_role.lower()

        return SacrificeIndicators(
            reduce_leisure_time=hours > 3,
            reduce_current_job_commitment=employed and hours > 4,
            financial_investment=significant_gaps
            or profile.education.level in ("high_school", "none"),
            location_flexibility=goal.target_location is not None
            and not profile.is_location_flexible,
            accept_lower_salary=profile.experience.relevant_years < 1
            or "junior" in role
            or "entry" in role,
            work_non_standard_hours=goal.timeline.target_months < 12 and hours > 4,
            delay_other_goals=hours > 5 or significant_gaps,
        )


def contributing_factors(band: Band, overall_score: int, breakdown: ScoreBreakdown) -> list[str]:
    """Why this outcome would happen, in display order."""
    factors: list[str] = []

    if band == "best":
        if overall_score >= 80:
            factors.append("Strong alignment between current profile and target role")
        if breakdown.experience_score >= 80:
            factors.append("Sufficient relevant experience")
        if breakdown.skill_score >= 80:
            factors.append("Strong skill match")
        if breakdown.education_score >= 80:
            factors.append("Education requirements met")
        factors.append("High motivation and consistent effort")
        factors.append("Favorable market conditions and opportunities")
    elif band == "average":
        factors.append("Moderate alignment with target role")
        if breakdown.experience_score < 70:
            factors.append("Some experience gaps to address")
        if breakdown.skill_score < 70:
            factors.append("Some skill development needed")
        factors.append("Standard progress with typical challenges")
    else:
        if overall_score < 50:
            factors.append("Significant gaps between current profile and target role")
        if breakdown.experience_score < 50:
            factors.append("Insufficient relevant experience")
        if breakdown.skill_score < 50:
            factors.append("Major skill gaps")
        if breakdown.education_score < 50:
            factors.append("Education requirements not met")
        factors.append("Potential market challenges or competition")
        factors.append("Unrealistic timeline expectations")

    return factors


def required_actions(
    band: Band,
    profile: UserProfile,
    analysis: GapAnalysis,
    breakdown: ScoreBreakdown,
) -> list[str]:
    actions: list[str] = []

    if breakdown.skill_score < 80:
        actions.extend(
            f"Learn {gap.skill_name} to proficiency level {gap.required_proficiency}"
            for gap in analysis.critical_gaps
        )
    if breakdown.experience_score < 80:
        actions.append("Gain relevant experience through projects, volunteering, or side work")

    actions.append("Build professional network in target industry")
    actions.append("Attend industry events and meetups")

    if band in ("best", "average"):
        actions.append("Apply to relevant positions consistently")
        actions.append("Prepare for technical and behavioral interviews")

    actions.append("Build portfolio or update resume to highlight relevant experience")

    if band == "worst" and profile.education.level in ("high_school", "none"):
        actions.append("Consider additional education or certifications")

    return actions
