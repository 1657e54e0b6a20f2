"""Warnings raised when a goal does not line up with reality."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from ..schemas import (
    AssessmentWarning,
    CareerGoal,
    CareerScenario,
    ProbabilityBands,
    ScoreBreakdown,
    UserProfile,
)
from .numbers import format_amount, format_number, round_half_up, round_int


@dataclass
class WarningConfig:
    """Thresholds for the warning checks."""

    low_score_threshold: int = 40
    available_hours: Mapping[str, float] = field(
        default_factory=lambda: {
            "employed": 3,
            "unemployed": 7,
            "student": 4,
            "self_employed": 3.5,
        }
    )
    hours_tolerance: float = 1.2
    hours_severe_ratio: float = 1.5
    employed_severe_hours: float = 5
    sustainable_hours: float = 8
    timeline_optimism_ratio: float = 0.7
    salary_tolerance: float = 1.2
    proficiency_gap_levels: int = 2
    default_months_to_learn: int = 6


class WarningGenerator:
    """Run every warning check in a fixed order; any number may fire."""

    def __init__(self, *, config: WarningConfig | None = None) -> None:
        self._config = config or WarningConfig()

    def generate(
        self,
        profile: UserProfile,
        goal: CareerGoal,
        breakdown: ScoreBreakdown,
        bands: ProbabilityBands,
        scenario: CareerScenario | None,
    ) -> list[AssessmentWarning]:
        warnings = self._score_warnings(profile, goal, breakdown)
        warnings.extend(self._situation_warnings(profile, goal))

        time_warning = self.check_time_availability(profile, bands)
        if time_warning:
            warnings.append(time_warning)

        expectation_warning = self.check_expectations(goal, scenario)
        if expectation_warning:
            warnings.append(expectation_warning)

        warnings.extend(self.check_skill_mismatch(profile, breakdown.skill_score, scenario))
        return warnings

    def _score_warnings(
        self,
        profile: UserProfile,
        goal: CareerGoal,
        breakdown: ScoreBreakdown,
    ) -> list[AssessmentWarning]:
        threshold = self._config.low_score_threshold
        warnings: list[AssessmentWarning] = []

        if breakdown.timeline_score < threshold:
            warnings.append(
                AssessmentWarning(
                    flag="timeline_unrealistic",
                    message=(
                        f"Your target timeline of {goal.timeline.target_months} months may be "
                        "unrealistic given your current profile. Consider extending your timeline."
                    ),
                    severity=3,
                    suggested_actions=[
                        "Review and adjust your timeline expectations",
                        "Break down your goal into smaller milestones",
                        "Consider a phased approach to your career transition",
                    ],
                )
            )

        if breakdown.experience_score < threshold:
            warnings.append(
                AssessmentWarning(
                    flag="insufficient_experience",
                    message=(
                        "You have insufficient relevant experience for this role. "
                        "Significant experience building will be required."
                    ),
                    severity=3,
                    context={
                        "relevantYears": profile.experience.relevant_years,
                        "targetRole": goal.target_role,
                    },
                    suggested_actions=[
                        "Consider targeting a more junior role first",
                        "Focus on gaining relevant experience through projects",
                        "Look for opportunities to work in related roles",
                    ],
                )
            )

        if breakdown.skill_score < threshold:
            warnings.append(
                AssessmentWarning(
                    flag="skill_gap_detected",
                    message=(
                        "Significant skill gaps detected. You will need to invest substantial "
                        "time in skill development."
                    ),
                    severity=3,
                    suggested_actions=[
                        "Identify critical skills needed for the role",
                        "Create a learning plan with timelines",
                        "Practice skills through real projects",
                    ],
                )
            )

        if breakdown.education_score < threshold:
            warnings.append(
                AssessmentWarning(
                    flag="education_requirement_mismatch",
                    message="Your education level may not meet typical requirements for this role.",
                    severity=2,
                    suggested_actions=[
                        "Research if the role truly requires higher education",
                        "Consider certifications or alternative credentials",
                        "Highlight relevant experience to compensate",
                    ],
                )
            )

        return warnings

    @staticmethod
    def _situation_warnings(profile: UserProfile, goal: CareerGoal) -> list[AssessmentWarning]:
        warnings: list[AssessmentWarning] = []

        if profile.experience.relevant_years < 1 and goal.target_industry:
            warnings.append(
                AssessmentWarning(
                    flag="career_path_unclear",
                    message=(
                        "You are attempting a significant career change. This will require more "
                        "time and effort than a typical transition."
                    ),
                    severity=2,
                    suggested_actions=[
                        "Research the target industry thoroughly",
                        "Network with people already in the field",
                        "Consider informational interviews",
                        "Build relevant experience gradually",
                    ],
                )
            )

        if goal.target_location and not profile.is_location_flexible:
            warnings.append(
                AssessmentWarning(
                    flag="location_constraint",
                    message=(
                        "Your location requirement may limit opportunities. "
                        "Consider if relocation is possible."
                    ),
                    severity=1,
                    suggested_actions=[
                        "Research job market in your target location",
                        "Consider remote work options if available",
                        "Evaluate if relocation is feasible",
                    ],
                )
            )

        if goal.remote_only:
            warnings.append(
                AssessmentWarning(
                    flag="competition_level_high",
                    message=(
                        "Remote-only positions are highly competitive. "
                        "You may face more competition."
                    ),
                    severity=2,
                    suggested_actions=[
                        "Consider hybrid or on-site options to increase opportunities",
                        "Strengthen your remote work skills and portfolio",
                        "Be prepared for a longer job search",
                    ],
                )
            )

        return warnings

    def check_time_availability(
        self,
        profile: UserProfile,
        bands: ProbabilityBands,
    ) -> AssessmentWarning | None:
        """Compare the average band's daily hours with what the user can spare."""
        config = self._config
        status = profile.employment_status
        required = bands.average.required_daily_hours
        available = config.available_hours.get(status, config.available_hours["self_employed"])

        if required <= available * config.hours_tolerance:
            return None

        employed = status == "employed"
        shortfall = round_half_up(required - available, 1)
        required_text = format_number(required)
        available_text = format_number(available)
        shortfall_text = format_number(shortfall)

        if employed and required > config.employed_severe_hours:
            severity = 3
            message = (
                f"You need {required_text} hours per day, but as a full-time employee, you likely "
                f"only have {available_text} hours available. This is {shortfall_text} hours more "
                "than realistic. You may need to reduce your current job commitment or extend "
                "your timeline."
            )
        elif required > config.sustainable_hours:
            severity = 3
            message = (
                f"You need {required_text} hours per day, which exceeds a sustainable 8-hour "
                "workday. This level of commitment is difficult to maintain long-term and may "
                "lead to burnout. Consider extending your timeline to reduce daily requirements."
            )
        else:
            severity = 3 if required > available * config.hours_severe_ratio else 2
            message = (
                f"You need {required_text} hours per day, but based on your current situation "
                f"({status}), you likely have approximately {available_text} hours available. "
                f"You're {shortfall_text} hours short per day, which could significantly impact "
                "your progress."
            )

        return AssessmentWarning(
            flag="resource_constraint",
            message=message,
            severity=severity,
            context={
                "requiredHours": required,
                "availableHours": available,
                "employmentStatus": status,
                "hoursShortfall": shortfall,
            },
            suggested_actions=[
                "Consider reducing work hours or taking a sabbatical if financially feasible"
                if employed
                else "Review your daily schedule to identify time blocks for career development",
                "Break down learning into smaller, more manageable daily chunks",
                "Consider extending your timeline to reduce daily time pressure",
                "Use time-blocking techniques to maximize productivity during available hours",
            ],
        )

    def check_expectations(
        self,
        goal: CareerGoal,
        scenario: CareerScenario | None,
    ) -> AssessmentWarning | None:
        """Timeline, then salary, against the matched scenario's typical values."""
        if scenario is None:
            return None

        config = self._config
        user_timeline = goal.timeline.target_months
        average_timeline = scenario.timeline_ranges.average_case_months

        if user_timeline < average_timeline * config.timeline_optimism_ratio:
            months_short = average_timeline - user_timeline
            percentage_faster = round_int((average_timeline - user_timeline) / average_timeline * 100)
            return AssessmentWarning(
                flag="timeline_unrealistic",
                message=(
                    f"Your target timeline of {user_timeline} months is {percentage_faster}% "
                    f"shorter than the average {average_timeline} months for {scenario.name}. "
                    f"Based on industry data, {percentage_faster}% of people with similar profiles "
                    "take longer than your target. This suggests your expectations may be "
                    "optimistic."
                ),
                severity=3,
                context={
                    "userTimeline": user_timeline,
                    "averageTimeline": average_timeline,
                    "monthsShort": months_short,
                    "percentageFaster": percentage_faster,
                    "scenarioName": scenario.name,
                },
                suggested_actions=[
                    f"Consider extending your timeline to {average_timeline} months to align "
                    "with typical outcomes",
                    "Review common failure reasons for this path to understand typical challenges",
                    "Break your goal into phases with intermediate milestones",
                    'Set a more aggressive "best case" timeline while planning for the average case',
                ],
            )

        salary = goal.salary_expectation
        typical = scenario.typical_salary_range
        if salary is None or typical is None or typical.max <= 0:
            return None
        if salary.desired <= typical.max * config.salary_tolerance:
            return None

        percentage_over = round_int((salary.desired - typical.max) / typical.max * 100)
        currency = salary.currency
        return AssessmentWarning(
            flag="salary_expectation_mismatch",
            message=(
                f"Your desired salary of {format_amount(salary.desired)} {currency} is "
                f"{percentage_over}% higher than the typical maximum "
                f"({format_amount(typical.max)} {currency}) for {scenario.name}. Only top "
                "performers at top companies typically reach this level. Your expectations may "
                "be unrealistic unless you have exceptional qualifications."
            ),
            severity=2,
            context={
                "userDesired": salary.desired,
                "typicalMin": typical.min,
                "typicalMax": typical.max,
                "percentageOver": percentage_over,
                "scenarioName": scenario.name,
            },
            suggested_actions=[
                "Research salary ranges for your specific location and experience level",
                "Consider that salary expectations may need adjustment based on your actual "
                "qualifications",
                "Focus on building skills and experience first, salary will follow",
                "Be open to accepting a lower initial salary to get your foot in the door",
            ],
        )

    def check_skill_mismatch(
        self,
        profile: UserProfile,
        skill_score: int,
        scenario: CareerScenario | None,
    ) -> list[AssessmentWarning]:
        """Critical scenario skills that are missing or far below the bar."""
        config = self._config

        if scenario is None:
            if skill_score >= config.low_score_threshold:
                return []
            return [
                AssessmentWarning(
                    flag="skill_gap_detected",
                    message=(
                        "Significant skill gaps detected. Without specific role requirements, we "
                        "recommend researching the exact skills needed for this position and "
                        "comparing them to your current skill set."
                    ),
                    severity=3,
                    suggested_actions=[
                        "Research job postings for your target role to identify required skills",
                        "Compare your current skills against typical requirements",
                        "Create a learning plan to address skill gaps",
                        "Consider informational interviews with people in the role",
                    ],
                )
            ]

        missing: list[str] = []
        missing_months = 0
        low_proficiency: list[dict[str, object]] = []

        for requirement in scenario.critical_requirements:
            wanted = requirement.skill_name.lower()
            held = next(
                (
                    skill
                    for skill in profile.skills
                    if wanted in skill.name.lower() or skill.name.lower() in wanted
                ),
                None,
            )
            if held is None:
                missing.append(requirement.skill_name)
                missing_months += requirement.months_to_learn or config.default_months_to_learn
            elif requirement.min_proficiency - held.proficiency >= config.proficiency_gap_levels:
                low_proficiency.append(
                    {
                        "name": requirement.skill_name,
                        "current": held.proficiency,
                        "required": requirement.min_proficiency,
                    }
                )

        warnings: list[AssessmentWarning] = []

        if missing:
            months_text = format_number(missing_months)
            plural = "s" if len(missing) > 1 else ""
            warnings.append(
                AssessmentWarning(
                    flag="skill_gap_detected",
                    message=(
                        f"You are missing {len(missing)} critical skill{plural} required for "
                        f"{scenario.name}: {', '.join(missing)}. Based on typical learning curves, "
                        f"acquiring these skills could take approximately {months_text} months. "
                        "This is a significant gap that must be addressed before you can "
                        "realistically achieve this goal."
                    ),
                    severity=3,
                    context={
                        "missingSkills": missing,
                        "estimatedMonthsToLearn": missing_months,
                        "scenarioName": scenario.name,
                    },
                    suggested_actions=[
                        f"Prioritize learning: {missing[0]} (most critical)",
                        "Create a structured learning plan with milestones",
                        "Build projects that demonstrate these skills",
                        "Consider taking courses or finding a mentor",
                        f"Adjust your timeline to account for {months_text} months of skill "
                        "development",
                    ],
                )
            )

        if low_proficiency:
            count = len(low_proficiency)
            details = "; ".join(
                f"{item['name']} (current: {item['current']}/5, needed: {item['required']}/5)"
                for item in low_proficiency
            )
            verb = "skills are" if count > 1 else "skill is"
            warnings.append(
                AssessmentWarning(
                    flag="skill_gap_detected",
                    message=(
                        f"Your proficiency in {count} critical {verb} below the required level: "
                        f"{details}. You'll need to significantly improve these skills, which "
                        f"typically requires {count * 2}-{count * 4} months of focused practice."
                    ),
                    severity=2,
                    context={
                        "lowProficiencySkills": low_proficiency,
                        "scenarioName": scenario.name,
                    },
                    suggested_actions=[
                        "Focus on deliberate practice in these specific skill areas",
                        "Build projects that require these skills at the target proficiency level",
                        "Seek feedback from experts or mentors",
                        "Consider taking advanced courses or workshops",
                    ],
                )
            )

        return warnings
