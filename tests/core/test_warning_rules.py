from __future__ import annotations

from typing import Any

import pytest

from realitycheck.core import (
    ProbabilityBandCalculator,
    RequirementsAnalyzer,
    ScenarioCatalog,
    WarningConfig,
    WarningGenerator,
)
from realitycheck.schemas import CareerGoal, ProbabilityBands, ScoreBreakdown, UserProfile


@pytest.fixture(scope="module")
def catalog() -> ScenarioCatalog:
    return ScenarioCatalog.default()


def build_profile(**kwargs: Any) -> UserProfile:
    defaults: dict[str, Any] = {
        "age": 30,
        "education": {"level": "bachelors"},
        "experience": {"total_years": 5, "relevant_years": 3},
        "skills": [],
        "employment_status": "employed",
    }
    defaults.update(kwargs)
    return UserProfile(**defaults)


def build_goal(**kwargs: Any) -> CareerGoal:
    defaults: dict[str, Any] = {
        "target_role": "Software Development Engineer",
        "target_industry": "Technology",
        "timeline": {"target_months": 12},
    }
    defaults.update(kwargs)
    return CareerGoal(**defaults)


def breakdown(score: int = 80, **overrides: int) -> ScoreBreakdown:
    values = {
        "experience_score": score,
        "skill_score": score,
        "education_score": score,
        "timeline_score": score,
    }
    values.update(overrides)
    return ScoreBreakdown(**values)


def bands_for(profile: UserProfile, goal: CareerGoal, scores: ScoreBreakdown) -> ProbabilityBands:
    analysis = RequirementsAnalyzer().analyze(profile, goal)
    return ProbabilityBandCalculator().calculate(profile, goal, analysis, scores, 50)


def flags(warnings) -> list[str]:
    return [warning.flag for warning in warnings]


def test_low_scores_raise_warnings_in_order():
    profile = build_profile()
    goal = build_goal()
    scores = breakdown(39)

    warnings = WarningGenerator().generate(profile, goal, scores, bands_for(profile, goal, scores), None)

    assert flags(warnings)[:4] == [
        "timeline_unrealistic",
        "insufficient_experience",
        "skill_gap_detected",
        "education_requirement_mismatch",
    ]
    assert [warning.severity for warning in warnings[:4]] == [3, 3, 3, 2]
    assert warnings[0].message.startswith("Your target timeline of 12 months")
    assert warnings[1].context == {"relevantYears": 3, "targetRole": "Software Development Engineer"}


def test_scores_at_threshold_do_not_warn():
    profile = build_profile(skills=[{"name": f"Skill {i}", "proficiency": 3} for i in range(3)])
    goal = build_goal()
    scores = breakdown(40)

    warnings = WarningGenerator().generate(profile, goal, scores, bands_for(profile, goal, scores), None)

    assert warnings == []


def test_situation_warnings():
    profile = build_profile(experience={"total_years": 4, "relevant_years": 0.5})
    goal = build_goal(requirements={"target_location": "Berlin", "remote_only": True})
    scores = breakdown(80)

    warnings = WarningGenerator().generate(profile, goal, scores, bands_for(profile, goal, scores), None)

    assert flags(warnings) == ["career_path_unclear", "location_constraint", "competition_level_high"]
    assert [warning.severity for warning in warnings] == [2, 1, 2]


def test_flexible_location_is_not_a_constraint():
    profile = build_profile(location={"country": "DE", "is_flexible": True})
    goal = build_goal(requirements={"target_location": "Berlin"})
    scores = breakdown(80)

    warnings = WarningGenerator().generate(profile, goal, scores, bands_for(profile, goal, scores), None)

    assert "location_constraint" not in flags(warnings)


def test_time_shortfall_for_employed_user():
    profile = build_profile(experience={"total_years": 1, "relevant_years": 0.5})
    goal = build_goal()
    bands = bands_for(profile, goal, breakdown(80, experience_score=13))

    warning = WarningGenerator().check_time_availability(profile, bands)

    assert warning is not None
    assert warning.flag == "resource_constraint"
    assert warning.severity == 2
    assert "You need 4.5 hours per day" in warning.message
    assert "(employed), you likely have approximately 3 hours available" in warning.message
    assert "You're 1.5 hours short per day" in warning.message
    assert warning.context["hoursShortfall"] == 1.5
    assert warning.suggested_actions[0].startswith("Consider reducing work hours")


def test_time_shortfall_for_full_time_employee_is_severe():
    profile = build_profile(
        experience={"total_years": 0, "relevant_years": 0},
        skills=[{"name": f"Skill {i}", "proficiency": 0} for i in range(5)],
    )
    goal = build_goal()
    bands = bands_for(profile, goal, breakdown(80, experience_score=0))

    warning = WarningGenerator().check_time_availability(profile, bands)

    assert warning is not None
    assert warning.severity == 3
    assert "You need 5.5 hours per day, but as a full-time employee" in warning.message
    assert "This is 2.5 hours more than realistic" in warning.message


def test_student_shortfall_uses_schedule_advice():
    profile = build_profile(
        employment_status="student",
        experience={"total_years": 0, "relevant_years": 0},
        skills=[{"name": f"Skill {i}", "proficiency": 0} for i in range(5)],
    )
    goal = build_goal()
    bands = bands_for(profile, goal, breakdown(80, experience_score=0))

    warning = WarningGenerator().check_time_availability(profile, bands)

    assert warning is not None
    assert warning.severity == 2
    assert "(student), you likely have approximately 4 hours available" in warning.message
    assert warning.suggested_actions[0].startswith("Review your daily schedule")


def test_time_within_tolerance_does_not_warn():
    profile = build_profile(employment_status="unemployed", experience={"total_years": 0, "relevant_years": 0})
    goal = build_goal()
    bands = bands_for(profile, goal, breakdown(80, experience_score=0))

    assert WarningGenerator().check_time_availability(profile, bands) is None


def test_custom_available_hours():
    profile = build_profile(employment_status="unemployed", experience={"total_years": 0, "relevant_years": 0})
    goal = build_goal()
    bands = bands_for(profile, goal, breakdown(80, experience_score=0))
    config = WarningConfig(available_hours={"unemployed": 2, "self_employed": 3.5})

    warning = WarningGenerator(config=config).check_time_availability(profile, bands)

    assert warning is not None
    assert warning.severity == 3


def test_optimistic_timeline_against_scenario(catalog: ScenarioCatalog):
    goal = build_goal(
        target_role="Machine Learning Engineer",
        target_industry="Artificial Intelligence",
        timeline={"target_months": 6},
    )

    warning = WarningGenerator().check_expectations(goal, catalog.get("ml-engineer"))

    assert warning is not None
    assert warning.flag == "timeline_unrealistic"
    assert warning.severity == 3
    assert "Your target timeline of 6 months is 67% shorter than the average 18 months" in warning.message
    assert warning.context["monthsShort"] == 12
    assert warning.suggested_actions[0] == (
        "Consider extending your timeline to 18 months to align with typical outcomes"
    )


def test_salary_above_typical_range(catalog: ScenarioCatalog):
    goal = build_goal(salary_expectation={"desired": 400000, "minimum": 200000, "currency": "USD"})

    warning = WarningGenerator().check_expectations(goal, catalog.get("faang-sde"))

    assert warning is not None
    assert warning.flag == "salary_expectation_mismatch"
    assert warning.severity == 2
    assert "Your desired salary of 400,000 USD is 33% higher" in warning.message
    assert "(300,000 USD)" in warning.message


def test_salary_within_tolerance(catalog: ScenarioCatalog):
    goal = build_goal(salary_expectation={"desired": 350000, "minimum": 200000, "currency": "USD"})

    assert WarningGenerator().check_expectations(goal, catalog.get("faang-sde")) is None


def test_timeline_warning_takes_precedence_over_salary(catalog: ScenarioCatalog):
    goal = build_goal(
        timeline={"target_months": 6},
        salary_expectation={"desired": 400000, "minimum": 200000, "currency": "USD"},
    )

    warning = WarningGenerator().check_expectations(goal, catalog.get("faang-sde"))

    assert warning is not None
    assert warning.flag == "timeline_unrealistic"


def test_expectations_without_scenario():
    assert WarningGenerator().check_expectations(build_goal(), None) is None


def test_missing_and_weak_critical_skills(catalog: ScenarioCatalog):
    profile = build_profile(
        skills=[
            {"name": "System Design", "proficiency": 1},
            {"name": "Python", "proficiency": 4},
        ]
    )

    warnings = WarningGenerator().check_skill_mismatch(profile, 60, catalog.get("faang-sde"))

    assert flags(warnings) == ["skill_gap_detected", "skill_gap_detected"]
    missing, weak = warnings
    assert missing.severity == 3
    assert "You are missing 2 critical skills required for FAANG Software Development Engineer" in missing.message
    assert "Data Structures and Algorithms, Problem Solving" in missing.message
    assert "approximately 12 months" in missing.message
    assert missing.context["estimatedMonthsToLearn"] == 12
    assert isinstance(missing.context["estimatedMonthsToLearn"], int)
    assert missing.suggested_actions[0] == "Prioritize learning: Data Structures and Algorithms (most critical)"
    assert weak.severity == 2
    assert "Your proficiency in 1 critical skill is below the required level" in weak.message
    assert "System Design (current: 1/5, needed: 3/5)" in weak.message
    assert "2-4 months" in weak.message


def test_skill_mismatch_without_scenario():
    generator = WarningGenerator()

    assert generator.check_skill_mismatch(build_profile(), 60, None) == []
    warnings = generator.check_skill_mismatch(build_profile(), 20, None)
    assert flags(warnings) == ["skill_gap_detected"]
    assert "Without specific role requirements" in warnings[0].message
