from __future__ import annotations

import pytest
from pydantic import ValidationError

from realitycheck.schemas import CareerGoal, RealityCheckInput, SkillGap, UserProfile


def camel_profile(**overrides) -> dict:
    profile = {
        "age": 31,
        "education": {"level": "masters", "field": "Physics", "graduationYear": 2018},
        "experience": {"totalYears": 6, "relevantYears": 1.5, "currentRole": "Analyst"},
        "skills": [{"name": "Python", "proficiency": 3, "yearsOfExperience": 4}],
        "employmentStatus": "employed",
        "location": {"country": "NL", "city": "Utrecht", "isFlexible": False},
    }
    profile.update(overrides)
    return profile


def test_profile_accepts_camel_case_and_snake_case():
    camel = UserProfile.model_validate(camel_profile())
    snake = UserProfile(
        age=31,
        education={"level": "masters", "field": "Physics", "graduation_year": 2018},
        experience={"total_years": 6, "relevant_years": 1.5, "current_role": "Analyst"},
        skills=[{"name": "Python", "proficiency": 3, "years_of_experience": 4}],
        employment_status="employed",
        location={"country": "NL", "city": "Utrecht", "is_flexible": False},
    )

    assert camel == snake
    assert camel.experience.relevant_years == pytest.approx(1.5)
    assert camel.is_location_flexible is False


def test_profile_defaults():
    profile = UserProfile(
        age=20,
        education={"level": "high_school"},
        experience={"total_years": 0, "relevant_years": 0},
        employment_status="student",
    )

    assert profile.skills == []
    assert profile.location is None
    assert profile.is_location_flexible is False
    assert profile.experience.previous_roles == []


@pytest.mark.parametrize(
    "overrides",
    [
        {"skills": [{"name": "Python", "proficiency": 6}]},
        {"employmentStatus": "retired"},
        {"education": {"level": "bootcamp"}},
        {"experience": {"totalYears": -1, "relevantYears": 0}},
    ],
)
def test_profile_rejects_invalid_values(overrides):
    with pytest.raises(ValidationError):
        UserProfile.model_validate(camel_profile(**overrides))


def test_goal_requirement_helpers():
    goal = CareerGoal.model_validate(
        {
            "targetRole": "Data Scientist",
            "targetIndustry": "Healthcare",
            "timeline": {"targetMonths": 9, "isFlexible": True},
            "salaryExpectation": {"desired": 90000, "minimum": 70000, "currency": "EUR"},
            "requirements": {"remoteOnly": True, "targetLocation": "Amsterdam"},
        }
    )

    assert goal.remote_only is True
    assert goal.target_location == "Amsterdam"
    assert goal.salary_expectation.currency == "EUR"


def test_goal_timeline_must_be_positive():
    with pytest.raises(ValidationError):
        CareerGoal(target_role="Analyst", target_industry="Finance", timeline={"target_months": 0})


def test_input_requires_profile_and_goal():
    with pytest.raises(ValidationError):
        RealityCheckInput.model_validate({"profile": camel_profile()})


def test_skill_gap_wire_format():
    gap = SkillGap(skill_name="SQL", current_proficiency=1, required_proficiency=3, priority=2)

    assert gap.to_wire() == {
        "skillName": "SQL",
        "currentProficiency": 1,
        "requiredProficiency": 3,
        "priority": 2,
    }
    assert gap.is_critical is False
