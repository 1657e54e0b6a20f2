from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from realitycheck.core import ScenarioCatalog, ScenarioLoadError
from realitycheck.schemas import CareerGoal, UserProfile


@pytest.fixture(scope="module")
def catalog() -> ScenarioCatalog:
    return ScenarioCatalog.default()


def build_profile(relevant: float = 0) -> UserProfile:
    return UserProfile(
        age=30,
        education={"level": "bachelors"},
        experience={"total_years": relevant, "relevant_years": relevant},
        employment_status="employed",
    )


def build_goal(role: str, industry: str) -> CareerGoal:
    return CareerGoal(target_role=role, target_industry=industry, timeline={"target_months": 12})


def scenario_entry(scenario_id: str, **overrides: Any) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "id": scenario_id,
        "name": "Data Analyst",
        "description": "Entry level analytics",
        "target_role": "Data Analyst",
        "target_industry": "Finance",
        "min_experience_years": 0,
        "preferred_education": "bachelors",
        "timeline_ranges": {"best_case_months": 3, "average_case_months": 6, "worst_case_months": 12},
        "time_requirements": {
            "skill_building_hours": 2,
            "job_search_hours": 1,
            "interview_prep_hours": 1,
            "is_on_top_of_full_time_job": True,
        },
    }
    entry.update(overrides)
    return entry


def test_bundled_scenarios(catalog: ScenarioCatalog):
    assert [scenario.id for scenario in catalog] == ["faang-sde", "ml-engineer", "masters-research-path"]
    assert len(catalog) == 3

    faang = catalog.get("faang-sde")
    assert faang.timeline_ranges.average_case_months == 12
    assert faang.typical_salary_range.max == 300000
    assert len(faang.critical_requirements) == 4
    assert catalog.get("masters-research-path").typical_salary_range.min == 0


def test_get_unknown_scenario(catalog: ScenarioCatalog):
    with pytest.raises(KeyError):
        catalog.get("astronaut")


@pytest.mark.parametrize(
    ("role", "industry", "relevant", "expected"),
    [
        ("Machine Learning Engineer", "Artificial Intelligence", 0, "ml-engineer"),
        ("Research Engineer", "Academia", 0, "masters-research-path"),
        ("Software Development Engineer", "Retail", 0, "faang-sde"),
        # industry match is checked in table order, so faang-sde wins
        ("Data Engineer", "Technology", 0, "faang-sde"),
        ("Nurse", "Healthcare", 5, None),
    ],
)
def test_match_returns_first_fitting_scenario(
    catalog: ScenarioCatalog, role: str, industry: str, relevant: float, expected: str | None
):
    scenario = catalog.match(build_profile(relevant), build_goal(role, industry))

    assert (scenario.id if scenario else None) == expected


def test_industry_match_requires_reachable_experience():
    catalog = ScenarioCatalog.from_document(
        [scenario_entry("senior-analyst", target_role="Portfolio Manager", min_experience_years=5)]
    )
    goal = build_goal("Quant", "Finance")

    assert catalog.match(build_profile(2), goal) is None
    assert catalog.match(build_profile(3), goal).id == "senior-analyst"


def test_from_document_rejects_duplicate_ids():
    with pytest.raises(ScenarioLoadError) as excinfo:
        ScenarioCatalog.from_document({"scenarios": [scenario_entry("a"), scenario_entry("a")]})

    assert "duplicate scenario ids ['a']" in str(excinfo.value)


def test_from_document_rejects_invalid_entries():
    with pytest.raises(ScenarioLoadError):
        ScenarioCatalog.from_document({"scenarios": [scenario_entry("a", preferred_education="bootcamp")]})

    with pytest.raises(ScenarioLoadError):
        ScenarioCatalog.from_document({"scenarios": "faang-sde"})


def test_from_file(tmp_path: Path):
    path = tmp_path / "scenarios.yaml"
    path.write_text(
        "scenarios:\n"
        "  - id: analyst\n"
        "    name: Analyst\n"
        "    description: Analyst path\n"
        "    target_role: Analyst\n"
        "    target_industry: Finance\n"
        "    min_experience_years: 0\n"
        "    preferred_education: bachelors\n"
        "    timeline_ranges: {best_case_months: 3, average_case_months: 6, worst_case_months: 9}\n"
        "    time_requirements:\n"
        "      skill_building_hours: 2\n"
        "      job_search_hours: 1\n"
        "      interview_prep_hours: 1\n"
        "      is_on_top_of_full_time_job: false\n",
        encoding="utf-8",
    )

    catalog = ScenarioCatalog.from_file(path)

    assert [scenario.id for scenario in catalog] == ["analyst"]


def test_from_file_missing(tmp_path: Path):
    with pytest.raises(ScenarioLoadError) as excinfo:
        ScenarioCatalog.from_file(tmp_path / "missing.yaml")

    assert excinfo.value.source.endswith("missing.yaml")
