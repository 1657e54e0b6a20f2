"""Read-only table of reference career scenarios."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Iterator

import yaml
from pydantic import ValidationError

from ..config import ConfigManager
from ..schemas import CareerGoal, CareerScenario, UserProfile


class ScenarioLoadError(ValueError):
    """Raised when a scenario table cannot be read or validated."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Could not load scenarios from {source}: {reason}")
        self.source = source
        self.reason = reason


class ScenarioCatalog:
    """Ordered, immutable scenario table.

    ``match`` returns the first scenario in table order that fits the goal;
    there is no best-match ranking.
    """

    def __init__(self, scenarios: Iterable[CareerScenario], *, industry_experience_slack: float = 2):
        self._scenarios: tuple[CareerScenario, ...] = tuple(scenarios)
        self._slack = industry_experience_slack

    @classmethod
    def default(cls) -> "ScenarioCatalog":
        """Catalog built from the scenarios bundled with the package."""
        return cls.from_document(ConfigManager().load("scenarios"), source="bundled scenarios")

    @classmethod
    def from_file(cls, path: str | Path) -> "ScenarioCatalog":
        try:
            document = ConfigManager.load_file(path)
        except (OSError, yaml.YAMLError) as exc:
            raise ScenarioLoadError(str(path), str(exc)) from exc
        return cls.from_document(document, source=str(path))

    @classmethod
    def from_document(cls, document: Any, *, source: str = "<memory>") -> "ScenarioCatalog":
        entries = document.get("scenarios") if isinstance(document, dict) else document
        if not isinstance(entries, list):
            raise ScenarioLoadError(source, "expected a list under 'scenarios'")
        try:
            scenarios = [CareerScenario.model_validate(entry) for entry in entries]
        except ValidationError as exc:
            raise ScenarioLoadError(source, str(exc)) from exc

        ids = [scenario.id for scenario in scenarios]
        duplicates = sorted({sid for sid in ids if ids.count(sid) > 1})
        if duplicates:
            raise ScenarioLoadError(source, f"duplicate scenario ids {duplicates}")
        return cls(scenarios)

    def __iter__(self) -> Iterator[CareerScenario]:
        return iter(self._scenarios)

    def __len__(self) -> int:
        return len(self._scenarios)

    @property
    def scenarios(self) -> tuple[CareerScenario, ...]:
        return self._scenarios

    def get(self, scenario_id: str) -> CareerScenario:
        for scenario in self._scenarios:
            if scenario.id == scenario_id:
                return scenario
        raise KeyError(f"Unknown scenario: {scenario_id!r}")

    def match(self, profile: UserProfile, goal: CareerGoal) -> CareerScenario | None:
        """First scenario whose role overlaps the goal's role, or whose industry
        equals the goal's and whose experience bar is within reach."""
        role = goal.target_role.lower()
        industry = goal.target_industry.lower()
        reachable_years = profile.experience.relevant_years + self._slack

        for scenario in self._scenarios:
            scenario_role = scenario.target_role.lower()
            if role in scenario_role or scenario_role in role:
                return scenario
            if (
                scenario.target_industry.lower() == industry
                and scenario.min_experience_years <= reachable_years
            ):
                return scenario
        return None
