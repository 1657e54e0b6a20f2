"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CoreConfig(BaseModel):
    score_weights: dict[str, float] | None = None

    model_config = ConfigDict(extra="forbid")


class ScenarioSourceConfig(BaseModel):
    path: Path | None = None

    model_config = ConfigDict(extra="forbid")


class ScorerConfig(BaseModel):
    requirements: dict[str, Any] | None = None
    experience: dict[str, Any] | None = None
    skill: dict[str, Any] | None = None
    education: dict[str, Any] | None = None
    timeline: dict[str, Any] | None = None
    bands: dict[str, Any] | None = None
    warnings: dict[str, Any] | None = None

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    core: CoreConfig = Field(default_factory=CoreConfig)
    scenarios: ScenarioSourceConfig = Field(default_factory=ScenarioSourceConfig)
    scorers: ScorerConfig = Field(default_factory=ScorerConfig)

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        if self.core.score_weights:
            settings["core"] = self.core.model_dump(exclude_none=True)
        if self.scenarios.path is not None:
            settings["scenarios"] = {"path": self.scenarios.path}
        scorer_settings = self.scorers.model_dump(exclude_none=True)
        if scorer_settings:
            settings["scorers"] = scorer_settings
        return settings


def load_config(raw: Any) -> AppConfig:
    """Validate a loaded YAML document; an empty file means defaults."""
    if raw is None:
        return AppConfig()
    return AppConfig.model_validate(raw)
