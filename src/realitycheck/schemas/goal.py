from __future__ import annotations

from pydantic import ConfigDict, Field

from .base import WireModel
from .profile import UserProfile


class Timeline(WireModel):
    """Target time to reach the goal."""

    target_months: int = Field(ge=1)
    is_flexible: bool = False
    minimum_months: int | None = Field(default=None, ge=1)
    maximum_months: int | None = Field(default=None, ge=1)


class SalaryExpectation(WireModel):
    """Annual salary expectation in local currency."""

    desired: float = Field(ge=0)
    minimum: float = Field(ge=0)
    currency: str


class GoalRequirements(WireModel):
    """Hard constraints attached to the goal."""

    remote_only: bool | None = None
    target_company: str | None = None
    target_location: str | None = None
    other: list[str] = Field(default_factory=list)


class CareerGoal(WireModel):
    """The role the user wants and when they want it."""

    target_role: str
    target_industry: str
    timeline: Timeline
    salary_expectation: SalaryExpectation | None = None
    requirements: GoalRequirements | None = None
    motivation: str | None = None

    model_config = ConfigDict(extra="allow")

    @property
    def target_location(self) -> str | None:
        return self.requirements.target_location if self.requirements else None

    @property
    def remote_only(self) -> bool:
        return bool(self.requirements and self.requirements.remote_only)


class RealityCheckInput(WireModel):
    """Request body: a profile and the goal to check against it."""

    profile: UserProfile
    goal: CareerGoal

    model_config = ConfigDict(extra="ignore")
