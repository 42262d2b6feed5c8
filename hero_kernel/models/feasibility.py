"""Feasibility — risks, contingencies and constraints attached to a project."""

from typing import List, Optional

from pydantic import Field

from hero_kernel.models.base import CanonicalModel
from hero_kernel.models.vocabulary import RiskLevel, TechAccessLevel


class Risk(CanonicalModel):
    """A named risk with canonical likelihood and impact."""

    id: str
    name: str                               # Legacy documents used "risk"
    likelihood: RiskLevel
    impact: RiskLevel
    mitigation: str


class Contingency(CanonicalModel):
    """What to do if a scenario happens. There is no "trigger" field."""

    id: str
    scenario: str
    plan: str


class Constraints(CanonicalModel):
    """Partial by nature: only the fields that were supplied are set."""

    budget_usd: Optional[float] = Field(default=None, alias="budgetUSD")
    tech_access: Optional[TechAccessLevel] = None
    materials: Optional[List[str]] = None
    safety_requirements: Optional[List[str]] = None


class FeasibilityData(CanonicalModel):
    constraints: Optional[Constraints] = None
    risks: List[Risk] = []
    contingencies: List[Contingency] = []
