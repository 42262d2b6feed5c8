"""Rubric entities."""

from typing import List

from hero_kernel.models.base import CanonicalModel


class RubricLevel(CanonicalModel):
    points: float
    description: str
    evidence: List[str] = []


class RubricCriteria(CanonicalModel):
    """One rubric row with its four performance levels."""

    category: str
    weight: float
    exemplary: RubricLevel
    proficient: RubricLevel
    developing: RubricLevel
    beginning: RubricLevel
