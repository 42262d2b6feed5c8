"""
Canonicalizers — map free-form enum-like strings to one canonical token.

Behavioral Contract:
- Input is trimmed and lower-cased before lookup
- Every accepted spelling maps to exactly one vocabulary member
- Anything else raises an InvalidEnumValue subclass naming the offending value
- These tables are the only place alternate spellings are known
"""

from enum import Enum
from typing import Any, Dict, Type, TypeVar

from hero_kernel.errors import InvalidEnumValue, InvalidRiskLevel, InvalidTechAccess
from hero_kernel.models.vocabulary import (
    ActivityType,
    EmphasisLevel,
    ResourceType,
    RiskLevel,
    TechAccessLevel,
)

E = TypeVar("E", bound=Enum)

_RISK_LEVEL_SPELLINGS: Dict[str, RiskLevel] = {
    "low": RiskLevel.LOW,
    "med": RiskLevel.MEDIUM,
    "medium": RiskLevel.MEDIUM,
    "moderate": RiskLevel.MEDIUM,
    "high": RiskLevel.HIGH,
}

_TECH_ACCESS_SPELLINGS: Dict[str, TechAccessLevel] = {
    "full": TechAccessLevel.FULL,
    "limited": TechAccessLevel.LIMITED,
    "partial": TechAccessLevel.LIMITED,
    "none": TechAccessLevel.NONE,
    "no": TechAccessLevel.NONE,
}


def _fold(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    return str(value).strip().lower()


def _exact_spellings(vocabulary: Type[E]) -> Dict[str, E]:
    return {member.value: member for member in vocabulary}


def normalize_risk_level(value: Any) -> RiskLevel:
    """Canonicalize a risk likelihood/impact, e.g. 'Medium' -> 'med'."""
    level = _RISK_LEVEL_SPELLINGS.get(_fold(value))
    if level is None:
        raise InvalidRiskLevel(
            f"Invalid risk level: '{value}'. Must be one of: low, med/medium, high"
        )
    return level


def normalize_tech_access(value: Any) -> TechAccessLevel:
    """Canonicalize a technology-access level, e.g. 'partial' -> 'limited'."""
    access = _TECH_ACCESS_SPELLINGS.get(_fold(value))
    if access is None:
        raise InvalidTechAccess(
            f"Invalid tech access level: '{value}'. Must be one of: full, limited, none",
            field="techAccess",
        )
    return access


def _normalize_exact(value: Any, vocabulary: Type[E], label: str, field: str) -> E:
    member = _exact_spellings(vocabulary).get(_fold(value))
    if member is None:
        allowed = ", ".join(m.value for m in vocabulary)
        raise InvalidEnumValue(
            f"Invalid {label}: '{value}'. Must be one of: {allowed}",
            field=field,
        )
    return member


def normalize_activity_type(value: Any) -> ActivityType:
    return _normalize_exact(value, ActivityType, "activity type", "type")


def normalize_resource_type(value: Any) -> ResourceType:
    return _normalize_exact(value, ResourceType, "resource type", "type")


def normalize_depth(value: Any) -> EmphasisLevel:
    return _normalize_exact(value, EmphasisLevel, "standard depth", "depth")
