"""Non-raising checks that a value is already in canonical form."""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from hero_kernel.models.base import CanonicalModel
from hero_kernel.models.vocabulary import RiskLevel, TechAccessLevel

_RISK_TOKENS = frozenset(level.value for level in RiskLevel)
_TECH_ACCESS_TOKENS = frozenset(level.value for level in TechAccessLevel)


def _record(value: Any) -> Any:
    return value.to_dict() if isinstance(value, CanonicalModel) else value


def _token(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _all_str(*values: Any) -> bool:
    return all(isinstance(v, str) for v in values)


def is_valid_risk(value: Any) -> bool:
    record = _record(value)
    if not isinstance(record, Mapping):
        return False
    return (
        _all_str(record.get("id"), record.get("name"), record.get("mitigation"))
        and _token(record.get("likelihood")) in _RISK_TOKENS
        and _token(record.get("impact")) in _RISK_TOKENS
    )


def is_valid_contingency(value: Any) -> bool:
    record = _record(value)
    if not isinstance(record, Mapping):
        return False
    return _all_str(record.get("id"), record.get("scenario"), record.get("plan"))


def is_valid_constraints(value: Any) -> bool:
    record = _record(value)
    if not isinstance(record, Mapping):
        return False
    budget = record.get("budgetUSD")
    tech_access = record.get("techAccess")
    return (
        (budget is None or (isinstance(budget, (int, float)) and not isinstance(budget, bool)))
        and (tech_access is None or _token(tech_access) in _TECH_ACCESS_TOKENS)
        and (record.get("materials") is None or isinstance(record["materials"], list))
        and (
            record.get("safetyRequirements") is None
            or isinstance(record["safetyRequirements"], list)
        )
    )
