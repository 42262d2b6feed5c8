"""
Legacy Migration — best-effort recovery of historical feasibility data.

Older documents keyed risks by "risk" instead of "name", contingencies by
"trigger" instead of "scenario", spelled risk levels freely and sometimes
omitted ids entirely.

Behavioral Contract:
- Never raises; anything unrecoverable is replaced by a conservative default
- The canonical field wins over its legacy alias when both are present
- Missing ids are synthesized ("risk-<hex>", "contingency-<hex>")
- Output is already canonical and needs no further builder pass
- Batch forms preserve order and count 1:1
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional
from uuid import uuid4

from hero_kernel.builders.coercion import as_record
from hero_kernel.builders.feasibility import build_constraints, build_contingency, build_risk
from hero_kernel.canonical.vocabulary import normalize_risk_level
from hero_kernel.errors import HeroDataError, InvalidRiskLevel
from hero_kernel.models.feasibility import Constraints, Contingency, FeasibilityData, Risk
from hero_kernel.models.vocabulary import RiskLevel

logger = logging.getLogger(__name__)

UNNAMED_RISK = "Unnamed Risk"
NO_MITIGATION = "No mitigation specified"
UNNAMED_SCENARIO = "Unnamed Scenario"
NO_PLAN = "No plan specified"

_CONSTRAINT_FIELDS = ("budgetUSD", "techAccess", "materials", "safetyRequirements")


def _synthetic_id(prefix: str) -> str:
    return f"{prefix}-{uuid4().hex[:12]}"


def _legacy_value(record: Mapping, *keys: str) -> Optional[Any]:
    """First usable value among keys; None, False and "" count as absent."""
    for key in keys:
        value = record.get(key)
        if value is None or value is False or value == "":
            continue
        return value
    return None


def _recover_level(value: Any, field: str, risk_id: str) -> RiskLevel:
    if value is None:
        return RiskLevel.LOW
    try:
        return normalize_risk_level(value)
    except InvalidRiskLevel:
        logger.warning(
            "Risk %s has unrecognized %s %r; defaulting to 'low'", risk_id, field, value
        )
        return RiskLevel.LOW


def migrate_risk(old: Any) -> Risk:
    """Convert a legacy risk record into a canonical Risk."""
    record = as_record(old)

    risk_id = _legacy_value(record, "id")
    if risk_id is None:
        risk_id = _synthetic_id("risk")
        logger.debug("Synthesized risk id %s", risk_id)

    return build_risk({
        "id": risk_id,
        "name": _legacy_value(record, "name", "risk") or UNNAMED_RISK,
        "likelihood": _recover_level(_legacy_value(record, "likelihood"), "likelihood", risk_id),
        "impact": _recover_level(_legacy_value(record, "impact"), "impact", risk_id),
        "mitigation": _legacy_value(record, "mitigation") or NO_MITIGATION,
    })


def migrate_contingency(old: Any) -> Contingency:
    """Convert a legacy contingency record; "trigger" becomes "scenario"."""
    record = as_record(old)

    contingency_id = _legacy_value(record, "id")
    if contingency_id is None:
        contingency_id = _synthetic_id("contingency")
        logger.debug("Synthesized contingency id %s", contingency_id)

    return build_contingency({
        "id": contingency_id,
        "scenario": _legacy_value(record, "scenario", "trigger") or UNNAMED_SCENARIO,
        "plan": _legacy_value(record, "plan") or NO_PLAN,
    })


def migrate_risks(risks: Any) -> List[Risk]:
    if not isinstance(risks, (list, tuple)):
        if risks is not None:
            logger.warning("Expected a list of risks, got %s; skipping", type(risks).__name__)
        return []
    return [migrate_risk(risk) for risk in risks]


def migrate_contingencies(contingencies: Any) -> List[Contingency]:
    if not isinstance(contingencies, (list, tuple)):
        if contingencies is not None:
            logger.warning(
                "Expected a list of contingencies, got %s; skipping", type(contingencies).__name__
            )
        return []
    return [migrate_contingency(contingency) for contingency in contingencies]


def _salvage_constraints(raw: Any) -> Optional[Constraints]:
    """Keep every constraints field that canonicalizes on its own; drop the rest."""
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        logger.warning("Dropping constraints: expected an object, got %s", type(raw).__name__)
        return None

    kept: Dict[str, Any] = {}
    for key in _CONSTRAINT_FIELDS:
        if raw.get(key) is None:
            continue
        try:
            build_constraints({key: raw[key]})
        except HeroDataError as e:
            logger.warning("Dropping constraints.%s: %s", key, e)
            continue
        kept[key] = raw[key]

    return build_constraints(kept)


def migrate_feasibility_data(old: Any) -> FeasibilityData:
    """
    Migrate a whole legacy feasibility bundle.

    Risks and contingencies go through their migrators; constraints are
    salvaged field by field so one bad value does not discard the others.
    """
    record = as_record(old)
    data = FeasibilityData(
        constraints=_salvage_constraints(record.get("constraints")),
        risks=migrate_risks(record.get("risks")),
        contingencies=migrate_contingencies(record.get("contingencies")),
    )
    logger.info(
        "Migrated feasibility data: %d risks, %d contingencies",
        len(data.risks),
        len(data.contingencies),
    )
    return data
