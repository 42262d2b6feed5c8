"""
Feasibility Builders — strict construction of risks, contingencies and constraints.

Behavioral Contract:
- Accepts a loosely typed record (None is treated as an empty record)
- Checks required fields in a fixed order and raises on the first problem
- Runs enum-like fields through the canonicalizers
- Accepts the legacy "risk" and "trigger" labels, but the canonical name wins
- Never copies unknown fields into the result
"""

from typing import Any, Dict

from hero_kernel.builders.coercion import (
    MISSING,
    as_record,
    optional_list,
    parse_number,
    preferred,
    required,
    required_text,
    to_text,
)
from hero_kernel.canonical.vocabulary import normalize_risk_level, normalize_tech_access
from hero_kernel.errors import InvalidBudget, MissingRequiredField, NotAnArray
from hero_kernel.models.feasibility import Constraints, Contingency, FeasibilityData, Risk


def build_risk(data: Any) -> Risk:
    """Build a canonical risk; likelihood and impact are normalized (e.g. 'medium' -> 'med')."""
    record = as_record(data)

    risk_id = required_text(record, "id", "Risk", "Risk must have an id")
    name = preferred(record, "name", "risk")
    if name is MISSING:
        raise MissingRequiredField("Risk must have a name property", entity="Risk", field="name")
    likelihood = required(record, "likelihood", "Risk", "Risk must have a likelihood")
    impact = required(record, "impact", "Risk", "Risk must have an impact")
    mitigation = required_text(record, "mitigation", "Risk", "Risk must have a mitigation strategy")

    return Risk(
        id=risk_id,
        name=to_text(name),
        likelihood=normalize_risk_level(likelihood),
        impact=normalize_risk_level(impact),
        mitigation=mitigation,
    )


def build_contingency(data: Any) -> Contingency:
    """Build a canonical contingency; a legacy "trigger" becomes the scenario."""
    record = as_record(data)

    contingency_id = required_text(record, "id", "Contingency", "Contingency must have an id")
    scenario = preferred(record, "scenario", "trigger")
    if scenario is MISSING:
        raise MissingRequiredField(
            "Contingency must have a scenario property", entity="Contingency", field="scenario"
        )
    plan = required_text(record, "plan", "Contingency", "Contingency must have a plan")

    return Contingency(id=contingency_id, scenario=to_text(scenario), plan=plan)


def _string_items(value: Any, field: str, message: str) -> list:
    if not isinstance(value, (list, tuple)):
        raise NotAnArray(message, entity="Constraints", field=field)
    return [text for text in (to_text(item) for item in value if item is not None) if text]


def build_constraints(data: Any) -> Constraints:
    """
    Build constraints from whatever subset of fields is given.

    Only supplied fields are validated and only supplied fields are set, so
    Constraints.to_dict() of {"budgetUSD": 300} is exactly {"budgetUSD": 300}.
    """
    record = as_record(data)
    fields: Dict[str, Any] = {}

    budget = record.get("budgetUSD")
    if budget is not None:
        amount = parse_number(budget)
        if amount is None or amount < 0:
            raise InvalidBudget(
                f"Invalid budget: {budget}. Must be a non-negative number.",
                entity="Constraints",
                field="budgetUSD",
            )
        fields["budget_usd"] = amount

    tech_access = record.get("techAccess")
    if tech_access is not None:
        fields["tech_access"] = normalize_tech_access(tech_access)

    materials = record.get("materials")
    if materials is not None:
        fields["materials"] = _string_items(
            materials, "materials", "Materials must be an array of strings"
        )

    safety = record.get("safetyRequirements")
    if safety is not None:
        fields["safety_requirements"] = _string_items(
            safety, "safetyRequirements", "Safety requirements must be an array of strings"
        )

    return Constraints(**fields)


def build_feasibility_data(data: Any) -> FeasibilityData:
    """Compose constraints, risks and contingencies; absent collections become []."""
    record = as_record(data)
    constraints = record.get("constraints")

    return FeasibilityData(
        constraints=build_constraints(constraints) if constraints is not None else None,
        risks=[
            build_risk(item)
            for item in optional_list(record, "risks", "FeasibilityData", "Risks must be an array")
        ],
        contingencies=[
            build_contingency(item)
            for item in optional_list(
                record, "contingencies", "FeasibilityData", "Contingencies must be an array"
            )
        ],
    )
