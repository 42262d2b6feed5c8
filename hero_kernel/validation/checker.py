"""
Structural Validators — report every problem in a candidate document.

Used at ingestion time (imports, uploads) where the caller wants a complete
diagnostic report rather than the first failure.

Behavioral Contract:
- Never raises, whatever the input; None and non-objects are checked as {}
- Collects every violation, each addressed by a dotted/indexed path
- Errors make the result invalid; warnings are advisory only
- Stricter presence rule than the builders: None and False count as missing
  here, while builders treat them as present and stringify them
- Feasibility elements are checked with the builders' own rules, so elements
  that use legacy field names ("risk", "trigger") are accepted
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, List

from hero_kernel.builders.coercion import as_record
from hero_kernel.builders.feasibility import build_constraints, build_contingency, build_risk
from hero_kernel.errors import HeroDataError
from hero_kernel.models.validation import ValidationIssue, ValidationResult

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("id", "title", "duration", "gradeLevel")
THEME_FIELDS = ("primary", "secondary", "accent", "gradient")

_RISK_SUGGESTION = (
    'Ensure risk has: id, name (not "risk"), likelihood (low/med/high), '
    "impact (low/med/high), and mitigation"
)
_CONTINGENCY_SUGGESTION = 'Ensure contingency has: id, scenario (not "trigger"), and plan'


def _is_blank(value: Any) -> bool:
    return value is None or value is False or (isinstance(value, str) and value == "")


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _section(
    data: Mapping,
    key: str,
    label: str,
    errors: List[ValidationIssue],
) -> Mapping:
    """Return a present sub-object, or {} after recording an error if it is not an object."""
    value = data.get(key)
    if _is_blank(value):
        return {}
    if not isinstance(value, Mapping):
        errors.append(ValidationIssue(path=key, message=f"{label} must be an object", value=value))
        return {}
    return value


# --- Hero Project ---

def _check_required(data: Mapping, errors: List[ValidationIssue], warnings: List[ValidationIssue]) -> None:
    for field in REQUIRED_FIELDS:
        if _is_blank(data.get(field)):
            errors.append(ValidationIssue(
                path=field,
                message=f"Missing required field: {field}",
                suggestion=f"Add a {field} property to your hero project data",
            ))

    subjects = data.get("subjects")
    if _is_blank(subjects):
        warnings.append(ValidationIssue(
            path="subjects",
            message="Missing recommended field: subjects",
            suggestion='Add subjects as an array, e.g., ["Math", "Science"]',
        ))
    elif not _is_array(subjects):
        errors.append(ValidationIssue(
            path="subjects",
            message="Subjects must be an array",
            value=subjects,
            suggestion='Wrap subjects in an array, e.g., ["Math", "Science"]',
        ))


def _check_theme(data: Mapping, errors: List[ValidationIssue], warnings: List[ValidationIssue]) -> None:
    if not isinstance(data.get("theme"), Mapping):
        _section(data, "theme", "Theme", errors)
        return
    theme = data["theme"]
    for field in THEME_FIELDS:
        if _is_blank(theme.get(field)):
            warnings.append(ValidationIssue(
                path=f"theme.{field}",
                message=f"Missing theme field: {field}",
                suggestion=f"Add a {field} color to your theme object",
            ))


def _check_hero(data: Mapping, errors: List[ValidationIssue], warnings: List[ValidationIssue]) -> None:
    if not isinstance(data.get("hero"), Mapping):
        _section(data, "hero", "Hero section", errors)
        return
    hero = data["hero"]
    # Warning, not error: a freshly built template has an empty description
    if _is_blank(hero.get("description")):
        warnings.append(ValidationIssue(
            path="hero.description",
            message="Hero section should have a description",
        ))
    highlights = hero.get("highlights")
    if highlights is not None and not _is_array(highlights):
        errors.append(ValidationIssue(
            path="hero.highlights",
            message="Hero highlights must be an array",
            value=highlights,
        ))


def _check_journey(data: Mapping, errors: List[ValidationIssue]) -> None:
    journey = _section(data, "journey", "Journey", errors)

    phases = journey.get("phases")
    if not _is_blank(phases):
        if not _is_array(phases):
            errors.append(ValidationIssue(
                path="journey.phases",
                message="Journey phases must be an array",
                value=phases,
            ))
        else:
            for index, phase in enumerate(phases):
                phase = as_record(phase)
                for field in ("name", "duration"):
                    if _is_blank(phase.get(field)):
                        errors.append(ValidationIssue(
                            path=f"journey.phases[{index}].{field}",
                            message=f"Phase {index + 1} must have a {field}",
                        ))

    milestones = journey.get("milestones")
    if not _is_blank(milestones) and not _is_array(milestones):
        errors.append(ValidationIssue(
            path="journey.milestones",
            message="Journey milestones must be an array",
            value=milestones,
        ))


def _check_standards(data: Mapping, errors: List[ValidationIssue]) -> None:
    standards = _section(data, "standards", "Standards", errors)
    alignments = standards.get("alignments")
    if _is_blank(alignments):
        return
    if not isinstance(alignments, Mapping):
        errors.append(ValidationIssue(
            path="standards.alignments",
            message="Standards alignments must be an object keyed by family",
            value=alignments,
        ))
        return

    for family, entries in alignments.items():
        path = f"standards.alignments.{family}"
        if not _is_array(entries):
            errors.append(ValidationIssue(
                path=path,
                message=f"Standards for {family} must be an array",
                value=entries,
            ))
            continue
        for index, entry in enumerate(entries):
            entry = as_record(entry)
            if _is_blank(entry.get("code")):
                errors.append(ValidationIssue(
                    path=f"{path}[{index}].code",
                    message="Standard must have a code",
                ))
            if _is_blank(entry.get("text")):
                errors.append(ValidationIssue(
                    path=f"{path}[{index}].text",
                    message="Standard must have text",
                ))


def validate_hero_project(candidate: Any) -> ValidationResult:
    """Check a whole hero project document. Always returns a ValidationResult."""
    data = as_record(candidate)
    errors: List[ValidationIssue] = []
    warnings: List[ValidationIssue] = []

    _check_required(data, errors, warnings)
    _check_theme(data, errors, warnings)
    _check_hero(data, errors, warnings)
    _check_journey(data, errors)
    _check_standards(data, errors)

    result = ValidationResult.from_issues(errors, warnings)
    logger.debug(
        "Validated hero project %r: %d errors, %d warnings",
        data.get("id"),
        len(errors),
        len(warnings),
    )
    return result


# --- Feasibility ---

def _check_elements(
    items: Any,
    path: str,
    label: str,
    builder: Callable[[Any], Any],
    suggestion: str,
    errors: List[ValidationIssue],
) -> None:
    if _is_blank(items):
        return
    if not _is_array(items):
        errors.append(ValidationIssue(path=path, message=f"{label} must be an array", value=items))
        return
    for index, item in enumerate(items):
        try:
            builder(item)
        except HeroDataError as e:
            errors.append(ValidationIssue(
                path=f"{path}[{index}]",
                message=str(e),
                value=item,
                suggestion=suggestion,
            ))


def validate_feasibility_data(candidate: Any) -> ValidationResult:
    """Check a feasibility bundle (constraints, risks, contingencies)."""
    data = as_record(candidate)
    errors: List[ValidationIssue] = []

    constraints = data.get("constraints")
    if not _is_blank(constraints):
        if not isinstance(constraints, Mapping):
            errors.append(ValidationIssue(
                path="constraints",
                message="Constraints must be an object",
                value=constraints,
                suggestion="Use an object with budgetUSD, techAccess, materials and safetyRequirements",
            ))
        else:
            try:
                build_constraints(constraints)
            except HeroDataError as e:
                errors.append(ValidationIssue(path="constraints", message=str(e), value=constraints))

    _check_elements(data.get("risks"), "risks", "Risks", build_risk, _RISK_SUGGESTION, errors)
    _check_elements(
        data.get("contingencies"),
        "contingencies",
        "Contingencies",
        build_contingency,
        _CONTINGENCY_SUGGESTION,
        errors,
    )

    result = ValidationResult.from_issues(errors)
    logger.debug("Validated feasibility data: %d errors", len(errors))
    return result
