"""Human-readable validation reports and the development-time assertion."""

import json
import logging
from typing import Any, List, Optional

from hero_kernel.config import Settings, get_settings
from hero_kernel.errors import InvalidHeroProject
from hero_kernel.models.validation import ValidationResult
from hero_kernel.validation.checker import validate_hero_project

logger = logging.getLogger(__name__)


def format_validation_results(result: ValidationResult) -> str:
    """Render a result as a numbered report of errors, then warnings."""
    lines: List[str] = []

    if result.valid:
        lines.append("Validation passed!")
    else:
        lines.append("Validation failed with errors:")

    if result.errors:
        lines.append("")
        lines.append("Errors:")
        for index, error in enumerate(result.errors, start=1):
            lines.append(f"  {index}. {error.path}: {error.message}")
            if error.value is not None:
                lines.append(f"     Current value: {json.dumps(error.value, default=str)}")
            if error.suggestion:
                lines.append(f"     Suggestion: {error.suggestion}")

    if result.warnings:
        lines.append("")
        lines.append("Warnings:")
        for index, warning in enumerate(result.warnings, start=1):
            lines.append(f"  {index}. {warning.path}: {warning.message}")
            if warning.suggestion:
                lines.append(f"     Suggestion: {warning.suggestion}")

    return "\n".join(lines)


def assert_valid_hero_project(
    data: Any,
    project_id: str,
    settings: Optional[Settings] = None,
) -> Optional[ValidationResult]:
    """
    Validate a project and raise InvalidHeroProject if it has errors.

    Only active when settings.validation_enforced is true (by default, in the
    development environment); otherwise returns None without checking.
    Warnings are logged but never raise.
    """
    settings = settings or get_settings()
    if not settings.validation_enforced:
        return None

    result = validate_hero_project(data)
    if not result.valid:
        logger.error(
            "Hero project validation failed: %s\n%s",
            project_id,
            format_validation_results(result),
        )
        raise InvalidHeroProject(
            f"Invalid hero project data for {project_id}. See log for details.",
            result=result,
        )

    if result.warnings:
        logger.warning(
            "Hero project validation warnings: %s\n%s",
            project_id,
            format_validation_results(result),
        )
    return result
