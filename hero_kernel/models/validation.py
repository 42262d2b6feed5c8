"""Validation Result — the non-throwing report returned by the validators."""

from typing import Any, List, Optional

from pydantic import BaseModel


class ValidationIssue(BaseModel):
    """One problem, addressed by a dotted/indexed path such as journey.phases[0].name."""

    path: str
    message: str
    value: Any = None
    suggestion: Optional[str] = None


class ValidationResult(BaseModel):
    """Warnings never affect validity; valid is True iff errors is empty."""

    valid: bool
    errors: List[ValidationIssue] = []
    warnings: List[ValidationIssue] = []

    @classmethod
    def from_issues(
        cls,
        errors: List[ValidationIssue],
        warnings: Optional[List[ValidationIssue]] = None,
    ) -> "ValidationResult":
        return cls(valid=len(errors) == 0, errors=errors, warnings=warnings or [])
