"""
Builder error taxonomy.

Builders raise one of these on the first problem they find. All of them are
ValueErrors, so callers that only care about "bad input" can catch that.
"""

from typing import Optional

from hero_kernel.models.validation import ValidationResult


class HeroDataError(ValueError):
    """Raised when input cannot be turned into a canonical record."""

    def __init__(
        self,
        message: str,
        entity: Optional[str] = None,
        field: Optional[str] = None,
    ):
        super().__init__(message)
        self.entity = entity
        self.field = field


class MissingRequiredField(HeroDataError):
    """A required field is absent or empty."""
    pass


class InvalidEnumValue(HeroDataError):
    """A value matches no entry of a closed vocabulary."""
    pass


class InvalidRiskLevel(InvalidEnumValue):
    pass


class InvalidTechAccess(InvalidEnumValue):
    pass


class InvalidType(HeroDataError):
    """A field holds the wrong kind of value."""
    pass


class NotAnArray(InvalidType):
    pass


class InvalidBudget(InvalidType):
    pass


class InvalidHeroProject(HeroDataError):
    """Raised by assert_valid_hero_project; carries the full report."""

    def __init__(self, message: str, result: ValidationResult):
        super().__init__(message, entity="HeroProject")
        self.result = result
