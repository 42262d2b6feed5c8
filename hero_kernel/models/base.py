"""Canonical record base — shared configuration for every built entity."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CanonicalModel(BaseModel):
    """
    Immutable record in canonical form.

    Fields are snake_case in Python and camelCase in the stored document.
    Optional fields left unset are None in memory and absent from to_dict().
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_dict(self) -> dict:
        """Serialize to the stored JSON-like shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
