"""Resources and standards alignments."""

from typing import List, Optional

from hero_kernel.models.base import CanonicalModel
from hero_kernel.models.vocabulary import EmphasisLevel, ResourceType


class Resource(CanonicalModel):
    """
    A resource the project needs.

    Genuinely partial: quantity, source, cost and alternatives are only
    present in the stored document when they were supplied.
    """

    name: str
    type: ResourceType
    quantity: Optional[str] = None
    source: Optional[str] = None
    cost: Optional[str] = None
    alternatives: Optional[List[str]] = None


class StandardAlignment(CanonicalModel):
    code: str                               # e.g. "NGSS-HS-ESS3-4"
    text: str
    application: str = ""
    depth: EmphasisLevel = EmphasisLevel.DEVELOP
