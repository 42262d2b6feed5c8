"""Closed vocabularies for enum-like document fields."""

from enum import Enum


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "med"      # Canonical spelling is "med", never "medium"
    HIGH = "high"


class TechAccessLevel(str, Enum):
    FULL = "full"
    LIMITED = "limited"
    NONE = "none"


class ActivityType(str, Enum):
    INDIVIDUAL = "individual"
    GROUP = "group"
    CLASS = "class"
    FIELD = "field"


class ResourceType(str, Enum):
    MATERIAL = "material"
    TECHNOLOGY = "technology"
    SPACE = "space"
    HUMAN = "human"


class EmphasisLevel(str, Enum):
    """How deeply a project covers a standard."""
    INTRODUCE = "introduce"
    DEVELOP = "develop"
    MASTER = "master"
