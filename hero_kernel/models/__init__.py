"""Hero Kernel data models."""

from hero_kernel.models.assessment import RubricCriteria, RubricLevel
from hero_kernel.models.base import CanonicalModel
from hero_kernel.models.feasibility import (
    Constraints,
    Contingency,
    FeasibilityData,
    Risk,
)
from hero_kernel.models.journey import (
    Activity,
    Checkpoint,
    Differentiation,
    Milestone,
    Phase,
)
from hero_kernel.models.project import (
    AssessmentFramework,
    AudienceProfile,
    BigIdea,
    HeroHeader,
    HeroProjectTemplate,
    ImpactPlan,
    Journey,
    ObjectiveGroup,
    Overview,
    ProjectContext,
    ResourceCatalog,
    ScalabilityFramework,
    Standards,
    SustainabilityPlan,
    Theme,
)
from hero_kernel.models.resources import Resource, StandardAlignment
from hero_kernel.models.validation import ValidationIssue, ValidationResult
from hero_kernel.models.vocabulary import (
    ActivityType,
    EmphasisLevel,
    ResourceType,
    RiskLevel,
    TechAccessLevel,
)

__all__ = [
    "Activity",
    "ActivityType",
    "AssessmentFramework",
    "AudienceProfile",
    "BigIdea",
    "CanonicalModel",
    "Checkpoint",
    "Constraints",
    "Contingency",
    "Differentiation",
    "EmphasisLevel",
    "FeasibilityData",
    "HeroHeader",
    "HeroProjectTemplate",
    "ImpactPlan",
    "Journey",
    "Milestone",
    "ObjectiveGroup",
    "Overview",
    "Phase",
    "ProjectContext",
    "Resource",
    "ResourceCatalog",
    "ResourceType",
    "Risk",
    "RiskLevel",
    "RubricCriteria",
    "RubricLevel",
    "ScalabilityFramework",
    "StandardAlignment",
    "Standards",
    "SustainabilityPlan",
    "TechAccessLevel",
    "Theme",
    "ValidationIssue",
    "ValidationResult",
]
