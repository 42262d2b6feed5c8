"""
Hero Project — the root curriculum document.

Every section model carries defaults for all of its fields; those defaults are
the minimal-but-complete shape a section takes when a document omits it.
"""

from typing import Dict, List

from hero_kernel.models.assessment import RubricCriteria
from hero_kernel.models.base import CanonicalModel
from hero_kernel.models.journey import Milestone, Phase
from hero_kernel.models.resources import Resource, StandardAlignment


class Theme(CanonicalModel):
    primary: str = "blue"
    secondary: str = "purple"
    accent: str = "amber"
    gradient: str = "from-blue-600 to-purple-600"


class HeroHeader(CanonicalModel):
    badge: str = "Hero Project"
    description: str = ""
    highlights: List[dict] = []             # {icon, label, value}
    impact_statement: str = ""


class ProjectContext(CanonicalModel):
    problem: str = ""
    significance: str = ""
    real_world: str = ""
    student_role: str = ""
    authenticity: str = ""


class Overview(CanonicalModel):
    description: str = ""
    key_features: List[str] = []
    outcomes: List[str] = []
    deliverables: List[dict] = []           # {name, description, format}


class BigIdea(CanonicalModel):
    statement: str = ""
    essential_question: str = ""
    sub_questions: List[str] = []
    challenge: str = ""
    driving_question: str = ""


class ObjectiveGroup(CanonicalModel):
    category: str = ""
    items: List[str] = []


class Standards(CanonicalModel):
    objectives: List[ObjectiveGroup] = []
    alignments: Dict[str, List[StandardAlignment]] = {}   # Keyed by family, e.g. "NGSS"


class Journey(CanonicalModel):
    phases: List[Phase] = []
    milestones: List[Milestone] = []
    timeline: List[dict] = []
    weekly_breakdown: List[dict] = []


class AssessmentFramework(CanonicalModel):
    philosophy: str = ""
    rubric: List[RubricCriteria] = []
    formative: List[dict] = []
    summative: List[dict] = []
    self_assessment: List[dict] = []
    peer_assessment: List[dict] = []


class ResourceCatalog(CanonicalModel):
    required: List[Resource] = []
    optional: List[Resource] = []
    professional: List[dict] = []
    student_resources: List[dict] = []
    community_connections: List[dict] = []


class AudienceProfile(CanonicalModel):
    primary: List[str] = []
    secondary: List[str] = []
    engagement: str = ""
    feedback: str = ""


class SustainabilityPlan(CanonicalModel):
    continuation: str = ""
    maintenance: str = ""
    evolution: str = ""
    legacy: str = ""


class ScalabilityFramework(CanonicalModel):
    classroom: str = ""
    school: str = ""
    district: str = ""
    beyond: str = ""


class ImpactPlan(CanonicalModel):
    audience: AudienceProfile = AudienceProfile()
    methods: List[dict] = []
    metrics: List[dict] = []
    sustainability: SustainabilityPlan = SustainabilityPlan()
    scalability: ScalabilityFramework = ScalabilityFramework()


class HeroProjectTemplate(CanonicalModel):
    """A structurally complete hero project document."""

    # CORE METADATA
    id: str
    title: str
    tagline: str = ""
    duration: str
    grade_level: str
    subjects: List[str]

    # SECTIONS
    theme: Theme = Theme()
    hero: HeroHeader = HeroHeader()
    context: ProjectContext = ProjectContext()
    overview: Overview = Overview()
    big_idea: BigIdea = BigIdea()
    standards: Standards = Standards()
    journey: Journey = Journey()
    assessment: AssessmentFramework = AssessmentFramework()
    resources: ResourceCatalog = ResourceCatalog()
    impact: ImpactPlan = ImpactPlan()
