"""Project journey — phases, their activities and checkpoints, milestones."""

from typing import List

from hero_kernel.models.base import CanonicalModel
from hero_kernel.models.vocabulary import ActivityType


class Differentiation(CanonicalModel):
    support: List[str] = []
    extension: List[str] = []


class Activity(CanonicalModel):
    """A single learning activity inside a phase."""

    name: str
    type: ActivityType = ActivityType.CLASS
    duration: str
    description: str
    materials: List[str] = []
    instructions: List[str] = []
    differentiation: Differentiation = Differentiation()
    assessment: str = ""


class Checkpoint(CanonicalModel):
    name: str = ""
    criteria: List[str] = []
    evidence: List[str] = []
    support: str = ""


class Phase(CanonicalModel):
    """One stage of the project journey."""

    id: str
    name: str
    duration: str                           # Free text, e.g. "2 weeks"
    focus: str = ""
    description: str
    objectives: List[str] = []
    activities: List[Activity] = []
    deliverables: List[str] = []
    checkpoints: List[Checkpoint] = []
    resources: List[str] = []
    teacher_notes: str = ""
    student_tips: str = ""


class Milestone(CanonicalModel):
    id: str
    phase: str                              # Id of the phase it closes
    week: int
    title: str
    description: str
    evidence: List[str] = []
    celebration: str = ""
