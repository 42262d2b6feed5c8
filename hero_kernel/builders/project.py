"""
Hero Project Builder — assembles a structurally complete project document.

Behavioral Contract:
- Requires id, title, duration, gradeLevel and a subjects list
- Every section the input omits is synthesized from its defaults
  (theme.primary = "blue", empty journey.phases, empty assessment.rubric, ...)
- Sections the input supplies are merged over those defaults, with phases,
  milestones, rubric rows, resources and standards built by their own builders
- The result is a fixed point: rebuilding from its to_dict() yields the same document
"""

from collections.abc import Mapping
from typing import Any, Dict, List

from hero_kernel.builders.coercion import (
    as_record,
    build_section,
    nested_record,
    optional_list,
    optional_text,
    required,
    required_text,
    to_text,
)
from hero_kernel.builders.curriculum import (
    build_milestone,
    build_phase,
    build_resource,
    build_rubric_criteria,
    build_standard_alignment,
)
from hero_kernel.errors import InvalidType, NotAnArray
from hero_kernel.models.project import (
    AssessmentFramework,
    BigIdea,
    HeroHeader,
    HeroProjectTemplate,
    ImpactPlan,
    Journey,
    ObjectiveGroup,
    Overview,
    ProjectContext,
    ResourceCatalog,
    Standards,
    Theme,
)
from hero_kernel.models.resources import StandardAlignment


def _build_standards(data: Any) -> Standards:
    """Alignments are keyed by standards family, so they are built by hand."""
    record = nested_record(data, "Standards", "standards", "standards must be an object")
    objectives = [
        build_section(ObjectiveGroup, item, f"standards.objectives[{index}]")
        for index, item in enumerate(
            optional_list(record, "objectives", "Standards", "Standards objectives must be an array")
        )
    ]

    alignments: Dict[str, List[StandardAlignment]] = {}
    raw_alignments = record.get("alignments")
    if raw_alignments is not None:
        if not isinstance(raw_alignments, Mapping):
            raise InvalidType(
                "Standards alignments must be an object", entity="Standards", field="alignments"
            )
        for family, entries in raw_alignments.items():
            if not isinstance(entries, (list, tuple)):
                raise NotAnArray(
                    f"Standards for {family} must be an array", entity="Standards", field=str(family)
                )
            alignments[str(family)] = [build_standard_alignment(entry) for entry in entries]

    return Standards(objectives=objectives, alignments=alignments)


def build_hero_project_template(data: Any) -> HeroProjectTemplate:
    """Build a hero project; a minimal root still yields every section."""
    record = as_record(data)

    project_id = required_text(record, "id", "HeroProject", "Hero project must have an id")
    title = required_text(record, "title", "HeroProject", "Hero project must have a title")
    duration = required_text(record, "duration", "HeroProject", "Hero project must have a duration")
    grade_level = required_text(record, "gradeLevel", "HeroProject", "Hero project must have a gradeLevel")
    subjects = required(record, "subjects", "HeroProject", "Hero project must have subjects")
    if not isinstance(subjects, (list, tuple)):
        raise NotAnArray("Subjects must be an array", entity="HeroProject", field="subjects")

    return HeroProjectTemplate(
        id=project_id,
        title=title,
        tagline=optional_text(record, "tagline"),
        duration=duration,
        grade_level=grade_level,
        subjects=[to_text(subject) for subject in subjects],
        theme=build_section(Theme, record.get("theme"), "theme"),
        hero=build_section(HeroHeader, record.get("hero"), "hero"),
        context=build_section(ProjectContext, record.get("context"), "context"),
        overview=build_section(Overview, record.get("overview"), "overview"),
        big_idea=build_section(BigIdea, record.get("bigIdea"), "bigIdea"),
        standards=_build_standards(record.get("standards")),
        journey=build_section(
            Journey,
            record.get("journey"),
            "journey",
            {"phases": build_phase, "milestones": build_milestone},
        ),
        assessment=build_section(
            AssessmentFramework,
            record.get("assessment"),
            "assessment",
            {"rubric": build_rubric_criteria},
        ),
        resources=build_section(
            ResourceCatalog,
            record.get("resources"),
            "resources",
            {"required": build_resource, "optional": build_resource},
        ),
        impact=build_section(ImpactPlan, record.get("impact"), "impact"),
    )
