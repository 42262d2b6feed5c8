"""
Curriculum Builders — phases, activities, milestones, rubrics, resources, standards.

Each builder requires only the fields that have no sensible default and fills
the rest from the entity's default table (the model's field defaults).
"""

from typing import Any, Dict, Optional

from hero_kernel.builders.coercion import (
    as_record,
    build_section,
    nested_record,
    optional_list,
    optional_text,
    parse_number,
    required,
    required_text,
    text_list,
    to_text,
)
from hero_kernel.canonical.vocabulary import (
    normalize_activity_type,
    normalize_depth,
    normalize_resource_type,
)
from hero_kernel.errors import InvalidType, MissingRequiredField
from hero_kernel.models.assessment import RubricCriteria, RubricLevel
from hero_kernel.models.journey import Activity, Checkpoint, Differentiation, Milestone, Phase
from hero_kernel.models.resources import Resource, StandardAlignment
from hero_kernel.models.vocabulary import ActivityType, EmphasisLevel

# Points assigned to a rubric level that does not state its own
DEFAULT_LEVEL_POINTS = (
    ("exemplary", 4),
    ("proficient", 3),
    ("developing", 2),
    ("beginning", 1),
)


def build_activity(data: Any) -> Activity:
    record = as_record(data)

    name = required_text(record, "name", "Activity", "Activity must have a name")
    duration = required_text(record, "duration", "Activity", "Activity must have a duration")
    description = required_text(record, "description", "Activity", "Activity must have a description")

    activity_type = record.get("type")
    return Activity(
        name=name,
        type=ActivityType.CLASS if activity_type in (None, "") else normalize_activity_type(activity_type),
        duration=duration,
        description=description,
        materials=text_list(record, "materials", "Activity", "Activity materials must be an array"),
        instructions=text_list(record, "instructions", "Activity", "Activity instructions must be an array"),
        differentiation=build_section(Differentiation, record.get("differentiation"), "differentiation"),
        assessment=optional_text(record, "assessment"),
    )


def build_phase(data: Any) -> Phase:
    """Build a journey phase; nested activities go through build_activity."""
    record = as_record(data)

    phase_id = required_text(record, "id", "Phase", "Phase must have an id")
    name = required_text(record, "name", "Phase", "Phase must have a name")
    duration = required_text(record, "duration", "Phase", "Phase must have a duration")
    description = required_text(record, "description", "Phase", "Phase must have a description")

    return Phase(
        id=phase_id,
        name=name,
        duration=duration,
        focus=optional_text(record, "focus"),
        description=description,
        objectives=text_list(record, "objectives", "Phase", "Phase objectives must be an array"),
        activities=[
            build_activity(item)
            for item in optional_list(record, "activities", "Phase", "Phase activities must be an array")
        ],
        deliverables=text_list(record, "deliverables", "Phase", "Phase deliverables must be an array"),
        checkpoints=[
            build_section(Checkpoint, item, f"checkpoints[{index}]")
            for index, item in enumerate(
                optional_list(record, "checkpoints", "Phase", "Phase checkpoints must be an array")
            )
        ],
        resources=text_list(record, "resources", "Phase", "Phase resources must be an array"),
        teacher_notes=optional_text(record, "teacherNotes"),
        student_tips=optional_text(record, "studentTips"),
    )


def _parse_week(value: Any) -> int:
    number = parse_number(value)
    if number is None or int(number) != number:
        raise InvalidType(
            f"Milestone week must be an integer, got {value!r}", entity="Milestone", field="week"
        )
    return int(number)


def build_milestone(data: Any) -> Milestone:
    record = as_record(data)

    milestone_id = required_text(record, "id", "Milestone", "Milestone must have an id")
    title = required_text(record, "title", "Milestone", "Milestone must have a title")
    phase = required_text(record, "phase", "Milestone", "Milestone must have a phase")
    week = _parse_week(required(record, "week", "Milestone", "Milestone must have a week"))
    description = required_text(record, "description", "Milestone", "Milestone must have a description")

    return Milestone(
        id=milestone_id,
        phase=phase,
        week=week,
        title=title,
        description=description,
        evidence=text_list(record, "evidence", "Milestone", "Milestone evidence must be an array"),
        celebration=optional_text(record, "celebration"),
    )


def build_rubric_level(data: Any, level: str, default_points: float) -> RubricLevel:
    """
    Build one performance level. Shorthand input (description only) gets
    default_points and no evidence; explicit points are preserved.
    """
    if data is None:
        raise MissingRequiredField(
            f"Rubric criteria must have a {level} level", entity="RubricCriteria", field=level
        )
    record = nested_record(data, "RubricCriteria", level, f"Rubric {level} level must be an object")

    description = required_text(
        record, "description", "RubricLevel", f"Rubric {level} level must have a description"
    )
    points: Optional[float] = default_points
    if record.get("points") is not None:
        points = parse_number(record["points"])
        if points is None:
            raise InvalidType(
                f"Rubric {level} points must be a number", entity="RubricLevel", field="points"
            )

    return RubricLevel(
        points=points,
        description=description,
        evidence=text_list(record, "evidence", "RubricLevel", f"Rubric {level} evidence must be an array"),
    )


def build_rubric_criteria(data: Any) -> RubricCriteria:
    record = as_record(data)

    category = required_text(record, "category", "RubricCriteria", "Rubric criteria must have a category")
    raw_weight = required(record, "weight", "RubricCriteria", "Rubric criteria must have a weight")
    weight = parse_number(raw_weight)
    if weight is None:
        raise InvalidType(
            f"Rubric weight must be a number, got {raw_weight!r}",
            entity="RubricCriteria",
            field="weight",
        )

    levels: Dict[str, RubricLevel] = {
        level: build_rubric_level(record.get(level), level, points)
        for level, points in DEFAULT_LEVEL_POINTS
    }
    return RubricCriteria(category=category, weight=weight, **levels)


def build_resource(data: Any) -> Resource:
    """Build a resource; optional fields are set only when supplied."""
    record = as_record(data)

    name = required_text(record, "name", "Resource", "Resource must have a name")
    resource_type = normalize_resource_type(
        required(record, "type", "Resource", "Resource must have a type")
    )

    fields: Dict[str, Any] = {}
    for key in ("quantity", "source", "cost"):
        if record.get(key) is not None:
            fields[key] = to_text(record[key])
    if record.get("alternatives") is not None:
        fields["alternatives"] = text_list(
            record, "alternatives", "Resource", "Resource alternatives must be an array"
        )

    return Resource(name=name, type=resource_type, **fields)


def build_standard_alignment(data: Any) -> StandardAlignment:
    record = as_record(data)

    code = required_text(record, "code", "StandardAlignment", "Standard must have a code")
    text = required_text(record, "text", "StandardAlignment", "Standard must have text")
    depth = record.get("depth")

    return StandardAlignment(
        code=code,
        text=text,
        application=optional_text(record, "application"),
        depth=EmphasisLevel.DEVELOP if depth in (None, "") else normalize_depth(depth),
    )
