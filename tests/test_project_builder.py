"""Tests for the hero project template builder."""

import pytest

from hero_kernel.builders.project import build_hero_project_template
from hero_kernel.errors import InvalidType, MissingRequiredField, NotAnArray
from hero_kernel.models.vocabulary import EmphasisLevel
from hero_kernel.validation.checker import validate_hero_project


def _make_project_data(**overrides) -> dict:
    data = {
        "id": "watershed",
        "title": "Guardians of the Watershed",
        "duration": "8 weeks",
        "gradeLevel": "9-10",
        "subjects": ["Science", "Civics"],
    }
    data.update(overrides)
    return data


def _make_full_project_data() -> dict:
    return _make_project_data(
        tagline="Test the water, tell the story",
        theme={"primary": "teal"},
        hero={"description": "Students monitor a local creek", "highlights": [{"icon": "drop", "label": "Sites", "value": "3"}]},
        standards={
            "objectives": [{"category": "Science", "items": ["Collect data"]}],
            "alignments": {"NGSS": [{"code": "HS-ESS3-4", "text": "Evaluate solutions", "depth": "master"}]},
        },
        journey={
            "phases": [{
                "id": "phase-1",
                "name": "Investigate",
                "duration": "2 weeks",
                "description": "Research",
                "activities": [{"name": "Survey", "type": "field", "duration": "1 day", "description": "Walk"}],
            }],
            "milestones": [{"id": "m1", "title": "Proposal", "phase": "phase-1", "week": 2, "description": "Approved"}],
        },
        assessment={
            "rubric": [{
                "category": "Research",
                "weight": 25,
                "exemplary": {"description": "Many sources"},
                "proficient": {"description": "Several sources"},
                "developing": {"description": "One source"},
                "beginning": {"description": "No sources"},
            }],
        },
        resources={"required": [{"name": "Test kits", "type": "material"}]},
        impact={"audience": {"primary": ["City council"]}},
    )


class TestMinimalProject:
    def test_every_section_synthesized(self):
        template = build_hero_project_template(_make_project_data())
        assert template.theme.primary == "blue"
        assert template.theme.gradient.startswith("from-blue")
        assert template.hero.badge == "Hero Project"
        assert template.journey.phases == []
        assert template.assessment.rubric == []
        assert template.standards.alignments == {}
        assert template.impact.sustainability.legacy == ""

    def test_to_dict_shape(self):
        data = build_hero_project_template(_make_project_data()).to_dict()
        assert data["gradeLevel"] == "9-10"
        assert data["tagline"] == ""
        assert data["bigIdea"]["subQuestions"] == []
        assert data["resources"]["studentResources"] == []

    def test_minimal_project_validates(self):
        template = build_hero_project_template(_make_project_data())
        result = validate_hero_project(template.to_dict())
        assert result.valid is True
        assert [w.path for w in result.warnings] == ["hero.description"]


class TestFullProject:
    def test_sections_merged_over_defaults(self):
        template = build_hero_project_template(_make_full_project_data())
        assert template.theme.primary == "teal"
        assert template.theme.secondary == "purple"
        assert template.hero.highlights[0]["label"] == "Sites"
        assert template.standards.alignments["NGSS"][0].depth == EmphasisLevel.MASTER
        assert template.standards.objectives[0].items == ["Collect data"]
        assert template.journey.phases[0].activities[0].type.value == "field"
        assert template.journey.milestones[0].week == 2
        assert template.assessment.rubric[0].exemplary.points == 4
        assert template.resources.required[0].name == "Test kits"
        assert template.impact.audience.primary == ["City council"]

    def test_fixed_point(self):
        template = build_hero_project_template(_make_full_project_data())
        rebuilt = build_hero_project_template(template.to_dict())
        assert rebuilt.to_dict() == template.to_dict()

    def test_unknown_keys_dropped(self):
        template = build_hero_project_template(_make_project_data(theme={"primary": "red", "font": "serif"}))
        assert "font" not in template.to_dict()["theme"]


class TestRequiredFields:
    def test_none_input_reports_id(self):
        with pytest.raises(MissingRequiredField, match="Hero project must have an id"):
            build_hero_project_template(None)

    def test_missing_grade_level(self):
        data = _make_project_data()
        del data["gradeLevel"]
        with pytest.raises(MissingRequiredField, match="gradeLevel"):
            build_hero_project_template(data)

    def test_missing_subjects(self):
        data = _make_project_data()
        del data["subjects"]
        with pytest.raises(MissingRequiredField, match="Hero project must have subjects"):
            build_hero_project_template(data)

    def test_subjects_must_be_array(self):
        with pytest.raises(NotAnArray, match="Subjects must be an array"):
            build_hero_project_template(_make_project_data(subjects="Science"))

    def test_section_must_be_object(self):
        with pytest.raises(InvalidType):
            build_hero_project_template(_make_project_data(theme="blue"))

    def test_nested_builder_errors_propagate(self):
        with pytest.raises(MissingRequiredField, match="Phase must have an id"):
            build_hero_project_template(_make_project_data(journey={"phases": [{"name": "x"}]}))

    def test_alignment_family_must_be_array(self):
        with pytest.raises(NotAnArray, match="Standards for NGSS must be an array"):
            build_hero_project_template(
                _make_project_data(standards={"alignments": {"NGSS": {"code": "x"}}})
            )
