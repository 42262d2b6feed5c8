"""Tests for validation reports, the enforcement assertion and type guards."""

import logging

import pytest

from hero_kernel.builders.feasibility import build_constraints, build_risk
from hero_kernel.config import Settings
from hero_kernel.errors import HeroDataError, InvalidHeroProject
from hero_kernel.models.validation import ValidationIssue, ValidationResult
from hero_kernel.validation.guards import is_valid_constraints, is_valid_contingency, is_valid_risk
from hero_kernel.validation.report import assert_valid_hero_project, format_validation_results


def _make_project_data(**overrides) -> dict:
    data = {
        "id": "watershed",
        "title": "Guardians of the Watershed",
        "duration": "8 weeks",
        "gradeLevel": "9-10",
        "subjects": ["Science"],
    }
    data.update(overrides)
    return data


def _make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestFormatValidationResults:
    def test_passed(self):
        assert format_validation_results(ValidationResult(valid=True)) == "Validation passed!"

    def test_errors_and_warnings_numbered(self):
        result = ValidationResult.from_issues(
            [
                ValidationIssue(path="id", message="Missing required field: id", suggestion="Add an id"),
                ValidationIssue(path="subjects", message="Subjects must be an array", value="Science"),
            ],
            [ValidationIssue(path="theme.accent", message="Missing theme field: accent")],
        )
        report = format_validation_results(result)
        lines = report.splitlines()
        assert lines[0] == "Validation failed with errors:"
        assert "  1. id: Missing required field: id" in lines
        assert "     Suggestion: Add an id" in lines
        assert "  2. subjects: Subjects must be an array" in lines
        assert '     Current value: "Science"' in lines
        assert "  1. theme.accent: Missing theme field: accent" in lines
        assert lines.index("Errors:") < lines.index("Warnings:")

    def test_warnings_only_still_passes(self):
        result = ValidationResult.from_issues(
            [], [ValidationIssue(path="subjects", message="Missing recommended field: subjects")]
        )
        report = format_validation_results(result)
        assert report.startswith("Validation passed!")
        assert "Errors:" not in report


class TestAssertValidHeroProject:
    def test_disabled_in_production(self):
        settings = _make_settings(environment="production")
        assert assert_valid_hero_project({}, "broken", settings=settings) is None

    def test_enabled_in_development(self):
        settings = _make_settings(environment="Development")
        with pytest.raises(InvalidHeroProject) as exc:
            assert_valid_hero_project({}, "broken", settings=settings)
        assert isinstance(exc.value, HeroDataError)
        assert exc.value.result.valid is False
        assert "broken" in str(exc.value)

    def test_explicit_override(self):
        settings = _make_settings(environment="production", enforce_validation=True)
        with pytest.raises(InvalidHeroProject):
            assert_valid_hero_project({}, "broken", settings=settings)

    def test_errors_logged(self, caplog):
        settings = _make_settings(enforce_validation=True)
        with caplog.at_level(logging.ERROR, logger="hero_kernel.validation.report"):
            with pytest.raises(InvalidHeroProject):
                assert_valid_hero_project({"title": "x"}, "p-7", settings=settings)
        assert "p-7" in caplog.text
        assert "Missing required field: id" in caplog.text

    def test_warnings_logged_not_raised(self, caplog):
        settings = _make_settings(enforce_validation=True)
        with caplog.at_level(logging.WARNING, logger="hero_kernel.validation.report"):
            result = assert_valid_hero_project(
                _make_project_data(theme={"primary": "blue"}), "p-8", settings=settings
            )
        assert result.valid is True
        assert "theme.secondary" in caplog.text


class TestGuards:
    def test_risk(self):
        risk = build_risk({"id": "r1", "name": "Rain", "likelihood": "medium", "impact": "low", "mitigation": "Tarp"})
        assert is_valid_risk(risk) is True
        assert is_valid_risk(risk.to_dict()) is True

    def test_risk_rejects_non_canonical(self):
        assert is_valid_risk({"id": "r1", "name": "Rain", "likelihood": "medium", "impact": "low", "mitigation": "Tarp"}) is False
        assert is_valid_risk({"id": "r1", "risk": "Rain", "likelihood": "low", "impact": "low", "mitigation": "Tarp"}) is False
        assert is_valid_risk(None) is False

    def test_contingency(self):
        assert is_valid_contingency({"id": "c1", "scenario": "Rain", "plan": "Move"}) is True
        assert is_valid_contingency({"id": "c1", "trigger": "Rain", "plan": "Move"}) is False
        assert is_valid_contingency("c1") is False

    def test_constraints(self):
        assert is_valid_constraints({}) is True
        assert is_valid_constraints(build_constraints({"budgetUSD": 10, "techAccess": "partial"})) is True
        assert is_valid_constraints({"techAccess": "partial"}) is False
        assert is_valid_constraints({"budgetUSD": "10"}) is False
        assert is_valid_constraints({"materials": "tape"}) is False
        assert is_valid_constraints(["tape"]) is False
