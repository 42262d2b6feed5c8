"""Tests for legacy feasibility migration."""

import json
import logging

from hero_kernel.builders.feasibility import build_risk
from hero_kernel.migration.legacy import (
    NO_MITIGATION,
    NO_PLAN,
    UNNAMED_RISK,
    UNNAMED_SCENARIO,
    migrate_contingencies,
    migrate_contingency,
    migrate_feasibility_data,
    migrate_risk,
    migrate_risks,
)
from hero_kernel.models.vocabulary import RiskLevel, TechAccessLevel
from hero_kernel.validation.checker import validate_feasibility_data


def _make_legacy_bundle() -> dict:
    return {
        "constraints": {"budgetUSD": 500, "techAccess": "partial", "materials": ["tape"]},
        "risks": [
            {"id": "r1", "risk": "Rain", "likelihood": "Medium", "impact": "high", "mitigation": "Tarp"},
            {"risk": "Permits", "likelihood": "low"},
            {},
        ],
        "contingencies": [
            {"id": "c1", "trigger": "Bus cancelled", "plan": "Walk"},
            {"scenario": "Sick leader"},
        ],
    }


class TestMigrateRisk:
    def test_legacy_label_and_level(self):
        risk = migrate_risk({"id": "r1", "risk": "Rain", "likelihood": "Medium", "impact": "HIGH", "mitigation": "Tarp"})
        assert risk.to_dict() == {
            "id": "r1",
            "name": "Rain",
            "likelihood": "med",
            "impact": "high",
            "mitigation": "Tarp",
        }

    def test_name_wins_over_risk(self):
        assert migrate_risk({"id": "r1", "name": "New", "risk": "Old"}).name == "New"

    def test_empty_record_gets_defaults(self):
        risk = migrate_risk({})
        assert risk.id.startswith("risk-")
        assert risk.name == UNNAMED_RISK
        assert risk.likelihood == RiskLevel.LOW
        assert risk.impact == RiskLevel.LOW
        assert risk.mitigation == NO_MITIGATION

    def test_none_input(self):
        assert migrate_risk(None).name == UNNAMED_RISK

    def test_synthetic_ids_are_unique(self):
        assert migrate_risk({}).id != migrate_risk({}).id

    def test_unknown_level_falls_back_to_low(self, caplog):
        with caplog.at_level(logging.WARNING, logger="hero_kernel.migration.legacy"):
            risk = migrate_risk({"id": "r9", "likelihood": "catastrophic"})
        assert risk.likelihood == RiskLevel.LOW
        assert "catastrophic" in caplog.text

    def test_canonical_input_unchanged(self):
        canonical = {"id": "r1", "name": "Rain", "likelihood": "low", "impact": "med", "mitigation": "Tarp"}
        assert migrate_risk(canonical).to_dict() == canonical


class TestMigrateContingency:
    def test_trigger_becomes_scenario(self):
        contingency = migrate_contingency({"id": "c1", "trigger": "Bus cancelled", "plan": "Walk"})
        assert contingency.to_dict() == {"id": "c1", "scenario": "Bus cancelled", "plan": "Walk"}

    def test_empty_record_gets_defaults(self):
        contingency = migrate_contingency({})
        assert contingency.id.startswith("contingency-")
        assert contingency.scenario == UNNAMED_SCENARIO
        assert contingency.plan == NO_PLAN


class TestBatchMigration:
    def test_order_and_count_preserved(self):
        risks = migrate_risks([{"id": "a"}, {"id": "b"}, {"id": "c"}])
        assert [r.id for r in risks] == ["a", "b", "c"]

    def test_non_list_yields_empty(self):
        assert migrate_risks(None) == []
        assert migrate_risks({"id": "a"}) == []
        assert migrate_contingencies("oops") == []


class TestMigrateFeasibilityData:
    def test_full_bundle(self):
        data = migrate_feasibility_data(_make_legacy_bundle())
        assert data.constraints.budget_usd == 500
        assert data.constraints.tech_access == TechAccessLevel.LIMITED
        assert len(data.risks) == 3
        assert data.risks[1].name == "Permits"
        assert data.contingencies[0].scenario == "Bus cancelled"
        assert data.contingencies[1].plan == NO_PLAN

    def test_output_validates(self):
        data = migrate_feasibility_data(_make_legacy_bundle())
        assert validate_feasibility_data(data.to_dict()).valid is True

    def test_bad_constraint_field_dropped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="hero_kernel.migration.legacy"):
            data = migrate_feasibility_data({"constraints": {"budgetUSD": -5, "techAccess": "full"}})
        assert data.constraints.to_dict() == {"techAccess": "full"}
        assert "budgetUSD" in caplog.text

    def test_oversized_budget_dropped(self):
        raw = json.loads(
            '{"constraints": {"budgetUSD": 1' + "0" * 400 + ', "techAccess": "none"}}'
        )
        data = migrate_feasibility_data(raw)
        assert data.constraints.to_dict() == {"techAccess": "none"}

    def test_missing_constraints(self):
        data = migrate_feasibility_data({"risks": []})
        assert data.constraints is None
        assert data.contingencies == []

    def test_non_object_input(self):
        data = migrate_feasibility_data("legacy")
        assert data.risks == []
        assert data.constraints is None

    def test_round_trip_through_builder(self):
        legacy = [
            {"id": "r1", "risk": "Budget overrun", "likelihood": "High", "impact": "high", "mitigation": "Seek funding"},
            {"id": "r2", "risk": "Technology gaps", "likelihood": "medium"},
            {"risk": "Weather"},
        ]
        rebuilt = [build_risk(risk.to_dict()) for risk in migrate_risks(legacy)]
        assert [r.name for r in rebuilt] == ["Budget overrun", "Technology gaps", "Weather"]
        assert rebuilt[1].likelihood == RiskLevel.MEDIUM
