"""
Tests: Compliance scorer — weighting, vacuous categories, rounding,
determinism and monotonicity.

Run with:
    pytest space_compliance/tests/test_scoring.py -v
"""

import pytest

from space_compliance.catalogs import get_catalog
from space_compliance.models.enums import ComplianceStatus, Framework, Grade, OverallStatus
from space_compliance.models.profile import OperatorProfile
from space_compliance.models.schemas import (
    FrameworkDefinition,
    RequirementDefinition,
    RequirementStatus,
    ScoreBreakdown,
)
from space_compliance.rules.applicability import resolve_applicable
from space_compliance.rules.rules_config import RulesConfigStore
from space_compliance.rules.scoring_rules import ComplianceScorer


def _definition(weights: dict[str, float]) -> FrameworkDefinition:
    return FrameworkDefinition(framework="eu_space_act", name="Test", category_weights=weights)


def _req(req_id: str, category: str) -> RequirementDefinition:
    return RequirementDefinition(
        id=req_id, framework="eu_space_act", article_ref="Art. 10",
        title=req_id, category=category, severity="major",
    )


def _statuses(**values: str) -> dict[str, RequirementStatus]:
    return {rid: RequirementStatus(status=status) for rid, status in values.items()}


def _scorer(weights: dict[str, float]) -> ComplianceScorer:
    return ComplianceScorer(_definition(weights), RulesConfigStore(config_path=""))


class TestWeightedScore:
    def test_no_requirements_is_vacuously_compliant(self):
        score = _scorer({"a": 0.5, "b": 0.5}).score([], {})
        assert score.overall == 100
        assert score.grade == Grade.A
        assert score.status == OverallStatus.COMPLIANT
        assert all(c.score == 100 for c in score.categories)

    def test_empty_category_counts_as_full(self):
        reqs = [_req("a1", "a")]
        score = _scorer({"a": 0.5, "b": 0.5}).score(reqs, _statuses(a1="non_compliant"))
        by_name = {c.category: c for c in score.categories}
        assert by_name["a"].score == 0
        assert by_name["b"].score == 100
        assert score.overall == 50

    def test_not_applicable_leaves_denominator(self):
        reqs = [_req("a1", "a"), _req("a2", "a")]
        score = _scorer({"a": 1.0}).score(reqs, _statuses(a1="compliant", a2="not_applicable"))
        assert score.overall == 100
        assert score.categories[0].not_applicable == 1

    def test_all_not_applicable_is_vacuous(self):
        reqs = [_req("a1", "a")]
        score = _scorer({"a": 1.0}).score(reqs, _statuses(a1="not_applicable"))
        assert score.overall == 100

    def test_partial_is_half_credit(self):
        reqs = [_req("a1", "a"), _req("a2", "a"), _req("b1", "b")]
        statuses = _statuses(a1="compliant", a2="partial", b1="non_compliant")
        score = _scorer({"a": 0.5, "b": 0.5}).score(reqs, statuses)
        assert score.categories[0].score == 75
        assert score.categories[1].score == 0
        assert score.overall == 38  # 37.5 rounds half-up

    def test_rounds_half_up(self):
        reqs = [_req("a1", "a"), _req("b1", "b")]
        statuses = _statuses(a1="partial", b1="non_compliant")
        score = _scorer({"a": 0.25, "b": 0.75}).score(reqs, statuses)
        assert score.overall == 13  # 12.5

    def test_exact_half_from_repeating_fractions_rounds_up(self):
        weights = {
            "authorization": 0.25, "debris": 0.20, "cybersecurity": 0.20,
            "insurance": 0.15, "environmental": 0.10, "reporting": 0.10,
        }
        reqs, values = [], {}

        def add(category: str, *statuses: str):
            for i, status in enumerate(statuses):
                rid = f"{category}-{i}"
                reqs.append(_req(rid, category))
                values[rid] = status

        add("authorization", *["compliant"] * 4, *["non_compliant"] * 3)  # 4/7 x 0.25
        add("debris", *["compliant"] * 2, *["non_compliant"] * 5)         # 2/7 x 0.20
        add("cybersecurity", *["compliant"] * 3, *["non_compliant"] * 7)  # 30 x 0.20
        add("insurance", "non_compliant")
        add("environmental", "partial")                                    # 50 x 0.10
        add("reporting", "partial", "non_compliant")                       # 25 x 0.10

        score = _scorer(weights).score(reqs, _statuses(**values))
        assert score.overall == 34  # exactly 33.5
        by_name = {c.category: c for c in score.categories}
        assert by_name["authorization"].score == 57
        assert by_name["authorization"].weighted_score == 14.29
        assert by_name["debris"].weighted_score == 5.71

    def test_missing_status_is_not_assessed(self):
        reqs = [_req("a1", "a"), _req("a2", "a")]
        score = _scorer({"a": 1.0}).score(reqs, _statuses(a1="compliant"))
        assert score.overall == 50
        assert score.categories[0].not_assessed == 1

    def test_unknown_status_ids_ignored(self):
        reqs = [_req("a1", "a")]
        scorer = _scorer({"a": 1.0})
        base = scorer.score(reqs, _statuses(a1="partial"))
        with_ghost = scorer.score(reqs, _statuses(a1="partial", ghost="compliant"))
        assert base == with_ghost

    def test_weighted_score_reported(self):
        reqs = [_req("a1", "a")]
        score = _scorer({"a": 0.25, "b": 0.75}).score(reqs, _statuses(a1="compliant"))
        assert score.categories[0].weighted_score == 25.0
        assert score.categories[1].weighted_score == 75.0


class TestGradesAndStatus:
    @pytest.mark.parametrize("overall, grade", [
        (100, Grade.A), (90, Grade.A), (89, Grade.B), (75, Grade.B), (74, Grade.C),
        (60, Grade.C), (59, Grade.D), (40, Grade.D), (39, Grade.F), (0, Grade.F),
    ])
    def test_grade_bands(self, overall, grade):
        assert _scorer({"a": 1.0})._grade(overall) == grade

    @pytest.mark.parametrize("overall, status", [
        (80, OverallStatus.COMPLIANT), (79, OverallStatus.PARTIAL),
        (40, OverallStatus.PARTIAL), (39, OverallStatus.NON_COMPLIANT),
    ])
    def test_status_bands(self, overall, status):
        assert _scorer({"a": 1.0})._status(overall) == status

    def test_config_override(self):
        store = RulesConfigStore(overrides={"scoring": {"partial_credit": 0.0}})
        scorer = ComplianceScorer(_definition({"a": 1.0}), store)
        assert scorer.score([_req("a1", "a")], _statuses(a1="partial")).overall == 0


class TestEngineProperties:
    def _applicable(self):
        profile = OperatorProfile.model_validate({
            "establishment_country": "FR",
            "activity_types": ["spacecraft-operator"],
            "orbit_regime": "LEO",
            "satellite_count": 150,
            "maneuverability": "full",
        })
        catalog = get_catalog(Framework.EU_SPACE_ACT)
        return catalog, resolve_applicable(profile, catalog.requirements)

    def test_deterministic(self):
        catalog, applicable = self._applicable()
        statuses = {
            req.id: RequirementStatus(status=list(ComplianceStatus)[i % 5])
            for i, req in enumerate(applicable)
        }
        scorer = ComplianceScorer(catalog.definition, RulesConfigStore(config_path=""))
        first = scorer.score(applicable, statuses).model_dump_json()
        second = scorer.score(applicable, dict(reversed(list(statuses.items())))).model_dump_json()
        assert first == second

    def test_monotonic_in_status(self):
        catalog, applicable = self._applicable()
        scorer = ComplianceScorer(catalog.definition, RulesConfigStore(config_path=""))
        statuses = {req.id: RequirementStatus(status="non_compliant") for req in applicable}
        previous = scorer.score(applicable, statuses).overall
        for step in ("partial", "compliant"):
            for req in applicable:
                statuses[req.id] = RequirementStatus(status=step)
                current = scorer.score(applicable, statuses).overall
                assert current >= previous
                previous = current
        assert previous == 100

    def test_json_round_trip(self):
        catalog, applicable = self._applicable()
        scorer = ComplianceScorer(catalog.definition, RulesConfigStore(config_path=""))
        statuses = {applicable[0].id: RequirementStatus(status="partial")}
        score = scorer.score(applicable, statuses)
        restored = ScoreBreakdown.model_validate_json(score.model_dump_json())
        assert restored == score
