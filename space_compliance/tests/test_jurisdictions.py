"""
Tests: Jurisdiction ranker.

Run with:
    pytest space_compliance/tests/test_jurisdictions.py -v
"""

import pytest

from space_compliance.catalogs import get_jurisdictions
from space_compliance.exceptions import InvalidProfileError
from space_compliance.models.enums import JurisdictionCode
from space_compliance.models.profile import JurisdictionPreferences
from space_compliance.rules.jurisdiction_rules import JurisdictionRanker, recommendation_reason
from space_compliance.rules.rules_config import RulesConfigStore


def _rank(candidates, insurance=None, **prefs):
    ranker = JurisdictionRanker(RulesConfigStore(config_path=""))
    return ranker.rank_jurisdictions(
        candidates, JurisdictionPreferences(**prefs), get_jurisdictions(), insurance
    )


class TestRanking:
    def test_equal_scores_keep_candidate_order(self):
        ranked = _rank(["DK", "NL", "BE"])
        assert [(r.code.value, r.score) for r in ranked] == [("DK", 50), ("NL", 50), ("BE", 50)]
        ranked = _rank(["BE", "DK", "NL"])
        assert [r.code.value for r in ranked] == ["BE", "DK", "NL"]

    def test_sorted_descending(self):
        ranked = _rank(["FR", "DK", "LU"])
        assert [(r.code.value, r.score) for r in ranked] == [("LU", 73), ("DK", 50), ("FR", 40)]

    def test_clamped_to_100_and_pros_capped(self):
        ranked = _rank(["LU"], prefers_fast_processing=True, requires_english_process=True, is_startup=True)
        lu = ranked[0]
        assert lu.score == 100
        assert lu.pros == [
            "Fast processing (≤3 months)",
            "English-language process available",
            "NewSpace-friendly regime",
        ]
        assert lu.cons == []

    def test_penalties_and_cons_capped(self):
        fr = _rank(["FR"], prefers_fast_processing=True, requires_english_process=True)[0]
        assert fr.score == 25
        assert fr.cons == ["Longer processing time (6 months)", "Local language required"]

    def test_moderate_processing_bonus_has_no_pro(self):
        nl = _rank(["NL"], prefers_fast_processing=True)[0]
        assert nl.score == 58
        assert nl.pros == []

    def test_adequate_insurance_avoids_penalty(self):
        assert _rank(["FR"])[0].score == 40
        assert _rank(["FR"], insurance=60)[0].score == 45
        assert _rank(["FR"], insurance=59.9)[0].score == 40

    def test_low_insurance_pro(self):
        lu = _rank(["LU"])[0]
        assert "Lower insurance minimum (€20M)" in lu.pros
        assert "Streamlined licensing process" in lu.pros
        assert "High EU Space Act alignment" in lu.pros

    def test_startup_needs_newspace_regime(self):
        assert _rank(["DE"], is_startup=True)[0].score == 50
        assert _rank(["DK"], is_startup=True)[0].score == 60

    def test_duplicates_ranked_once(self):
        ranked = _rank(["DK", "dk", JurisdictionCode.DK, "NL"])
        assert [r.code.value for r in ranked] == ["DK", "NL"]

    def test_unknown_code_raises(self):
        with pytest.raises(InvalidProfileError):
            _rank(["DK", "XX"])

    def test_empty_candidates(self):
        assert _rank([]) == []

    def test_config_override(self):
        store = RulesConfigStore(overrides={"ranking": {"base_score": 0}})
        ranked = JurisdictionRanker(store).rank_jurisdictions(
            ["FR"], JurisdictionPreferences(), get_jurisdictions()
        )
        assert ranked[0].score == 0


class TestRecommendation:
    def test_reason_names_winner(self):
        ranked = _rank(["DK", "LU"])
        assert recommendation_reason(ranked) == "Luxembourg scores highest (73/100) based on your requirements"

    def test_reason_without_candidates(self):
        assert recommendation_reason([]) == "No jurisdictions selected for comparison"
