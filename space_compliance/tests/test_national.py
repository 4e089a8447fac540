"""
Tests: National licensing — per-jurisdiction applicability, the national
pipeline inside the unified assessment, and comparison advice.

Run with:
    pytest space_compliance/tests/test_national.py -v
"""

from space_compliance.catalogs import get_catalog, get_jurisdictions
from space_compliance.models.enums import ComplianceStatus, Framework, JurisdictionCode
from space_compliance.models.profile import OperatorProfile
from space_compliance.models.schemas import NationalCandidateResult
from space_compliance.orchestration.aggregator import UnifiedAssessor, parse_status_maps
from space_compliance.rules.applicability import resolve_applicable
from space_compliance.rules.jurisdiction_rules import JurisdictionRanker
from space_compliance.rules.national_rules import national_gate, national_recommendations
from space_compliance.rules.rules_config import RulesConfigStore

_INSURANCE_ADVICE = (
    "Prepare insurance documentation early: most jurisdictions require mandatory "
    "third-party liability coverage before authorization."
)
_EU_TRANSITION_ADVICE = (
    "Plan for EU Space Act transition by 2030: EU member state national regimes "
    "will be harmonized under the new framework."
)
_CONSTELLATION_ADVICE = (
    "For constellation deployments, inquire about blanket licensing options: some "
    "jurisdictions allow a single authorization covering multiple identical spacecraft."
)
_GERMANY_ADVICE = (
    "Germany currently lacks a comprehensive space law. Consider alternative "
    "jurisdictions for authorization, or monitor the upcoming Weltraumgesetz development."
)


def _store() -> RulesConfigStore:
    return RulesConfigStore(config_path="")


def _profile(**fields) -> OperatorProfile:
    return OperatorProfile.model_validate(fields)


def _gate(code: str, profile: OperatorProfile) -> tuple[bool, str]:
    jurisdiction = get_jurisdictions()[JurisdictionCode(code)]
    own = [r for r in get_catalog(Framework.NATIONAL).requirements if r.jurisdiction == jurisdiction.code]
    return national_gate(jurisdiction, profile, resolve_applicable(profile, own))


def _advice(codes: list[str], profile: OperatorProfile, candidates=(), store=None) -> list[str]:
    jurisdictions = get_jurisdictions()
    rankings = JurisdictionRanker(_store()).rank_jurisdictions(codes, profile.preferences, jurisdictions)
    return national_recommendations(rankings, list(candidates), jurisdictions, profile, store or _store())


def _leo_operator(**extra) -> OperatorProfile:
    fields = {
        "company_name": "Orbital Relay",
        "establishment_country": "FR",
        "entity_size": "small",
        "activity_types": ["spacecraft-operator"],
        "orbit_regime": "LEO",
        "satellite_count": 12,
        "interested_jurisdictions": ["FR", "UK", "LU"],
    }
    fields.update(extra)
    return _profile(**fields)


class TestNationalGate:
    def test_comprehensive_law_applies(self):
        applies, reason = _gate("FR", _profile(activity_types=["spacecraft-operator"]))
        assert applies is True
        assert reason == "Authorization required under French Space Operations Act (LOS 2008)."

    def test_germany_without_earth_observation(self):
        applies, reason = _gate("DE", _profile(activity_types=["spacecraft-operator"]))
        assert applies is False
        assert reason.startswith("Germany currently has no comprehensive national space law.")

    def test_germany_licenses_data_providers(self):
        applies, reason = _gate("DE", _profile(activity_types=["data-provider"]))
        assert applies is True
        assert "SatDSiG" in reason

    def test_no_activity_declared(self):
        assert _gate("LU", _profile()) == (False, "No licensed space activity declared")

    def test_activity_the_law_does_not_address(self):
        applies, reason = _gate("NL", _profile(activity_types=["collision-avoidance-provider"]))
        assert applies is False
        assert reason.startswith("Netherlands's space law does not specifically address this activity type.")

    def test_launch_operator_skips_end_of_life(self):
        profile = _profile(activity_types=["launch-operator"])
        own = [r for r in get_catalog(Framework.NATIONAL).requirements if r.jurisdiction == JurisdictionCode.FR]
        ids = [r.id for r in resolve_applicable(profile, own)]
        assert "fr-end-of-life" not in ids
        assert len(ids) == 5


class TestNationalRecommendations:
    def test_single_german_candidate(self):
        germany = NationalCandidateResult(code="DE", name="Germany", applies=False)
        advice = _advice(["DE"], _profile(), candidates=[germany])
        assert advice == [_EU_TRANSITION_ADVICE, _GERMANY_ADVICE]

    def test_non_eu_regimes_skip_transition_advice(self):
        advice = _advice(["UK", "NO"], _profile())
        assert advice == [
            "Norway scores highest (68/100) for your profile: consider it as your primary jurisdiction.",
            "For the fastest timeline, Norway offers 4-month processing.",
            _INSURANCE_ADVICE,
        ]

    def test_constellation_advice(self):
        advice = _advice(["LU"], _profile(satellite_count=10))
        assert advice == [_INSURANCE_ADVICE, _EU_TRANSITION_ADVICE, _CONSTELLATION_ADVICE]

    def test_capped_by_config(self):
        store = RulesConfigStore(overrides={"actions": {"max_national_recommendations": 2}})
        advice = _advice(["LU", "FR"], _profile(satellite_count=50), store=store)
        assert len(advice) == 2
        assert advice[0].startswith("Luxembourg scores highest (73/100)")


class TestNationalPipeline:
    def test_candidates_follow_ranking(self):
        national = UnifiedAssessor(_store()).aggregate(_leo_operator()).national
        assert [c.code.value for c in national.candidates] == ["LU", "UK", "FR"]
        assert national.recommended == JurisdictionCode.LU
        assert [c.applicable_count for c in national.candidates] == [5, 6, 6]
        assert national.applicable_count == 5

    def test_candidate_pipeline_results(self):
        luxembourg = UnifiedAssessor(_store()).aggregate(_leo_operator()).national.candidates[0]
        assert luxembourg.applies is True
        assert luxembourg.authority == "Luxembourg Space Agency"
        assert luxembourg.reason == (
            "Authorization required under Space Activities Act 2020 / Space Resources Act 2017."
        )
        assert luxembourg.applicable_requirement_ids == [
            "lu-tech-assessment", "lu-insurance", "lu-financial-guarantee",
            "lu-operational-plan", "lu-end-of-life",
        ]
        assert luxembourg.score is not None
        assert len(luxembourg.gaps) == 5
        assert all(gap.current_status == ComplianceStatus.NOT_ASSESSED for gap in luxembourg.gaps)
        assert luxembourg.priority_actions[0] == "Address Technical Assessment (Art. 5)"

    def test_recommendations(self):
        national = UnifiedAssessor(_store()).aggregate(_leo_operator()).national
        assert national.recommendations == [
            "Luxembourg scores highest (73/100) for your profile: consider it as your primary jurisdiction.",
            "For the fastest timeline, Luxembourg offers 3-month processing.",
            _INSURANCE_ADVICE,
            _EU_TRANSITION_ADVICE,
            _CONSTELLATION_ADVICE,
        ]

    def test_recorded_statuses_scored_per_jurisdiction(self):
        profile = _leo_operator()
        lu_ids = [
            "lu-tech-assessment", "lu-insurance", "lu-financial-guarantee",
            "lu-operational-plan", "lu-end-of-life",
        ]
        statuses = parse_status_maps({
            "national": {**{rid: "compliant" for rid in lu_ids}, "xx-ghost": "partial"},
        })
        national = UnifiedAssessor(_store()).aggregate(profile, status_maps=statuses).national
        luxembourg, uk = national.candidates[0], national.candidates[1]
        assert luxembourg.score.overall == 100
        assert luxembourg.gaps == []
        assert luxembourg.orphaned_status_ids == []
        assert uk.score.overall < 100
        assert national.orphaned_status_ids == ["xx-ghost"]

    def test_total_counts_recommended_jurisdiction(self):
        result = UnifiedAssessor(_store()).aggregate(_leo_operator())
        assert result.overall.total_requirements == (
            result.eu_space_act.applicable_count + result.nis2.applicable_count + 5
        )

    def test_gated_candidate_has_no_pipeline(self):
        profile = _leo_operator(interested_jurisdictions=["DE", "LU"])
        national = UnifiedAssessor(_store()).aggregate(profile).national
        germany = next(c for c in national.candidates if c.code == JurisdictionCode.DE)
        assert germany.applies is False
        assert germany.score is None
        assert germany.applicable_count == 0
        assert _GERMANY_ADVICE in national.recommendations
