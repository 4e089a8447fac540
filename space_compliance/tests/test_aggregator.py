"""
Tests: Unified aggregator — gates, framework pipelines, overall summary.

Run with:
    pytest space_compliance/tests/test_aggregator.py -v
"""

import pytest

from space_compliance.catalogs import build_catalog, get_catalog
from space_compliance.exceptions import InvalidProfileError
from space_compliance.models.enums import (
    RISK_ORDER,
    ComplianceStatus,
    EntityClassification,
    Framework,
    Regime,
    RiskLevel,
)
from space_compliance.models.profile import OperatorProfile
from space_compliance.models.schemas import RequirementStatus, UnifiedResult
from space_compliance.orchestration.aggregator import UnifiedAssessor, parse_status_maps
from space_compliance.rules.applicability import resolve_applicable
from space_compliance.rules.rules_config import RulesConfigStore

_ALL_FALSE_CYBER = {
    "has_cybersecurity_policy": False,
    "has_risk_management": False,
    "has_incident_response_plan": False,
    "has_business_continuity_plan": False,
    "has_supply_chain_security": False,
    "has_security_training": False,
    "has_encryption": False,
    "has_access_control": False,
    "has_vulnerability_management": False,
    "has_penetration_testing": False,
}


def _assessor() -> UnifiedAssessor:
    return UnifiedAssessor(RulesConfigStore(config_path=""))


def _profile(**fields) -> OperatorProfile:
    return OperatorProfile.model_validate(fields)


def _scenario_a() -> OperatorProfile:
    return _profile(
        establishment_country="DE",
        entity_size="medium",
        activity_types=["spacecraft-operator"],
        orbit_regime="LEO",
        satellite_count=50,
        has_debris_mitigation_plan=False,
    )


def _scenario_b() -> OperatorProfile:
    return _profile(
        establishment_country="DE",
        entity_size="large",
        serves_critical_infrastructure=True,
        cybersecurity=_ALL_FALSE_CYBER,
    )


def _all_compliant(profile: OperatorProfile, framework: Framework) -> dict[str, RequirementStatus]:
    catalog = get_catalog(framework)
    return {
        req.id: RequirementStatus(status=ComplianceStatus.COMPLIANT)
        for req in resolve_applicable(profile, catalog.requirements)
    }


class TestScenarios:
    def test_scenario_a_eu_standard_with_debris_action(self):
        result = _assessor().aggregate(_scenario_a())
        eu = result.eu_space_act
        assert eu.applies is True
        assert eu.regime == Regime.STANDARD
        assert any("debris mitigation plan" in action.lower() for action in eu.priority_actions)
        assert result.overall.immediate_actions[0] == "Develop debris mitigation plan (Art. 67)"

    def test_scenario_a_debris_plan_seeded_non_compliant(self):
        eu = _assessor().aggregate(_scenario_a()).eu_space_act
        gap = next(g for g in eu.gaps if g.requirement_id == "debris_mitigation_plan")
        assert gap.current_status == ComplianceStatus.NON_COMPLIANT
        assert eu.gaps[0].priority.value == "critical"

    def test_scenario_b_nis2_essential(self):
        nis2 = _assessor().aggregate(_scenario_b()).nis2
        assert nis2.applies is True
        assert nis2.entity_classification == EntityClassification.ESSENTIAL
        assert nis2.compliance_gap_count == 10
        assert nis2.estimated_readiness == 0
        assert nis2.priority_actions[0] == "Establish incident response plan (24h/72h reporting)"
        assert len(nis2.priority_actions) == 5

    def test_partial_posture_readiness(self):
        cyber = dict(_ALL_FALSE_CYBER, has_encryption=True, has_access_control=True, has_risk_management=True)
        profile = _profile(establishment_country="FR", entity_size="medium", cybersecurity=cyber)
        nis2 = _assessor().aggregate(profile).nis2
        assert nis2.entity_classification == EntityClassification.IMPORTANT
        assert nis2.compliance_gap_count == 7
        assert nis2.estimated_readiness == 30
        assert "Implement cybersecurity risk management (Art. 21)" not in nis2.priority_actions


    def test_nis2_essential_penalty_and_reporting(self):
        nis2 = _assessor().aggregate(_scenario_b()).nis2
        assert nis2.penalty.startswith("Up to €10,000,000 or 2% of total annual worldwide turnover")
        assert [(s.stage, s.deadline) for s in nis2.incident_reporting] == [
            ("early_warning", "24 hours"),
            ("notification", "72 hours"),
            ("intermediate_report", "Upon request"),
            ("final_report", "1 month"),
        ]
        assert nis2.supervisory_authority == (
            "National competent authority of your member state of establishment."
        )

    def test_nis2_important_across_member_states(self):
        profile = _profile(establishment_country="FR", entity_size="medium", member_state_count=3)
        nis2 = _assessor().aggregate(profile).nis2
        assert nis2.penalty.startswith("Up to €7,000,000 or 1.4%")
        assert nis2.supervisory_authority.startswith("Primary: member state of main establishment")

    def test_nis2_authority_for_non_eu_operator(self):
        profile = _profile(establishment_country="US", entity_size="large", serves_eu_market=True)
        nis2 = _assessor().aggregate(profile).nis2
        assert "EU representative" in nis2.supervisory_authority

    def test_nis2_details_empty_when_out_of_scope(self):
        nis2 = _assessor().aggregate(_profile(establishment_country="FR", entity_size="micro")).nis2
        assert nis2.penalty == ""
        assert nis2.incident_reporting == []

class TestGates:
    def test_defense_only_exemption(self):
        result = _assessor().aggregate(_profile(is_defense_only=True, establishment_country="EU"))
        eu = result.eu_space_act
        assert eu.applies is False
        assert eu.applicable_count == 0
        assert eu.regime == Regime.EXEMPT
        assert "defense-only exemption" in eu.reason.lower()

    def test_no_eu_presence(self):
        result = _assessor().aggregate(_profile(establishment_country="US", entity_size="large"))
        assert result.eu_space_act.applies is False
        assert result.eu_space_act.reason == "No EU establishment or EU market presence"
        assert result.nis2.applies is False
        assert result.nis2.reason == "No EU presence or EU market"
        assert result.nis2.entity_classification == EntityClassification.OUT_OF_SCOPE
        assert result.overall.total_requirements == 0
        assert result.overall.overall_risk == RiskLevel.LOW
        assert result.overall.estimated_months == 0

    def test_serving_eu_market_from_abroad(self):
        profile = _profile(establishment_country="US", serves_eu_market=True, entity_size="small")
        eu = _assessor().aggregate(profile).eu_space_act
        assert eu.applies is True
        assert "Designate EU representative (Art. 14)" in eu.priority_actions

    def test_nis2_below_threshold(self):
        nis2 = _assessor().aggregate(_profile(establishment_country="DE", entity_size="small")).nis2
        assert nis2.applies is False
        assert nis2.reason == "Below size threshold and not critical infrastructure"

    def test_nis2_critical_infrastructure_overrides_size(self):
        profile = _profile(establishment_country="DE", entity_size="micro", serves_critical_infrastructure=True)
        nis2 = _assessor().aggregate(profile).nis2
        assert nis2.applies is True
        assert nis2.entity_classification == EntityClassification.ESSENTIAL

    def test_missing_establishment_rejected(self):
        with pytest.raises(InvalidProfileError):
            _assessor().aggregate(_profile(entity_size="large"))


class TestEUSpaceAct:
    def test_light_regime(self):
        profile = _profile(establishment_country="LU", entity_size="micro", satellite_count=3)
        eu = _assessor().aggregate(profile).eu_space_act
        assert eu.regime == Regime.LIGHT
        assert eu.key_deadlines[-1].description == "EFD deadline for Light Regime"

    def test_research_institution_light_regime(self):
        profile = _profile(establishment_country="NL", entity_size="large", is_research_institution=True)
        assert _assessor().aggregate(profile).eu_space_act.regime == Regime.LIGHT

    def test_large_constellation_is_standard(self):
        profile = _profile(establishment_country="LU", entity_size="micro", satellite_count=150)
        eu = _assessor().aggregate(profile).eu_space_act
        assert eu.regime == Regime.STANDARD
        assert "Submit constellation management plan" in eu.priority_actions

    def test_zero_satellites_no_orbit(self):
        profile = _profile(establishment_country="DE", satellite_count=0)
        eu = _assessor().aggregate(profile).eu_space_act
        unconstrained = [
            r.id for r in get_catalog(Framework.EU_SPACE_ACT).requirements
            if r.applicability.is_unconstrained()
        ]
        assert eu.applicable_requirement_ids == unconstrained

    def test_recorded_status_overrides_profile_answer(self):
        statuses = {Framework.EU_SPACE_ACT: {"debris_mitigation_plan": RequirementStatus(status="compliant")}}
        eu = _assessor().aggregate(_scenario_a(), status_maps=statuses).eu_space_act
        assert "debris_mitigation_plan" not in [g.requirement_id for g in eu.gaps]

    def test_orphaned_status_ids_reported_and_ignored(self):
        baseline = _assessor().aggregate(_scenario_a()).eu_space_act
        statuses = {Framework.EU_SPACE_ACT: {"ghost-req": RequirementStatus(status="compliant")}}
        eu = _assessor().aggregate(_scenario_a(), status_maps=statuses).eu_space_act
        assert eu.orphaned_status_ids == ["ghost-req"]
        assert eu.score == baseline.score

    def test_cross_references_follow_establishment(self):
        eu = _assessor().aggregate(_scenario_a()).eu_space_act
        ids = [m.id for m in eu.cross_references]
        assert "xref-de-gap" in ids
        assert "xref-fr-los" not in ids


class TestOverall:
    def test_deterministic(self):
        profile = _profile(**dict(_scenario_b().model_dump(exclude={"constellation_tier"}),
                                  interested_jurisdictions=["LU", "DK"]))
        first = _assessor().aggregate(profile).model_dump_json()
        second = _assessor().aggregate(profile).model_dump_json()
        assert first == second

    def test_total_is_sum_of_frameworks(self):
        result = _assessor().aggregate(_scenario_b())
        assert result.overall.total_requirements == (
            result.eu_space_act.applicable_count + result.nis2.applicable_count
        )
        assert result.overall.applicable_frameworks == [Framework.EU_SPACE_ACT, Framework.NIS2]

    def test_standard_plus_essential_forces_high(self):
        profile = _scenario_b()
        statuses = {
            Framework.EU_SPACE_ACT: _all_compliant(profile, Framework.EU_SPACE_ACT),
            Framework.NIS2: _all_compliant(profile, Framework.NIS2),
        }
        result = _assessor().aggregate(profile, status_maps=statuses)
        assert result.eu_space_act.risk_level == RiskLevel.LOW
        assert result.nis2.risk_level == RiskLevel.LOW
        assert result.overall.overall_risk == RiskLevel.HIGH

    def test_overall_risk_is_max(self):
        result = _assessor().aggregate(_scenario_b())
        levels = [result.eu_space_act.risk_level, result.nis2.risk_level]
        assert RISK_ORDER[result.overall.overall_risk] >= max(RISK_ORDER[level] for level in levels)

    def test_timeline_capped(self):
        profile = _profile(**dict(_scenario_b().model_dump(exclude={"constellation_tier"}),
                                  interested_jurisdictions=["DK"]))
        assert _assessor().aggregate(profile).overall.estimated_months == 24  # 12 + 9 + 3

    def test_timeline_standard_important(self):
        profile = _profile(establishment_country="FR", entity_size="medium")
        assert _assessor().aggregate(profile).overall.estimated_months == 18

    def test_national_recommendation(self):
        profile = _profile(
            establishment_country="DE",
            orbit_regime="LEO",
            interested_jurisdictions=["DK", "NL", "DE"],
        )
        national = _assessor().aggregate(profile).national
        assert national.applies is True
        assert national.recommended.value == "DK"
        assert national.recommendation_reason == "Denmark scores highest (50/100) based on your requirements"
        germany = next(c for c in national.candidates if c.code.value == "DE")
        assert [m.id for m in germany.cross_references] == ["xref-de-gap"]
        assert germany.applies is False

    def test_national_mappings_need_eu_applicability(self):
        fields = {
            "establishment_country": "BE",
            "activity_types": ["spacecraft-operator"],
            "orbit_regime": "LEO",
            "satellite_count": 1,
            "interested_jurisdictions": ["BE"],
        }
        civil = _assessor().aggregate(_profile(**fields)).national.candidates[0]
        assert "xref-be-space-act" in [m.id for m in civil.cross_references]

        result = _assessor().aggregate(_profile(**fields, is_defense_only=True))
        assert result.eu_space_act.applies is False
        assert result.national.candidates[0].cross_references == []

    def test_national_catalog_override(self):
        catalog = build_catalog(
            {"framework": "national", "name": "Custom", "category_weights": {"insurance": 1.0}},
            [{"id": "dk-custom", "jurisdiction": "DK", "article_ref": "§ 9", "title": "Custom cover",
              "category": "insurance", "severity": "critical"}],
        )
        profile = _profile(establishment_country="DK", activity_types=["launch-operator"],
                           interested_jurisdictions=["DK"])
        national = _assessor().aggregate(profile, framework_catalogs={Framework.NATIONAL: catalog}).national
        assert national.candidates[0].applicable_requirement_ids == ["dk-custom"]

    def test_no_national_comparison(self):
        national = _assessor().aggregate(_scenario_a()).national
        assert national.applies is False
        assert national.rankings == []

    def test_result_round_trip(self):
        result = _assessor().aggregate(_scenario_a())
        assert UnifiedResult.model_validate_json(result.model_dump_json()) == result

    def test_catalog_versions_included(self):
        versions = _assessor().aggregate(_scenario_a()).catalog_versions
        assert set(versions) >= {"eu_space_act", "nis2"}


class TestStatusParsing:
    def test_parse_status_maps(self):
        maps = parse_status_maps({
            "eu_space_act": {"trackability": "compliant"},
            "nis2": {"nis2-001": {"status": "partial", "notes": "board review pending"}},
        })
        assert maps[Framework.EU_SPACE_ACT]["trackability"].status == ComplianceStatus.COMPLIANT
        assert maps[Framework.NIS2]["nis2-001"].notes == "board review pending"

    def test_national_statuses_accepted(self):
        maps = parse_status_maps({"national": {"lu-insurance": "partial"}})
        assert maps[Framework.NATIONAL]["lu-insurance"].status == ComplianceStatus.PARTIAL

    def test_framework_without_catalog_rejected(self):
        with pytest.raises(ValueError, match="us"):
            parse_status_maps({"us": {"faa-part-450": "compliant"}})

    def test_invalid_status_value(self):
        with pytest.raises(ValueError):
            parse_status_maps({"eu_space_act": {"trackability": "done"}})
