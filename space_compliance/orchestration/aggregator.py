"""
Unified Aggregator — runs every framework pipeline for one profile and
merges the outcomes.

Per framework:
    gate -> resolve -> status snapshot -> score -> classify -> gaps -> cross-refs

Gated-off frameworks return explicit not-applicable results instead of
being omitted.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from space_compliance.catalogs import (
    Catalog,
    catalog_versions,
    get_catalog,
    get_cross_references,
    get_jurisdictions,
)
from space_compliance.catalogs.eu_space_act import EFD_DEADLINES, KEY_DEADLINES
from space_compliance.catalogs.jurisdictions import is_eu_established
from space_compliance.catalogs.nis2 import INCIDENT_REPORTING, PENALTIES, SUPERVISORY_AUTHORITIES
from space_compliance.exceptions import InvalidProfileError
from space_compliance.models.enums import (
    ActivityType,
    ConstellationTier,
    EntityClassification,
    EntitySize,
    Framework,
    Regime,
    RiskLevel,
)
from space_compliance.models.profile import OperatorProfile
from space_compliance.models.schemas import (
    CrossReferenceMapping,
    EUSpaceActResult,
    FrameworkResult,
    GapRecord,
    JurisdictionProfile,
    KeyDeadline,
    NationalCandidateResult,
    NationalLawResult,
    NIS2Result,
    OverallSummary,
    ReportingStage,
    RequirementDefinition,
    RequirementStatus,
    UnifiedResult,
)
from space_compliance.rules.applicability import resolve_applicable
from space_compliance.rules.cross_reference_rules import find_cross_references
from space_compliance.rules.gap_rules import GapAnalyzer
from space_compliance.rules.jurisdiction_rules import JurisdictionRanker, recommendation_reason
from space_compliance.rules.national_rules import national_gate, national_recommendations
from space_compliance.rules.risk_rules import RiskClassifier, max_risk
from space_compliance.rules.rules_config import RulesConfigStore
from space_compliance.rules.scoring_rules import ComplianceScorer
from space_compliance.rules.status_snapshot import (
    StatusMap,
    build_snapshot,
    find_orphaned,
    normalize_statuses,
)

logger = logging.getLogger(__name__)

StatusMaps = Mapping[Framework, StatusMap]

# Frameworks whose requirements carry statuses
ASSESSED_FRAMEWORKS = (Framework.EU_SPACE_ACT, Framework.NIS2, Framework.NATIONAL)

_LIGHT_SIZES = frozenset({EntitySize.MICRO, EntitySize.SMALL})
_LIGHT_TIERS = frozenset({ConstellationTier.SINGLE, ConstellationTier.SMALL})
_LARGE_TIERS = frozenset({ConstellationTier.LARGE, ConstellationTier.MEGA})
_NIS2_SIZES = frozenset({EntitySize.MEDIUM, EntitySize.LARGE})

_OPERATOR_TYPE_LABELS: dict[ActivityType, str] = {
    ActivityType.SPACECRAFT_OPERATOR: "Spacecraft Operator (SCO)",
    ActivityType.LAUNCH_OPERATOR: "Launch Operator (LO)",
    ActivityType.LAUNCH_SITE_OPERATOR: "Launch Site Operator (LSO)",
    ActivityType.IN_SPACE_SERVICER: "In-Space Operations & Services (ISOS)",
    ActivityType.COLLISION_AVOIDANCE_PROVIDER: "Collision Avoidance Provider (CAP)",
    ActivityType.DATA_PROVIDER: "Primary Data Provider (PDP)",
    ActivityType.THIRD_COUNTRY_OPERATOR: "Third-Country Operator (TCO)",
}

# NIS2 posture actions, in remediation order: (answer field, action)
_NIS2_POSTURE_ACTIONS: tuple[tuple[str, str], ...] = (
    ("has_incident_response_plan", "Establish incident response plan (24h/72h reporting)"),
    ("has_risk_management", "Implement cybersecurity risk management (Art. 21)"),
    ("has_supply_chain_security", "Assess supply chain security (Art. 21(2)(d))"),
    ("has_business_continuity_plan", "Develop business continuity plan"),
    ("has_security_training", "Implement security awareness training"),
)


# ── Gates ────────────────────────────────────────────────


def eu_space_act_gate(profile: OperatorProfile) -> tuple[bool, str]:
    if profile.is_defense_only:
        return False, "Defense-only exemption: defense-only operations are exempt under Art. 2(3)"
    if is_eu_established(profile.establishment_country) or profile.serves_eu_market:
        return True, "EU establishment or EU market presence"
    return False, "No EU establishment or EU market presence"


def nis2_gate(profile: OperatorProfile) -> tuple[bool, str]:
    if not (is_eu_established(profile.establishment_country) or profile.serves_eu_market):
        return False, "No EU presence or EU market"
    if profile.serves_critical_infrastructure or profile.entity_size in _NIS2_SIZES:
        return True, "Space sector entity within NIS2 size or criticality thresholds"
    return False, "Below size threshold and not critical infrastructure"


def eu_regime(profile: OperatorProfile) -> Regime:
    small_entity = profile.entity_size in _LIGHT_SIZES or profile.is_research_institution
    if small_entity and profile.constellation_tier in _LIGHT_TIERS:
        return Regime.LIGHT
    return Regime.STANDARD


def nis2_classification(profile: OperatorProfile) -> EntityClassification:
    if (
        profile.serves_critical_infrastructure
        or profile.is_essential_service_provider
        or profile.entity_size == EntitySize.LARGE
    ):
        return EntityClassification.ESSENTIAL
    return EntityClassification.IMPORTANT


def nis2_supervisory_authority(profile: OperatorProfile) -> str:
    if not is_eu_established(profile.establishment_country):
        return SUPERVISORY_AUTHORITIES["representative"]
    if profile.member_state_count > 1:
        return SUPERVISORY_AUTHORITIES["multiple"]
    return SUPERVISORY_AUTHORITIES["single"]


# ── Aggregator ───────────────────────────────────────────


class UnifiedAssessor:
    """Runs the EU Space Act, NIS2 and national-law pipelines for one profile."""

    def __init__(self, config_store: Optional[RulesConfigStore] = None):
        self._config_store = config_store or RulesConfigStore()
        self._risk = RiskClassifier(self._config_store)
        self._gaps = GapAnalyzer()
        self._ranker = JurisdictionRanker(self._config_store)

    # ── Shared pipeline ──────────────────────────────────

    def _run_pipeline(
        self,
        result: FrameworkResult,
        profile: OperatorProfile,
        catalog: Catalog,
        recorded: Optional[StatusMap],
        mappings: list[CrossReferenceMapping],
    ) -> list[GapRecord]:
        applicable = resolve_applicable(profile, catalog.requirements)
        recorded = recorded or {}
        result.orphaned_status_ids = find_orphaned(recorded, catalog.ids(), catalog.framework.value)
        snapshot = build_snapshot(profile, applicable, {
            rid: status for rid, status in recorded.items() if rid not in result.orphaned_status_ids
        })

        score = ComplianceScorer(catalog.definition, self._config_store).score(applicable, snapshot)
        gaps = self._gaps.analyze_gaps(applicable, snapshot)

        result.applicable_count = len(applicable)
        result.applicable_requirement_ids = [req.id for req in applicable]
        result.score = score
        result.risk_level = self._risk.classify_risk(score, applicable, snapshot)
        result.gaps = gaps
        result.cross_references = find_cross_references(
            applicable, mappings, profile.establishment_country
        )
        return gaps

    def _fill_actions(self, actions: list[str], covered: set[str], gaps: list[GapRecord]) -> list[str]:
        limit = self._config_store.get_action_config().max_framework_actions
        for gap in gaps:
            if len(actions) >= limit:
                break
            if gap.requirement_id in covered:
                continue
            actions.append(f"Address {gap.title} ({gap.article_ref})")
        return actions[:limit]

    # ── EU Space Act ─────────────────────────────────────

    def assess_eu_space_act(
        self,
        profile: OperatorProfile,
        catalog: Optional[Catalog] = None,
        statuses: Optional[StatusMap] = None,
    ) -> EUSpaceActResult:
        applies, reason = eu_space_act_gate(profile)
        result = EUSpaceActResult(applies=applies, reason=reason)
        if not applies:
            logger.info(f"EU Space Act not applicable: {reason}")
            return result

        catalog = catalog or get_catalog(Framework.EU_SPACE_ACT)
        mappings = [m for m in get_cross_references() if m.source_framework != Framework.NIS2]
        gaps = self._run_pipeline(result, profile, catalog, statuses, mappings)

        result.regime = eu_regime(profile)
        result.operator_types = [_OPERATOR_TYPE_LABELS[a] for a in profile.activity_types]
        result.key_deadlines = [KeyDeadline(**d) for d in KEY_DEADLINES]
        result.key_deadlines.append(KeyDeadline(**EFD_DEADLINES[result.regime.value]))

        actions: list[str] = []
        covered: set[str] = set()
        tier = profile.constellation_tier
        if profile.has_debris_mitigation_plan is not True:
            actions.append("Develop debris mitigation plan (Art. 67)")
            covered.add("debris_mitigation_plan")
        if ActivityType.SPACECRAFT_OPERATOR in profile.activity_types and tier == ConstellationTier.SINGLE:
            actions.append("Register spacecraft with competent authority")
            covered.add("eu-auth-007")
        if tier in _LARGE_TIERS:
            actions.append("Submit constellation management plan")
            covered.add("large_constellation_management")
        if not is_eu_established(profile.establishment_country) and profile.serves_eu_market:
            actions.append("Designate EU representative (Art. 14)")
            covered.add("eu-auth-004")
        result.priority_actions = self._fill_actions(actions, covered, gaps)

        logger.info(
            f"EU Space Act: {result.applicable_count} requirements, regime={result.regime.value}, "
            f"score={result.score.overall if result.score else 'n/a'}"
        )
        return result

    # ── NIS2 ─────────────────────────────────────────────

    def assess_nis2(
        self,
        profile: OperatorProfile,
        catalog: Optional[Catalog] = None,
        statuses: Optional[StatusMap] = None,
        eu_applicable: Optional[list[RequirementDefinition]] = None,
    ) -> NIS2Result:
        applies, reason = nis2_gate(profile)
        result = NIS2Result(applies=applies, reason=reason)
        if not applies:
            logger.info(f"NIS2 not applicable: {reason}")
            return result

        catalog = catalog or get_catalog(Framework.NIS2)
        gaps = self._run_pipeline(result, profile, catalog, statuses, [])
        # NIS2 rows map onto EU Space Act articles
        if eu_applicable:
            nis2_rows = [m for m in get_cross_references() if m.source_framework == Framework.NIS2]
            result.cross_references = find_cross_references(
                eu_applicable, nis2_rows, profile.establishment_country
            )

        posture = profile.cybersecurity
        total_checks = len(posture.answers())
        compliant = posture.compliant_count()
        result.entity_classification = nis2_classification(profile)
        result.compliance_gap_count = total_checks - compliant
        result.estimated_readiness = round(compliant / total_checks * 100)
        result.penalty = PENALTIES[result.entity_classification.value]
        result.incident_reporting = [ReportingStage(**stage) for stage in INCIDENT_REPORTING]
        result.supervisory_authority = nis2_supervisory_authority(profile)

        actions: list[str] = []
        covered: set[str] = set()
        answer_to_requirement = {
            req.profile_answer: req.id for req in catalog.requirements if req.profile_answer
        }
        for field, action in _NIS2_POSTURE_ACTIONS:
            if posture.answers()[field] is not True:
                actions.append(action)
                covered.add(answer_to_requirement.get(f"cybersecurity.{field}", ""))
        result.priority_actions = self._fill_actions(actions, covered, gaps)

        logger.info(
            f"NIS2: {result.entity_classification.value} entity, "
            f"{result.compliance_gap_count} posture gaps, readiness {result.estimated_readiness}%"
        )
        return result

    # ── National space law ───────────────────────────────

    def _assess_candidate(
        self,
        profile: OperatorProfile,
        jurisdiction: JurisdictionProfile,
        catalog: Catalog,
        recorded: StatusMap,
        mappings: list[CrossReferenceMapping],
        eu_applicable: list[RequirementDefinition],
    ) -> NationalCandidateResult:
        own = Catalog(
            definition=catalog.definition,
            requirements=tuple(r for r in catalog.requirements if r.jurisdiction == jurisdiction.code),
            version=catalog.version,
        )
        applies, reason = national_gate(
            jurisdiction, profile, resolve_applicable(profile, own.requirements)
        )
        result = NationalCandidateResult(
            code=jurisdiction.code,
            name=jurisdiction.name,
            law_name=jurisdiction.law_name,
            authority=jurisdiction.authority,
            applies=applies,
            reason=reason,
        )
        if applies:
            own_ids = own.ids()
            gaps = self._run_pipeline(
                result, profile, own,
                {rid: status for rid, status in recorded.items() if rid in own_ids}, [],
            )
            result.priority_actions = self._fill_actions([], set(), gaps)
        # Regime-level mappings onto the EU articles that actually apply
        result.cross_references = find_cross_references(
            eu_applicable, mappings, jurisdiction.code.value
        )
        return result

    def assess_national(
        self,
        profile: OperatorProfile,
        catalog: Optional[Catalog] = None,
        statuses: Optional[StatusMap] = None,
        eu_applicable: Optional[list[RequirementDefinition]] = None,
    ) -> NationalLawResult:
        """
        Rank the operator's candidate jurisdictions and run each one through
        its own licensing requirements.

        eu_applicable is the EU Space Act's applicable set; it is empty when
        the EU gate failed, and then no national mapping is reported.
        """
        if not profile.interested_jurisdictions:
            return NationalLawResult(applies=False, reason="No jurisdictions selected for comparison")

        jurisdictions = get_jurisdictions()
        rankings = self._ranker.rank_jurisdictions(
            profile.interested_jurisdictions,
            profile.preferences,
            jurisdictions,
            profile.insurance_coverage_meur,
        )
        catalog = catalog or get_catalog(Framework.NATIONAL)
        recorded = statuses or {}
        orphaned = find_orphaned(recorded, catalog.ids(), catalog.framework.value)
        known = {rid: status for rid, status in recorded.items() if rid not in orphaned}
        national_rows = [m for m in get_cross_references() if m.source_framework == Framework.NATIONAL]

        candidates = [
            self._assess_candidate(
                profile, jurisdictions[ranked.code], catalog, known, national_rows, eu_applicable or []
            )
            for ranked in rankings
        ]
        result = NationalLawResult(
            applies=True,
            reason=f"{len(rankings)} jurisdiction(s) compared",
            rankings=rankings,
            recommended=rankings[0].code if rankings else None,
            recommendation_reason=recommendation_reason(rankings),
            candidates=candidates,
            recommendations=national_recommendations(
                rankings, candidates, jurisdictions, profile, self._config_store
            ),
            applicable_count=candidates[0].applicable_count if candidates else 0,
            orphaned_status_ids=orphaned,
        )
        logger.info(
            f"National: {len(candidates)} jurisdiction(s), "
            f"{sum(1 for c in candidates if c.applies)} requiring authorization, "
            f"recommended={result.recommended.value if result.recommended else 'none'}"
        )
        return result

    # ── Overall ──────────────────────────────────────────

    def _overall(
        self,
        eu: EUSpaceActResult,
        nis2: NIS2Result,
        national: NationalLawResult,
    ) -> OverallSummary:
        timeline = self._config_store.get_timeline_config()
        action_config = self._config_store.get_action_config()

        applicable = [r for r in (eu, nis2) if r.applies]
        frameworks = [r.framework for r in applicable]
        if national.applies:
            frameworks.append(Framework.NATIONAL)

        risk = RiskLevel.LOW
        for framework_result in applicable:
            if framework_result.risk_level is not None:
                risk = max_risk(risk, framework_result.risk_level)
        if (
            eu.applies and eu.regime == Regime.STANDARD
            and nis2.applies and nis2.entity_classification == EntityClassification.ESSENTIAL
        ):
            risk = max_risk(risk, RiskLevel.HIGH)

        months = 0
        if eu.applies:
            months += timeline.eu_light_months if eu.regime == Regime.LIGHT else timeline.eu_standard_months
        if nis2.applies:
            months += (
                timeline.nis2_essential_months
                if nis2.entity_classification == EntityClassification.ESSENTIAL
                else timeline.nis2_important_months
            )
        if national.applies:
            months += timeline.national_months

        per_framework = action_config.per_framework_immediate
        actions = eu.priority_actions[:per_framework] + nis2.priority_actions[:per_framework]
        if national.recommended is not None:
            actions.append(f"Prepare licensing application in {national.rankings[0].name}")

        return OverallSummary(
            total_requirements=sum(r.applicable_count for r in applicable) + national.applicable_count,
            applicable_frameworks=frameworks,
            overall_risk=risk,
            estimated_months=min(months, timeline.max_months),
            immediate_actions=actions[: action_config.max_immediate_actions],
        )

    def aggregate(
        self,
        profile: OperatorProfile,
        framework_catalogs: Optional[Mapping[Framework, Catalog]] = None,
        status_maps: Optional[StatusMaps] = None,
    ) -> UnifiedResult:
        """Run the full unified assessment. Deterministic for identical inputs."""
        if not profile.establishment_country:
            raise InvalidProfileError("establishment_country is required for a unified assessment")

        catalogs = dict(framework_catalogs or {})
        statuses = dict(status_maps or {})
        logger.info(f"Unified assessment for {profile.company_name or 'unnamed operator'}")

        eu = self.assess_eu_space_act(
            profile,
            catalogs.get(Framework.EU_SPACE_ACT),
            statuses.get(Framework.EU_SPACE_ACT),
        )
        eu_catalog = catalogs.get(Framework.EU_SPACE_ACT) or get_catalog(Framework.EU_SPACE_ACT)
        eu_applicable = [req for req in eu_catalog.requirements if req.id in eu.applicable_requirement_ids]
        nis2 = self.assess_nis2(
            profile,
            catalogs.get(Framework.NIS2),
            statuses.get(Framework.NIS2),
            eu_applicable,
        )
        national = self.assess_national(
            profile,
            catalogs.get(Framework.NATIONAL),
            statuses.get(Framework.NATIONAL),
            eu_applicable,
        )

        return UnifiedResult(
            company_name=profile.company_name,
            eu_space_act=eu,
            nis2=nis2,
            national=national,
            overall=self._overall(eu, nis2, national),
            catalog_versions=catalog_versions(),
        )


def parse_status_maps(raw: Optional[Mapping[str, Mapping[str, object]]]) -> dict[Framework, dict[str, RequirementStatus]]:
    """Build per-framework status maps from JSON-shaped input.

    Raises ValueError for a framework without a requirement catalog.
    """
    parsed: dict[Framework, dict[str, RequirementStatus]] = {}
    for name, entries in (raw or {}).items():
        framework = Framework(name)
        if framework not in ASSESSED_FRAMEWORKS:
            raise ValueError(f"Framework '{framework.value}' has no requirement catalog to record statuses against")
        parsed[framework] = normalize_statuses(entries)
    return parsed
