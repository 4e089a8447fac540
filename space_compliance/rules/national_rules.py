"""
National Rules — licensing applicability per jurisdiction and the advice
that goes with a jurisdiction comparison.

A jurisdiction applies when its law licenses one of the operator's
activities and at least one of its requirements resolves for the profile.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from space_compliance.models.enums import JurisdictionCode
from space_compliance.models.profile import OperatorProfile
from space_compliance.models.schemas import (
    JurisdictionProfile,
    JurisdictionScore,
    NationalCandidateResult,
    RequirementDefinition,
)
from space_compliance.rules.rules_config import RulesConfigStore

logger = logging.getLogger(__name__)

# Not bound by the EU Space Act transition
_NON_EU_REGIMES = frozenset({JurisdictionCode.UK, JurisdictionCode.NO})
_BLANKET_LICENSING_ABOVE = 9


def national_gate(
    jurisdiction: JurisdictionProfile,
    profile: OperatorProfile,
    applicable: Sequence[RequirementDefinition],
) -> tuple[bool, str]:
    covered = jurisdiction.covered_activities
    if covered is not None and not any(a in covered for a in profile.activity_types):
        return False, jurisdiction.coverage_note or (
            f"{jurisdiction.name}'s space law only licenses "
            + ", ".join(a.value for a in covered)
        )
    if not profile.activity_types:
        return False, "No licensed space activity declared"
    if not applicable:
        return False, (
            f"{jurisdiction.name}'s space law does not specifically address this activity "
            f"type. Additional regulatory consultation may be needed."
        )
    return True, f"Authorization required under {jurisdiction.law_name}."


def national_recommendations(
    rankings: Sequence[JurisdictionScore],
    candidates: Sequence[NationalCandidateResult],
    jurisdiction_data: Mapping[JurisdictionCode, JurisdictionProfile],
    profile: OperatorProfile,
    config_store: Optional[RulesConfigStore] = None,
) -> list[str]:
    """Advice for the compared jurisdictions, most specific first."""
    limit = (config_store or RulesConfigStore()).get_action_config().max_national_recommendations
    recommendations: list[str] = []

    if len(rankings) > 1:
        best = rankings[0]
        recommendations.append(
            f"{best.name} scores highest ({best.score}/100) for your profile: "
            f"consider it as your primary jurisdiction."
        )
        # min keeps the first of equal candidates, so ties follow the ranking
        fastest = min(rankings, key=lambda s: jurisdiction_data[s.code].processing_months)
        months = jurisdiction_data[fastest.code].processing_months
        recommendations.append(
            f"For the fastest timeline, {fastest.name} offers {months}-month processing."
        )

    compared = [jurisdiction_data[s.code] for s in rankings]
    if any(j.mandatory_insurance for j in compared):
        recommendations.append(
            "Prepare insurance documentation early: most jurisdictions require mandatory "
            "third-party liability coverage before authorization."
        )
    if any(j.code not in _NON_EU_REGIMES for j in compared):
        recommendations.append(
            "Plan for EU Space Act transition by 2030: EU member state national regimes "
            "will be harmonized under the new framework."
        )
    if profile.satellite_count > _BLANKET_LICENSING_ABOVE:
        recommendations.append(
            "For constellation deployments, inquire about blanket licensing options: some "
            "jurisdictions allow a single authorization covering multiple identical spacecraft."
        )
    if any(c.code == JurisdictionCode.DE and not c.applies for c in candidates):
        recommendations.append(
            "Germany currently lacks a comprehensive space law. Consider alternative "
            "jurisdictions for authorization, or monitor the upcoming Weltraumgesetz development."
        )

    logger.debug(f"National recommendations: {len(recommendations)} (limit {limit})")
    return recommendations[:limit]
