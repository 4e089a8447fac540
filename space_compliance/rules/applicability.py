"""
Applicability Resolver — filters a catalog down to the requirements a
profile is subject to.

Every present constraint must hold (AND); an absent constraint never
restricts. Output keeps catalog order and never repeats an id.
"""

from __future__ import annotations

import logging
from typing import Iterable

from space_compliance.models.enums import Maneuverability, OrbitRegime
from space_compliance.models.profile import OperatorProfile
from space_compliance.models.schemas import ApplicabilityConstraints, RequirementDefinition

logger = logging.getLogger(__name__)

# Profile orbit -> catalog orbits it satisfies
_ORBIT_EQUIVALENTS: dict[OrbitRegime, frozenset[OrbitRegime]] = {
    OrbitRegime.SSO: frozenset({OrbitRegime.SSO, OrbitRegime.LEO}),
}

_MANEUVERABLE = frozenset({Maneuverability.FULL, Maneuverability.LIMITED})


def _orbit_matches(profile: OperatorProfile, allowed: tuple[OrbitRegime, ...]) -> bool:
    orbit = profile.orbit_regime
    if orbit is None:
        return False
    if orbit == OrbitRegime.MULTIPLE:
        return True
    satisfies = _ORBIT_EQUIVALENTS.get(orbit, frozenset({orbit}))
    return any(o in satisfies for o in allowed)


def matches(profile: OperatorProfile, constraints: ApplicabilityConstraints) -> bool:
    """True when the profile satisfies every present constraint."""
    if constraints.orbit_types is not None and not _orbit_matches(profile, constraints.orbit_types):
        return False

    if constraints.constellation_tiers is not None:
        if profile.constellation_tier not in constraints.constellation_tiers:
            return False

    if constraints.min_satellites is not None:
        if profile.satellite_count < constraints.min_satellites:
            return False

    if constraints.requires_propulsion and profile.has_propulsion is not True:
        return False

    if constraints.requires_maneuverability and profile.maneuverability not in _MANEUVERABLE:
        return False

    if constraints.activity_types is not None:
        if not set(constraints.activity_types) & set(profile.activity_types):
            return False

    return True


def resolve_applicable(
    profile: OperatorProfile,
    catalog: Iterable[RequirementDefinition],
) -> list[RequirementDefinition]:
    """Return the applicable subset of `catalog`, in catalog order, de-duplicated."""
    applicable: list[RequirementDefinition] = []
    seen: set[str] = set()
    total = 0
    for req in catalog:
        total += 1
        if req.id in seen:
            continue
        if matches(profile, req.applicability):
            applicable.append(req)
            seen.add(req.id)

    logger.debug(f"Applicability: {len(applicable)}/{total} requirements apply")
    return applicable
