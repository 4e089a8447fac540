"""
Status snapshot helpers.

The caller owns requirement statuses; the engine only reads a snapshot.
A snapshot is assembled from two sources, in increasing precedence:
  1. profile answers linked to a requirement (profile_answer)
  2. explicitly recorded statuses
Anything else is not_assessed.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional, Union

from space_compliance.exceptions import UnknownRequirementId
from space_compliance.models.enums import ComplianceStatus
from space_compliance.models.profile import OperatorProfile
from space_compliance.models.schemas import RequirementDefinition, RequirementStatus

logger = logging.getLogger(__name__)

StatusInput = Union[RequirementStatus, ComplianceStatus, str]
StatusMap = Mapping[str, RequirementStatus]


def normalize_statuses(raw: Optional[Mapping[str, StatusInput]]) -> dict[str, RequirementStatus]:
    """Accept status records, enum members or plain status strings."""
    normalized: dict[str, RequirementStatus] = {}
    for requirement_id, value in (raw or {}).items():
        if isinstance(value, RequirementStatus):
            normalized[requirement_id] = value
        elif isinstance(value, Mapping):
            normalized[requirement_id] = RequirementStatus.model_validate(value)
        else:
            normalized[requirement_id] = RequirementStatus(status=ComplianceStatus(value))
    return normalized


def status_of(requirement_id: str, statuses: StatusMap) -> ComplianceStatus:
    record = statuses.get(requirement_id)
    return record.status if record is not None else ComplianceStatus.NOT_ASSESSED


def seed_from_profile(
    profile: OperatorProfile,
    requirements: Iterable[RequirementDefinition],
) -> dict[str, RequirementStatus]:
    """Derive statuses from boolean profile answers (True/False only)."""
    seeded: dict[str, RequirementStatus] = {}
    for req in requirements:
        if not req.profile_answer:
            continue
        answer = profile.answer(req.profile_answer)
        if answer is None:
            continue
        seeded[req.id] = RequirementStatus(
            status=ComplianceStatus.COMPLIANT if answer else ComplianceStatus.NON_COMPLIANT,
            notes=f"From profile answer '{req.profile_answer}'",
        )
    return seeded


def build_snapshot(
    profile: OperatorProfile,
    requirements: Iterable[RequirementDefinition],
    recorded: Optional[StatusMap] = None,
) -> dict[str, RequirementStatus]:
    snapshot = seed_from_profile(profile, requirements)
    snapshot.update(recorded or {})
    return snapshot


def find_orphaned(
    statuses: StatusMap,
    known_ids: Iterable[str],
    framework: str = "",
) -> list[str]:
    """Return status ids absent from the catalog, logging each one."""
    known = set(known_ids)
    orphaned = sorted(rid for rid in statuses if rid not in known)
    for rid in orphaned:
        logger.warning(f"Ignoring status entry: {UnknownRequirementId(rid, framework)}")
    return orphaned
