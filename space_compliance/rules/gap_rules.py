"""
Gap Rules — every applicable requirement not yet compliant becomes a gap,
prioritized by severity and current status.

    critical + non_compliant          -> critical
    critical + partial / not_assessed -> high
    major                             -> medium
    minor                             -> low
"""

from __future__ import annotations

import logging

from space_compliance.models.enums import PRIORITY_ORDER, ComplianceStatus, Priority, Severity
from space_compliance.models.schemas import GapRecord, RequirementDefinition
from space_compliance.rules.status_snapshot import StatusMap, status_of

logger = logging.getLogger(__name__)

_CLOSED_STATUSES = frozenset({ComplianceStatus.COMPLIANT, ComplianceStatus.NOT_APPLICABLE})


def gap_priority(severity: Severity, status: ComplianceStatus) -> Priority:
    if severity == Severity.CRITICAL:
        return Priority.CRITICAL if status == ComplianceStatus.NON_COMPLIANT else Priority.HIGH
    if severity == Severity.MAJOR:
        return Priority.MEDIUM
    return Priority.LOW


class GapAnalyzer:

    def analyze_gaps(
        self,
        applicable: list[RequirementDefinition],
        statuses: StatusMap,
    ) -> list[GapRecord]:
        """Gaps ordered by priority; ties keep catalog order."""
        gaps: list[GapRecord] = []
        for req in applicable:
            current = status_of(req.id, statuses)
            if current in _CLOSED_STATUSES:
                continue
            gaps.append(GapRecord(
                requirement_id=req.id,
                article_ref=req.article_ref,
                title=req.title,
                category=req.category,
                severity=req.severity,
                current_status=current,
                priority=gap_priority(req.severity, current),
                estimated_effort=req.effort,
            ))

        # sorted() is stable, so catalog order survives within a priority
        gaps = sorted(gaps, key=lambda gap: PRIORITY_ORDER[gap.priority])
        logger.debug(f"Gap analysis: {len(gaps)} open of {len(applicable)} applicable")
        return gaps
