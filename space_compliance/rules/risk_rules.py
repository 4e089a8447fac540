"""
Risk Rules — maps a score breakdown plus open critical obligations to a
risk level. Boundary values resolve to the more severe level.
"""

from __future__ import annotations

import logging
from typing import Optional

from space_compliance.models.enums import RISK_ORDER, ComplianceStatus, RiskLevel, Severity
from space_compliance.models.schemas import RequirementDefinition, ScoreBreakdown
from space_compliance.rules.rules_config import RulesConfigStore
from space_compliance.rules.status_snapshot import StatusMap, status_of

logger = logging.getLogger(__name__)

_OPEN_STATUSES = frozenset({ComplianceStatus.NON_COMPLIANT, ComplianceStatus.NOT_ASSESSED})


def max_risk(*levels: RiskLevel) -> RiskLevel:
    return max(levels, key=lambda level: RISK_ORDER[level])


class RiskClassifier:
    """Score band risk, escalated by unresolved critical requirements."""

    def __init__(self, config_store: Optional[RulesConfigStore] = None):
        self._config_store = config_store or RulesConfigStore()

    def band(self, overall: int) -> RiskLevel:
        config = self._config_store.get_risk_config()
        if overall <= config.critical_at_or_below:
            return RiskLevel.CRITICAL
        if overall > config.low_above:
            return RiskLevel.LOW
        if overall > config.medium_above:
            return RiskLevel.MEDIUM
        return RiskLevel.HIGH

    @staticmethod
    def open_critical(applicable: list[RequirementDefinition], statuses: StatusMap) -> list[str]:
        return [
            req.id for req in applicable
            if req.severity == Severity.CRITICAL and status_of(req.id, statuses) in _OPEN_STATUSES
        ]

    def classify_risk(
        self,
        score: ScoreBreakdown,
        applicable: list[RequirementDefinition],
        statuses: StatusMap,
    ) -> RiskLevel:
        config = self._config_store.get_risk_config()
        level = self.band(score.overall)

        open_critical = self.open_critical(applicable, statuses)
        if len(open_critical) >= config.open_critical_escalation:
            escalated = max_risk(level, RiskLevel.HIGH)
            if escalated != level:
                logger.debug(
                    f"Risk escalated {level.value} -> {escalated.value}: "
                    f"{len(open_critical)} open critical requirements"
                )
            level = escalated

        return level
