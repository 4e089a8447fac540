"""
Compliance Scorer — weighted, per-category scoring of applicable requirements.

Contributions per status (ScoringConfig):
    compliant 1.0 · partial 0.5 · non_compliant / not_assessed 0.0
    not_applicable is removed from the denominator.

A category with nothing left to score counts as fully compliant. Category
shares are kept as exact fractions and summed before a single half-up
rounding, so a total of exactly x.5 always rounds up.
"""

from __future__ import annotations

import logging
import math
from fractions import Fraction
from typing import Optional

from space_compliance.models.enums import ComplianceStatus, Grade, OverallStatus
from space_compliance.models.schemas import (
    CategoryScore,
    FrameworkDefinition,
    RequirementDefinition,
    ScoreBreakdown,
)
from space_compliance.rules.rules_config import RulesConfigStore
from space_compliance.rules.status_snapshot import StatusMap, status_of

logger = logging.getLogger(__name__)

_HUNDRED = Fraction(100)


def exact(value: float | int) -> Fraction:
    """Exact fraction of a configured number (0.1 is 1/10, not its binary float)."""
    return Fraction(str(value))


def round_half_up(value: Fraction, places: int = 0) -> Fraction:
    scale = 10 ** places
    if value < 0:
        return -round_half_up(-value, places)
    return Fraction(math.floor(value * scale + Fraction(1, 2)), scale)


class ComplianceScorer:
    """Scores one framework's applicable requirements against a status snapshot."""

    def __init__(self, definition: FrameworkDefinition, config_store: Optional[RulesConfigStore] = None):
        self.definition = definition
        self._config_store = config_store or RulesConfigStore()

    def _grade(self, overall: int) -> Grade:
        bands = self._config_store.get_scoring_config().grade_bands
        for letter, minimum in sorted(bands.items(), key=lambda kv: kv[1], reverse=True):
            if overall >= minimum:
                return Grade(letter)
        return Grade.F

    def _status(self, overall: int) -> OverallStatus:
        config = self._config_store.get_scoring_config()
        if overall >= config.compliant_at_or_above:
            return OverallStatus.COMPLIANT
        if overall >= config.partial_at_or_above:
            return OverallStatus.PARTIAL
        return OverallStatus.NON_COMPLIANT

    def _category_score(
        self,
        category: str,
        requirements: list[RequirementDefinition],
        statuses: StatusMap,
    ) -> tuple[CategoryScore, Fraction]:
        config = self._config_store.get_scoring_config()
        counts = {status: 0 for status in ComplianceStatus}
        for req in requirements:
            counts[status_of(req.id, statuses)] += 1

        scored = len(requirements) - counts[ComplianceStatus.NOT_APPLICABLE]
        if scored == 0:
            raw = exact(config.empty_category_score)
        else:
            earned = (
                exact(config.compliant_credit) * counts[ComplianceStatus.COMPLIANT]
                + exact(config.partial_credit) * counts[ComplianceStatus.PARTIAL]
            )
            raw = earned / scored * _HUNDRED

        weight = exact(self.definition.category_weights[category])
        weighted = raw * weight
        result = CategoryScore(
            category=category,
            label=self.definition.category_labels.get(category, category),
            score=int(round_half_up(raw)),
            weight=float(weight),
            weighted_score=float(round_half_up(weighted, 2)),
            total=len(requirements),
            compliant=counts[ComplianceStatus.COMPLIANT],
            partial=counts[ComplianceStatus.PARTIAL],
            non_compliant=counts[ComplianceStatus.NON_COMPLIANT],
            not_assessed=counts[ComplianceStatus.NOT_ASSESSED],
            not_applicable=counts[ComplianceStatus.NOT_APPLICABLE],
        )
        return result, weighted

    def score(
        self,
        applicable: list[RequirementDefinition],
        statuses: StatusMap,
    ) -> ScoreBreakdown:
        """
        Compute the weighted score of `applicable` under `statuses`.
        Status entries for requirements outside `applicable` are ignored.
        """
        by_category: dict[str, list[RequirementDefinition]] = {
            category: [] for category in self.definition.category_weights
        }
        for req in applicable:
            if req.category not in by_category:
                logger.warning(
                    f"Requirement {req.id} has category '{req.category}' outside "
                    f"{self.definition.name}; not scored"
                )
                continue
            by_category[req.category].append(req)

        categories: list[CategoryScore] = []
        total = Fraction(0)
        for category, requirements in by_category.items():
            category_score, weighted = self._category_score(category, requirements, statuses)
            categories.append(category_score)
            total += weighted

        overall = int(round_half_up(total))
        overall = max(0, min(100, overall))
        breakdown = ScoreBreakdown(
            overall=overall,
            grade=self._grade(overall),
            status=self._status(overall),
            categories=categories,
        )
        logger.debug(
            f"{self.definition.name} score: {breakdown.overall} "
            f"(grade {breakdown.grade.value}, {breakdown.status.value})"
        )
        return breakdown
