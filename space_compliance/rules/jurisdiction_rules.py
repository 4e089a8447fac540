"""
Jurisdiction Rules — ranks candidate licensing jurisdictions against the
operator's preferences.

Every candidate starts at the base score; preference-driven adjustments add
or subtract points and record human-readable pros/cons. Scores are clamped
to 0-100 and ties keep the candidate order given by the caller.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional

from space_compliance.exceptions import InvalidProfileError
from space_compliance.models.enums import JurisdictionCode
from space_compliance.models.profile import JurisdictionPreferences
from space_compliance.models.schemas import JurisdictionProfile, JurisdictionScore
from space_compliance.rules.rules_config import RulesConfigStore

logger = logging.getLogger(__name__)


def _format_meur(value: float) -> str:
    return f"€{value:g}M"


class JurisdictionRanker:

    def __init__(self, config_store: Optional[RulesConfigStore] = None):
        self._config_store = config_store or RulesConfigStore()

    def score_jurisdiction(
        self,
        jurisdiction: JurisdictionProfile,
        preferences: JurisdictionPreferences,
        insurance_coverage_meur: Optional[float] = None,
    ) -> JurisdictionScore:
        config = self._config_store.get_ranking_config()
        score = config.base_score
        pros: list[str] = []
        cons: list[str] = []

        # ── Processing time ──────────────────────────────
        if preferences.prefers_fast_processing:
            months = jurisdiction.processing_months
            if months <= config.fast_months:
                score += config.fast_bonus
                pros.append(f"Fast processing (≤{config.fast_months} months)")
            elif months <= config.moderate_months:
                score += config.moderate_bonus
            else:
                score -= config.slow_penalty
                cons.append(f"Longer processing time ({months} months)")

        # ── Language ─────────────────────────────────────
        if preferences.requires_english_process:
            if jurisdiction.english_process:
                score += config.english_bonus
                pros.append("English-language process available")
            else:
                score -= config.english_penalty
                cons.append("Local language required")

        # ── NewSpace friendliness ────────────────────────
        if preferences.is_startup and jurisdiction.newspace_friendly:
            score += config.newspace_startup_bonus
            pros.append("NewSpace-friendly regime")

        # ── Insurance ────────────────────────────────────
        minimum = jurisdiction.insurance_min_meur
        if minimum <= config.low_insurance_meur:
            score += config.low_insurance_bonus
            pros.append(f"Lower insurance minimum ({_format_meur(minimum)})")
        elif minimum >= config.high_insurance_meur:
            covered = insurance_coverage_meur is not None and insurance_coverage_meur >= minimum
            if not covered:
                score -= config.high_insurance_penalty
                cons.append(f"High insurance requirement ({_format_meur(minimum)})")

        # ── Regulatory complexity ────────────────────────
        if jurisdiction.complexity <= config.simple_complexity:
            score += config.simple_bonus
            pros.append("Streamlined licensing process")
        elif jurisdiction.complexity >= config.complex_complexity:
            score -= config.complex_penalty
            cons.append("Complex regulatory requirements")

        # ── EU alignment ─────────────────────────────────
        if jurisdiction.eu_alignment >= config.high_alignment:
            score += config.alignment_bonus
            pros.append("High EU Space Act alignment")

        return JurisdictionScore(
            code=jurisdiction.code,
            name=jurisdiction.name,
            score=max(0, min(100, score)),
            pros=pros[: config.max_pros],
            cons=cons[: config.max_cons],
        )

    def rank_jurisdictions(
        self,
        candidates: Iterable[JurisdictionCode | str],
        preferences: JurisdictionPreferences,
        jurisdiction_data: Mapping[JurisdictionCode, JurisdictionProfile],
        insurance_coverage_meur: Optional[float] = None,
    ) -> list[JurisdictionScore]:
        """Score each distinct candidate and return them best first."""
        ordered: list[JurisdictionCode] = []
        unknown: list[str] = []
        for candidate in candidates:
            try:
                code = JurisdictionCode(str(getattr(candidate, "value", candidate)).upper())
            except ValueError:
                unknown.append(str(candidate))
                continue
            if code not in jurisdiction_data:
                unknown.append(code.value)
            elif code not in ordered:
                ordered.append(code)

        if unknown:
            raise InvalidProfileError(f"Unknown jurisdiction code(s): {', '.join(unknown)}")

        scores = [
            self.score_jurisdiction(jurisdiction_data[code], preferences, insurance_coverage_meur)
            for code in ordered
        ]
        # Stable: equal scores keep candidate order
        ranked = sorted(scores, key=lambda s: s.score, reverse=True)
        logger.debug(
            "Jurisdiction ranking: " + ", ".join(f"{s.code.value}={s.score}" for s in ranked)
        )
        return ranked


def recommendation_reason(ranked: list[JurisdictionScore]) -> str:
    if not ranked:
        return "No jurisdictions selected for comparison"
    best = ranked[0]
    return f"{best.name} scores highest ({best.score}/100) based on your requirements"
