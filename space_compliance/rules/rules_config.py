"""
Rules Config Store — tunable thresholds for scoring, risk, ranking and
timelines.

Defaults are the published engine behaviour. An optional JSON file
(settings.rules_config_path) may override any subset, keyed by rule type:

    {"risk": {"critical_at_or_below": 30}, "ranking": {"base_score": 40}}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from space_compliance.config import get_settings
from space_compliance.exceptions import ComplianceEngineError

logger = logging.getLogger(__name__)


# ── Config models ────────────────────────────────────────

class ScoringConfig(BaseModel):
    """Status contributions and score bands."""
    compliant_credit: float = 1.0
    partial_credit: float = 0.5
    empty_category_score: int = 100
    grade_bands: dict[str, int] = {"A": 90, "B": 75, "C": 60, "D": 40}  # minimum score, else F
    compliant_at_or_above: int = 80
    partial_at_or_above: int = 40


class RiskConfig(BaseModel):
    """Score-to-risk thresholds."""
    critical_at_or_below: int = 25
    low_above: int = 80
    medium_above: int = 60
    open_critical_escalation: int = 2  # open critical requirements forcing >= high


class RankingConfig(BaseModel):
    """Jurisdiction ranking adjustments (base 50, clamped 0-100)."""
    base_score: int = 50
    fast_months: int = 3
    fast_bonus: int = 15
    moderate_months: int = 5
    moderate_bonus: int = 8
    slow_penalty: int = 5
    english_bonus: int = 12
    english_penalty: int = 10
    newspace_startup_bonus: int = 10
    low_insurance_meur: float = 30
    low_insurance_bonus: int = 8
    high_insurance_meur: float = 60
    high_insurance_penalty: int = 5
    simple_complexity: int = 2
    simple_bonus: int = 10
    complex_complexity: int = 4
    complex_penalty: int = 5
    high_alignment: int = 90
    alignment_bonus: int = 5
    max_pros: int = 3
    max_cons: int = 2


class TimelineConfig(BaseModel):
    """Estimated months to compliance per framework outcome."""
    eu_light_months: int = 6
    eu_standard_months: int = 12
    nis2_essential_months: int = 9
    nis2_important_months: int = 6
    national_months: int = 3
    max_months: int = 24


class ActionConfig(BaseModel):
    """Caps on generated remediation actions."""
    max_framework_actions: int = 5
    per_framework_immediate: int = 2
    max_immediate_actions: int = 5
    max_national_recommendations: int = 6


_CONFIG_MODELS: dict[str, type[BaseModel]] = {
    "scoring": ScoringConfig,
    "risk": RiskConfig,
    "ranking": RankingConfig,
    "timeline": TimelineConfig,
    "actions": ActionConfig,
}


# ── Store class ──────────────────────────────────────────

class RulesConfigStore:
    """
    Loads rule configs from the optional override file, falling back to
    defaults. Cached after first load for the lifetime of the store.
    """

    def __init__(self, config_path: Optional[str] = None, overrides: Optional[dict[str, Any]] = None):
        self._config_path = get_settings().rules_config_path if config_path is None else config_path
        self._overrides = overrides
        self._cache: dict[str, Any] = {}

    def _read_overrides(self) -> dict[str, Any]:
        if self._overrides is not None:
            return self._overrides
        self._overrides = {}
        if not self._config_path:
            return self._overrides
        path = Path(self._config_path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ComplianceEngineError(f"Cannot read rules config {path}: {e}") from e
        if not isinstance(data, dict):
            raise ComplianceEngineError(f"Rules config {path} must contain a JSON object")
        unknown = set(data) - set(_CONFIG_MODELS)
        if unknown:
            logger.warning(f"Ignoring unknown rule types in {path}: {sorted(unknown)}")
        logger.info(f"Loaded rule overrides from {path}")
        self._overrides = data
        return self._overrides

    def _load_config(self, rule_type: str) -> BaseModel:
        if rule_type in self._cache:
            return self._cache[rule_type]

        model_cls = _CONFIG_MODELS[rule_type]
        raw = self._read_overrides().get(rule_type, {})
        try:
            config = model_cls(**raw)
        except ValidationError as e:
            raise ComplianceEngineError(f"Invalid '{rule_type}' rule config: {e}") from e
        self._cache[rule_type] = config
        return config

    # ── Typed getters ────────────────────────────────────

    def get_scoring_config(self) -> ScoringConfig:
        return self._load_config("scoring")  # type: ignore[return-value]

    def get_risk_config(self) -> RiskConfig:
        return self._load_config("risk")  # type: ignore[return-value]

    def get_ranking_config(self) -> RankingConfig:
        return self._load_config("ranking")  # type: ignore[return-value]

    def get_timeline_config(self) -> TimelineConfig:
        return self._load_config("timeline")  # type: ignore[return-value]

    def get_action_config(self) -> ActionConfig:
        return self._load_config("actions")  # type: ignore[return-value]
