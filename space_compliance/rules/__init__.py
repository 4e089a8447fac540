"""Rule engines: applicability, scoring, risk, gaps, cross-references, ranking."""

from .applicability import resolve_applicable
from .cross_reference_rules import find_cross_references
from .gap_rules import GapAnalyzer
from .jurisdiction_rules import JurisdictionRanker
from .risk_rules import RiskClassifier
from .rules_config import RulesConfigStore
from .scoring_rules import ComplianceScorer

__all__ = [
    "resolve_applicable",
    "find_cross_references",
    "GapAnalyzer",
    "JurisdictionRanker",
    "RiskClassifier",
    "RulesConfigStore",
    "ComplianceScorer",
]
