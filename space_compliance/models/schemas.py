"""
Data schemas for catalog entries and assessment results.
Each result schema is a deterministic derivation of a profile, a catalog
and a status snapshot.
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from .enums import (
    ActivityType,
    ComplianceStatus,
    ConstellationTier,
    Effort,
    EntityClassification,
    Framework,
    Grade,
    JurisdictionCode,
    OrbitRegime,
    OverallStatus,
    Priority,
    Regime,
    Relationship,
    RiskLevel,
    Severity,
)


# ── Catalog entries ──────────────────────────────────────


class ApplicabilityConstraints(BaseModel):
    """Declarative constraints; an absent constraint means 'no restriction'."""
    model_config = ConfigDict(frozen=True)

    orbit_types: Optional[tuple[OrbitRegime, ...]] = None
    constellation_tiers: Optional[tuple[ConstellationTier, ...]] = None
    min_satellites: Optional[int] = Field(default=None, ge=0)
    requires_propulsion: Optional[bool] = None
    requires_maneuverability: Optional[bool] = None
    activity_types: Optional[tuple[ActivityType, ...]] = None

    def is_unconstrained(self) -> bool:
        return all(value in (None, False) for value in self.model_dump().values())


class RequirementDefinition(BaseModel):
    """One obligation in a framework's requirement catalog."""
    model_config = ConfigDict(frozen=True)

    id: str
    framework: Framework
    article_ref: str
    title: str
    description: str = ""
    category: str
    applicability: ApplicabilityConstraints = Field(default_factory=ApplicabilityConstraints)
    severity: Severity
    effort: Effort = Effort.MEDIUM
    evidence_required: tuple[str, ...] = ()
    tips: tuple[str, ...] = ()
    iso_reference: Optional[str] = None
    # Dotted path to a boolean profile answer that seeds the status
    profile_answer: Optional[str] = None
    # National licensing requirements belong to exactly one jurisdiction
    jurisdiction: Optional[JurisdictionCode] = None


class FrameworkDefinition(BaseModel):
    """Fixed category set and weights for a scored framework."""
    model_config = ConfigDict(frozen=True)

    framework: Framework
    name: str
    category_weights: dict[str, float]
    category_labels: dict[str, str] = {}


class RequirementStatus(BaseModel):
    """Caller-owned status record for one requirement."""
    status: ComplianceStatus = ComplianceStatus.NOT_ASSESSED
    notes: Optional[str] = None
    evidence_notes: Optional[str] = None
    target_date: Optional[str] = None


class CrossReferenceMapping(BaseModel):
    """Links a source regime's area to target-framework articles."""
    model_config = ConfigDict(frozen=True)

    id: str
    source_framework: Framework
    source_name: str
    source_area: str
    target_framework: Framework = Framework.EU_SPACE_ACT
    target_articles: tuple[str, ...]
    relationship: Relationship
    rationale: str
    transition_notes: str = ""
    countries: tuple[str, ...] = ()


class JurisdictionProfile(BaseModel):
    """Static licensing characteristics of a national regime."""
    model_config = ConfigDict(frozen=True)

    code: JurisdictionCode
    name: str
    law_name: str
    authority: str
    processing_months: int
    english_process: bool
    insurance_min_meur: float
    complexity: int = Field(ge=1, le=5)
    newspace_friendly: bool
    eu_alignment: int = Field(ge=0, le=100)
    year_enacted: Optional[int] = None
    mandatory_insurance: bool = True
    # Activities the national law licenses (None = every licensed activity)
    covered_activities: Optional[tuple[ActivityType, ...]] = None
    coverage_note: str = ""


# ── Scoring ──────────────────────────────────────────────


class CategoryScore(BaseModel):
    category: str
    label: str = ""
    score: int = 100  # 0-100
    weight: float = 0.0
    weighted_score: float = 0.0
    total: int = 0
    compliant: int = 0
    partial: int = 0
    non_compliant: int = 0
    not_assessed: int = 0
    not_applicable: int = 0


class ScoreBreakdown(BaseModel):
    overall: int = 0  # 0-100
    grade: Grade = Grade.F
    status: OverallStatus = OverallStatus.NON_COMPLIANT
    categories: list[CategoryScore] = []


class GapRecord(BaseModel):
    requirement_id: str
    article_ref: str
    title: str
    category: str
    severity: Severity
    current_status: ComplianceStatus
    required_status: ComplianceStatus = ComplianceStatus.COMPLIANT
    priority: Priority
    estimated_effort: Effort


class JurisdictionScore(BaseModel):
    code: JurisdictionCode
    name: str
    score: int  # 0-100
    pros: list[str] = []
    cons: list[str] = []


# ── Unified assessment ───────────────────────────────────


class FrameworkResult(BaseModel):
    """Common per-framework outcome; gated-off frameworks keep defaults."""
    framework: Framework
    applies: bool = False
    reason: str = ""
    applicable_count: int = 0
    applicable_requirement_ids: list[str] = []
    score: Optional[ScoreBreakdown] = None
    risk_level: Optional[RiskLevel] = None
    gaps: list[GapRecord] = []
    cross_references: list[CrossReferenceMapping] = []
    priority_actions: list[str] = []
    orphaned_status_ids: list[str] = []


class KeyDeadline(BaseModel):
    date: str  # ISO date
    description: str


class EUSpaceActResult(FrameworkResult):
    framework: Framework = Framework.EU_SPACE_ACT
    regime: Regime = Regime.EXEMPT
    operator_types: list[str] = []
    key_deadlines: list[KeyDeadline] = []


class ReportingStage(BaseModel):
    stage: str
    deadline: str
    description: str


class NIS2Result(FrameworkResult):
    framework: Framework = Framework.NIS2
    entity_classification: EntityClassification = EntityClassification.OUT_OF_SCOPE
    compliance_gap_count: int = 0
    estimated_readiness: int = 0  # percent of posture measures in place
    penalty: str = ""
    incident_reporting: list[ReportingStage] = []
    supervisory_authority: str = ""


class NationalCandidateResult(FrameworkResult):
    """One compared jurisdiction run through the national licensing pipeline."""
    framework: Framework = Framework.NATIONAL
    code: JurisdictionCode
    name: str
    law_name: str = ""
    authority: str = ""


class NationalLawResult(BaseModel):
    framework: Framework = Framework.NATIONAL
    applies: bool = False
    reason: str = ""
    rankings: list[JurisdictionScore] = []
    recommended: Optional[JurisdictionCode] = None
    recommendation_reason: str = ""
    candidates: list[NationalCandidateResult] = []
    recommendations: list[str] = []
    # Requirement count of the recommended jurisdiction
    applicable_count: int = 0
    orphaned_status_ids: list[str] = []


class OverallSummary(BaseModel):
    total_requirements: int = 0
    applicable_frameworks: list[Framework] = []
    overall_risk: RiskLevel = RiskLevel.LOW
    estimated_months: int = 0
    immediate_actions: list[str] = []


class UnifiedResult(BaseModel):
    company_name: Optional[str] = None
    eu_space_act: EUSpaceActResult
    nis2: NIS2Result
    national: NationalLawResult
    overall: OverallSummary
    catalog_versions: dict[str, str] = {}
