"""
API routes — thin HTTP layer that delegates to the engine.

Routes:
  GET  /health                                   → API health check
  POST /api/assessment/unified                   → Full multi-framework assessment
  POST /api/assessment/{framework}/requirements  → Applicable requirements for a profile
  POST /api/assessment/{framework}/score         → Score, risk and gaps for one framework
  POST /api/jurisdictions/rank                   → Rank candidate licensing jurisdictions
  GET  /api/jurisdictions                        → Codes of the supported jurisdictions
  GET  /api/cross-references                     → Cross-reference table (optional country filter)
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from space_compliance.catalogs import catalog_versions, get_catalog, get_cross_references, get_jurisdictions
from space_compliance.exceptions import InvalidProfileError
from space_compliance.models.enums import Framework, JurisdictionCode, RiskLevel
from space_compliance.models.profile import JurisdictionPreferences, OperatorProfile
from space_compliance.models.schemas import (
    CrossReferenceMapping,
    GapRecord,
    JurisdictionScore,
    RequirementDefinition,
    ScoreBreakdown,
    UnifiedResult,
)
from space_compliance.orchestration.aggregator import UnifiedAssessor, parse_status_maps
from space_compliance.rules.applicability import resolve_applicable
from space_compliance.rules.gap_rules import GapAnalyzer
from space_compliance.rules.jurisdiction_rules import JurisdictionRanker
from space_compliance.rules.risk_rules import RiskClassifier
from space_compliance.rules.scoring_rules import ComplianceScorer
from space_compliance.rules.status_snapshot import build_snapshot, find_orphaned, normalize_statuses

logger = logging.getLogger(__name__)

# ── Routers ──────────────────────────────────────────────
health_router = APIRouter()
assessment_router = APIRouter()
jurisdiction_router = APIRouter()

# National requirements are assessed per jurisdiction through /unified
_SCORED_FRAMEWORKS = (Framework.EU_SPACE_ACT, Framework.NIS2)


# ── Request / response schemas ───────────────────────────
class UnifiedRequest(BaseModel):
    profile: OperatorProfile
    # framework -> requirement id -> status (string or record)
    statuses: dict[str, dict[str, Any]] = {}


class ProfileRequest(BaseModel):
    profile: OperatorProfile


class FrameworkScoreRequest(BaseModel):
    profile: OperatorProfile
    statuses: dict[str, Any] = {}


class FrameworkScoreResponse(BaseModel):
    framework: Framework
    applicable_count: int
    score: ScoreBreakdown
    risk_level: RiskLevel
    gaps: list[GapRecord]
    orphaned_status_ids: list[str] = []


class RankRequest(BaseModel):
    candidates: list[str]
    preferences: JurisdictionPreferences = JurisdictionPreferences()
    insurance_coverage_meur: Optional[float] = None


def _scored_framework(framework: str) -> Framework:
    try:
        resolved = Framework(framework)
    except ValueError:
        resolved = None
    if resolved not in _SCORED_FRAMEWORKS:
        raise HTTPException(status_code=404, detail=f"Unknown framework '{framework}'")
    return resolved


# ── Health ───────────────────────────────────────────────

@health_router.get("/health")
async def health_check():
    return {
        "status": "ok",
        "catalogs": catalog_versions(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ── Assessments ──────────────────────────────────────────

@assessment_router.post("/unified", response_model=UnifiedResult)
async def unified_assessment(request: UnifiedRequest):
    try:
        status_maps = parse_status_maps(request.statuses)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"Invalid statuses: {e}")

    try:
        return UnifiedAssessor().aggregate(request.profile, status_maps=status_maps)
    except InvalidProfileError as e:
        raise HTTPException(status_code=422, detail=str(e))


@assessment_router.post("/{framework}/requirements", response_model=list[RequirementDefinition])
async def applicable_requirements(framework: str, request: ProfileRequest):
    catalog = get_catalog(_scored_framework(framework))
    return resolve_applicable(request.profile, catalog.requirements)


@assessment_router.post("/{framework}/score", response_model=FrameworkScoreResponse)
async def score_framework(framework: str, request: FrameworkScoreRequest):
    catalog = get_catalog(_scored_framework(framework))
    try:
        recorded = normalize_statuses(request.statuses)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"Invalid statuses: {e}")

    orphaned = find_orphaned(recorded, catalog.ids(), catalog.framework.value)
    applicable = resolve_applicable(request.profile, catalog.requirements)
    snapshot = build_snapshot(request.profile, applicable, recorded)
    score = ComplianceScorer(catalog.definition).score(applicable, snapshot)

    return FrameworkScoreResponse(
        framework=catalog.framework,
        applicable_count=len(applicable),
        score=score,
        risk_level=RiskClassifier().classify_risk(score, applicable, snapshot),
        gaps=GapAnalyzer().analyze_gaps(applicable, snapshot),
        orphaned_status_ids=orphaned,
    )


# ── Jurisdictions & cross-references ─────────────────────

@jurisdiction_router.post("/jurisdictions/rank", response_model=list[JurisdictionScore])
async def rank_jurisdictions(request: RankRequest):
    try:
        return JurisdictionRanker().rank_jurisdictions(
            request.candidates,
            request.preferences,
            get_jurisdictions(),
            request.insurance_coverage_meur,
        )
    except InvalidProfileError as e:
        raise HTTPException(status_code=422, detail=str(e))


@jurisdiction_router.get("/jurisdictions", response_model=list[JurisdictionCode])
async def list_jurisdictions():
    return list(get_jurisdictions())


@jurisdiction_router.get("/cross-references", response_model=list[CrossReferenceMapping])
async def cross_references(jurisdiction: Optional[str] = None):
    rows = get_cross_references()
    if jurisdiction:
        country = jurisdiction.upper()
        rows = tuple(row for row in rows if country in row.countries)
    return list(rows)
