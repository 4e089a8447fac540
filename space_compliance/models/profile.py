"""
Operator profile — the immutable input to every assessment.

Built once per request from user-supplied answers. The constellation tier is
always derived from the satellite count and never accepted as input.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from .enums import (
    ActivityType,
    ConstellationTier,
    DeorbitStrategy,
    EntitySize,
    JurisdictionCode,
    Maneuverability,
    OrbitRegime,
)


# Ordered (threshold, tier) pairs, largest first
TIER_THRESHOLDS: tuple[tuple[int, ConstellationTier], ...] = (
    (1000, ConstellationTier.MEGA),
    (100, ConstellationTier.LARGE),
    (10, ConstellationTier.MEDIUM),
    (2, ConstellationTier.SMALL),
)

# Smallest satellite count for each tier
TIER_MINIMUMS: dict[ConstellationTier, int] = {
    ConstellationTier.SINGLE: 0,
    ConstellationTier.SMALL: 2,
    ConstellationTier.MEDIUM: 10,
    ConstellationTier.LARGE: 100,
    ConstellationTier.MEGA: 1000,
}


def tier_for_count(satellite_count: Optional[int]) -> ConstellationTier:
    """Map a satellite count to its constellation tier (None counts as 0)."""
    count = satellite_count or 0
    for threshold, tier in TIER_THRESHOLDS:
        if count >= threshold:
            return tier
    return ConstellationTier.SINGLE


class CybersecurityPosture(BaseModel):
    """Self-declared cybersecurity measures. None means 'not answered'."""
    model_config = ConfigDict(frozen=True)

    has_cybersecurity_policy: Optional[bool] = None
    has_risk_management: Optional[bool] = None
    has_incident_response_plan: Optional[bool] = None
    has_business_continuity_plan: Optional[bool] = None
    has_supply_chain_security: Optional[bool] = None
    has_security_training: Optional[bool] = None
    has_encryption: Optional[bool] = None
    has_access_control: Optional[bool] = None
    has_vulnerability_management: Optional[bool] = None
    has_penetration_testing: Optional[bool] = None

    def answers(self) -> dict[str, Optional[bool]]:
        return {name: getattr(self, name) for name in type(self).model_fields}

    def compliant_count(self) -> int:
        return sum(1 for value in self.answers().values() if value is True)


class JurisdictionPreferences(BaseModel):
    model_config = ConfigDict(frozen=True)

    prefers_fast_processing: bool = False
    requires_english_process: bool = False
    is_startup: bool = False


class OperatorProfile(BaseModel):
    """Structured operator/mission answers used for applicability and gating."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    company_name: Optional[str] = None

    # ── Establishment & market ───────────────────────────
    establishment_country: Optional[str] = None  # ISO alpha-2, or "EU"
    entity_size: Optional[EntitySize] = None
    is_research_institution: bool = False
    is_defense_only: bool = False
    serves_eu_market: bool = False
    # Member states the entity provides services in
    member_state_count: int = Field(default=1, ge=1)
    serves_critical_infrastructure: bool = False
    is_essential_service_provider: bool = False

    # ── Mission ──────────────────────────────────────────
    activity_types: tuple[ActivityType, ...] = ()
    orbit_regime: Optional[OrbitRegime] = None
    altitude_km: Optional[float] = Field(default=None, ge=0)
    satellite_count: int = Field(default=0, ge=0)
    maneuverability: Optional[Maneuverability] = None
    has_propulsion: Optional[bool] = None
    has_passivation_capability: Optional[bool] = None
    mission_duration_years: Optional[float] = Field(default=None, ge=0)
    deorbit_strategy: Optional[DeorbitStrategy] = None
    has_debris_mitigation_plan: Optional[bool] = None
    insurance_coverage_meur: Optional[float] = Field(default=None, ge=0)

    # ── Cybersecurity ────────────────────────────────────
    cybersecurity: CybersecurityPosture = Field(default_factory=CybersecurityPosture)

    # ── Licensing ────────────────────────────────────────
    interested_jurisdictions: tuple[JurisdictionCode, ...] = ()
    preferences: JurisdictionPreferences = Field(default_factory=JurisdictionPreferences)

    @field_validator("establishment_country", mode="before")
    @classmethod
    def _normalize_country(cls, value):
        if isinstance(value, str):
            value = value.strip().upper()
            return value or None
        return value

    @field_validator("interested_jurisdictions", mode="before")
    @classmethod
    def _normalize_jurisdictions(cls, value):
        if isinstance(value, (list, tuple)):
            return tuple(v.strip().upper() if isinstance(v, str) else v for v in value)
        return value

    @field_validator("satellite_count", mode="before")
    @classmethod
    def _none_is_zero(cls, value):
        return 0 if value is None else value

    @computed_field  # type: ignore[prop-decorator]
    @property
    def constellation_tier(self) -> ConstellationTier:
        return tier_for_count(self.satellite_count)

    def answer(self, path: str) -> Optional[bool]:
        """Resolve a dotted answer path such as 'cybersecurity.has_encryption'."""
        value: object = self
        for part in path.split("."):
            value = getattr(value, part)
        return value if isinstance(value, bool) else None


def has_answer_path(path: str) -> bool:
    """True when `path` names a boolean answer on OperatorProfile."""
    model: type[BaseModel] = OperatorProfile
    parts = path.split(".")
    for index, part in enumerate(parts):
        field = model.model_fields.get(part)
        if field is None:
            return False
        annotation = field.annotation
        if index < len(parts) - 1:
            if not (isinstance(annotation, type) and issubclass(annotation, BaseModel)):
                return False
            model = annotation
        else:
            return annotation in (bool, Optional[bool])
    return False
