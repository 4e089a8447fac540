from enum import Enum


# ── Operator profile ─────────────────────────────────────

class EntitySize(str, Enum):
    MICRO = "micro"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

class ActivityType(str, Enum):
    SPACECRAFT_OPERATOR = "spacecraft-operator"
    LAUNCH_OPERATOR = "launch-operator"
    LAUNCH_SITE_OPERATOR = "launch-site-operator"
    IN_SPACE_SERVICER = "in-space-servicer"
    COLLISION_AVOIDANCE_PROVIDER = "collision-avoidance-provider"
    DATA_PROVIDER = "data-provider"
    THIRD_COUNTRY_OPERATOR = "third-country-operator"

class OrbitRegime(str, Enum):
    LEO = "LEO"
    MEO = "MEO"
    GEO = "GEO"
    HEO = "HEO"
    SSO = "SSO"
    CISLUNAR = "cislunar"
    MULTIPLE = "multiple"

class ConstellationTier(str, Enum):
    SINGLE = "single"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    MEGA = "mega"

class Maneuverability(str, Enum):
    FULL = "full"
    LIMITED = "limited"
    NONE = "none"

class DeorbitStrategy(str, Enum):
    ACTIVE_DEORBIT = "active-deorbit"
    PASSIVE_DECAY = "passive-decay"
    GRAVEYARD_ORBIT = "graveyard-orbit"
    CONTRACTED_REMOVAL = "contracted-removal"

class JurisdictionCode(str, Enum):
    FR = "FR"
    UK = "UK"
    DE = "DE"
    LU = "LU"
    NL = "NL"
    BE = "BE"
    AT = "AT"
    DK = "DK"
    IT = "IT"
    NO = "NO"


# ── Catalogs ─────────────────────────────────────────────

class Framework(str, Enum):
    EU_SPACE_ACT = "eu_space_act"
    NIS2 = "nis2"
    NATIONAL = "national"
    US = "us"

class Severity(str, Enum):
    CRITICAL = "critical"
    MAJOR = "major"
    MINOR = "minor"

class Effort(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

class Relationship(str, Enum):
    SUPERSEDED = "superseded"
    COMPLEMENTARY = "complementary"
    PARALLEL = "parallel"
    GAP = "gap"


# ── Assessment results ───────────────────────────────────

class ComplianceStatus(str, Enum):
    NOT_ASSESSED = "not_assessed"
    COMPLIANT = "compliant"
    PARTIAL = "partial"
    NON_COMPLIANT = "non_compliant"
    NOT_APPLICABLE = "not_applicable"

class OverallStatus(str, Enum):
    COMPLIANT = "compliant"
    PARTIAL = "partial"
    NON_COMPLIANT = "non_compliant"

class Grade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

class Priority(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

class Regime(str, Enum):
    LIGHT = "light"
    STANDARD = "standard"
    EXEMPT = "exempt"

class EntityClassification(str, Enum):
    ESSENTIAL = "essential"
    IMPORTANT = "important"
    OUT_OF_SCOPE = "out_of_scope"


# Severity order helpers (most severe first)
RISK_ORDER: dict[RiskLevel, int] = {
    RiskLevel.LOW: 0,
    RiskLevel.MEDIUM: 1,
    RiskLevel.HIGH: 2,
    RiskLevel.CRITICAL: 3,
}

PRIORITY_ORDER: dict[Priority, int] = {
    Priority.CRITICAL: 0,
    Priority.HIGH: 1,
    Priority.MEDIUM: 2,
    Priority.LOW: 3,
}
