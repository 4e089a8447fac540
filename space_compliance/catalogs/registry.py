"""
Catalog registry — validates the declarative catalog data once and hands out
immutable, shared models.

Every structural problem is collected and reported together as a
MalformedCatalogError at load time, so no invalid catalog ever reaches the
resolver or scorer.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from functools import lru_cache
from typing import Any, Iterable, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from space_compliance.exceptions import MalformedCatalogError
from space_compliance.models.enums import ConstellationTier, Framework, JurisdictionCode, OrbitRegime
from space_compliance.models.profile import TIER_MINIMUMS, has_answer_path
from space_compliance.models.schemas import (
    CrossReferenceMapping,
    FrameworkDefinition,
    JurisdictionProfile,
    RequirementDefinition,
)
from space_compliance.utils.hashing import fingerprint

from . import cross_references, eu_space_act, jurisdictions, national_laws, nis2
from .articles import article_numbers

logger = logging.getLogger(__name__)

# Largest satellite count each tier admits (None = unbounded)
_TIER_MAXIMUMS: dict[ConstellationTier, Optional[int]] = {
    ConstellationTier.SINGLE: TIER_MINIMUMS[ConstellationTier.SMALL] - 1,
    ConstellationTier.SMALL: TIER_MINIMUMS[ConstellationTier.MEDIUM] - 1,
    ConstellationTier.MEDIUM: TIER_MINIMUMS[ConstellationTier.LARGE] - 1,
    ConstellationTier.LARGE: TIER_MINIMUMS[ConstellationTier.MEGA] - 1,
    ConstellationTier.MEGA: None,
}

_SOURCES: dict[Framework, Any] = {
    Framework.EU_SPACE_ACT: eu_space_act,
    Framework.NIS2: nis2,
    Framework.NATIONAL: national_laws,
}


class Catalog(BaseModel):
    """A validated framework catalog: definition, ordered requirements, version."""
    model_config = ConfigDict(frozen=True)

    definition: FrameworkDefinition
    requirements: tuple[RequirementDefinition, ...]
    version: str

    @property
    def framework(self) -> Framework:
        return self.definition.framework

    def ids(self) -> frozenset[str]:
        return frozenset(req.id for req in self.requirements)


# ── Validation ───────────────────────────────────────────


def _validation_messages(prefix: str, exc: ValidationError) -> list[str]:
    return [
        f"{prefix}: {'.'.join(str(p) for p in err['loc'])} {err['msg']}"
        for err in exc.errors()
    ]


def _check_weights(definition: FrameworkDefinition) -> list[str]:
    problems: list[str] = []
    total = sum(Decimal(str(w)) for w in definition.category_weights.values())
    if total != Decimal("1"):
        problems.append(f"category weights sum to {total}, expected 1.0")
    for category, weight in definition.category_weights.items():
        if weight < 0:
            problems.append(f"category '{category}' has negative weight {weight}")
    return problems


def _check_requirement(req: RequirementDefinition, definition: FrameworkDefinition) -> list[str]:
    problems: list[str] = []
    where = f"requirement '{req.id}'"
    constraints = req.applicability

    if req.category not in definition.category_weights:
        problems.append(f"{where}: unknown category '{req.category}'")
    if not article_numbers(req.article_ref):
        problems.append(f"{where}: unparseable article reference '{req.article_ref}'")

    for name in ("orbit_types", "constellation_tiers", "activity_types"):
        values = getattr(constraints, name)
        if values is not None and len(values) == 0:
            problems.append(f"{where}: empty '{name}' constraint (omit it instead)")

    if constraints.orbit_types and OrbitRegime.MULTIPLE in constraints.orbit_types:
        problems.append(f"{where}: 'multiple' is a profile value, not a catalog orbit type")

    if constraints.constellation_tiers and constraints.min_satellites is not None:
        maximums = [_TIER_MAXIMUMS[t] for t in constraints.constellation_tiers]
        if None not in maximums and constraints.min_satellites > max(maximums):
            problems.append(
                f"{where}: min_satellites={constraints.min_satellites} excludes every "
                f"listed constellation tier"
            )

    if req.profile_answer is not None and not has_answer_path(req.profile_answer):
        problems.append(f"{where}: profile_answer '{req.profile_answer}' is not a boolean answer")

    if definition.framework == Framework.NATIONAL and req.jurisdiction is None:
        problems.append(f"{where}: national requirement without a jurisdiction")
    elif definition.framework != Framework.NATIONAL and req.jurisdiction is not None:
        problems.append(f"{where}: only national requirements carry a jurisdiction")

    return problems


def build_catalog(
    framework_data: dict[str, Any],
    requirement_data: Iterable[dict[str, Any]],
) -> Catalog:
    """Validate raw catalog data and return an immutable Catalog."""
    name = str(framework_data.get("name") or framework_data.get("framework") or "unknown")
    try:
        definition = FrameworkDefinition.model_validate(framework_data)
    except ValidationError as exc:
        raise MalformedCatalogError(name, _validation_messages("framework", exc)) from exc

    problems = _check_weights(definition)
    requirements: list[RequirementDefinition] = []
    seen: set[str] = set()

    for index, raw in enumerate(requirement_data):
        entry = {"framework": definition.framework.value, **raw}
        try:
            req = RequirementDefinition.model_validate(entry)
        except ValidationError as exc:
            problems.extend(_validation_messages(f"entry #{index} ({raw.get('id', '?')})", exc))
            continue
        if req.framework != definition.framework:
            problems.append(f"requirement '{req.id}': belongs to {req.framework.value}")
        if req.id in seen:
            problems.append(f"duplicate requirement id '{req.id}'")
        seen.add(req.id)
        problems.extend(_check_requirement(req, definition))
        requirements.append(req)

    if problems:
        raise MalformedCatalogError(name, problems)

    version = fingerprint({
        "framework": definition.model_dump(mode="json"),
        "requirements": [r.model_dump(mode="json") for r in requirements],
    })
    logger.debug(f"Loaded {name} catalog: {len(requirements)} requirements (v{version})")
    return Catalog(definition=definition, requirements=tuple(requirements), version=version)


def build_cross_references(rows: Iterable[dict[str, Any]]) -> tuple[CrossReferenceMapping, ...]:
    problems: list[str] = []
    mappings: list[CrossReferenceMapping] = []
    seen: set[str] = set()
    for index, raw in enumerate(rows):
        try:
            mapping = CrossReferenceMapping.model_validate(raw)
        except ValidationError as exc:
            problems.extend(_validation_messages(f"mapping #{index}", exc))
            continue
        if mapping.id in seen:
            problems.append(f"duplicate mapping id '{mapping.id}'")
        seen.add(mapping.id)
        if not mapping.target_articles:
            problems.append(f"mapping '{mapping.id}': no target articles")
        for ref in mapping.target_articles:
            if not article_numbers(ref):
                problems.append(f"mapping '{mapping.id}': unparseable article reference '{ref}'")
        mappings.append(mapping)
    if problems:
        raise MalformedCatalogError("cross_references", problems)
    return tuple(mappings)


def build_jurisdictions(rows: Iterable[dict[str, Any]]) -> dict[JurisdictionCode, JurisdictionProfile]:
    problems: list[str] = []
    table: dict[JurisdictionCode, JurisdictionProfile] = {}
    for index, raw in enumerate(rows):
        try:
            profile = JurisdictionProfile.model_validate(raw)
        except ValidationError as exc:
            problems.extend(_validation_messages(f"jurisdiction #{index}", exc))
            continue
        if profile.code in table:
            problems.append(f"duplicate jurisdiction '{profile.code.value}'")
        table[profile.code] = profile
    if problems:
        raise MalformedCatalogError("jurisdictions", problems)
    return table


# ── Cached accessors ─────────────────────────────────────


@lru_cache(maxsize=None)
def get_catalog(framework: Framework) -> Catalog:
    """Return the validated built-in catalog for a framework with requirements."""
    source = _SOURCES.get(Framework(framework))
    if source is None:
        raise KeyError(f"No requirement catalog for framework '{framework}'")
    return build_catalog(source.FRAMEWORK, source.REQUIREMENTS)


@lru_cache(maxsize=None)
def get_cross_references() -> tuple[CrossReferenceMapping, ...]:
    return build_cross_references(cross_references.MAPPINGS)


@lru_cache(maxsize=None)
def get_jurisdictions() -> dict[JurisdictionCode, JurisdictionProfile]:
    # Callers must not mutate the shared mapping
    return build_jurisdictions(jurisdictions.JURISDICTIONS)


def catalog_versions() -> dict[str, str]:
    """Version fingerprint of every built-in catalog."""
    versions = {fw.value: get_catalog(fw).version for fw in _SOURCES}
    versions["cross_references"] = fingerprint(
        [m.model_dump(mode="json") for m in get_cross_references()]
    )
    versions["jurisdictions"] = fingerprint(
        [j.model_dump(mode="json") for j in get_jurisdictions().values()]
    )
    return versions
