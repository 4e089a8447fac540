"""
Cross-Framework Correlator — finds cross-reference rows touching the
articles of applicable requirements. Purely informational.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from space_compliance.catalogs.articles import article_numbers
from space_compliance.models.enums import Framework
from space_compliance.models.schemas import CrossReferenceMapping, RequirementDefinition

logger = logging.getLogger(__name__)


def find_cross_references(
    applicable: Iterable[RequirementDefinition],
    mappings: Iterable[CrossReferenceMapping],
    jurisdiction: Optional[str] = None,
) -> list[CrossReferenceMapping]:
    """
    Return mappings whose target articles overlap the applicable requirements
    of the mapping's target framework, in table order. When `jurisdiction`
    is given, only rows listing that country are kept.
    """
    articles_by_framework: dict[Framework, set[int]] = {}
    for req in applicable:
        articles_by_framework.setdefault(req.framework, set()).update(
            article_numbers(req.article_ref)
        )

    country = jurisdiction.upper() if jurisdiction else None
    matched: list[CrossReferenceMapping] = []
    for mapping in mappings:
        if country is not None and country not in mapping.countries:
            continue
        covered = articles_by_framework.get(mapping.target_framework)
        if not covered:
            continue
        targets: set[int] = set()
        for ref in mapping.target_articles:
            targets |= article_numbers(ref)
        if targets & covered:
            matched.append(mapping)

    logger.debug(f"Cross-references: {len(matched)} matched (jurisdiction={country})")
    return matched
