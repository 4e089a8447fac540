"""
Requirement catalogs — static, versioned, declarative data.

Consumers import ONLY from this package:
    from space_compliance.catalogs import get_catalog
"""

from .registry import (
    Catalog,
    build_catalog,
    catalog_versions,
    get_catalog,
    get_cross_references,
    get_jurisdictions,
)

__all__ = [
    "Catalog",
    "build_catalog",
    "catalog_versions",
    "get_catalog",
    "get_cross_references",
    "get_jurisdictions",
]
