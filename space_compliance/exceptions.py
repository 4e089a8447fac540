"""
Engine error types.

Errors fail fast: the engine is pure computation, so nothing is retried.
"""

from __future__ import annotations


class ComplianceEngineError(Exception):
    """Base class for every error raised by the engine."""


class InvalidProfileError(ComplianceEngineError, ValueError):
    """The operator profile lacks a field required by the requested operation."""


class MalformedCatalogError(ComplianceEngineError):
    """A requirement catalog or framework definition failed validation at load time."""

    def __init__(self, catalog: str, problems: list[str]):
        self.catalog = catalog
        self.problems = problems
        super().__init__(f"Catalog '{catalog}' is malformed: " + "; ".join(problems))


class UnknownRequirementId(ComplianceEngineError, LookupError):
    """A status entry references a requirement id absent from the catalog.

    The scorer never raises this; it is used to describe orphaned entries
    in warnings and result payloads.
    """

    def __init__(self, requirement_id: str, framework: str = ""):
        self.requirement_id = requirement_id
        self.framework = framework
        where = f" in {framework}" if framework else ""
        super().__init__(f"Unknown requirement id '{requirement_id}'{where}")
