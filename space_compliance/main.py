"""
Space Compliance Engine — Main Entry Point

Assess a profile directly (CLI):
    python -m space_compliance path/to/profile.json

Run as an API server:
    python -m space_compliance --serve
    # or: uvicorn space_compliance.api:app --reload --port 8000

Or import and run programmatically:
    from space_compliance.main import run
    result = run("path/to/profile.json")

The profile file holds an OperatorProfile object, optionally wrapped as
{"profile": {...}, "statuses": {"eu_space_act": {"trackability": "compliant"}}}.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

from space_compliance.config import get_settings
from space_compliance.models.profile import OperatorProfile
from space_compliance.models.schemas import UnifiedResult
from space_compliance.orchestration.aggregator import UnifiedAssessor, parse_status_maps
from space_compliance.utils.logger import setup_logging


def run(file_path: str) -> UnifiedResult:
    """Run the unified assessment for a profile JSON file and return the result."""
    setup_logging(get_settings().log_level)
    logger = logging.getLogger(__name__)

    payload = json.loads(Path(file_path).read_text(encoding="utf-8"))
    if "profile" in payload:
        profile = OperatorProfile.model_validate(payload["profile"])
        status_maps = parse_status_maps(payload.get("statuses"))
    else:
        profile = OperatorProfile.model_validate(payload)
        status_maps = {}

    logger.info("=" * 60)
    logger.info("  SPACE COMPLIANCE ASSESSMENT")
    logger.info(f"  Profile: {file_path}")
    logger.info("=" * 60)

    result = UnifiedAssessor().aggregate(profile, status_maps=status_maps)
    _print_summary(result)
    return result


def _print_summary(result: UnifiedResult) -> None:
    """Print a human-readable summary of the assessment."""
    logger = logging.getLogger(__name__)
    eu, nis2, national, overall = result.eu_space_act, result.nis2, result.national, result.overall

    logger.info("-" * 60)
    logger.info("  ASSESSMENT SUMMARY")
    logger.info("-" * 60)
    logger.info(f"  Company:        {result.company_name or 'N/A'}")
    if eu.applies and eu.score:
        logger.info(
            f"  EU Space Act:   {eu.applicable_count} requirements | {eu.regime.value} regime | "
            f"score {eu.score.overall} ({eu.score.grade.value}) | risk {eu.risk_level.value}"
        )
    else:
        logger.info(f"  EU Space Act:   not applicable ({eu.reason})")
    if nis2.applies and nis2.score:
        logger.info(
            f"  NIS2:           {nis2.applicable_count} requirements | "
            f"{nis2.entity_classification.value} | readiness {nis2.estimated_readiness}% | "
            f"risk {nis2.risk_level.value}"
        )
    else:
        logger.info(f"  NIS2:           not applicable ({nis2.reason})")
    if national.applies:
        logger.info(f"  National:       {national.recommendation_reason}")
        for candidate in national.candidates:
            logger.info(f"    {candidate.code.value}: {candidate.applicable_count} requirements | {candidate.reason}")
        for recommendation in national.recommendations:
            logger.info(f"    > {recommendation}")
    logger.info(f"  Overall risk:   {overall.overall_risk.value}")
    logger.info(f"  Timeline:       ~{overall.estimated_months} months")
    logger.info("-" * 60)
    for action in overall.immediate_actions:
        logger.info(f"    • {action}")


def serve(host: str = "", port: int = 0) -> None:
    """Start the FastAPI server."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level)
    host = host or settings.api_host
    port = port or settings.api_port
    logger = logging.getLogger(__name__)
    logger.info(f"Starting API server on {host}:{port}")
    uvicorn.run("space_compliance.api:app", host=host, port=port, reload=settings.debug)


if __name__ == "__main__":
    if "--serve" in sys.argv:
        serve()
    elif len(sys.argv) > 1:
        run(sys.argv[1])
    else:
        print("usage: python -m space_compliance <profile.json> | --serve")
        sys.exit(2)
