"""
FastAPI application factory and API package.

Run with:
    uvicorn space_compliance.api:app --reload --port 8000

Or via main.py:
    python -m space_compliance --serve
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from space_compliance import __version__
from space_compliance.config import get_settings
from space_compliance.api.routes import assessment_router, health_router, jurisdiction_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Application factory — create and configure the FastAPI instance."""
    settings = get_settings()

    application = FastAPI(
        title=f"{settings.app_name} API",
        description="Regulatory applicability, scoring and gap analysis for space operators",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # CORS — allow any dashboard origin (adjust in production)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(health_router, tags=["Health"])
    application.include_router(assessment_router, prefix="/api/assessment", tags=["Assessment"])
    application.include_router(jurisdiction_router, prefix="/api", tags=["Jurisdictions"])

    logger.info(f"Created {settings.app_name} API")
    return application


# Module-level instance for `uvicorn space_compliance.api:app`
app = create_app()
