"""
Health Check Route — GET /health
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from gatekeeper.api.dependencies import get_settings
from gatekeeper.config import Settings

router = APIRouter()


@router.get("/health")
async def health(settings: Settings = Depends(get_settings)):
    """Health check endpoint."""
    return {
        "status": "ok",
        "model": settings.gatekeeper_model,
        "enrichment": settings.enrichment_enabled,
        "version": "1.0.0",
    }
