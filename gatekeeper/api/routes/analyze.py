"""
Analyze Route — POST /api/analyze

Accepts a PR's changed files and diff, returns the merge-gating verdict.
"""

from __future__ import annotations

import logging
import secrets

from fastapi import APIRouter, Depends, Header, HTTPException

from gatekeeper.api.dependencies import get_decision_engine, get_settings
from gatekeeper.config import Settings
from gatekeeper.engine.decision import DecisionEngine
from gatekeeper.models.analysis_models import AnalyzeRequest, AnalyzeResponse

logger = logging.getLogger("gatekeeper.api.analyze")

router = APIRouter(prefix="/api")


def require_api_key(
    x_api_key: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> None:
    """Reject the request unless X-API-KEY matches the configured secret."""
    if not settings.api_key_required:
        return
    if x_api_key is None or not secrets.compare_digest(
        x_api_key.encode("utf-8"), settings.gatekeeper_api_key.encode("utf-8")
    ):
        logger.warning("Rejected /api/analyze call with missing or wrong X-API-KEY")
        raise HTTPException(status_code=401, detail="Invalid or missing API key")


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    dependencies=[Depends(require_api_key)],
)
async def analyze(
    request: AnalyzeRequest,
    engine: DecisionEngine = Depends(get_decision_engine),
):
    """Score, classify and explain a proposed change."""
    return await engine.analyze(request)
