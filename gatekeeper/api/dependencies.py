"""
FastAPI Dependencies — Shared singletons injected via Depends().
"""

from __future__ import annotations

from functools import lru_cache

from gatekeeper.config import Settings, settings
from gatekeeper.engine.decision import DecisionEngine
from gatekeeper.llm.enrichment import EnrichmentProvider, get_enrichment_provider


def get_settings() -> Settings:
    """Application settings singleton."""
    return settings


@lru_cache
def get_enrichment() -> EnrichmentProvider:
    """Enrichment provider, selected once from configuration."""
    return get_enrichment_provider(get_settings())


@lru_cache
def get_decision_engine() -> DecisionEngine:
    """Shared decision engine singleton."""
    return DecisionEngine(enrichment=get_enrichment())
