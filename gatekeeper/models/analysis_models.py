"""
Analyze Request/Response Models — API contract schemas.

These are the public-facing Pydantic models used by the /api/analyze endpoint.
Field aliases keep the camelCase wire format the webhook relay and the
dashboard already speak.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gatekeeper.models.decision_models import Decision, RiskLevel, SuggestionCode


class AnalyzeRequest(BaseModel):
    """A proposed change: who opened it, which files it touches, and its diff."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    pr_number: str = Field(default="unknown", alias="prNumber")
    author: str = "unknown"
    repository: str | None = Field(
        default=None, description="owner/name, informational only"
    )
    changed_files: list[str] = Field(default_factory=list, alias="changedFiles")
    diff: str = ""

    @field_validator("pr_number", "author", mode="before")
    @classmethod
    def coerce_identifier(cls, value):
        if value is None:
            return "unknown"
        return str(value)

    @field_validator("changed_files", mode="before")
    @classmethod
    def coerce_files(cls, value):
        return [] if value is None else value

    @field_validator("diff", mode="before")
    @classmethod
    def coerce_diff(cls, value):
        return "" if value is None else value


class AnalyzeResponse(BaseModel):
    """Merge-gating verdict for one change request."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    pr_number: str = Field(..., alias="prNumber")
    risk_score: float = Field(..., ge=0.0, le=1.0, alias="riskScore")
    risk_level: RiskLevel = Field(..., alias="riskLevel")
    decision: Decision
    pr_status: str = Field(..., alias="prStatus")
    missing_tests: list[str] = Field(default_factory=list, alias="missingTests")
    suggested_tests: list[str] = Field(default_factory=list, alias="suggestedTests")
    summary: str = ""
    explanation: str = ""
    suggestion_code: SuggestionCode = Field(..., alias="suggestionCode")
    spelling_suggestions: list[str] = Field(
        default_factory=list, alias="spellingSuggestions", max_length=5
    )
    groq_suggestion: str | None = Field(default=None, alias="groqSuggestion")
    error_message: str | None = Field(default=None, alias="errorMessage")
    analysis_timestamp: int = Field(
        ..., alias="analysisTimestamp", description="Milliseconds since epoch"
    )
