"""
Decision Data Models — Merge verdicts, risk levels, and the suggestion-code taxonomy.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Decision(str, Enum):
    ALLOW = "ALLOW"
    WARN = "WARN"
    BLOCK = "BLOCK"


class RiskLevel(str, Enum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    MINIMAL = "MINIMAL"


class SuggestionCode(str, Enum):
    """
    Closed taxonomy of UI categories.

    The prefix names the decision bucket the code belongs to. The dashboard
    picks color and urgency from it (BLOCK red, WARN orange, ALLOW green).
    """

    BLOCK_CRITICAL_SECURITY = "BLOCK_CRITICAL_SECURITY"
    BLOCK_CREDENTIAL_EXPOSURE = "BLOCK_CREDENTIAL_EXPOSURE"
    BLOCK_DANGEROUS_EXEC = "BLOCK_DANGEROUS_EXEC"
    BLOCK_HIGH_SECURITY_RISK = "BLOCK_HIGH_SECURITY_RISK"
    BLOCK_DANGEROUS_OPERATIONS = "BLOCK_DANGEROUS_OPERATIONS"

    WARN_CONFIG_CHANGES_REVIEW = "WARN_CONFIG_CHANGES_REVIEW"
    WARN_MODERATE_RISK_REVIEW = "WARN_MODERATE_RISK_REVIEW"
    WARN_BUILD_CONFIG_CHANGES = "WARN_BUILD_CONFIG_CHANGES"
    WARN_ENHANCED_TESTING_NEEDED = "WARN_ENHANCED_TESTING_NEEDED"
    WARN_SPELLING_ERRORS = "WARN_SPELLING_ERRORS"

    ALLOW_WITH_TESTING_REQUIRED = "ALLOW_WITH_TESTING_REQUIRED"
    ALLOW_LOW_RISK_SAFE = "ALLOW_LOW_RISK_SAFE"

    @property
    def bucket(self) -> Decision:
        """Decision bucket named by the code's prefix."""
        return Decision(self.value.split("_", 1)[0])

    @classmethod
    def for_decision(cls, decision: Decision) -> list[SuggestionCode]:
        """Codes a classifier may emit for a decision (spelling override excluded)."""
        return [
            code
            for code in cls
            if code.bucket == decision and code is not cls.WARN_SPELLING_ERRORS
        ]


class RiskContribution(BaseModel):
    """How a single rule moved the risk score."""

    rule: str
    target: str = Field(default="", description="File path or token that triggered the rule")
    amount: float


class RiskAssessment(BaseModel):
    """Rule evaluator output for one change request."""

    score: float = Field(..., ge=0.0, le=1.0)
    level: RiskLevel
    decision: Decision
    line_count: int = 0
    dangerous_tokens: list[str] = Field(default_factory=list)
    contributions: list[RiskContribution] = Field(default_factory=list)
