"""
Gatekeeper Configuration — pydantic-settings based.

All settings are read from environment variables or .env file.
Nothing is required: a missing GROQ_API_KEY disables enrichment and a
missing GATEKEEPER_API_KEY leaves /api/analyze open.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application-wide settings sourced from environment variables."""

    # ── Access control ──
    gatekeeper_api_key: str | None = Field(
        default=None,
        description="Shared secret expected in the X-API-KEY header. Unset or blank = open endpoint.",
    )

    # ── LLM enrichment ──
    groq_api_key: str | None = Field(
        default=None, description="Groq API key. Unset or blank = rule-based output only."
    )
    gatekeeper_model: str = Field(
        default="llama-3.3-70b-versatile",
        description="Model identifier for Groq completions",
    )
    llm_timeout: float = Field(default=30.0, description="LLM request timeout in seconds")
    llm_temperature: float = Field(default=0.2, description="LLM temperature")
    llm_max_tokens: int = Field(default=150, description="Completion token cap per call")

    # ── Prompt excerpts ──
    explanation_diff_chars: int = Field(
        default=800, description="Diff characters sent for the explanation prompt"
    )
    tests_diff_chars: int = Field(
        default=500, description="Diff characters sent for the test recommendation prompt"
    )
    spelling_diff_chars: int = Field(
        default=1200, description="Diff characters sent for the spelling prompt"
    )

    # ── Server ──
    cors_origins: list[str] = Field(
        default=["*"], description="Allowed CORS origins"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    @property
    def enrichment_enabled(self) -> bool:
        return bool(self.groq_api_key and self.groq_api_key.strip())

    @property
    def api_key_required(self) -> bool:
        return bool(self.gatekeeper_api_key and self.gatekeeper_api_key.strip())


# Singleton instance — imported by other modules
settings = Settings()
