"""
LLM Gateway — Wraps the Groq client: one prompt in, completion text out.

Single attempt, no retries. Errors from the SDK propagate to the caller,
which decides how to degrade.
"""

from __future__ import annotations

import asyncio
import logging

from groq import Groq

from gatekeeper.config import Settings

logger = logging.getLogger("gatekeeper.llm")


class LLMGateway:
    """Groq chat-completion client with a configurable timeout and token cap."""

    def __init__(self, settings: Settings, client: Groq | None = None) -> None:
        self.client = client or Groq(
            api_key=settings.groq_api_key,
            timeout=settings.llm_timeout,
            max_retries=0,
        )
        self.model = settings.gatekeeper_model
        self.temperature = settings.llm_temperature
        self.max_tokens = settings.llm_max_tokens

    async def complete(self, prompt: str) -> str | None:
        """
        Send a prompt and return the trimmed completion text.

        Runs the synchronous Groq SDK in a thread pool to avoid blocking
        the async event loop.

        Returns:
            The completion text, or None when the model answered with nothing.
        """
        response = await asyncio.to_thread(self._sync_complete, prompt)

        if response.usage is not None:
            logger.debug(
                "Groq completion used %s tokens", getattr(response.usage, "total_tokens", 0)
            )

        if not response.choices:
            return None
        content = (response.choices[0].message.content or "").strip()
        return content or None

    def _sync_complete(self, prompt: str):
        """Synchronous Groq completion call."""
        return self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
