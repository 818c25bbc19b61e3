"""
ClaudeProvider — completions through the Anthropic Messages API.

Anthropic has no constrained JSON output mode, so json_mode requests are
answered as plain completions and the planner's lenient parser does the rest.
"""

from __future__ import annotations

import logging
from typing import Any

import anthropic

from teambuilder.core.errors import AdapterError

from .base import DEFAULT_JSON_MAX_TOKENS, DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, BaseProvider

logger = logging.getLogger(__name__)

DEFAULT_CLAUDE_MODEL = "claude-sonnet-4-20250514"


class ClaudeProvider(BaseProvider):
    """Completion provider backed by anthropic.AsyncAnthropic."""

    name = "claude"
    supports_json_mode = False

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_CLAUDE_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        json_max_tokens: int = DEFAULT_JSON_MAX_TOKENS,
        base_url: str | None = None,
    ):
        super().__init__(model, temperature, max_tokens, json_max_tokens)
        client_kwargs: dict[str, Any] = {}
        if base_url:
            client_kwargs["base_url"] = base_url
        self._client = anthropic.AsyncAnthropic(api_key=api_key, **client_kwargs)

    async def generate(self, prompt: str, json_mode: bool = False) -> str:
        kwargs: dict[str, Any] = {
            "model": self.model,
            "max_tokens": self._max_tokens,
            "temperature": self._temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        try:
            response = await self._client.messages.create(**kwargs)
        except anthropic.APIError as e:
            logger.error("Claude API error: %s", e)
            raise AdapterError(f"Claude API call failed: {e}") from e

        # Extract text from response content blocks
        text_parts = [block.text for block in response.content if block.type == "text"]
        text = "".join(text_parts)
        if not text.strip():
            raise AdapterError(f"Claude returned no text (stop_reason={response.stop_reason})")
        return text

    async def aclose(self) -> None:
        await self._client.close()
