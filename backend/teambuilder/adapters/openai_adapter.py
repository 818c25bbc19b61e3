"""
OpenAIProvider — completions through the OpenAI Chat Completions API.

Also serves any OpenAI-compatible endpoint (Groq) by pointing base_url
elsewhere. JSON mode uses response_format=json_object together with a
JSON-only system message and a smaller token budget.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import openai

from teambuilder.core.errors import AdapterError

from .base import (
    DEFAULT_JSON_MAX_TOKENS,
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    JSON_SYSTEM_PROMPT,
    BaseProvider,
)

logger = logging.getLogger(__name__)

DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_GROQ_MODEL = "llama-3.3-70b-versatile"
GROQ_BASE_URL = "https://api.groq.com/openai/v1"


class OpenAIProvider(BaseProvider):
    """Completion provider backed by openai.AsyncOpenAI."""

    name = "openai"
    supports_json_mode = True

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_OPENAI_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        json_max_tokens: int = DEFAULT_JSON_MAX_TOKENS,
        base_url: Optional[str] = None,
        name: Optional[str] = None,
    ):
        super().__init__(model, temperature, max_tokens, json_max_tokens)
        if name:
            self.name = name
        client_kwargs: dict[str, Any] = {}
        if base_url:
            client_kwargs["base_url"] = base_url
        self._client = openai.AsyncOpenAI(api_key=api_key, **client_kwargs)

    @classmethod
    def for_groq(cls, api_key: str, model: str = DEFAULT_GROQ_MODEL, **kwargs: Any) -> "OpenAIProvider":
        """Groq speaks the OpenAI protocol; only the endpoint and model differ."""
        return cls(api_key=api_key, model=model, base_url=GROQ_BASE_URL, name="groq", **kwargs)

    async def generate(self, prompt: str, json_mode: bool = False) -> str:
        messages: list[dict[str, str]] = []
        kwargs: dict[str, Any] = {
            "model": self.model,
            "temperature": self._temperature,
            "max_tokens": self._max_tokens,
        }
        if json_mode:
            messages.append({"role": "system", "content": JSON_SYSTEM_PROMPT})
            kwargs["response_format"] = {"type": "json_object"}
            kwargs["max_tokens"] = self._json_max_tokens
        messages.append({"role": "user", "content": prompt})
        kwargs["messages"] = messages

        try:
            response = await self._client.chat.completions.create(**kwargs)
        except openai.OpenAIError as e:
            logger.error("%s API error: %s", self.name, e)
            raise AdapterError(f"{self.name} API call failed: {e}") from e

        if not response.choices:
            raise AdapterError(f"{self.name} returned no choices")
        text = response.choices[0].message.content or ""
        if not text.strip():
            raise AdapterError(f"{self.name} returned no text")
        return text

    async def aclose(self) -> None:
        await self._client.close()
