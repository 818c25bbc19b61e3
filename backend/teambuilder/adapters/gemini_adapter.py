"""
GeminiProvider — completions through the Gemini generateContent REST API.

Plain HTTP via httpx; no vendor SDK. JSON mode asks the API for an
application/json response body.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from teambuilder.core.errors import AdapterError

from .base import DEFAULT_JSON_MAX_TOKENS, DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, BaseProvider

logger = logging.getLogger(__name__)

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"


class GeminiProvider(BaseProvider):
    """
    Completion provider for Google Gemini.

    Accepts an externally owned httpx.AsyncClient (tests pass one built on
    httpx.MockTransport); otherwise creates its own.
    """

    name = "gemini"
    supports_json_mode = True

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_GEMINI_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        json_max_tokens: int = DEFAULT_JSON_MAX_TOKENS,
        http_client: Optional[httpx.AsyncClient] = None,
        base_url: str = GEMINI_API_BASE,
    ):
        super().__init__(model, temperature, max_tokens, json_max_tokens)
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._client = http_client or httpx.AsyncClient(timeout=30.0)

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}/models/{self.model}:generateContent"

    def _build_body(self, prompt: str, json_mode: bool) -> dict[str, Any]:
        generation_config: dict[str, Any] = {
            "temperature": self._temperature,
            "maxOutputTokens": self._max_tokens,
        }
        if json_mode:
            generation_config["responseMimeType"] = "application/json"
            generation_config["maxOutputTokens"] = self._json_max_tokens
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": generation_config,
        }

    async def generate(self, prompt: str, json_mode: bool = False) -> str:
        try:
            response = await self._client.post(
                self.endpoint,
                json=self._build_body(prompt, json_mode),
                headers={"x-goog-api-key": self._api_key},
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error("Gemini API HTTP %d: %s", e.response.status_code, e.response.text[:200])
            raise AdapterError(f"Gemini API returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error("Gemini API request failed: %s", e)
            raise AdapterError(f"Gemini API request failed: {e}") from e
        except ValueError as e:
            raise AdapterError("Gemini API returned a non-JSON body") from e

        if isinstance(data, dict) and data.get("error"):
            error = data["error"]
            message = error.get("message", "unknown error") if isinstance(error, dict) else str(error)
            raise AdapterError(f"Gemini API error: {message}")

        return self._extract_text(data)

    @staticmethod
    def _extract_text(data: Any) -> str:
        try:
            parts = data["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError) as e:
            raise AdapterError("Gemini response had no candidates") from e
        if not isinstance(parts, list):
            raise AdapterError("Gemini response had no content parts")
        text = "".join(
            p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str)
        )
        if not text.strip():
            raise AdapterError("Gemini returned no text")
        return text

    async def aclose(self) -> None:
        await self._client.aclose()
