"""
CompletionClient — the single door to the active completion provider.

Skills never call a provider directly. This wrapper adds what every call
needs: a bounded timeout, JSON-mode degradation for providers without it,
timing logs, and normalization of every failure to None. It never raises
for provider trouble and never retries.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Optional

from teambuilder.core.errors import AdapterError
from teambuilder.core.protocols import CompletionProvider

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_S = 30.0


class CompletionClient:
    """
    Failure-normalizing completion client implementing TextCompleter.

    A client built without a provider (no credentials configured) is
    valid: every call logs a warning and returns None, which the skills
    turn into their degraded replies.
    """

    def __init__(
        self,
        provider: Optional[CompletionProvider],
        timeout_s: float = DEFAULT_TIMEOUT_S,
    ):
        self._provider = provider
        self._timeout_s = timeout_s

    @property
    def provider(self) -> Optional[CompletionProvider]:
        return self._provider

    @property
    def is_configured(self) -> bool:
        return self._provider is not None

    async def complete(self, prompt: str, json_mode: bool = False) -> Optional[str]:
        """Return the completion text, or None if it could not be produced."""
        provider = self._provider
        if provider is None:
            logger.warning("Completion skipped | no provider configured")
            return None

        if json_mode and not provider.supports_json_mode:
            logger.debug("Provider %s has no JSON mode, using plain completion", provider.name)
            json_mode = False

        logger.info(
            "Completion START | provider=%s | model=%s | json_mode=%s | prompt_len=%d",
            provider.name, provider.model, json_mode, len(prompt),
        )
        t0 = time.monotonic()

        try:
            text = await asyncio.wait_for(
                provider.generate(prompt, json_mode=json_mode),
                timeout=self._timeout_s,
            )
        except asyncio.TimeoutError:
            elapsed_ms = (time.monotonic() - t0) * 1000
            logger.warning(
                "Completion TIMEOUT | provider=%s | %.0fms | limit=%.1fs",
                provider.name, elapsed_ms, self._timeout_s,
            )
            return None
        except AdapterError as e:
            elapsed_ms = (time.monotonic() - t0) * 1000
            logger.warning("Completion FAIL | provider=%s | %.0fms | %s", provider.name, elapsed_ms, e)
            return None
        except Exception as e:
            elapsed_ms = (time.monotonic() - t0) * 1000
            logger.error(
                "Completion FAIL | provider=%s | %.0fms | unexpected %s: %s",
                provider.name, elapsed_ms, type(e).__name__, e,
            )
            return None

        elapsed_ms = (time.monotonic() - t0) * 1000
        if not isinstance(text, str) or not text.strip():
            logger.warning("Completion EMPTY | provider=%s | %.0fms", provider.name, elapsed_ms)
            return None

        logger.info("Completion OK | provider=%s | %.0fms | text_len=%d", provider.name, elapsed_ms, len(text))
        return text
