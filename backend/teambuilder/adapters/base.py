"""
Abstract base for completion providers.

Each provider wraps one text-generation API behind the same
generate(prompt, json_mode) call. Exactly one provider is active at a
time; which one is a configuration decision (see factory.create_provider).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 2048
DEFAULT_JSON_MAX_TOKENS = 512

JSON_SYSTEM_PROMPT = (
    "You are a JSON-only planner. Always respond with valid JSON and nothing else. "
    "No markdown, no explanation, no code fences."
)


class BaseProvider(ABC):
    """
    Abstract base class for completion providers.

    Subclasses implement generate() against one vendor API and raise
    AdapterError for every failure, including an empty completion.
    The methods match the CompletionProvider Protocol in core/protocols.py.
    """

    name: str = "base"
    supports_json_mode: bool = False

    def __init__(
        self,
        model: str,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        json_max_tokens: int = DEFAULT_JSON_MAX_TOKENS,
    ):
        self.model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._json_max_tokens = json_max_tokens

    @abstractmethod
    async def generate(self, prompt: str, json_mode: bool = False) -> str:
        """Send one user prompt. Returns the complete response text."""
        ...

    async def aclose(self) -> None:
        """Release network resources. Default: nothing to release."""
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model={self.model!r})"
