"""
Provider selection — maps configuration onto one BaseProvider instance.

This is the only place that knows about every provider. Everything
downstream sees the CompletionProvider Protocol.
"""

from __future__ import annotations

import logging

from teambuilder.core.errors import ConfigError
from teambuilder.infra.config import SUPPORTED_PROVIDERS, TeamBuilderConfig

from .base import BaseProvider

logger = logging.getLogger(__name__)


def create_provider(config: TeamBuilderConfig) -> BaseProvider:
    """
    Build the provider named by config.ai_provider.

    Raises ConfigError for an unknown provider name or a missing API key.
    SDK imports are deferred so an unused vendor SDK is never loaded.
    """
    name = config.get_provider_name()
    if name not in SUPPORTED_PROVIDERS:
        raise ConfigError(
            f"Unknown AI provider '{config.ai_provider}', expected one of {', '.join(SUPPORTED_PROVIDERS)}"
        )

    api_key = config.get_api_key()
    if not api_key:
        raise ConfigError(f"No API key set for provider '{name}' (TEAMBUILDER_{name.upper()}_API_KEY)")

    common = {
        "temperature": config.temperature,
        "max_tokens": config.max_tokens,
        "json_max_tokens": config.json_max_tokens,
    }

    if name == "gemini":
        from .gemini_adapter import GeminiProvider
        provider: BaseProvider = GeminiProvider(api_key=api_key, model=config.gemini_model, **common)
    elif name == "openai":
        from .openai_adapter import OpenAIProvider
        provider = OpenAIProvider(
            api_key=api_key,
            model=config.openai_model,
            base_url=config.openai_base_url or None,
            **common,
        )
    elif name == "groq":
        from .openai_adapter import OpenAIProvider
        provider = OpenAIProvider.for_groq(api_key=api_key, model=config.groq_model, **common)
    else:
        from .claude_adapter import ClaudeProvider
        provider = ClaudeProvider(api_key=api_key, model=config.claude_model, **common)

    logger.info("Completion provider: %s (model=%s)", provider.name, provider.model)
    return provider
