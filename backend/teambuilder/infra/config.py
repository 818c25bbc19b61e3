"""
Configuration management using pydantic-settings.

All concierge settings are loaded from environment variables with the
TEAMBUILDER_ prefix.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings

SUPPORTED_PROVIDERS = ("gemini", "openai", "claude", "groq")


class TeamBuilderConfig(BaseSettings):
    """
    Concierge configuration.

    Environment variables are prefixed with TEAMBUILDER_, e.g.:
    - TEAMBUILDER_AI_PROVIDER=groq
    - TEAMBUILDER_GROQ_API_KEY=gsk_...
    - TEAMBUILDER_COMPLETION_TIMEOUT_SECONDS=15
    """

    model_config = {"env_prefix": "TEAMBUILDER_"}

    # Provider selection — exactly one is active
    ai_provider: str = "gemini"

    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"

    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    openai_base_url: str = ""  # OpenAI-compatible proxy, empty for api.openai.com

    claude_api_key: str = ""
    claude_model: str = "claude-sonnet-4-20250514"

    groq_api_key: str = ""
    groq_model: str = "llama-3.3-70b-versatile"

    # Generation
    temperature: float = 0.7
    max_tokens: int = 2048
    json_max_tokens: int = 512
    completion_timeout_seconds: float = 30.0

    # search_candidates
    search_default_limit: int = 20
    search_max_limit: int = 100

    # Directory seed file (JSON list of users); empty uses the demo directory
    directory_path: str = ""

    # Service
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    def get_provider_name(self) -> str:
        return self.ai_provider.strip().lower()

    def get_api_key(self) -> str:
        """Return the API key of the active provider ('' when unset or unknown)."""
        return getattr(self, f"{self.get_provider_name()}_api_key", "") or ""

    def get_cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
