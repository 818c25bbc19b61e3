"""
ConciergeBuilder — convenience factory for assembling a ConciergeEngine
with all its stages.

Only the user directory is truly required. Without a provider the
engine still answers every request, with degraded replies.

Usage (headless)::

    from teambuilder import ConciergeBuilder, InMemoryUserDirectory

    engine = (
        ConciergeBuilder()
        .with_provider(my_provider)
        .with_directory(InMemoryUserDirectory.from_json_file("users.json"))
        .build()
    )
    response = await engine.chat("find React devs")
"""

from __future__ import annotations

import logging
from typing import Optional

from teambuilder.core.engine import ConciergeEngine
from teambuilder.core.errors import ConfigError
from teambuilder.core.protocols import CompletionProvider, TextCompleter, UserDirectory
from teambuilder.infra.completion_client import DEFAULT_TIMEOUT_S, CompletionClient
from teambuilder.infra.config import TeamBuilderConfig
from teambuilder.skills.draft import DraftMessageTool
from teambuilder.skills.invite import InviteDraftSkill
from teambuilder.skills.planner import PlannerSkill
from teambuilder.skills.registry import ToolRegistry
from teambuilder.skills.responder import ResponderSkill
from teambuilder.skills.search import DEFAULT_LIMIT, MAX_LIMIT, SearchCandidatesTool

logger = logging.getLogger(__name__)


class ConciergeBuilder:
    """Fluent builder for ConciergeEngine."""

    def __init__(self) -> None:
        self._provider: CompletionProvider | None = None
        self._client: TextCompleter | None = None
        self._directory: UserDirectory | None = None
        self._timeout_s: float = DEFAULT_TIMEOUT_S
        self._default_limit: int = DEFAULT_LIMIT
        self._max_limit: int = MAX_LIMIT

    @classmethod
    def from_config(
        cls,
        config: TeamBuilderConfig,
        directory: UserDirectory,
        provider: Optional[CompletionProvider] = None,
    ) -> ConciergeBuilder:
        """Pre-populate timeouts and limits from configuration."""
        return (
            cls()
            .with_provider(provider)
            .with_directory(directory)
            .with_timeout(config.completion_timeout_seconds)
            .with_search_limits(config.search_default_limit, config.search_max_limit)
        )

    def with_provider(self, provider: Optional[CompletionProvider]) -> ConciergeBuilder:
        self._provider = provider
        return self

    def with_completion_client(self, client: TextCompleter) -> ConciergeBuilder:
        """Use a ready-made client; overrides with_provider / with_timeout."""
        self._client = client
        return self

    def with_directory(self, directory: UserDirectory) -> ConciergeBuilder:
        self._directory = directory
        return self

    def with_timeout(self, timeout_s: float) -> ConciergeBuilder:
        self._timeout_s = timeout_s
        return self

    def with_search_limits(self, default_limit: int, max_limit: int) -> ConciergeBuilder:
        self._default_limit = default_limit
        self._max_limit = max_limit
        return self

    def build(self) -> ConciergeEngine:
        if self._directory is None:
            raise ConfigError("ConciergeBuilder requires a user directory (with_directory)")

        client = self._client or CompletionClient(self._provider, timeout_s=self._timeout_s)
        registry = ToolRegistry([
            SearchCandidatesTool(
                self._directory,
                default_limit=self._default_limit,
                max_limit=self._max_limit,
            ),
            DraftMessageTool(client),
        ])
        engine = ConciergeEngine(
            planner=PlannerSkill(client, registry),
            executor=registry,
            responder=ResponderSkill(),
            inviter=InviteDraftSkill(client, self._directory),
        )
        logger.info("ConciergeEngine built with tools: %s", ", ".join(registry.names))
        return engine
