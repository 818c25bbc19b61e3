"""
Unified exception hierarchy for the team-building concierge.

All exceptions inherit from TeamBuilderError. Most of them are raised at
module edges and absorbed before they reach a chat reply; only the direct
tool interface and the invite drafting surface let them escape.
"""

from __future__ import annotations

from typing import Any, Optional


class TeamBuilderError(Exception):
    """Base exception for all concierge errors."""
    pass


class AdapterError(TeamBuilderError):
    """Completion provider failure (network error, auth rejected, empty body, etc.)."""
    pass


class ToolInputError(TeamBuilderError):
    """Tool arguments failed shape or range checks."""

    def __init__(self, message: str, details: Optional[list[dict[str, Any]]] = None):
        super().__init__(message)
        self.details = details or []


class ToolNotFoundError(TeamBuilderError):
    """A tool name that is not registered with the executor."""
    pass


class DirectoryError(TeamBuilderError):
    """User directory query failure."""
    pass


class UserNotFoundError(DirectoryError):
    """A user id that does not exist in the directory."""
    pass


class EngineError(TeamBuilderError):
    """Orchestration engine internal error (invalid state transition, etc.)."""
    pass


class ConfigError(TeamBuilderError):
    """Configuration error (unknown provider, missing API key, etc.)."""
    pass
