"""
Module-boundary Protocol definitions — the contracts between modules.

The engine only ever talks to these shapes. Concrete implementations
live in adapters/, infra/ and skills/, and any object satisfying the
Protocol can be swapped in (tests do exactly that).
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

from .models import (
    Candidate,
    ChatRequest,
    Plan,
    Reply,
    ToolResult,
    UserFilter,
)


# ============ Outbound: text generation ============

@runtime_checkable
class CompletionProvider(Protocol):
    """
    One text-generation backend (Gemini, OpenAI, Claude, Groq, ...).

    Raises AdapterError on any failure. Callers never see provider SDK
    exceptions.
    """

    name: str
    model: str
    supports_json_mode: bool

    async def generate(self, prompt: str, json_mode: bool = False) -> str:
        """Send one prompt, return the completion text."""
        ...


@runtime_checkable
class TextCompleter(Protocol):
    """
    The failure-normalizing wrapper skills depend on.

    Returns None instead of raising when the completion could not be
    produced (provider error, timeout, empty text).
    """

    async def complete(self, prompt: str, json_mode: bool = False) -> Optional[str]:
        ...


# ============ Outbound: user directory ============

@runtime_checkable
class UserDirectory(Protocol):
    """
    Read-only view of the people who can be recommended.

    Implementations return public Candidate projections only and must
    order results deterministically for an unchanged directory.
    """

    async def find_users(self, user_filter: UserFilter) -> list[Candidate]:
        ...

    async def get_user(self, user_id: str) -> Optional[Candidate]:
        ...


# ============ Pipeline stages ============

@runtime_checkable
class Tool(Protocol):
    """A capability the Planner can select and the executor can run."""

    @property
    def name(self) -> str: ...

    def catalog_entry(self) -> dict[str, Any]:
        """Name, description, triggers and argument shape for the planner prompt."""
        ...

    def coerce_arguments(self, raw: Any) -> Any:
        """Lenient: clamp and default, never raise."""
        ...

    def validate_arguments(self, raw: Any) -> Any:
        """Strict: raise ToolInputError on anything out of shape."""
        ...

    async def run(self, arguments: Any) -> ToolResult:
        ...


@runtime_checkable
class Planner(Protocol):
    async def plan(self, request: ChatRequest) -> Plan:
        ...


@runtime_checkable
class Executor(Protocol):
    async def execute(self, plan: Plan) -> ToolResult:
        """Run the planned tool with normalized arguments. Never raises for bad input."""
        ...

    async def invoke(self, name: str, arguments: dict[str, Any]) -> ToolResult:
        """Run a tool directly with strictly validated arguments."""
        ...


@runtime_checkable
class Responder(Protocol):
    def respond(self, plan: Plan, tool_result: ToolResult) -> Reply:
        ...
