"""
Team Builder SDK — a hackathon team-building concierge.

Public API surface. Import everything you need from here::

    from teambuilder import ConciergeBuilder, InMemoryUserDirectory

Extension points (implement these Protocols to customize):

- ``CompletionProvider`` / ``BaseProvider`` — plug in another text-generation API
- ``TextCompleter`` — replace the timeout/failure-normalizing client
- ``UserDirectory`` — back candidate search with your own user store
- ``Tool`` / ``BaseTool`` — a capability the ToolRegistry can run
- ``Planner`` / ``Executor`` / ``Responder`` — swap a pipeline stage
"""

# -- Core engine --
from teambuilder.core.engine import ConciergeEngine

# -- Data models --
from teambuilder.core.models import (
    Availability,
    Candidate,
    ChatRequest,
    ChatResponse,
    InviteDraft,
    MatchMode,
    MentionedEntity,
    PipelineRun,
    PipelineState,
    Plan,
    ToolName,
    ToolResult,
    ToolResultKind,
    UserFilter,
    UserRecord,
)

# -- Errors --
from teambuilder.core.errors import (
    AdapterError,
    ConfigError,
    DirectoryError,
    EngineError,
    TeamBuilderError,
    ToolInputError,
    ToolNotFoundError,
    UserNotFoundError,
)

# -- Protocols (contracts for extension) --
from teambuilder.core.protocols import (
    CompletionProvider,
    Executor,
    Planner,
    Responder,
    TextCompleter,
    Tool,
    UserDirectory,
)

from teambuilder.core.parsing import parse_json_object

# -- Providers --
from teambuilder.adapters import (
    BaseProvider,
    ClaudeProvider,
    GeminiProvider,
    OpenAIProvider,
    create_provider,
)

# -- Builder --
from teambuilder.builder import ConciergeBuilder

# -- Default implementations --
from teambuilder.infra import CompletionClient, InMemoryUserDirectory, TeamBuilderConfig
from teambuilder.skills import (
    BaseTool,
    DraftMessageTool,
    InviteDraftSkill,
    PlannerSkill,
    ResponderSkill,
    SearchCandidatesTool,
    ToolRegistry,
)

__version__ = "0.1.0"

__all__ = [
    "ConciergeEngine",
    "ConciergeBuilder",
    # Models
    "Availability", "Candidate", "ChatRequest", "ChatResponse", "InviteDraft",
    "MatchMode", "MentionedEntity", "PipelineRun", "PipelineState", "Plan",
    "ToolName", "ToolResult", "ToolResultKind", "UserFilter", "UserRecord",
    # Errors
    "AdapterError", "ConfigError", "DirectoryError", "EngineError",
    "TeamBuilderError", "ToolInputError", "ToolNotFoundError", "UserNotFoundError",
    # Protocols
    "CompletionProvider", "Executor", "Planner", "Responder",
    "TextCompleter", "Tool", "UserDirectory",
    "parse_json_object",
    # Providers
    "BaseProvider", "ClaudeProvider", "GeminiProvider", "OpenAIProvider", "create_provider",
    # Implementations
    "CompletionClient", "InMemoryUserDirectory", "TeamBuilderConfig",
    "BaseTool", "DraftMessageTool", "InviteDraftSkill", "PlannerSkill",
    "ResponderSkill", "SearchCandidatesTool", "ToolRegistry",
]
