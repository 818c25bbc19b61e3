"""Core layer — models, errors, protocols, parsing and the pipeline engine."""

from .errors import (
    TeamBuilderError,
    AdapterError,
    ToolInputError,
    ToolNotFoundError,
    DirectoryError,
    UserNotFoundError,
    EngineError,
    ConfigError,
)
from .models import (
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
    Reply,
    ToolName,
    ToolResult,
    ToolResultKind,
    TraceChain,
    TraceEntry,
    UserFilter,
    UserRecord,
    generate_id,
)
from .parsing import parse_json_object
from .protocols import (
    CompletionProvider,
    Executor,
    Planner,
    Responder,
    TextCompleter,
    Tool,
    UserDirectory,
)

__all__ = [
    "TeamBuilderError", "AdapterError", "ToolInputError", "ToolNotFoundError",
    "DirectoryError", "UserNotFoundError", "EngineError", "ConfigError",
    "Availability", "Candidate", "ChatRequest", "ChatResponse", "InviteDraft",
    "MatchMode", "MentionedEntity", "PipelineRun", "PipelineState", "Plan",
    "Reply", "ToolName", "ToolResult", "ToolResultKind", "TraceChain",
    "TraceEntry", "UserFilter", "UserRecord", "generate_id",
    "parse_json_object",
    "CompletionProvider", "Executor", "Planner", "Responder",
    "TextCompleter", "Tool", "UserDirectory",
]
