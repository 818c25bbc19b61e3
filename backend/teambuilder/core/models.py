"""
Core data models for the team-building concierge.

These are the records that flow through one chat request:
ChatRequest -> Plan -> ToolResult -> Reply -> ChatResponse.
Nothing here does I/O.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from .errors import DirectoryError


# ============ ID Generation ============

def generate_id(prefix: str = "") -> str:
    """Generate a unique ID with optional prefix."""
    uid = uuid.uuid4().hex[:12]
    return f"{prefix}_{uid}" if prefix else uid


# ============ Vocabularies ============

class ToolName(str, Enum):
    SEARCH_CANDIDATES = "search_candidates"
    DRAFT_MESSAGE = "draft_message"
    NONE = "none"

    @classmethod
    def parse(cls, value: Any) -> "ToolName":
        """Map a model-produced tool name onto the enum; anything unknown is NONE."""
        if isinstance(value, ToolName):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return cls.NONE
        return cls.NONE


class MatchMode(str, Enum):
    ANY = "any"
    ALL = "all"


class Availability(str, Enum):
    AVAILABLE = "available"
    BUSY = "busy"
    IN_TEAM = "in-team"


# ============ Request / Plan ============

@dataclass
class ChatRequest:
    """One user turn. The context is free text the client accumulated."""
    message: str
    conversation_context: str = ""
    request_id: str = field(default_factory=lambda: generate_id("req"))


@dataclass
class Plan:
    """
    The Planner's decision: which tool to run and with what arguments.

    Arguments are untrusted model output until the Tool Executor
    normalizes them against the tool's argument model.
    """
    tool: ToolName = ToolName.NONE
    arguments: dict[str, Any] = field(default_factory=dict)
    clarifying_question: Optional[str] = None

    @property
    def runs_tool(self) -> bool:
        return self.tool != ToolName.NONE


# ============ Directory ============

MAX_SKILLS = 20
MIN_YEAR = 1
MAX_YEAR = 5


@dataclass
class Candidate:
    """Public projection of a directory user. Never carries contact or bio data."""
    id: str
    name: str
    skills: list[str] = field(default_factory=list)
    availability: Availability = Availability.AVAILABLE
    college: str = ""
    year: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "skills": list(self.skills),
            "availability": self.availability.value,
            "college": self.college,
            "year": self.year,
        }

    def to_mention(self) -> "MentionedEntity":
        return MentionedEntity(id=self.id, name=self.name, skills=list(self.skills))


def _text_list(value: Any, user_id: str, field_name: str) -> list[str]:
    """Trimmed non-empty strings from a list, or from a comma-separated string."""
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple)):
        raise DirectoryError(f"User {user_id}: '{field_name}' must be a list or comma-separated string")
    return [str(v).strip() for v in value if v is not None and str(v).strip()]


@dataclass
class UserRecord:
    """A full directory record, including fields that never leave the directory."""
    id: str
    name: str
    email: str = ""
    skills: list[str] = field(default_factory=list)
    availability: Availability = Availability.AVAILABLE
    college: str = ""
    year: Optional[int] = None
    bio: str = ""
    experience_level: str = "beginner"
    interests: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserRecord":
        """Build a record from loosely-shaped JSON, raising DirectoryError on bad data."""
        if not isinstance(data, dict):
            raise DirectoryError(f"User record must be an object, got {type(data).__name__}")
        user_id = str(data.get("id") or data.get("_id") or "").strip()
        name = str(data.get("name") or "").strip()
        if not user_id or not name:
            raise DirectoryError("User record requires non-empty 'id' and 'name'")

        skills = _text_list(data.get("skills"), user_id, "skills")
        if len(skills) > MAX_SKILLS:
            raise DirectoryError(f"User {user_id}: at most {MAX_SKILLS} skills allowed")

        try:
            availability = Availability(data.get("availability") or Availability.AVAILABLE.value)
        except ValueError as e:
            raise DirectoryError(f"User {user_id}: invalid availability") from e

        year = data.get("year")
        if year is not None:
            if isinstance(year, bool) or not isinstance(year, int) or not MIN_YEAR <= year <= MAX_YEAR:
                raise DirectoryError(f"User {user_id}: year must be {MIN_YEAR}-{MAX_YEAR}")

        return cls(
            id=user_id,
            name=name,
            email=str(data.get("email") or ""),
            skills=skills,
            availability=availability,
            college=str(data.get("college") or ""),
            year=year,
            bio=str(data.get("bio") or ""),
            experience_level=str(data.get("experience_level") or data.get("experienceLevel") or "beginner"),
            interests=_text_list(data.get("interests"), user_id, "interests"),
        )

    def to_candidate(self) -> Candidate:
        return Candidate(
            id=self.id,
            name=self.name,
            skills=list(self.skills),
            availability=self.availability,
            college=self.college,
            year=self.year,
        )


@dataclass
class UserFilter:
    """Normalized search_candidates arguments, as handed to the directory."""
    skills: list[str] = field(default_factory=list)
    match_mode: MatchMode = MatchMode.ANY
    require_available: bool = True
    college: Optional[str] = None
    year: Optional[int] = None
    limit: int = 20

    @property
    def is_unscoped(self) -> bool:
        """True when no skill, college or year narrows the search. Availability alone does not scope it."""
        return not self.skills and not self.college and self.year is None


# ============ Tool Results ============

class ToolResultKind(str, Enum):
    CANDIDATES = "candidates"
    DRAFT = "draft"
    EMPTY = "empty"


@dataclass
class ToolResult:
    """Tagged result: exactly one of candidates / draft_text is meaningful, per kind."""
    kind: ToolResultKind = ToolResultKind.EMPTY
    candidates: list[Candidate] = field(default_factory=list)
    draft_text: Optional[str] = None

    @classmethod
    def of_candidates(cls, candidates: list[Candidate]) -> "ToolResult":
        return cls(kind=ToolResultKind.CANDIDATES, candidates=list(candidates))

    @classmethod
    def of_draft(cls, text: str) -> "ToolResult":
        return cls(kind=ToolResultKind.DRAFT, draft_text=text)

    @classmethod
    def empty(cls) -> "ToolResult":
        return cls(kind=ToolResultKind.EMPTY)

    def to_dict(self) -> Optional[dict[str, Any]]:
        if self.kind == ToolResultKind.CANDIDATES:
            return {"candidates": [c.to_dict() for c in self.candidates]}
        if self.kind == ToolResultKind.DRAFT:
            return {"draft": self.draft_text}
        return None


# ============ Response ============

NO_RESPONSE_TEXT = "No response generated."

@dataclass
class MentionedEntity:
    id: str
    name: str
    skills: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "skills": list(self.skills)}


@dataclass
class Reply:
    """Responder output."""
    text: str
    mentioned_entities: list[MentionedEntity] = field(default_factory=list)


@dataclass
class ChatResponse:
    reply_text: str
    selected_tool: ToolName = ToolName.NONE
    tool_result: ToolResult = field(default_factory=ToolResult.empty)
    mentioned_entities: list[MentionedEntity] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "reply_text": self.reply_text,
            "selected_tool": self.selected_tool.value,
            "tool_result": self.tool_result.to_dict(),
            "mentioned_entities": [m.to_dict() for m in self.mentioned_entities],
        }


@dataclass
class InviteDraft:
    """A personal invite from one directory user to another."""
    draft: str
    receiver_id: str
    receiver_name: str


# ============ Pipeline State ============

class PipelineState(str, Enum):
    START = "start"
    PLANNING = "planning"
    EXECUTING = "executing"
    RESPONDING = "responding"
    DONE = "done"


# ============ Trace ============

@dataclass
class TraceEntry:
    """A single stage in the trace chain."""
    step: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    duration_ms: Optional[float] = None
    summary: Optional[str] = None


@dataclass
class TraceChain:
    """Stage timings for one request, logged when the request completes."""
    request_id: str
    entries: list[TraceEntry] = field(default_factory=list)
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    completed_at: Optional[datetime] = None

    def add_entry(self, step: str, **kwargs) -> TraceEntry:
        entry = TraceEntry(step=step, **kwargs)
        self.entries.append(entry)
        return entry

    @property
    def total_ms(self) -> float:
        return sum(e.duration_ms or 0.0 for e in self.entries)

    def to_dict(self) -> dict[str, Any]:
        return {
            "request_id": self.request_id,
            "started_at": self.started_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "entries": [
                {
                    "step": e.step,
                    "timestamp": e.timestamp.isoformat(),
                    "duration_ms": e.duration_ms,
                    "summary": e.summary,
                }
                for e in self.entries
            ],
        }


@dataclass
class PipelineRun:
    """Everything one request produced. Lives only for that request."""
    request: ChatRequest
    state: PipelineState = PipelineState.START
    plan: Optional[Plan] = None
    tool_result: ToolResult = field(default_factory=ToolResult.empty)
    response: Optional[ChatResponse] = None
    trace: Optional[TraceChain] = None

    @property
    def request_id(self) -> str:
        return self.request.request_id
