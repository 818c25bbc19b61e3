"""Capability layer — planner, tools and responder."""

from .base import BaseTool
from .draft import DraftMessageArgs, DraftMessageTool
from .invite import InviteDraftSkill
from .planner import PlannerSkill
from .registry import ToolRegistry
from .responder import ResponderSkill
from .search import SearchCandidatesArgs, SearchCandidatesTool

__all__ = [
    "BaseTool",
    "DraftMessageArgs",
    "DraftMessageTool",
    "InviteDraftSkill",
    "PlannerSkill",
    "ResponderSkill",
    "SearchCandidatesArgs",
    "SearchCandidatesTool",
    "ToolRegistry",
]
