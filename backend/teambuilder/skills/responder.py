"""
ResponderSkill — turns a plan and its tool result into the user-facing reply.

Deterministic, no completion calls. Always produces non-empty text.
"""

from __future__ import annotations

from ..core.models import (
    NO_RESPONSE_TEXT,
    Plan,
    Reply,
    ToolName,
    ToolResult,
    ToolResultKind,
)

CLARIFY_TEXT = "Please provide more details so I can run a tool."
NO_MATCHES_TEXT = "No matching candidates were found for the given skills."


class ResponderSkill:
    """Satisfies the Responder Protocol."""

    @property
    def name(self) -> str:
        return "responder"

    def respond(self, plan: Plan, tool_result: ToolResult) -> Reply:
        if plan.tool == ToolName.NONE:
            return Reply(text=plan.clarifying_question or CLARIFY_TEXT)

        if plan.tool == ToolName.SEARCH_CANDIDATES:
            candidates = tool_result.candidates if tool_result.kind == ToolResultKind.CANDIDATES else []
            if not candidates:
                return Reply(text=NO_MATCHES_TEXT)
            lines = [f"Found {len(candidates)} matching candidate(s):"]
            for i, c in enumerate(candidates, start=1):
                lines.append(f"{i}. {c.name} ({', '.join(c.skills)})")
            return Reply(
                text="\n".join(lines),
                mentioned_entities=[c.to_mention() for c in candidates],
            )

        if plan.tool == ToolName.DRAFT_MESSAGE:
            if tool_result.kind == ToolResultKind.DRAFT and tool_result.draft_text:
                return Reply(text=tool_result.draft_text)

        return Reply(text=NO_RESPONSE_TEXT)
