"""
Prompt Builder — every prompt the concierge sends to a provider.

Pure string templates, no I/O. The planner prompt is rendered from the
catalog entries of the registered tools, so the model is only ever
offered tools the executor can actually run.
"""

from __future__ import annotations

import json
from typing import Any, Iterable, Optional

MAX_CONTEXT_CHARS = 1500


PLANNER_PROMPT = """\
You are a tool planner for a hackathon team-building assistant.

AVAILABLE TOOLS:
{tool_section}

{none_index}) none - use for greetings, general questions, strategy advice, anything else
   clarifying_question: a helpful, friendly natural language reply to the user
{context_section}
USER MESSAGE: "{message}"

INSTRUCTIONS:
- For "build my team for fintech hack need React, Node.js backend, and someone for pitch" \
-> tool: search_candidates, skills: ["React", "Node.js", "pitch", "presentation"]
- For "hii", "hello", "hi" -> tool: none, clarifying_question: friendly greeting + offer to help find teammates
- For "what open projects match my skills?" -> tool: none, clarifying_question: ask them to list their skills
- For strategy questions -> tool: none, clarifying_question: give helpful advice
- Always extract real skill names from the message, never use placeholder text
- NEVER leave clarifying_question as null when tool is "none"

Respond with ONLY valid JSON, no extra text:
{{"tool": {tool_names}, "arguments": {{}}, "clarifying_question": null}}
"""

FALLBACK_PROMPT = """\
You are a friendly hackathon team-building assistant. Respond helpfully to: "{message}\""""

DRAFT_PROMPT = """\
You are drafting a concise intro message for a hackathon team.
PROJECT NAME: {project_name}
GOAL: {goal}
TEAM MEMBERS:
{member_lines}
Write a friendly intro message in under 120 words. Output ONLY the message text."""

INVITE_PROMPT = """\
Write a short, friendly hackathon team invite message.
FROM: {sender_name} (skills: {sender_skills})
TO: {receiver_name} (skills: {receiver_skills})
PROJECT CONTEXT: {project_context}
Keep it under 3 sentences. Mention why their skills match. Output ONLY the message text."""


def _render_tool(index: int, entry: dict[str, Any]) -> str:
    lines = [f"{index}) {entry['name']} - {entry['description']}"]
    triggers = entry.get("triggers") or []
    if triggers:
        lines.append("   Example triggers: " + ", ".join(f'"{t}"' for t in triggers))
    lines.append("   arguments: " + json.dumps(entry.get("arguments", {})))
    return "\n".join(lines)


def _render_context(context: str) -> str:
    context = (context or "").strip()
    if not context:
        return ""
    if len(context) > MAX_CONTEXT_CHARS:
        context = context[-MAX_CONTEXT_CHARS:]
    return f"\nRECENT CONVERSATION:\n{context}\n"


def build_planner_prompt(
    message: str,
    tools: Iterable[dict[str, Any]],
    context: str = "",
) -> str:
    """Render the JSON-mode planning prompt for one user message."""
    entries = list(tools)
    tool_section = "\n\n".join(_render_tool(i, e) for i, e in enumerate(entries, start=1))
    names = [e["name"] for e in entries] + ["none"]
    return PLANNER_PROMPT.format(
        tool_section=tool_section,
        none_index=len(entries) + 1,
        context_section=_render_context(context),
        message=message,
        tool_names="|".join(f'"{n}"' for n in names),
    )


def build_fallback_prompt(message: str) -> str:
    """Plain conversational prompt used when planning produced nothing usable."""
    return FALLBACK_PROMPT.format(message=message)


def build_draft_prompt(
    project_name: str,
    goal: str,
    team_members: Iterable[Any],
) -> str:
    """Team intro prompt. Members are objects with .name and .skills."""
    lines = []
    for i, member in enumerate(team_members, start=1):
        name = getattr(member, "name", "") or f"Member {i}"
        skills = getattr(member, "skills", None) or []
        lines.append(f"{i}. {name} | Skills: {', '.join(skills) if skills else 'Not specified'}")
    return DRAFT_PROMPT.format(
        project_name=project_name,
        goal=goal,
        member_lines="\n".join(lines) or "No members provided",
    )


def build_invite_prompt(
    sender: Any,
    receiver: Any,
    project_context: Optional[str] = None,
) -> str:
    """Personal invite prompt between two directory candidates."""
    return INVITE_PROMPT.format(
        sender_name=sender.name,
        sender_skills=", ".join(sender.skills) or "not listed",
        receiver_name=receiver.name,
        receiver_skills=", ".join(receiver.skills) or "not listed",
        project_context=(project_context or "").strip() or "General hackathon collaboration",
    )
