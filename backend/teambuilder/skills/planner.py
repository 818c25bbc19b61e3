"""
PlannerSkill — decides which tool (if any) answers the user's message.

One JSON-mode completion proposes {tool, arguments, clarifying_question}.
If that yields no usable object, a second plain completion produces a
conversational reply instead and the plan becomes tool=none.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..core.models import ChatRequest, Plan, ToolName
from ..core.parsing import parse_json_object
from ..core.protocols import TextCompleter
from .prompts import build_fallback_prompt, build_planner_prompt
from .registry import ToolRegistry

logger = logging.getLogger(__name__)


class PlannerSkill:
    """
    Turns a ChatRequest into a Plan. Satisfies the Planner Protocol.

    Code guarantees over prompt guarantees: whatever the model returns,
    the Plan names a registered tool or none, arguments are a dict, and
    the clarifying question is a string or None.
    """

    def __init__(self, client: TextCompleter, registry: ToolRegistry):
        self._client = client
        self._registry = registry

    @property
    def name(self) -> str:
        return "planner"

    async def plan(self, request: ChatRequest) -> Plan:
        prompt = build_planner_prompt(
            request.message,
            self._registry.catalog(),
            context=request.conversation_context,
        )
        raw = await self._client.complete(prompt, json_mode=True)
        parsed = parse_json_object(raw) if raw else None

        if parsed is None or not isinstance(parsed.get("tool"), str):
            logger.info("Request %s: plan unusable, using conversational fallback", request.request_id)
            return await self._fallback(request)

        plan = self._validate_output(parsed)
        logger.info("Request %s: planned tool=%s", request.request_id, plan.tool.value)
        return plan

    def _validate_output(self, parsed: dict[str, Any]) -> Plan:
        tool = ToolName.parse(parsed.get("tool"))
        if tool != ToolName.NONE and tool.value not in self._registry:
            logger.warning("Planner chose unregistered tool %r, treating as none", parsed.get("tool"))
            tool = ToolName.NONE
        elif tool == ToolName.NONE and str(parsed.get("tool")).strip().lower() != ToolName.NONE.value:
            logger.warning("Planner chose unknown tool %r, treating as none", parsed.get("tool"))

        arguments = parsed.get("arguments")
        if not isinstance(arguments, dict):
            arguments = {}

        question = self._clean_question(parsed)
        if tool != ToolName.NONE:
            if question:
                # Tool selection wins over a simultaneous question.
                logger.debug("Discarding clarifying question alongside tool %s", tool.value)
            question = None
        else:
            arguments = {}

        return Plan(tool=tool, arguments=arguments, clarifying_question=question)

    @staticmethod
    def _clean_question(parsed: dict[str, Any]) -> Optional[str]:
        question = parsed.get("clarifying_question")
        if question is None:
            question = parsed.get("ask_user")
        if isinstance(question, str) and question.strip():
            return question.strip()
        return None

    async def _fallback(self, request: ChatRequest) -> Plan:
        text = await self._client.complete(build_fallback_prompt(request.message), json_mode=False)
        return Plan(
            tool=ToolName.NONE,
            arguments={},
            clarifying_question=text.strip() if text and text.strip() else None,
        )
