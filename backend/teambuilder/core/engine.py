"""
Concierge orchestration engine — the state machine that drives one chat
request from the user's message to a ChatResponse.

START -> PLANNING -> [EXECUTING] -> RESPONDING -> DONE

EXECUTING is skipped when the plan selects no tool. There are no loops
and no retries: every request makes exactly one pass. Intelligence lives
in the stages (Planner, Tool Executor, Responder); the engine only
sequences them, validates transitions and records timings.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Any, Optional

from .errors import ConfigError, EngineError
from .models import (
    NO_RESPONSE_TEXT,
    ChatRequest,
    ChatResponse,
    InviteDraft,
    PipelineRun,
    PipelineState,
    ToolResult,
    TraceChain,
)
from .protocols import Executor, Planner, Responder

logger = logging.getLogger(__name__)


# ============ State Machine ============

VALID_TRANSITIONS: dict[PipelineState, set[PipelineState]] = {
    PipelineState.START: {PipelineState.PLANNING},
    PipelineState.PLANNING: {PipelineState.EXECUTING, PipelineState.RESPONDING},
    PipelineState.EXECUTING: {PipelineState.RESPONDING},
    PipelineState.RESPONDING: {PipelineState.DONE},
    PipelineState.DONE: set(),  # Terminal state
}


class ConciergeEngine:
    """
    Runs the plan -> (tool) -> respond pipeline.

    The engine holds no per-request state; each call to run() builds its
    own PipelineRun, so concurrent requests share only the stage objects.
    """

    def __init__(
        self,
        planner: Planner,
        executor: Executor,
        responder: Responder,
        inviter: Optional[Any] = None,
    ):
        self._planner = planner
        self._executor = executor
        self._responder = responder
        self._inviter = inviter

    @property
    def executor(self) -> Executor:
        return self._executor

    # ============ Entry Points ============

    async def chat(self, message: str, context: str = "") -> ChatResponse:
        """The sole conversational entry point."""
        run = await self.run(ChatRequest(message=message, conversation_context=context or ""))
        if run.response is None:
            raise EngineError(f"Request {run.request_id} finished without a response")
        return run.response

    async def run(self, request: ChatRequest) -> PipelineRun:
        """Process one request through the state machine and return the full run record."""
        run = PipelineRun(request=request, trace=TraceChain(request_id=request.request_id))

        # PLANNING
        self._transition(run, PipelineState.PLANNING)
        t0 = time.monotonic()
        plan = await self._planner.plan(request)
        run.plan = plan
        self._trace(
            run, "planning", t0,
            summary=f"tool={plan.tool.value} args={sorted(plan.arguments)}",
        )

        # EXECUTING (only when a real tool was chosen)
        if plan.runs_tool:
            self._transition(run, PipelineState.EXECUTING)
            t0 = time.monotonic()
            run.tool_result = await self._executor.execute(plan)
            self._trace(run, "executing", t0, summary=f"result={run.tool_result.kind.value}")
        else:
            run.tool_result = ToolResult.empty()

        # RESPONDING
        self._transition(run, PipelineState.RESPONDING)
        t0 = time.monotonic()
        reply = self._responder.respond(plan, run.tool_result)
        reply_text = reply.text if reply.text and reply.text.strip() else NO_RESPONSE_TEXT
        run.response = ChatResponse(
            reply_text=reply_text,
            selected_tool=plan.tool,
            tool_result=run.tool_result,
            mentioned_entities=reply.mentioned_entities,
        )
        self._trace(
            run, "responding", t0,
            summary=f"reply_len={len(reply_text)} mentions={len(reply.mentioned_entities)}",
        )

        self._transition(run, PipelineState.DONE)
        if run.trace is not None:
            run.trace.completed_at = datetime.now(timezone.utc)
            logger.info(
                "Request %s done | tool=%s | %.0fms",
                run.request_id, plan.tool.value, run.trace.total_ms,
            )
        return run

    async def invoke_tool(self, name: str, arguments: dict[str, Any]) -> ToolResult:
        """
        Direct tool access, bypassing the Planner.

        Unlike the chat pipeline, invalid arguments are reported as
        ToolInputError instead of being clamped.
        """
        return await self._executor.invoke(name, arguments)

    async def draft_invite(
        self, sender_id: str, receiver_id: str, project_context: str = ""
    ) -> InviteDraft:
        """Draft a personal invite between two directory users."""
        if self._inviter is None:
            raise ConfigError("Invite drafting is not configured on this engine")
        return await self._inviter.draft(sender_id, receiver_id, project_context)

    # ============ State Helpers ============

    def _transition(self, run: PipelineRun, new_state: PipelineState) -> None:
        """
        Move the run to a new state.

        Raises EngineError if the transition is not valid.
        """
        current = run.state
        allowed = VALID_TRANSITIONS.get(current, set())
        if new_state not in allowed:
            raise EngineError(
                f"Invalid state transition: {current.value} -> {new_state.value}"
            )
        logger.info("Request %s: %s -> %s", run.request_id, current.value, new_state.value)
        run.state = new_state

    @staticmethod
    def _trace(
        run: PipelineRun, step: str, start_time: float, summary: Optional[str] = None
    ) -> None:
        """Record a trace entry with timing."""
        if run.trace is None:
            return
        duration_ms = (time.monotonic() - start_time) * 1000
        run.trace.add_entry(step=step, duration_ms=round(duration_ms, 2), summary=summary)
