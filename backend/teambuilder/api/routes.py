"""
API endpoints for the team-building concierge.

/api/ai/chat                     conversational pipeline
/api/ai/tools/search-candidates  direct search_candidates invocation
/api/ai/tools/draft-message      direct draft_message invocation
/api/ai/draft                    personal invite draft
/health                          liveness + active provider
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Request

from teambuilder.core.errors import DirectoryError, ToolInputError, ToolNotFoundError, UserNotFoundError
from teambuilder.core.models import ToolName

from .schemas import (
    ChatRequestBody,
    ChatResponseBody,
    HealthResponse,
    InviteDraftRequest,
    InviteDraftResponse,
    MentionedUserBody,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ai")
health_router = APIRouter()

SERVICE_UNAVAILABLE = "AI service unavailable"


# ============ Chat ============

@router.post("/chat", response_model=ChatResponseBody)
async def chat(req: ChatRequestBody, request: Request):
    engine = request.app.state.engine
    try:
        result = await engine.chat(req.message, req.context)
    except Exception:
        logger.exception("Chat pipeline failed")
        raise HTTPException(503, SERVICE_UNAVAILABLE)

    return ChatResponseBody(
        response=result.reply_text,
        selected_tool=result.selected_tool.value,
        tool_result=result.tool_result.to_dict(),
        mentioned_users=[
            MentionedUserBody(id=m.id, name=m.name, skills=m.skills)
            for m in result.mentioned_entities
        ],
    )


# ============ Direct Tools ============

async def _invoke(request: Request, name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    engine = request.app.state.engine
    try:
        result = await engine.invoke_tool(name, arguments)
    except ToolNotFoundError as e:
        raise HTTPException(404, str(e))
    except ToolInputError as e:
        raise HTTPException(400, {"error": str(e), "details": e.details})
    except DirectoryError as e:
        logger.error("Directory failure during %s: %s", name, e)
        raise HTTPException(503, SERVICE_UNAVAILABLE)
    return result.to_dict() or {}


@router.post("/tools/search-candidates")
async def search_candidates(request: Request, arguments: dict[str, Any] = Body(...)):
    return await _invoke(request, ToolName.SEARCH_CANDIDATES.value, arguments)


@router.post("/tools/draft-message")
async def draft_message(request: Request, arguments: dict[str, Any] = Body(...)):
    return await _invoke(request, ToolName.DRAFT_MESSAGE.value, arguments)


# ============ Invite Draft ============

@router.post("/draft", response_model=InviteDraftResponse)
async def draft_invite(req: InviteDraftRequest, request: Request):
    engine = request.app.state.engine
    try:
        invite = await engine.draft_invite(req.sender_id, req.receiver_id, req.project_context)
    except UserNotFoundError as e:
        raise HTTPException(404, str(e))
    except ToolInputError as e:
        raise HTTPException(400, {"error": str(e), "details": e.details})

    return InviteDraftResponse(
        draft=invite.draft,
        receiver_id=invite.receiver_id,
        receiver_name=invite.receiver_name,
    )


# ============ Health ============

@health_router.get("/health", response_model=HealthResponse)
async def health(request: Request):
    state = request.app.state
    client = getattr(state, "completion_client", None)
    provider = client.provider.name if client is not None and client.provider is not None else None
    directory = getattr(state, "directory", None)
    return HealthResponse(
        status="ok",
        provider=provider,
        directory_size=len(directory) if directory is not None else 0,
    )
