"""
Pydantic request/response models for the concierge API.

Wire keys are camelCase (selectedTool, mentionedUsers, ...); Python
attributes stay snake_case.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============ Chat ============

class ChatRequestBody(CamelModel):
    message: str
    context: str = ""

    @field_validator("message")
    @classmethod
    def _message_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("message must not be empty")
        return value.strip()


class MentionedUserBody(CamelModel):
    id: str
    name: str
    skills: list[str] = Field(default_factory=list)


class ChatResponseBody(CamelModel):
    response: str
    selected_tool: str
    tool_result: Optional[dict[str, Any]] = None
    mentioned_users: list[MentionedUserBody] = Field(default_factory=list)


# ============ Invite Draft ============

class InviteDraftRequest(CamelModel):
    sender_id: str
    receiver_id: str
    project_context: str = ""


class InviteDraftResponse(CamelModel):
    draft: str
    receiver_id: str
    receiver_name: str


# ============ Health ============

class HealthResponse(CamelModel):
    status: str
    provider: Optional[str] = None
    directory_size: int = 0
