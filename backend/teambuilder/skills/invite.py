"""
InviteDraftSkill — a personal invite from one directory user to another.

Not a planner tool: called directly (engine.draft_invite / POST /api/ai/draft)
when a user has already picked someone to invite.
"""

from __future__ import annotations

import logging

from ..core.errors import ToolInputError, UserNotFoundError
from ..core.models import Candidate, InviteDraft
from ..core.protocols import TextCompleter, UserDirectory
from .draft import DRAFT_UNAVAILABLE_TEXT
from .prompts import build_invite_prompt

logger = logging.getLogger(__name__)


class InviteDraftSkill:

    def __init__(self, client: TextCompleter, directory: UserDirectory):
        self._client = client
        self._directory = directory

    @property
    def name(self) -> str:
        return "invite_draft"

    async def draft(self, sender_id: str, receiver_id: str, project_context: str = "") -> InviteDraft:
        if not sender_id or not receiver_id:
            raise ToolInputError(
                "sender_id and receiver_id are required",
                [{"field": "sender_id" if not sender_id else "receiver_id", "message": "Field required"}],
            )
        if sender_id == receiver_id:
            raise ToolInputError(
                "Cannot invite yourself",
                [{"field": "receiver_id", "message": "must differ from sender_id"}],
            )

        sender = await self._lookup(sender_id)
        receiver = await self._lookup(receiver_id)

        text = await self._client.complete(build_invite_prompt(sender, receiver, project_context))
        if not text:
            logger.warning("Invite draft %s -> %s: completion unavailable", sender_id, receiver_id)
        return InviteDraft(
            draft=text.strip() if text else DRAFT_UNAVAILABLE_TEXT,
            receiver_id=receiver.id,
            receiver_name=receiver.name,
        )

    async def _lookup(self, user_id: str) -> Candidate:
        user = await self._directory.get_user(user_id)
        if user is None:
            raise UserNotFoundError(f"User not found: {user_id}")
        return user
