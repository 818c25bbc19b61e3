"""
draft_message — write a short team intro message for a hackathon project.

One plain completion per call. A failed completion yields a fixed
placeholder instead of an error.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from ..core.models import ToolName, ToolResult
from ..core.protocols import TextCompleter
from .base import BaseTool, first_present, normalize_skills
from .prompts import build_draft_prompt

logger = logging.getLogger(__name__)

DRAFT_UNAVAILABLE_TEXT = "Unable to generate draft right now."
DEFAULT_PROJECT_NAME = "our hackathon project"
DEFAULT_GOAL = "build something great together"


class TeamMember(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    name: str = ""
    skills: list[str] = Field(default_factory=list)

    @field_validator("skills", mode="before")
    @classmethod
    def _split_skill_string(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.split(",")
        return value

    @field_validator("skills")
    @classmethod
    def _normalize_skills(cls, value: list[str]) -> list[str]:
        return normalize_skills(value)


class DraftMessageArgs(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", str_strip_whitespace=True)

    team_members: list[TeamMember] = Field(
        default_factory=list,
        validation_alias=AliasChoices("team_members", "teamMembers"),
    )
    project_name: str = Field(
        min_length=1,
        validation_alias=AliasChoices("project_name", "projectName"),
    )
    goal: str = Field(min_length=1)


class DraftMessageTool(BaseTool):
    """Drafts a team intro message through the completion client."""

    arguments_model = DraftMessageArgs
    description = "use when the user wants to draft/write an invite or intro message"
    triggers = (
        "write an intro for my team",
        "draft a message to my teammates",
    )
    argument_shape = {
        "team_members": [{"name": "Name", "skills": ["skill"]}],
        "project_name": "name",
        "goal": "description",
    }

    def __init__(self, client: TextCompleter):
        self._client = client

    @property
    def name(self) -> str:
        return ToolName.DRAFT_MESSAGE.value

    def coerce_arguments(self, raw: Any) -> DraftMessageArgs:
        data = raw if isinstance(raw, dict) else {}

        members: list[TeamMember] = []
        raw_members = first_present(data, "team_members", "teamMembers")
        if isinstance(raw_members, list):
            for item in raw_members:
                if isinstance(item, dict):
                    name = item.get("name")
                    members.append(TeamMember(
                        name=name.strip() if isinstance(name, str) else "",
                        skills=normalize_skills(item.get("skills")),
                    ))
                elif isinstance(item, str) and item.strip():
                    members.append(TeamMember(name=item.strip()))

        project_name = first_present(data, "project_name", "projectName")
        goal = data.get("goal")
        return DraftMessageArgs(
            team_members=members,
            project_name=project_name.strip() if isinstance(project_name, str) and project_name.strip() else DEFAULT_PROJECT_NAME,
            goal=goal.strip() if isinstance(goal, str) and goal.strip() else DEFAULT_GOAL,
        )

    async def run(self, arguments: DraftMessageArgs) -> ToolResult:
        prompt = build_draft_prompt(arguments.project_name, arguments.goal, arguments.team_members)
        text = await self._client.complete(prompt, json_mode=False)
        if not text:
            logger.warning("draft_message: completion unavailable, returning placeholder")
            return ToolResult.of_draft(DRAFT_UNAVAILABLE_TEXT)
        return ToolResult.of_draft(text.strip())
