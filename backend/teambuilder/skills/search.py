"""
search_candidates — find directory users by skills and profile filters.

Skill matching is a case-insensitive substring test ("react" matches
"React Native"). match_mode "any" needs one requested skill, "all" needs
every one. A query with no skill, college or year is refused with an
empty result rather than dumping the directory, whatever its
availability flag says.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from ..core.errors import ToolInputError
from ..core.models import MAX_YEAR, MIN_YEAR, MatchMode, ToolName, ToolResult, UserFilter
from ..core.protocols import UserDirectory
from .base import BaseTool, coerce_bool, coerce_int, first_present, normalize_skills

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20
MAX_LIMIT = 100


class SearchCandidatesArgs(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    skills: list[str] = Field(default_factory=list)
    require_available: bool = Field(
        default=True,
        validation_alias=AliasChoices("require_available", "requireAvailable", "availability_required"),
    )
    match_mode: MatchMode = Field(
        default=MatchMode.ANY,
        validation_alias=AliasChoices("match_mode", "matchMode"),
    )
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)
    college: Optional[str] = None
    year: Optional[int] = Field(default=None, ge=MIN_YEAR, le=MAX_YEAR)

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

    @field_validator("college", mode="before")
    @classmethod
    def _blank_college(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip() or None
        return value

    def to_filter(self) -> UserFilter:
        return UserFilter(
            skills=list(self.skills),
            match_mode=self.match_mode,
            require_available=self.require_available,
            college=self.college,
            year=self.year,
            limit=self.limit,
        )


class SearchCandidatesTool(BaseTool):
    """Queries the UserDirectory and returns public candidate projections."""

    arguments_model = SearchCandidatesArgs
    description = "use when the user wants to find/search/match people by skills"
    triggers = (
        "find React devs",
        "who knows Python",
        "build my team for fintech",
        "need someone for pitch",
    )
    argument_shape = {
        "skills": ["skill1", "skill2"],
        "require_available": True,
        "match_mode": "any",
        "limit": DEFAULT_LIMIT,
        "college": None,
        "year": None,
    }

    def __init__(
        self,
        directory: UserDirectory,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ):
        self._directory = directory
        self._max_limit = max(1, min(max_limit, MAX_LIMIT))
        self._default_limit = max(1, min(default_limit, self._max_limit))

    @property
    def name(self) -> str:
        return ToolName.SEARCH_CANDIDATES.value

    def coerce_arguments(self, raw: Any) -> SearchCandidatesArgs:
        data = raw if isinstance(raw, dict) else {}

        match_mode = str(first_present(data, "match_mode", "matchMode") or "").strip().lower()
        limit = coerce_int(data.get("limit"))
        year = coerce_int(data.get("year"))
        college = data.get("college")

        return SearchCandidatesArgs(
            skills=normalize_skills(data.get("skills")),
            require_available=coerce_bool(
                first_present(data, "require_available", "requireAvailable", "availability_required"),
                default=True,
            ),
            match_mode=MatchMode.ALL if match_mode == MatchMode.ALL.value else MatchMode.ANY,
            limit=self._default_limit if limit is None else max(1, min(limit, self._max_limit)),
            college=(college.strip() or None) if isinstance(college, str) else None,
            year=year if year is not None and MIN_YEAR <= year <= MAX_YEAR else None,
        )

    def validate_arguments(self, raw: Any) -> SearchCandidatesArgs:
        if isinstance(raw, dict) and "limit" not in raw:
            raw = {**raw, "limit": self._default_limit}
        args = super().validate_arguments(raw)
        if args.limit > self._max_limit:
            raise ToolInputError(
                f"Invalid arguments for {self.name}",
                [{"field": "limit", "message": f"Input should be less than or equal to {self._max_limit}"}],
            )
        return args

    async def run(self, arguments: SearchCandidatesArgs) -> ToolResult:
        user_filter = arguments.to_filter()
        if user_filter.is_unscoped:
            logger.info("search_candidates: unscoped query refused")
            return ToolResult.of_candidates([])

        candidates = await self._directory.find_users(user_filter)
        logger.info(
            "search_candidates: skills=%s mode=%s -> %d candidate(s)",
            user_filter.skills, user_filter.match_mode.value, len(candidates),
        )
        return ToolResult.of_candidates(candidates[: user_filter.limit])
