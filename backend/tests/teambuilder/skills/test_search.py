"""Tests for the search_candidates tool."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from teambuilder.core.errors import ToolInputError
from teambuilder.core.models import MatchMode, ToolResultKind
from teambuilder.skills.search import SearchCandidatesTool


@pytest.fixture
def tool(directory):
    return SearchCandidatesTool(directory)


def _names(result):
    return [c.name for c in result.candidates]


class TestRun:
    @pytest.mark.asyncio
    async def test_any_mode_excludes_non_matching(self, tool):
        args = tool.coerce_arguments({"skills": ["React", "Node.js"], "match_mode": "any"})
        result = await tool.run(args)

        assert result.kind == ToolResultKind.CANDIDATES
        assert set(_names(result)) == {"Priya Sharma", "Rohit Kumar", "Karan Patel"}
        assert "Aditya Singh" not in _names(result)

    @pytest.mark.asyncio
    async def test_all_mode_requires_every_skill(self, tool):
        args = tool.coerce_arguments({"skills": ["React", "Node.js"], "matchMode": "all"})
        result = await tool.run(args)
        assert _names(result) == ["Karan Patel"]

    @pytest.mark.asyncio
    async def test_unscoped_query_returns_empty(self, directory):
        directory.find_users = AsyncMock()
        tool = SearchCandidatesTool(directory)

        args = tool.coerce_arguments({"skills": [], "require_available": False})
        result = await tool.run(args)

        assert result.kind == ToolResultKind.CANDIDATES
        assert result.candidates == []
        directory.find_users.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_default_availability_does_not_scope(self, directory):
        directory.find_users = AsyncMock()
        tool = SearchCandidatesTool(directory)

        result = await tool.run(tool.coerce_arguments({}))

        assert result.candidates == []
        directory.find_users.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_direct_invoke_without_criteria_is_empty(self, tool):
        result = await tool.run(tool.validate_arguments({}))
        assert result.kind == ToolResultKind.CANDIDATES
        assert result.candidates == []

    @pytest.mark.asyncio
    async def test_college_alone_scopes(self, tool):
        result = await tool.run(tool.coerce_arguments({"college": "IIT"}))
        assert _names(result) == ["Karan Patel"]

    @pytest.mark.asyncio
    async def test_idempotent(self, tool):
        args = tool.validate_arguments({"skills": ["React", "Node.js", "Python"]})
        first = await tool.run(args)
        second = await tool.run(args)
        assert first == second

    @pytest.mark.asyncio
    async def test_limit_caps_results(self, tool):
        result = await tool.run(tool.coerce_arguments({"skills": ["React"], "limit": 1}))
        assert len(result.candidates) == 1


class TestCoerceArguments:
    def test_defaults(self, tool):
        args = tool.coerce_arguments({})
        assert args.skills == []
        assert args.require_available is True
        assert args.match_mode == MatchMode.ANY
        assert args.limit == 20

    def test_non_dict(self, tool):
        assert tool.coerce_arguments("React please").skills == []

    def test_skills_normalized(self, tool):
        args = tool.coerce_arguments({"skills": [" React ", "", "react", None, "Node.js"]})
        assert args.skills == ["React", "Node.js"]

    def test_skill_string_split(self, tool):
        assert tool.coerce_arguments({"skills": "React, Go"}).skills == ["React", "Go"]

    @pytest.mark.parametrize("raw,expected", [(0, 1), (-5, 1), (500, 100), ("7", 7), ("many", 20), (None, 20)])
    def test_limit_clamped(self, tool, raw, expected):
        assert tool.coerce_arguments({"skills": ["Go"], "limit": raw}).limit == expected

    def test_configured_limits(self, directory):
        tool = SearchCandidatesTool(directory, default_limit=5, max_limit=10)
        assert tool.coerce_arguments({}).limit == 5
        assert tool.coerce_arguments({"limit": 50}).limit == 10

    @pytest.mark.parametrize("raw,expected", [("false", False), (False, False), ("yes", True), ("maybe", True)])
    def test_availability_spellings(self, tool, raw, expected):
        assert tool.coerce_arguments({"availability_required": raw}).require_available is expected

    def test_unknown_match_mode_falls_back_to_any(self, tool):
        assert tool.coerce_arguments({"match_mode": "some"}).match_mode == MatchMode.ANY

    def test_bad_year_dropped(self, tool):
        assert tool.coerce_arguments({"year": 9}).year is None
        assert tool.coerce_arguments({"year": "3"}).year == 3

    def test_blank_college_dropped(self, tool):
        assert tool.coerce_arguments({"college": "   "}).college is None


class TestValidateArguments:
    def test_valid(self, tool):
        args = tool.validate_arguments({"skills": ["React"], "requireAvailable": False, "limit": 5})
        assert args.require_available is False
        assert args.limit == 5

    @pytest.mark.parametrize("raw,field", [
        ({"skills": ["React"], "limit": 0}, "limit"),
        ({"skills": ["React"], "limit": 101}, "limit"),
        ({"skills": ["React"], "match_mode": "some"}, "match_mode"),
        ({"skills": ["React"], "year": 7}, "year"),
        ({"skills": 5}, "skills"),
    ])
    def test_invalid(self, tool, raw, field):
        with pytest.raises(ToolInputError) as exc_info:
            tool.validate_arguments(raw)
        assert any(d["field"].startswith(field) for d in exc_info.value.details)

    def test_not_an_object(self, tool):
        with pytest.raises(ToolInputError):
            tool.validate_arguments(["React"])

    def test_tool_max_limit_enforced(self, directory):
        tool = SearchCandidatesTool(directory, max_limit=10)
        with pytest.raises(ToolInputError):
            tool.validate_arguments({"skills": ["React"], "limit": 50})

    def test_default_limit_applied(self, directory):
        tool = SearchCandidatesTool(directory, default_limit=7)
        assert tool.validate_arguments({"skills": ["React"]}).limit == 7
