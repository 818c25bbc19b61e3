"""Tests for ToolRegistry (the Tool Executor)."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from teambuilder.core.errors import DirectoryError, ToolInputError, ToolNotFoundError
from teambuilder.core.models import Plan, ToolName, ToolResult, ToolResultKind
from teambuilder.core.protocols import Tool
from teambuilder.skills.draft import DraftMessageTool
from teambuilder.skills.registry import ToolRegistry
from teambuilder.skills.search import SearchCandidatesTool


class CannedDraftTool:
    """A Tool that does not derive from BaseTool."""

    name = "draft_message"

    def catalog_entry(self):
        return {"name": self.name, "description": "canned", "triggers": [], "arguments": {}}

    def coerce_arguments(self, raw):
        return raw if isinstance(raw, dict) else {}

    def validate_arguments(self, raw):
        return raw

    async def run(self, arguments):
        return ToolResult.of_draft(f"Hello {arguments.get('project_name', 'team')}")


@pytest.fixture
def registry(directory, mock_client):
    return ToolRegistry([SearchCandidatesTool(directory), DraftMessageTool(mock_client)])


class TestRegistration:
    def test_names_in_order(self, registry):
        assert registry.names == ["search_candidates", "draft_message"]
        assert "search_candidates" in registry
        assert len(registry) == 2

    def test_duplicate_rejected(self, registry, directory):
        with pytest.raises(ValueError):
            registry.register(SearchCandidatesTool(directory))

    def test_builtin_tools_satisfy_protocol(self, registry):
        for name in registry.names:
            assert isinstance(registry.get(name), Tool)

    @pytest.mark.asyncio
    async def test_protocol_only_tool_runs(self, directory):
        tool = CannedDraftTool()
        assert isinstance(tool, Tool)
        registry = ToolRegistry([SearchCandidatesTool(directory), tool])

        result = await registry.execute(Plan(tool=ToolName.DRAFT_MESSAGE, arguments={"project_name": "FinTrack"}))

        assert result.draft_text == "Hello FinTrack"
        assert registry.catalog()[1]["description"] == "canned"

    def test_catalog(self, registry):
        catalog = registry.catalog()
        assert [e["name"] for e in catalog] == ["search_candidates", "draft_message"]
        assert "find React devs" in catalog[0]["triggers"]
        assert "skills" in catalog[0]["arguments"]


class TestExecute:
    @pytest.mark.asyncio
    async def test_clamps_bad_arguments(self, registry):
        plan = Plan(tool=ToolName.SEARCH_CANDIDATES, arguments={"skills": ["React"], "limit": 9999})
        result = await registry.execute(plan)
        assert result.kind == ToolResultKind.CANDIDATES
        assert len(result.candidates) == 2

    @pytest.mark.asyncio
    async def test_none_plan_is_empty(self, registry):
        result = await registry.execute(Plan())
        assert result.kind == ToolResultKind.EMPTY

    @pytest.mark.asyncio
    async def test_unregistered_tool_is_empty(self, directory):
        registry = ToolRegistry([SearchCandidatesTool(directory)])
        result = await registry.execute(Plan(tool=ToolName.DRAFT_MESSAGE, arguments={}))
        assert result.kind == ToolResultKind.EMPTY

    @pytest.mark.asyncio
    async def test_directory_failure_absorbed(self, directory):
        directory.find_users = AsyncMock(side_effect=DirectoryError("db down"))
        registry = ToolRegistry([SearchCandidatesTool(directory)])

        result = await registry.execute(Plan(tool=ToolName.SEARCH_CANDIDATES, arguments={"skills": ["Go"]}))

        assert result.kind == ToolResultKind.EMPTY


class TestInvoke:
    @pytest.mark.asyncio
    async def test_unknown_tool(self, registry):
        with pytest.raises(ToolNotFoundError):
            await registry.invoke("delete_everyone", {})

    @pytest.mark.asyncio
    async def test_invalid_input_reported(self, registry):
        with pytest.raises(ToolInputError) as exc_info:
            await registry.invoke("search_candidates", {"skills": ["React"], "limit": 9999})
        assert exc_info.value.details[0]["field"] == "limit"

    @pytest.mark.asyncio
    async def test_same_args_same_result(self, registry):
        args = {"skills": ["React", "Node.js"], "match_mode": "any"}
        first = await registry.invoke("search_candidates", args)
        second = await registry.invoke("search_candidates", args)
        assert [c.id for c in first.candidates] == [c.id for c in second.candidates]
        assert first == second
