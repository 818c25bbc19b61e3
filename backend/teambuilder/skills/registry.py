"""
ToolRegistry — the Tool Executor.

Holds the registered tools and runs them two ways:

- execute(plan): chat pipeline. Arguments are coerced, unknown tools and
  directory failures collapse to an empty result. Never raises for bad
  model output.
- invoke(name, arguments): direct access. Unknown tools raise
  ToolNotFoundError, bad arguments raise ToolInputError.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from ..core.errors import DirectoryError, ToolNotFoundError
from ..core.models import Plan, ToolName, ToolResult
from ..core.protocols import Tool

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Name -> tool mapping plus the two execution paths. Satisfies the Executor Protocol."""

    def __init__(self, tools: Iterable[Tool] = ()):
        self._tools: dict[str, Tool] = {}
        for tool in tools:
            self.register(tool)

    def register(self, tool: Tool) -> None:
        if tool.name == ToolName.NONE.value:
            raise ValueError("'none' is reserved and cannot be registered as a tool")
        if tool.name in self._tools:
            raise ValueError(f"Tool already registered: {tool.name}")
        self._tools[tool.name] = tool
        logger.debug("Registered tool %s", tool.name)

    def get(self, name: str) -> Optional[Tool]:
        return self._tools.get(name)

    @property
    def names(self) -> list[str]:
        return list(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def catalog(self) -> list[dict[str, Any]]:
        """Catalog entries in registration order, for the planner prompt."""
        return [tool.catalog_entry() for tool in self._tools.values()]

    # ============ Execution ============

    async def execute(self, plan: Plan) -> ToolResult:
        tool = self._tools.get(plan.tool.value)
        if tool is None:
            if plan.runs_tool:
                logger.warning("Plan selected unregistered tool %s", plan.tool.value)
            return ToolResult.empty()

        arguments = tool.coerce_arguments(plan.arguments)
        try:
            return await tool.run(arguments)
        except DirectoryError as e:
            logger.error("Tool %s: directory query failed: %s", tool.name, e)
            return ToolResult.empty()

    async def invoke(self, name: str, arguments: dict[str, Any]) -> ToolResult:
        tool = self._tools.get(name)
        if tool is None:
            raise ToolNotFoundError(f"Unknown tool: {name}")
        validated = tool.validate_arguments(arguments)
        logger.info("Direct invocation of %s", name)
        return await tool.run(validated)
