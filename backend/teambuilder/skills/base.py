"""
Tool base class — shared infrastructure for planner-selectable tools.

Model output is untrusted. Every tool declares a pydantic argument model
and offers two ways in:

- coerce_arguments(): the chat pipeline path. Clamps, defaults and drops
  bad values so a sloppy plan still runs. Never raises.
- validate_arguments(): the direct invocation path. Anything out of
  shape is a ToolInputError carrying per-field details.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ValidationError

from ..core.errors import ToolInputError
from ..core.models import ToolResult


# ============ Coercion Helpers ============

def normalize_skills(values: Any) -> list[str]:
    """
    Trim skill strings, drop empties and case-insensitive duplicates.

    A bare string is treated as a comma-separated list.
    """
    if isinstance(values, str):
        values = values.split(",")
    if not isinstance(values, (list, tuple)):
        return []
    seen: set[str] = set()
    skills: list[str] = []
    for value in values:
        if value is None or isinstance(value, (dict, list)):
            continue
        skill = str(value).strip()
        if skill and skill.lower() not in seen:
            seen.add(skill.lower())
            skills.append(skill)
    return skills


def first_present(data: dict[str, Any], *keys: str) -> Any:
    """Value of the first key present in data (snake_case / camelCase spellings)."""
    for key in keys:
        if key in data:
            return data[key]
    return None


def coerce_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def coerce_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "yes", "1"):
            return True
        if lowered in ("false", "no", "0"):
            return False
    if isinstance(value, int):
        return bool(value)
    return default


def validation_details(error: ValidationError) -> list[dict[str, Any]]:
    """Flatten a pydantic ValidationError into {field, message} pairs."""
    return [
        {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
        for err in error.errors()
    ]


# ============ Base Tool ============

class BaseTool(ABC):
    """
    Abstract base class for all tools.

    Subclasses set arguments_model, description, triggers and
    argument_shape, and implement name, coerce_arguments() and run().
    """

    arguments_model: ClassVar[type[BaseModel]]
    description: ClassVar[str] = ""
    triggers: ClassVar[tuple[str, ...]] = ()
    argument_shape: ClassVar[dict[str, Any]] = {}

    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name as the planner emits it (e.g., 'search_candidates')."""
        ...

    @abstractmethod
    def coerce_arguments(self, raw: Any) -> BaseModel:
        """Normalize untrusted arguments into a valid model. Never raises."""
        ...

    @abstractmethod
    async def run(self, arguments: BaseModel) -> ToolResult:
        """Execute with already-normalized arguments."""
        ...

    def validate_arguments(self, raw: Any) -> BaseModel:
        """Strictly validate arguments, raising ToolInputError on any problem."""
        if not isinstance(raw, dict):
            raise ToolInputError(
                f"Arguments for {self.name} must be an object",
                [{"field": "", "message": "expected an object"}],
            )
        try:
            return self.arguments_model.model_validate(raw)
        except ValidationError as e:
            raise ToolInputError(f"Invalid arguments for {self.name}", validation_details(e)) from e

    def catalog_entry(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "triggers": list(self.triggers),
            "arguments": dict(self.argument_shape),
        }
