"""
Lenient JSON extraction from model completions.

Models asked for JSON routinely wrap it in prose or a markdown fence.
parse_json_object() recovers the embedded object in three steps and
returns None when there is nothing to recover.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Optional

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json|JSON)?\s*\n?(.*?)\n?\s*```", re.DOTALL)
_BRACES_RE = re.compile(r"\{.*\}", re.DOTALL)


def _loads_object(text: str) -> Optional[dict[str, Any]]:
    try:
        value = json.loads(text)
    except (json.JSONDecodeError, ValueError):
        return None
    return value if isinstance(value, dict) else None


def parse_json_object(text: Any) -> Optional[dict[str, Any]]:
    """
    Extract a JSON object from raw completion text.

    Tries, in order:
    1. the whole text as JSON
    2. the first fenced code block (```json ... ``` or bare ```)
    3. the substring from the first '{' to the last '}'

    Only objects count: a bare list or scalar is treated as no match.
    Never raises.
    """
    if not isinstance(text, str) or not text.strip():
        return None

    stripped = text.strip()
    result = _loads_object(stripped)
    if result is not None:
        return result

    fence = _FENCE_RE.search(stripped)
    if fence:
        result = _loads_object(fence.group(1).strip())
        if result is not None:
            return result

    braces = _BRACES_RE.search(stripped)
    if braces:
        result = _loads_object(braces.group(0))
        if result is not None:
            return result

    logger.debug("No JSON object recovered from completion (len=%d)", len(stripped))
    return None
