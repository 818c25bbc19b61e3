"""
InMemoryUserDirectory — the user directory the search tool queries.

Implements the UserDirectory Protocol over an insertion-ordered dict of
UserRecords. Only Candidate projections ever leave this module, so
email, bio and the rest of a record stay private.

Usage:
    directory = InMemoryUserDirectory.from_json_file("data/users.json")
    candidates = await directory.find_users(UserFilter(skills=["react"]))
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional

from teambuilder.core.errors import DirectoryError
from teambuilder.core.models import Availability, Candidate, MatchMode, UserFilter, UserRecord

logger = logging.getLogger(__name__)


def _skill_matches(needle: str, skills: list[str]) -> bool:
    """Case-insensitive substring match of one requested skill against a user's skills."""
    needle = needle.lower()
    return any(needle in s.lower() for s in skills)


class InMemoryUserDirectory:
    """
    Read-mostly in-process directory.

    Results are ranked by how many of the requested skills a user has
    (most first); ties keep insertion order, so the same query against
    an unchanged directory always returns the same list.
    """

    def __init__(self, users: Iterable[UserRecord] = ()):
        self._users: dict[str, UserRecord] = {}
        for user in users:
            self.add_user(user)

    # ============ Loading ============

    @classmethod
    def from_dicts(cls, items: Iterable[dict[str, Any]]) -> "InMemoryUserDirectory":
        return cls(UserRecord.from_dict(item) for item in items)

    @classmethod
    def from_json_file(cls, json_path: str | Path) -> "InMemoryUserDirectory":
        """
        Load users from a JSON file.

        Accepts a list of user objects, or an object mapping user id to
        user object.
        """
        path = Path(json_path)
        if not path.exists():
            raise DirectoryError(f"Directory file does not exist: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise DirectoryError(f"Directory file is not valid JSON: {path}") from e

        if isinstance(data, dict):
            bad = [uid for uid, item in data.items() if item is not None and not isinstance(item, dict)]
            if bad:
                raise DirectoryError(f"Directory entries must be objects: {', '.join(map(str, bad))}")
            items = [{"id": uid, **(item or {})} for uid, item in data.items()]
        elif isinstance(data, list):
            items = data
        else:
            raise DirectoryError(f"Directory file must hold a list or object: {path}")

        directory = cls.from_dicts(items)
        logger.info("Loaded %d users from %s", len(directory), path)
        return directory

    # ============ Mutation ============

    def add_user(self, user: UserRecord) -> None:
        if user.id in self._users:
            logger.debug("Replacing directory user %s", user.id)
        self._users[user.id] = user

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._users

    # ============ UserDirectory Protocol ============

    async def find_users(self, user_filter: UserFilter) -> list[Candidate]:
        scored: list[tuple[int, int, UserRecord]] = []
        for position, user in enumerate(self._users.values()):
            if user_filter.require_available and user.availability != Availability.AVAILABLE:
                continue
            if user_filter.college and user_filter.college.lower() not in user.college.lower():
                continue
            if user_filter.year is not None and user.year != user_filter.year:
                continue

            matched = sum(1 for s in user_filter.skills if _skill_matches(s, user.skills))
            if user_filter.skills:
                if user_filter.match_mode == MatchMode.ALL and matched < len(user_filter.skills):
                    continue
                if matched == 0:
                    continue
            scored.append((matched, position, user))

        scored.sort(key=lambda item: (-item[0], item[1]))
        return [user.to_candidate() for _, _, user in scored[: max(user_filter.limit, 0)]]

    async def get_user(self, user_id: str) -> Optional[Candidate]:
        user = self._users.get(user_id)
        return user.to_candidate() if user else None
