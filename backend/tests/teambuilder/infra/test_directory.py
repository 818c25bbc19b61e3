"""Tests for InMemoryUserDirectory."""

from __future__ import annotations

import json

import pytest

from teambuilder.core.errors import DirectoryError
from teambuilder.core.models import MatchMode, UserFilter, UserRecord
from teambuilder.infra.directory import InMemoryUserDirectory


def _ids(candidates):
    return [c.id for c in candidates]


class TestFindUsers:
    @pytest.mark.asyncio
    async def test_any_mode_substring_case_insensitive(self, directory):
        result = await directory.find_users(UserFilter(skills=["react", "node"]))
        # Karan matches both skills so ranks first; Neha is busy
        assert _ids(result) == ["u_karan", "u_priya", "u_rohit"]

    @pytest.mark.asyncio
    async def test_all_mode(self, directory):
        result = await directory.find_users(
            UserFilter(skills=["React", "Node.js"], match_mode=MatchMode.ALL)
        )
        assert _ids(result) == ["u_karan"]

    @pytest.mark.asyncio
    async def test_availability_filter(self, directory):
        available = await directory.find_users(UserFilter(skills=["React Native"]))
        anyone = await directory.find_users(UserFilter(skills=["React Native"], require_available=False))
        assert available == []
        assert _ids(anyone) == ["u_neha"]

    @pytest.mark.asyncio
    async def test_college_and_year(self, directory):
        result = await directory.find_users(UserFilter(college="iit", require_available=False))
        assert _ids(result) == ["u_karan"]
        result = await directory.find_users(UserFilter(year=2, require_available=False))
        assert _ids(result) == ["u_aditya"]

    @pytest.mark.asyncio
    async def test_limit(self, directory):
        result = await directory.find_users(UserFilter(skills=["React"], limit=1))
        assert len(result) == 1

    @pytest.mark.asyncio
    async def test_returns_public_projection(self, directory):
        result = await directory.find_users(UserFilter(skills=["Python"]))
        assert not hasattr(result[0], "email")
        assert not hasattr(result[0], "bio")

    @pytest.mark.asyncio
    async def test_ordering_is_stable(self, directory):
        f = UserFilter(skills=["React", "Node.js", "Python"])
        assert _ids(await directory.find_users(f)) == _ids(await directory.find_users(f))


class TestGetUser:
    @pytest.mark.asyncio
    async def test_known_and_unknown(self, directory):
        assert (await directory.get_user("u_priya")).name == "Priya Sharma"
        assert await directory.get_user("nope") is None


class TestLoading:
    def test_from_json_list(self, tmp_path):
        path = tmp_path / "users.json"
        path.write_text(json.dumps([
            {"id": "a", "name": "A", "skills": ["Go"]},
            {"id": "b", "name": "B", "availability": "busy", "year": 2},
        ]))
        directory = InMemoryUserDirectory.from_json_file(path)
        assert len(directory) == 2
        assert "b" in directory

    def test_from_json_mapping(self, tmp_path):
        path = tmp_path / "users.json"
        path.write_text(json.dumps({"a": {"name": "A"}, "b": {"name": "B"}}))
        assert len(InMemoryUserDirectory.from_json_file(path)) == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(DirectoryError):
            InMemoryUserDirectory.from_json_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "users.json"
        path.write_text("{not json")
        with pytest.raises(DirectoryError):
            InMemoryUserDirectory.from_json_file(path)

    def test_invalid_record(self, tmp_path):
        path = tmp_path / "users.json"
        path.write_text(json.dumps([{"id": "a", "name": "A", "year": 12}]))
        with pytest.raises(DirectoryError):
            InMemoryUserDirectory.from_json_file(path)

    @pytest.mark.parametrize("payload", [
        ["not-a-user"],
        [{"id": "a", "name": "A"}, 7],
        {"a": "Ada"},
    ])
    def test_non_object_entries(self, tmp_path, payload):
        path = tmp_path / "users.json"
        path.write_text(json.dumps(payload))
        with pytest.raises(DirectoryError):
            InMemoryUserDirectory.from_json_file(path)

    @pytest.mark.asyncio
    async def test_comma_separated_skills(self, tmp_path):
        path = tmp_path / "users.json"
        path.write_text(json.dumps([{"id": "a", "name": "A", "skills": "React, Go"}]))
        directory = InMemoryUserDirectory.from_json_file(path)
        assert (await directory.get_user("a")).skills == ["React", "Go"]

    def test_add_user_replaces_same_id(self):
        directory = InMemoryUserDirectory([UserRecord(id="a", name="Old")])
        directory.add_user(UserRecord(id="a", name="New"))
        assert len(directory) == 1
