"""Tests for lenient JSON extraction."""

from __future__ import annotations

import pytest

from teambuilder.core.parsing import parse_json_object


class TestParseJsonObject:
    def test_plain_json(self):
        assert parse_json_object('{"tool": "none"}') == {"tool": "none"}

    def test_fenced_json_block(self):
        assert parse_json_object('```json\n{"tool":"none"}\n```') == {"tool": "none"}

    def test_bare_fence(self):
        text = 'Here you go:\n```\n{"tool": "search_candidates", "arguments": {}}\n```\nCheers'
        assert parse_json_object(text) == {"tool": "search_candidates", "arguments": {}}

    def test_json_wrapped_in_prose(self):
        assert parse_json_object('sure! {"tool":"none"}') == {"tool": "none"}

    def test_nested_object_in_prose(self):
        text = 'Plan: {"tool": "search_candidates", "arguments": {"skills": ["React"]}} done.'
        assert parse_json_object(text) == {
            "tool": "search_candidates",
            "arguments": {"skills": ["React"]},
        }

    def test_no_json(self):
        assert parse_json_object("no json here") is None

    @pytest.mark.parametrize("value", [None, "", "   ", 42, ["{}"]])
    def test_non_text_or_blank(self, value):
        assert parse_json_object(value) is None

    def test_object_inside_list_is_recovered(self):
        assert parse_json_object('[{"tool": "none"}]') == {"tool": "none"}

    def test_scalar_json_rejected(self):
        assert parse_json_object('"just a string"') is None

    def test_broken_json_returns_none(self):
        assert parse_json_object('{"tool": "none",') is None
