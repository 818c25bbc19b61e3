"""
Shared test fixtures for the concierge tests.

Provides a scripted completion client, a scripted provider, a sample
directory, and factories for engines wired to them.
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional

import pytest

from teambuilder.builder import ConciergeBuilder
from teambuilder.core.engine import ConciergeEngine
from teambuilder.core.models import Availability, UserRecord
from teambuilder.infra.directory import InMemoryUserDirectory


# ============ Sample Data ============

def make_sample_users() -> list[UserRecord]:
    return [
        UserRecord(
            id="u_priya", name="Priya Sharma", email="priya@demo.com",
            skills=["React", "TypeScript", "Figma"], college="BIT Mesra", year=3,
            bio="2x hackathon winner.",
        ),
        UserRecord(
            id="u_rohit", name="Rohit Kumar", email="rohit@demo.com",
            skills=["Node.js", "Express", "MongoDB"], college="BIT Mesra", year=4,
        ),
        UserRecord(
            id="u_karan", name="Karan Patel", email="karan@demo.com",
            skills=["React", "Next.js", "Node.js"], college="IIT Delhi", year=3,
        ),
        UserRecord(
            id="u_aditya", name="Aditya Singh", email="aditya@demo.com",
            skills=["Python", "Machine Learning"], college="BIT Mesra", year=2,
        ),
        UserRecord(
            id="u_neha", name="Neha Gupta", email="neha@demo.com",
            skills=["React Native", "Flutter"], college="BIT Mesra", year=3,
            availability=Availability.BUSY,
        ),
    ]


# ============ Mock Completion Client ============

class MockCompletionClient:
    """
    Scripted TextCompleter.

    Responses are consumed in order; once exhausted every call returns
    the default (None unless set). Each call is recorded.
    """

    def __init__(self, responses: Optional[list[Optional[str]]] = None):
        self._responses: list[Optional[str]] = list(responses or [])
        self._default: Optional[str] = None
        self.calls: list[dict[str, Any]] = []

    def add_response(self, response: Optional[str]) -> None:
        self._responses.append(response)

    def set_default_response(self, response: Optional[str]) -> None:
        self._default = response

    async def complete(self, prompt: str, json_mode: bool = False) -> Optional[str]:
        self.calls.append({"prompt": prompt, "json_mode": json_mode})
        if self._responses:
            return self._responses.pop(0)
        return self._default


# ============ Mock Provider ============

class MockProvider:
    """Scripted CompletionProvider for CompletionClient tests."""

    def __init__(
        self,
        text: str = "ok",
        supports_json_mode: bool = True,
        error: Optional[Exception] = None,
        delay_s: float = 0.0,
    ):
        self.name = "mock"
        self.model = "mock-model"
        self.supports_json_mode = supports_json_mode
        self._text = text
        self._error = error
        self._delay_s = delay_s
        self.calls: list[dict[str, Any]] = []

    async def generate(self, prompt: str, json_mode: bool = False) -> str:
        self.calls.append({"prompt": prompt, "json_mode": json_mode})
        if self._delay_s:
            await asyncio.sleep(self._delay_s)
        if self._error is not None:
            raise self._error
        return self._text


# ============ Fixtures ============

@pytest.fixture
def sample_users() -> list[UserRecord]:
    return make_sample_users()


@pytest.fixture
def directory(sample_users) -> InMemoryUserDirectory:
    return InMemoryUserDirectory(sample_users)


@pytest.fixture
def mock_client() -> MockCompletionClient:
    return MockCompletionClient()


@pytest.fixture
def engine(mock_client, directory) -> ConciergeEngine:
    return (
        ConciergeBuilder()
        .with_completion_client(mock_client)
        .with_directory(directory)
        .build()
    )


@pytest.fixture
def client_factory():
    """Build extra scripted clients: client_factory(["resp1", None, ...])."""
    return MockCompletionClient


@pytest.fixture
def provider_factory():
    """Build scripted providers: provider_factory(text=..., error=..., delay_s=...)."""
    return MockProvider


@pytest.fixture
def build_engine(directory):
    """Engine factory for tests that need a specific client."""

    def _build(client, user_directory=None) -> ConciergeEngine:
        return (
            ConciergeBuilder()
            .with_completion_client(client)
            .with_directory(user_directory or directory)
            .build()
        )

    return _build
