"""
Shared fixtures: an app with a fresh in-memory store and a scripted
stand-in for the Gemini call.
"""
from __future__ import annotations

import json
from typing import Any

import pytest
from fastapi.testclient import TestClient

from api.v1.deps import get_generator
from core.errors import ExternalServiceFailure
from main import create_app
from services.store import MemStore


class FakeGenerator:
    """Returns queued replies in order; an Exception in the queue is raised."""

    def __init__(self, *replies: Any) -> None:
        self.replies = list(replies)
        self.calls: list[dict[str, Any]] = []

    async def __call__(self, system_instruction, contents, *, model, response_schema=None):
        self.calls.append(
            {
                "system_instruction": system_instruction,
                "contents": contents,
                "model": model,
                "response_schema": response_schema,
            }
        )
        reply = self.replies.pop(0) if self.replies else ExternalServiceFailure("offline")
        if isinstance(reply, Exception):
            raise reply
        return reply if isinstance(reply, str) else json.dumps(reply)


def offline() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def store() -> MemStore:
    return MemStore()


@pytest.fixture
def generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def client(store: MemStore, generator: FakeGenerator) -> TestClient:
    app = create_app(store)
    app.dependency_overrides[get_generator] = lambda: generator
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
