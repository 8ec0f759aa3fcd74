# api/v1/deps.py
from __future__ import annotations

from fastapi import Request

from services import gemini
from services.store import MemStore


def get_store(request: Request) -> MemStore:
    """The store built once in `main.create_app`."""
    return request.app.state.store


def get_generator() -> gemini.TextGenerator:
    return gemini.generate
