from __future__ import annotations
from datetime import datetime
from typing import Literal

from pydantic import Field

from .base import CamelModel


class ChatRequest(CamelModel):
    user_id: str | None = None
    message: str = Field(..., min_length=1)


class ChatReply(CamelModel):
    response: str


class ChatMessageOut(CamelModel):
    role: Literal["user", "ai"]
    content: str
    timestamp: int


class ChatSessionOut(CamelModel):
    id: str
    user_id: str | None
    messages: list[ChatMessageOut] | None
    created_at: datetime
