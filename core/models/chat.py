from datetime import datetime
from typing import Literal

from pydantic import BaseModel


class ChatMessage(BaseModel):
    role: Literal["user", "ai"]
    content: str
    timestamp: int     # epoch millis


class ChatSession(BaseModel):
    id: str
    user_id: str | None = None
    messages: list[ChatMessage] | None = None
    created_at: datetime
