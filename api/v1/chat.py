# api/v1/chat.py
from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends

from core.coach import ask_coach
from core.errors import ExternalServiceFailure
from core.models.chat import ChatMessage
from services.gemini import TextGenerator
from services.store import MemStore
from api.v1.deps import get_generator, get_store
from api.v1.schemas import ChatReply, ChatRequest, ChatSessionOut

_LOG = logging.getLogger(__name__)

router = APIRouter()


def _millis() -> int:
    return int(time.time() * 1000)


@router.get("/{user_id}", response_model=list[ChatSessionOut])
async def list_sessions(
    user_id: str,
    store: MemStore = Depends(get_store),
) -> list[ChatSessionOut]:
    return [
        ChatSessionOut.model_validate(s, from_attributes=True)
        for s in store.get_chat_sessions_by_user(user_id)
    ]


@router.post("", response_model=ChatReply)
async def send_message(
    body: ChatRequest,
    store: MemStore = Depends(get_store),
    generate: TextGenerator = Depends(get_generator),
) -> ChatReply:
    # 1) current session, or a new one
    sessions = store.get_chat_sessions_by_user(body.user_id) if body.user_id else []
    session = sessions[0] if sessions else store.create_chat_session(body.user_id)

    messages = list(session.messages or [])
    messages.append(ChatMessage(role="user", content=body.message, timestamp=_millis()))

    # 2) ask the coach (no fallback table for chat)
    try:
        reply = await ask_coach(body.message, generate)
    except ExternalServiceFailure as e:
        _LOG.warning("chat failed for session %s: %s", session.id, e.message)
        raise ExternalServiceFailure("Failed to process chat message") from e
    messages.append(ChatMessage(role="ai", content=reply, timestamp=_millis()))

    # 3) write back (last write wins if two requests raced)
    store.update_chat_session(session.id, messages)
    return ChatReply(response=reply)
