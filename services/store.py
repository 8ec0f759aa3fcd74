"""
services/store.py
────────────────────────────────────────────────────────────────────────
* Volatile in-memory record store (lifetime = process lifetime)
* One dict per entity kind, keyed by a generated uuid
* Small DAO helpers used by routers

One `MemStore` is built per app in `main.create_app` and handed to the
routers through the `get_store` dependency.

Methods are synchronous: on the single event loop nothing interleaves
inside one call.  Callers that read, await, then write back (chat) can
still lose an update when two requests race on the same session; that is
accepted, last write wins.

A durable backend only has to offer the same create/get/update calls
keyed by id and by user id.
"""
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Iterable

from core.bmi import BmiResult
from core.models.bmi import BmiRecord
from core.models.chat import ChatMessage, ChatSession
from core.models.meal import DietPlan, Meal
from core.models.user import User, UserProfile

PROFILE_FIELDS = (
    "age",
    "gender",
    "height",
    "weight",
    "activity_level",
    "fitness_goals",
    "dietary_restrictions",
    "allergies",
)


# ───────── normalisation helpers ─────────────────────────────────────
def normalize_empty(value: Any) -> Any:
    """
    "Empty means unset": None, "", 0 and an empty list all become None.
    Lists keep only their string items (and are unset if none remain).
    """
    if isinstance(value, (list, tuple)):
        strings = [item for item in value if isinstance(item, str)]
        return strings or None
    if value is None or value == "":
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool) and value == 0:
        return None
    return value


def _normalized(fields: dict[str, Any], allowed: Iterable[str]) -> dict[str, Any]:
    return {k: normalize_empty(fields[k]) for k in allowed if k in fields}


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


# ───────── store ─────────────────────────────────────────────────────
class MemStore:
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._profiles: dict[str, UserProfile] = {}
        self._chat_sessions: dict[str, ChatSession] = {}
        self._diet_plans: dict[str, DietPlan] = {}
        self._bmi_records: dict[str, BmiRecord] = {}

    # ─── users ───────────────────────────────────────────────────────
    def get_user(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return next((u for u in self._users.values() if u.username == username), None)

    def create_user(self, username: str) -> User:
        user = User(id=_new_id(), username=username)
        self._users[user.id] = user
        return user

    # ─── profiles ────────────────────────────────────────────────────
    def get_user_profile(self, user_id: str) -> UserProfile | None:
        return next((p for p in self._profiles.values() if p.user_id == user_id), None)

    def create_user_profile(self, user_id: str, fields: dict[str, Any]) -> UserProfile:
        now = _now()
        profile = UserProfile(
            id=_new_id(),
            user_id=user_id,
            created_at=now,
            updated_at=now,
            **_normalized(fields, PROFILE_FIELDS),
        )
        self._profiles[profile.id] = profile
        return profile

    def update_user_profile(self, user_id: str, updates: dict[str, Any]) -> UserProfile | None:
        """Merge only the keys present in `updates`; missing profile → None."""
        existing = self.get_user_profile(user_id)
        if existing is None:
            return None

        changes = _normalized(updates, PROFILE_FIELDS)
        updated = UserProfile.model_validate(
            {**existing.model_dump(), **changes, "updated_at": _now()}
        )
        self._profiles[existing.id] = updated
        return updated

    # ─── chat sessions ───────────────────────────────────────────────
    def get_chat_session(self, session_id: str) -> ChatSession | None:
        return self._chat_sessions.get(session_id)

    def get_chat_sessions_by_user(self, user_id: str) -> list[ChatSession]:
        return [s for s in self._chat_sessions.values() if s.user_id == user_id]

    def create_chat_session(
        self,
        user_id: str | None,
        messages: list[ChatMessage] | None = None,
    ) -> ChatSession:
        session = ChatSession(
            id=_new_id(),
            user_id=user_id or None,
            messages=list(messages) if messages else None,
            created_at=_now(),
        )
        self._chat_sessions[session.id] = session
        return session

    def update_chat_session(
        self, session_id: str, messages: list[ChatMessage]
    ) -> ChatSession | None:
        existing = self._chat_sessions.get(session_id)
        if existing is None:
            return None
        updated = existing.model_copy(update={"messages": list(messages)})
        self._chat_sessions[session_id] = updated
        return updated

    # ─── diet plans ──────────────────────────────────────────────────
    def get_diet_plan(self, plan_id: str) -> DietPlan | None:
        return self._diet_plans.get(plan_id)

    def get_diet_plans_by_user(self, user_id: str) -> list[DietPlan]:
        return [p for p in self._diet_plans.values() if p.user_id == user_id]

    def create_diet_plan(
        self,
        goal: str,
        meals: list[Meal] | None,
        total_calories: float | None,
        user_id: str | None = None,
        diet_type: str | None = None,
    ) -> DietPlan:
        plan = DietPlan(
            id=_new_id(),
            user_id=user_id or None,
            goal=goal,
            diet_type=diet_type or None,
            meals=list(meals) if meals else None,
            total_calories=round(total_calories) if total_calories else None,
            created_at=_now(),
        )
        self._diet_plans[plan.id] = plan
        return plan

    # ─── bmi records ─────────────────────────────────────────────────
    def get_bmi_record(self, record_id: str) -> BmiRecord | None:
        return self._bmi_records.get(record_id)

    def get_bmi_records_by_user(self, user_id: str) -> list[BmiRecord]:
        return [r for r in self._bmi_records.values() if r.user_id == user_id]

    def create_bmi_record(
        self,
        height: float,
        weight: float,
        result: BmiResult,
        recommendations: list[str] | None = None,
        user_id: str | None = None,
    ) -> BmiRecord:
        record = BmiRecord(
            id=_new_id(),
            user_id=user_id or None,
            height=height,
            weight=weight,
            bmi=result.bmi,
            category=result.category,
            recommendations=normalize_empty(recommendations),
            created_at=_now(),
        )
        self._bmi_records[record.id] = record
        return record
