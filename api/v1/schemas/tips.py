from __future__ import annotations
from typing import Any

from .base import CamelModel


class HealthTipsRequest(CamelModel):
    category: str = "general"
    user_profile: dict[str, Any] | None = None


class HealthTipsOut(CamelModel):
    tips: list[str]
