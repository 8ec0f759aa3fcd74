"""Re-export individual schema modules for easy imports."""

from .bmi import BmiRequest, BmiRecordOut
from .chat import ChatMessageOut, ChatReply, ChatRequest, ChatSessionOut
from .diet import DietPlanOut, DietPlanRequest, MealOut
from .profile import ProfileIn, ProfileOut, ProfileUpdate
from .tips import HealthTipsOut, HealthTipsRequest
from .user import UserCreate, UserOut

__all__ = [
    "BmiRequest",
    "BmiRecordOut",
    "ChatMessageOut",
    "ChatReply",
    "ChatRequest",
    "ChatSessionOut",
    "DietPlanOut",
    "DietPlanRequest",
    "MealOut",
    "ProfileIn",
    "ProfileOut",
    "ProfileUpdate",
    "HealthTipsOut",
    "HealthTipsRequest",
    "UserCreate",
    "UserOut",
]
