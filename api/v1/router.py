# api/v1/router.py
from fastapi import APIRouter

from . import bmi, chat, diet_plans, health_tips, profiles, users

api_router = APIRouter()

api_router.include_router(bmi.router, prefix="/bmi", tags=["BMI"])
api_router.include_router(health_tips.router, prefix="/health-tips", tags=["Health tips"])
api_router.include_router(diet_plans.router, prefix="/diet-plans", tags=["Diet plans"])
api_router.include_router(chat.router, prefix="/chat", tags=["Chat"])
api_router.include_router(profiles.router, prefix="/profile", tags=["Profiles"])
api_router.include_router(users.router, prefix="/users", tags=["Users"])
