from __future__ import annotations

from fastapi import APIRouter, Depends

from core.health_tips import CategoryTipsContext, get_recommendations
from services.gemini import TextGenerator
from api.v1.deps import get_generator
from api.v1.schemas import HealthTipsOut, HealthTipsRequest

router = APIRouter()


@router.post("", response_model=HealthTipsOut)
async def health_tips(
    body: HealthTipsRequest,
    generate: TextGenerator = Depends(get_generator),
) -> HealthTipsOut:
    tips = await get_recommendations(
        CategoryTipsContext(type=body.category, user_profile=body.user_profile),
        generate,
    )
    return HealthTipsOut(tips=tips)
