# api/v1/diet_plans.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from core.diet_plan import DietRequest, get_diet_plan
from core.models.meal import Meal
from services.gemini import TextGenerator
from services.store import MemStore
from api.v1.deps import get_generator, get_store
from api.v1.schemas import DietPlanOut, DietPlanRequest

router = APIRouter()


@router.get("/{user_id}", response_model=list[DietPlanOut])
async def list_user_plans(
    user_id: str,
    store: MemStore = Depends(get_store),
) -> list[DietPlanOut]:
    return [
        DietPlanOut.model_validate(p, from_attributes=True)
        for p in store.get_diet_plans_by_user(user_id)
    ]


@router.post("", response_model=DietPlanOut)
async def create_plan(
    body: DietPlanRequest,
    store: MemStore = Depends(get_store),
    generate: TextGenerator = Depends(get_generator),
) -> DietPlanOut:
    draft = await get_diet_plan(
        DietRequest(
            goal=body.goal,
            diet_type=body.diet_type,
            allergies=body.allergies,
            activity_level=body.activity_level,
        ),
        generate,
    )
    plan = store.create_diet_plan(
        goal=body.goal,
        meals=[Meal(**m.model_dump()) for m in draft.meals],
        total_calories=draft.total_calories,
        user_id=body.user_id,
        diet_type=body.diet_type,
    )
    return DietPlanOut.model_validate(plan, from_attributes=True)
