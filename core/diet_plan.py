"""
core/diet_plan.py
────────────────────────────────────────────────────────────────────────
Daily meal plan from Gemini, with four static fallback plans keyed by
goal.  Same shape as `core.health_tips`:

    fetch_diet_plan() → Ok(PlanDraft) | ExternalFailure
    resolve_diet_plan() → pure: model plan, or fallback for the goal
    get_diet_plan()   → never raises on model failure

Fallback calorie bands (kcal/day, fixed reference values):
weight_loss 1350 · maintenance 1650 · muscle_gain 2100 · weight_gain 2370
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from config import settings
from core.errors import ExternalServiceFailure
from core.outcome import ExternalFailure, Ok, Outcome
from services import gemini

_LOG = logging.getLogger(__name__)


class MealItem(BaseModel):
    name: str = Field(min_length=1)
    food: str = Field(min_length=1)
    calories: float = Field(ge=0)


class PlanDraft(BaseModel):
    """Plan as produced by the model (or a fallback), before it is stored."""
    model_config = ConfigDict(populate_by_name=True)

    meals: list[MealItem] = Field(min_length=1)
    total_calories: float = Field(alias="totalCalories", ge=0)


@dataclass(frozen=True)
class DietRequest:
    goal: str
    diet_type: str | None = None
    allergies: str | None = None
    activity_level: str | None = None

    def system_prompt(self) -> str:
        return f"""You are a professional nutritionist creating personalized meal plans. Generate a daily diet plan with specific meals and calorie counts.

Requirements:
- Goal: {self.goal}
- Diet Type: {self.diet_type or 'No specific restrictions'}
- Allergies: {self.allergies or 'None'}
- Activity Level: {self.activity_level or 'Not specified'}

Provide a JSON response with exactly this structure:
{{
  "meals": [
    {{"name": "Breakfast", "food": "specific meal description", "calories": number}},
    {{"name": "Morning Snack", "food": "specific snack description", "calories": number}},
    {{"name": "Lunch", "food": "specific meal description", "calories": number}},
    {{"name": "Afternoon Snack", "food": "specific snack description", "calories": number}},
    {{"name": "Dinner", "food": "specific meal description", "calories": number}}
  ],
  "totalCalories": total_daily_calories
}}

Consider the goal when determining calories:
- Weight loss: 1400-1600 calories
- Weight gain: 2200-2500 calories
- Muscle gain: 2000-2300 calories
- Maintenance: 1800-2000 calories

Adjust based on activity level. Be specific with food items and portions."""

    def contents(self) -> str:
        return (
            f"Create a diet plan for: {self.goal}, diet type: {self.diet_type}, "
            f"allergies: {self.allergies}, activity: {self.activity_level}"
        )


# ───────────────────────── fallback plans ─────────────────────────────
def _plan(total: int, *meals: tuple[str, str, int]) -> PlanDraft:
    return PlanDraft(
        meals=[MealItem(name=n, food=f, calories=c) for n, f, c in meals],
        total_calories=total,
    )


FALLBACK_PLANS: dict[str, PlanDraft] = {
    "weight_loss": _plan(
        1350,
        ("Breakfast", "Greek yogurt with mixed berries and almonds", 280),
        ("Morning Snack", "Apple with 1 tbsp almond butter", 150),
        ("Lunch", "Grilled chicken salad with quinoa and vegetables", 420),
        ("Afternoon Snack", "Carrot sticks with hummus", 120),
        ("Dinner", "Baked salmon with roasted broccoli and sweet potato", 380),
    ),
    "weight_gain": _plan(
        2370,
        ("Breakfast", "Protein pancakes with banana and peanut butter", 520),
        ("Morning Snack", "Protein smoothie with berries", 250),
        ("Lunch", "Turkey and avocado wrap with whole grain tortilla", 680),
        ("Afternoon Snack", "Trail mix with nuts and dried fruit", 200),
        ("Dinner", "Lean beef with quinoa and steamed vegetables", 720),
    ),
    "muscle_gain": _plan(
        2100,
        ("Breakfast", "Oatmeal with protein powder and banana", 450),
        ("Morning Snack", "Cottage cheese with pineapple", 180),
        ("Lunch", "Chicken breast with brown rice and vegetables", 580),
        ("Pre-workout", "Banana with honey", 120),
        ("Post-workout", "Protein shake with chocolate milk", 250),
        ("Dinner", "Grilled fish with quinoa and asparagus", 520),
    ),
    "maintenance": _plan(
        1650,
        ("Breakfast", "Whole grain toast with avocado and eggs", 350),
        ("Morning Snack", "Greek yogurt with granola", 180),
        ("Lunch", "Quinoa bowl with chicken and mixed vegetables", 500),
        ("Afternoon Snack", "Handful of mixed nuts", 160),
        ("Dinner", "Grilled chicken with roasted vegetables", 460),
    ),
}
DEFAULT_GOAL = "maintenance"


# ───────────────────────── primary / resolve ──────────────────────────
async def fetch_diet_plan(
    request: DietRequest,
    generate: gemini.TextGenerator | None = None,
) -> Outcome[PlanDraft]:
    generate = generate or gemini.generate
    try:
        raw = await generate(
            request.system_prompt(),
            request.contents(),
            model=settings.gemini_plan_model,
            response_schema=PlanDraft,
        )
    except ExternalServiceFailure as e:
        return ExternalFailure(e.message)

    try:
        return Ok(PlanDraft.model_validate(gemini.extract_json(raw)))
    except (ValueError, ValidationError) as e:
        return ExternalFailure(f"malformed diet plan payload: {e}")


def fallback_plan(goal: str | None) -> PlanDraft:
    plan = FALLBACK_PLANS.get(goal or DEFAULT_GOAL, FALLBACK_PLANS[DEFAULT_GOAL])
    return plan.model_copy(deep=True)


def resolve_diet_plan(outcome: Outcome[PlanDraft], goal: str | None) -> PlanDraft:
    if isinstance(outcome, Ok):
        return outcome.value
    return fallback_plan(goal)


async def get_diet_plan(
    request: DietRequest,
    generate: gemini.TextGenerator | None = None,
) -> PlanDraft:
    outcome = await fetch_diet_plan(request, generate)
    if isinstance(outcome, ExternalFailure):
        _LOG.warning("diet plan fallback (goal=%s): %s", request.goal, outcome.reason)
    return resolve_diet_plan(outcome, request.goal)
