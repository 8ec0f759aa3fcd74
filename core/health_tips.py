"""
core/health_tips.py
────────────────────────────────────────────────────────────────────────
Three short health recommendations, either from Gemini or from a static
fallback table.

    fetch_tips()    → Ok(list[str]) | ExternalFailure   (one model call)
    resolve_tips()  → pure: the model's tips, or the fallback set
    get_recommendations() → the two combined; never raises on model failure

Fallback keys: nutrition · exercise · sleep · stress · hydration ·
general · bmi.  Unknown keys use `general`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Union

from pydantic import TypeAdapter, ValidationError

from config import settings
from core.errors import ExternalServiceFailure
from core.outcome import ExternalFailure, Ok, Outcome
from services import gemini

_LOG = logging.getLogger(__name__)

TIPS_PER_REQUEST = 3

SYSTEM_PROMPT = """You are a certified health and fitness expert. Provide practical, science-based health advice.
Keep recommendations specific, actionable, and safe. Always suggest consulting healthcare professionals when appropriate.

Return your response as a JSON array of exactly 3 strings, each containing one specific tip:
["tip 1", "tip 2", "tip 3"]"""

FALLBACK_TIPS: dict[str, tuple[str, ...]] = {
    "nutrition": (
        "Focus on eating whole, unprocessed foods like fruits, vegetables, lean proteins, and whole grains",
        "Practice portion control by using smaller plates and measuring your food portions",
        "Stay hydrated by drinking water before meals and throughout the day",
    ),
    "exercise": (
        "Start with 10-15 minutes of daily movement and gradually increase duration and intensity",
        "Include both cardiovascular exercise and strength training in your weekly routine",
        "Focus on proper form over intensity to prevent injuries and maximize effectiveness",
    ),
    "sleep": (
        "Maintain a consistent sleep schedule by going to bed and waking up at the same time daily",
        "Create a relaxing bedtime routine without screens for at least 30 minutes before sleep",
        "Keep your bedroom cool, dark, and quiet for optimal sleep quality",
    ),
    "stress": (
        "Practice deep breathing exercises for 5-10 minutes when feeling overwhelmed",
        "Incorporate regular physical activity as it naturally reduces stress hormones",
        "Set realistic daily goals and celebrate small achievements to build positive momentum",
    ),
    "hydration": (
        "Drink a glass of water first thing in the morning to kickstart your metabolism",
        "Carry a reusable water bottle and set hourly reminders to take sips throughout the day",
        "Monitor your urine color - pale yellow indicates good hydration levels",
    ),
    "general": (
        "Take short 5-minute movement breaks every hour during work or sedentary activities",
        "Practice gratitude by writing down three positive things from your day each evening",
        "Plan and prepare healthy meals in advance to avoid impulsive food choices",
    ),
    "bmi": (
        "Focus on gradual, sustainable changes rather than drastic dietary restrictions",
        "Incorporate regular physical activity that you enjoy to make it a long-term habit",
        "Consider consulting with a healthcare provider or registered dietitian for personalized guidance",
    ),
}
DEFAULT_KEY = "general"

_TIPS = TypeAdapter(list[str])


# ──────────────────────────────────────────────────────────────────────
#  Request contexts
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class BmiTipsContext:
    bmi: float
    category: str
    age: int | None = None
    gender: str | None = None

    @property
    def key(self) -> str:
        return "bmi"

    def prompt(self) -> str:
        return (
            "Generate 3 specific health recommendations for someone with:\n"
            f"- BMI: {self.bmi}\n"
            f"- Category: {self.category}\n"
            f"- Age: {self.age or 'not specified'}\n"
            f"- Gender: {self.gender or 'not specified'}\n\n"
            "Focus on actionable advice for improving health based on their BMI category."
        )


@dataclass(frozen=True)
class CategoryTipsContext:
    type: str
    user_profile: dict[str, Any] | None = None

    @property
    def key(self) -> str:
        return self.type

    def prompt(self) -> str:
        text = (
            f"Generate 3 specific, actionable health tips for the category: {self.type}.\n"
            "Make them practical and evidence-based. Focus on tips that can be implemented immediately."
        )
        details = {k: v for k, v in (self.user_profile or {}).items() if v not in (None, "", [])}
        if details:
            text += "\nTailor them to this person: " + ", ".join(
                f"{k}={v}" for k, v in details.items()
            )
        return text


TipsContext = Union[BmiTipsContext, CategoryTipsContext]


# ──────────────────────────────────────────────────────────────────────
#  Primary path / fallback / combined
# ──────────────────────────────────────────────────────────────────────
async def fetch_tips(
    context: TipsContext,
    generate: gemini.TextGenerator | None = None,
) -> Outcome[list[str]]:
    generate = generate or gemini.generate
    try:
        raw = await generate(
            SYSTEM_PROMPT,
            context.prompt(),
            model=settings.gemini_tips_model,
            response_schema=list[str],
        )
    except ExternalServiceFailure as e:
        return ExternalFailure(e.message)

    try:
        return Ok(validate_tips(gemini.extract_json(raw)))
    except (ValueError, ValidationError) as e:
        return ExternalFailure(f"malformed tips payload: {e}")


def validate_tips(payload: Any) -> list[str]:
    """Accept a JSON array of ≥1 non-blank strings; keep at most three."""
    tips = [t.strip() for t in _TIPS.validate_python(payload, strict=True)]
    if not tips or not all(tips):
        raise ValueError("expected a non-empty list of non-blank strings")
    return tips[:TIPS_PER_REQUEST]


def fallback_tips(key: str | None) -> list[str]:
    return list(FALLBACK_TIPS.get(key or DEFAULT_KEY, FALLBACK_TIPS[DEFAULT_KEY]))


def resolve_tips(outcome: Outcome[list[str]], key: str | None) -> list[str]:
    if isinstance(outcome, Ok):
        return list(outcome.value)
    return fallback_tips(key)


async def get_recommendations(
    context: TipsContext,
    generate: gemini.TextGenerator | None = None,
) -> list[str]:
    outcome = await fetch_tips(context, generate)
    if isinstance(outcome, ExternalFailure):
        _LOG.warning("health tips fallback (key=%s): %s", context.key, outcome.reason)
    return resolve_tips(outcome, context.key)
