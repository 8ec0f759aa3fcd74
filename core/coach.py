"""Free-form chat with the FitGenius AI coach."""
from __future__ import annotations

from config import settings
from services import gemini

SYSTEM_PROMPT = """You are FitGenius AI, a professional fitness and nutrition coach. You provide personalized, science-based advice on:
- Workout routines and exercise techniques
- Nutrition and meal planning
- Health and wellness guidance
- Weight management strategies
- Fitness goal setting and tracking

Keep responses helpful, encouraging, and focused on health and fitness. Always recommend consulting healthcare professionals for medical concerns."""

EMPTY_REPLY = "I'm sorry, I couldn't process your request right now. Please try again."


async def ask_coach(message: str, generate: gemini.TextGenerator | None = None) -> str:
    # no fallback table for chat: ExternalServiceFailure propagates
    generate = generate or gemini.generate
    reply = await generate(SYSTEM_PROMPT, message, model=settings.gemini_chat_model)
    return reply.strip() or EMPTY_REPLY
