# services/gemini.py
import asyncio
import functools
import json
import logging
import re
from typing import Any, Awaitable, Protocol

from google import genai
from google.genai import types

from config import settings
from core.errors import ExternalServiceFailure

_LOG = logging.getLogger(__name__)

_FENCED_JSON = re.compile(r"```(?:json)?\s*([\[{][\s\S]*?[\]}])\s*```")


class TextGenerator(Protocol):
    def __call__(
        self,
        system_instruction: str,
        contents: str,
        *,
        model: str,
        response_schema: Any | None = None,
    ) -> Awaitable[str]: ...


# ───────────── API Key & Client ─────────────
@functools.lru_cache(maxsize=1)
def _client() -> genai.Client:
    if not settings.gemini_api_key:
        raise ExternalServiceFailure("GEMINI_API_KEY not set in environment")
    return genai.Client(api_key=settings.gemini_api_key)


# ───────────── Generation (async, bounded) ─────────────
async def generate(
    system_instruction: str,
    contents: str,
    *,
    model: str,
    response_schema: Any | None = None,
) -> str:
    """
    Run one Gemini completion and return its text.

    With `response_schema` the model is asked for JSON matching it.
    Every failure (missing key, transport, quota, timeout) surfaces as
    `ExternalServiceFailure`.
    """
    options: dict[str, Any] = {"system_instruction": system_instruction}
    if response_schema is not None:
        options.update(
            response_mime_type="application/json",
            response_schema=response_schema,
        )
    config = types.GenerateContentConfig(**options)

    try:
        resp = await asyncio.wait_for(
            _client().aio.models.generate_content(
                model=model,
                contents=contents,
                config=config,
            ),
            timeout=settings.gemini_timeout_seconds,
        )
    except ExternalServiceFailure:
        raise
    except asyncio.TimeoutError as e:
        raise ExternalServiceFailure(
            f"Gemini call timed out after {settings.gemini_timeout_seconds}s"
        ) from e
    except Exception as e:
        raise ExternalServiceFailure(f"Gemini generation failed: {e}") from e

    # empty text is returned as "", callers decide what that means
    text = resp.text or ""
    _LOG.debug("%s answered with %d chars", model, len(text))
    return text


# ───────────── JSON extraction ─────────────
def extract_json(raw: str) -> Any:
    """
    Decode a JSON payload from model text.

    Accepts bare JSON or JSON wrapped in a ```json fence; raises
    `ValueError` when neither decodes.
    """
    if not raw.strip():
        raise ValueError("Empty response from AI model")
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        pass

    match = _FENCED_JSON.search(raw)
    if not match:
        raise ValueError("No JSON block found in Gemini response")
    return json.loads(match.group(1))
