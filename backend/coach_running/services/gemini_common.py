"""
Shared helpers for the Gemini REST API (v1beta): endpoint URLs, request body,
reading the generated text out of the response envelope, and unwrapping ```json fences.
"""
from __future__ import annotations

import logging
import re
from typing import Any

import httpx

from coach_running.config import settings

logger = logging.getLogger(__name__)

GENERATE_CONTENT_METHOD = "generateContent"

_LEADING_FENCE = re.compile(r"^```[A-Za-z0-9_-]*[ \t]*\n?")
_TRAILING_FENCE = re.compile(r"\n?```\s*$")


def api_base_url() -> str:
    return settings.gemini_api_base_url.rstrip("/")


def list_models_url() -> str:
    return f"{api_base_url()}/models"


def generate_content_url(model: str) -> str:
    """Model ids come back from the listing as "models/<name>"; bare names get the prefix."""
    model = model.strip().strip("/")
    if not model.startswith("models/"):
        model = f"models/{model}"
    return f"{api_base_url()}/{model}:{GENERATE_CONTENT_METHOD}"


def generate_content_body(prompt: str) -> dict[str, Any]:
    return {"contents": [{"parts": [{"text": prompt}]}]}


def extract_candidate_text(envelope: Any) -> str | None:
    """candidates[0].content.parts[0].text, or None when any level is missing or empty."""
    if not isinstance(envelope, dict):
        return None
    candidates = envelope.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None
    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return None
    text = parts[0].get("text")
    if not isinstance(text, str) or not text.strip():
        return None
    return text


def strip_code_fence(text: str) -> str:
    """Remove an enclosing ``` / ```json fence; text without a leading fence is only trimmed."""
    text = text.strip()
    if text.startswith("```"):
        text = _LEADING_FENCE.sub("", text, count=1)
        text = _TRAILING_FENCE.sub("", text, count=1)
    return text.strip()


def log_response_error(method: str, url: str, response: httpx.Response) -> None:
    """Log HTTP error without sensitive data (the key travels in params, not in url)."""
    body = (response.text or "")[:500]
    logger.warning(
        "Gemini %s %s -> %s body=%s",
        method,
        url,
        response.status_code,
        body,
    )
