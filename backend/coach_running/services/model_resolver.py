"""
Pick a Gemini model that supports generateContent from the models listing.
Any failure falls back to settings.gemini_default_model; this never raises.
"""
from __future__ import annotations

import logging
from typing import Any

import httpx
from prometheus_client import Counter

from coach_running.config import settings
from coach_running.services.gemini_common import (
    GENERATE_CONTENT_METHOD,
    list_models_url,
    log_response_error,
)
from coach_running.services.http_client import get_http_client

logger = logging.getLogger(__name__)

MODEL_RESOLUTIONS = Counter(
    "coach_model_resolutions_total",
    "Gemini model discovery results",
    ["outcome"],
)


def select_model(models: Any, family: str | None = None) -> str | None:
    """First entry (list order) whose name contains the family marker and that supports generateContent."""
    family = family or settings.gemini_model_family
    if not isinstance(models, list):
        return None
    for m in models:
        if not isinstance(m, dict):
            continue
        name = m.get("name")
        methods = m.get("supportedGenerationMethods") or []
        if isinstance(name, str) and family in name and GENERATE_CONTENT_METHOD in methods:
            return name
    return None


async def resolve_model(api_key: str, client: httpx.AsyncClient | None = None) -> str:
    """GET the models listing once with api_key and return a usable model id (e.g. "models/gemini-1.5-flash")."""
    default = settings.gemini_default_model
    url = list_models_url()
    try:
        client = client or get_http_client()
        r = await client.get(url, params={"key": api_key})
    except (httpx.HTTPError, RuntimeError) as e:
        logger.warning("Failed to list Gemini models (%s), using fallback %s", type(e).__name__, default)
        MODEL_RESOLUTIONS.labels(outcome="default").inc()
        return default
    if not r.is_success:
        log_response_error("GET", url, r)
        MODEL_RESOLUTIONS.labels(outcome="default").inc()
        return default
    try:
        data = r.json() if r.content else {}
    except ValueError:
        logger.warning("Gemini models listing is not JSON, using fallback %s", default)
        MODEL_RESOLUTIONS.labels(outcome="default").inc()
        return default
    name = select_model(data.get("models") if isinstance(data, dict) else None)
    if name is None:
        logger.warning("No suitable Gemini model found in list, using fallback %s", default)
        MODEL_RESOLUTIONS.labels(outcome="default").inc()
        return default
    logger.info("Selected Gemini model %s", name)
    MODEL_RESOLUTIONS.labels(outcome="resolved").inc()
    return name
