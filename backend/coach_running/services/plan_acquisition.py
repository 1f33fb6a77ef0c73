"""
Plan acquisition: goal -> prompt -> Gemini model discovery -> generateContent -> validated Plan.

acquire_plan() is total: a missing API key, transport errors, non-2xx statuses, an empty
envelope and unparsable or off-schema JSON all end in the fixed mock plan. Which of these
happened is only visible in logs and in the coach_plan_acquisitions_total counter.
A plan whose single session says "ERROR: ..." (unrealistic goal) is returned as-is.
"""
from __future__ import annotations

import json
import logging

import httpx
from prometheus_client import Counter
from pydantic import ValidationError

from coach_running.config import settings
from coach_running.schemas.goal import GoalInput
from coach_running.schemas.plan import Plan
from coach_running.services.gemini_common import (
    extract_candidate_text,
    generate_content_body,
    generate_content_url,
    log_response_error,
    strip_code_fence,
)
from coach_running.services.http_client import get_http_client
from coach_running.services.localization import Localizer, goal_labels, translate
from coach_running.services.mock_plan import provide_mock_plan
from coach_running.services.model_resolver import resolve_model
from coach_running.services.prompt_builder import build_prompt

logger = logging.getLogger(__name__)

PLAN_ACQUISITIONS = Counter(
    "coach_plan_acquisitions_total",
    "Plan acquisitions by outcome (generated or reason for falling back to the mock plan)",
    ["outcome"],
)


class PlanGenerationError(Exception):
    """Remote generation failed. Never leaves this module."""

    def __init__(self, outcome: str, message: str):
        super().__init__(message)
        self.outcome = outcome


def parse_plan_text(text: str) -> Plan:
    """
    Parse the model's text into a Plan: strip ``` fences, json.loads, validate the
    {"weeks": [...]} schema. Sessions come back with completed=False.
    Raises PlanGenerationError("invalid_json" | "invalid_schema").
    """
    cleaned = strip_code_fence(text)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.warning("Gemini plan is not valid JSON (first 500 chars): %s", cleaned[:500])
        raise PlanGenerationError("invalid_json", f"Invalid JSON: {e.msg}") from e
    if not isinstance(data, dict) or "weeks" not in data:
        raise PlanGenerationError("invalid_schema", "Expected an object with a 'weeks' array")
    try:
        plan = Plan.model_validate({"weeks": data["weeks"]})
    except ValidationError as e:
        raise PlanGenerationError("invalid_schema", f"Plan does not match schema: {e.error_count()} error(s)") from e
    return plan.with_progress_reset()


async def _generate_plan(
    goal: GoalInput,
    api_key: str,
    client: httpx.AsyncClient,
    localizer: Localizer,
) -> Plan:
    language = goal.resolved_language
    labels = goal_labels(goal, language, localizer)
    prompt = build_prompt(goal, labels, language)
    model = await resolve_model(api_key, client)
    url = generate_content_url(model)
    logger.debug("Requesting plan from %s (%d weeks, language=%s)", url, goal.weeks, language)
    try:
        r = await client.post(
            url,
            params={"key": api_key},
            json=generate_content_body(prompt),
            headers={"Content-Type": "application/json"},
        )
    except httpx.HTTPError as e:
        raise PlanGenerationError("transport_error", type(e).__name__) from e
    if not r.is_success:
        log_response_error("POST", url, r)
        raise PlanGenerationError("http_error", f"Gemini API error: {r.status_code}")
    try:
        envelope = r.json()
    except ValueError as e:
        raise PlanGenerationError("empty_response", "Gemini response is not JSON") from e
    text = extract_candidate_text(envelope)
    if text is None:
        raise PlanGenerationError("empty_response", "No text in Gemini response")
    return parse_plan_text(text)


async def acquire_plan(
    goal: GoalInput,
    *,
    api_key: str | None = None,
    client: httpx.AsyncClient | None = None,
    localizer: Localizer = translate,
) -> Plan:
    """
    Return a training plan for goal; never raises.
    api_key defaults to settings.google_gemini_api_key, client to the shared httpx client.
    """
    key = (settings.google_gemini_api_key if api_key is None else api_key).strip()
    if not key:
        logger.info("Gemini API key not configured, using mock plan")
        PLAN_ACQUISITIONS.labels(outcome="no_api_key").inc()
        return provide_mock_plan()
    try:
        plan = await _generate_plan(goal, key, client or get_http_client(), localizer)
    except PlanGenerationError as e:
        logger.warning("Plan generation failed (%s): %s; falling back to mock plan", e.outcome, e)
        PLAN_ACQUISITIONS.labels(outcome=e.outcome).inc()
        return provide_mock_plan()
    except Exception:
        logger.exception("Unexpected error during plan generation; falling back to mock plan")
        PLAN_ACQUISITIONS.labels(outcome="unexpected_error").inc()
        return provide_mock_plan()
    logger.info("Generated %d-week plan", len(plan.weeks))
    PLAN_ACQUISITIONS.labels(outcome="generated").inc()
    return plan
