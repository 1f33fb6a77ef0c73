"""Training plans: generate from a goal, read the current plan, export it."""

from typing import Annotated, Literal

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import PlainTextResponse, Response

from coach_running.api.deps import get_client_id, get_state_store
from coach_running.config import settings
from coach_running.core.rate_limit import limiter
from coach_running.schemas.goal import GoalInput
from coach_running.schemas.plan import Plan
from coach_running.services.app_state import StateStore, begin_generation, set_plan
from coach_running.services.mock_plan import provide_mock_plan
from coach_running.services.plan_acquisition import acquire_plan
from coach_running.services.plan_export import plan_to_csv, plan_to_text

router = APIRouter(prefix="/plans", tags=["plans"])


@router.post("/generate", response_model=Plan)
@limiter.limit(settings.plan_generate_rate_limit)
async def generate_plan(
    request: Request,
    goal: GoalInput,
    client_id: Annotated[str, Depends(get_client_id)],
    store: Annotated[StateStore, Depends(get_state_store)],
) -> Plan:
    """
    Build a plan for the submitted goal. Always answers with a plan: when Gemini is not
    configured or fails, the built-in plan is returned. One generation per client at a time.
    """
    state = store.get(client_id)
    if state.generating:
        raise HTTPException(status_code=409, detail="A plan is already being generated for this client.")
    store.put(client_id, begin_generation(state, goal))
    plan = None
    try:
        plan = await acquire_plan(goal)
    finally:
        # Clear the generating flag even if the request is cancelled mid-flight
        store.put(client_id, set_plan(store.get(client_id), plan))
    return plan


@router.get("/current", response_model=Plan)
async def get_current_plan(
    client_id: Annotated[str, Depends(get_client_id)],
    store: Annotated[StateStore, Depends(get_state_store)],
) -> Plan:
    plan = store.get(client_id).plan
    if plan is None:
        raise HTTPException(status_code=404, detail="No plan yet. Submit a goal first.")
    return plan


@router.get("/mock", response_model=Plan)
async def get_mock_plan() -> Plan:
    """The fallback plan, for offline previews."""
    return provide_mock_plan()


@router.get("/export")
async def export_current_plan(
    client_id: Annotated[str, Depends(get_client_id)],
    store: Annotated[StateStore, Depends(get_state_store)],
    export_format: Annotated[Literal["text", "csv"], Query(alias="format")] = "text",
    language: Annotated[str | None, Query(max_length=35)] = None,
) -> Response:
    """Current plan as share text (text/plain) or CSV attachment (text/csv)."""
    state = store.get(client_id)
    if state.plan is None:
        raise HTTPException(status_code=404, detail="No plan yet. Submit a goal first.")
    if language is None:
        language = state.goal.resolved_language if state.goal is not None else "fr"
    if export_format == "csv":
        return Response(
            plan_to_csv(state.plan, language),
            media_type="text/csv",
            headers={"Content-Disposition": "attachment; filename=training_plan.csv"},
        )
    return PlainTextResponse(plan_to_text(state.plan, state.goal, language))
