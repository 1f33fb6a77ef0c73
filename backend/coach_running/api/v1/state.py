"""Client UI state: active tab, last goal, last plan, generation in progress."""

from typing import Annotated

from fastapi import APIRouter, Depends

from coach_running.api.deps import get_client_id, get_state_store
from coach_running.schemas.state import AppStateResponse, TabUpdate
from coach_running.services.app_state import StateStore, set_tab

router = APIRouter(prefix="/state", tags=["state"])


@router.get("", response_model=AppStateResponse)
async def get_state(
    client_id: Annotated[str, Depends(get_client_id)],
    store: Annotated[StateStore, Depends(get_state_store)],
) -> AppStateResponse:
    return store.get(client_id).to_response()


@router.put("/tab", response_model=AppStateResponse)
async def update_tab(
    body: TabUpdate,
    client_id: Annotated[str, Depends(get_client_id)],
    store: Annotated[StateStore, Depends(get_state_store)],
) -> AppStateResponse:
    state = store.put(client_id, set_tab(store.get(client_id), body.tab))
    return state.to_response()
