"""FastAPI dependencies: client id from header, shared state store."""

from typing import Annotated

from fastapi import Header, HTTPException

from coach_running.services.app_state import StateStore

_state_store = StateStore()


def get_state_store() -> StateStore:
    return _state_store


async def get_client_id(
    x_client_id: Annotated[str | None, Header()] = None,
) -> str:
    """Client id from X-Client-Id; one mobile install = one id. Missing header shares "default"."""
    if x_client_id is None:
        return "default"
    client_id = x_client_id.strip()
    if not client_id or len(client_id) > 128:
        raise HTTPException(status_code=400, detail="Invalid X-Client-Id header")
    return client_id
