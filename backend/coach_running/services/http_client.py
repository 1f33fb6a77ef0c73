"""
Process-wide httpx.AsyncClient for Gemini (models listing + generateContent).
Opened in the app lifespan, closed on shutdown; tests open it on an httpx.MockTransport.
"""
from __future__ import annotations

import logging

import httpx

from coach_running.config import settings

# httpx logs every request URL at INFO, and Gemini URLs carry ?key=
logging.getLogger("httpx").setLevel(logging.WARNING)

GEMINI_HEADERS = {"Accept": "application/json", "User-Agent": "coach-running/0.1"}
CONNECT_TIMEOUT_SECONDS = 10.0

_http_client: httpx.AsyncClient | None = None


def get_http_client() -> httpx.AsyncClient:
    """Return the shared client. Raises RuntimeError if init_http_client() has not run."""
    if _http_client is None:
        raise RuntimeError("HTTP client not initialized; ensure app lifespan has run init_http_client().")
    return _http_client


def init_http_client(
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Open the shared client once; timeout defaults to settings.gemini_request_timeout_seconds."""
    global _http_client
    if _http_client is None:
        read_timeout = float(timeout if timeout is not None else settings.gemini_request_timeout_seconds)
        _http_client = httpx.AsyncClient(
            timeout=httpx.Timeout(read_timeout, connect=min(CONNECT_TIMEOUT_SECONDS, read_timeout)),
            headers=GEMINI_HEADERS,
            transport=transport,
        )
    return _http_client


async def close_http_client() -> None:
    global _http_client
    client, _http_client = _http_client, None
    if client is not None:
        await client.aclose()
