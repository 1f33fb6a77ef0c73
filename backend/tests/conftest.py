"""Pytest configuration and shared fixtures: Gemini stub transport, goals, API client."""

import os

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# No real key in tests: each test opts into the Gemini path explicitly
os.environ["GOOGLE_GEMINI_API_KEY"] = ""

from coach_running.api.deps import get_state_store
from coach_running.config import settings
from coach_running.core.rate_limit import limiter
from coach_running.main import app
from coach_running.schemas.goal import GoalInput
from coach_running.services.http_client import close_http_client, init_http_client
from gemini_fakes import GeminiStub


@pytest.fixture
def gemini_stub() -> GeminiStub:
    return GeminiStub()


@pytest_asyncio.fixture
async def stub_http(gemini_stub):
    """httpx.AsyncClient whose requests all go to gemini_stub."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(gemini_stub)) as c:
        yield c


@pytest.fixture
def goal() -> GoalInput:
    return GoalInput(
        distance="10k",
        target_time="50min",
        weeks=8,
        sessions_per_week=3,
        training_days=["monday", "wednesday", "saturday"],
        level="regular",
        language="en-US",
    )


@pytest.fixture
def goal_payload() -> dict:
    return {
        "distance": "half_marathon",
        "target_time": "1h45",
        "weeks": 10,
        "sessions_per_week": 3,
        "training_days": ["tuesday", "thursday", "sunday"],
        "level": "regular",
        "language": "fr-FR",
    }


@pytest.fixture
def gemini_key(monkeypatch):
    """Configure a (fake) Gemini key so plan generation takes the remote path."""
    monkeypatch.setattr(settings, "google_gemini_api_key", "test-gemini-key")
    return "test-gemini-key"


@pytest_asyncio.fixture
async def client(gemini_stub):
    """Yield AsyncClient for the app; the shared HTTP client talks to gemini_stub. State and limits reset."""
    await close_http_client()
    init_http_client(timeout=5.0, transport=httpx.MockTransport(gemini_stub))
    get_state_store().clear()
    limiter.enabled = False
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    limiter.enabled = True
    get_state_store().clear()
    await close_http_client()
