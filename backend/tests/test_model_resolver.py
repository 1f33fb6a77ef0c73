"""Tests for Gemini model discovery: first match in list order, default on any failure."""

import httpx
import pytest
from prometheus_client import REGISTRY

from coach_running.config import settings
from coach_running.services.model_resolver import resolve_model, select_model


@pytest.mark.asyncio
async def test_picks_first_gemini_generate_content_model(gemini_stub, stub_http):
    assert await resolve_model("k", stub_http) == "models/gemini-1.5-flash"
    listing = gemini_stub.requests[0]
    assert listing.method == "GET"
    assert listing.url.path == "/v1beta/models"
    assert listing.url.params["key"] == "k"


@pytest.mark.asyncio
async def test_no_generate_content_capability_returns_default(gemini_stub, stub_http):
    gemini_stub.models_payload = {
        "models": [
            {"name": "models/gemini-embedding", "supportedGenerationMethods": ["embedContent"]},
            {"name": "models/text-bison-001", "supportedGenerationMethods": ["generateText"]},
        ]
    }
    assert await resolve_model("k", stub_http) == settings.gemini_default_model


@pytest.mark.asyncio
async def test_non_gemini_model_is_skipped(gemini_stub, stub_http):
    gemini_stub.models_payload = {
        "models": [
            {"name": "models/chat-bison-001", "supportedGenerationMethods": ["generateContent"]},
            {"name": "models/gemini-2.0-flash", "supportedGenerationMethods": ["generateContent"]},
        ]
    }
    assert await resolve_model("k", stub_http) == "models/gemini-2.0-flash"


@pytest.mark.asyncio
async def test_error_status_returns_default(gemini_stub, stub_http):
    gemini_stub.models_status = 400
    gemini_stub.models_payload = {"error": {"message": "API key not valid"}}
    assert await resolve_model("bad", stub_http) == "models/gemini-pro"


@pytest.mark.asyncio
async def test_missing_models_key_returns_default(gemini_stub, stub_http):
    gemini_stub.models_payload = {}
    assert await resolve_model("k", stub_http) == "models/gemini-pro"


@pytest.mark.asyncio
async def test_transport_error_returns_default():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as c:
        assert await resolve_model("k", c) == "models/gemini-pro"


@pytest.mark.asyncio
async def test_non_json_listing_returns_default():
    async with httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, text="oops"))) as c:
        assert await resolve_model("k", c) == "models/gemini-pro"


def test_select_model_ignores_malformed_entries():
    models = [None, "models/gemini-x", {"name": 42}, {"name": "models/gemini-ok", "supportedGenerationMethods": ["generateContent"]}]
    assert select_model(models) == "models/gemini-ok"
    assert select_model("not a list") is None


def _resolutions(outcome: str) -> float:
    return REGISTRY.get_sample_value("coach_model_resolutions_total", {"outcome": outcome}) or 0.0


@pytest.mark.asyncio
async def test_resolved_model_is_counted(stub_http):
    before = _resolutions("resolved")
    await resolve_model("k", stub_http)
    assert _resolutions("resolved") == before + 1


@pytest.mark.asyncio
@pytest.mark.parametrize("models_status,models_payload", [
    (403, {"error": {"code": 403}}),
    (200, {"models": []}),
    (200, {"unexpected": True}),
])
async def test_fallback_to_default_is_counted(gemini_stub, stub_http, models_status, models_payload):
    gemini_stub.models_status = models_status
    gemini_stub.models_payload = models_payload
    before = _resolutions("default")
    assert await resolve_model("k", stub_http) == settings.gemini_default_model
    assert _resolutions("default") == before + 1
