import asyncio
import json

import httpx
import pytest

from src.adapters.gemini_advisory import DisabledAdvisory, GeminiAdvisoryAdapter, extract_text
from src.components.advisory import AdvisoryUnavailable


def gemini_reply(*texts: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": t} for t in texts]}}]}


def make_adapter(handler, api_key: str | None = "test-key") -> GeminiAdvisoryAdapter:
    return GeminiAdvisoryAdapter(
        api_key,
        model="gemini-test",
        endpoint="https://example.test/v1beta/",
        transport=httpx.MockTransport(handler),
    )


def test_generate_posts_prompt_and_returns_text():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=gemini_reply("- Cut ", "waste"))

    adapter = make_adapter(handler)
    text = asyncio.run(adapter.generate("How are sales?", system_instruction="Be brief"))

    assert text == "- Cut waste"
    request = seen[0]
    assert str(request.url) == "https://example.test/v1beta/models/gemini-test:generateContent"
    assert request.headers["x-goog-api-key"] == "test-key"
    body = json.loads(request.content)
    assert body["contents"][0]["parts"][0]["text"] == "How are sales?"
    assert body["systemInstruction"]["parts"][0]["text"] == "Be brief"


def test_missing_key_fails_without_request():
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json=gemini_reply("x"))

    with pytest.raises(AdvisoryUnavailable):
        asyncio.run(make_adapter(handler, api_key=None).generate("p"))
    assert calls == []


def test_http_error_status():
    adapter = make_adapter(lambda request: httpx.Response(503, text="overloaded"))
    with pytest.raises(AdvisoryUnavailable, match="503"):
        asyncio.run(adapter.generate("p"))


def test_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("no route", request=request)

    with pytest.raises(AdvisoryUnavailable, match="unreachable"):
        asyncio.run(make_adapter(handler).generate("p"))


def test_non_json_body():
    adapter = make_adapter(lambda request: httpx.Response(200, text="<html>"))
    with pytest.raises(AdvisoryUnavailable, match="not JSON"):
        asyncio.run(adapter.generate("p"))


def test_extract_text_rejects_unexpected_shape():
    with pytest.raises(AdvisoryUnavailable):
        extract_text({"candidates": []})


def test_disabled_advisory_always_unavailable():
    with pytest.raises(AdvisoryUnavailable):
        asyncio.run(DisabledAdvisory().generate("p"))
