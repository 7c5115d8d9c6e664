import asyncio
import json

import httpx
import pytest

from careerbridge.errors import ExplanationError
from careerbridge.services.hf_client import HuggingFaceClient, extract_generated_text, wrap_instruction


def _run(handler, api_key="hf_test"):
    async def go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            hf = HuggingFaceClient(api_key=api_key, model="org/model", base_url="https://hf.test/models", client=client)
            return await hf.generate("Explain the match.")
    return asyncio.run(go())


def test_array_payload():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=[{"generated_text": "  Solid fit.  "}])

    assert _run(handler) == "Solid fit."
    assert seen["url"] == "https://hf.test/models/org/model"
    assert seen["auth"] == "Bearer hf_test"
    assert seen["body"]["inputs"].startswith("<s>[INST] ")
    assert seen["body"]["inputs"].endswith("Explain the match. [/INST]")
    assert seen["body"]["parameters"]["return_full_text"] is False


def test_object_payload():
    assert _run(lambda r: httpx.Response(200, json={"generated_text": "ok"})) == "ok"


@pytest.mark.parametrize("response", [
    httpx.Response(503, json={"error": "Model is loading"}),
    httpx.Response(200, json={"error": "Model is loading"}),
    httpx.Response(200, json={"text": "wrong field"}),
    httpx.Response(200, json=[]),
    httpx.Response(200, json=[{"generated_text": 42}]),
    httpx.Response(200, text="<html>not json</html>"),
])
def test_bad_responses_raise(response):
    with pytest.raises(ExplanationError):
        _run(lambda r: response)


def test_transport_error_raises():
    def handler(request):
        raise httpx.ConnectError("boom", request=request)

    with pytest.raises(ExplanationError):
        _run(handler)


def test_missing_key_raises_without_calling():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={"generated_text": "x"})

    with pytest.raises(ExplanationError):
        _run(handler, api_key="")
    assert calls == []


def test_extract_generated_text_shapes():
    assert extract_generated_text([{"generated_text": " a "}]) == "a"
    assert extract_generated_text({"generated_text": "b"}) == "b"
    with pytest.raises(ExplanationError):
        extract_generated_text("nope")


def test_wrap_instruction():
    wrapped = wrap_instruction("task")
    assert wrapped.startswith("<s>[INST] You are a career advisor")
    assert wrapped.endswith("task [/INST]")
