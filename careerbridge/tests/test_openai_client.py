import asyncio
from types import SimpleNamespace

import pytest

from careerbridge.errors import ExplanationError
from careerbridge.services.openai_client import ChatCompletionClient


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _client(completions):
    fake = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return ChatCompletionClient(api_key="k", model="m", max_tokens=50, client=fake)


def test_generate_sends_system_and_user_messages():
    completions = FakeCompletions(content=" Nice fit. ")
    out = asyncio.run(_client(completions).generate("prompt body"))
    assert out == "Nice fit."
    roles = [m["role"] for m in completions.kwargs["messages"]]
    assert roles == ["system", "user"]
    assert completions.kwargs["model"] == "m"
    assert completions.kwargs["max_tokens"] == 50


def test_sdk_error_becomes_explanation_error():
    with pytest.raises(ExplanationError):
        _client(FakeCompletions(error=RuntimeError("429"))).get_completion("p")


def test_empty_content_is_an_error():
    with pytest.raises(ExplanationError):
        _client(FakeCompletions(content="")).get_completion("p")


def test_missing_key_is_an_error():
    with pytest.raises(ExplanationError):
        ChatCompletionClient(api_key="").get_completion("p")
