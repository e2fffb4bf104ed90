"""Tests for the Claude generation backend, using a stubbed SDK client."""

from types import SimpleNamespace

import anthropic
import httpx
import pytest

from feedback_analyzer.services import generation
from feedback_analyzer.services.generation import ClaudeGenerator, GenerationError, get_generator


class FakeMessages:

    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return SimpleNamespace(content=self.content)


def make_client(content=None, error=None):
    return SimpleNamespace(messages=FakeMessages(content=content, error=error))


def test_generate_returns_text():
    client = make_client(content=[SimpleNamespace(type="text", text="api_error")])
    generator = ClaudeGenerator(client=client, model="test-model")

    assert generator.generate("prompt text", 30) == "api_error"

    call = client.messages.calls[0]
    assert call["model"] == "test-model"
    assert call["max_tokens"] == 30
    assert call["messages"] == [{"role": "user", "content": "prompt text"}]


def test_api_error_wrapped():
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
    client = make_client(error=anthropic.APIConnectionError(request=request))
    generator = ClaudeGenerator(client=client)

    with pytest.raises(GenerationError):
        generator.generate("prompt text", 30)

    assert len(client.messages.calls) == 1  # no retries


def test_empty_content():
    generator = ClaudeGenerator(client=make_client(content=[]))

    with pytest.raises(GenerationError):
        generator.generate("prompt text", 30)


def test_non_text_block():
    block = SimpleNamespace(type="tool_use", id="toolu_1")
    generator = ClaudeGenerator(client=make_client(content=[block]))

    with pytest.raises(GenerationError):
        generator.generate("prompt text", 30)


def test_local_mode_without_key(monkeypatch):
    monkeypatch.setattr(generation, "ANTHROPIC_API_KEY", None)
    assert get_generator() is None


def test_claude_with_key(monkeypatch):
    monkeypatch.setattr(generation, "ANTHROPIC_API_KEY", "sk-test")
    assert isinstance(get_generator(), ClaudeGenerator)
