"""
Unit tests for chat response models.

The encoders accept ChatResponse instances, dicts, or any object with
the same attributes. These tests pin down the accepted shapes and
aliases.
"""

from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from chatstream.models.response import (
    ChatResponse,
    Generation,
    ToolCall,
    Usage,
    coerce_response,
)


class TestUsage:
    """Tests for Usage model."""

    def test_all_counters_optional(self):
        usage = Usage()
        assert usage.prompt_tokens is None
        assert usage.completion_tokens is None
        assert usage.total_tokens is None

    def test_generation_tokens_alias(self):
        usage = Usage.model_validate({"prompt_tokens": 1, "generation_tokens": 2, "total_tokens": 3})
        assert usage.completion_tokens == 2

    def test_camel_case_keys(self):
        usage = Usage.model_validate({"promptTokens": 1, "completionTokens": 2, "totalTokens": 3})
        assert (usage.prompt_tokens, usage.completion_tokens, usage.total_tokens) == (1, 2, 3)


class TestGeneration:
    """Tests for Generation model."""

    def test_content_alias(self):
        generation = Generation.model_validate({"content": "hi"})
        assert generation.text == "hi"

    def test_defaults(self):
        generation = Generation()
        assert generation.text is None
        assert generation.tool_calls is None

    def test_tool_calls_from_dicts(self):
        generation = Generation.model_validate(
            {"text": "x", "tool_calls": [{"id": "c1", "name": "f", "arguments": "{}"}]}
        )
        assert generation.tool_calls == [ToolCall(id="c1", name="f", arguments="{}")]


class TestCoerceResponse:
    """Tests for coerce_response."""

    def test_returns_same_instance(self, simple_response):
        assert coerce_response(simple_response) is simple_response

    def test_from_dict(self, response_payload):
        response = coerce_response(response_payload)

        assert [g.text for g in response.generations] == ["First message", "Second message"]
        assert response.usage.total_tokens == 30

    def test_results_alias(self):
        response = coerce_response({"results": [{"text": "hi"}]})
        assert response.generations[0].text == "hi"
        assert response.usage is None

    def test_from_attributes(self):
        """Objects from other clients validate by attribute name."""
        source = SimpleNamespace(
            results=[
                SimpleNamespace(
                    content="Let me check.",
                    tool_calls=[SimpleNamespace(id="call_1", name="lookup", arguments='{"q":1}')],
                )
            ],
            usage=SimpleNamespace(prompt_tokens=5, generation_tokens=6, total_tokens=11),
        )

        response = coerce_response(source)

        assert response.generations[0].text == "Let me check."
        assert response.generations[0].tool_calls[0].name == "lookup"
        assert response.usage.completion_tokens == 6

    def test_none_rejected(self):
        with pytest.raises(ValueError, match="response is required"):
            coerce_response(None)

    def test_none_generations_rejected(self):
        with pytest.raises(ValidationError):
            coerce_response({"generations": None})

    def test_missing_generations_rejected(self):
        with pytest.raises(ValidationError):
            coerce_response({"usage": {"total_tokens": 1}})

    def test_encoder_does_not_mutate(self, tool_call_response):
        from chatstream.streaming.core import encode_with_tool_calls

        before = tool_call_response.model_dump()
        encode_with_tool_calls(tool_call_response)
        assert tool_call_response.model_dump() == before

    def test_chat_response_requires_generations(self):
        with pytest.raises(ValidationError):
            ChatResponse()
