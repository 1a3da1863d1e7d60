"""
Pytest configuration and shared fixtures for chatstream tests.

Test Organization:
- tests/unit/ - Pure encoder, model and CLI tests, no external dependencies
"""

import pytest

from chatstream.models.response import ChatResponse, Generation, ToolCall, Usage


@pytest.fixture
def usage() -> Usage:
    """Usage with all three counters set."""
    return Usage(prompt_tokens=10, completion_tokens=15, total_tokens=25)


@pytest.fixture
def simple_response(usage: Usage) -> ChatResponse:
    """Single text generation with usage."""
    return ChatResponse(
        generations=[Generation(text="Hello, how can I help you today?")],
        usage=usage,
    )


@pytest.fixture
def tool_call_response() -> ChatResponse:
    """Two generations, each with text and tool calls."""
    return ChatResponse(
        generations=[
            Generation(
                text="Checking the weather.",
                tool_calls=[
                    ToolCall(id="call_1", name="get_weather", arguments='{"city":"Paris"}'),
                    ToolCall(id="call_2", name="get_time", arguments='{"tz":"CET"}'),
                ],
            ),
            Generation(
                text=None,
                tool_calls=[ToolCall(id="call_3", name="search", arguments="not json")],
            ),
        ],
        usage=Usage(prompt_tokens=20, completion_tokens=25, total_tokens=45),
    )


@pytest.fixture
def response_payload() -> dict:
    """Response as a plain JSON-style dict."""
    return {
        "generations": [
            {"text": "First message"},
            {"content": "Second message"},
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 20, "total_tokens": 30},
    }
