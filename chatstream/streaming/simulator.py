"""
Data Stream Simulator - Sample Responses for UI Testing
=======================================================

Builds fixed chat responses and renders them with every encoder, so a UI
client (or a person reading the CLI output) can see the data stream format
without calling a model.

Sections produced by run_demo():
- Basic conversion: one text record plus the finish record
- Chunked conversion: the same text split into chunk_size pieces
- With tool calls: text record, tool call record, finish record
"""

from typing import Iterator

from chatstream.models.response import ChatResponse, Generation, ToolCall, Usage
from chatstream.streaming.core import encode, encode_chunked, encode_with_tool_calls

SAMPLE_TEXT = "Hello! I'm a helpful AI assistant. How can I help you today?"
SAMPLE_TOOL_TEXT = "I'll help you calculate that. Let me use the calculator tool."


def sample_response() -> ChatResponse:
    """Single text generation with usage."""
    return ChatResponse(
        generations=[Generation(text=SAMPLE_TEXT)],
        usage=Usage(prompt_tokens=12, completion_tokens=18, total_tokens=30),
    )


def sample_tool_call_response() -> ChatResponse:
    """Text generation that also calls a calculator tool."""
    return ChatResponse(
        generations=[
            Generation(
                text=SAMPLE_TOOL_TEXT,
                tool_calls=[
                    ToolCall(
                        id="call_123456",
                        name="calculator",
                        arguments='{"operation":"add","a":5,"b":3}',
                    )
                ],
            )
        ],
        usage=Usage(prompt_tokens=20, completion_tokens=25, total_tokens=45),
    )


def run_demo(chunk_size: int = 10) -> Iterator[tuple[str, str]]:
    """Yield (title, stream) pairs for each demo section."""
    response = sample_response()
    yield "Basic Conversion", encode(response)
    yield (
        f"Chunked Conversion ({chunk_size} chars per chunk)",
        encode_chunked(response, chunk_size),
    )
    yield "With Tool Calls", encode_with_tool_calls(sample_tool_call_response())
