"""Data stream record types.

Each record on the wire is ``{tag}:{payload}\\n``. Tags are fixed:

- 0: text chunk, payload is a JSON string literal
- 1: tool call, payload is a ToolCallEvent
- 8: finish, payload is a FinishEvent

Envelopes are Pydantic models so the wire shape lives in one place.
"""

from pydantic import BaseModel, Field

TEXT_TAG = "0"
TOOL_CALL_TAG = "1"
FINISH_TAG = "8"

# Written verbatim when an envelope cannot be serialized
FINISH_FALLBACK = '{"type":"finish","error":"Failed to serialize usage data"}'
TOOL_CALL_FALLBACK = '{"type":"tool_call","error":"Failed to serialize tool call"}'


class UsagePayload(BaseModel):
    """Token counters inside the finish record. Missing counters stay null."""

    prompt_tokens: int | None = Field(default=None, serialization_alias="promptTokens")
    completion_tokens: int | None = Field(
        default=None, serialization_alias="completionTokens"
    )
    total_tokens: int | None = Field(default=None, serialization_alias="totalTokens")


class FinishEvent(BaseModel):
    """Tag 8 record."""

    type: str = "finish"
    usage: UsagePayload


class ToolCallFunction(BaseModel):
    """Function part of a tool call record.

    ``arguments`` stays a string, so it is re-escaped rather than embedded
    as raw JSON.
    """

    name: str | None = None
    arguments: str | None = None


class ToolCallEvent(BaseModel):
    """Tag 1 record."""

    type: str = "tool_call"
    id: str | None = None
    function: ToolCallFunction
