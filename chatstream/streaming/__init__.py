"""Data stream encoding for chat responses.

Wire format: one ``{tag}:{payload}\\n`` record per line.
- 0: text chunk (JSON string)
- 1: tool call (JSON object)
- 8: finish with token usage (JSON object)

Components:
- events.py: record tags, envelopes and fallback literals
- formatters.py: record writer, JSON escaping, payload builders
- core.py: the encoders
- simulator.py: sample responses for demos
"""

from chatstream.streaming.core import (
    chunk_text,
    encode,
    encode_chunked,
    encode_with_tool_calls,
)
from chatstream.streaming.events import (
    FINISH_FALLBACK,
    FINISH_TAG,
    TEXT_TAG,
    TOOL_CALL_FALLBACK,
    TOOL_CALL_TAG,
    FinishEvent,
    ToolCallEvent,
    ToolCallFunction,
    UsagePayload,
)
from chatstream.streaming.formatters import (
    escape_json_string,
    format_finish,
    format_tool_call,
    manual_escape,
    write_record,
)

__all__ = [
    # Encoders
    "encode",
    "encode_chunked",
    "encode_with_tool_calls",
    "chunk_text",
    # Record types
    "TEXT_TAG",
    "TOOL_CALL_TAG",
    "FINISH_TAG",
    "FINISH_FALLBACK",
    "TOOL_CALL_FALLBACK",
    "FinishEvent",
    "UsagePayload",
    "ToolCallEvent",
    "ToolCallFunction",
    # Formatters
    "write_record",
    "escape_json_string",
    "manual_escape",
    "format_tool_call",
    "format_finish",
]
