"""Data stream formatting functions.

Converts response parts to data stream records:
- Text: 0:"{escaped text}"\n
- Tool calls: 1:{json}\n
- Finish: 8:{json}\n

The format_* functions build payloads; write_record() frames them.

None of these raise on bad data. A payload that cannot be serialized is
replaced by a fixed fallback literal so the rest of the stream still gets
built.
"""

import json

from loguru import logger

from chatstream.models.response import ToolCall, Usage
from chatstream.streaming.events import (
    FINISH_FALLBACK,
    TOOL_CALL_FALLBACK,
    FinishEvent,
    ToolCallEvent,
    ToolCallFunction,
    UsagePayload,
)

_MANUAL_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
}


def write_record(buffer: list[str], tag: str, payload: str) -> None:
    """Append one ``{tag}:{payload}\\n`` record to the output buffer."""
    buffer.append(f"{tag}:{payload}\n")


def manual_escape(text: str) -> str:
    """Quote ``text`` as a JSON string without the json module.

    Escapes backslash, double quote, every control character below
    U+0020 and lone surrogates.
    """
    parts = []
    for char in text:
        if char in _MANUAL_ESCAPES:
            parts.append(_MANUAL_ESCAPES[char])
        elif char < " " or "\ud800" <= char <= "\udfff":
            parts.append(f"\\u{ord(char):04x}")
        else:
            parts.append(char)
    return '"' + "".join(parts) + '"'


def escape_json_string(text: str) -> str:
    """Return ``text`` as a JSON string literal, including the quotes.

    Non-ASCII text is kept as is. Text that cannot be written as UTF-8
    (lone surrogates) is escaped to ASCII instead. Falls back to
    manual_escape() if the json module rejects the value.
    """
    try:
        literal = json.dumps(text, ensure_ascii=False)
        try:
            literal.encode("utf-8")
        except UnicodeEncodeError:
            return json.dumps(text)
        return literal
    except (TypeError, ValueError) as e:
        logger.warning(f"JSON escaping failed, using manual escape: {e}")
        return manual_escape(str(text))


def format_tool_call(tool_call: ToolCall) -> str:
    """Build the JSON payload of a tool call record.

    Args:
        tool_call: Tool call to encode; arguments are passed through as a string

    Returns:
        JSON object string, or TOOL_CALL_FALLBACK if serialization fails
    """
    try:
        event = ToolCallEvent(
            id=tool_call.id,
            function=ToolCallFunction(name=tool_call.name, arguments=tool_call.arguments),
        )
        return event.model_dump_json(by_alias=True)
    except (TypeError, ValueError) as e:
        logger.warning(f"Failed to serialize tool call {tool_call.id!r}: {e}")
        return TOOL_CALL_FALLBACK


def format_finish(usage: Usage) -> str:
    """Build the JSON payload of the finish record.

    Callers skip the finish record when there is no usage, so ``usage``
    must not be None.

    Returns:
        JSON object string, or FINISH_FALLBACK if serialization fails

    Raises:
        ValueError: if usage is None
    """
    if usage is None:
        raise ValueError("usage is required for the finish record")

    try:
        event = FinishEvent(
            usage=UsagePayload(
                prompt_tokens=usage.prompt_tokens,
                completion_tokens=usage.completion_tokens,
                total_tokens=usage.total_tokens,
            )
        )
        return event.model_dump_json(by_alias=True)
    except (TypeError, ValueError) as e:
        logger.warning(f"Failed to serialize usage data: {e}")
        return FINISH_FALLBACK
