"""
Data stream encoders.

Three encoders turn a ChatResponse into the full data stream as a single
string:

- encode(): one text record per generation
- encode_chunked(): text split into fixed-size chunks for progressive display
- encode_with_tool_calls(): text records plus one record per tool call

All three finish with the same usage record (tag 8), written last and only
when the response carries usage data.

RECORD ORDER
------------
Records follow generation order. Inside a generation, the text record(s)
come first, then its tool calls in their original order. Nothing is written
after the finish record.

Each call builds into its own buffer and returns the joined result, so the
encoders hold no state and can run concurrently on separate responses.
"""

from typing import Any

from loguru import logger

from chatstream.models.response import ChatResponse, Usage, coerce_response
from chatstream.streaming.events import FINISH_TAG, TEXT_TAG, TOOL_CALL_TAG
from chatstream.streaming.formatters import (
    escape_json_string,
    format_finish,
    format_tool_call,
    write_record,
)


def chunk_text(text: str, chunk_size: int) -> list[str]:
    """Split text into contiguous pieces of at most chunk_size characters.

    Args:
        text: Text to split
        chunk_size: Maximum characters per piece (must be positive)

    Returns:
        Pieces in order; joining them gives back ``text``. Empty text gives []

    Raises:
        ValueError: if chunk_size is not a positive integer
    """
    _check_chunk_size(chunk_size)
    return [text[i : i + chunk_size] for i in range(0, len(text), chunk_size)]


def _check_chunk_size(chunk_size: int) -> None:
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int):
        raise ValueError(f"chunk_size must be an integer, got {chunk_size!r}")
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")


def _write_finish(buffer: list[str], usage: Usage | None) -> None:
    """Write the finish record, or nothing when usage is absent."""
    if usage is not None:
        write_record(buffer, FINISH_TAG, format_finish(usage))


def _summarize(mode: str, buffer: list[str], response: ChatResponse) -> None:
    logger.debug(
        f"Encoded {mode} stream: {len(buffer)} records from "
        f"{len(response.generations)} generations"
    )


def encode(response: ChatResponse | Any) -> str:
    """Encode a response with one text record per generation.

    Args:
        response: ChatResponse, or a dict/object of the same shape

    Returns:
        Data stream string
    """
    response = coerce_response(response)
    buffer: list[str] = []

    for generation in response.generations:
        if generation.text:
            write_record(buffer, TEXT_TAG, escape_json_string(generation.text))

    _write_finish(buffer, response.usage)
    _summarize("plain", buffer, response)
    return "".join(buffer)


def encode_chunked(response: ChatResponse | Any, chunk_size: int) -> str:
    """Encode a response with text split into chunk_size pieces.

    Each piece becomes its own text record, escaped on its own.

    Args:
        response: ChatResponse, or a dict/object of the same shape
        chunk_size: Maximum characters per text record (must be positive)

    Returns:
        Data stream string

    Raises:
        ValueError: if chunk_size is not a positive integer
    """
    _check_chunk_size(chunk_size)
    response = coerce_response(response)
    buffer: list[str] = []

    for generation in response.generations:
        if generation.text:
            for chunk in chunk_text(generation.text, chunk_size):
                write_record(buffer, TEXT_TAG, escape_json_string(chunk))

    _write_finish(buffer, response.usage)
    _summarize("chunked", buffer, response)
    return "".join(buffer)


def encode_with_tool_calls(response: ChatResponse | Any) -> str:
    """Encode a response including its tool calls.

    Per generation: the full text record (if any), then one tool call
    record per tool call.

    Args:
        response: ChatResponse, or a dict/object of the same shape

    Returns:
        Data stream string
    """
    response = coerce_response(response)
    buffer: list[str] = []

    for generation in response.generations:
        if generation.text:
            write_record(buffer, TEXT_TAG, escape_json_string(generation.text))
        for tool_call in generation.tool_calls or []:
            write_record(buffer, TOOL_CALL_TAG, format_tool_call(tool_call))

    _write_finish(buffer, response.usage)
    _summarize("tool call", buffer, response)
    return "".join(buffer)
