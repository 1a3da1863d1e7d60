"""chatstream - Encode chat responses as an AI data stream."""

__version__ = "0.1.0"

from chatstream.models.response import ChatResponse, Generation, ToolCall, Usage
from chatstream.streaming.core import encode, encode_chunked, encode_with_tool_calls

__all__ = [
    "ChatResponse",
    "Generation",
    "ToolCall",
    "Usage",
    "encode",
    "encode_chunked",
    "encode_with_tool_calls",
]
