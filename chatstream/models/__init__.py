"""chatstream models."""

from chatstream.models.response import (
    ChatResponse,
    Generation,
    ToolCall,
    Usage,
    coerce_response,
)

__all__ = ["ChatResponse", "Generation", "ToolCall", "Usage", "coerce_response"]
