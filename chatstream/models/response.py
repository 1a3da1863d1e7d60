"""
Chat Response Models

The encoder reads a chat response as plain data: an ordered list of
generations (text plus optional tool calls) and optional token usage.

Any object exposing the same attribute names validates too, so responses
built by other clients (or test doubles) can be passed without copying
them into these classes first. Field aliases cover the common naming
variants (``content`` for ``text``, ``results`` for ``generations``,
``generation_tokens`` for ``completion_tokens``).
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Usage(BaseModel):
    """Token accounting for a single response. Every counter is optional."""

    model_config = ConfigDict(from_attributes=True)

    prompt_tokens: int | None = Field(
        default=None,
        validation_alias=AliasChoices("prompt_tokens", "promptTokens"),
    )
    completion_tokens: int | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "completion_tokens", "generation_tokens", "completionTokens"
        ),
    )
    total_tokens: int | None = Field(
        default=None,
        validation_alias=AliasChoices("total_tokens", "totalTokens"),
    )


class ToolCall(BaseModel):
    """A tool invocation requested by the model.

    ``arguments`` is kept as the raw string the model produced (usually
    JSON). It is never parsed.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str | None = None
    name: str | None = None
    arguments: str | None = None


class Generation(BaseModel):
    """One generated candidate: text and/or tool calls."""

    model_config = ConfigDict(from_attributes=True)

    text: str | None = Field(
        default=None,
        validation_alias=AliasChoices("text", "content"),
    )
    tool_calls: list[ToolCall] | None = Field(
        default=None,
        validation_alias=AliasChoices("tool_calls", "toolCalls"),
    )


class ChatResponse(BaseModel):
    """A complete chat response, in generation order."""

    model_config = ConfigDict(from_attributes=True)

    generations: list[Generation] = Field(
        ..., validation_alias=AliasChoices("generations", "results")
    )
    usage: Usage | None = None


def coerce_response(value: Any) -> ChatResponse:
    """Return ``value`` as a ChatResponse.

    Accepts a ChatResponse, a dict, or any object with matching attributes.

    Raises:
        ValueError: if ``value`` is None
        pydantic.ValidationError: if the shape is wrong (e.g. no generations)
    """
    if value is None:
        raise ValueError("response is required")
    if isinstance(value, ChatResponse):
        return value
    return ChatResponse.model_validate(value, from_attributes=True)
