from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, PositiveInt, Tag


class Model(str, Enum):
    CLAUDE_3_5_HAIKU_20241022 = "claude-3-5-haiku-20241022"
    CLAUDE_3_5_SONNET_20241022 = "claude-3-5-sonnet-20241022"
    CLAUDE_3_7_SONNET_20250219 = "claude-3-7-sonnet-20250219"
    CLAUDE_SONNET_4_20250514 = "claude-sonnet-4-20250514"


DEFAULT_MODEL = Model.CLAUDE_3_5_HAIKU_20241022.value


# ---- request side ----


class TextBlockParam(BaseModel):
    type: Literal["text"] = "text"
    text: str


class MessageParam(BaseModel):
    role: Literal["user", "assistant"]
    content: list[TextBlockParam] = Field(min_length=1)


class MessageRequest(BaseModel):
    """Body of POST /v1/messages (non-streaming)."""

    model: str
    max_tokens: PositiveInt
    messages: list[MessageParam] = Field(min_length=1)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


# ---- response side ----


class TextBlock(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolUseBlock(BaseModel):
    type: Literal["tool_use"] = "tool_use"
    id: str
    name: str
    input: dict[str, Any] = Field(default_factory=dict)


class OtherBlock(BaseModel):
    """Any block type this package does not model (thinking, server tool results, ...)."""

    model_config = ConfigDict(extra="allow")

    type: str


def _block_tag(v: Any) -> str:
    t = v.get("type") if isinstance(v, dict) else getattr(v, "type", None)
    if t in ("text", "tool_use"):
        return t
    return "other"


ContentBlock = Annotated[
    Union[
        Annotated[TextBlock, Tag("text")],
        Annotated[ToolUseBlock, Tag("tool_use")],
        Annotated[OtherBlock, Tag("other")],
    ],
    Discriminator(_block_tag),
]


class Usage(BaseModel):
    input_tokens: int = 0
    output_tokens: int = 0


class MessageResponse(BaseModel):
    # Only `content` is required so that minimal stub replies validate.
    id: str | None = None
    type: str = "message"
    role: str = "assistant"
    model: str | None = None
    content: list[ContentBlock]
    stop_reason: str | None = None
    stop_sequence: str | None = None
    usage: Usage = Field(default_factory=Usage)
