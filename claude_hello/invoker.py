from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from claude_hello.config import Settings
from claude_hello.errors import ResponseShapeError
from claude_hello.llm import MessagesClient
from claude_hello.schema import (
    MessageParam,
    MessageRequest,
    MessageResponse,
    OtherBlock,
    TextBlock,
    TextBlockParam,
    ToolUseBlock,
)

REPLY_LABEL = "답변: "


class InvokerState(str, Enum):
    IDLE = "idle"
    CALLING = "calling"
    DONE = "done"
    ABORTED = "aborted"


@dataclass(frozen=True)
class ChatReply:
    text: str
    request: MessageRequest
    response: MessageResponse


def format_reply(text: str) -> str:
    return f"{REPLY_LABEL}{text}"


def extract_first_text(response: MessageResponse) -> str:
    """Return the text of content block 0, or raise ResponseShapeError."""
    if not response.content:
        raise ResponseShapeError("response has no content blocks")
    block = response.content[0]
    if isinstance(block, TextBlock):
        return block.text
    if isinstance(block, ToolUseBlock):
        raise ResponseShapeError(f"first content block is tool_use ({block.name}), not text")
    if isinstance(block, OtherBlock):
        raise ResponseShapeError(f"first content block is {block.type!r}, not text")
    raise ResponseShapeError(f"first content block has unknown type {type(block).__name__}")


class ChatInvoker:
    """
    Sends the configured prompt as a single user message and returns the first text block.

    Each invoke() walks IDLE -> CALLING -> DONE | ABORTED and calls the client exactly once.
    """

    def __init__(self, client: MessagesClient, settings: Settings) -> None:
        self.client = client
        self.settings = settings
        self.state = InvokerState.IDLE

    def build_request(self) -> MessageRequest:
        return MessageRequest(
            model=self.settings.model,
            max_tokens=self.settings.max_tokens,
            messages=[
                MessageParam(role="user", content=[TextBlockParam(text=self.settings.prompt)]),
            ],
        )

    def invoke(self) -> ChatReply:
        self.state = InvokerState.CALLING
        try:
            request = self.build_request()
            response = self.client.send(request)
            text = extract_first_text(response)
        except Exception:
            self.state = InvokerState.ABORTED
            raise
        self.state = InvokerState.DONE
        return ChatReply(text=text, request=request, response=response)
