from __future__ import annotations

from claude_hello.schema import MessageRequest, MessageResponse, TextBlock, Usage


class MockClient:
    """Deterministic mock backend: useful to verify control-flow without the real API."""

    def __init__(self, *, reply_prefix: str = "[MOCK] ") -> None:
        self.reply_prefix = reply_prefix

    def send(self, request: MessageRequest) -> MessageResponse:
        # Echo the last user text back as a single text block.
        last_user = next((m for m in reversed(request.messages) if m.role == "user"), None)
        text = "".join(b.text for b in last_user.content) if last_user else ""
        return MessageResponse(
            id="msg_mock",
            model=request.model,
            content=[TextBlock(text=f"{self.reply_prefix}{text}")],
            stop_reason="end_turn",
            usage=Usage(input_tokens=len(text), output_tokens=len(text)),
        )
