from __future__ import annotations

from typing import Protocol

from claude_hello.schema import MessageRequest, MessageResponse


class MessagesClient(Protocol):
    def send(self, request: MessageRequest) -> MessageResponse:
        """Perform one Messages API call. Raise ServiceError on failure."""
        raise NotImplementedError
