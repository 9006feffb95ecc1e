from __future__ import annotations

from claude_hello.config import Settings

from .anthropic import AnthropicClient
from .base import MessagesClient
from .mock import MockClient


def build_client(settings: Settings) -> MessagesClient:
    backend = settings.backend
    if backend == "mock":
        return MockClient()
    if backend == "anthropic":
        # An empty key is passed through; the service answers with authentication_error.
        return AnthropicClient(
            api_key=settings.api_key,
            base_url=settings.base_url,
            anthropic_version=settings.anthropic_version,
            timeout_s=settings.timeout_s,
        )
    raise ValueError(f"unknown CLAUDE_HELLO_BACKEND={backend!r}, expected: anthropic|mock")
