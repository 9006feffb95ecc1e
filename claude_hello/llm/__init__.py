from .anthropic import AnthropicClient
from .base import MessagesClient
from .factory import build_client
from .mock import MockClient

__all__ = ["AnthropicClient", "MessagesClient", "MockClient", "build_client"]
