from .messages import (
    DEFAULT_MODEL,
    ContentBlock,
    MessageParam,
    MessageRequest,
    MessageResponse,
    Model,
    OtherBlock,
    TextBlock,
    TextBlockParam,
    ToolUseBlock,
    Usage,
)

__all__ = [
    "DEFAULT_MODEL",
    "ContentBlock",
    "MessageParam",
    "MessageRequest",
    "MessageResponse",
    "Model",
    "OtherBlock",
    "TextBlock",
    "TextBlockParam",
    "ToolUseBlock",
    "Usage",
]
