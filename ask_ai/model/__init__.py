"""Model client module for chat completions."""

from ask_ai.model.client import (
    ChatCompletionClient,
    ChatCompletionExchange,
    MessageBuilder,
    build_request_body,
)

__all__ = [
    "ChatCompletionClient",
    "ChatCompletionExchange",
    "MessageBuilder",
    "build_request_body",
]
