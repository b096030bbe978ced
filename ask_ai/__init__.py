"""
Ask AI - a chat-completion action for bot-automation hosts.

The action sends one prompt to an OpenAI-compatible chat-completion
endpoint and stores the answer in a host variable.
"""

from ask_ai.actions import (
    Action,
    ActionMetadata,
    ChatCompletionAction,
    ChatCompletionConfig,
    ERROR_MESSAGE,
    FieldDescriptor,
    FieldKind,
)
from ask_ai.bridge import Bridge, CallableBridge, MemoryBridge
from ask_ai.logging import get_logger, set_global_queue, StructuredLogger, LogLevel
from ask_ai.exceptions import (
    AskAIError,
    ConfigurationError,
    MissingFieldError,
    InvalidTokenLimitError,
    ModelError,
    ModelInvalidResponseError,
    get_user_message,
)
from ask_ai.model import ChatCompletionClient, ChatCompletionExchange
from ask_ai.tokens import estimate_token_count

__version__ = "0.1.0"
__all__ = [
    # Core
    "Action",
    "ActionMetadata",
    "ChatCompletionAction",
    "ChatCompletionConfig",
    "ERROR_MESSAGE",
    "FieldDescriptor",
    "FieldKind",
    "ChatCompletionClient",
    "ChatCompletionExchange",
    "estimate_token_count",
    # Host bridges
    "Bridge",
    "CallableBridge",
    "MemoryBridge",
    # Logging
    "get_logger",
    "set_global_queue",
    "StructuredLogger",
    "LogLevel",
    # Exceptions
    "AskAIError",
    "ConfigurationError",
    "MissingFieldError",
    "InvalidTokenLimitError",
    "ModelError",
    "ModelInvalidResponseError",
    "get_user_message",
]
