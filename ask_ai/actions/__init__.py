"""Host-invokable actions."""

from ask_ai.actions.ask_ai import ChatCompletionAction, ChatCompletionConfig, ERROR_MESSAGE
from ask_ai.actions.base import Action
from ask_ai.actions.fields import ActionMetadata, FieldDescriptor, FieldKind

__all__ = [
    "Action",
    "ActionMetadata",
    "ChatCompletionAction",
    "ChatCompletionConfig",
    "ERROR_MESSAGE",
    "FieldDescriptor",
    "FieldKind",
]
