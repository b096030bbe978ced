"""
Exception hierarchy for the Ask AI action.

Only faults the action does not absorb itself live here. A tripped token
limit and a non-2xx response are normal outcomes that end in a stored
string; everything below propagates to the host's invocation wrapper.

The wrapper can turn any of them into text fit for the bot's user with
``get_user_message``; ``str(error)`` keeps the debugging context.

Usage:
    from ask_ai.exceptions import InvalidTokenLimitError, get_user_message

    raise InvalidTokenLimitError("Token limit is not a number", value="ten")

    # in the host's invocation wrapper
    try:
        await action.run(values, bridge)
    except Exception as e:
        reply(get_user_message(e))
"""

from typing import Any


class AskAIError(Exception):
    """
    Base exception for all Ask AI errors.

    Attributes:
        user_message: User-friendly error description
        context: Additional context for debugging
    """

    user_message: str = "An error occurred"

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.context = context

    def __str__(self) -> str:
        base = super().__str__()
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{base} ({ctx_str})"
        return base


# ============================================================================
# Configuration Errors
# ============================================================================

class ConfigurationError(AskAIError):
    """Base class for errors in the action's configured fields."""
    user_message = "The Ask AI action is misconfigured"


class MissingFieldError(ConfigurationError):
    """A declared field is absent from the values the host passed in."""
    user_message = "The Ask AI action is missing a configuration field"


class InvalidTokenLimitError(ConfigurationError):
    """
    The token limit field does not resolve to a number.

    Raised before any request is made.
    """
    user_message = "Token Limit must be a number"


# ============================================================================
# Model Errors
# ============================================================================

class ModelError(AskAIError):
    """Base class for chat-completion errors."""
    user_message = "AI model error"


class ModelInvalidResponseError(ModelError):
    """A successful response did not contain choices[0].message.content."""
    user_message = "AI returned an invalid response"


# ============================================================================
# Utility Functions
# ============================================================================

def get_user_message(error: Exception) -> str:
    """
    Get a user-friendly error message.

    Args:
        error: The exception

    Returns:
        User-friendly message string
    """
    if isinstance(error, AskAIError):
        return error.user_message
    return str(error)
