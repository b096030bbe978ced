"""Ask AI: prompt a chat-completion endpoint and store the answer."""

import math
from dataclasses import dataclass
from typing import Any, Mapping

from ask_ai.actions.base import Action
from ask_ai.actions.fields import ActionMetadata, FieldDescriptor, FieldKind
from ask_ai.bridge import Bridge
from ask_ai.exceptions import InvalidTokenLimitError
from ask_ai.logging import get_logger
from ask_ai.model import ChatCompletionClient, build_request_body
from ask_ai.tokens import estimate_token_count

# Module logger
logger = get_logger("ask_ai")

ERROR_MESSAGE = "Error with Chat Completion, please message the bot author!"


def parse_token_limit(value: Any) -> float:
    """
    Read a resolved Token Limit field as a number.

    A blank field reads as 0, so the guard always trips. Booleans read as
    0 and 1.

    Raises:
        InvalidTokenLimitError: If the value is not a finite-or-infinite number.
    """
    if isinstance(value, bool):
        number = int(value)
    elif isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            number = float(text)
        except ValueError:
            raise InvalidTokenLimitError("Token limit is not a number", value=value) from None
    else:
        raise InvalidTokenLimitError("Token limit is not a number", value=value)

    if math.isnan(number):
        raise InvalidTokenLimitError("Token limit is not a number", value=value)
    return number


@dataclass
class ChatCompletionConfig:
    """Resolved values of the action's fields."""

    url: str
    key: str
    model: str
    prompt: str
    system_prompt: str
    token_limit: float
    exceeded_message: str
    store: Any


class ChatCompletionAction(Action):
    """
    Send one prompt to a chat-completion endpoint and store the answer.

    Every run ends in exactly one ``bridge.store`` call, unless it fails with
    an exception:

    - estimated prompt tokens >= token limit: the exceeded message is stored
      and no request is made;
    - the endpoint answers with a non-2xx status: the failure is logged and
      ``ERROR_MESSAGE`` is stored;
    - otherwise the first choice's content is stored.

    Args:
        client: Chat-completion client. A default one is created if omitted.
    """

    data = ActionMetadata(name="Ask AI")
    fields = (
        FieldDescriptor("url", "API URL"),
        FieldDescriptor("key", "API Key", FieldKind.SECRET),
        FieldDescriptor("model", "Model"),
        FieldDescriptor("prompt", "Prompt"),
        FieldDescriptor("systemPrompt", "System Prompt"),
        FieldDescriptor("tokenLimit", "Token Limit"),
        FieldDescriptor("exceededMessage", "Message if Token Limit is exceeded"),
        FieldDescriptor("store", "Store response", FieldKind.STORAGE),
    )

    def __init__(self, client: ChatCompletionClient | None = None):
        self.client = client or ChatCompletionClient()

    def resolve(self, values: Mapping[str, Any], bridge: Bridge) -> ChatCompletionConfig:
        """Resolve raw field values through the bridge. ``store`` is passed through."""

        def resolved(store_as: str) -> Any:
            return bridge.transf(self.raw_value(values, store_as))

        return ChatCompletionConfig(
            url=resolved("url"),
            key=resolved("key"),
            model=resolved("model"),
            prompt=resolved("prompt"),
            system_prompt=resolved("systemPrompt"),
            token_limit=parse_token_limit(resolved("tokenLimit")),
            exceeded_message=resolved("exceededMessage"),
            store=self.raw_value(values, "store"),
        )

    async def run(self, values: Mapping[str, Any], bridge: Bridge) -> None:
        config = self.resolve(values, bridge)

        if estimate_token_count(config.prompt) >= config.token_limit:
            bridge.store(config.store, config.exceeded_message)
            return

        body = build_request_body(config.model, config.system_prompt, config.prompt)
        exchange = await self.client.complete(config.url, config.key, body)

        if not exchange.ok:
            logger.error(
                "Response resulted in a error. Please check error and look for "
                "any typos in configuration!",
                status=exchange.status_code,
                status_text=exchange.reason_phrase,
                response=repr(exchange.response),
                body=exchange.body,
            )
            bridge.store(config.store, ERROR_MESSAGE)
            return

        bridge.store(config.store, exchange.content)
