"""Chat-completion client for OpenAI-compatible endpoints."""

from dataclasses import dataclass
from typing import Any

import httpx

from ask_ai.config import HttpSettings, settings as global_settings
from ask_ai.exceptions import ModelInvalidResponseError


@dataclass
class ChatCompletionExchange:
    """One request/response round-trip with the endpoint."""

    status_code: int
    reason_phrase: str
    body: Any
    response: httpx.Response

    @property
    def ok(self) -> bool:
        """Whether the endpoint answered with a 2xx status."""
        return 200 <= self.status_code < 300

    @property
    def content(self) -> str:
        """
        Text of the first choice.

        Raises:
            ModelInvalidResponseError: If the body has no choices[0].message.content.
        """
        try:
            return self.body["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ModelInvalidResponseError(
                "Response has no choices[0].message.content",
                status=self.status_code,
            ) from e


class ChatCompletionClient:
    """
    Sends a single chat-completion request.

    A fresh ``httpx.AsyncClient`` is opened per call, so one client object can
    serve concurrent invocations. The response body is parsed as JSON whatever
    the status; the caller decides what a failed status means.

    Args:
        http_settings: HTTP options. Defaults to the global settings.
        transport: Optional httpx transport, mostly for tests.
    """

    def __init__(
        self,
        http_settings: HttpSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.http_settings = http_settings or global_settings.http
        self.transport = transport

    def _client_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {}
        if self.transport is not None:
            options["transport"] = self.transport
        if self.http_settings.timeout is not None:
            options["timeout"] = self.http_settings.timeout
        return options

    async def complete(
        self, url: str, key: str, request_body: dict[str, Any]
    ) -> ChatCompletionExchange:
        """
        POST ``request_body`` to ``url``.

        Args:
            url: Full chat-completion endpoint URL.
            key: API key, sent as a bearer token.
            request_body: JSON payload.

        Returns:
            ChatCompletionExchange with the parsed body.

        Raises:
            httpx.HTTPError: If no response is received.
            json.JSONDecodeError: If the body is not JSON.
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {key}",
        }
        async with httpx.AsyncClient(**self._client_options()) as client:
            response = await client.post(url, headers=headers, json=request_body)

        body = response.json()
        return ChatCompletionExchange(
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            body=body,
            response=response,
        )


class MessageBuilder:
    """Helper class for building conversation messages."""

    @staticmethod
    def create_system_message(content: str) -> dict[str, Any]:
        """Create a system message."""
        return {"role": "system", "content": content}

    @staticmethod
    def create_user_message(content: str) -> dict[str, Any]:
        """Create a user message."""
        return {"role": "user", "content": content}


def build_request_body(model: str, system_prompt: str, prompt: str) -> dict[str, Any]:
    """Build the two-message request body: system first, then user."""
    return {
        "model": model,
        "messages": [
            MessageBuilder.create_system_message(system_prompt),
            MessageBuilder.create_user_message(prompt),
        ],
    }
