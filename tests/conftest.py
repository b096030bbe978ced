"""
Pytest configuration and shared fixtures.
"""
import json
import sys
from pathlib import Path

import httpx
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


CHAT_URL = "https://api.example.com/v1/chat/completions"


# =============================================================================
# Field fixtures
# =============================================================================

@pytest.fixture
def action_values():
    """Provide raw field values as the host collects them."""
    return {
        "url": CHAT_URL,
        "key": "test-key-12345",
        "model": "test-model",
        "prompt": "hello",
        "systemPrompt": "You are a helpful bot.",
        "tokenLimit": "10",
        "exceededMessage": "Your prompt is too long!",
        "store": {"type": "temporary", "value": "answer"},
    }


@pytest.fixture
def memory_bridge():
    """Provide an in-memory host bridge."""
    from ask_ai.bridge import MemoryBridge
    return MemoryBridge()


# =============================================================================
# HTTP fixtures
# =============================================================================

@pytest.fixture
def mock_completion_response():
    """Provide a successful chat-completion body."""
    return {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "choices": [{
            "index": 0,
            "message": {"role": "assistant", "content": "Hi there!"},
            "finish_reason": "stop",
        }],
    }


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, status_code=200, body=None, content=None, error=None):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.body = body
        self.content = content
        self.error = error
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def sent_bodies(self) -> list[dict]:
        return [json.loads(request.content) for request in self.requests]


@pytest.fixture
def make_transport():
    """Factory for recording transports."""
    return RecordingTransport


@pytest.fixture
def make_action():
    """Build a ChatCompletionAction talking to the given transport."""
    from ask_ai.actions import ChatCompletionAction
    from ask_ai.config import HttpSettings
    from ask_ai.model import ChatCompletionClient

    def _make(transport):
        client = ChatCompletionClient(HttpSettings(), transport=transport)
        return ChatCompletionAction(client)

    return _make
