"""Pytest configuration and shared fixtures."""
import json
from typing import Any, Dict, List, Optional

import pytest

from openai_client import OpenAIClient
from openai_client.core.transport import Transport
from openai_client.models.internal import HTTPRequest, HTTPResponse


class MockTransport(Transport):
    """Transport that returns canned bytes without touching the network."""

    def __init__(self, data: Optional[bytes] = None, error: Optional[Exception] = None):
        self.mock_data = data
        self.mock_error = error
        self.requests: List[HTTPRequest] = []
        self.closed = False

    @property
    def last_request(self) -> Optional[HTTPRequest]:
        return self.requests[-1] if self.requests else None

    def respond_with(self, payload: Dict[str, Any]) -> None:
        self.mock_data = json.dumps(payload).encode("utf-8")

    async def send(self, request: HTTPRequest) -> HTTPResponse:
        self.requests.append(request)
        if self.mock_error is not None:
            raise self.mock_error
        return HTTPResponse(
            status=200,
            headers={"Content-Type": "application/json"},
            body=self.mock_data or b"",
        )

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def transport():
    return MockTransport()


@pytest.fixture
def client(transport):
    return OpenAIClient(api_token="test-token", transport=transport)


@pytest.fixture
def chat_result_payload():
    return {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "created": 1677652288,
        "model": "gpt-3.5-turbo-0301",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": "Hello there!"},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 9, "completion_tokens": 3, "total_tokens": 12},
    }


@pytest.fixture
def api_error_payload():
    return {
        "error": {
            "message": "x",
            "type": "y",
            "param": None,
            "code": None,
        }
    }
