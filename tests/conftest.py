"""Shared fixtures and configuration for tests."""

from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import anthropic
import httpx
import pytest
from langchain_core.messages import AIMessage

from model_probe.core.config import API_KEY_ENV_VARS


class FakeUpstream:
    """
    Deterministic stand-in for the Anthropic API.

    Acts as the chat-model factory: calling it with a model id returns a mock
    chat model whose ``invoke`` either answers or raises the configured error.
    """

    def __init__(self, failures: Optional[Dict[str, Exception]] = None):
        self.failures = failures or {}
        self.calls: List[str] = []
        self.client_kwargs: List[Dict[str, Any]] = []

    def __call__(self, model_id: str, **kwargs):
        self.client_kwargs.append(kwargs)
        model = MagicMock()
        model.invoke.side_effect = lambda messages: self._respond(model_id)
        return model

    def _respond(self, model_id: str) -> AIMessage:
        self.calls.append(model_id)
        if model_id in self.failures:
            raise self.failures[model_id]
        return AIMessage(
            content="Hello!",
            id=f"msg_{model_id}",
            response_metadata={"id": f"msg_{model_id}", "model": model_id},
            usage_metadata={"input_tokens": 8, "output_tokens": 3, "total_tokens": 11},
        )


def make_status_error(
    status_code: int,
    error_type: str,
    message: str,
    error_class: type = anthropic.APIStatusError,
) -> anthropic.APIStatusError:
    """Build a real SDK error the way the client raises it for an error response."""
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
    response = httpx.Response(status_code, request=request)
    body = {"type": "error", "error": {"type": error_type, "message": message}}
    return error_class(f"Error code: {status_code} - {body}", response=response, body=body)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep real credentials and local .env files out of every test."""
    for name in API_KEY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def upstream():
    """Upstream that answers for every model."""
    return FakeUpstream()


@pytest.fixture
def make_upstream():
    """Factory for upstreams with per-model failures."""
    return FakeUpstream


@pytest.fixture
def not_found_error():
    return make_status_error(404, "not_found_error", "model not found", anthropic.NotFoundError)


@pytest.fixture
def auth_error():
    return make_status_error(401, "authentication_error", "invalid x-api-key", anthropic.AuthenticationError)


@pytest.fixture
def status_error():
    """Factory for arbitrary structured API errors."""
    return make_status_error


# Test markers
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )
    config.addinivalue_line(
        "markers", "e2e: mark test as end-to-end test"
    )
