"""Shared fixtures: collaborator stubs standing in for the Messages API."""

from __future__ import annotations

import pytest

from claude_hello.config import Settings
from claude_hello.errors import ServiceError
from claude_hello.schema import MessageRequest, MessageResponse, TextBlock


class StubClient:
    """Records every request and replays a canned response or error."""

    def __init__(self, response: MessageResponse | None = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.requests: list[MessageRequest] = []

    def send(self, request: MessageRequest) -> MessageResponse:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def text_client() -> StubClient:
    return StubClient(response=MessageResponse(content=[TextBlock(text="X")]))


@pytest.fixture
def failing_client() -> StubClient:
    return StubClient(error=ServiceError("boom: invalid x-api-key", status_code=401, error_type="authentication_error"))


@pytest.fixture
def clean_env(monkeypatch):
    for key in (
        "CLAUDE_HELLO_BACKEND",
        "ANTHROPIC_API_KEY",
        "ANTHROPIC_BASE_URL",
        "CLAUDE_HELLO_ANTHROPIC_VERSION",
        "CLAUDE_HELLO_MODEL",
        "CLAUDE_HELLO_MAX_TOKENS",
        "CLAUDE_HELLO_PROMPT",
        "CLAUDE_HELLO_TIMEOUT_S",
        "CLAUDE_HELLO_LOG_DIR",
    ):
        # setenv first so teardown also removes values a .env file loads during the test
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch
