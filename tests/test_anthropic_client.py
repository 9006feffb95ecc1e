from __future__ import annotations

import json

import httpx
import pytest

from claude_hello.errors import ResponseShapeError, ServiceError
from claude_hello.llm import AnthropicClient
from claude_hello.schema import MessageParam, MessageRequest, TextBlock, TextBlockParam


def _request() -> MessageRequest:
    return MessageRequest(
        model="claude-3-5-haiku-20241022",
        max_tokens=2024,
        messages=[MessageParam(role="user", content=[TextBlockParam(text="MCP가 뭐야?")])],
    )


def _client(handler, **kw) -> tuple[AnthropicClient, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    client = AnthropicClient(api_key=kw.pop("api_key", "sk-test"), transport=httpx.MockTransport(record), **kw)
    return client, seen


def test_send_posts_messages_request():
    reply = {
        "id": "msg_1",
        "type": "message",
        "role": "assistant",
        "model": "claude-3-5-haiku-20241022",
        "content": [{"type": "text", "text": "MCP는 프로토콜입니다."}],
        "stop_reason": "end_turn",
        "usage": {"input_tokens": 10, "output_tokens": 7},
    }
    client, seen = _client(lambda r: httpx.Response(200, json=reply))

    resp = client.send(_request())

    assert isinstance(resp.content[0], TextBlock)
    assert resp.content[0].text == "MCP는 프로토콜입니다."
    assert len(seen) == 1
    sent = seen[0]
    assert sent.method == "POST"
    assert str(sent.url) == "https://api.anthropic.com/v1/messages"
    assert sent.headers["x-api-key"] == "sk-test"
    assert sent.headers["anthropic-version"] == "2023-06-01"
    assert sent.headers["content-type"] == "application/json"
    assert json.loads(sent.content) == _request().to_payload()


def test_base_url_trailing_slash_is_normalized():
    client, seen = _client(lambda r: httpx.Response(200, json={"content": []}), base_url="http://proxy.local/v1/")
    client.send(_request())
    assert str(seen[0].url) == "http://proxy.local/v1/messages"


def test_empty_api_key_is_sent_as_is():
    client, seen = _client(lambda r: httpx.Response(200, json={"content": []}), api_key="")
    client.send(_request())
    assert seen[0].headers["x-api-key"] == ""


def test_api_error_message_is_not_wrapped():
    body = {"type": "error", "error": {"type": "authentication_error", "message": "invalid x-api-key"}}
    client, _ = _client(lambda r: httpx.Response(401, json=body, headers={"request-id": "req_123"}))

    with pytest.raises(ServiceError) as ei:
        client.send(_request())

    err = ei.value
    assert str(err) == "invalid x-api-key"
    assert err.status_code == 401
    assert err.error_type == "authentication_error"
    assert err.request_id == "req_123"


def test_non_json_error_body_falls_back_to_text():
    client, _ = _client(lambda r: httpx.Response(502, text="Bad Gateway"))
    with pytest.raises(ServiceError, match="^Bad Gateway$") as ei:
        client.send(_request())
    assert ei.value.error_type is None


def test_empty_error_body_reports_status():
    client, _ = _client(lambda r: httpx.Response(500))
    with pytest.raises(ServiceError, match="^HTTP 500$"):
        client.send(_request())


@pytest.mark.parametrize("status, etype", [(429, "rate_limit_error"), (529, "overloaded_error")])
def test_retryable_statuses_are_not_retried(status, etype):
    body = {"type": "error", "error": {"type": etype, "message": "slow down"}}
    client, seen = _client(lambda r: httpx.Response(status, json=body))

    with pytest.raises(ServiceError, match="slow down"):
        client.send(_request())
    assert len(seen) == 1


def test_transport_failure_becomes_service_error():
    def boom(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client, seen = _client(boom)
    with pytest.raises(ServiceError, match="^connection refused$") as ei:
        client.send(_request())
    assert ei.value.status_code is None
    assert isinstance(ei.value.__cause__, httpx.ConnectError)
    assert len(seen) == 1


def test_invalid_json_body_is_a_shape_error():
    client, _ = _client(lambda r: httpx.Response(200, text="<html>oops</html>"))
    with pytest.raises(ResponseShapeError, match="not valid JSON"):
        client.send(_request())


def test_body_without_content_is_a_shape_error():
    client, _ = _client(lambda r: httpx.Response(200, json={"id": "msg_1", "type": "message"}))
    with pytest.raises(ResponseShapeError, match="unexpected response shape"):
        client.send(_request())
