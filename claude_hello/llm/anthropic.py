from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError

from claude_hello.errors import ResponseShapeError, ServiceError
from claude_hello.schema import MessageRequest, MessageResponse


class AnthropicClient:
    """Minimal Anthropic Messages API client via raw HTTP. One POST per send, never retried."""

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = "https://api.anthropic.com/v1",
        anthropic_version: str = "2023-06-01",
        timeout_s: float = 600.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.anthropic_version = anthropic_version
        self.timeout_s = timeout_s
        self.transport = transport

    def send(self, request: MessageRequest) -> MessageResponse:
        url = f"{self.base_url}/messages"
        headers = {
            "x-api-key": self.api_key,
            "anthropic-version": self.anthropic_version,
            "content-type": "application/json",
        }
        try:
            with httpx.Client(timeout=self.timeout_s, transport=self.transport) as client:
                r = client.post(url, json=request.to_payload(), headers=headers)
        except httpx.HTTPError as e:
            raise ServiceError(str(e) or type(e).__name__) from e

        if r.is_error:
            raise _service_error(r)

        try:
            data = r.json()
        except ValueError as e:
            raise ResponseShapeError(f"response body is not valid JSON: {e}") from e
        try:
            return MessageResponse.model_validate(data)
        except ValidationError as e:
            raise ResponseShapeError(f"unexpected response shape: {e}") from e


def _service_error(r: httpx.Response) -> ServiceError:
    # Anthropic returns: {"type": "error", "error": {"type": "...", "message": "..."}}
    message: str | None = None
    error_type: str | None = None
    data: Any
    try:
        data = r.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        err = data.get("error")
        if isinstance(err, dict):
            message = err.get("message") or None
            error_type = err.get("type") or None
    if not message:
        message = r.text.strip() or f"HTTP {r.status_code}"
    return ServiceError(
        message,
        status_code=r.status_code,
        error_type=error_type,
        request_id=r.headers.get("request-id"),
    )
