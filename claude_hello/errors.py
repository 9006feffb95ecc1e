from __future__ import annotations


class InvokerError(Exception):
    """Base class for every failure surfaced by a chat invocation."""


class ServiceError(InvokerError):
    """
    The send operation failed: network error, timeout, or a non-2xx reply
    (auth rejection, rate limit, overload, server error).

    str(err) is the service's own message, unwrapped.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        error_type: str | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_type = error_type
        self.request_id = request_id


class ResponseShapeError(InvokerError):
    """The reply arrived but its content is not what the invoker can print."""
