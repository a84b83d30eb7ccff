# util/errors.py
from fastapi import HTTPException, status

from util.enums import ErrorMessage


class AppError(HTTPException):
    # Flow: raise AppError to short-circuit with a typed status & message.
    def __init__(
        self, message: str, http_status: int = status.HTTP_400_BAD_REQUEST
    ) -> None:
        super().__init__(status_code=http_status, detail=message)

    @classmethod
    def of(cls, error: ErrorMessage, detail: object | None = None) -> "AppError":
        """Build from an ErrorMessage entry, optionally suffixed with `: <detail>`."""
        message = error.value.message
        if detail is not None:
            message = f"{message}: {detail}"
        return cls(message, error.value.http_status)


# Upstream failures raised by core/ and mapped to AppError in service/.


class UpstreamError(Exception):
    """The management API answered with a non-success status."""

    def __init__(self, operation: str, status_code: int, status_text: str) -> None:
        self.operation = operation
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(f"Failed to {operation}: {status_text}")


class MalformedPayloadError(UpstreamError):
    """A 2xx response whose body does not match the expected envelope."""

    def __init__(self, operation: str, status_code: int, reason: str) -> None:
        super().__init__(operation, status_code, f"malformed response ({reason})")


class ProtocolError(UpstreamError):
    """Pagination metadata that would keep the aggregation loop from ending."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(operation, 200, reason)


class TransportError(Exception):
    """No response was received from the management API."""

    def __init__(self, operation: str, cause: Exception) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"Failed to {operation}: {type(cause).__name__}")
