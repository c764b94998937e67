from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ApiError(Exception):
    """Failure reported by, or on the way to, the users endpoint."""

    code: str
    message: str
    details: object | None = None
    trace_id: str | None = None
    status_code: int = 0
    raw_payload: object | None = None

    def __str__(self) -> str:
        parts = [f"[{self.status_code}]" if self.status_code else "[no response]", f"{self.code}: {self.message}"]
        if self.trace_id:
            parts.append(f"trace_id={self.trace_id}")
        return " ".join(parts)


class ValidationError(ApiError):
    pass


class NotFoundError(ApiError):
    pass


class RateLimitError(ApiError):
    """429 throttling error."""


class ServerError(ApiError):
    """5xx server-side failures."""


class TransportError(ApiError):
    """Network/transport failure before an HTTP response was returned."""


class RecordSourceError(Exception):
    """The record source failed or returned data that is not a user list."""

    def __init__(self, message: str = "fetch failed", *, reason: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.message} ({self.reason})" if self.reason else self.message
