from __future__ import annotations

import time
import uuid
from dataclasses import dataclass
from typing import Any
from urllib.parse import urljoin

import requests
from requests.adapters import HTTPAdapter

from .config import TableConfig
from .error_mapper import map_error
from .exceptions import ApiError, TransportError

TRACE_HEADER = "X-Trace-ID"


@dataclass
class LastOperation:
    operation: str
    duration_ms: int
    result: str
    trace_id: str | None


@dataclass
class HttpClient:
    config: TableConfig
    session: requests.Session | None = None
    last_operation: LastOperation | None = None

    def __post_init__(self) -> None:
        if not self.config.api_base_url:
            raise ValueError("HttpClient requires an api_base_url")
        if self.session is None:
            self.session = requests.Session()
            adapter = HTTPAdapter()
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)

    def _build_url(self, path: str) -> str:
        base = (self.config.api_base_url or "").rstrip("/") + "/"
        return urljoin(base, path.lstrip("/"))

    def request(
        self,
        method: str,
        path: str,
        *,
        json_body: dict[str, Any] | None = None,
        retry: bool = False,
        operation: str = "unknown",
    ) -> dict[str, Any] | list[Any] | None:
        if self.session is None:
            raise RuntimeError("HTTP session not initialized")
        trace_id = str(uuid.uuid4())
        headers = {"Accept": "application/json", TRACE_HEADER: trace_id}
        normalized_method = method.upper()
        url = self._build_url(path)

        can_retry = normalized_method in {"GET", "HEAD"} or retry
        attempts = self.config.retries + 1 if can_retry else 1
        started = time.monotonic()
        response: requests.Response | None = None
        for attempt in range(attempts):
            try:
                response = self.session.request(
                    method=normalized_method,
                    url=url,
                    headers=headers,
                    json=json_body,
                    timeout=(self.config.connect_timeout_seconds, self.config.read_timeout_seconds),
                    verify=self.config.verify_ssl,
                )
            except requests.RequestException as exc:
                if attempt >= attempts - 1:
                    self._record_operation(operation, started, "error", trace_id)
                    raise TransportError(
                        code="TRANSPORT_ERROR",
                        message=str(exc),
                        details={"type": type(exc).__name__},
                        trace_id=trace_id,
                        status_code=0,
                        raw_payload=None,
                    ) from exc
            else:
                if response.status_code < 500 or attempt >= attempts - 1:
                    break
            time.sleep(self.config.retry_backoff_seconds * (2**attempt))

        if response is None:
            raise RuntimeError("HTTP request finished without a response")

        trace_id = response.headers.get(TRACE_HEADER) or trace_id
        if response.ok:
            self._record_operation(operation, started, "success", trace_id)
            if not response.content:
                return None
            try:
                return response.json()
            except ValueError as exc:
                raise ApiError(
                    code="INVALID_RESPONSE",
                    message="Response body is not JSON",
                    details={"content_type": response.headers.get("Content-Type")},
                    trace_id=trace_id,
                    status_code=response.status_code,
                    raw_payload=response.text,
                ) from exc

        try:
            payload = response.json()
        except ValueError:
            payload = {"message": response.text}
        self._record_operation(operation, started, "error", trace_id)
        raise map_error(response.status_code, payload if isinstance(payload, dict) else {}, trace_id)

    def _record_operation(self, operation: str, started: float, result: str, trace_id: str | None) -> None:
        self.last_operation = LastOperation(
            operation=operation,
            duration_ms=int((time.monotonic() - started) * 1000),
            result=result,
            trace_id=trace_id,
        )
