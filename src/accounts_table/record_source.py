from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Protocol

from pydantic import ValidationError as PydanticValidationError

from .config import TableConfig
from .exceptions import RecordSourceError
from .http_client import HttpClient
from .logger import log_action
from .models import UserRecord

USERS_LIST_PATH = "/api/users/list"

SAMPLE_USERS: tuple[dict[str, Any], ...] = (
    {"id": 1, "username": "john_doe", "email": "john@example.com", "isAdmin": True},
    {"id": 2, "username": "jane_smith", "email": "jane@example.com", "isAdmin": False},
    {"id": 3, "username": "robert_johnson", "email": "robert@example.com", "isAdmin": True},
    {"id": 4, "username": "sarah_williams", "email": "sarah@example.com", "isAdmin": False},
    {"id": 5, "username": "michael_brown", "email": "michael@example.com", "isAdmin": True},
    {"id": 6, "username": "emily_davis", "email": "emily@example.com", "isAdmin": False},
    {"id": 7, "username": "david_miller", "email": "david@example.com", "isAdmin": True},
    {"id": 8, "username": "lisa_anderson", "email": "lisa@example.com", "isAdmin": False},
    {"id": 9, "username": "james_wilson", "email": "james@example.com", "isAdmin": True},
    {"id": 10, "username": "emma_taylor", "email": "emma@example.com", "isAdmin": False},
)


class RecordSource(Protocol):
    def fetch_records(self) -> list[UserRecord]: ...


class StaticRecordSource:
    def __init__(self, records: Iterable[UserRecord | dict[str, Any]]) -> None:
        self._rows = list(records)

    def fetch_records(self) -> list[UserRecord]:
        return parse_records(self._rows)


def sample_source() -> StaticRecordSource:
    return StaticRecordSource(SAMPLE_USERS)


class HttpRecordSource:
    def __init__(self, http: HttpClient, path: str = USERS_LIST_PATH) -> None:
        self.http = http
        self.path = path

    def fetch_records(self) -> list[UserRecord]:
        # the endpoint only answers POST; retrying it is safe since it reads only
        payload = self.http.request("POST", self.path, retry=True, operation="users.list")
        if not isinstance(payload, dict):
            raise RecordSourceError(reason="response body is not an object")
        if payload.get("status") is False or "error" in payload:
            raise RecordSourceError(reason=str(payload.get("error") or "status=false"))
        rows = payload.get("data")
        if rows is None:
            return []
        if not isinstance(rows, list):
            raise RecordSourceError(reason="data is not a list")
        return parse_records(rows)


def parse_records(rows: Iterable[UserRecord | dict[str, Any]] | None) -> list[UserRecord]:
    if rows is None or isinstance(rows, (str, bytes, dict)):
        raise RecordSourceError(reason=f"expected a list of users, got {type(rows).__name__}")
    records: list[UserRecord] = []
    seen: set[int] = set()
    for row in rows:
        try:
            record = row if isinstance(row, UserRecord) else UserRecord.model_validate(row)
        except PydanticValidationError as exc:
            raise RecordSourceError(reason=f"malformed record: {exc.error_count()} error(s)") from exc
        if record.id in seen:
            raise RecordSourceError(reason=f"duplicate id {record.id}")
        seen.add(record.id)
        records.append(record)
    return records


def build_record_source(config: TableConfig) -> RecordSource:
    if config.uses_remote_source:
        return HttpRecordSource(HttpClient(config))
    return sample_source()


def load_records(source: RecordSource, logger: logging.Logger) -> tuple[UserRecord, ...]:
    """Fetch the record set once; any failure yields an empty set.

    Whatever the source returns is validated again, so injected sources get
    the same checks as the bundled ones.
    """
    try:
        records = tuple(parse_records(source.fetch_records()))
    except Exception as exc:
        log_action(
            logger,
            "record_source",
            "load",
            "error",
            level=logging.WARNING,
            source=type(source).__name__,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return ()
    log_action(logger, "record_source", "load", "success", source=type(source).__name__, count=len(records))
    return records
