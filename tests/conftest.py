from __future__ import annotations

import pytest

from accounts_table.models import UserRecord
from accounts_table.record_source import SAMPLE_USERS, sample_source
from accounts_table.table_store import UserTableStore


@pytest.fixture
def sample_records() -> tuple[UserRecord, ...]:
    return tuple(UserRecord.model_validate(row) for row in SAMPLE_USERS)


@pytest.fixture
def store() -> UserTableStore:
    return UserTableStore(sample_source(), page_size=5)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in (
        "ACCOUNTS_TABLE_API_BASE_URL",
        "ACCOUNTS_TABLE_PAGE_SIZE",
        "ACCOUNTS_TABLE_CONNECT_TIMEOUT_SECONDS",
        "ACCOUNTS_TABLE_READ_TIMEOUT_SECONDS",
        "ACCOUNTS_TABLE_RETRIES",
        "ACCOUNTS_TABLE_RETRY_BACKOFF_SECONDS",
        "ACCOUNTS_TABLE_VERIFY_SSL",
        "ACCOUNTS_TABLE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
