from __future__ import annotations

from collections.abc import Sequence

from .models import UserRecord


def matches_search(record: UserRecord, search_term: str) -> bool:
    probe = search_term.lower()
    return (
        probe in record.username.lower()
        or probe in record.email.lower()
        or probe in record.admin_text
    )


def filter_records(records: Sequence[UserRecord], search_term: str) -> tuple[UserRecord, ...]:
    if not search_term:
        return tuple(records)
    return tuple(record for record in records if matches_search(record, search_term))
