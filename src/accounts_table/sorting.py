from __future__ import annotations

from collections.abc import Sequence

from .models import SortConfiguration, SortDirection, SortField, UserRecord


def sort_records(records: Sequence[UserRecord], config: SortConfiguration) -> tuple[UserRecord, ...]:
    if config.field is None:
        return tuple(records)
    key = config.field.value
    # sorted() keeps equal keys in input order even with reverse=True
    return tuple(
        sorted(records, key=lambda record: getattr(record, key), reverse=config.direction is SortDirection.DESC)
    )


def toggle_sort(current: SortConfiguration, field: SortField) -> SortConfiguration:
    if current.field is field:
        return SortConfiguration(field=field, direction=current.direction.flipped())
    return SortConfiguration(field=field, direction=SortDirection.ASC)
