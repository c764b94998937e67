from __future__ import annotations

from collections.abc import Sequence

from .models import PageSlice, PageState, UserRecord


def total_pages_for(total_count: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return max(0, -(-total_count // page_size))


def paginate(records: Sequence[UserRecord], current_page: int, page_size: int) -> PageSlice:
    total_count = len(records)
    total_pages = total_pages_for(total_count, page_size)
    start = max(current_page - 1, 0) * page_size
    rows = tuple(records[start : start + page_size])
    if not rows:
        return PageSlice(rows=(), start_index=0, end_index=0, total_count=total_count, total_pages=total_pages)
    return PageSlice(
        rows=rows,
        start_index=start + 1,
        end_index=min(current_page * page_size, total_count),
        total_count=total_count,
        total_pages=total_pages,
    )


def prev_page(state: PageState) -> PageState:
    state.current_page = max(1, state.current_page - 1)
    return state


def next_page(state: PageState, total_pages: int) -> PageState:
    state.current_page = max(1, min(state.current_page + 1, total_pages))
    return state
