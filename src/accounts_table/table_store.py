from __future__ import annotations

import logging

from .config import DEFAULT_PAGE_SIZE
from .filtering import filter_records
from .logger import get_logger, log_action
from .memo import LastCallMemo
from .models import PageDirection, PageSlice, PageState, SortConfiguration, SortField, TableView, UserRecord
from .pagination import next_page, paginate, prev_page
from .record_source import RecordSource, load_records
from .sorting import sort_records, toggle_sort


class UserTableStore:
    """Search, sort and page state for the user accounts table.

    Each entry point changes one field and recomputes the
    filter -> sort -> paginate pipeline before returning the new view.
    """

    def __init__(
        self,
        source: RecordSource,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        logger: logging.Logger | None = None,
    ) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        self.logger = logger or get_logger()
        self._records = load_records(source, self.logger)
        self._search_term = ""
        self._sort_configuration = SortConfiguration()
        self._page_state = PageState(current_page=1, page_size=page_size)
        self.filter_stage: LastCallMemo[tuple[UserRecord, ...]] = LastCallMemo(filter_records)
        self.sort_stage: LastCallMemo[tuple[UserRecord, ...]] = LastCallMemo(sort_records)
        self.page_stage: LastCallMemo[PageSlice] = LastCallMemo(paginate)
        self._view = self._recompute()

    @property
    def records(self) -> tuple[UserRecord, ...]:
        return self._records

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def sort_configuration(self) -> SortConfiguration:
        return self._sort_configuration

    @property
    def page_state(self) -> PageState:
        return PageState(self._page_state.current_page, self._page_state.page_size)

    @property
    def view(self) -> TableView:
        return self._view

    def set_search_term(self, text: str) -> TableView:
        self._search_term = text
        self._log("search", term_length=len(text))
        return self._refresh()

    def activate_sort(self, field: SortField | str) -> TableView:
        try:
            resolved = SortField(field)
        except ValueError:
            log_action(self.logger, "table_store", "sort", "rejected", level=logging.WARNING, field=str(field))
            return self._view
        self._sort_configuration = toggle_sort(self._sort_configuration, resolved)
        self._log(
            "sort",
            field=resolved.value,
            direction=self._sort_configuration.direction.value,
        )
        return self._refresh()

    def goto_page(self, direction: PageDirection | str) -> TableView:
        try:
            resolved = PageDirection(direction)
        except ValueError:
            log_action(self.logger, "table_store", "page", "rejected", level=logging.WARNING, direction=str(direction))
            return self._view
        if resolved is PageDirection.PREV:
            prev_page(self._page_state)
        else:
            next_page(self._page_state, self._view.total_pages)
        self._log("page", direction=resolved.value, current_page=self._page_state.current_page)
        return self._refresh()

    def _refresh(self) -> TableView:
        self._view = self._recompute()
        return self._view

    def _recompute(self) -> TableView:
        filtered = self.filter_stage(self._records, self._search_term)
        ordered = self.sort_stage(filtered, self._sort_configuration)
        page = self.page_stage(ordered, self._page_state.current_page, self._page_state.page_size)
        return TableView(
            visible_rows=page.rows,
            start_index=page.start_index,
            end_index=page.end_index,
            total_count=page.total_count,
            current_page=self._page_state.current_page,
            total_pages=page.total_pages,
            sort_configuration=self._sort_configuration,
            search_term=self._search_term,
            page_size=self._page_state.page_size,
        )

    def _log(self, action: str, **context: object) -> None:
        log_action(self.logger, "table_store", action, "success", level=logging.DEBUG, **context)
