import logging

import pytest

from accounts_table.models import PageDirection, SortConfiguration, SortDirection, SortField
from accounts_table.record_source import StaticRecordSource
from accounts_table.table_store import UserTableStore


def test_initial_view_uses_defaults(store) -> None:
    view = store.view

    assert store.search_term == ""
    assert store.sort_configuration == SortConfiguration(None, SortDirection.ASC)
    assert (store.page_state.current_page, store.page_state.page_size) == (1, 5)
    assert [record.id for record in view.visible_rows] == [1, 2, 3, 4, 5]
    assert (view.start_index, view.end_index, view.total_count, view.total_pages) == (1, 5, 10, 2)
    assert not view.has_previous
    assert view.has_next


def test_search_for_jane_yields_single_record(store) -> None:
    view = store.set_search_term("jane")

    assert [record.username for record in view.visible_rows] == ["jane_smith"]
    assert view.total_pages == 1


def test_sort_by_username_first_page(store) -> None:
    view = store.activate_sort(SortField.USERNAME)

    assert [record.username for record in view.visible_rows] == [
        "david_miller",
        "emily_davis",
        "emma_taylor",
        "james_wilson",
        "jane_smith",
    ]
    assert view.total_pages == 2


def test_activating_same_column_toggles_direction(store) -> None:
    store.activate_sort("username")
    assert store.sort_configuration == SortConfiguration(SortField.USERNAME, SortDirection.ASC)

    store.activate_sort("username")
    assert store.sort_configuration == SortConfiguration(SortField.USERNAME, SortDirection.DESC)

    store.activate_sort("username")
    assert store.sort_configuration == SortConfiguration(SortField.USERNAME, SortDirection.ASC)

    store.activate_sort("email")
    assert store.sort_configuration == SortConfiguration(SortField.EMAIL, SortDirection.ASC)


def test_unknown_sort_field_is_rejected_without_state_change(store, caplog) -> None:
    store.activate_sort("email")
    before = store.view

    with caplog.at_level(logging.WARNING, logger="accounts_table"):
        after = store.activate_sort("password")

    assert after is before
    assert store.sort_configuration == SortConfiguration(SortField.EMAIL, SortDirection.ASC)
    assert '"outcome": "rejected"' in caplog.text


def test_page_navigation_is_clamped(store) -> None:
    store.goto_page(PageDirection.PREV)
    assert store.page_state.current_page == 1

    view = store.goto_page("next")
    assert view.current_page == 2
    assert [record.id for record in view.visible_rows] == [6, 7, 8, 9, 10]
    assert (view.start_index, view.end_index) == (6, 10)

    view = store.goto_page(PageDirection.NEXT)
    assert view.current_page == 2
    assert view.has_previous
    assert not view.has_next


def test_shrinking_results_leave_page_out_of_range(store) -> None:
    store.goto_page(PageDirection.NEXT)

    view = store.set_search_term("jane")

    assert view.current_page == 2
    assert view.total_pages == 1
    assert view.visible_rows == ()
    assert view.total_count == 1

    view = store.goto_page(PageDirection.PREV)
    assert [record.username for record in view.visible_rows] == ["jane_smith"]


def test_sort_change_does_not_refilter(store) -> None:
    assert store.filter_stage.misses == 1

    store.activate_sort(SortField.ID)
    store.activate_sort(SortField.ID)
    store.goto_page(PageDirection.NEXT)

    assert store.filter_stage.misses == 1
    assert store.filter_stage.hits == 3
    assert store.sort_stage.hits == 1


def test_recomputing_with_same_inputs_is_pure(store) -> None:
    first = store.set_search_term("a")
    second = store.set_search_term("a")

    assert first == second
    assert first.visible_rows is second.visible_rows


def test_empty_source_renders_empty_view() -> None:
    store = UserTableStore(StaticRecordSource([]), page_size=5)

    view = store.goto_page(PageDirection.NEXT)

    assert view.is_empty
    assert view.current_page == 1
    assert (view.total_count, view.total_pages, view.start_index, view.end_index) == (0, 0, 0, 0)


def test_page_size_must_be_positive() -> None:
    with pytest.raises(ValueError, match="page_size"):
        UserTableStore(StaticRecordSource([]), page_size=0)


class _RaisingSource:
    def fetch_records(self):
        raise ConnectionError("backing store unreachable")


class _NoneSource:
    def fetch_records(self):
        return None


class _RawDuplicateSource:
    def fetch_records(self):
        return [
            {"id": 1, "username": "ana", "email": "ana@example.com", "isAdmin": True},
            {"id": 1, "username": "ben", "email": "ben@example.com", "isAdmin": False},
        ]


class _RawRowsSource:
    def fetch_records(self):
        return [{"id": 7, "username": "ana", "email": "ana@example.com", "isAdmin": True}]


@pytest.mark.parametrize("source", [_RaisingSource(), _NoneSource(), _RawDuplicateSource()])
def test_failing_injected_source_renders_empty_table(source, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="accounts_table"):
        store = UserTableStore(source, page_size=5)

    view = store.set_search_term("a")

    assert store.records == ()
    assert view.is_empty
    assert view.total_pages == 0
    assert '"outcome": "error"' in caplog.text


def test_raw_rows_from_injected_source_are_validated() -> None:
    store = UserTableStore(_RawRowsSource(), page_size=5)

    view = store.set_search_term("ANA")

    assert [record.username for record in view.visible_rows] == ["ana"]
    assert view.visible_rows[0].is_admin is True


def test_unknown_page_direction_is_rejected_without_state_change(store, caplog) -> None:
    store.goto_page(PageDirection.NEXT)
    before = store.view

    with caplog.at_level(logging.WARNING, logger="accounts_table"):
        after = store.goto_page("sideways")

    assert after is before
    assert store.page_state.current_page == 2
    assert '"action": "page", "outcome": "rejected"' in caplog.text
