from __future__ import annotations

from typing import Callable

from .models import SortDirection, SortField, TableView, UserRecord

EMPTY_MESSAGE = "No users found"
SORT_MARKERS = {SortDirection.ASC: "^", SortDirection.DESC: "v"}


def _cell(record: UserRecord, field: SortField) -> str:
    if field is SortField.IS_ADMIN:
        return record.role_label
    return str(getattr(record, field.value))


def header_labels(view: TableView) -> list[str]:
    labels = []
    for field in SortField:
        label = field.label
        if view.sort_configuration.field is field:
            label = f"{label} {SORT_MARKERS[view.sort_configuration.direction]}"
        labels.append(label)
    return labels


def summary_line(view: TableView) -> str:
    return f"Showing {view.start_index} to {view.end_index} of {view.total_count} results"


def pager_line(view: TableView) -> str:
    prev_marker = "<" if view.has_previous else " "
    next_marker = ">" if view.has_next else " "
    return f"{prev_marker} Page {view.current_page} of {view.total_pages} {next_marker}"


def render_table(view: TableView) -> list[str]:
    headers = header_labels(view)
    rows = [[_cell(record, field) for field in SortField] for record in view.visible_rows]
    widths = [max([len(header)] + [len(row[idx]) for row in rows]) for idx, header in enumerate(headers)]

    lines = [
        " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers)),
        "-+-".join("-" * width for width in widths),
    ]
    if not rows:
        lines.append(EMPTY_MESSAGE)
    for row in rows:
        lines.append(" | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)))
    lines.append("")
    lines.append(summary_line(view))
    lines.append(pager_line(view))
    return lines


def print_table(view: TableView, title: str = "User Accounts", write: Callable[[str], None] = print) -> None:
    write(f"\n{title}")
    for line in render_table(view):
        write(line)
