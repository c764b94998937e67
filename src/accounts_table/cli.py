from __future__ import annotations

import argparse
from typing import Callable, Sequence

from .config import ConfigError, load_config
from .logger import get_logger
from .models import PageDirection, SortField
from .record_source import build_record_source
from .table_printer import print_table
from .table_store import UserTableStore

HELP_TEXT = "Commands: s <term> search | o <field> sort | n next | p previous | q quit"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="accounts-table", description="Searchable, sortable user accounts table")
    parser.add_argument("--env-file", default=None)
    parser.add_argument("--search", default="", help="case-insensitive search term")
    parser.add_argument(
        "--sort",
        action="append",
        default=[],
        choices=[field.value for field in SortField],
        help="activate a column header; repeat to toggle direction",
    )
    parser.add_argument("--next", type=int, default=0, dest="next_pages", help="press 'next page' N times")
    parser.add_argument("--interactive", action="store_true")
    return parser


def run_interactive(store: UserTableStore, read: Callable[[str], str] = input, write: Callable[[str], None] = print) -> None:
    write(HELP_TEXT)
    while True:
        print_table(store.view, write=write)
        raw = read("> ").strip()
        command, _, argument = raw.partition(" ")
        command = command.lower()
        if command == "q":
            return
        if command == "s":
            store.set_search_term(argument)
        elif command == "o":
            if argument not in {field.value for field in SortField}:
                write(f"Unknown column: {argument!r}")
                continue
            store.activate_sort(argument)
        elif command == "n":
            store.goto_page(PageDirection.NEXT)
        elif command == "p":
            store.goto_page(PageDirection.PREV)
        else:
            write(HELP_TEXT)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args.env_file)
    except ConfigError as exc:
        print(f"Configuration error: {exc}")
        return 2

    logger = get_logger(level=config.log_level)
    store = UserTableStore(build_record_source(config), page_size=config.page_size, logger=logger)
    if args.search:
        store.set_search_term(args.search)
    for field in args.sort:
        store.activate_sort(field)
    for _ in range(max(args.next_pages, 0)):
        store.goto_page(PageDirection.NEXT)

    if args.interactive:
        run_interactive(store)
    else:
        print_table(store.view)
    return 0
