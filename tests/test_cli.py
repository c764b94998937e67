from accounts_table.cli import main, run_interactive


def test_main_prints_filtered_table(capsys, tmp_path) -> None:
    code = main(["--env-file", str(tmp_path / "missing.env"), "--search", "jane"])

    out = capsys.readouterr().out
    assert code == 0
    assert "jane_smith" in out
    assert "Showing 1 to 1 of 1 results" in out


def test_main_sorts_and_pages(capsys, tmp_path) -> None:
    code = main(["--env-file", str(tmp_path / "missing.env"), "--sort", "id", "--sort", "id", "--next", "1"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Page 2 of 2" in out
    assert "Showing 6 to 10 of 10 results" in out
    assert "john_doe" in out
    assert "emma_taylor" not in out


def test_main_reports_config_errors(capsys, monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("ACCOUNTS_TABLE_PAGE_SIZE", "0")

    code = main(["--env-file", str(tmp_path / "missing.env")])

    assert code == 2
    assert "Configuration error" in capsys.readouterr().out


def test_interactive_loop_applies_commands(store) -> None:
    answers = iter(["s EXAMPLE", "o username", "o bogus", "n", "x", "q"])
    written: list[str] = []

    run_interactive(store, read=lambda _: next(answers), write=written.append)

    assert store.search_term == "EXAMPLE"
    assert store.sort_configuration.field is not None
    assert store.page_state.current_page == 2
    assert "Unknown column: 'bogus'" in written
