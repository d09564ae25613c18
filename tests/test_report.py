"""Tests for table rendering (prstats.report)."""

import io

from rich.console import Console

from prstats.models import AuthorOpenCount, PullRequestDuration
from prstats.report import AUTHOR_COLUMNS, DURATION_COLUMNS, build_table, print_report


def _console() -> tuple[Console, io.StringIO]:
    buf = io.StringIO()
    return Console(file=buf, width=80, color_system=None, force_terminal=False), buf


def test_build_table_columns_and_rows() -> None:
    rows = [AuthorOpenCount(name="alice", open_count=3), AuthorOpenCount(name="bob", open_count=1)]
    table = build_table(rows, AUTHOR_COLUMNS)
    assert [str(c.header) for c in table.columns] == ["name", "open"]
    assert table.row_count == 2


def test_print_report_caption_then_bordered_table() -> None:
    console, buf = _console()
    rows = [PullRequestDuration(name="carol", duration_hours=1200)]
    print_report(console, "Lifetime of PRs", rows, DURATION_COLUMNS)

    lines = buf.getvalue().splitlines()
    assert lines[0] == "Lifetime of PRs"
    assert lines[1].startswith("+")
    out = buf.getvalue()
    assert "name" in out
    assert "duration" in out
    assert "carol" in out
    assert "1200" in out
    assert "|" in out


def test_print_report_empty_rows_prints_headers() -> None:
    console, buf = _console()
    print_report(console, "Authors and open PRs", [], AUTHOR_COLUMNS)
    out = buf.getvalue()
    assert out.startswith("Authors and open PRs\n")
    assert "name" in out
    assert "open" in out


def test_caption_is_not_treated_as_markup() -> None:
    console, buf = _console()
    print_report(console, "[bold]raw[/bold]", [], AUTHOR_COLUMNS)
    assert buf.getvalue().splitlines()[0] == "[bold]raw[/bold]"


def _body_names(output: str) -> list[str]:
    lines = [line for line in output.splitlines() if line.startswith("|") and not set(line) <= set("|-+")]
    return [line.strip("|").split("|")[0].strip() for line in lines[1:]]


def test_bracketed_logins_render_verbatim() -> None:
    """Bot logins and names with markup-like brackets are printed as
    written."""
    console, buf = _console()
    rows = [
        AuthorOpenCount(name="dependabot[bot]", open_count=4),
        AuthorOpenCount(name="github-actions[bot]", open_count=2),
        AuthorOpenCount(name="odd[/user]", open_count=1),
    ]
    print_report(console, "Authors and open PRs", rows, AUTHOR_COLUMNS)

    assert _body_names(buf.getvalue()) == ["dependabot[bot]", "github-actions[bot]", "odd[/user]"]


def test_bracketed_login_with_closing_tag_does_not_raise() -> None:
    """A lone closing tag in a login would be a markup error if parsed."""
    console, buf = _console()
    rows = [PullRequestDuration(name="[/]bot", duration_hours=7)]
    print_report(console, "Lifetime of PRs", rows, DURATION_COLUMNS)
    assert _body_names(buf.getvalue()) == ["[/]bot"]


def test_terminal_output_has_no_escape_codes() -> None:
    """Headers and cells carry no styles, even on a color terminal."""
    buf = io.StringIO()
    console = Console(file=buf, width=80, force_terminal=True, color_system="truecolor", highlight=False)
    rows = [AuthorOpenCount(name="dependabot[bot]", open_count=12)]
    print_report(console, "Authors and open PRs", rows, AUTHOR_COLUMNS)
    assert "\x1b" not in buf.getvalue()
    assert "dependabot[bot]" in buf.getvalue()
