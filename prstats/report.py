"""Rich table rendering for report rows.

Output is plain text: no header or border styles, and cell values are
wrapped in Text so logins like ``dependabot[bot]`` are not read as markup.
"""

from typing import Any, Iterable, List, Sequence, Tuple

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

# (header, attribute) pairs
Columns = Sequence[Tuple[str, str]]

AUTHOR_COLUMNS: Columns = (("name", "name"), ("open", "open_count"))
DURATION_COLUMNS: Columns = (("name", "name"), ("duration", "duration_hours"))


def build_table(rows: Iterable[Any], columns: Columns) -> Table:
    """Build an ASCII-bordered table with one column per (header,
    attribute) pair."""
    table = Table(box=box.ASCII, show_header=True, header_style=None, pad_edge=True)
    for header, _ in columns:
        table.add_column(Text(header), justify="left")
    for row in rows:
        cells: List[Text] = [Text(str(getattr(row, attr))) for _, attr in columns]
        table.add_row(*cells)
    return table


def print_report(console: Console, caption: str, rows: Iterable[Any], columns: Columns) -> None:
    """Print the caption on its own line, then the table."""
    console.print(caption, markup=False, highlight=False)
    console.print(build_table(rows, columns))
