"""Rich table rendering helpers.

Cells are built as :class:`rich.text.Text` so values coming back from the API
(branch regexes such as ``^feature/[a-z]+$``) are shown literally instead of
being parsed as console markup.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from rich.table import Table
from rich.text import Text


def _cell(value: Any) -> Text:
    return Text(str(value) if value is not None else "")


def make_table(
    title: str | None,
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
    *,
    show_lines: bool = False,
) -> Table:
    """Build a Rich Table from column headers and row data."""
    table = Table(title=title, show_lines=show_lines)
    for col in columns:
        table.add_column(col, no_wrap=False)
    for row in rows:
        table.add_row(*(_cell(cell) for cell in row))
    return table


def kv_table(
    data: Mapping[str, Any] | Iterable[tuple[str, Any]],
    *,
    title: str | None = None,
) -> Table:
    """Render a mapping or ordered ``(label, value)`` pairs as a two-column table."""
    pairs = data.items() if isinstance(data, Mapping) else data
    table = Table(title=title, show_header=False, show_lines=False)
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    for key, value in pairs:
        table.add_row(_cell(key), _cell(value))
    return table
