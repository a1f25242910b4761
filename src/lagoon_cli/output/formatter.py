"""Output dispatcher — renders data in table, JSON, YAML, or CSV format."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Sequence
from typing import Any

from rich.console import Console

from lagoon_cli.output.tables import kv_table, make_table

console = Console()


def _resolve(target: Console | None) -> Console:
    return target if target is not None else console


def _plain(data: Any) -> Any:
    if hasattr(data, "model_dump"):
        return data.model_dump(mode="json")
    return data


def output_json(data: Any, *, console: Console | None = None) -> None:
    """Print data as formatted JSON."""
    out = _resolve(console)
    out.print_json(json.dumps(_plain(data), indent=2, default=str))


def output_yaml(data: Any, *, console: Console | None = None) -> None:
    """Print data as YAML."""
    import yaml

    out = _resolve(console)
    text = yaml.dump(_plain(data), default_flow_style=False, sort_keys=False)
    out.print(text, end="", markup=False)


def output_csv(
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
    *,
    console: Console | None = None,
) -> None:
    """Print data as CSV."""
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(columns)
    writer.writerows(
        [[str(v) if v is not None else "" for v in row] for row in rows]
    )
    out = _resolve(console)
    out.print(buf.getvalue(), end="", markup=False)


def output_table(
    data: Any,
    *,
    columns: Sequence[str] | None = None,
    rows: Sequence[Sequence[Any]] | None = None,
    title: str | None = None,
    kv: bool = False,
    console: Console | None = None,
) -> None:
    """Print data as a Rich table."""
    out = _resolve(console)
    data = _plain(data)
    if kv and isinstance(data, dict):
        out.print(kv_table(data, title=title))
    elif columns and rows is not None:
        out.print(make_table(title, columns, rows))
    elif isinstance(data, dict):
        out.print(kv_table(data, title=title))
    else:
        out.print(data)


def output(
    data: Any,
    fmt: str = "table",
    *,
    columns: Sequence[str] | None = None,
    rows: Sequence[Sequence[Any]] | None = None,
    title: str | None = None,
    kv: bool = False,
    console: Console | None = None,
) -> None:
    """Dispatch output to the appropriate formatter.

    *console* defaults to the module-level stdout console.
    """
    if fmt == "json":
        output_json(data, console=console)
    elif fmt == "yaml":
        output_yaml(data, console=console)
    elif fmt == "csv":
        if columns and rows is not None:
            output_csv(columns, rows, console=console)
        else:
            output_json(data, console=console)
    else:
        output_table(
            data, columns=columns, rows=rows, title=title, kv=kv, console=console,
        )
