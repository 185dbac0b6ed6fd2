"""Build and print Rich tables from lists of dict rows."""

from __future__ import annotations

from typing import Any, Callable, Optional

from rich.console import Console
from rich.table import Table

__all__ = ["display_table"]

StyleFn = Callable[[Any], Optional[str]]


def _cell(value: Any) -> str:
    if value is None:
        return "-"
    return str(value)


def display_table(
    console: Console,
    data: list[dict[str, Any]],
    columns: list[str],
    headers: list[str],
    title: Optional[str] = None,
    style_map: Optional[dict[str, StyleFn]] = None,
    title_style: str = "bold",
    show_lines: bool = False,
) -> Table:
    """Print `data` as a table and return the Rich table that was printed.

    `style_map` maps a column name to a function of the raw cell value that
    returns a Rich style, or None to leave the cell unstyled.
    """
    style_map = style_map or {}

    table = Table(title=title, title_style=title_style, show_lines=show_lines)
    for header in headers:
        table.add_column(header)

    for row in data:
        cells = []
        for column in columns:
            value = row.get(column)
            text = _cell(value)
            style_fn = style_map.get(column)
            style = style_fn(value) if style_fn else None
            cells.append(f"[{style}]{text}[/{style}]" if style else text)
        table.add_row(*cells)

    console.print(table)
    return table
