"""Row rendering: reflow every cell of a row and interleave them with dividers."""

from __future__ import annotations

from collections.abc import Sequence

from pi.table.reflow import reflow
from pi.table.types import ColumnSpec


def content_width(column: ColumnSpec, padding: int) -> int:
    """Width available to cell text inside *column*."""
    return max(0, column.width - 2 * padding)


def render_cell(text: str, column: ColumnSpec, padding: int) -> list[str]:
    """Reflow *text* for *column* using its overflow, alignment and line cap.

    ``column.max_lines`` must already be resolved from the table default.
    """
    if column.max_lines is None:
        raise ValueError("Column max_lines is unset; build the column through a Table")
    return reflow(
        text,
        content_width(column, padding),
        column.max_lines,
        align=column.align,
        overflow=column.overflow,
    )


def render_row(
    cells: Sequence[str | None],
    columns: Sequence[ColumnSpec],
    padding: int,
    divider: str,
) -> list[str]:
    """Render one table row as printable lines.

    The row is as tall as its tallest cell; shorter cells are filled with
    blank lines.  Cells missing from the end of *cells* (or ``None``) render
    empty.  Each line is framed by *divider* glyphs with *padding* spaces on
    both sides of every cell.
    """
    rendered: list[list[str]] = []
    for i, column in enumerate(columns):
        text = cells[i] if i < len(cells) else None
        rendered.append(render_cell(text or "", column, padding))

    height = max((len(lines) for lines in rendered), default=0)
    gap = " " * padding
    inner = f"{gap}{divider}{gap}"

    result: list[str] = []
    for line_no in range(height):
        parts = [
            lines[line_no]
            if line_no < len(lines)
            else " " * content_width(column, padding)
            for lines, column in zip(rendered, columns)
        ]
        result.append(f"{divider}{gap}{inner.join(parts)}{gap}{divider}")
    return result
