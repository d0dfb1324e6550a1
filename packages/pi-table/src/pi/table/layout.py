"""Column width resolution."""

from __future__ import annotations

import logging

from pi.table.types import ColumnSpec, Expandable, Fixed

logger = logging.getLogger(__name__)


def minimum_width(column: ColumnSpec, header: str | None, padding: int) -> int:
    """Return the narrowest width *column* may take.

    Fixed columns use their literal width.  Slim and expandable columns fit
    the header plus padding on both sides, or 0 when there is no header.
    """
    if isinstance(column.layout, Fixed):
        return column.layout.width
    if header is None:
        return 0
    return len(header) + 2 * padding


def resolve_widths(
    columns: list[ColumnSpec],
    headers: list[str | None],
    padding: int,
    table_width: int,
) -> int:
    """Compute the final ``width`` of every column in place.

    Every column starts at its minimum width.  Whatever is left of
    *table_width* after the minimums and the ``len(columns) + 1`` divider
    glyphs is handed out to expandable columns in declaration order: each
    one takes ``remaining // expandable_left``, capped at its ``max_width``,
    and only the amount actually taken is subtracted.  Columns never
    shrink, so a *table_width* below the minimum leaves them at their
    minimums.

    Returns the minimum table width.
    """
    if len(headers) != len(columns):
        raise ValueError(
            f"Expected {len(columns)} headers, got {len(headers)}"
        )

    for column, header in zip(columns, headers):
        column.width = minimum_width(column, header, padding)

    min_table_width = sum(c.width for c in columns) + len(columns) + 1
    remaining = max(0, table_width - min_table_width)

    if table_width < min_table_width:
        logger.debug(
            "Table width %d is below the minimum of %d; columns keep their minimum widths",
            table_width,
            min_table_width,
        )

    if remaining > 0:
        expandable = [c for c in columns if isinstance(c.layout, Expandable)]
        count = len(expandable)
        for column in expandable:
            increment = remaining // count
            new_width = min(column.width + increment, column.layout.max_width)
            if new_width > column.width:
                remaining -= new_width - column.width
                column.width = new_width
            count -= 1

    return min_table_width
