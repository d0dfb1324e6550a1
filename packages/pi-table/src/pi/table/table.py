"""Table assembly: options, the fluent builder and the table itself.

A ``TableBuilder`` collects columns, headers and a title, then ``build``
resolves column widths once and returns a ``Table``.  After that the table
only accepts appended rows; rendering is a read-only pass that produces the
border, header, separator and row lines.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field

from pi.table.charset import TableChars, get_chars
from pi.table.layout import resolve_widths
from pi.table.row import render_row
from pi.table.terminal import ProcessTerminal, Terminal
from pi.table.types import (
    Align,
    CharsetName,
    ColumnSpec,
    CustomSeparator,
    Layout,
    LeftOffset,
    Overflow,
    RightOffset,
    Separator,
    TitleAlign,
    TitleSpec,
)

logger = logging.getLogger(__name__)

# Columns of decoration around a title: glyph, space, space, glyph.
_TITLE_DECORATION = 4


class RowLengthMismatchError(ValueError):
    """A row has more cells than the table has columns."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Row has {actual} cells but the table has {expected} columns")
        self.expected = expected
        self.actual = actual


# --- Options ---


class TableOptions(BaseModel):
    """Table-wide defaults, validated on construction."""

    model_config = ConfigDict(frozen=True)

    charset: CharsetName = "modern"
    title_align: TitleAlign = LeftOffset(4)
    headers_separator: Separator | None = "double"
    rows_separator: Separator | None = "single"
    max_lines: int = Field(default=3, ge=0)
    padding: int = Field(default=1, ge=0)


# --- Builder ---


class TableBuilder:
    """Fluent configuration for a :class:`Table`."""

    def __init__(self, options: TableOptions | None = None) -> None:
        self._options = options if options is not None else TableOptions()
        self._columns: list[ColumnSpec] = []
        self._headers: list[str | None] = []
        self._title: str | None = None

    def _update(self, **changes: object) -> TableBuilder:
        self._options = TableOptions(**{**dict(self._options), **changes})
        return self

    def add_column(
        self,
        layout: Layout,
        *,
        header: str | None = None,
        align: Align = "left",
        overflow: Overflow = "truncate",
        max_lines: int | None = None,
    ) -> TableBuilder:
        if max_lines is not None and max_lines < 0:
            raise ValueError(f"max_lines must be non-negative, got {max_lines}")
        self._columns.append(
            ColumnSpec(layout=layout, align=align, overflow=overflow, max_lines=max_lines)
        )
        self._headers.append(header)
        return self

    def add_column_named(
        self, header: str, layout: Layout, align: Align = "left"
    ) -> TableBuilder:
        return self.add_column(layout, header=header, align=align, overflow="truncate")

    def add_wrapping_column_named(
        self, header: str, layout: Layout, align: Align = "left"
    ) -> TableBuilder:
        return self.add_column(layout, header=header, align=align, overflow="wrap")

    def add_title(self, title: str, align: TitleAlign | None = None) -> TableBuilder:
        self._title = title
        if align is not None:
            self._update(title_align=align)
        return self

    def padding(self, padding: int) -> TableBuilder:
        return self._update(padding=padding)

    def hseparator(self, separator: Separator | None) -> TableBuilder:
        return self._update(headers_separator=separator)

    def rseparator(self, separator: Separator | None) -> TableBuilder:
        return self._update(rows_separator=separator)

    def build(self, width: int) -> Table:
        """Resolve column widths for a table *width* characters wide."""
        columns = [
            ColumnSpec(
                layout=c.layout,
                align=c.align,
                overflow=c.overflow,
                max_lines=c.max_lines,
            )
            for c in self._columns
        ]
        title = (
            TitleSpec(self._title, self._options.title_align)
            if self._title is not None
            else None
        )
        return Table(columns, list(self._headers), width, self._options, title)

    def build_for_terminal(self, terminal: Terminal | None = None) -> Table:
        """Build a table as wide as *terminal* (stdout by default)."""
        terminal = terminal if terminal is not None else ProcessTerminal()
        return self.build(terminal.columns)


# --- Table ---


class Table:
    """A table with resolved column widths and an append-only row list."""

    def __init__(
        self,
        columns: list[ColumnSpec],
        headers: list[str | None],
        width: int,
        options: TableOptions | None = None,
        title: TitleSpec | None = None,
    ) -> None:
        if width < 0:
            raise ValueError(f"Table width must be non-negative, got {width}")
        self._options = options if options is not None else TableOptions()
        for column in columns:
            if column.max_lines is None:
                column.max_lines = self._options.max_lines
        self._columns = columns
        self._headers = headers
        self._width = width
        self._title = title
        self._chars = get_chars(self._options.charset)
        self._rows: list[list[str]] = []
        self._min_width = resolve_widths(
            self._columns, self._headers, self._options.padding, width
        )
        logger.debug(
            "Resolved table of width %d: column widths %s",
            width,
            [c.width for c in self._columns],
        )

    @classmethod
    def create(cls, options: TableOptions | None = None) -> TableBuilder:
        return TableBuilder(options)

    # -- properties ---------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def min_width(self) -> int:
        return self._min_width

    @property
    def options(self) -> TableOptions:
        return self._options

    @property
    def chars(self) -> TableChars:
        return self._chars

    @property
    def columns(self) -> tuple[ColumnSpec, ...]:
        return tuple(self._columns)

    @property
    def headers(self) -> tuple[str | None, ...]:
        return tuple(self._headers)

    @property
    def rows(self) -> tuple[list[str], ...]:
        return tuple(self._rows)

    # -- rows ---------------------------------------------------------------

    def _check_row(self, row: Sequence[str]) -> None:
        if len(row) > len(self._columns):
            raise RowLengthMismatchError(len(self._columns), len(row))

    def add_row(self, row: Sequence[str]) -> None:
        self._check_row(row)
        self._rows.append(list(row))

    # -- rendering ----------------------------------------------------------

    def _separator_chars(self, separator: Separator) -> tuple[str, str, str, str]:
        """Return ``(fill, junction, left edge, right edge)`` for *separator*."""
        ch = self._chars
        if isinstance(separator, CustomSeparator):
            return (separator.char, ch.news, ch.nes, ch.nws)
        if separator == "double":
            return (ch.dew, ch.dnews, ch.dnes, ch.dnws)
        return (ch.ew, ch.news, ch.nes, ch.nws)

    def _line(self, fill: str, junction: str, left: str, right: str) -> list[str]:
        line = [fill] * self._width
        if self._width == 0:
            return line
        line[0] = left
        line[-1] = right
        offset = 0
        for column in self._columns[:-1]:
            offset += column.width + 1
            # Narrower-than-content tables have no room for later junctions.
            if offset < self._width - 1:
                line[offset] = junction
        return line

    def _place_title(self, border: list[str]) -> None:
        spec = self._title
        if spec is None:
            return
        title_width = len(spec.title) + _TITLE_DECORATION
        if isinstance(spec.align, RightOffset):
            start = self._width - spec.align.offset - title_width - 1
        else:
            start = spec.align.offset + 1
        end = start + title_width

        if title_width >= self._width - 4 or start < 1 or end > self._width - 1:
            logger.debug("Title %r does not fit a %d-wide border; omitted", spec.title, self._width)
            return

        tch = self._chars.title
        border[start:end] = f"{tch} {spec.title} {tch}"

    def _render_row(self, cells: Sequence[str | None]) -> list[str]:
        return render_row(cells, self._columns, self._options.padding, self._chars.ns)

    def render_lines(self, rows: Iterable[Sequence[str]] | None = None) -> list[str]:
        """Render the table to a list of lines.

        Uses the stored rows unless *rows* is given.
        """
        if rows is None:
            row_list: list[Sequence[str]] = list(self._rows)
        else:
            row_list = list(rows)
            for row in row_list:
                self._check_row(row)

        ch = self._chars
        top = self._line(ch.ew, ch.ews, ch.se, ch.sw)
        self._place_title(top)

        lines = ["".join(top)]
        if any(header is not None for header in self._headers):
            lines.extend(self._render_row(self._headers))

        headers_separator = self._options.headers_separator
        if headers_separator is not None:
            h_sep = self._separator_chars(headers_separator)
            lines.append("".join(self._line(*h_sep)))

        rows_separator = self._options.rows_separator
        row_sep = (
            "".join(self._line(*self._separator_chars(rows_separator)))
            if rows_separator is not None
            else None
        )
        for i, row in enumerate(row_list):
            lines.extend(self._render_row(row))
            if row_sep is not None and i < len(row_list) - 1:
                lines.append(row_sep)

        lines.append("".join(self._line(ch.ew, ch.new, ch.ne, ch.nw)))
        return lines

    def render(
        self,
        rows: Iterable[Sequence[str]],
        terminal: Terminal | None = None,
    ) -> None:
        """Write the table with *rows* to *terminal*, one line at a time."""
        terminal = terminal if terminal is not None else ProcessTerminal()
        for line in self.render_lines(rows):
            terminal.write(line + "\n")

    def draw(self, terminal: Terminal | None = None) -> None:
        """Write the table with its stored rows to *terminal*."""
        terminal = terminal if terminal is not None else ProcessTerminal()
        for line in self.render_lines():
            terminal.write(line + "\n")
