"""pi-table: Fixed-width text tables with wrapping, truncation and box-drawing borders."""

# Glyph sets
from pi.table.charset import TableChars, get_chars

# Column width resolution
from pi.table.layout import minimum_width, resolve_widths

# Cell reflow
from pi.table.reflow import Chunk, pack, pad_line, reflow, tokenize

# Row rendering
from pi.table.row import render_row

# Table assembly
from pi.table.table import RowLengthMismatchError, Table, TableBuilder, TableOptions

# Output
from pi.table.terminal import DEFAULT_WIDTH, ProcessTerminal, Terminal

# Types
from pi.table.types import (
    Align,
    CharsetName,
    ColumnSpec,
    CustomSeparator,
    Expandable,
    Fixed,
    Layout,
    LeftOffset,
    Overflow,
    RightOffset,
    Separator,
    Slim,
    TitleAlign,
    TitleSpec,
)

__all__ = [
    # Charset
    "TableChars",
    "get_chars",
    # Layout
    "minimum_width",
    "resolve_widths",
    # Reflow
    "Chunk",
    "pack",
    "pad_line",
    "reflow",
    "tokenize",
    # Row
    "render_row",
    # Table
    "RowLengthMismatchError",
    "Table",
    "TableBuilder",
    "TableOptions",
    # Terminal
    "DEFAULT_WIDTH",
    "ProcessTerminal",
    "Terminal",
    # Types
    "Align",
    "CharsetName",
    "ColumnSpec",
    "CustomSeparator",
    "Expandable",
    "Fixed",
    "Layout",
    "LeftOffset",
    "Overflow",
    "RightOffset",
    "Separator",
    "Slim",
    "TitleAlign",
    "TitleSpec",
]
