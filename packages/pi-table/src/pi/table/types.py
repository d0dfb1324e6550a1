"""Core type definitions for pi-table.

Column layouts, title placement and separator choices are small frozen
dataclasses; alignment, overflow and charset names are string literals.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

Align = Literal["left", "right", "center"]

Overflow = Literal["wrap", "truncate"]

CharsetName = Literal["modern", "classic", "simple", "minimal"]

SeparatorStyle = Literal["single", "double"]


# --- Column layouts ---


@dataclass(frozen=True)
class Slim:
    """Sized to the header text plus padding, never grows."""


@dataclass(frozen=True)
class Fixed:
    """Exactly ``width`` characters wide."""

    width: int


@dataclass(frozen=True)
class Expandable:
    """Grows to absorb leftover table width, up to ``max_width``."""

    max_width: int


Layout = Union[Slim, Fixed, Expandable]


# --- Title placement ---


@dataclass(frozen=True)
class LeftOffset:
    offset: int


@dataclass(frozen=True)
class RightOffset:
    offset: int


TitleAlign = Union[LeftOffset, RightOffset]


# --- Separators ---


@dataclass(frozen=True)
class CustomSeparator:
    """A separator line drawn with a single caller-chosen glyph."""

    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(
                f"Custom separator must be a single character, got {self.char!r}"
            )


Separator = Union[SeparatorStyle, CustomSeparator]


# --- Specs ---


@dataclass
class ColumnSpec:
    """One column of a table.

    ``width`` is filled in by the column resolver when the table is built.
    ``max_lines`` of ``None`` inherits the table default.
    """

    layout: Layout
    align: Align = "left"
    overflow: Overflow = "truncate"
    max_lines: int | None = None
    width: int = 0


@dataclass(frozen=True)
class TitleSpec:
    title: str
    align: TitleAlign
