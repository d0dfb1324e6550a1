"""Border glyph sets.

Glyph names follow compass directions: each name lists the sides a glyph
connects to (``se`` is a top-left corner, ``news`` a four-way junction).
The ``d`` prefix marks the double-line variant.
"""

from __future__ import annotations

from dataclasses import dataclass

from pi.table.types import CharsetName


@dataclass(frozen=True)
class TableChars:
    se: str
    ew: str
    nw: str
    sw: str
    ns: str
    ne: str
    ews: str
    nes: str
    nws: str
    new: str
    news: str
    dew: str
    dnes: str
    dnws: str
    dnews: str
    title: str


MODERN = TableChars(
    se="╭", nw="╯", sw="╮", ns="│", ne="╰", ew="─",
    ews="┬", nes="├", nws="┤", new="┴", news="┼",
    dew="═", dnes="╞", dnws="╡", dnews="╪",
    title="▪",
)

CLASSIC = TableChars(
    se="┌", nw="┘", sw="┐", ns="│", ne="└", ew="─",
    ews="┬", nes="├", nws="┤", new="┴", news="┼",
    dew="═", dnes="╞", dnws="╡", dnews="╪",
    title="▪",
)

SIMPLE = TableChars(
    se="+", nw="+", sw="+", ns="|", ne="+", ew="-",
    ews="+", nes="|", nws="|", new="+", news="+",
    dew="=", dnes="|", dnws="|", dnews="=",
    title="*",
)

MINIMAL = TableChars(
    se=" ", nw=" ", sw=" ", ns=" ", ne=" ", ew="-",
    ews="-", nes=" ", nws=" ", new="-", news="-",
    dew="=", dnes=" ", dnws=" ", dnews="=",
    title="=",
)

_CHARSETS: dict[str, TableChars] = {
    "modern": MODERN,
    "classic": CLASSIC,
    "simple": SIMPLE,
    "minimal": MINIMAL,
}


def get_chars(charset: CharsetName) -> TableChars:
    """Return the glyph set registered under *charset*."""
    try:
        return _CHARSETS[charset]
    except KeyError:
        raise ValueError(f"Unknown charset: {charset}") from None
