"""Cell text reflow: tokenizing, greedy line packing and alignment padding.

Turns an arbitrary string into at most ``max_lines`` lines, each exactly
``width`` characters, either wrapping at word boundaries or truncating each
physical line. Widths are plain character counts.
"""

from __future__ import annotations

from dataclasses import dataclass

from pi.table.types import Align, Overflow


# ---------------------------------------------------------------------------
# Chunks
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Chunk:
    """A span of text to be placed on a line.

    A *terminal* chunk forces a line break right after it.
    """

    text: str
    terminal: bool = False


def _split_lines(text: str) -> list[str]:
    """Split on ``\\n`` and ``\\r\\n`` only; a final line ending is optional."""
    *ended, tail = text.split("\n")
    lines = [line[:-1] if line.endswith("\r") else line for line in ended]
    if tail:
        lines.append(tail)
    return lines


def tokenize(text: str, overflow: Overflow) -> list[Chunk]:
    """Split *text* into chunks according to the *overflow* policy.

    * ``truncate``: every physical line is a single terminal chunk.
    * ``wrap``: every physical line is split on whitespace; the last word of
      each line is terminal.  Blank lines yield no chunks.
    """
    lines = _split_lines(text)
    if overflow == "truncate":
        return [Chunk(line, terminal=True) for line in lines]

    chunks: list[Chunk] = []
    for line in lines:
        words = line.split()
        for i, word in enumerate(words):
            chunks.append(Chunk(word, terminal=i == len(words) - 1))
    return chunks


# ---------------------------------------------------------------------------
# Padding
# ---------------------------------------------------------------------------


def pad_line(text: str, width: int, align: Align) -> str:
    """Clip *text* to *width* characters and pad it to exactly *width*.

    Center alignment gives the odd leftover space to the right side.
    """
    clipped = text[:width]
    padding = width - len(clipped)
    if align == "left":
        return clipped + " " * padding
    if align == "right":
        return " " * padding + clipped
    left = padding // 2
    return " " * left + clipped + " " * (padding - left)


# ---------------------------------------------------------------------------
# Packing
# ---------------------------------------------------------------------------


def _should_wrap(agg: str, chunk: Chunk, width: int) -> bool:
    # The first chunk of a line is always placed.
    return bool(agg) and len(agg) + 1 + len(chunk.text) > width


def pack(
    chunks: list[Chunk],
    width: int,
    max_lines: int,
    align: Align = "left",
) -> list[str]:
    """Greedily pack *chunks* into padded lines of exactly *width* characters.

    A line is flushed when the next chunk would overflow it, when it is
    exactly full, after a terminal chunk and after the last chunk.  Packing
    stops once *max_lines* lines exist; remaining chunks are dropped.
    """
    lines: list[str] = []
    agg = ""
    last_index = len(chunks) - 1

    for i, chunk in enumerate(chunks):
        if not _should_wrap(agg, chunk, width):
            agg = f"{agg} {chunk.text}" if agg else chunk.text
        else:
            lines.append(pad_line(agg, width, align))
            agg = chunk.text

        if len(lines) < max_lines and (
            len(agg) == width or i == last_index or chunk.terminal
        ):
            lines.append(pad_line(agg, width, align))
            agg = ""

        if len(lines) >= max_lines:
            return lines

    return lines


def reflow(
    text: str,
    width: int,
    max_lines: int,
    align: Align = "left",
    overflow: Overflow = "wrap",
) -> list[str]:
    """Tokenize *text* and pack it in one step."""
    return pack(tokenize(text, overflow), width, max_lines, align)
