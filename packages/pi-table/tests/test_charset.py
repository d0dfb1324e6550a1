"""Tests for pi.table.charset -- border glyph sets."""

from __future__ import annotations

from dataclasses import fields

import pytest

from pi.table.charset import CLASSIC, MINIMAL, MODERN, SIMPLE, get_chars


class TestGetChars:
    def test_known_charsets(self) -> None:
        assert get_chars("modern") is MODERN
        assert get_chars("classic") is CLASSIC
        assert get_chars("simple") is SIMPLE
        assert get_chars("minimal") is MINIMAL

    def test_unknown_charset(self) -> None:
        with pytest.raises(ValueError, match="Unknown charset"):
            get_chars("fancy")  # type: ignore[arg-type]

    @pytest.mark.parametrize("chars", [MODERN, CLASSIC, SIMPLE, MINIMAL])
    def test_every_glyph_is_one_character(self, chars) -> None:
        assert len(fields(chars)) == 16
        assert all(len(getattr(chars, f.name)) == 1 for f in fields(chars))

    def test_modern_uses_rounded_corners(self) -> None:
        assert (MODERN.se, MODERN.sw, MODERN.ne, MODERN.nw) == ("╭", "╮", "╰", "╯")

    def test_minimal_has_no_vertical_borders(self) -> None:
        assert MINIMAL.ns == " "
        assert MINIMAL.ew == "-"
