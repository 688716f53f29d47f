"""Unit tests for header parsing (banner, description, palette).

WHY: The header decides whether a save can be opened at all, and a
miscount here would misalign every brick that follows.

HOW: Runs read_header() over hand-built line lists, then checks the
description, the palette, and where the iterator is left.

RULES:
- Line lists are plain Python iterators; byte handling is tested elsewhere
"""

import logging

import pytest

from bls_decoder.core.errors import DescriptionTooLongError, ErrorKind
from bls_decoder.core.fields import to_float32
from bls_decoder.core.header import (
    MAX_DESCRIPTION_LINES,
    PALETTE_SIZE,
    parse_color,
    read_header,
)
from bls_decoder.core.model import Color


def _header_lines(description, colors=None, rest=()):
    colors = colors if colors is not None else ["1 1 1 1"] * PALETTE_SIZE
    return iter(["banner", str(len(description))] + list(description) + list(colors) + list(rest))


class TestDescription:
    """Description length line, lines, and escape collapsing."""

    def test_two_lines_joined_with_newline(self):
        header = read_header(_header_lines(["Hello", "World"]))
        assert header.description == "Hello\nWorld"

    def test_escapes_collapsed_across_lines(self):
        header = read_header(_header_lines(["\\c0Red", "tab\\there"]))
        assert header.description == "\x02\x01Red\ntab\there"

    def test_zero_lines(self):
        assert read_header(_header_lines([])).description == ""

    def test_banner_text_is_ignored(self):
        lines = iter(["1 not the usual banner", "1", "Hi"] + ["1 1 1 1"] * PALETTE_SIZE)
        assert read_header(lines).description == "Hi"

    def test_unparsable_length_means_zero(self):
        lines = iter(["banner", "lots"] + ["0 0 0 1"] * PALETTE_SIZE)
        header = read_header(lines)
        assert header.description == ""
        assert header.palette[0] == Color(0.0, 0.0, 0.0, 1.0)

    def test_limit_is_inclusive(self):
        description = ["x"] * MAX_DESCRIPTION_LINES
        header = read_header(_header_lines(description))
        assert header.description.count("\n") == MAX_DESCRIPTION_LINES - 1

    def test_too_long_is_fatal(self):
        lines = iter(["banner", "1001", "whatever"])
        with pytest.raises(DescriptionTooLongError) as excinfo:
            read_header(lines)
        assert excinfo.value.line_count == 1001
        assert excinfo.value.kind is ErrorKind.MALFORMED

    def test_missing_lines_become_empty(self, caplog):
        lines = iter(["banner", "3", "only one"])
        with caplog.at_level(logging.WARNING, logger="bls_decoder.core.header"):
            header = read_header(lines)
        assert header.description == "only one\n\n"
        assert "input ended" in caplog.text

    def test_empty_input(self):
        header = read_header(iter([]))
        assert header.description == ""
        assert len(header.palette) == PALETTE_SIZE


class TestPalette:
    """Exactly 64 colours, each field defaulting to 0.0."""

    def test_always_64_entries(self):
        header = read_header(_header_lines([], colors=["1 0 0 1"] * 10))
        assert len(header.palette) == PALETTE_SIZE
        assert header.palette[9] == Color(1.0, 0.0, 0.0, 1.0)
        assert header.palette[10] == Color()
        assert header.palette[63] == Color()

    def test_values_not_clamped(self):
        assert parse_color("2 -1 255 0.5") == Color(2.0, -1.0, 255.0, 0.5)

    def test_partial_and_bad_fields(self):
        assert parse_color("0.5 x") == Color(0.5, 0.0, 0.0, 0.0)

    def test_32_bit_precision(self):
        assert parse_color("0.1 0.2 0.3 1").r == to_float32(0.1)

    def test_leaves_iterator_after_palette(self):
        lines = _header_lines(["d"], rest=["Linecount 5", "next"])
        read_header(lines)
        assert next(lines) == "Linecount 5"
