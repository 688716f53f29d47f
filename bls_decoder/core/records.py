"""Classification and parsing of the lines after the header.

WHY: After the palette, every line is one of three things: a brick, an
extra-data line belonging to the previous brick, or a "Linecount" line
declaring how many bricks the file claims to hold. The grouping stage
needs each line classified, and brick lines parsed, exactly once.

HOW: classify_line() checks the prefixes in priority order and falls back
to parse_record_line(). RecordLineStream wraps the decoded line iterator
with a one-item lookahead so the reader can peek at the next line without
consuming it. A failure is cached in the lookahead like any other item.

RULES:
- "+-" prefix → ContinuationLine (raw text kept verbatim)
- "Linecount " prefix → CountLine (unsigned, 0 on parse failure)
- Anything else is a brick line:
    label = text before the first '"' (missing quote is fatal)
    a single space must follow the quote (fatal otherwise)
    fields: x y z angle baseplate colour print colourfx shapefx ray col ren
- Missing or unparsable brick fields default; they never raise
- peek() and next() never disagree about what the next item is
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Union

from bls_decoder.core.errors import DecodeError, InvalidRecordLineError
from bls_decoder.core.fields import FieldCursor, parse_unsigned
from bls_decoder.core.model import RecordBase

CONTINUATION_PREFIX = "+-"
COUNT_PREFIX = "Linecount "


@dataclass
class ContinuationLine:
    """An extra-data line ("+-OWNER ...", "+-EVENT ...") kept opaque."""

    text: str


@dataclass
class CountLine:
    """A "Linecount N" declaration."""

    count: int


RecordLine = Union[RecordBase, ContinuationLine, CountLine]


def parse_record_line(line: str) -> RecordBase:
    """Parse a brick line into a RecordBase.

    Raises:
        InvalidRecordLineError: If the line has no '"' or no space after it.
    """
    quote_index = line.find('"')
    if quote_index == -1:
        raise InvalidRecordLineError(line, "Invalid brick line: missing quote")
    label = line[:quote_index]

    rest = line[quote_index + 1:]
    if not rest.startswith(" "):
        raise InvalidRecordLineError(line, "Invalid brick line: expected space after quote")

    cursor = FieldCursor(rest[1:])
    x = cursor.float32()
    y = cursor.float32()
    z = cursor.float32()
    return RecordBase(
        label=label,
        position=(x, y, z),
        orientation=cursor.byte(),
        is_special_base=cursor.flag(),
        palette_index=cursor.byte(),
        print_name=cursor.word(),
        color_effect=cursor.byte(),
        shape_effect=cursor.byte(),
        castable_ray=cursor.flag(),
        collidable=cursor.flag(),
        visible=cursor.flag(),
    )


def classify_line(line: str) -> RecordLine:
    if line.startswith(CONTINUATION_PREFIX):
        return ContinuationLine(text=line)
    if line.startswith(COUNT_PREFIX):
        return CountLine(count=parse_unsigned(line[len(COUNT_PREFIX):]))
    return parse_record_line(line)


_EMPTY = object()


class RecordLineStream:
    """Classified post-header lines with one item of lookahead.

    WHY: Grouping continuation lines under their brick needs to look at the
    next line before deciding whether to consume it.

    HOW: peek() classifies the next line once and caches the result, or the
    DecodeError raised while reading or classifying it. next() hands out
    the cached item and clears the cache.

    RULES:
    - peek() returns None at end of input
    - A cached failure is raised by every peek() until next() consumes it
    """

    def __init__(self, lines: Iterator[str]) -> None:
        self._lines = lines
        self._lookahead: object = _EMPTY

    def __iter__(self) -> "RecordLineStream":
        return self

    def __next__(self) -> RecordLine:
        try:
            item = self.peek()
        finally:
            self._lookahead = _EMPTY
        if item is None:
            raise StopIteration
        return item

    def peek(self) -> Optional[RecordLine]:
        if self._lookahead is _EMPTY:
            self._lookahead = self._pull()
        if isinstance(self._lookahead, DecodeError):
            raise self._lookahead
        return self._lookahead

    def _pull(self) -> object:
        try:
            line = next(self._lines)
        except StopIteration:
            return None
        except DecodeError as exc:
            return exc
        try:
            return classify_line(line)
        except DecodeError as exc:
            return exc
