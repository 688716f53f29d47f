"""Public streaming reader for save files.

WHY: A save file can hold hundreds of thousands of bricks. Callers should
get the description and palette immediately and then pull bricks one at a
time, in a single pass, with extra-data lines already attached to the
brick they belong to.

HOW: SaveReader splits the source into decoded lines, reads the header,
and wraps the rest in a RecordLineStream. If the line right after the
palette is a "Linecount" line it is consumed up front. Each __next__ call
then skips to the next brick line (applying any "Linecount" lines on the
way) and collects the continuation lines that follow it.

RULES:
- The reader is single-use and forward-only; there is no reset
- declared_count is live: the latest "Linecount" line seen wins, and the
  value is final once iteration is exhausted
- declared_count is advisory and never compared to the bricks read
- A "Linecount" line right after a brick ends that brick's continuation
  lines; it is applied on the following pull
- Continuation lines with no brick before them in the same pull are
  skipped with a warning
- Any DecodeError raised from __next__ ends the iteration: the partial
  brick is discarded and later pulls raise StopIteration
- A failure while classifying the first post-palette line is deferred to
  the first pull so the header stays available
"""

from __future__ import annotations

import logging
from typing import BinaryIO, Optional, Tuple

from bls_decoder.core.errors import DecodeError
from bls_decoder.core.header import read_header
from bls_decoder.core.lines import iter_lines
from bls_decoder.core.model import Color, Record, RecordBase
from bls_decoder.core.records import ContinuationLine, CountLine, RecordLineStream

logger = logging.getLogger(__name__)


class SaveReader:
    """Streaming decoder for a single save file.

    Usage:
        with open("House.bls", "rb") as f:
            reader = SaveReader(f)
            print(reader.description)
            for record in reader:
                ...
            print(reader.declared_count)

    Raises (from the constructor):
        DescriptionTooLongError: If the header declares too many description lines.
        SourceReadError: If the byte source fails while reading the header.
    """

    def __init__(self, source: BinaryIO) -> None:
        lines = iter_lines(source)
        header = read_header(lines)
        self._description = header.description
        self._palette = header.palette
        self._declared_count: Optional[int] = None
        self._stream = RecordLineStream(lines)
        self._finished = False

        try:
            first = self._stream.peek()
        except DecodeError:
            # Left in the lookahead; raised by the first pull.
            first = None
        if isinstance(first, CountLine):
            next(self._stream)
            self._set_declared_count(first.count)

    @property
    def description(self) -> str:
        return self._description

    @property
    def palette(self) -> Tuple[Color, ...]:
        """The 64 palette colours, indexed by RecordBase.palette_index."""
        return self._palette

    @property
    def declared_count(self) -> Optional[int]:
        """The brick count the file claims, or None if it never says.

        Not guaranteed to match the number of bricks actually read.
        """
        return self._declared_count

    def __iter__(self) -> "SaveReader":
        return self

    def __next__(self) -> Record:
        if self._finished:
            raise StopIteration
        try:
            base = self._next_base()
            if base is None:
                self._finished = True
                raise StopIteration

            record = Record(base=base)
            while isinstance(self._stream.peek(), ContinuationLine):
                record.continuations.append(next(self._stream).text)
            return record
        except DecodeError:
            self._finished = True
            raise

    def _next_base(self) -> Optional[RecordBase]:
        """Consume lines up to and including the next brick line."""
        for item in self._stream:
            if isinstance(item, CountLine):
                self._set_declared_count(item.count)
            elif isinstance(item, ContinuationLine):
                logger.warning("Skipping extra brick data with no brick: %r", item.text)
            else:
                return item
        return None

    def _set_declared_count(self, count: int) -> None:
        if self._declared_count is not None and self._declared_count != count:
            logger.debug("Brick count redeclared: %d -> %d", self._declared_count, count)
        else:
            logger.debug("Declared brick count: %d", count)
        self._declared_count = count
