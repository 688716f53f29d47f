"""Lazy line splitting over a binary save file source.

WHY: Save files can be large and are read in a single forward pass. Lines
must come out decoded, one at a time, without ever holding the whole file.

HOW: iter_lines() is a generator around source.readline(). Each raw line
has its terminator removed and is decoded byte-by-byte through the
Windows-1252 table.

RULES:
- "\\n" and "\\r\\n" both terminate a line
- "\\r" is only stripped when it directly precedes the removed "\\n"
- The last line does not need a terminator
- An OSError from the source is raised as SourceReadError, after which the
  generator is exhausted
"""

from __future__ import annotations

from typing import BinaryIO, Iterator

from bls_decoder.core.cp1252 import decode_bytes
from bls_decoder.core.errors import SourceReadError


def strip_terminator(raw: bytes) -> bytes:
    """Remove a trailing LF or CRLF from a raw line."""
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw


def iter_lines(source: BinaryIO) -> Iterator[str]:
    """Yield decoded lines from a buffered binary source until it is empty.

    Args:
        source: Any object with a bytes-returning readline(), such as a file
                opened in "rb" mode or io.BytesIO.

    Yields:
        Each line as text, terminator removed.

    Raises:
        SourceReadError: If reading from the source fails.
    """
    while True:
        try:
            raw = source.readline()
        except OSError as exc:
            raise SourceReadError("Failed to read save file: {}".format(exc)) from exc
        if not raw:
            return
        yield decode_bytes(strip_terminator(raw))
