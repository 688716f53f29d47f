"""Typed decoding failures raised by the save file reader.

WHY: The reader tolerates most malformed data by falling back to defaults,
but a handful of structural problems cannot be recovered from. Callers need
a single exception type to catch, plus enough detail to tell broken input
apart from a failing byte source.

HOW: DecodeError is the common base. It carries a human-readable reason and
an ErrorKind. Subclasses exist for each fatal condition so tests and callers
can be specific when they want to be.

RULES:
- Every fatal condition raises a DecodeError subclass, never a bare OSError
- kind is MALFORMED for bad input, IO for failures of the byte source
- SourceReadError always chains the original OSError (raise ... from exc)
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of a decoding failure."""

    MALFORMED = "malformed"
    IO = "io"


class DecodeError(Exception):
    """Raised when a save file cannot be decoded.

    WHY: Callers need a typed exception to distinguish decoding failures
    from unrelated errors in their own code.

    HOW: Wraps a reason string and an ErrorKind.

    RULES:
    - reason is always a human-readable sentence fragment
    - str(error) is the reason
    """

    def __init__(self, reason: str, kind: ErrorKind = ErrorKind.MALFORMED) -> None:
        self.reason = reason
        self.kind = kind
        super().__init__(reason)


class DescriptionTooLongError(DecodeError):
    """Raised when the description declares more than 1000 lines."""

    def __init__(self, line_count: int) -> None:
        self.line_count = line_count
        super().__init__(
            "Description is unreasonably long ({} lines declared)".format(line_count)
        )


class InvalidRecordLineError(DecodeError):
    """Raised when a brick line lacks its quote or the space after it.

    RULES:
    - line is the offending decoded line, kept for error reporting
    """

    def __init__(self, line: str, reason: str = "Invalid brick line") -> None:
        self.line = line
        super().__init__(reason)


class SourceReadError(DecodeError):
    """Raised when the underlying byte source fails while reading a line."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason, ErrorKind.IO)
