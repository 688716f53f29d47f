"""Abstract base formatter, output container and decoded-save snapshot.

WHY: Every report consumes the same decoded save but produces different
file content. This base class enforces a consistent interface so the CLI
can work with any formatter generically.

HOW: BaseFormatter is an ABC with a ``name`` property, a ``needs_records``
flag and a ``format()`` method. DecodedSave is what the CLI hands to
formatters after driving the reader. FormatterOutput bundles a file suffix
with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` and ``format()``
- ``needs_records`` is False unless the formatter reads DecodedSave.records;
  the CLI only keeps bricks in memory when some formatter asks for them
- ``suffix`` is appended to the source stem, e.g. ``"-summary.txt"``
- DecodedSave.error is set when the brick stream ended in a failure
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from bls_decoder.core.model import Color, Record


@dataclass
class DecodedSave:
    """Snapshot of one fully driven SaveReader.

    Attributes:
        source_filename: Name of the decoded file, for report headers.
        description: Collapsed description text.
        palette: The 64 palette colours.
        declared_count: Final "Linecount" value, or None if absent.
        record_count: Number of bricks successfully read.
        records: The bricks themselves, only filled when requested.
        error: Message of the failure that ended the stream, if any.
    """

    source_filename: str
    description: str
    palette: Tuple[Color, ...]
    declared_count: Optional[int]
    record_count: int = 0
    records: List[Record] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``"-summary.txt"`` → ``"House-summary.txt"``.
        content: The file content.
        media_type: MIME type for the content, e.g. ``"application/json"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all output formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    needs_records: bool = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Summary'."""

    @abstractmethod
    def format(self, save: DecodedSave) -> List[FormatterOutput]:
        """Render the decoded save into one or more output files."""
