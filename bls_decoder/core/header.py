"""Save file header: banner, description and colour palette.

WHY: Everything before the first brick line has a fixed shape. Callers
want the description and palette as soon as the reader is constructed,
before pulling any bricks.

HOW: read_header() pulls lines from the shared line iterator in strict
order: one banner line, the description length, that many description
lines, then exactly 64 colour lines. Missing lines are treated as empty.

RULES:
- The banner is discarded without validation
- A description length above MAX_DESCRIPTION_LINES is fatal
- Description lines are joined with "\\n", then escapes are collapsed
- The palette always has PALETTE_SIZE entries
- Parse failures default silently; only SourceReadError propagates besides
  DescriptionTooLongError
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from bls_decoder.core.errors import DescriptionTooLongError
from bls_decoder.core.escape import collapse_escapes
from bls_decoder.core.fields import FieldCursor, parse_unsigned
from bls_decoder.core.model import Color

logger = logging.getLogger(__name__)

MAX_DESCRIPTION_LINES = 1000
PALETTE_SIZE = 64


@dataclass
class SaveHeader:
    """Metadata decoded from the fixed-shape start of the file."""

    description: str
    palette: Tuple[Color, ...]


def parse_color(line: str) -> Color:
    """Parse "R G B A" into a Color, defaulting each missing field to 0.0."""
    cursor = FieldCursor(line)
    return Color(
        r=cursor.float32(),
        g=cursor.float32(),
        b=cursor.float32(),
        a=cursor.float32(),
    )


def read_header(lines: Iterator[str]) -> SaveHeader:
    """Consume the banner, description and palette from lines.

    Args:
        lines: The decoded line iterator; left positioned at the line
               after the palette.

    Returns:
        SaveHeader with the collapsed description and 64 colours.

    Raises:
        DescriptionTooLongError: If more than 1000 description lines are declared.
        SourceReadError: If the byte source fails.
    """
    next(lines, "")

    description_line_count = parse_unsigned(next(lines, ""))
    if description_line_count > MAX_DESCRIPTION_LINES:
        raise DescriptionTooLongError(description_line_count)

    description_lines: List[str] = []
    for _ in range(description_line_count):
        line = next(lines, None)
        if line is None:
            break
        description_lines.append(line)
    if len(description_lines) < description_line_count:
        logger.warning(
            "Description declares %d lines but input ended after %d",
            description_line_count, len(description_lines),
        )
        description_lines.extend([""] * (description_line_count - len(description_lines)))
    description = collapse_escapes("\n".join(description_lines))

    palette = tuple(parse_color(next(lines, "")) for _ in range(PALETTE_SIZE))

    logger.debug(
        "Parsed header: %d description lines, %d colours",
        description_line_count, len(palette),
    )
    return SaveHeader(description=description, palette=palette)
