"""Plain text summary of a decoded save.

WHY: The quickest sanity check on a save is: what does it say about
itself, how many colours are usable, how many bricks does it claim, and
how many could actually be read.

HOW: Writes the description under a "Description:" header, followed by
one "Key: value" line per statistic. A terminal decoding error is
appended on its own line.

RULES:
- Opaque colours are palette entries with alpha >= 1.0
- A missing "Linecount" line prints as "unknown"
- Output suffix: "-summary.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List

from bls_decoder.formatters.base import BaseFormatter, DecodedSave, FormatterOutput


class SummaryFormatter(BaseFormatter):
    """Formatter that reports description and brick counts."""

    @property
    def name(self) -> str:
        return "Summary"

    def format(self, save: DecodedSave) -> List[FormatterOutput]:
        opaque_colors = sum(1 for color in save.palette if color.is_opaque)
        expected = "unknown" if save.declared_count is None else str(save.declared_count)

        lines = [
            "Description:",
            save.description,
            "Opaque color count: {}".format(opaque_colors),
            "Expected brick count: {}".format(expected),
            "Actual brick count: {}".format(save.record_count),
        ]
        if save.error:
            lines.append("Error: {}".format(save.error))

        return [
            FormatterOutput(
                suffix="-summary.txt",
                content="\n".join(lines) + "\n",
                media_type="text/plain",
            )
        ]
