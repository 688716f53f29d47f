"""Description-only text output."""

from __future__ import annotations

from typing import List

from bls_decoder.formatters.base import BaseFormatter, DecodedSave, FormatterOutput


class DescriptionFormatter(BaseFormatter):
    """Writes the escape-collapsed description, newline terminated."""

    @property
    def name(self) -> str:
        return "Description"

    def format(self, save: DecodedSave) -> List[FormatterOutput]:
        content = save.description
        if content and not content.endswith("\n"):
            content += "\n"
        return [
            FormatterOutput(
                suffix="-description.txt",
                content=content,
                media_type="text/plain",
            )
        ]
