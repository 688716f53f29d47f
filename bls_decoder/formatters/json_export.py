"""JSON export of the full decoded save.

WHY: Other tools (converters, viewers, diff scripts) want every brick in
a format they can load without reimplementing the save grammar.

HOW: Converts the DecodedSave into the SaveDocument pydantic model and
serializes it with model_dump_json().

RULES:
- Requires records, so needs_records is True
- Indentation comes from load_json_indent() (BLS_JSON_INDENT), read when
  the formatter is constructed so a bad value fails before decoding
- Non-finite floats serialize as "Infinity", "-Infinity" or "NaN" strings
- Output suffix: ".json"
- Media type: "application/json"
"""

from __future__ import annotations

from typing import List

from bls_decoder.config import load_json_indent
from bls_decoder.formatters.base import BaseFormatter, DecodedSave, FormatterOutput
from bls_decoder.formatters.models import SaveDocument


class JSONFormatter(BaseFormatter):
    """Formatter that exports the header and every brick as JSON."""

    needs_records = True

    def __init__(self) -> None:
        self.indent = load_json_indent()

    @property
    def name(self) -> str:
        return "JSON"

    def format(self, save: DecodedSave) -> List[FormatterOutput]:
        document = SaveDocument.from_decoded(save)
        return [
            FormatterOutput(
                suffix=".json",
                content=document.model_dump_json(indent=self.indent) + "\n",
                media_type="application/json",
            )
        ]
