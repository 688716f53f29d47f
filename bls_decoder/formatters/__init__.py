"""Output formatter registry.

WHY: The CLI needs a single lookup to find the right formatter by name.
A central dict makes it trivial to add new reports: create the formatter
class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["summary"]()``.

RULES:
- Keys are snake_case identifiers (used in --formats and BLS_DEFAULT_FORMATS)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bls_decoder.formatters.description import DescriptionFormatter
from bls_decoder.formatters.json_export import JSONFormatter
from bls_decoder.formatters.summary import SummaryFormatter

if TYPE_CHECKING:
    from bls_decoder.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "summary": SummaryFormatter,
    "description": DescriptionFormatter,
    "json": JSONFormatter,
}
