"""Configuration constants and .env loading for the command-line tool.

WHY: Centralizes the few values a user may want to change without
touching code: which reports to produce by default, how chatty logging is,
and how the JSON export is indented.

HOW: python-dotenv loads the .env file on import. Constants are module-level
values read from the environment with sensible defaults.
parse_format_keys() turns a comma-separated list into validated formatter
keys, and load_json_indent() validates the export indentation when the
JSON formatter asks for it.

RULES:
- Every value can be overridden via environment variables
- The decoder core never reads configuration; only the CLI does
- Unknown formatter keys raise ValueError with the list of valid keys
- A BLS_JSON_INDENT that is not a non-negative whole number raises
  ValueError naming the variable and the bad value
"""

from __future__ import annotations

import os
from typing import Iterable, List

from dotenv import load_dotenv

# Load .env from the working directory
load_dotenv()

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("BLS_LOG_LEVEL", "WARNING").upper()
DEFAULT_FORMATS = os.getenv("BLS_DEFAULT_FORMATS", "summary")

SAVE_FILE_SUFFIXES: set[str] = {".bls"}
"""Extensions the game writes saves with (lowercase, with dot)."""

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def parse_format_keys(value: str, available: Iterable[str]) -> List[str]:
    """Split a comma-separated format list and validate each key.

    RULES:
    - Whitespace around keys is ignored, empty entries are dropped
    - Order is preserved, duplicates are removed
    - Raises ValueError naming the unknown key and the available ones
    """
    known = set(available)
    keys: List[str] = []
    for raw in value.split(","):
        key = raw.strip()
        if not key or key in keys:
            continue
        if key not in known:
            raise ValueError(
                "Unknown format '{}'. Available formats: {}".format(
                    key, ", ".join(sorted(known))
                )
            )
        keys.append(key)
    if not keys:
        raise ValueError("No output format selected")
    return keys


def load_json_indent() -> int:
    """Load the JSON export indentation from the environment.

    HOW: Reads BLS_JSON_INDENT (populated by python-dotenv), default 2.

    RULES:
    - Surrounding whitespace is ignored
    - Raises ValueError if the value is not a whole number of 0 or more
    """
    raw = os.getenv("BLS_JSON_INDENT", "2").strip()
    try:
        indent = int(raw)
    except ValueError:
        indent = -1
    if indent < 0:
        raise ValueError(
            "BLS_JSON_INDENT must be a whole number of 0 or more, got '{}'. "
            "Fix it in the environment or the .env file.".format(raw)
        )
    return indent
