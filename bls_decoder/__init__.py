"""Blockland save file decoder.

WHY: Blockland saves (.bls) are a lenient, line-oriented Windows-1252 text
format. Tools that want to inspect or convert builds need a decoder that
reads them the way the game does, including its tolerance for broken files.

HOW: Two layers. The core (SaveReader) streams the header metadata and
bricks from any binary source. The presentation layer (cli, formatters)
drives the reader and renders summaries, descriptions, or JSON exports.

RULES:
- The core never opens files or prints; callers provide the byte source
- Bricks are yielded lazily, one pass, no reset
- Malformed fields default silently; structural errors raise DecodeError
"""

from bls_decoder.core.errors import (
    DecodeError,
    DescriptionTooLongError,
    ErrorKind,
    InvalidRecordLineError,
    SourceReadError,
)
from bls_decoder.core.model import Color, Record, RecordBase
from bls_decoder.core.reader import SaveReader

__version__ = "0.1.0"

__all__ = [
    "Color",
    "DecodeError",
    "DescriptionTooLongError",
    "ErrorKind",
    "InvalidRecordLineError",
    "Record",
    "RecordBase",
    "SaveReader",
    "SourceReadError",
]
