"""Windows-1252 byte to code point table.

WHY: Save files are written in the legacy single-byte Windows-1252 code
page. Python's built-in cp1252 codec rejects five unassigned bytes, but the
producing application writes whatever bytes it has, so decoding must be
total.

HOW: Windows-1252 matches Latin-1 everywhere except 0x80-0x9F. The table is
Latin-1 with that range overridden. Unassigned bytes keep their C1 control
code point, the same fallback browsers use.

RULES:
- DECODING_TABLE has exactly 256 entries, one per byte value
- Decoding never fails
"""

from __future__ import annotations

import codecs

# 0x80-0x9F; None marks bytes Windows-1252 leaves unassigned.
_HIGH_CONTROL_RANGE = (
    "€", None, "‚", "ƒ", "„", "…", "†", "‡",
    "ˆ", "‰", "Š", "‹", "Œ", None, "Ž", None,
    None, "‘", "’", "“", "”", "•", "–", "—",
    "˜", "™", "š", "›", "œ", None, "ž", "Ÿ",
)


def _build_table() -> str:
    chars = [chr(b) for b in range(256)]
    for offset, char in enumerate(_HIGH_CONTROL_RANGE):
        if char is not None:
            chars[0x80 + offset] = char
    return "".join(chars)


DECODING_TABLE: str = _build_table()
"""256-character charmap, index = byte value."""


def byte_to_char(byte: int) -> str:
    """Map a single byte value (0-255) to its character."""
    return DECODING_TABLE[byte]


def decode_bytes(data: bytes) -> str:
    """Decode a whole byte run, one character per byte."""
    return codecs.charmap_decode(data, "strict", DECODING_TABLE)[0]
