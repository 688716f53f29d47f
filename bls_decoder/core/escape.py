"""Resolution of the backslash escapes used in save descriptions.

WHY: The game stores description text with TorqueScript-style escapes:
hex bytes, the usual "\\n"-style whitespace, and "\\cN" colour/formatting
markers for its rich text control. Readers want the characters the game
would display, not the escaped source.

HOW: collapse_escapes() walks the text with a single iterator. A backslash
hands off to _collapse_one(), which consumes as many characters as the
escape needs and appends the result.

RULES:
- Never raises; anything unrecognized degrades to literal text
- "\\xHH" maps the byte through the Windows-1252 table
- "\\x" with fewer than two hex digits is emitted unchanged
- "\\c0" emits an extra code 2 when it is the first thing in the output
- Unknown "\\cX" is kept as "\\c" + X
- Any other escaped character is emitted without its backslash
- A trailing lone backslash is kept
"""

from __future__ import annotations

import string
from typing import Iterator, List

from bls_decoder.core.cp1252 import byte_to_char

# "\cX" suffix -> control code used by the game's rich text markup.
CONTROL_ESCAPES = {
    "r": 15,
    "p": 16,
    "o": 17,
    "0": 1,
    "1": 2,
    "2": 3,
    "3": 4,
    "4": 5,
    "5": 6,
    "6": 7,
    "7": 0x0B,
    "8": 0x0C,
    "9": 0x0E,
}

WHITESPACE_ESCAPES = {
    "r": "\r",
    "n": "\n",
    "t": "\t",
}

# Emitted ahead of "\c0" when it opens the text.
_RESET_PREFIX = chr(2)


def collapse_escapes(text: str) -> str:
    """Return text with all backslash escapes resolved.

    Args:
        text: Decoded description text, lines already joined with "\\n".

    Returns:
        The collapsed text.
    """
    out: List[str] = []
    chars = iter(text)
    for char in chars:
        if char == "\\":
            _collapse_one(out, chars)
        else:
            out.append(char)
    return "".join(out)


def _collapse_one(out: List[str], chars: Iterator[str]) -> None:
    """Consume one escape body from chars and append its expansion to out."""
    marker = next(chars, None)

    if marker is None:
        out.append("\\")
    elif marker == "x":
        _collapse_hex(out, chars)
    elif marker == "c":
        suffix = next(chars, None)
        if suffix is None:
            out.append("\\c")
        elif suffix in CONTROL_ESCAPES:
            if suffix == "0" and not out:
                out.append(_RESET_PREFIX)
            out.append(chr(CONTROL_ESCAPES[suffix]))
        else:
            out.append("\\c" + suffix)
    elif marker in WHITESPACE_ESCAPES:
        out.append(WHITESPACE_ESCAPES[marker])
    else:
        out.append(marker)


def _collapse_hex(out: List[str], chars: Iterator[str]) -> None:
    digits = ""
    for _ in range(2):
        char = next(chars, None)
        if char is None:
            break
        digits += char

    if len(digits) == 2 and all(d in string.hexdigits for d in digits):
        out.append(byte_to_char(int(digits, 16)))
    else:
        out.append("\\x" + digits)
