"""Parse-or-default helpers for the space-delimited numeric fields.

WHY: The game reads brick and colour fields with lenient number parsing:
anything missing or unparsable becomes zero. Scattering try/except around
every field would make the defaults easy to get subtly wrong, so every
field goes through one helper per type.

HOW: FieldCursor walks a line one word at a time. A word is everything up
to the next single space (which is consumed) or to the end of the line.
The parse_* helpers turn a word into a value or its default.

RULES:
- Floats: optional sign, digits with optional fraction and exponent, or
  inf/infinity/nan; correctly rounded to 32-bit precision (the decimal text
  decides ties, not the intermediate 64-bit float); overflow becomes +/-inf
- Signed integers must fit in 32 bits, unsigned in 64 bits (optional "+")
- to_byte keeps the low 8 bits (two's complement, so -1 becomes 255)
- Flags are integers compared against zero
- Every failure returns the default (0.0, 0, False, ""); nothing raises
"""

from __future__ import annotations

import math
import re
import struct
from fractions import Fraction

_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")

_INT32_MIN = -(2 ** 31)
_INT32_MAX = 2 ** 31 - 1
_UINT64_MAX = 2 ** 64 - 1
_FLOAT32 = struct.Struct("<f")
_UINT32 = struct.Struct("<I")


def to_float32(value: float) -> float:
    """Round a Python float to the nearest 32-bit float."""
    try:
        return _FLOAT32.unpack(_FLOAT32.pack(value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _float32_step(value: float, toward: float) -> float:
    """The 32-bit float adjacent to value in the direction of toward."""
    if value == 0.0:
        bits = 1 if toward > 0 else 0x80000001
    else:
        bits = _UINT32.unpack(_FLOAT32.pack(value))[0]
        bits += 1 if (toward > value) == (value > 0) else -1
    return _FLOAT32.unpack(_UINT32.pack(bits))[0]


def parse_float32(word: str) -> float:
    if not _FLOAT_RE.fullmatch(word):
        return 0.0
    value = float(word)
    rounded = to_float32(value)
    if rounded == value or math.isinf(rounded) or math.isnan(value):
        return rounded

    # float() has already rounded once. Only a result landing exactly halfway
    # between two 32-bit floats can round the wrong way the second time.
    neighbor = _float32_step(rounded, value)
    if Fraction(rounded) + Fraction(neighbor) != 2 * Fraction(value):
        return rounded
    exact = Fraction(word)
    if exact != value and (exact > value) == (neighbor > value):
        return neighbor
    return rounded


def parse_int32(word: str) -> int:
    if not _SIGNED_RE.fullmatch(word):
        return 0
    value = int(word)
    if value < _INT32_MIN or value > _INT32_MAX:
        return 0
    return value


def parse_unsigned(word: str) -> int:
    """Parse a non-negative integer such as a line count; 0 on failure."""
    if not _UNSIGNED_RE.fullmatch(word):
        return 0
    value = int(word)
    return value if value <= _UINT64_MAX else 0


def to_byte(value: int) -> int:
    return value & 0xFF


def parse_flag(word: str) -> bool:
    return parse_int32(word) != 0


class FieldCursor:
    """Consume words from a line, left to right.

    Usage:
        cursor = FieldCursor("1 0.5 0 1")
        red = cursor.float32()
        green = cursor.float32()
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def word(self) -> str:
        """Return the next word and consume the single space after it."""
        if self._pos >= len(self._text):
            return ""
        end = self._text.find(" ", self._pos)
        if end == -1:
            word = self._text[self._pos:]
            self._pos = len(self._text)
        else:
            word = self._text[self._pos:end]
            self._pos = end + 1
        return word

    def float32(self) -> float:
        return parse_float32(self.word())

    def int32(self) -> int:
        return parse_int32(self.word())

    def byte(self) -> int:
        return to_byte(self.int32())

    def flag(self) -> bool:
        return parse_flag(self.word())
