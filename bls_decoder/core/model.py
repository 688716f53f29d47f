"""Data model for decoded save files.

WHY: The reader hands bricks and colours to callers one at a time. A small
set of plain dataclasses gives every consumer (the CLI formatters, tests,
downstream tools) the same well-typed view of a brick.

HOW: Three dataclasses:
  Color     : one palette entry (RGBA floats, un-normalized)
  RecordBase: the fields every brick line carries
  Record    : a RecordBase plus the "+-" lines that followed it

RULES:
- Values are stored exactly as parsed; nothing is range-checked
- Floats are rounded to 32-bit precision by the parser, not here
- continuations keep the raw line text, including the "+-" marker
- Instances are not modified after the reader yields them
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class Color:
    """One palette entry.

    RULES:
    - Components come straight from the text, so values above 1.0 or below
      0.0 are kept as-is
    - Missing components default to 0.0
    """

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    @property
    def is_opaque(self) -> bool:
        return self.a >= 1.0


@dataclass
class RecordBase:
    """The fields of a single brick line.

    WHY: Every brick line has the same fixed layout after the datablock
    name. Extended attributes (owner, events, lights, ...) live on the
    continuation lines and are not modeled.

    RULES:
    - label: the datablock UI name, text before the first double quote
    - position: (x, y, z)
    - orientation: rotation index, 0-3 in valid files
    - palette_index: index into the palette, 0-63 in valid files
    - print_name: "" means the brick has no print
    - orientation, palette_index, color_effect, shape_effect keep the low
      8 bits of whatever integer was written
    """

    label: str
    position: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    orientation: int = 0
    is_special_base: bool = False
    palette_index: int = 0
    print_name: str = ""
    color_effect: int = 0
    shape_effect: int = 0
    castable_ray: bool = False
    collidable: bool = False
    visible: bool = False


@dataclass
class Record:
    """A brick: its base line plus any continuation lines that followed it."""

    base: RecordBase
    continuations: List[str] = field(default_factory=list)
