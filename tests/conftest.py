"""Shared test fixtures for the bls_decoder test suite.

WHY: Most test modules need well-formed save files with small, known
contents, plus variations with missing or broken parts. Building them in
one place keeps the byte layout consistent across tests.

HOW: build_save() assembles a save file from its parts (banner,
description, palette, body lines) and encodes it as Windows-1252 bytes.
Fixtures expose the builder (save_bytes, make_save) and a ready-made
sample save. Test modules use the fixtures rather than importing from
this file.

RULES:
- Lines are joined with "\\r\\n" like the game writes them, unless a test
  asks for a different terminator
- A palette shorter than 64 entries is written as-is (no padding), so
  tests can exercise missing colour lines
- The sample save has 3 bricks, the second one with two "+-" lines
"""

import io
from typing import List, Optional, Sequence

import pytest


# ---------------------------------------------------------------------------
# Sample save contents
# ---------------------------------------------------------------------------

BANNER = (
    "This is a Blockland save file.  "
    "You probably shouldn't modify it cause you'll screw it up."
)
"""First line the game writes; the decoder skips it unread."""

SAMPLE_DESCRIPTION = ["My House", "Built by \\c0Alice\\c1 in 2012"]

SAMPLE_COLORS: List[str] = (
    ["1.000000 0.000000 0.000000 1.000000", "0.000000 1.000000 0.000000 1.000000"]
    + ["0.500000 0.500000 0.500000 0.500000"] * 62
)

SAMPLE_BRICKS: List[str] = [
    '2x2 Base" 0 0 0.1 0 1 5  0 0 1 1 1',
    '1x1 Cube" 1.5 -2.25 3 1 0 2 Letters/A 3 1 1 1 0',
    "+-OWNER 9789",
    '+-EVENT 0 1 onActivate 0 Self setColor 3',
    '32x32 Road" 10 10 0.2 3 1 63  0 0 1 1 1',
]


def build_save(
    description: Sequence[str] = SAMPLE_DESCRIPTION,
    colors: Sequence[str] = SAMPLE_COLORS,
    body: Sequence[str] = SAMPLE_BRICKS,
    count_line: Optional[str] = "Linecount 3",
    description_count: Optional[str] = None,
    terminator: str = "\r\n",
    trailing_terminator: bool = True,
) -> bytes:
    """Assemble a save file and encode it as Windows-1252.

    Args:
        description: Description lines, escapes left as written.
        colors: Palette lines ("R G B A").
        body: Brick and "+-" lines after the count line.
        count_line: Line written between palette and body, or None.
        description_count: Overrides the description length line.
        terminator: Line terminator.
        trailing_terminator: Whether the last line ends with the terminator.
    """
    lines = [BANNER]
    lines.append(description_count if description_count is not None else str(len(description)))
    lines.extend(description)
    lines.extend(colors)
    if count_line is not None:
        lines.append(count_line)
    lines.extend(body)

    text = terminator.join(lines)
    if trailing_terminator:
        text += terminator
    return text.encode("cp1252")


@pytest.fixture
def save_bytes():
    """The build_save() function, for tests that need raw bytes or a file."""
    return build_save


@pytest.fixture
def make_save():
    """Builder returning a BytesIO save file; see build_save() for arguments."""
    def _make(**kwargs) -> io.BytesIO:
        return io.BytesIO(build_save(**kwargs))
    return _make


@pytest.fixture
def sample_save_bytes() -> bytes:
    """The sample save as raw bytes."""
    return build_save()


@pytest.fixture
def sample_save_path(tmp_path, sample_save_bytes):
    """The sample save written to House.bls in a temp directory."""
    path = tmp_path / "House.bls"
    path.write_bytes(sample_save_bytes)
    return path
