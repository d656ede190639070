"""Name tower: render a name as a centered triangle of letters.

"First Middle Last" becomes::

            F
          I R S
        T * M I D
      D L E * L A S
    T * * * * * * * *

Rules:
    - Rows are numbered from 1; row k holds 2k-1 characters of the name.
    - The number of rows is ceil(sqrt(len(name))).
    - The name is uppercased and spaces within it become asterisks.
    - The last row is lengthened with asterisks when the name runs out.
    - Characters in a row are separated by single spaces.
    - Rows are centered on the last row.

The work is done by four stages, each a plain function:
extract_raw_rows -> enhance_rows -> center_rows -> render_rows.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from name_tower.style import DEFAULT_STYLE, TowerStyle

logger = logging.getLogger(__name__)

LINE_BREAK = "\n"
_SUBSTITUTED = frozenset(" \n\r")


class InvalidInput(ValueError):
    """Raised when the name is missing or not a string."""


def row_length(row_num: int) -> int:
    """Nominal number of characters in 1-based row *row_num*."""
    return row_num * 2 - 1


def row_count(name_length: int) -> int:
    """Number of rows for a name of *name_length* characters: ceil(sqrt(n))."""
    root = math.isqrt(name_length)
    return root if root * root == name_length else root + 1


# ---------------------------------------------------------------------------
# Stage 1: extraction
# ---------------------------------------------------------------------------


def extract_raw_rows(name: str, style: TowerStyle = DEFAULT_STYLE) -> List[str]:
    """Slice *name* into rows of 1, 3, 5, ... characters.

    The last row is padded with ``style.filler`` up to its nominal length.
    An empty name yields no rows.
    """
    num_rows = row_count(len(name))
    rows: List[str] = []
    offset = 0
    for row_num in range(1, num_rows + 1):
        # Don't copy past the end of the name.
        end = min(len(name), offset + row_length(row_num))
        rows.append(name[offset:end])
        offset = end

    if rows:
        pad_len = row_length(num_rows) - len(rows[-1])
        rows[-1] += style.filler * pad_len
    return rows


# ---------------------------------------------------------------------------
# Stage 2: enhancement
# ---------------------------------------------------------------------------


def _upper(char: str) -> str:
    # str.upper() may expand a character ("ß" -> "SS"); keep one token per char.
    upper = char.upper()
    return upper if len(upper) == 1 else char


def enhance_row(row: str, style: TowerStyle = DEFAULT_STYLE) -> str:
    """Uppercase *row*, substitute spaces and separate the characters.

    Line breaks in the name are substituted like spaces so that every row
    renders on a single line.
    """
    chars = [style.space_substitute if c in _SUBSTITUTED else _upper(c) for c in row]
    return style.separator.join(chars)


def enhance_rows(rows: Sequence[str], style: TowerStyle = DEFAULT_STYLE) -> List[str]:
    return [enhance_row(row, style) for row in rows]


# ---------------------------------------------------------------------------
# Stage 3: centering
# ---------------------------------------------------------------------------


def center_rows(rows: Sequence[str]) -> List[str]:
    """Left-pad every row with spaces so it is centered on the last row.

    Rows are never right-padded, so only the last row spans the full width.
    """
    if not rows:
        return []
    max_width = len(rows[-1])
    return [" " * ((max_width - len(row)) // 2) + row for row in rows]


# ---------------------------------------------------------------------------
# Stage 4: rendering
# ---------------------------------------------------------------------------


def render_rows(rows: Sequence[str]) -> str:
    return LINE_BREAK.join(rows)


# ---------------------------------------------------------------------------
# Public entry-point
# ---------------------------------------------------------------------------


def generate_tower(name: str, style: Optional[TowerStyle] = None) -> str:
    """Generate the name tower for *name*.

    Args:
        name: The name from which to build the tower.
        style: Rendering characters; defaults to asterisks and single spaces.

    Returns:
        The tower, rows joined by ``"\\n"`` with no trailing line break.

    Raises:
        InvalidInput: If *name* is None or not a string.
    """
    if name is None:
        raise InvalidInput("Name must not be None!")
    if not isinstance(name, str):
        raise InvalidInput(f"Name must be a string, got {type(name).__name__}")
    if style is None:
        style = DEFAULT_STYLE

    raw_rows = extract_raw_rows(name, style)
    enhanced = enhance_rows(raw_rows, style)
    centered = center_rows(enhanced)
    logger.debug(
        "Tower for %r: %d rows, width %d",
        name,
        len(centered),
        len(centered[-1]) if centered else 0,
    )
    return render_rows(centered)


# camelCase alias
generateTower = generate_tower
