#
# PROJECT: star-pattern-renderer
# MODULE: star_pattern_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import math
from enum import Enum

from .errors import InvalidInput

log = logging.getLogger(__name__)

# Every visual unit is two characters wide to offset the terminal font's
# tall aspect ratio.
MARK = "* "
BLANK = "  "


class RenderMode(str, Enum):
    SOLID = "solid"
    HOLLOW = "hollow"

    @classmethod
    def parse(cls, value) -> 'RenderMode':
        """
        Exact, case-sensitive lookup.  'Solid' or 'square' raise InvalidInput.
        """
        if isinstance(value, cls):
            return value
        for mode in cls:
            if value == mode.value:
                return mode
        raise InvalidInput(value)


def clamp_size(value, minimum: int = 1) -> int:
    """floor(value), never below `minimum`.  Falsy values count as 1."""
    return max(minimum, math.floor(value or 1))


def clamp_odd(value, minimum: int = 3) -> int:
    """Force an odd size (value | 1) no smaller than `minimum`."""
    return max(minimum, clamp_size(value) | 1)


def is_edge(r, c, h, w) -> bool:
    return r == 0 or c == 0 or r == h - 1 or c == w - 1


def render_grid(height, width, mode, fill, border=None):
    """
    Evaluate `fill` (and, in hollow mode, `border`) for every cell of an
    height x width grid and return one text line per row.

    Predicates are called as pred(r, c, h, w).  `border` defaults to
    bounding-box edge detection and is never consulted in solid mode.
    """
    mode = RenderMode.parse(mode)
    height = clamp_size(height)
    width = clamp_size(height if width is None else width)
    if border is None:
        border = is_edge
    log.debug("render_grid %dx%d mode=%s", height, width, mode.value)

    lines = []
    for r in range(height):
        cells = []
        for c in range(width):
            if not fill(r, c, height, width):
                cells.append(BLANK)
            elif mode is RenderMode.SOLID or border(r, c, height, width):
                cells.append(MARK)
            else:
                cells.append(BLANK)
        lines.append("".join(cells))
    return lines


def centered_row(leading_blank_units, mark_count, mode,
                 allow_hollow=True, is_boundary_row=False) -> str:
    """
    Build one row of a triangular shape.

    Solid rows, rows of at most two marks and boundary rows (apex/base) are
    fully marked; hollow interior rows only mark their two end points.
    """
    mode = RenderMode.parse(mode)
    line = BLANK * max(0, leading_blank_units)
    if (mode is RenderMode.SOLID or not allow_hollow
            or mark_count <= 2 or is_boundary_row):
        return line + MARK * max(0, mark_count)
    return line + MARK + BLANK * max(0, mark_count - 2) + MARK
