#
# PROJECT: star-pattern-renderer
# MODULE: star_pattern_renderer/shapes.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#
"""
Parametric shape primitives.

Two families live here:

  * row shapes (triangles, diamond, hourglass, up/down arrows, butterfly,
    parallelogram, trapezium) built line by line with `centered_row`;
  * grid shapes, each a ShapePredicate (fill + border strategy) evaluated
    by `render_grid`.

Every primitive takes the render mode first and returns a list of lines.
Sizes are clamped to the per-shape minimums before any geometry is computed.
"""

import math

from .renderer import (BLANK, RenderMode, centered_row, clamp_odd, clamp_size,
                       is_edge, render_grid)

# Tuned constants, kept as-is: they decide which cells read as "the ring".
CIRCLE_RING_TOLERANCE = 0.7
HEXAGON_EDGE_TOLERANCE = 0.6
PENTAGON_EDGE_TOLERANCE = 1.0
HEART_RADIUS_FRACTION = 0.25


# ---------------------------------------------------------------------------
# Predicate strategies
# ---------------------------------------------------------------------------

def _always(r, c, h, w):
    return True


class ShapePredicate:
    """
    Fill/border pair for a grid shape.

    fill(r, c, h, w) decides membership; border(r, c, h, w) picks which
    members are drawn in hollow mode.  The default border is the bounding
    box edge.
    """

    def fill(self, r, c, h, w) -> bool:
        return True

    def border(self, r, c, h, w) -> bool:
        return is_edge(r, c, h, w)

    def render(self, mode, height, width=None):
        return render_grid(height, width, mode, self.fill, self.border)


class GridShape(ShapePredicate):
    """ShapePredicate built from two plain callables."""
    __slots__ = ('_fill', '_border')

    def __init__(self, fill, border=None):
        self._fill = fill
        self._border = border

    def fill(self, r, c, h, w):
        return self._fill(r, c, h, w)

    def border(self, r, c, h, w):
        if self._border is None:
            return is_edge(r, c, h, w)
        return self._border(r, c, h, w)


def outline(fill) -> GridShape:
    """A shape whose silhouette is its own outline (X, plus, stripes...)."""
    return GridShape(fill, _always)


class SideArrow(ShapePredicate):
    """Two diagonal half-planes meeting at the horizontal midline."""

    def __init__(self, mid, mirrored=False):
        self.mid = mid
        self.mirrored = mirrored

    def fill(self, r, c, h, w):
        if self.mirrored:
            c = w - 1 - c
        mid = self.mid
        return ((c <= mid - r and r <= mid) or
                (c <= r - mid and r >= mid) or
                (c == mid and r == mid))

    def border(self, r, c, h, w):
        return True


class Wave(ShapePredicate):
    """One mark per column on a sampled sine."""

    def fill(self, r, c, h, w):
        period = max(2, w // 6)
        y = ((h - 1) / 2) * (1 - math.sin((2 * math.pi * c) / period))
        # round half up
        return r == math.floor(y + 0.5)

    def border(self, r, c, h, w):
        return True


class ConcentricSquares(ShapePredicate):
    def border(self, r, c, h, w):
        k = min(r, c, h - 1 - r, w - 1 - c)
        return k % 2 == 0 and (r == k or c == k or r == h - 1 - k or c == w - 1 - k)


class ConcentricDiamonds(ShapePredicate):
    """Manhattan rings around the centre; solid mode fills the whole diamond."""

    def __init__(self, mid, solid):
        self.mid = mid
        self.solid = solid

    def _distance(self, r, c):
        return abs(r - self.mid) + abs(c - self.mid)

    def fill(self, r, c, h, w):
        d = self._distance(r, c)
        return d <= self.mid and (self.solid or d % 2 == self.mid % 2)

    def border(self, r, c, h, w):
        d = self._distance(r, c)
        mid = self.mid
        return d == mid or (mid >= 2 and d == mid - 2) or (mid >= 4 and d == mid - 4)


class Frame(ShapePredicate):
    def __init__(self, thickness):
        self.thickness = thickness

    def border(self, r, c, h, w):
        t = self.thickness
        return r < t or c < t or r >= h - t or c >= w - t


class Circle(ShapePredicate):
    def __init__(self, mid):
        self.mid = mid
        self.radius = mid

    def fill(self, r, c, h, w):
        d2 = (r - self.mid) ** 2 + (c - self.mid) ** 2
        return d2 <= self.radius * self.radius

    def border(self, r, c, h, w):
        d = math.sqrt((r - self.mid) ** 2 + (c - self.mid) ** 2)
        return abs(d - self.radius) < CIRCLE_RING_TOLERANCE


class Mountains(ShapePredicate):
    """`peaks` triangular ridges across the width, one mark per column."""

    def __init__(self, peaks):
        self.peaks = peaks

    def fill(self, r, c, h, w):
        seg_w = w // self.peaks
        p = math.floor(c / (w / self.peaks))
        inside = c - p * seg_w
        up = inside if inside <= seg_w / 2 else seg_w - inside
        return r == h - 1 - math.floor((up / (seg_w / 2)) * (h - 1))

    def border(self, r, c, h, w):
        return True


class DiamondGrid(ShapePredicate):
    """Rhombus tiling with `cell`-sized tiles."""

    def __init__(self, cell, solid):
        self.cell = cell
        self.solid = solid

    def fill(self, r, c, h, w):
        mid = self.cell // 2
        d = abs((r % self.cell) - mid) + abs((c % self.cell) - mid)
        return d == mid or (self.solid and d <= mid)

    def border(self, r, c, h, w):
        return True


class Caret(ShapePredicate):
    """Half of a Manhattan diamond, pointing left or right."""

    def __init__(self, pointing='left'):
        self.pointing = pointing

    def _half(self, c, centre):
        return c <= centre if self.pointing == 'left' else c >= centre

    def fill(self, r, c, h, w):
        centre = (w - 1) // 2
        d = abs(r - (h - 1) // 2) + abs(c - centre)
        return d <= centre and self._half(c, centre)

    def border(self, r, c, h, w):
        centre = (w - 1) // 2
        d = abs(r - (h - 1) // 2) + abs(c - centre)
        return d == centre and self._half(c, centre)


class Heart(ShapePredicate):
    """
    Implicit heart curve (x^2 + y^2 - a^2)^3 <= x^2 * y^3, a = size / 4,
    with the origin at the grid centre and y pointing up.
    """

    def __init__(self, size):
        self.size = size

    def fill(self, r, c, h, w):
        x = c - w / 2
        y = h / 2 - r
        a = (x * x + y * y - (self.size * HEART_RADIUS_FRACTION) ** 2) ** 3
        return a - x * x * y * y * y <= 0

    def border(self, r, c, h, w):
        # A member cell is on the edge when a 4-neighbour falls outside.
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            rr, cc = r + dr, c + dc
            if not (0 <= rr < h and 0 <= cc < w) or not self.fill(rr, cc, h, w):
                return True
        return False


class Rhombus(ShapePredicate):
    def fill(self, r, c, h, w):
        return abs(c - (w - 1) // 2) <= r

    def border(self, r, c, h, w):
        return abs(c - (w - 1) // 2) == r or r == h - 1


class Pentagon(ShapePredicate):
    """A flat top at h // 3 widening to the base."""

    def fill(self, r, c, h, w):
        top = h // 3
        return r >= top and abs(c - (w - 1) / 2) <= r - top

    def border(self, r, c, h, w):
        top = h // 3
        # (w - 1) / 2 sits between two columns on an even-width grid,
        # so the slanted edges need a tolerance.
        slant = (r - top) - abs(c - (w - 1) / 2)
        return r == h - 1 or r == top or slant < PENTAGON_EDGE_TOLERANCE


class Hexagon(ShapePredicate):
    def _excess(self, r, c, h, w):
        return abs(r - h / 2) + abs(c - w / 2) - h / 2

    def fill(self, r, c, h, w):
        return self._excess(r, c, h, w) <= 0

    def border(self, r, c, h, w):
        return abs(self._excess(r, c, h, w)) < HEXAGON_EDGE_TOLERANCE


class Octagon(ShapePredicate):
    def __init__(self, cut):
        self.cut = cut

    def fill(self, r, c, h, w):
        t = self.cut
        return (t <= r < h - t) or (t <= c < w - t)

    def border(self, r, c, h, w):
        t = self.cut
        return (r == t or r == h - 1 - t or c == t or c == w - 1 - t
                or is_edge(r, c, h, w))


class Leaf(ShapePredicate):
    def __init__(self, mid):
        self.mid = mid

    def fill(self, r, c, h, w):
        return abs(r - self.mid) + abs(c - self.mid) <= self.mid

    def border(self, r, c, h, w):
        return abs(r - self.mid) + abs(c - self.mid) == self.mid


class SpiralBox(ShapePredicate):
    def border(self, r, c, h, w):
        k = min(r, c, h - 1 - r, w - 1 - c)
        rr, cc = r - k, c - k
        hh, ww = h - 2 * k, w - 2 * k
        return (rr == 0 or cc == 0 or
                (rr == hh - 1 and cc <= ww - 1) or
                (cc == ww - 1 and rr <= hh - 1))


# ---------------------------------------------------------------------------
# Row shapes
# ---------------------------------------------------------------------------

def right_triangle(mode, height, inverted=False, align_right=False):
    """Row i (1-based) carries i marks, or height - i + 1 when inverted."""
    height = clamp_size(height)
    lines = []
    for row in range(1, height + 1):
        n = height - row + 1 if inverted else row
        pad = height - n if align_right else 0
        lines.append(centered_row(pad, n, mode, True,
                                  row == height and not inverted))
    return lines


def staircase(mode, steps, descending=False):
    return right_triangle(mode, steps, inverted=descending)


def _isosceles_rows(mode, height, rows, base):
    return [centered_row(height - row, 2 * row - 1, mode, True, row == base)
            for row in rows]


def isosceles(mode, height, inverted=False):
    height = clamp_size(height)
    rows = range(height, 0, -1) if inverted else range(1, height + 1)
    return _isosceles_rows(mode, height, rows, height)


def diamond(mode, height):
    """Ascending then descending isosceles; the widest row appears once."""
    height = clamp_size(height)
    top = _isosceles_rows(mode, height, range(1, height + 1), height)
    return top + top[-2::-1]


def hourglass(mode, height):
    height = clamp_size(height)
    top = _isosceles_rows(mode, height, range(height, 0, -1), height)
    bottom = _isosceles_rows(mode, height, range(2, height + 1), height)
    return top + bottom


def _arrow_parts(mode, size):
    size = clamp_odd(size)
    head = math.ceil(size / 2)
    stem_width = max(1, size // 3)
    pad = (2 * head - 1 - stem_width) // 2
    rows = range(1, head + 1)
    head_rows = [centered_row(head - row, 2 * row - 1, mode, True, row == head)
                 for row in rows]
    stem_rows = [centered_row(pad, stem_width, mode)] * (size - head)
    return head_rows, stem_rows


def up_arrow(mode, size):
    head_rows, stem_rows = _arrow_parts(mode, size)
    return head_rows + stem_rows


def down_arrow(mode, size):
    head_rows, stem_rows = _arrow_parts(mode, size)
    return stem_rows + head_rows[::-1]


def butterfly(mode, size):
    size = clamp_size(size)

    def wings(r):
        wing = centered_row(0, r, mode, True, r == size)
        return wing + BLANK * (2 * (size - r)) + wing

    upper = [wings(r) for r in range(1, size + 1)]
    return upper + upper[::-1]


def parallelogram(mode, size):
    s = clamp_size(size)
    return [centered_row(s - 1 - r, s, mode, True, r == 0 or r == s - 1)
            for r in range(s)]


def trapezium(mode, size):
    s = clamp_size(size)
    return [centered_row(s - 1 - r, s + r, mode, True, r == s - 1)
            for r in range(s)]


# ---------------------------------------------------------------------------
# Grid shapes
# ---------------------------------------------------------------------------

def rectangle(mode, height, width=None):
    return ShapePredicate().render(mode, height, width)


def x_cross(mode, size):
    s = clamp_size(size)
    return outline(lambda r, c, h, w: r == c or r + c == w - 1).render(mode, s, s)


def plus(mode, size):
    size = clamp_odd(size)
    mid = size // 2
    return outline(lambda r, c, h, w: r == mid or c == mid).render(mode, size, size)


def checkerboard(mode, size):
    return outline(lambda r, c, h, w: (r + c) % 2 == 0).render(mode, size, size)


def left_arrow(mode, size):
    size = clamp_odd(size)
    return SideArrow(size // 2).render(mode, size, size)


def right_arrow(mode, size):
    size = clamp_odd(size)
    return SideArrow(size // 2, mirrored=True).render(mode, size, size)


def zigzag(mode, height, width=None):
    height = clamp_size(height, 3)
    width = clamp_size(height * 2 if width is None else width, 3)
    return outline(lambda r, c, h, w: (c - r) % (h - 1) == 0).render(mode, height, width)


def wave(mode, height, width=None):
    height = clamp_size(height, 3)
    width = clamp_size(height * 3 if width is None else width, 3)
    return Wave().render(mode, height, width)


def concentric_squares(mode, size):
    size = clamp_odd(size)
    return ConcentricSquares().render(mode, size, size)


def concentric_diamonds(mode, size):
    mode = RenderMode.parse(mode)
    size = clamp_odd(size)
    shape = ConcentricDiamonds(size // 2, solid=mode is RenderMode.SOLID)
    return shape.render(mode, size, size)


def border_with_diagonals(mode, size):
    size = clamp_size(size, 3)
    shape = outline(lambda r, c, h, w: is_edge(r, c, h, w) or r == c or r + c == w - 1)
    return shape.render(mode, size, size)


def frame(mode, size, thickness=2):
    size = clamp_size(size, 3)
    thickness = max(1, math.floor(thickness))
    return Frame(thickness).render(mode, size, size)


def circle(mode, size):
    size = clamp_odd(size, 5)
    return Circle(size // 2).render(mode, size, size)


def mountains(mode, peaks, width=None):
    peaks = clamp_size(peaks)
    width = clamp_size(peaks * 6 if width is None else width, 5)
    # each ridge needs at least two columns
    peaks = min(peaks, width // 2)
    height = math.ceil(width / 4)
    return Mountains(peaks).render(mode, height, width)


def diamond_grid(mode, size):
    mode = RenderMode.parse(mode)
    size = clamp_odd(size, 5)
    cell = max(3, size // 3)
    shape = DiamondGrid(cell, solid=mode is RenderMode.SOLID)
    return shape.render(mode, size, size * 2 - 1)


def herringbone(mode, height, width=None):
    height = clamp_size(height, 4)
    width = clamp_size(height * 3 if width is None else width, 6)
    shape = outline(lambda r, c, h, w: (r + c) % 6 == 0 or (r - c) % 6 == 0)
    return shape.render(mode, height, width)


def bricks(mode, rows, cols=None):
    rows = clamp_size(rows, 3)
    cols = clamp_size(rows * 2 if cols is None else cols, 6)
    shape = outline(lambda r, c, h, w: c % 3 != 2 if r % 2 == 0 else (c + 1) % 3 != 2)
    return shape.render(mode, rows, cols)


def caret(mode, size, pointing='left'):
    s = clamp_size(size)
    return Caret(pointing).render(mode, s * 2 - 1, s * 2 - 1)


def heart(mode, size):
    s = clamp_size(size)
    return Heart(s).render(mode, s, 2 * s)


def rhombus(mode, size):
    s = clamp_size(size)
    return Rhombus().render(mode, s, s * 2 - 1)


def pentagon(mode, size):
    s = clamp_size(size)
    return Pentagon().render(mode, s, 2 * s)


def hexagon(mode, size):
    s = clamp_size(size)
    return Hexagon().render(mode, s, 2 * s)


def octagon(mode, size):
    s = clamp_size(size)
    return Octagon(max(1, s // 3)).render(mode, s, s)


def leaf(mode, size):
    s = clamp_size(size)
    return Leaf(s // 2).render(mode, s, s)


def spiral_box(mode, size):
    s = clamp_size(size)
    return SpiralBox().render(mode, s, s)
