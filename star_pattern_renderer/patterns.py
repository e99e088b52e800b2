#
# PROJECT: star-pattern-renderer
# MODULE: star_pattern_renderer/patterns.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#
"""
Closed-form line patterns: letter outlines, meshes, stripes and ornaments.

Each pattern is an outline shape (every member cell is also a border cell)
on a square, s x (2s - 1) or s x 2s grid.
"""

from .renderer import clamp_size, is_edge
from .shapes import outline


def _square(mode, size, fill):
    s = clamp_size(size)
    return outline(fill).render(mode, s, s)


def _wide(mode, size, fill, extra=0):
    """s rows by 2s - 1 (+ extra) columns."""
    s = clamp_size(size)
    return outline(fill).render(mode, s, s * 2 - 1 + extra)


# Letters -------------------------------------------------------------------

def letter_t(mode, size):
    return _square(mode, size, lambda r, c, h, w: r == 0 or c == w // 2)


def letter_y(mode, size):
    def fill(r, c, h, w):
        mid = w // 2
        if r <= mid:
            return c == r or c == w - 1 - r
        return c == mid
    return _square(mode, size, fill)


def letter_v(mode, size):
    return _square(mode, size, lambda r, c, h, w:
                   r >= h // 2 and (c == r or c == w - 1 - r))


def letter_w(mode, size):
    return _square(mode, size, lambda r, c, h, w:
                   (r == h - 1 and (c == 0 or c == w - 1)) or
                   c == r // 2 or c == w - 1 - r // 2)


def letter_z(mode, size):
    return _square(mode, size, lambda r, c, h, w: r == 0 or r == h - 1 or r + c == w - 1)


def letter_n(mode, size):
    return _square(mode, size, lambda r, c, h, w: c == 0 or c == w - 1 or r == c)


def letter_h(mode, size):
    return _square(mode, size, lambda r, c, h, w: c == 0 or c == w - 1 or r == h // 2)


def letter_i(mode, size):
    return _square(mode, size, lambda r, c, h, w: r == 0 or r == h - 1 or c == w // 2)


# Lines and pointers ---------------------------------------------------------

def chevron(mode, size):
    return _wide(mode, size, lambda r, c, h, w: c == r or c == w - 1 - r)


def bow_tie(mode, size):
    return _wide(mode, size, lambda r, c, h, w:
                 c == r or c == w - 1 - r or r == h // 2)


def fence(mode, size):
    return _wide(mode, size, lambda r, c, h, w:
                 r == h - 1 or (r % 2 == 0 and c % 4 == 0), extra=1)


def fence_dense(mode, size):
    return _wide(mode, size, lambda r, c, h, w: r == h - 1 or c % 3 == 0, extra=1)


def ladder(mode, size):
    return _wide(mode, size, lambda r, c, h, w:
                 c % max(3, w // 6) == 0 or r % 2 == 0, extra=1)


def crown(mode, size):
    return _wide(mode, size, lambda r, c, h, w:
                 r == h - 1 or c == r or c == w - 1 - r or
                 (r < h // 2 and (c == w // 4 or c == (3 * w) // 4)))


# Meshes ---------------------------------------------------------------------

def lattice(mode, size):
    return _square(mode, size, lambda r, c, h, w: (r + c) % 3 == 0 or (r - c) % 3 == 0)


def grid_lines(mode, size, step=2):
    return _square(mode, size, lambda r, c, h, w: r % step == 0 or c % step == 0)


def dotted_grid(mode, size):
    return _square(mode, size, lambda r, c, h, w: r % 2 == 0 and c % 2 == 0)


def weave(mode, size):
    return _square(mode, size, lambda r, c, h, w: r % 4 <= 1 or c % 4 <= 1)


def corners(mode, size):
    t = max(1, clamp_size(size) // 6)

    def fill(r, c, h, w):
        return (r < t or r >= h - t) and (c < t or c >= w - t)
    return _square(mode, size, fill)


def corner_diagonals(mode, size):
    return _square(mode, size, lambda r, c, h, w:
                   r == c or r + c == w - 1 or is_edge(r, c, h, w))


def box_with_center(mode, size):
    return _square(mode, size, lambda r, c, h, w:
                   is_edge(r, c, h, w) or (r == h // 2 and c == w // 2))


def four_boxes(mode, size):
    return _square(mode, size, lambda r, c, h, w:
                   r == h // 2 or c == w // 2 or is_edge(r, c, h, w))


def nine_grid(mode, size):
    a = max(1, clamp_size(size) // 3)
    return _square(mode, size, lambda r, c, h, w: r % a == 0 or c % a == 0)


# Crosses and ornaments ------------------------------------------------------

def crosshair(mode, size):
    return _square(mode, size, lambda r, c, h, w:
                   r == h // 2 or c == w // 2 or is_edge(r, c, h, w))


def snowflake(mode, size):
    return _square(mode, size, lambda r, c, h, w:
                   r == h // 2 or c == w // 2 or r == c or r + c == w - 1)


def stripes(mode, size, direction='diagonal'):
    tests = {
        'diagonal': lambda r, c: (r - c) % 3 == 0,
        'anti_diagonal': lambda r, c: (r + c) % 3 == 0,
        'cross': lambda r, c: (r + c) % 3 == 0 or (r - c) % 3 == 0,
    }
    test = tests[direction]
    return _square(mode, size, lambda r, c, h, w: test(r, c))


def dot_diamond(mode, size):
    return _square(mode, size, lambda r, c, h, w:
                   abs(r - h // 2) + abs(c - w // 2) == h // 2)


def star_burst(mode, size):
    def fill(r, c, h, w):
        mid = h // 2
        return (r == mid or c == mid or r == c or r + c == w - 1 or
                (r == mid - 1 and c % 2 == 0) or
                (c == mid - 1 and r % 2 == 0))
    return _square(mode, size, fill)


def flower(mode, size):
    def fill(r, c, h, w):
        petal = abs(r - h // 2) + abs(c - w // 2) <= h // 2
        return (r % 3 == 0 or c % 3 == 0) and petal
    return _square(mode, size, fill)
