#
# PROJECT: star-pattern-renderer
# MODULE: star_pattern_renderer/glyphs.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#
"""
Stroke-built block letters A-Z.

Each glyph is a function (n, t) -> Canvas that draws 2-6 strokes at fixed
fractional positions (0, n // 4, n // 2, n - 2, n - 1) of an n x n canvas.
The table is filled once at import and exposed read-only as GLYPHS.
"""

import logging
from types import MappingProxyType

from .canvas import Canvas
from .rasterizer import draw_box, draw_hline, draw_line, draw_vline

log = logging.getLogger(__name__)

MIN_GLYPH_SIZE = 5

_GLYPHS = {}


def glyph(letter):
    """Register a stroke procedure for `letter`."""
    def register(fn):
        _GLYPHS[letter] = fn
        return fn
    return register


@glyph('A')
def _a(n, t):
    g, mid = Canvas(n), n // 2
    draw_line(g, 0, n - 1, mid, 0, t)
    draw_line(g, n - 1, n - 1, mid, 0, t)
    draw_hline(g, mid, 1, n - 2, t)
    return g


@glyph('B')
def _b(n, t):
    g, mid = Canvas(n), n // 2
    draw_vline(g, 0, 0, n - 1, t)
    draw_hline(g, 0, 0, n - 2, t)
    draw_hline(g, mid, 0, n - 2, t)
    draw_hline(g, n - 1, 0, n - 2, t)
    draw_vline(g, n - 2, 1, mid - 1, t)
    draw_vline(g, n - 2, mid + 1, n - 2, t)
    return g


@glyph('C')
def _c(n, t):
    g = Canvas(n)
    draw_hline(g, 0, 1, n - 1, t)
    draw_vline(g, 0, 1, n - 2, t)
    draw_hline(g, n - 1, 1, n - 1, t)
    return g


@glyph('D')
def _d(n, t):
    g = Canvas(n)
    draw_vline(g, 0, 0, n - 1, t)
    draw_hline(g, 0, 0, n - 2, t)
    draw_hline(g, n - 1, 0, n - 2, t)
    draw_vline(g, n - 2, 1, n - 2, t)
    return g


@glyph('E')
def _e(n, t):
    g = _f(n, t)
    draw_hline(g, n - 1, 0, n - 1, t)
    return g


@glyph('F')
def _f(n, t):
    g, mid = Canvas(n), n // 2
    draw_vline(g, 0, 0, n - 1, t)
    draw_hline(g, 0, 0, n - 1, t)
    draw_hline(g, mid, 0, n - 2, t)
    return g


@glyph('G')
def _g(n, t):
    g, mid = _c(n, t), n // 2
    draw_vline(g, n - 2, mid, n - 2, t)
    draw_hline(g, mid, mid, n - 2, t)
    return g


@glyph('H')
def _h(n, t):
    g = Canvas(n)
    draw_vline(g, 0, 0, n - 1, t)
    draw_vline(g, n - 1, 0, n - 1, t)
    draw_hline(g, n // 2, 0, n - 1, t)
    return g


@glyph('I')
def _i(n, t):
    g = Canvas(n)
    draw_hline(g, 0, 0, n - 1, t)
    draw_hline(g, n - 1, 0, n - 1, t)
    draw_vline(g, n // 2, 0, n - 1, t)
    return g


@glyph('J')
def _j(n, t):
    g, mid = Canvas(n), n // 2
    draw_hline(g, 0, 0, n - 1, t)
    draw_vline(g, mid, 0, n - 2, t)
    draw_hline(g, n - 1, 1, mid, t)
    draw_vline(g, 1, n - 3, n - 1, t)
    return g


@glyph('K')
def _k(n, t):
    g, mid = Canvas(n), n // 2
    draw_vline(g, 0, 0, n - 1, t)
    draw_line(g, 1, mid, n - 2, 0, t)
    draw_line(g, 1, mid, n - 2, n - 1, t)
    return g


@glyph('L')
def _l(n, t):
    g = Canvas(n)
    draw_vline(g, 0, 0, n - 1, t)
    draw_hline(g, n - 1, 0, n - 1, t)
    return g


@glyph('M')
def _m(n, t):
    g, mid = Canvas(n), n // 2
    draw_vline(g, 0, 0, n - 1, t)
    draw_vline(g, n - 1, 0, n - 1, t)
    draw_line(g, 0, 0, mid, mid, t)
    draw_line(g, n - 1, 0, mid, mid, t)
    return g


@glyph('N')
def _n(n, t):
    g = Canvas(n)
    draw_vline(g, 0, 0, n - 1, t)
    draw_vline(g, n - 1, 0, n - 1, t)
    draw_line(g, 0, 0, n - 1, n - 1, t)
    return g


@glyph('O')
def _o(n, t):
    g = Canvas(n)
    draw_box(g, 1, 1, n - 2, n - 2, t)
    return g


@glyph('P')
def _p(n, t):
    g, mid = Canvas(n), n // 2
    draw_vline(g, 0, 0, n - 1, t)
    draw_hline(g, 0, 0, n - 2, t)
    draw_hline(g, mid, 0, n - 2, t)
    draw_vline(g, n - 2, 1, mid - 1, t)
    return g


@glyph('Q')
def _q(n, t):
    g = _o(n, t)
    draw_line(g, n - 3, n - 3, n - 1, n - 1, t)
    return g


@glyph('R')
def _r(n, t):
    g = _p(n, t)
    draw_line(g, 1, n // 2, n - 2, n - 1, t)
    return g


@glyph('S')
def _s(n, t):
    g, mid = Canvas(n), n // 2
    draw_hline(g, 0, 0, n - 1, t)
    draw_hline(g, mid, 0, n - 1, t)
    draw_hline(g, n - 1, 0, n - 1, t)
    draw_vline(g, 0, 1, mid - 1, t)
    draw_vline(g, n - 1, mid + 1, n - 2, t)
    return g


@glyph('T')
def _t(n, t):
    g = Canvas(n)
    draw_hline(g, 0, 0, n - 1, t)
    draw_vline(g, n // 2, 0, n - 1, t)
    return g


@glyph('U')
def _u(n, t):
    g = Canvas(n)
    draw_vline(g, 0, 0, n - 2, t)
    draw_vline(g, n - 1, 0, n - 2, t)
    draw_hline(g, n - 1, 1, n - 2, t)
    return g


@glyph('V')
def _v(n, t):
    g, mid = Canvas(n), n // 2
    draw_line(g, 0, 0, mid, n - 1, t)
    draw_line(g, n - 1, 0, mid, n - 1, t)
    return g


@glyph('W')
def _w(n, t):
    g, mid, q = Canvas(n), n // 2, n // 4
    draw_line(g, 0, 0, q, n - 1, t)
    draw_line(g, q, n - 1, mid, mid, t)
    draw_line(g, mid, mid, n - 1 - q, n - 1, t)
    draw_line(g, n - 1, 0, n - 1 - q, n - 1, t)
    return g


@glyph('X')
def _x(n, t):
    g = Canvas(n)
    draw_line(g, 0, 0, n - 1, n - 1, t)
    draw_line(g, n - 1, 0, 0, n - 1, t)
    return g


@glyph('Y')
def _y(n, t):
    g, mid = Canvas(n), n // 2
    draw_line(g, 0, 0, mid, mid, t)
    draw_line(g, n - 1, 0, mid, mid, t)
    draw_vline(g, mid, mid, n - 1, t)
    return g


@glyph('Z')
def _z(n, t):
    g = Canvas(n)
    draw_hline(g, 0, 0, n - 1, t)
    draw_line(g, n - 1, 0, 0, n - 1, t)
    draw_hline(g, n - 1, 0, n - 1, t)
    return g


GLYPHS = MappingProxyType(_GLYPHS)


def fallback_glyph(n, t, ch):
    """Box outline with the raw character in the centre cell."""
    g = Canvas(n)
    draw_box(g, 0, 0, n - 1, n - 1, t)
    mid = n // 2
    g.set_pixel(mid, mid, str(ch)[:1] or Canvas.BACKGROUND)
    return g


def render_letter(ch, size=9, thickness=1):
    """
    Render one character as `n` rows of `n` characters, n = max(5, size).

    Space gives a blank block; characters without a glyph give the boxed
    placeholder from fallback_glyph.
    """
    n = max(MIN_GLYPH_SIZE, int(size))
    t = max(1, int(thickness))
    ch = ch.upper()
    if ch == ' ':
        return Canvas(n).rows()
    draw = GLYPHS.get(ch)
    if draw is None:
        log.debug("no glyph for %r, using placeholder", ch)
        return fallback_glyph(n, t, ch).rows()
    return draw(n, t).rows()
