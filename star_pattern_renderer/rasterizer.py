#
# PROJECT: star-pattern-renderer
# MODULE: star_pattern_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .canvas import Canvas


def draw_dot(canvas: Canvas, x, y, thickness=1):
    """
    Stamps a (2r+1) x (2r+1) square centred on (x, y), r = (t - 1) // 2.
    Even thicknesses round down to the next odd square.
    """
    r = max(0, (thickness - 1) // 2)
    for dy in range(-r, r + 1):
        for dx in range(-r, r + 1):
            canvas.set_pixel(x + dx, y + dy)


def draw_line(canvas: Canvas, x1, y1, x2, y2, thickness=1):
    """
    Integer Bresenham between two canvas points, both ends inclusive.
    Every stepped point is fattened with draw_dot.
    """
    dx = abs(x2 - x1)
    sx = 1 if x1 < x2 else -1
    dy = -abs(y2 - y1)
    sy = 1 if y1 < y2 else -1
    err = dx + dy

    while True:
        draw_dot(canvas, x1, y1, thickness)
        if x1 == x2 and y1 == y2:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x1 += sx
        if e2 <= dx:
            err += dx
            y1 += sy


def draw_hline(canvas: Canvas, y, x1, x2, thickness=1):
    draw_line(canvas, x1, y, x2, y, thickness)


def draw_vline(canvas: Canvas, x, y1, y2, thickness=1):
    draw_line(canvas, x, y1, x, y2, thickness)


def draw_box(canvas: Canvas, x1, y1, x2, y2, thickness=1):
    """Axis-aligned rectangle outline with corners (x1, y1) and (x2, y2)."""
    draw_hline(canvas, y1, x1, x2, thickness)
    draw_hline(canvas, y2, x1, x2, thickness)
    draw_vline(canvas, x1, y1, y2, thickness)
    draw_vline(canvas, x2, y1, y2, thickness)
