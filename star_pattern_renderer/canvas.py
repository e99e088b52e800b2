#
# PROJECT: star-pattern-renderer
# MODULE: star_pattern_renderer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#


class Canvas:
    """
    Square n x n character buffer, addressed (x, y) with (0, 0) top-left.

    A canvas belongs to the render call that created it; stroke helpers
    write into it and never keep a reference.
    """
    __slots__ = ['n', 'grid']

    MARK = '*'
    BACKGROUND = ' '

    def __init__(self, n, fill=BACKGROUND):
        self.n = n
        self.grid = [[fill] * n for _ in range(n)]

    def set_pixel(self, x, y, ch=MARK):
        # Out-of-bounds writes are clipped silently.
        if x < 0 or x >= self.n or y < 0 or y >= self.n: return
        self.grid[y][x] = ch

    def get_pixel(self, x, y):
        return self.grid[y][x]

    def rows(self):
        """Join the grid into `n` text rows."""
        return [''.join(row) for row in self.grid]
