#
# PROJECT: star-pattern-renderer
# MODULE: star_pattern_renderer/composer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .glyphs import MIN_GLYPH_SIZE, render_letter


def render_name(text, size=9, thickness=1, gap=2):
    """
    Lay out one glyph block per character of `text`, side by side.

    Row r of the output is row r of every block joined by `gap` spaces.
    The result always has max(5, size) lines; empty text gives empty lines.
    """
    blocks = [render_letter(ch, size, thickness) for ch in text]
    rows = max(MIN_GLYPH_SIZE, int(size))
    spacer = ' ' * max(0, int(gap))
    return [spacer.join(block[r] for block in blocks) for r in range(rows)]
