#
# PROJECT: star-pattern-renderer
# MODULE: star_pattern_renderer/catalog.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#
"""
Named preset catalog.

A preset fixes one primitive plus its default parameters.  The table is
built once at import and exposed read-only; presets only validate the mode
and fill in defaults, all geometry lives in `shapes` and `patterns`.
"""

import logging
import math
from dataclasses import dataclass
from functools import partial
from itertools import zip_longest
from types import MappingProxyType
from typing import Callable, Optional

from . import patterns, shapes
from .composer import render_name
from .errors import InvalidInput
from .renderer import RenderMode, clamp_size

log = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Invalid input. Type must be 'hollow' or 'solid'."


@dataclass(frozen=True)
class Preset:
    """One catalog entry: draw(mode, *params) with its default params."""
    name: str
    draw: Callable
    defaults: tuple = (5,)
    default_mode: RenderMode = RenderMode.SOLID
    # Set when the preset ignores the caller's mode.
    fixed_mode: Optional[RenderMode] = None

    def resolve(self, params):
        """Overlay caller params on the defaults; None keeps the default."""
        params = list(params)[:len(self.defaults)]
        return tuple(d if p is None else p
                     for p, d in zip_longest(params, self.defaults))

    def render(self, mode=None, *params):
        mode = RenderMode.parse(self.default_mode if mode is None else mode)
        if self.fixed_mode is not None:
            mode = self.fixed_mode
        args = self.resolve(params)
        log.debug("preset %s mode=%s params=%r", self.name, mode.value, args)
        return self.draw(mode, *args)


_PRESETS = {}


def _register(name, draw, *defaults, **options):
    _PRESETS[name] = Preset(name, draw, defaults or (5,), **options)


def _scaled(draw, factor):
    """Run `draw` with the size scaled by `factor`, rounded up."""
    def scaled(mode, size):
        return draw(mode, math.ceil(clamp_size(size) * factor))
    return scaled


def _square(mode, size):
    return shapes.rectangle(mode, size, size)


def _twice(draw):
    def twice(mode, size):
        return draw(mode, size) * 2
    return twice


def _range(draw):
    """Three ridges across twice the size in columns."""
    def ranged(mode, size):
        return draw(mode, 3, clamp_size(size) * 2)
    return ranged


def _ripple(mode, size):
    size = clamp_size(size)
    return shapes.wave(mode, size, size * 3)


# 1-10 triangles
_register('triangle', shapes.right_triangle)
_register('triangle_inverted', partial(shapes.right_triangle, inverted=True))
_register('right_aligned_triangle', partial(shapes.right_triangle, align_right=True))
_register('right_aligned_triangle_inverted',
          partial(shapes.right_triangle, inverted=True, align_right=True))
_register('isosceles', shapes.isosceles)
_register('isosceles_inverted', partial(shapes.isosceles, inverted=True))
_register('pyramid', shapes.isosceles)
_register('inverted_pyramid', partial(shapes.isosceles, inverted=True))
_register('diamond', shapes.diamond)
_register('hourglass', shapes.hourglass)

# 11-20 squares, rectangles, frames
_register('square', _square)
_register('rectangle', shapes.rectangle, 5, 10)
_register('frame_thin', partial(shapes.frame, thickness=1), 7)
_register('frame_thick', partial(shapes.frame, thickness=3), 9)
_register('border_with_diagonals', shapes.border_with_diagonals, 7)
_register('concentric_squares', shapes.concentric_squares, 9)
_register('concentric_diamonds', shapes.concentric_diamonds, 9)
_register('checkerboard', shapes.checkerboard, 8)
_register('circle', shapes.circle, 11)
_register('diamond_grid', shapes.diamond_grid, 11)

# 21-30 crosses and letters
_register('x', shapes.x_cross, 7)
_register('plus', shapes.plus, 7)
_register('t', patterns.letter_t, 7)
_register('y', patterns.letter_y, 9)
_register('v', patterns.letter_v, 9)
_register('w', patterns.letter_w, 9)
_register('z', patterns.letter_z, 7)
_register('n', patterns.letter_n, 7)
_register('h', patterns.letter_h, 7)
_register('i', patterns.letter_i, 7)

# 31-40 arrows and pointers
_register('up_arrow', shapes.up_arrow, 9)
_register('down_arrow', shapes.down_arrow, 9)
_register('left_arrow', shapes.left_arrow, 9)
_register('right_arrow', shapes.right_arrow, 9)
_register('caret_up', partial(shapes.isosceles, inverted=True), 7)
_register('caret_down', shapes.isosceles, 7)
_register('caret_left', partial(shapes.caret, pointing='left'), 7)
_register('caret_right', partial(shapes.caret, pointing='right'), 7)
_register('chevron_up', patterns.chevron, 7)
_register('chevron_down', patterns.chevron, 7)

# 41-50 waves, zigzags, stairs, mountains
_register('zigzag', shapes.zigzag, 5, None)
_register('wave', shapes.wave, 7, None)
_register('staircase', shapes.staircase, 6)
_register('reverse_staircase', partial(shapes.staircase, descending=True), 6)
_register('mountains', shapes.mountains, 3, None)
_register('valleys', shapes.mountains, 3, None)
_register('fence', patterns.fence, 7)
_register('lattice', patterns.lattice, 9)
_register('herringbone', shapes.herringbone, 9, None)
_register('bricks', shapes.bricks, 8, None)

# 51-60 butterflies and hourglass variants
_register('butterfly', shapes.butterfly, 6)
_register('double_hourglass', _twice(shapes.hourglass), 5)
_register('bow_tie', patterns.bow_tie, 7)
_register('sand_clock', shapes.hourglass, 7)
_register('kite', shapes.diamond, 7)
_register('star_outline', shapes.concentric_diamonds, 9,
          default_mode=RenderMode.HOLLOW, fixed_mode=RenderMode.HOLLOW)
_register('crosshair', patterns.crosshair, 9)
_register('asterisk', patterns.crosshair, 9)
_register('target', shapes.concentric_squares, 11)
_register('snowflake', patterns.snowflake, 11)

# 61-70 grids and meshes
_register('grid', patterns.grid_lines, 9)
_register('dotted_grid', patterns.dotted_grid, 9)
_register('hash_grid', partial(patterns.grid_lines, step=3), 9)
_register('weave', patterns.weave, 10)
_register('net', patterns.weave, 10)
_register('corners', patterns.corners, 9)
_register('corner_diagonals', patterns.corner_diagonals, 9)
_register('box_with_center', patterns.box_with_center, 9)
_register('four_boxes', patterns.four_boxes, 10)
_register('nine_grid', patterns.nine_grid, 12)

# 71-80 polygons
_register('heart', shapes.heart, 12)
_register('rhombus', shapes.rhombus, 7)
_register('parallelogram', shapes.parallelogram, 6)
_register('trapezium', shapes.trapezium, 6)
_register('pentagon', shapes.pentagon, 9)
_register('hexagon', shapes.hexagon, 8)
_register('octagon', shapes.octagon, 9)
_register('diamond_tall', _scaled(shapes.diamond, 1.2), 9)
_register('diamond_wide', shapes.diamond, 9)
_register('leaf', shapes.leaf, 9)

# 81-90 fills and ornaments
_register('spiral_box', shapes.spiral_box, 11)
_register('diagonal_stripes', partial(patterns.stripes, direction='diagonal'), 9)
_register('anti_diagonal_stripes',
          partial(patterns.stripes, direction='anti_diagonal'), 9)
_register('cross_stripes', partial(patterns.stripes, direction='cross'), 9)
_register('dot_diamond', patterns.dot_diamond, 9)
_register('star_burst', patterns.star_burst, 11)
_register('sun', patterns.star_burst, 11)
_register('flower', patterns.flower, 11)
_register('crown', patterns.crown, 9)
_register('torch', shapes.up_arrow, 9)

# 91-100 misc
_register('fence_dense', patterns.fence_dense, 9)
_register('steps_right', shapes.staircase, 7)
_register('steps_left', partial(shapes.staircase, descending=True), 7)
_register('mountain_range', _range(shapes.mountains), 12)
_register('valley_range', _range(shapes.mountains), 12)
_register('ladder', patterns.ladder, 9)
_register('ripple', _ripple, 9)
_register('mesh', patterns.weave, 10)
_register('kite_tall', _scaled(shapes.diamond, 1.3), 11)
_register('kite_wide', shapes.diamond, 11)

PRESETS = MappingProxyType(_PRESETS)


def preset_names():
    """Preset names in catalog order."""
    return list(PRESETS)


def get_preset(name) -> Preset:
    """Look up a preset; raises KeyError for unknown names."""
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(f"Unknown preset: {name!r}") from None


def render_preset(name, mode=None, *params):
    """Render a preset to lines.  Raises InvalidInput for a bad mode."""
    return get_preset(name).render(mode, *params)


def run_preset(name, mode=None, *params, emit=print) -> bool:
    """
    Render a preset into `emit`, one call per line.

    An invalid mode emits a single diagnostic line and draws nothing;
    returns False in that case, True otherwise.
    """
    try:
        lines = render_preset(name, mode, *params)
    except InvalidInput as e:
        log.warning("preset %s: %s", name, e)
        emit(INVALID_INPUT_MESSAGE)
        return False
    for line in lines:
        emit(line)
    return True


def print_name(text="LALIT", size=9, thickness=1, gap=2, emit=print):
    """Render `text` as block letters into `emit`."""
    for line in render_name(text, size, thickness, gap):
        emit(line)
