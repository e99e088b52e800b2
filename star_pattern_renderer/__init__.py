#
# PROJECT: star-pattern-renderer
# MODULE: star_pattern_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .errors import InvalidInput
from .config import RenderConfig
from .renderer import RenderMode, render_grid, centered_row
from .canvas import Canvas
from .shapes import ShapePredicate, GridShape
from .glyphs import GLYPHS, render_letter
from .composer import render_name
from .catalog import (PRESETS, Preset, get_preset, preset_names,
                      render_preset, run_preset, print_name)
