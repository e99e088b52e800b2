#
# PROJECT: star-pattern-renderer
# MODULE: star_pattern_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import os
from dataclasses import dataclass

LOG_LEVEL_ENV = 'STAR_PATTERN_LOG_LEVEL'


@dataclass
class RenderConfig:
    """Defaults for name rendering, logging and the gallery."""
    glyph_size: int = 9
    thickness: int = 1
    gap: int = 2
    gallery_size: int = 7
    log_level: str = 'WARNING'
    use_color: bool = True

    def __post_init__(self):
        self.clamp()

    def clamp(self):
        """Pull numeric settings back to their minimums."""
        self.glyph_size = max(5, int(self.glyph_size))
        self.thickness = max(1, int(self.thickness))
        self.gap = max(0, int(self.gap))
        self.gallery_size = max(1, int(self.gallery_size))
        self.log_level = str(self.log_level).upper()

    @classmethod
    def detect_terminal(cls) -> 'RenderConfig':
        """
        Build a config from the environment.
        Checks TERM, NO_COLOR and STAR_PATTERN_LOG_LEVEL.
        """
        term = os.environ.get('TERM', '').lower()
        is_dumb = term in ('dumb', 'unknown')
        # https://no-color.org: any non-empty value disables colour
        no_color = bool(os.environ.get('NO_COLOR'))

        return cls(
            log_level=os.environ.get(LOG_LEVEL_ENV, 'WARNING'),
            use_color=not (is_dumb or no_color),
        )
