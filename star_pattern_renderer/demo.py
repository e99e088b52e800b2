#
# PROJECT: star-pattern-renderer
# MODULE: star_pattern_renderer/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging

from .catalog import get_preset, preset_names, render_preset
from .config import RenderConfig
from .renderer import RenderMode

log = logging.getLogger(__name__)

SHAPE_PAIR = 1


class DemoApp:
    """
    Interactive preset gallery.

    Left/right cycle presets, up/down change the size, 'h' toggles
    hollow/solid, 'q' quits.  Each frame renders the current preset into a
    line list and draws it clipped to the terminal under a header line.
    """

    def __init__(self, stdscr, config: RenderConfig, start=None):
        self.stdscr = stdscr
        self.config = config
        self.running = True

        # ── Curses setup ────────────────────────────────────────────────
        curses.curs_set(0)
        self.attr = curses.A_NORMAL
        if config.use_color and curses.has_colors():
            try:
                curses.start_color()
                curses.use_default_colors()
                curses.init_pair(SHAPE_PAIR, curses.COLOR_YELLOW, -1)
                self.attr = curses.color_pair(SHAPE_PAIR)
            except curses.error:
                log.debug("terminal refused colour setup, drawing monochrome")

        # ── Gallery state ───────────────────────────────────────────────
        self.names = preset_names()
        self.index = self.names.index(start) if start in self.names else 0
        self.mode = RenderMode.SOLID
        self.size = config.gallery_size

    @property
    def current(self):
        return self.names[self.index]

    def frame_lines(self):
        """Lines for the current preset; size only overrides the first param."""
        preset = get_preset(self.current)
        return render_preset(self.current, self.mode,
                             *((self.size,) + (None,) * (len(preset.defaults) - 1)))

    # ────────────────────────────────────────────────────────────────────
    # Input
    # ────────────────────────────────────────────────────────────────────
    def handle_input(self):
        key = self.stdscr.getch()

        if key == ord('q'):
            self.running = False
        elif key == curses.KEY_RIGHT:
            self.index = (self.index + 1) % len(self.names)
        elif key == curses.KEY_LEFT:
            self.index = (self.index - 1) % len(self.names)
        elif key == curses.KEY_UP:
            self.size = min(40, self.size + 1)
        elif key == curses.KEY_DOWN:
            self.size = max(1, self.size - 1)
        elif key == ord('h'):
            self.mode = (RenderMode.HOLLOW if self.mode is RenderMode.SOLID
                         else RenderMode.SOLID)

    # ────────────────────────────────────────────────────────────────────
    # Drawing
    # ────────────────────────────────────────────────────────────────────
    def draw(self):
        stdscr = self.stdscr
        stdscr.erase()
        th, tw = stdscr.getmaxyx()

        lines = self.frame_lines()
        hdr = (f" {self.index + 1}/{len(self.names)} {self.current}"
               f" | {self.mode.value.upper()}"
               f" | SIZE:{self.size}"
               f" | <- -> preset  ^ v size  h hollow  q quit ")
        try:
            stdscr.addstr(0, 0, hdr.center(tw - 1, '=')[:tw - 1], curses.A_BOLD)
        except curses.error:
            pass

        for y, line in enumerate(lines[:max(0, th - 2)]):
            try:
                stdscr.addstr(y + 1, 0, line[:tw - 1], self.attr)
            except curses.error:
                # Writing the bottom-right cell raises; the text is still drawn.
                pass

        stdscr.refresh()

    def run(self):
        log.info("gallery started on %s", self.current)
        while self.running:
            self.draw()
            self.handle_input()


def main(stdscr, config, start=None):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, config, start)
    app.run()
