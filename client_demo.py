#!/usr/bin/env python3
#
# PROJECT: star-pattern-renderer
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import curses
import logging
import os
import sys

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from star_pattern_renderer.catalog import preset_names, print_name, run_preset
from star_pattern_renderer.config import RenderConfig
from star_pattern_renderer.logging_utils import setup_logging

log = logging.getLogger("star_pattern_renderer.cli")


def parse_args(argv=None):
    """CLI argument parser."""
    epilog = """\
examples:
  %(prog)s list                                List every preset
  %(prog)s shape diamond 7 --mode hollow       Hollow diamond, height 7
  %(prog)s shape rectangle 4 12                Solid 4 x 12 rectangle
  %(prog)s shape wave 5 40                     Wave, height 5, width 40
  %(prog)s name "Hello" --size 7 --gap 1        Block letters
  %(prog)s browse --start circle               Interactive gallery
"""
    parser = argparse.ArgumentParser(
        description="ASCII star pattern renderer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--log-level", default=None,
                        help="DEBUG, INFO, WARNING or ERROR "
                             "(default: $STAR_PATTERN_LOG_LEVEL or WARNING)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List preset names")

    shape = sub.add_parser("shape", help="Render a named preset")
    shape.add_argument("preset", help="Preset name (see 'list')")
    shape.add_argument("params", nargs="*", type=int,
                       help="Size parameters; omitted ones use the preset defaults")
    shape.add_argument("--mode", default=None,
                       help="'solid' or 'hollow' (default: the preset's own)")

    name = sub.add_parser("name", help="Render text as block letters")
    name.add_argument("text", nargs="?", default="LALIT")
    name.add_argument("--size", type=int, default=None,
                      help="Letter height/width in characters, at least 5 (default: 9)")
    name.add_argument("--thickness", type=int, default=None,
                      help="Stroke thickness (default: 1)")
    name.add_argument("--gap", type=int, default=None,
                      help="Blank columns between letters (default: 2)")

    browse = sub.add_parser("browse", help="Interactive curses gallery")
    browse.add_argument("--start", default=None, help="Preset to open first")
    browse.add_argument("--size", type=int, default=None,
                        help="Starting size (default: 7)")
    browse.add_argument("--no-color", action="store_true",
                        help="Disable color output")
    return parser.parse_args(argv)


def main(argv=None, emit=print):
    args = parse_args(argv)

    # ── RenderConfig from environment + CLI overrides ───────────────────
    config = RenderConfig.detect_terminal()
    if args.log_level:
        config.log_level = args.log_level
    if args.command == "name":
        if args.size is not None:
            config.glyph_size = args.size
        if args.thickness is not None:
            config.thickness = args.thickness
        if args.gap is not None:
            config.gap = args.gap
    if args.command == "browse":
        if args.size is not None:
            config.gallery_size = args.size
        if args.no_color:
            config.use_color = False
    config.clamp()

    try:
        setup_logging(config.log_level)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    log.debug("command=%s", args.command)

    if args.command == "list":
        for preset in preset_names():
            emit(preset)
        return 0

    if args.command == "shape":
        try:
            ok = run_preset(args.preset, args.mode, *args.params, emit=emit)
        except KeyError as e:
            print(f"Error: {e.args[0]}", file=sys.stderr)
            return 2
        return 0 if ok else 1

    if args.command == "name":
        print_name(args.text, config.glyph_size, config.thickness, config.gap,
                   emit=emit)
        return 0

    from star_pattern_renderer.demo import main as gallery
    curses.wrapper(lambda s: gallery(s, config, args.start))
    return 0


def run():
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
