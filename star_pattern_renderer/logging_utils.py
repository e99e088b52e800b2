#
# PROJECT: star-pattern-renderer
# MODULE: star_pattern_renderer/logging_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#
"""
Logging setup for the CLI and the gallery.
"""

import logging
import sys


def setup_logging(log_level: str = "WARNING") -> logging.Logger:
    """
    Configure the package logger to write to stderr.

    Rendered patterns go to stdout (or another sink), so diagnostics never
    mix with shape lines.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger
    """
    level = getattr(logging, str(log_level).upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    logger = logging.getLogger("star_pattern_renderer")
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.addHandler(handler)

    return logger
