#
# PROJECT: star-pattern-renderer
# MODULE: star_pattern_renderer/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#


class InvalidInput(ValueError):
    """Raised when a render mode is not one of 'solid' / 'hollow'."""

    def __init__(self, value):
        self.value = value
        super().__init__(
            f"Invalid input. Type must be 'hollow' or 'solid' (got {value!r})."
        )
