"""
errors.py
---------
Error kinds raised by the character simulation core.

UnknownStateLookup and InvalidFrameBounds are programmer/configuration
errors and are never recovered from. MissingViewportMetrics is raised by the
movement curve and recovered by the simulation step as a zero horizontal
step for that tick.
"""


class CharacterSimError(Exception):
    """Base class for character simulation errors."""


class UnknownStateLookup(CharacterSimError, LookupError):
    """A state is missing from the frame table or the movement curve."""

    def __init__(self, state):
        self.state = state
        super().__init__(f"No entry registered for state {state!r}")


class InvalidFrameBounds(CharacterSimError, ValueError):
    """A frame table entry has min_frame > max_frame or a negative index."""

    def __init__(self, state, min_frame, max_frame):
        self.state = state
        self.min_frame = min_frame
        self.max_frame = max_frame
        super().__init__(
            f"Invalid frame bounds for {state!r}: [{min_frame}, {max_frame}]"
        )


class MissingViewportMetrics(CharacterSimError):
    """Viewport width or tile count unavailable when a step size is needed."""
