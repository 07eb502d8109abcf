"""
animation_clock.py
------------------
Per-character frame timer that turns elapsed time into frame advances.

Responsibilities
----------------
- Accumulate elapsed seconds against the active frame duration.
- Report at most one advance per tick.
- Apply the configured catch-up policy to time left over after an advance.

Catch-up Policies
-----------------
- drop:  the accumulator resets to 0 on every advance; excess time is lost.
- carry: the remainder past one duration is kept, reduced modulo the
         duration so a single tick never owes more than one extra frame.
"""

from enum import Enum

from sidescroller.core.runtime.game_settings import Animation


class CatchUpPolicy(str, Enum):
    DROP = "drop"
    CARRY = "carry"


class AnimationClock:
    """Frame timer; one instance per AnimationCursor."""

    __slots__ = ('frame_duration', 'elapsed', 'policy')

    def __init__(self, frame_duration: float = Animation.BASE_FRAME_DURATION,
                 policy=CatchUpPolicy.DROP):
        self.frame_duration = _checked_duration(frame_duration)
        self.elapsed = 0.0
        self.policy = CatchUpPolicy(policy)

    def set_frame_duration(self, frame_duration: float):
        """Switch to a new per-frame duration and restart the window at 0."""
        self.frame_duration = _checked_duration(frame_duration)
        self.elapsed = 0.0

    def reset(self):
        self.elapsed = 0.0

    def tick(self, dt: float) -> bool:
        """
        Accumulate time and report whether a frame boundary was crossed.

        Args:
            dt: Seconds since the previous tick (must be >= 0)

        Returns:
            True if exactly one frame advance is due this tick
        """
        if dt < 0:
            raise ValueError(f"Elapsed time must be non-negative, got {dt}")

        self.elapsed += dt
        if self.elapsed < self.frame_duration:
            return False

        if self.policy is CatchUpPolicy.CARRY:
            self.elapsed = (self.elapsed - self.frame_duration) % self.frame_duration
        else:
            self.elapsed = 0.0
        return True


def _checked_duration(value: float) -> float:
    if value <= 0:
        raise ValueError(f"Frame duration must be positive, got {value}")
    return float(value)
