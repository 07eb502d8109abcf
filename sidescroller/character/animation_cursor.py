"""
animation_cursor.py
-------------------
Live playback position of one character's current animation.

Responsibilities
----------------
- Hold current/min/max frame and the playing flag for the active state.
- Advance one frame per clock event and normalize overflow per AnimationMode.
- Tell the state machine when it may accept new top-level input.
"""

from typing import Optional

from sidescroller.core.debug.debug_logger import DebugLogger
from sidescroller.character.animation_clock import AnimationClock
from sidescroller.character.character_state import AnimationMode


class AnimationCursor:
    """
    Frame cursor driven by its own AnimationClock.

    Invariant: min_frame <= current_frame <= max_frame after every advance.
    While playing is False the cursor does not advance.

    Loop boundaries: a LOOP animation never stops on its own, so a wrap sets
    cycle_complete and accepts_input turns True while playing is still True.
    On that tick the state machine reads fresh input, including horizontal
    input, which otherwise never changes state during playback. This is the
    only point at which a walk, run or roll can end; mid-cycle, input is
    still only buffered.
    """

    __slots__ = ('current_frame', 'min_frame', 'max_frame', 'playing',
                 'mode', 'cycle_complete', 'clock')

    def __init__(self, clock: Optional[AnimationClock] = None):
        self.current_frame = 0
        self.min_frame = 0
        self.max_frame = 0
        self.playing = False
        self.mode = AnimationMode.REST
        self.cycle_complete = False
        self.clock = clock or AnimationClock()

    # ===========================================================
    # Playback Control
    # ===========================================================

    def start(self, frame_range, mode: AnimationMode, frame_duration: float):
        """
        Begin a new animation at the start of frame_range.

        Args:
            frame_range: FrameRange of the state being entered
            mode: Overflow behavior for this animation
            frame_duration: Seconds per frame
        """
        self.min_frame = frame_range.min_frame
        self.max_frame = frame_range.max_frame
        self.current_frame = frame_range.min_frame
        self.mode = mode
        self.playing = True
        self.cycle_complete = False
        self.clock.set_frame_duration(frame_duration)

    def release(self):
        """Mark the animation finished without moving the frame."""
        self.playing = False

    @property
    def accepts_input(self) -> bool:
        """True when stopped, or when a looping animation just wrapped (playing stays True)."""
        return not self.playing or self.cycle_complete

    # ===========================================================
    # Frame Advance
    # ===========================================================

    def update(self, dt: float) -> Optional[int]:
        """
        Tick the clock and advance if a frame boundary was crossed.

        Returns:
            The frame index reached before overflow normalization, or None
            if no frame advanced this tick.
        """
        if not self.playing:
            return None
        if not self.clock.tick(dt):
            return None
        return self.advance()

    def advance(self) -> int:
        """Step one frame forward and normalize overflow."""
        self.current_frame += 1
        reached = self.current_frame

        if self.current_frame > self.max_frame:
            if self.mode == AnimationMode.LOOP:
                self.current_frame = self.min_frame
                self.cycle_complete = True
            else:
                self.current_frame = self.max_frame
                self.playing = False

        DebugLogger.trace(
            f"Frame {reached} -> {self.current_frame} "
            f"[{self.min_frame}, {self.max_frame}] playing={self.playing}"
        )
        return reached

    def __repr__(self):
        return (f"AnimationCursor(frame={self.current_frame}, "
                f"range=[{self.min_frame}, {self.max_frame}], playing={self.playing})")
