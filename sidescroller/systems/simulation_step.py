"""
simulation_step.py
------------------
Per-tick orchestration for one character.

Responsibilities
----------------
- Run the tick stages in order: state machine (buffered movement, fresh
  input, settle fallback) -> animation advance -> movement -> rest release.
- Apply keyframe displacement only on ticks where a frame advanced.
- Leave the character untouched if a frame table lookup fails mid-step.
"""

from typing import Optional

from sidescroller.core.debug.debug_logger import DebugLogger
from sidescroller.core.services.input_snapshot import InputSnapshot
from sidescroller.character.character import Character, FramePresentation
from sidescroller.character.character_state import AnimationMode
from sidescroller.character.errors import UnknownStateLookup
from sidescroller.character.movement_curve import Viewport, displacement_for


def step(character: Character, snapshot: InputSnapshot, elapsed: float,
         viewport: Optional[Viewport]) -> FramePresentation:
    """
    Advance one character by one tick.

    Args:
        character: The character to mutate
        snapshot: Buttons held / pressed this tick
        elapsed: Seconds since the previous tick (>= 0)
        viewport: Metrics for the horizontal step; None if unavailable

    Returns:
        The character's presentation after the tick

    Raises:
        UnknownStateLookup: Frame table has no entry for a state; the
            character is restored to its pre-tick value first
        ValueError: elapsed is negative (checked before any mutation)
    """
    if elapsed < 0:
        raise ValueError(f"Elapsed time must be non-negative, got {elapsed}")

    saved = character.capture()
    try:
        _run_stages(character, snapshot, elapsed, viewport)
    except UnknownStateLookup as e:
        character.restore(saved)
        DebugLogger.fail(f"Step aborted, character unchanged: {e}", category="simulation")
        raise

    return character.presentation()


def _run_stages(character, snapshot, elapsed, viewport):
    machine = character.machine
    cursor = machine.cursor

    machine.update(snapshot)

    reached = cursor.update(elapsed)
    if reached is not None:
        offset = displacement_for(
            machine.state,
            reached,
            machine.frame_range,
            machine.facing_left,
            viewport,
        )
        if offset.x or offset.y:
            character.position += offset
            DebugLogger.trace(
                f"{machine.state.name} frame {reached}: moved ({offset.x:+.2f}, {offset.y:+.2f})",
                category="movement"
            )

    if cursor.mode == AnimationMode.REST:
        cursor.release()
