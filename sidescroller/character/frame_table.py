"""
frame_table.py
--------------
Maps each character state to its inclusive frame range on the sprite sheet.

Responsibilities
----------------
- Validate frame ranges once, when the table is built.
- Answer range lookups, raising UnknownStateLookup instead of defaulting.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from sidescroller.core.debug.debug_logger import DebugLogger
from sidescroller.character.character_state import CharacterState
from sidescroller.character.errors import InvalidFrameBounds, UnknownStateLookup


# Sprite sheet layout of the bundled character (12 x 3 grid, 100px cells)
DEFAULT_FRAME_RANGES = {
    CharacterState.IDLE: (0, 0),
    CharacterState.WALKING: (0, 3),
    CharacterState.HOPPING: (4, 11),
    CharacterState.CROUCHING: (12, 14),
    CharacterState.CROUCHED: (15, 15),
    CharacterState.UNCROUCHING: (15, 18),
    CharacterState.ROLLING: (19, 21),
    CharacterState.RUNNING: (22, 25),
    CharacterState.RUN_JUMPING: (6, 9),
}


class FrameRange:
    """Inclusive [min_frame, max_frame] span of one state's animation."""

    __slots__ = ('min_frame', 'max_frame')

    def __init__(self, min_frame: int, max_frame: int):
        self.min_frame = min_frame
        self.max_frame = max_frame

    @property
    def frame_count(self) -> int:
        return self.max_frame - self.min_frame + 1

    def offset_of(self, frame: int) -> int:
        """Frame index relative to min_frame."""
        return frame - self.min_frame

    def __eq__(self, other):
        if not isinstance(other, FrameRange):
            return NotImplemented
        return (self.min_frame, self.max_frame) == (other.min_frame, other.max_frame)

    def __hash__(self):
        return hash((self.min_frame, self.max_frame))

    def __repr__(self):
        return f"FrameRange({self.min_frame}, {self.max_frame})"


class FrameTable:
    """Immutable state -> FrameRange lookup shared by every character."""

    __slots__ = ('_ranges',)

    def __init__(self, ranges: Mapping[CharacterState, Tuple[int, int]]):
        """
        Args:
            ranges: (min_frame, max_frame) per state

        Raises:
            InvalidFrameBounds: If any entry is negative or has min > max
        """
        validated: Dict[CharacterState, FrameRange] = {}
        for state, (min_frame, max_frame) in ranges.items():
            if min_frame < 0 or min_frame > max_frame:
                DebugLogger.fail(
                    f"Frame table entry {state!r}: [{min_frame}, {max_frame}]",
                    category="loading"
                )
                raise InvalidFrameBounds(state, min_frame, max_frame)
            validated[state] = FrameRange(int(min_frame), int(max_frame))

        self._ranges = MappingProxyType(validated)

    @classmethod
    def default(cls) -> "FrameTable":
        return cls(DEFAULT_FRAME_RANGES)

    def range_for(self, state: CharacterState) -> FrameRange:
        """
        Look up a state's frame range.

        Raises:
            UnknownStateLookup: If the state has no entry
        """
        try:
            return self._ranges[state]
        except KeyError:
            DebugLogger.fail(f"No frame range for state {state!r}", category="state_machine")
            raise UnknownStateLookup(state) from None

    def __contains__(self, state):
        return state in self._ranges

    def __len__(self):
        return len(self._ranges)

    def items(self):
        return self._ranges.items()
