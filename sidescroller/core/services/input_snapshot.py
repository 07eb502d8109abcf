"""
input_snapshot.py
-----------------
Read-only view of the logical buttons for a single tick.

The simulation core only ever sees this structure; raw key codes stay on
the host side (see input_manager.py).
"""

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import FrozenSet, Iterable


class Button(IntEnum):
    """Fixed logical button set consumed by the character core."""

    RIGHT = 0
    LEFT = auto()
    DOWN = auto()
    UP = auto()
    JUMP = auto()
    SPRINT = auto()


@dataclass(frozen=True)
class InputSnapshot:
    """
    Held and just-pressed buttons for one tick.

    Usage:
        if snapshot.held(Button.RIGHT): ...     # Continuous
        if snapshot.pressed(Button.JUMP): ...   # Rising edge this tick
    """

    held_buttons: FrozenSet[Button] = frozenset()
    pressed_buttons: FrozenSet[Button] = frozenset()

    @classmethod
    def empty(cls) -> "InputSnapshot":
        return cls()

    @classmethod
    def of(cls, held: Iterable[Button] = (), pressed: Iterable[Button] = ()) -> "InputSnapshot":
        """Build a snapshot; a button pressed this tick also counts as held."""
        pressed = frozenset(pressed)
        return cls(frozenset(held) | pressed, pressed)

    def held(self, button: Button) -> bool:
        return button in self.held_buttons

    def pressed(self, button: Button) -> bool:
        return button in self.pressed_buttons

    def __bool__(self):
        return bool(self.held_buttons or self.pressed_buttons)
