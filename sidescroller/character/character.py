"""
character.py
------------
The per-character aggregate owned by the simulation.

A Character is never shared; every field is mutated only by its own
simulation step.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import pygame

from sidescroller.character.character_state import CharacterState
from sidescroller.character.state_machine import CharacterStateMachine


@dataclass(frozen=True)
class FramePresentation:
    """What the renderer reads after a step. Position is world space, y up."""

    current_frame: int
    facing_left: bool
    position: Tuple[float, float]
    state: CharacterState


class Character:
    """State machine plus world position for one simulated character."""

    __slots__ = ('machine', 'position')

    def __init__(self, machine: Optional[CharacterStateMachine] = None, position=(0.0, 0.0)):
        self.machine = machine or CharacterStateMachine()
        self.position = pygame.Vector2(position)

    # -------------------------------------------------------
    # Delegated state
    # -------------------------------------------------------
    @property
    def state(self) -> CharacterState:
        return self.machine.state

    @property
    def buffered(self):
        return self.machine.buffered

    @property
    def facing_left(self) -> bool:
        return self.machine.facing_left

    @property
    def cursor(self):
        return self.machine.cursor

    def presentation(self) -> FramePresentation:
        return FramePresentation(
            current_frame=self.cursor.current_frame,
            facing_left=self.facing_left,
            position=(self.position.x, self.position.y),
            state=self.state,
        )

    # -------------------------------------------------------
    # Rollback support for a failed step
    # -------------------------------------------------------
    def capture(self) -> tuple:
        """Copy every mutable field into a plain tuple."""
        m, c = self.machine, self.machine.cursor
        return (
            m.state, m.buffered, m.facing_left,
            c.current_frame, c.min_frame, c.max_frame, c.playing, c.mode, c.cycle_complete,
            c.clock.frame_duration, c.clock.elapsed,
            (self.position.x, self.position.y),
        )

    def restore(self, saved: tuple):
        m, c = self.machine, self.machine.cursor
        (m.state, m.buffered, m.facing_left,
         c.current_frame, c.min_frame, c.max_frame, c.playing, c.mode, c.cycle_complete,
         c.clock.frame_duration, c.clock.elapsed,
         position) = saved
        self.position.update(position)

    def __repr__(self):
        return (f"Character({self.state.name}, frame={self.cursor.current_frame}, "
                f"pos=({self.position.x:.1f}, {self.position.y:.1f}))")
