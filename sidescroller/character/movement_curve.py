"""
movement_curve.py
-----------------
Keyframe-triggered displacement: which animation frames move the character.

Responsibilities
----------------
- Describe each state's motion as data keyed by frame offset from min_frame.
- Derive the horizontal step from viewport metrics and the state's frame count.
- Combine the two into a world-space displacement for one frame advance.

Motion Table
------------
Horizontal values are multiples of the state's step, signed by facing.
Vertical values are world units, positive is up.

    WALKING / RUNNING / ROLLING   every frame: 1 x step
    HOPPING                       offsets 3,4: 3 x step, +20
                                  offsets 5,6: 3 x step, -20
    RUN_JUMPING                   every frame: 3 x step
                                  offset 1: +30, offset 3: -30
    IDLE / CROUCHING / CROUCHED / UNCROUCHING: none

One full walk or run cycle therefore covers exactly one tile
(viewport_width / tile_count), whatever the frame duration.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

import pygame

from sidescroller.core.debug.debug_logger import DebugLogger
from sidescroller.core.runtime.game_settings import World
from sidescroller.character.character_state import CharacterState
from sidescroller.character.errors import MissingViewportMetrics, UnknownStateLookup


# ===========================================================
# Data Types
# ===========================================================

@dataclass(frozen=True)
class Viewport:
    """Metrics the host provides each tick; width may be unavailable."""

    width: Optional[float]
    tile_count: float = World.TILE_COUNT

    @property
    def tile_width(self) -> float:
        return self.width / self.tile_count


@dataclass(frozen=True)
class Displacement:
    """One frame's motion: horizontal in steps, vertical in world units."""

    steps: float = 0.0
    rise: float = 0.0


STILL = Displacement()


@dataclass(frozen=True)
class MotionProfile:
    """
    Motion for one state.

    keyframes entries replace every_frame at their offset.
    """

    every_frame: Displacement = STILL
    keyframes: Mapping[int, Displacement] = field(default_factory=dict)

    def at(self, offset: int) -> Displacement:
        return self.keyframes.get(offset, self.every_frame)


# ===========================================================
# Motion Table
# ===========================================================

HOP_UP = Displacement(steps=3.0, rise=20.0)
HOP_DOWN = Displacement(steps=3.0, rise=-20.0)
RUN_JUMP_GLIDE = Displacement(steps=3.0)

MOVEMENT_CURVE = MappingProxyType({
    CharacterState.IDLE: MotionProfile(),
    CharacterState.WALKING: MotionProfile(every_frame=Displacement(steps=1.0)),
    CharacterState.RUNNING: MotionProfile(every_frame=Displacement(steps=1.0)),
    CharacterState.ROLLING: MotionProfile(every_frame=Displacement(steps=1.0)),
    CharacterState.HOPPING: MotionProfile(keyframes={
        3: HOP_UP,
        4: HOP_UP,
        5: HOP_DOWN,
        6: HOP_DOWN,
    }),
    CharacterState.RUN_JUMPING: MotionProfile(every_frame=RUN_JUMP_GLIDE, keyframes={
        1: Displacement(steps=3.0, rise=30.0),
        3: Displacement(steps=3.0, rise=-30.0),
    }),
    CharacterState.CROUCHING: MotionProfile(),
    CharacterState.CROUCHED: MotionProfile(),
    CharacterState.UNCROUCHING: MotionProfile(),
})


# ===========================================================
# Curve Evaluation
# ===========================================================

def horizontal_step(viewport: Optional[Viewport], frame_range) -> float:
    """
    Distance covered by one `1 x step` frame of a state.

    Raises:
        MissingViewportMetrics: If the viewport, its width or its tile count
            is missing or not positive
    """
    if viewport is None or viewport.width is None or viewport.width <= 0:
        raise MissingViewportMetrics("Viewport width unavailable")
    if not viewport.tile_count or viewport.tile_count <= 0:
        raise MissingViewportMetrics("Tile count unavailable")
    return viewport.width / viewport.tile_count / frame_range.frame_count


def displacement_for(state: CharacterState, reached_frame: int, frame_range,
                     facing_left: bool, viewport: Optional[Viewport]) -> pygame.Vector2:
    """
    World-space offset for the frame advance that reached reached_frame.

    Without viewport metrics the horizontal part is zero for this tick;
    vertical keyframes still apply.

    Raises:
        UnknownStateLookup: If state has no entry in MOVEMENT_CURVE
    """
    try:
        profile = MOVEMENT_CURVE[state]
    except KeyError:
        raise UnknownStateLookup(state) from None
    motion = profile.at(frame_range.offset_of(reached_frame))
    if motion == STILL:
        return pygame.Vector2(0, 0)

    dx = 0.0
    if motion.steps:
        try:
            step = horizontal_step(viewport, frame_range)
        except MissingViewportMetrics as e:
            DebugLogger.warn(f"{e}; {state.name} frame {reached_frame} moves 0", category="movement")
            step = 0.0
        dx = motion.steps * step * (-1.0 if facing_left else 1.0)

    return pygame.Vector2(dx, motion.rise)
