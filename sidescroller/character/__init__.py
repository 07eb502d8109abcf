"""
sidescroller/character/__init__.py
----------------------------------
Character core exports.

Exports:
    CharacterState       - Behavior/animation states (IDLE, WALKING, ...)
    BufferedMovement     - Single-slot pending request (HOP, CROUCH, ...)
    CharacterStateMachine - Transition and input-buffering logic
    Character            - Per-character aggregate (machine + position)
    FrameTable           - State -> inclusive frame range lookup
    MOVEMENT_CURVE       - Keyframe displacement table
"""

from sidescroller.character.character_state import CharacterState, BufferedMovement, AnimationMode
from sidescroller.character.errors import (
    CharacterSimError,
    UnknownStateLookup,
    InvalidFrameBounds,
    MissingViewportMetrics,
)
from sidescroller.character.frame_table import FrameTable, FrameRange
from sidescroller.character.movement_curve import MOVEMENT_CURVE, Viewport
from sidescroller.character.state_machine import CharacterStateMachine
from sidescroller.character.character import Character, FramePresentation

__all__ = [
    # States
    'CharacterState',
    'BufferedMovement',
    'AnimationMode',
    # Errors
    'CharacterSimError',
    'UnknownStateLookup',
    'InvalidFrameBounds',
    'MissingViewportMetrics',
    # Core
    'FrameTable',
    'FrameRange',
    'MOVEMENT_CURVE',
    'Viewport',
    'CharacterStateMachine',
    'Character',
    'FramePresentation',
]
