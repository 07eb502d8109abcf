"""
character_state.py
------------------
Defines the character's behavior states and related classifications.

Responsibilities
----------------
- Enumerate the fixed set of character states and buffered movements.
- Classify each state's animation playback (looping, one-shot, resting).
- Group states by the transitions that accept them.
"""

from enum import IntEnum, auto


class CharacterState(IntEnum):
    """Exactly one of these is active per character."""

    IDLE = 0
    WALKING = auto()
    RUNNING = auto()
    HOPPING = auto()
    RUN_JUMPING = auto()
    CROUCHING = auto()
    CROUCHED = auto()
    UNCROUCHING = auto()
    ROLLING = auto()


class BufferedMovement(IntEnum):
    """Single pending request captured while an animation is playing."""

    NONE = 0
    HOP = auto()
    CROUCH = auto()
    UNCROUCH = auto()
    RUN_JUMP = auto()


class AnimationMode(IntEnum):
    """How a state's animation behaves when it runs past max_frame."""

    LOOP = 0    # Wrap to min_frame, keep playing
    ONCE = 1    # Clamp to max_frame, stop playing
    REST = 2    # As ONCE, and released at the end of every step


ANIMATION_MODES = {
    CharacterState.IDLE: AnimationMode.REST,
    CharacterState.WALKING: AnimationMode.LOOP,
    CharacterState.RUNNING: AnimationMode.LOOP,
    CharacterState.ROLLING: AnimationMode.LOOP,
    CharacterState.HOPPING: AnimationMode.ONCE,
    CharacterState.RUN_JUMPING: AnimationMode.ONCE,
    CharacterState.CROUCHING: AnimationMode.ONCE,
    CharacterState.CROUCHED: AnimationMode.ONCE,
    CharacterState.UNCROUCHING: AnimationMode.ONCE,
}

# Transition source groups
UPRIGHT_MOVE_SOURCES = frozenset({
    CharacterState.IDLE,
    CharacterState.WALKING,
    CharacterState.HOPPING,
    CharacterState.RUNNING,
})
CROUCHED_MOVE_SOURCES = frozenset({CharacterState.CROUCHED, CharacterState.ROLLING})
CROUCH_SOURCES = frozenset({CharacterState.IDLE, CharacterState.CROUCHING})
UNCROUCH_SOURCES = frozenset({CharacterState.CROUCHED})
UNCROUCH_BUFFER_SOURCES = frozenset({CharacterState.CROUCHED, CharacterState.ROLLING})
CROUCH_SETTLE_STATES = frozenset({
    CharacterState.CROUCHING,
    CharacterState.CROUCHED,
    CharacterState.ROLLING,
})


def animation_mode(state: CharacterState) -> AnimationMode:
    """Playback mode for a state; every CharacterState has one."""
    return ANIMATION_MODES[state]
