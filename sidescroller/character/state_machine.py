"""
state_machine.py
----------------
Fixed transition graph for a single character, with input buffering.

Responsibilities
----------------
- Own the current state, the single-slot buffered movement and facing.
- Consume a buffered movement before reading fresh input.
- Resolve fresh input through priority-ordered rules when the animation
  allows it, and settle to IDLE/CROUCHED when nothing applies.
- Capture jump/crouch/uncrouch requests into the buffer while busy.

Rule Order
----------
Ready (cursor accepts input):
    buffered movement > move_right > move_left > crouch > uncrouch.
    Only the first rule whose button is down is consulted; if it has no
    transition from the current state, the others are not tried. Jump then
    overrides whatever that produced, then settle fallback.
Busy (animation playing):
    jump > crouch > uncrouch, written into the buffer; horizontal ignored.
"""

from typing import Callable, NamedTuple, Optional

from sidescroller.core.debug.debug_logger import DebugLogger
from sidescroller.core.runtime.game_settings import Animation, Debug
from sidescroller.core.services.input_snapshot import Button, InputSnapshot
from sidescroller.character.animation_clock import AnimationClock
from sidescroller.character.animation_cursor import AnimationCursor
from sidescroller.character.character_state import (
    BufferedMovement,
    CharacterState,
    animation_mode,
    UPRIGHT_MOVE_SOURCES,
    CROUCHED_MOVE_SOURCES,
    CROUCH_SOURCES,
    UNCROUCH_SOURCES,
    UNCROUCH_BUFFER_SOURCES,
    CROUCH_SETTLE_STATES,
)
from sidescroller.character.frame_table import FrameTable


# ===========================================================
# Rule Types
# ===========================================================

class Transition(NamedTuple):
    state: CharacterState
    facing_left: Optional[bool] = None


class InputRule:
    """Predicate on the snapshot paired with a state -> Transition mapping."""

    __slots__ = ('name', 'trigger', 'resolve')

    def __init__(self, name: str, trigger: Callable[[InputSnapshot], bool],
                 resolve: Callable[[CharacterState, InputSnapshot], Optional[Transition]]):
        self.name = name
        self.trigger = trigger
        self.resolve = resolve

    def fires(self, snapshot: InputSnapshot) -> bool:
        return bool(self.trigger(snapshot))

    def apply(self, state: CharacterState, snapshot: InputSnapshot) -> Optional[Transition]:
        if not self.fires(snapshot):
            return None
        return self.resolve(state, snapshot)

    def __repr__(self):
        return f"InputRule({self.name!r})"


class BufferRule:
    """Predicate on the snapshot paired with a state -> BufferedMovement mapping."""

    __slots__ = ('name', 'trigger', 'resolve')

    def __init__(self, name: str, trigger: Callable[[InputSnapshot], bool],
                 resolve: Callable[[CharacterState], Optional[BufferedMovement]]):
        self.name = name
        self.trigger = trigger
        self.resolve = resolve

    def apply(self, state: CharacterState, snapshot: InputSnapshot) -> Optional[BufferedMovement]:
        if not self.trigger(snapshot):
            return None
        return self.resolve(state)

    def __repr__(self):
        return f"BufferRule({self.name!r})"


# ===========================================================
# Rule Tables
# ===========================================================

def _horizontal(facing_left: bool):
    def resolve(state, snapshot):
        if state in UPRIGHT_MOVE_SOURCES:
            target = CharacterState.RUNNING if snapshot.held(Button.SPRINT) else CharacterState.WALKING
        elif state in CROUCHED_MOVE_SOURCES:
            target = CharacterState.ROLLING
        else:
            return None
        return Transition(target, facing_left)
    return resolve


def _crouch(state, snapshot):
    return Transition(CharacterState.CROUCHING) if state in CROUCH_SOURCES else None


def _uncrouch(state, snapshot):
    return Transition(CharacterState.UNCROUCHING) if state in UNCROUCH_SOURCES else None


def _jump(state, snapshot):
    if state == CharacterState.RUNNING:
        return Transition(CharacterState.RUN_JUMPING)
    return Transition(CharacterState.HOPPING)


INPUT_RULES = (
    InputRule("move_right", lambda s: s.held(Button.RIGHT), _horizontal(False)),
    InputRule("move_left", lambda s: s.held(Button.LEFT), _horizontal(True)),
    InputRule("crouch", lambda s: s.held(Button.DOWN), _crouch),
    InputRule("uncrouch", lambda s: s.pressed(Button.UP), _uncrouch),
)

JUMP_RULE = InputRule("jump", lambda s: s.pressed(Button.JUMP), _jump)

BUFFER_RULES = (
    BufferRule(
        "jump",
        lambda s: s.pressed(Button.JUMP),
        lambda state: BufferedMovement.RUN_JUMP if state == CharacterState.RUNNING else BufferedMovement.HOP,
    ),
    BufferRule(
        "crouch",
        lambda s: s.pressed(Button.DOWN),
        lambda state: BufferedMovement.CROUCH,
    ),
    BufferRule(
        "uncrouch",
        lambda s: s.pressed(Button.UP),
        lambda state: BufferedMovement.UNCROUCH if state in UNCROUCH_BUFFER_SOURCES else None,
    ),
)

BUFFERED_TARGETS = {
    BufferedMovement.HOP: CharacterState.HOPPING,
    BufferedMovement.RUN_JUMP: CharacterState.RUN_JUMPING,
    BufferedMovement.CROUCH: CharacterState.CROUCHING,
    BufferedMovement.UNCROUCH: CharacterState.UNCROUCHING,
}


# ===========================================================
# State Machine
# ===========================================================

class CharacterStateMachine:
    """
    Transition logic for one character.

    Usage:
        machine = CharacterStateMachine()
        machine.update(snapshot)          # once per tick, before animating
        reached = machine.cursor.update(dt)
    """

    __slots__ = ('state', 'buffered', 'facing_left', 'cursor', 'frame_table',
                 'base_frame_duration', 'run_frame_duration')

    def __init__(self, frame_table: Optional[FrameTable] = None,
                 base_frame_duration: float = Animation.BASE_FRAME_DURATION,
                 run_frame_duration: float = Animation.RUN_FRAME_DURATION,
                 catch_up_policy: str = Animation.CATCH_UP_POLICY):
        self.frame_table = frame_table or FrameTable.default()
        self.base_frame_duration = base_frame_duration
        self.run_frame_duration = run_frame_duration

        self.state = CharacterState.IDLE
        self.buffered = BufferedMovement.NONE
        self.facing_left = False

        idle_range = self.frame_table.range_for(CharacterState.IDLE)
        self.cursor = AnimationCursor(AnimationClock(base_frame_duration, catch_up_policy))
        self.cursor.min_frame = idle_range.min_frame
        self.cursor.max_frame = idle_range.max_frame
        self.cursor.current_frame = idle_range.min_frame

    # ===========================================================
    # Tick Entry Point
    # ===========================================================

    def update(self, snapshot: InputSnapshot) -> CharacterState:
        """
        Resolve this tick's transition or buffer this tick's request.

        Returns:
            The state after resolution
        """
        if self.cursor.accepts_input:
            if not self._consume_buffered():
                self._resolve_input(snapshot)
        else:
            self._buffer_request(snapshot)
        return self.state

    def enter_state(self, state: CharacterState):
        """Switch to state and restart its animation from min_frame."""
        frame_range = self.frame_table.range_for(state)
        duration = self.frame_duration_for(state)

        if state != self.state and Debug.LOG_STATE_CHANGES:
            DebugLogger.state(f"{self.state.name} -> {state.name}")

        self.state = state
        self.cursor.start(frame_range, animation_mode(state), duration)

    def frame_duration_for(self, state: CharacterState) -> float:
        if state == CharacterState.RUNNING:
            return self.run_frame_duration
        return self.base_frame_duration

    @property
    def frame_range(self):
        return self.frame_table.range_for(self.state)

    # ===========================================================
    # Resolution Stages
    # ===========================================================

    def _consume_buffered(self) -> bool:
        """Act on the buffered movement, if any. Returns True if it caused a transition."""
        pending = self.buffered
        if pending == BufferedMovement.NONE:
            return False

        self.buffered = BufferedMovement.NONE
        if pending == BufferedMovement.CROUCH and self.state == CharacterState.CROUCHING:
            DebugLogger.trace("Dropped buffered CROUCH, already crouching", category="state_machine")
            return False

        self.enter_state(BUFFERED_TARGETS[pending])
        return True

    def _resolve_input(self, snapshot: InputSnapshot):
        origin = self.state

        # First rule whose button is down decides, even if it cannot act from origin
        transition = None
        for rule in INPUT_RULES:
            if rule.fires(snapshot):
                transition = rule.apply(origin, snapshot)
                break

        if transition is not None and transition.facing_left is not None:
            self.facing_left = transition.facing_left

        jump = JUMP_RULE.apply(origin, snapshot)
        if jump is not None:
            transition = jump

        if transition is None:
            settle = CharacterState.CROUCHED if origin in CROUCH_SETTLE_STATES else CharacterState.IDLE
            transition = Transition(settle)

        self.enter_state(transition.state)

    def _buffer_request(self, snapshot: InputSnapshot):
        for rule in BUFFER_RULES:
            movement = rule.apply(self.state, snapshot)
            if movement is None:
                continue
            if movement != self.buffered:
                DebugLogger.trace(
                    f"Buffered {movement.name} during {self.state.name}",
                    category="state_machine"
                )
            self.buffered = movement
            return
