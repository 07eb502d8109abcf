"""
test_simulation_step.py
-----------------------
Multi-tick scenarios through the single step() entry point.

Timings come from conftest: base frame 0.25s, run frame 0.125s, and a
1000-wide viewport of 10 tiles (one tile = 100 units).
"""

import pytest
from unittest.mock import patch

from sidescroller.core.services.input_snapshot import Button
from sidescroller.character.character import Character
from sidescroller.character.character_state import BufferedMovement, CharacterState
from sidescroller.character.errors import UnknownStateLookup
from sidescroller.character.frame_table import DEFAULT_FRAME_RANGES, FrameTable
from sidescroller.character.movement_curve import Viewport
from sidescroller.character.state_machine import CharacterStateMachine
from sidescroller.systems.simulation_step import step

from conftest import BASE_DT, TILE_WIDTH, NOTHING, RIGHT, LEFT, JUMP, snap, run_ticks


pytestmark = pytest.mark.scenario


# ===========================================================
# Walking
# ===========================================================

class TestWalking:

    @pytest.mark.parametrize("frame_duration", [0.125, 0.25, 0.5, 1.0])
    def test_one_walk_cycle_covers_one_tile(self, viewport, frame_duration):
        character = Character(CharacterStateMachine(base_frame_duration=frame_duration))

        run_ticks(character, 4, RIGHT, frame_duration, viewport)

        assert character.position.x == TILE_WIDTH
        assert character.position.y == 0.0
        assert character.state == CharacterState.WALKING

    def test_walking_left_moves_negative(self, character, viewport):
        run_ticks(character, 4, LEFT, BASE_DT, viewport)

        assert character.position.x == -TILE_WIDTH
        assert character.facing_left is True

    def test_releasing_at_cycle_end_returns_to_idle(self, character, viewport):
        run_ticks(character, 4, RIGHT, BASE_DT, viewport)

        frame = step(character, NOTHING, BASE_DT, viewport)

        assert frame.state == CharacterState.IDLE
        assert character.position.x == TILE_WIDTH

    def test_sub_frame_ticks_do_not_move(self, character, viewport):
        frame = step(character, RIGHT, BASE_DT / 2, viewport)

        assert frame.state == CharacterState.WALKING
        assert frame.current_frame == 0
        assert character.position.x == 0.0

    def test_missing_viewport_keeps_position(self, character):
        with patch("sidescroller.character.movement_curve.DebugLogger"):
            frame = step(character, RIGHT, BASE_DT, None)
            step(character, RIGHT, BASE_DT, Viewport(None))

        assert frame.state == CharacterState.WALKING
        assert frame.current_frame == 1
        assert character.position.x == 0.0
        assert character.position.y == 0.0

    def test_running_covers_one_tile_per_cycle(self, character, viewport):
        sprint_right = snap(held=[Button.RIGHT, Button.SPRINT])

        run_ticks(character, 4, sprint_right, BASE_DT / 2, viewport)

        assert character.state == CharacterState.RUNNING
        assert character.position.x == TILE_WIDTH


# ===========================================================
# Hopping
# ===========================================================

class TestHopping:

    def test_idle_jump_enters_hop(self, character, viewport):
        frame = step(character, JUMP, 0.0, viewport)

        assert frame.state == CharacterState.HOPPING
        assert frame.current_frame == 4
        assert character.cursor.playing is True

    def test_fourth_hop_frame_rises_and_moves(self, character, viewport):
        step(character, JUMP, 0.0, viewport)
        run_ticks(character, 2, NOTHING, BASE_DT, viewport)
        before = character.position.copy()

        frame = step(character, NOTHING, BASE_DT, viewport)

        assert frame.current_frame == 7
        assert character.position.y - before.y == 20.0
        assert character.position.x - before.x == 3 * TILE_WIDTH / 8

    def test_hop_lands_and_clamps(self, character, viewport):
        step(character, JUMP, 0.0, viewport)

        frame = run_ticks(character, 8, NOTHING, BASE_DT, viewport)

        assert frame.state == CharacterState.HOPPING
        assert frame.current_frame == 11
        assert character.cursor.playing is False
        assert character.position.y == 0.0
        assert character.position.x == 4 * 3 * TILE_WIDTH / 8

    def test_no_input_after_hop_goes_idle(self, character, viewport):
        step(character, JUMP, 0.0, viewport)
        run_ticks(character, 8, NOTHING, BASE_DT, viewport)

        frame = step(character, NOTHING, BASE_DT, viewport)

        assert frame.state == CharacterState.IDLE
        assert character.cursor.playing is False

    def test_hop_buffered_during_walk_fires_at_cycle_end(self, character, viewport):
        step(character, RIGHT, BASE_DT, viewport)
        step(character, snap(held=[Button.RIGHT], pressed=[Button.JUMP]), BASE_DT, viewport)
        assert character.state == CharacterState.WALKING
        assert character.buffered == BufferedMovement.HOP

        run_ticks(character, 2, RIGHT, BASE_DT, viewport)
        frame = step(character, RIGHT, 0.0, viewport)

        assert frame.state == CharacterState.HOPPING
        assert character.buffered == BufferedMovement.NONE


# ===========================================================
# Run-jumping
# ===========================================================

class TestRunJumping:

    def test_running_jump_becomes_run_jump(self, character, viewport):
        step(character, snap(held=[Button.RIGHT, Button.SPRINT]), 0.0, viewport)
        character.cursor.release()

        frame = step(character, JUMP, 0.0, viewport)

        assert frame.state == CharacterState.RUN_JUMPING
        assert frame.current_frame == 6

    def test_run_jump_covers_three_tiles(self, character, viewport):
        character.machine.enter_state(CharacterState.RUNNING)
        character.cursor.release()
        step(character, JUMP, 0.0, viewport)

        heights = []
        for _ in range(4):
            step(character, NOTHING, BASE_DT, viewport)
            heights.append(character.position.y)

        assert heights == [30.0, 30.0, 0.0, 0.0]
        assert character.position.x == 3 * TILE_WIDTH
        assert character.cursor.playing is False


# ===========================================================
# Crouching & Rolling
# ===========================================================

class TestCrouching:

    def test_crouch_settles_into_crouched(self, character, viewport):
        run_ticks(character, 3, snap(held=[Button.DOWN]), BASE_DT, viewport)
        assert character.state == CharacterState.CROUCHING
        assert character.cursor.playing is False

        frame = step(character, NOTHING, 0.0, viewport)

        assert frame.state == CharacterState.CROUCHED
        assert frame.current_frame == 15
        assert character.position.xy == (0.0, 0.0)

    def test_crouched_right_rolls(self, character, viewport):
        character.machine.enter_state(CharacterState.CROUCHED)
        character.cursor.release()

        frame = step(character, RIGHT, BASE_DT, viewport)

        assert frame.state == CharacterState.ROLLING
        assert character.position.x == pytest.approx(TILE_WIDTH / 3)

    def test_crouched_up_while_animating_is_buffered(self, character, viewport):
        character.machine.enter_state(CharacterState.CROUCHED)

        step(character, snap(pressed=[Button.UP]), 0.0, viewport)
        assert character.state == CharacterState.CROUCHED
        assert character.buffered == BufferedMovement.UNCROUCH

        step(character, NOTHING, BASE_DT, viewport)
        frame = step(character, NOTHING, 0.0, viewport)

        assert frame.state == CharacterState.UNCROUCHING

    def test_crouch_into_roll_with_right_held(self, character, viewport):
        step(character, snap(held=[Button.DOWN]), BASE_DT, viewport)
        down_right = snap(held=[Button.DOWN, Button.RIGHT])
        run_ticks(character, 2, down_right, BASE_DT, viewport)
        assert character.state == CharacterState.CROUCHING

        frame = step(character, down_right, BASE_DT, viewport)
        assert frame.state == CharacterState.CROUCHED
        assert character.cursor.playing is False

        frame = step(character, down_right, BASE_DT, viewport)

        assert frame.state == CharacterState.ROLLING
        assert character.position.x == pytest.approx(TILE_WIDTH / 3)

    def test_roll_released_settles_crouched(self, character, viewport):
        character.machine.enter_state(CharacterState.CROUCHED)
        character.cursor.release()
        run_ticks(character, 3, RIGHT, BASE_DT, viewport)

        frame = step(character, NOTHING, 0.0, viewport)

        assert frame.state == CharacterState.CROUCHED
        assert character.position.x == pytest.approx(TILE_WIDTH)


# ===========================================================
# Step Contract
# ===========================================================

class TestStepContract:

    def test_idle_is_released_every_step(self, character, viewport):
        frame = step(character, NOTHING, BASE_DT, viewport)

        assert frame.state == CharacterState.IDLE
        assert frame.current_frame == 0
        assert character.cursor.playing is False

    def test_presentation_reflects_character(self, character, viewport):
        frame = run_ticks(character, 2, LEFT, BASE_DT, viewport)

        assert frame.current_frame == character.cursor.current_frame == 2
        assert frame.facing_left is True
        assert frame.position == (character.position.x, character.position.y)

    def test_negative_elapsed_rejected_before_mutation(self, character, viewport):
        with pytest.raises(ValueError):
            step(character, RIGHT, -0.1, viewport)

        assert character.state == CharacterState.IDLE

    def test_failed_lookup_leaves_character_unchanged(self, viewport):
        ranges = dict(DEFAULT_FRAME_RANGES)
        del ranges[CharacterState.HOPPING]
        character = Character(CharacterStateMachine(frame_table=FrameTable(ranges)), (10.0, 5.0))
        character.machine.buffered = BufferedMovement.HOP
        before = character.capture()

        with pytest.raises(UnknownStateLookup):
            step(character, RIGHT, BASE_DT, viewport)

        assert character.capture() == before
        assert character.buffered == BufferedMovement.HOP
        assert character.position.xy == (10.0, 5.0)
