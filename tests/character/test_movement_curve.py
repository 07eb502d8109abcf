"""
test_movement_curve.py
----------------------
Unit tests for the keyframe displacement table and step size.

Viewport is 1000 wide with 10 tiles, so one tile is 100 units:
    walking / running step = 100 / 4 = 25
    hopping step           = 100 / 8 = 12.5
    run-jumping step       = 100 / 4 = 25
"""

import pytest
from unittest.mock import patch

from sidescroller.character.character_state import CharacterState
from sidescroller.character.errors import MissingViewportMetrics, UnknownStateLookup
from sidescroller.character.movement_curve import (
    MOVEMENT_CURVE,
    STILL,
    Viewport,
    displacement_for,
    horizontal_step,
)


def _move(frame_table, state, offset, viewport, facing_left=False):
    frame_range = frame_table.range_for(state)
    return displacement_for(state, frame_range.min_frame + offset, frame_range, facing_left, viewport)


class TestStepSize:

    def test_step_divides_tile_by_frame_count(self, frame_table, viewport):
        walking = frame_table.range_for(CharacterState.WALKING)
        hopping = frame_table.range_for(CharacterState.HOPPING)

        assert horizontal_step(viewport, walking) == 25.0
        assert horizontal_step(viewport, hopping) == 12.5

    @pytest.mark.parametrize("bad_viewport", [
        None,
        Viewport(None),
        Viewport(0.0),
        Viewport(1000.0, 0.0),
    ])
    def test_missing_metrics_raise(self, frame_table, bad_viewport):
        with pytest.raises(MissingViewportMetrics):
            horizontal_step(bad_viewport, frame_table.range_for(CharacterState.WALKING))


class TestMotionTable:

    def test_table_covers_every_state(self):
        assert set(MOVEMENT_CURVE) == set(CharacterState)

    @pytest.mark.parametrize("state", [
        CharacterState.IDLE,
        CharacterState.CROUCHING,
        CharacterState.CROUCHED,
        CharacterState.UNCROUCHING,
    ])
    def test_still_states_never_move(self, state):
        profile = MOVEMENT_CURVE[state]

        for offset in range(0, 10):
            assert profile.at(offset) == STILL

    @pytest.mark.parametrize("state", [
        CharacterState.WALKING,
        CharacterState.RUNNING,
        CharacterState.ROLLING,
    ])
    def test_ground_states_move_every_frame(self, state):
        profile = MOVEMENT_CURVE[state]

        for offset in range(1, 6):
            assert profile.at(offset).steps == 1.0
            assert profile.at(offset).rise == 0.0

    def test_hop_rises_then_falls_back_to_ground(self):
        profile = MOVEMENT_CURVE[CharacterState.HOPPING]

        assert [profile.at(o).rise for o in range(1, 9)] == [0, 0, 20, 20, -20, -20, 0, 0]

    def test_hop_moves_forward_only_while_airborne(self):
        profile = MOVEMENT_CURVE[CharacterState.HOPPING]

        assert [profile.at(o).steps for o in range(1, 9)] == [0, 0, 3, 3, 3, 3, 0, 0]

    def test_run_jump_arc(self):
        profile = MOVEMENT_CURVE[CharacterState.RUN_JUMPING]

        assert [profile.at(o).rise for o in range(1, 5)] == [30, 0, -30, 0]
        assert all(profile.at(o).steps == 3.0 for o in range(1, 5))


class TestDisplacement:

    def test_walking_right(self, frame_table, viewport):
        offset = _move(frame_table, CharacterState.WALKING, 1, viewport)

        assert (offset.x, offset.y) == (25.0, 0.0)

    def test_walking_left_is_mirrored(self, frame_table, viewport):
        offset = _move(frame_table, CharacterState.WALKING, 1, viewport, facing_left=True)

        assert (offset.x, offset.y) == (-25.0, 0.0)

    def test_hop_fourth_frame(self, frame_table, viewport):
        # Absolute frame 7: the 4th frame of the hop sheet
        hop = frame_table.range_for(CharacterState.HOPPING)
        offset = displacement_for(CharacterState.HOPPING, 7, hop, False, viewport)

        assert offset.y == 20.0
        assert offset.x == 3 * 12.5

    def test_hop_launch_frames_do_not_move(self, frame_table, viewport):
        for frame_offset in (1, 2, 7, 8):
            offset = _move(frame_table, CharacterState.HOPPING, frame_offset, viewport)
            assert (offset.x, offset.y) == (0.0, 0.0)

    def test_run_jump_peak(self, frame_table, viewport):
        up = _move(frame_table, CharacterState.RUN_JUMPING, 1, viewport)
        down = _move(frame_table, CharacterState.RUN_JUMPING, 3, viewport, facing_left=True)

        assert (up.x, up.y) == (75.0, 30.0)
        assert (down.x, down.y) == (-75.0, -30.0)

    def test_missing_viewport_zeroes_horizontal_only(self, frame_table):
        with patch("sidescroller.character.movement_curve.DebugLogger") as mock_logger:
            walk = _move(frame_table, CharacterState.WALKING, 1, None)
            hop = _move(frame_table, CharacterState.HOPPING, 3, Viewport(None))

        assert (walk.x, walk.y) == (0.0, 0.0)
        assert (hop.x, hop.y) == (0.0, 20.0)
        assert mock_logger.warn.call_count == 2

    def test_still_state_skips_viewport_check(self, frame_table):
        with patch("sidescroller.character.movement_curve.DebugLogger") as mock_logger:
            offset = _move(frame_table, CharacterState.CROUCHED, 1, None)

        assert (offset.x, offset.y) == (0.0, 0.0)
        mock_logger.warn.assert_not_called()

    def test_state_missing_from_table_is_not_defaulted(self, frame_table, viewport):
        partial = {s: p for s, p in MOVEMENT_CURVE.items() if s != CharacterState.WALKING}

        with patch("sidescroller.character.movement_curve.MOVEMENT_CURVE", partial):
            with pytest.raises(UnknownStateLookup):
                _move(frame_table, CharacterState.WALKING, 1, viewport)
