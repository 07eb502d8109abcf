"""
conftest.py
-----------
Shared pytest configuration and fixtures for sidescroller tests.

Contains:
- Import path setup so tests run from a plain checkout
- Character, state machine and viewport fixtures with exact-binary timings
- Snapshot and tick helpers
- Marker registration
"""

import os
import sys

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from sidescroller.core.debug.debug_logger import LoggerConfig
from sidescroller.core.services.input_snapshot import Button, InputSnapshot
from sidescroller.character.character import Character
from sidescroller.character.frame_table import FrameTable
from sidescroller.character.movement_curve import Viewport
from sidescroller.character.state_machine import CharacterStateMachine
from sidescroller.systems.simulation_step import step


# Durations that are exact in binary floating point
BASE_DT = 0.25
RUN_DT = 0.125

# 1000 / 10 -> one tile is 100 units wide
VIEW_WIDTH = 1000.0
TILE_COUNT = 10.0
TILE_WIDTH = VIEW_WIDTH / TILE_COUNT


# ===========================================================
# Logging
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Keep test output free of simulation logs."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)
    yield


# ===========================================================
# Core Fixtures
# ===========================================================

@pytest.fixture
def frame_table():
    return FrameTable.default()


@pytest.fixture
def machine(frame_table):
    return CharacterStateMachine(
        frame_table=frame_table,
        base_frame_duration=BASE_DT,
        run_frame_duration=RUN_DT,
    )


@pytest.fixture
def character(machine):
    return Character(machine)


@pytest.fixture
def viewport():
    return Viewport(VIEW_WIDTH, TILE_COUNT)


# ===========================================================
# Helpers
# ===========================================================

def snap(held=(), pressed=()):
    """Shorthand for InputSnapshot.of(held=..., pressed=...)."""
    return InputSnapshot.of(held=held, pressed=pressed)


NOTHING = InputSnapshot.empty()
RIGHT = snap(held=[Button.RIGHT])
LEFT = snap(held=[Button.LEFT])
JUMP = snap(pressed=[Button.JUMP])


def run_ticks(character, count, snapshot, elapsed, viewport):
    """Step a character count times with the same input; return last presentation."""
    frame = None
    for _ in range(count):
        frame = step(character, snapshot, elapsed, viewport)
    return frame


def make_ready(machine):
    """Stop the current animation so the next update reads fresh input."""
    machine.cursor.release()
    return machine


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "scenario: multi-tick behavior scenarios")


def pytest_collection_modifyitems(config, items):
    """Tag everything outside the systems suite as a unit test."""
    for item in items:
        if "systems" not in item.nodeid:
            item.add_marker(pytest.mark.unit)
