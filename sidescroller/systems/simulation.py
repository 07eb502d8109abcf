"""
simulation.py
-------------
Arena of independent characters addressed by integer handles.

Responsibilities
----------------
- Create characters from one shared CharacterConfig.
- Step a single character or every character for a tick.
- Keep no state shared between characters beyond the immutable frame table.
"""

from typing import Dict, Iterable, Mapping, Optional

from sidescroller.core.debug.debug_logger import DebugLogger
from sidescroller.core.services.input_snapshot import InputSnapshot
from sidescroller.character.character import Character, FramePresentation
from sidescroller.character.character_config import DEFAULT_CHARACTER_CONFIG, CharacterConfig
from sidescroller.character.movement_curve import Viewport
from sidescroller.systems.simulation_step import step


class Simulation:
    """
    Owns every simulated character.

    Usage:
        sim = Simulation()
        hero = sim.spawn()
        frame = sim.step(hero, snapshot, dt, Viewport(1280))
    """

    def __init__(self, config: Optional[CharacterConfig] = None):
        self.config = config or CharacterConfig.from_dict(DEFAULT_CHARACTER_CONFIG)
        self._characters: Dict[int, Character] = {}
        self._next_handle = 0

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def spawn(self, position=(0.0, 0.0)) -> int:
        """Create an IDLE character facing right and return its handle."""
        handle = self._next_handle
        self._next_handle += 1
        self._characters[handle] = Character(self.config.create_state_machine(), position)
        DebugLogger.action(f"Spawned character #{handle} at {tuple(position)}", category="simulation")
        return handle

    def remove(self, handle: int):
        """Drop a character; raises KeyError for an unknown handle."""
        del self._characters[handle]
        DebugLogger.action(f"Removed character #{handle}", category="simulation")

    def get(self, handle: int) -> Character:
        return self._characters[handle]

    @property
    def handles(self) -> Iterable[int]:
        return tuple(self._characters)

    def __len__(self):
        return len(self._characters)

    def viewport(self, width: Optional[float]) -> Viewport:
        """Viewport for this simulation's configured tile count."""
        return Viewport(width, self.config.tile_count)

    # ===========================================================
    # Stepping
    # ===========================================================

    def step(self, handle: int, snapshot: InputSnapshot, elapsed: float,
             viewport: Optional[Viewport]) -> FramePresentation:
        return step(self._characters[handle], snapshot, elapsed, viewport)

    def step_all(self, snapshots: Mapping[int, InputSnapshot], elapsed: float,
                 viewport: Optional[Viewport]) -> Dict[int, FramePresentation]:
        """
        Step every character once.

        Characters without an entry in snapshots receive an empty snapshot.
        """
        empty = InputSnapshot.empty()
        return {
            handle: step(character, snapshots.get(handle, empty), elapsed, viewport)
            for handle, character in self._characters.items()
        }
