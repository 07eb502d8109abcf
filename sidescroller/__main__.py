"""
__main__.py
-----------
Interactive host: one keyboard-controlled character, state changes logged.

Run with `python -m sidescroller`. Rendering is not part of this package;
the window only exists to receive keyboard focus.
"""

import sys

from sidescroller.core.debug.debug_logger import DebugLogger
from sidescroller.core.runtime.tick_loop import TickLoop
from sidescroller.core.services.input_manager import KeyboardInput
from sidescroller.character.character_config import load_character_config
from sidescroller.systems.simulation import Simulation


def main():
    DebugLogger.section("Initializing sidescroller")

    simulation = Simulation(load_character_config())
    hero = simulation.spawn()

    loop = TickLoop(simulation, KeyboardInput(), hero)
    loop.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
