"""
tick_loop.py
------------
Host-side fixed-timestep driver for a Simulation.

Responsibilities
----------------
- Clamp real frame time and accumulate it into fixed simulation ticks.
- Poll input once per tick and step every character.
- Own the pygame window/event pump when run interactively.

The simulation core never depends on this loop; any host that calls
Simulation.step / step_all with an elapsed time works the same way.
"""

import pygame

from sidescroller.core.debug.debug_logger import DebugLogger
from sidescroller.core.runtime.game_settings import Display, Physics, Debug


class TickLoop:
    """Fixed-step loop feeding one input source to one controlled character."""

    def __init__(self, simulation, input_source, controlled_handle,
                 viewport_width=Display.WIDTH, on_present=None):
        """
        Args:
            simulation: Simulation to drive
            input_source: Object with poll() -> InputSnapshot
            controlled_handle: Character that receives the polled input
            viewport_width: Width used for the horizontal step (None = unknown)
            on_present: Optional callback(dict handle -> FramePresentation)
        """
        self.simulation = simulation
        self.input_source = input_source
        self.controlled_handle = controlled_handle
        self.viewport = simulation.viewport(viewport_width)
        self.on_present = on_present

        self.accumulator = 0.0
        self.tick_count = 0
        self.running = False
        self.last_presentation = {}

    # ===========================================================
    # Fixed-step Update
    # ===========================================================

    def advance(self, frame_time: float) -> int:
        """
        Consume one real frame's worth of time.

        Args:
            frame_time: Seconds since the last frame (clamped to MAX_FRAME_TIME)

        Returns:
            Number of fixed ticks executed
        """
        frame_time = min(max(frame_time, 0.0), Physics.MAX_FRAME_TIME)
        self.accumulator += frame_time

        ticks = 0
        while self.accumulator >= Physics.FIXED_DT:
            snapshot = self.input_source.poll()
            self.last_presentation = self.simulation.step_all(
                {self.controlled_handle: snapshot},
                Physics.FIXED_DT,
                self.viewport,
            )
            self.accumulator -= Physics.FIXED_DT
            ticks += 1

        self.tick_count += ticks
        if ticks and self.on_present is not None:
            self.on_present(self.last_presentation)
        return ticks

    # ===========================================================
    # Interactive Runtime
    # ===========================================================

    def run(self):
        """Open a window and loop until it is closed."""
        DebugLogger.section("Tick Loop")

        pygame.init()
        pygame.display.set_caption(Display.CAPTION)
        pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))
        clock = pygame.time.Clock()
        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {Display.WIDTH}x{Display.HEIGHT} @ {Display.FPS} FPS")

        self.running = True
        try:
            while self.running:
                frame_ms = clock.tick(Display.FPS)
                if frame_ms > Debug.FRAME_TIME_WARNING * 2:
                    DebugLogger.warn(f"Slow frame: {frame_ms} ms", category="timing")

                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False

                self.advance(frame_ms / 1000.0)
        finally:
            pygame.quit()
            DebugLogger.system("Pygame terminated")

    def stop(self):
        self.running = False
