"""
game_settings.py
----------------
Centralized constants for the simulation core and its host loop.
"""


# ===========================================================
# Display
# ===========================================================

class Display:
    """Host window configuration."""
    WIDTH: int = 1280
    HEIGHT: int = 720
    FPS: int = 60
    CAPTION: str = "sidescroller"


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Fixed update timing used by the host tick loop."""
    UPDATE_RATE: int = 60
    FIXED_DT: float = 1 / UPDATE_RATE
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# World Layout
# ===========================================================

class World:
    """Horizontal tiling of the viewport; one walk cycle covers one tile."""
    TILE_COUNT: float = 10.0


# ===========================================================
# Animation Timing
# ===========================================================

class Animation:
    """Per-frame durations (seconds) and the clock catch-up policy."""
    BASE_FRAME_DURATION: float = 0.1
    RUN_FRAME_DURATION: float = 0.05
    CATCH_UP_POLICY: str = "drop"  # "drop" or "carry"


# ===========================================================
# Debug
# ===========================================================

class Debug:
    """Diagnostics switches for the host loop and state logging."""
    FRAME_TIME_WARNING: float = 16.67
    LOG_STATE_CHANGES: bool = True
