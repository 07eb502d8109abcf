"""
character_config.py
-------------------
Loads and validates character.json into ready-to-use simulation settings.

Responsibilities
----------------
- Merge character.json over the built-in defaults.
- Reject unknown state names, bad durations and unknown catch-up policies.
- Build the FrameTable (fails fast on invalid bounds) and state machines.
"""

from sidescroller.core.debug.debug_logger import DebugLogger
from sidescroller.core.runtime.game_settings import Animation, World
from sidescroller.core.services.config_manager import load_config
from sidescroller.character.animation_clock import CatchUpPolicy
from sidescroller.character.character_state import CharacterState
from sidescroller.character.frame_table import DEFAULT_FRAME_RANGES, FrameTable
from sidescroller.character.state_machine import CharacterStateMachine


DEFAULT_CHARACTER_CONFIG = {
    "frames": {state.name.lower(): list(bounds) for state, bounds in DEFAULT_FRAME_RANGES.items()},
    "timing": {
        "base_frame_duration": Animation.BASE_FRAME_DURATION,
        "run_frame_duration": Animation.RUN_FRAME_DURATION,
        "catch_up_policy": Animation.CATCH_UP_POLICY,
    },
    "world": {
        "tile_count": World.TILE_COUNT,
    },
}


class CharacterConfig:
    """Validated settings shared by every character in a simulation."""

    __slots__ = ('frame_table', 'base_frame_duration', 'run_frame_duration',
                 'catch_up_policy', 'tile_count')

    def __init__(self, frame_table, base_frame_duration, run_frame_duration,
                 catch_up_policy, tile_count):
        self.frame_table = frame_table
        self.base_frame_duration = base_frame_duration
        self.run_frame_duration = run_frame_duration
        self.catch_up_policy = catch_up_policy
        self.tile_count = tile_count

    @classmethod
    def from_dict(cls, cfg: dict) -> "CharacterConfig":
        frames = {}
        for name, bounds in cfg.get("frames", {}).items():
            try:
                state = CharacterState[name.upper()]
            except KeyError:
                DebugLogger.fail(f"character config: unknown state '{name}'", category="loading")
                raise ValueError(f"Unknown state in frame table: {name}") from None
            frames[state] = (int(bounds[0]), int(bounds[1]))

        timing = cfg.get("timing", {})
        base = float(timing.get("base_frame_duration", Animation.BASE_FRAME_DURATION))
        run = float(timing.get("run_frame_duration", Animation.RUN_FRAME_DURATION))
        if base <= 0 or run <= 0:
            DebugLogger.fail(f"character config: durations must be positive ({base}, {run})",
                             category="loading")
            raise ValueError("Frame durations must be positive")

        policy_name = timing.get("catch_up_policy", Animation.CATCH_UP_POLICY)
        try:
            policy = CatchUpPolicy(policy_name)
        except ValueError:
            DebugLogger.fail(f"character config: unknown catch_up_policy '{policy_name}'",
                             category="loading")
            raise

        tile_count = float(cfg.get("world", {}).get("tile_count", World.TILE_COUNT))
        if tile_count <= 0:
            DebugLogger.fail(f"character config: tile_count must be positive ({tile_count})",
                             category="loading")
            raise ValueError("tile_count must be positive")

        return cls(FrameTable(frames), base, run, policy, tile_count)

    def create_state_machine(self) -> CharacterStateMachine:
        return CharacterStateMachine(
            frame_table=self.frame_table,
            base_frame_duration=self.base_frame_duration,
            run_frame_duration=self.run_frame_duration,
            catch_up_policy=self.catch_up_policy,
        )


def load_character_config(filename: str = "character.json") -> CharacterConfig:
    """Load, merge over DEFAULT_CHARACTER_CONFIG and validate."""
    cfg = load_config(filename, DEFAULT_CHARACTER_CONFIG)
    config = CharacterConfig.from_dict(cfg)
    DebugLogger.init_entry("CharacterConfig")
    DebugLogger.init_sub(
        f"{len(config.frame_table)} states, "
        f"frame {config.base_frame_duration}s / run {config.run_frame_duration}s, "
        f"catch-up '{config.catch_up_policy.value}'"
    )
    return config
