"""
Runtime exports.

Game-wide constants and the host-side tick loop.
"""

from sidescroller.core.runtime.game_settings import (
    Display,
    Physics,
    World,
    Animation,
    Debug,
)

__all__ = [
    'Display',
    'Physics',
    'World',
    'Animation',
    'Debug',
]
