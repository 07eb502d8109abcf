"""
Core services exports.

Provides configuration loading and the input boundary types.
"""

from sidescroller.core.services.config_manager import load_config
from sidescroller.core.services.input_snapshot import Button, InputSnapshot

__all__ = [
    # Config
    'load_config',
    # Input
    'Button',
    'InputSnapshot',
]
