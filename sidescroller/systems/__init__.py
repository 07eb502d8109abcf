"""
Simulation systems exports.
"""

from sidescroller.systems.simulation_step import step
from sidescroller.systems.simulation import Simulation

__all__ = [
    'step',
    'Simulation',
]
