"""
sidescroller
------------
Character-control core for a 2D side-scrolling platformer.

Converts per-tick button snapshots into character states, drives each
state's sprite animation and derives world-space motion from the frames
the animation reaches.
"""

__version__ = "0.1.0"
