"""Procedural dungeon layout generation.

Builds a connected set of irregular rooms joined by corridors, with derived
walls and validated door placements, on a discrete tile grid.
"""

__version__ = "0.1.0"
