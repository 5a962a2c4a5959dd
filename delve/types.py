from __future__ import annotations

from typing import Literal

# =============================================================================
# SPATIAL TYPES
# =============================================================================

type TileCoord = int  # Always integer tile position

# World coordinates - absolute positions on the dungeon grid
type WorldTileCoord = TileCoord  # Example: x=5, y=3
type WorldTilePos = tuple[
    WorldTileCoord, WorldTileCoord
]  # Example: (5, 3) = tile 5,3 on map

# Directions - discrete grid steps
type UnitStep = Literal[-1, 0, 1]
type Direction = tuple[int, int]  # Example: (-1, 0) = westward step

# =============================================================================
# GENERATION TYPES
# =============================================================================

# Random seed for deterministic generation.
# Can be an int for numeric seeds or a descriptive string like "burrito1".
type RandomSeed = int | str | None

# Index of a room in the generated room list.
type RoomIndex = int
