"""
Tile types for exported dungeon grids, using the flyweight pattern.

This module defines:
- `TileTypeData`: The intrinsic properties of a *type* of tile (walkable and a
  display name). These are the flyweight objects.
- `TileTypeID`: The integer ID of each registered tile type. A `DungeonMap`
  exports a NumPy array of these IDs rather than per-tile property records.
- Helper functions to get maps of specific properties (e.g. a boolean map of
  all walkable tiles) from a `TileTypeID` map, for collaborators such as
  pathfinding or tilemap rendering.
"""

from enum import IntEnum

import numpy as np

# Defines the intrinsic data for a *type* of tile (flyweight).
TileTypeData = np.dtype(
    [
        ("walkable", bool),
        ("display_name", "U32"),  # Human-readable name (Unicode string, max 32 chars)
    ]
)


class TileTypeID(IntEnum):
    """IDs of the tile types a generated dungeon can contain.

    VOID is registered first so that zero-filled arrays mean "nothing here".
    """

    VOID = 0
    FLOOR = 1
    CORRIDOR = 2
    WALL = 3
    DOOR = 4


# --- Tile Type Registration ---

# The index of a tile type in this list is its TileTypeID.
_registered_tile_type_data_list: list[np.ndarray] = []


def register_tile_type(tile_type_id: TileTypeID, data: np.ndarray) -> int:
    """
    Registers the data for a tile type.

    Tile types must be registered in ID order so that the list index and the
    enum value agree.

    Raises:
        ValueError: If the ID is registered out of order.
    """
    expected_id = len(_registered_tile_type_data_list)
    if tile_type_id != expected_id:
        raise ValueError(
            f"Tile type {tile_type_id.name} has ID {int(tile_type_id)}, "
            f"but the next free ID is {expected_id}."
        )
    _registered_tile_type_data_list.append(data)
    return expected_id


def make_tile_type_data(*, walkable: bool, display_name: str) -> np.ndarray:
    """Create a TileTypeData instance."""
    return np.array((walkable, display_name), dtype=TileTypeData)


register_tile_type(
    TileTypeID.VOID, make_tile_type_data(walkable=False, display_name="Void")
)
register_tile_type(
    TileTypeID.FLOOR, make_tile_type_data(walkable=True, display_name="Floor")
)
register_tile_type(
    TileTypeID.CORRIDOR, make_tile_type_data(walkable=True, display_name="Corridor")
)
register_tile_type(
    TileTypeID.WALL, make_tile_type_data(walkable=False, display_name="Wall")
)
# Doors sit on corridor tiles and stay passable.
register_tile_type(
    TileTypeID.DOOR, make_tile_type_data(walkable=True, display_name="Door")
)


# --- Pre-calculated Property Arrays for Efficient Lookups ---
# Built after all tile types have been registered, for vectorized conversion
# from a map of TileTypeIDs to a map of a single property.

_tile_type_properties_walkable = np.array(
    [t["walkable"] for t in _registered_tile_type_data_list], dtype=bool
)
_tile_type_properties_display_name = np.array(
    [t["display_name"] for t in _registered_tile_type_data_list], dtype="U32"
)


def get_walkable_map(tile_type_ids_map: np.ndarray) -> np.ndarray:
    """
    Converts a map of TileTypeIDs into a boolean map of walkability.
    True means the tile at that position is walkable.
    """
    return _tile_type_properties_walkable[tile_type_ids_map]


def get_tile_type_name_by_id(tile_type_id: int) -> str:
    """
    Get the human-readable name of a tile type by its ID.

    Returns:
        The name of the tile type (e.g., "Wall", "Floor")
    """
    if 0 <= tile_type_id < len(_tile_type_properties_display_name):
        return str(_tile_type_properties_display_name[tile_type_id])
    return f"Unknown Tile (ID: {tile_type_id})"
