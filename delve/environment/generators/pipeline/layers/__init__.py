"""Generation layers for the dungeon pipeline.

Each layer transforms the GenerationContext in a specific way:
- Partition layers: Divide the map into room-sized rectangles
- Carving layers: Fill each room with an organic floor
- Routing layers: Join rooms with corridors and tag room roles
- Door layers: Validate a door position at each corridor end
- Wall layers: Surround the walkable area with walls
"""

from .carving import RoomCarvingLayer
from .corridors import CorridorRoutingLayer
from .doors import DoorPlacementLayer
from .partition import SpacePartitionLayer
from .room_types import RoomTypeLayer
from .walls import WallDerivationLayer

__all__ = [
    "CorridorRoutingLayer",
    "DoorPlacementLayer",
    "RoomCarvingLayer",
    "RoomTypeLayer",
    "SpacePartitionLayer",
    "WallDerivationLayer",
]
