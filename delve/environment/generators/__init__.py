"""Dungeon generation for Delve.

- DungeonGenerator: Runs the dungeon pipeline with whole-layout retries and
  publishes the finished DungeonMap
- PipelineGenerator: Layered pipeline architecture the generator is built on

The standard dungeon is composed from these layers:
SpacePartitionLayer + RoomCarvingLayer + CorridorRoutingLayer +
RoomTypeLayer + DoorPlacementLayer + WallDerivationLayer
"""

from .base import BaseMapGenerator
from .dungeon import DungeonConfig, DungeonGenerator
from .errors import (
    DoorPlacementError,
    GenerationAttemptError,
    GenerationFailedError,
    InvalidDungeonConfigError,
    UnroutableRoomError,
)
from .metrics import LayoutMetrics
from .pipeline import (
    CorridorRoutingLayer,
    DoorPlacementLayer,
    GenerationContext,
    GenerationLayer,
    GenerationState,
    PipelineGenerator,
    RoomCarvingLayer,
    RoomTypeLayer,
    SpacePartitionLayer,
    WallDerivationLayer,
    create_dungeon_layers,
    create_dungeon_pipeline,
)

__all__ = [
    "BaseMapGenerator",
    "CorridorRoutingLayer",
    "DoorPlacementError",
    "DoorPlacementLayer",
    "DungeonConfig",
    "DungeonGenerator",
    "GenerationAttemptError",
    "GenerationContext",
    "GenerationFailedError",
    "GenerationLayer",
    "GenerationState",
    "InvalidDungeonConfigError",
    "LayoutMetrics",
    "PipelineGenerator",
    "RoomCarvingLayer",
    "RoomTypeLayer",
    "SpacePartitionLayer",
    "UnroutableRoomError",
    "WallDerivationLayer",
    "create_dungeon_layers",
    "create_dungeon_pipeline",
]
