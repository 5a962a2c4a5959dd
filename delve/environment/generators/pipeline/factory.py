"""Factory functions for creating pre-configured dungeon pipelines."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .layers import (
    CorridorRoutingLayer,
    DoorPlacementLayer,
    RoomCarvingLayer,
    RoomTypeLayer,
    SpacePartitionLayer,
    WallDerivationLayer,
)
from .pipeline import PipelineGenerator

if TYPE_CHECKING:
    from delve.environment.generators.dungeon import DungeonConfig
    from .layer import GenerationLayer


def create_dungeon_layers(dungeon_config: DungeonConfig) -> list[GenerationLayer]:
    """Build the standard layer sequence for a dungeon.

    The dungeon pipeline:
    1. Splits the map into room partitions (SpacePartitionLayer)
    2. Carves an organic floor inside each partition (RoomCarvingLayer)
    3. Joins rooms into one corridor path (CorridorRoutingLayer)
    4. Tags starting, boss, shop and treasure rooms (RoomTypeLayer)
    5. Places a door at each end of every corridor (DoorPlacementLayer)
    6. Surrounds the walkable area with walls (WallDerivationLayer)

    Args:
        dungeon_config: Validated generation settings.

    Returns:
        The layers, in application order.
    """
    return [
        SpacePartitionLayer(
            min_room_size=dungeon_config.min_room_size,
            target_rooms=dungeon_config.target_rooms,
        ),
        RoomCarvingLayer(
            offset=dungeon_config.offset,
            fill_ratio=dungeon_config.fill_ratio,
            center_bias=dungeon_config.center_bias,
        ),
        CorridorRoutingLayer(),
        RoomTypeLayer(
            shop_min_rooms=dungeon_config.shop_min_rooms,
            treasure_room_chance=dungeon_config.treasure_room_chance,
        ),
        DoorPlacementLayer(probe_limit=dungeon_config.door_probe_limit),
        WallDerivationLayer(),
    ]


def create_dungeon_pipeline(dungeon_config: DungeonConfig) -> PipelineGenerator:
    """Create a PipelineGenerator running the standard dungeon layers."""
    return PipelineGenerator(layers=create_dungeon_layers(dungeon_config))
