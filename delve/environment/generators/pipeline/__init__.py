"""Pipeline-based dungeon generation.

This package provides a layered architecture for dungeon generation. Each
layer transforms a shared GenerationContext, and a finished context is frozen
into a DungeonMap.

Example usage:
    from delve.environment.generators.pipeline import (
        GenerationContext,
        create_dungeon_pipeline,
    )

    pipeline = create_dungeon_pipeline(DungeonConfig(seed=12345))
    ctx = pipeline.run(GenerationContext.create_empty(80, 80, seed=12345))

The pipeline can also be assembled manually for custom configurations:
    from delve.environment.generators.pipeline import (
        PipelineGenerator,
        SpacePartitionLayer,
        RoomCarvingLayer,
        CorridorRoutingLayer,
    )

    pipeline = PipelineGenerator(
        layers=[
            SpacePartitionLayer(min_room_size=12, target_rooms=4),
            RoomCarvingLayer(fill_ratio=0.6),
            CorridorRoutingLayer(),
        ]
    )
"""

from .context import GenerationContext
from .factory import create_dungeon_layers, create_dungeon_pipeline
from .layer import GenerationLayer, GenerationState
from .layers import (
    CorridorRoutingLayer,
    DoorPlacementLayer,
    RoomCarvingLayer,
    RoomTypeLayer,
    SpacePartitionLayer,
    WallDerivationLayer,
)
from .pipeline import PipelineGenerator

__all__ = [
    "CorridorRoutingLayer",
    "DoorPlacementLayer",
    "GenerationContext",
    "GenerationLayer",
    "GenerationState",
    "PipelineGenerator",
    "RoomCarvingLayer",
    "RoomTypeLayer",
    "SpacePartitionLayer",
    "WallDerivationLayer",
    "create_dungeon_layers",
    "create_dungeon_pipeline",
]
