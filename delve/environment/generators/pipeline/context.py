"""Generation context for the dungeon pipeline.

The GenerationContext is a mutable container that holds all state for one
generation attempt. Each layer in the pipeline receives the same context and
modifies it in place. A failed attempt throws its context away; nothing in it
survives into the next attempt.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from delve.environment.map import Corridor, Door, DungeonMap, Room
from delve.util.coordinates import is_valid_world_tile_pos
from delve.util.rng import RNGProvider

if TYPE_CHECKING:
    from delve.environment.generators.metrics import LayoutMetrics
    from delve.types import RandomSeed, RoomIndex, WorldTilePos


@dataclass
class GenerationContext:
    """Mutable state container passed through the generation pipeline.

    Attributes:
        width: Map width in tiles.
        height: Map height in tiles.
        rng: Provider of the per-stage random streams.
        rooms: Rooms produced by partitioning, indexed by Room.index.
        floor_tiles: Carved room floor across all rooms.
        room_floor_tiles: Carved floor per room index.
        corridor_tiles: Rasterized corridor tiles that are not room floor.
        wall_tiles: Non-walkable tiles bordering the walkable area.
        connection_order: Room indices in nearest-neighbour visiting order.
        corridors: One corridor per consecutive pair in connection_order.
        doors: Validated door placements, two per corridor.
        room_coverage: Achieved floor coverage of each room's padded rect.
    """

    width: int
    height: int
    rng: RNGProvider = field(default_factory=RNGProvider)
    rooms: list[Room] = field(default_factory=list)
    floor_tiles: set[WorldTilePos] = field(default_factory=set)
    room_floor_tiles: dict[RoomIndex, set[WorldTilePos]] = field(default_factory=dict)
    corridor_tiles: set[WorldTilePos] = field(default_factory=set)
    wall_tiles: set[WorldTilePos] = field(default_factory=set)
    connection_order: list[RoomIndex] = field(default_factory=list)
    corridors: list[Corridor] = field(default_factory=list)
    doors: list[Door] = field(default_factory=list)
    room_coverage: dict[RoomIndex, float] = field(default_factory=dict)

    @classmethod
    def create_empty(
        cls,
        width: int,
        height: int,
        rng: RNGProvider | None = None,
        seed: RandomSeed = None,
    ) -> GenerationContext:
        """Create an empty generation context.

        Args:
            width: Map width in tiles.
            height: Map height in tiles.
            rng: Provider to draw random streams from. Shared across attempts
                so that a retry sees fresh random values.
            seed: Seed for a new provider when rng is not given.

        Returns:
            A new GenerationContext ready for layer processing.
        """
        if rng is None:
            rng = RNGProvider(seed)
        return cls(width=width, height=height, rng=rng)

    def in_bounds(self, pos: WorldTilePos) -> bool:
        return is_valid_world_tile_pos(pos, self.width, self.height)

    def is_walkable(self, pos: WorldTilePos) -> bool:
        return pos in self.floor_tiles or pos in self.corridor_tiles

    def walkable_tiles(self) -> set[WorldTilePos]:
        return self.floor_tiles | self.corridor_tiles

    def to_dungeon_map(
        self,
        *,
        room_offset: int,
        seed: RandomSeed,
        attempts: int,
        metrics: LayoutMetrics,
    ) -> DungeonMap:
        """Freeze this context into the map published to collaborators."""
        return DungeonMap(
            width=self.width,
            height=self.height,
            rooms=tuple(self.rooms),
            floor_tiles=frozenset(self.floor_tiles),
            corridor_tiles=frozenset(self.corridor_tiles),
            wall_tiles=frozenset(self.wall_tiles),
            corridors=tuple(self.corridors),
            doors=tuple(self.doors),
            room_offset=room_offset,
            seed=seed,
            attempts=attempts,
            metrics=metrics,
        )
