"""Dungeon layout data: rooms, corridors, doors and the published map."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

import numpy as np

from delve.environment import tile_types
from delve.environment.tile_types import TileTypeID
from delve.util.coordinates import Rect, is_vertical

if TYPE_CHECKING:
    from delve.environment.generators.metrics import LayoutMetrics
    from delve.types import Direction, RandomSeed, RoomIndex, WorldTilePos


class RoomType(Enum):
    NORMAL = auto()
    BOSS = auto()
    SHOP = auto()
    TREASURE = auto()
    STARTING = auto()


class DoorOrientation(Enum):
    """Which door variant a collaborator should draw.

    Vertical corridors share one door type; horizontal corridors use a
    left- or right-facing one depending on the direction of travel.
    """

    VERTICAL = auto()
    LEFT = auto()
    RIGHT = auto()

    @classmethod
    def from_direction(cls, direction: Direction) -> DoorOrientation:
        if is_vertical(direction):
            return cls.VERTICAL
        if direction[0] < 0:
            return cls.LEFT
        return cls.RIGHT


@dataclass
class Room:
    """A partition of the map that holds one carved room.

    The rect is the full partition; the carved floor lives inside the rect
    shrunk by the configured offset.
    """

    rect: Rect
    index: RoomIndex
    room_type: RoomType = RoomType.NORMAL
    connected_rooms: list[RoomIndex] = field(default_factory=list)
    is_dead_end: bool = False

    def center(self) -> WorldTilePos:
        return self.rect.center()


@dataclass(frozen=True)
class Corridor:
    """A straight or L-shaped corridor between two rooms.

    Attributes:
        rooms: The connected room indices, lowest first.
        start: Boundary floor tile of the first room.
        end: Boundary floor tile of the second room.
        turn_point: Tile where an L-shaped corridor changes axis, else None.
        tiles: Every rasterized tile from start to end, in order.
    """

    rooms: tuple[RoomIndex, RoomIndex]
    start: WorldTilePos
    end: WorldTilePos
    turn_point: WorldTilePos | None
    tiles: tuple[WorldTilePos, ...]

    @property
    def is_l_shaped(self) -> bool:
        return self.turn_point is not None


@dataclass(frozen=True)
class Door:
    """A door placement validated against the corridor direction."""

    position: WorldTilePos
    orientation: DoorOrientation
    direction: Direction
    rooms: tuple[RoomIndex, RoomIndex]


@dataclass(frozen=True)
class DungeonMap:
    """Immutable result of one successful generation attempt.

    This is what collaborators consume: the entity spawner reads the rooms
    and floor tiles, pathfinding reads the walkable tiles, and a renderer
    reads the three tile sets plus the door overlay.
    """

    width: int
    height: int
    rooms: tuple[Room, ...]
    floor_tiles: frozenset[WorldTilePos]
    corridor_tiles: frozenset[WorldTilePos]
    wall_tiles: frozenset[WorldTilePos]
    corridors: tuple[Corridor, ...]
    doors: tuple[Door, ...]
    room_offset: int
    seed: RandomSeed
    attempts: int
    metrics: LayoutMetrics

    @property
    def walkable_tiles(self) -> frozenset[WorldTilePos]:
        return self.floor_tiles | self.corridor_tiles

    @property
    def connections(self) -> list[tuple[RoomIndex, RoomIndex]]:
        return [corridor.rooms for corridor in self.corridors]

    @property
    def start_position(self) -> WorldTilePos:
        """Where the player enters: the centre of the starting room."""
        return self.rooms[0].center()

    def room_index_at(self, pos: WorldTilePos) -> RoomIndex | None:
        """Index of the room whose partition contains pos, or None."""
        for room in self.rooms:
            if room.rect.contains(pos):
                return room.index
        return None

    def room_floor_tiles(self, room_index: RoomIndex) -> frozenset[WorldTilePos]:
        rect = self.rooms[room_index].rect
        return frozenset(pos for pos in self.floor_tiles if rect.contains(pos))

    def spawn_positions(self, room_index: RoomIndex) -> list[WorldTilePos]:
        """Floor tiles inside a room's padded rect, in a stable order.

        An empty list means the room has nowhere to put entities; callers
        should skip the room rather than fail.
        """
        padded = self.rooms[room_index].rect.shrink(self.room_offset)
        return sorted(pos for pos in self.floor_tiles if padded.contains(pos))

    def to_tile_array(self) -> np.ndarray:
        """Export the layout as a (width, height) array of TileTypeIDs.

        Door tiles overwrite the corridor tile they sit on.
        """
        tiles = np.full(
            (self.width, self.height),
            fill_value=TileTypeID.VOID,
            dtype=np.uint8,
            order="F",
        )
        for tile_set, tile_type in (
            (self.floor_tiles, TileTypeID.FLOOR),
            (self.corridor_tiles, TileTypeID.CORRIDOR),
            (self.wall_tiles, TileTypeID.WALL),
        ):
            if tile_set:
                xs, ys = zip(*tile_set, strict=True)
                tiles[list(xs), list(ys)] = tile_type
        for door in self.doors:
            tiles[door.position] = TileTypeID.DOOR
        return tiles

    def get_walkable_map(self) -> np.ndarray:
        return tile_types.get_walkable_map(self.to_tile_array())
