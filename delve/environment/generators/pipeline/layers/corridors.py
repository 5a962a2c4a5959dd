"""Corridor routing between carved rooms.

Rooms are visited in greedy nearest-neighbour order starting from room 0,
and each consecutive pair is joined by one corridor. A corridor runs between
the two closest boundary tiles of its rooms: straight when they share a row
or column, otherwise L-shaped with the bend at (end.x, start.y).

Greedy ordering is not the shortest possible network, but a path through
every room is always fully connected.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from delve.environment.generators.errors import UnroutableRoomError
from delve.environment.generators.pipeline.layer import (
    GenerationLayer,
    GenerationState,
)
from delve.environment.map import Corridor
from delve.util.coordinates import CARDINAL_DIRECTIONS, step

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from delve.environment.generators.pipeline.context import GenerationContext
    from delve.environment.map import Room
    from delve.types import RoomIndex, WorldTilePos

logger = logging.getLogger(__name__)


def connection_order(rooms: Sequence[Room]) -> list[RoomIndex]:
    """Visit every room once, always moving to the nearest unvisited centre.

    Starts from room 0. Distance ties go to the lower room index.
    """
    if not rooms:
        return []

    current = rooms[0]
    order = [current.index]
    unvisited = {room.index: room for room in rooms[1:]}

    while unvisited:
        current_center = current.center()
        current = min(
            unvisited.values(),
            key=lambda room: (math.dist(current_center, room.center()), room.index),
        )
        order.append(current.index)
        del unvisited[current.index]

    return order


def boundary_tiles(floor: Iterable[WorldTilePos]) -> list[WorldTilePos]:
    """Floor tiles with at least one non-floor cardinal neighbour, sorted."""
    floor_set = set(floor)
    return sorted(
        pos
        for pos in floor_set
        if any(step(pos, d) not in floor_set for d in CARDINAL_DIRECTIONS)
    )


def closest_tile(
    candidates: Sequence[WorldTilePos], target: WorldTilePos
) -> WorldTilePos:
    """The candidate nearest to target; the earliest one wins ties."""
    return min(candidates, key=lambda pos: math.dist(pos, target))


def bresenham_line(start: WorldTilePos, end: WorldTilePos) -> list[WorldTilePos]:
    """Rasterize the line from start to end, both endpoints included."""
    x, y = start
    x2, y2 = end
    dx = abs(x2 - x)
    dy = abs(y2 - y)
    sx = 1 if x < x2 else -1
    sy = 1 if y < y2 else -1
    err = dx - dy

    line = []
    while (x, y) != (x2, y2):
        line.append((x, y))
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy

    line.append(end)
    return line


def route_corridor(
    start: WorldTilePos, end: WorldTilePos
) -> tuple[list[WorldTilePos], WorldTilePos | None]:
    """Tiles of a corridor from start to end, plus its turn point if any.

    Returns:
        (tiles, turn_point). turn_point is None for straight corridors.
    """
    if start[0] == end[0] or start[1] == end[1]:
        return bresenham_line(start, end), None

    turn_point = (end[0], start[1])
    horizontal = bresenham_line(start, turn_point)
    vertical = bresenham_line(turn_point, end)
    # The turn tile ends the first leg and starts the second; keep it once.
    return horizontal + vertical[1:], turn_point


class CorridorRoutingLayer(GenerationLayer):
    """Joins the rooms into a single path of corridors."""

    state = GenerationState.ROUTING

    def apply(self, ctx: GenerationContext) -> None:
        ctx.connection_order = connection_order(ctx.rooms)
        rooms_by_index = {room.index: room for room in ctx.rooms}

        for a, b in zip(ctx.connection_order, ctx.connection_order[1:], strict=False):
            room_a = rooms_by_index[min(a, b)]
            room_b = rooms_by_index[max(a, b)]
            room_a.connected_rooms.append(room_b.index)
            room_b.connected_rooms.append(room_a.index)
            ctx.corridors.append(self._connect(ctx, room_a, room_b))

        logger.debug(
            f"Routed {len(ctx.corridors)} corridors, "
            f"{len(ctx.corridor_tiles)} corridor tiles"
        )

    def _connect(self, ctx: GenerationContext, room_a: Room, room_b: Room) -> Corridor:
        """Build the corridor between two rooms and mark its tiles.

        Raises:
            UnroutableRoomError: If either room has no floor tiles.
        """
        edges_a = boundary_tiles(ctx.room_floor_tiles.get(room_a.index, ()))
        if not edges_a:
            raise UnroutableRoomError(room_a.index)
        edges_b = boundary_tiles(ctx.room_floor_tiles.get(room_b.index, ()))
        if not edges_b:
            raise UnroutableRoomError(room_b.index)

        start = closest_tile(edges_a, room_b.center())
        end = closest_tile(edges_b, room_a.center())
        tiles, turn_point = route_corridor(start, end)

        # Tiles crossing room floor stay floor; the sets never overlap.
        ctx.corridor_tiles.update(pos for pos in tiles if pos not in ctx.floor_tiles)

        logger.debug(
            f"Corridor {room_a.index}-{room_b.index}: {start} -> {end} "
            f"({'L-shaped' if turn_point else 'straight'})"
        )
        return Corridor(
            rooms=(room_a.index, room_b.index),
            start=start,
            end=end,
            turn_point=turn_point,
            tiles=tuple(tiles),
        )
