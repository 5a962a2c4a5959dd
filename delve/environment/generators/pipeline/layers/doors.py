"""Door placement at both ends of every corridor.

A door needs solid context: the two tiles on either side of it, across the
corridor, must not be walkable. From each corridor endpoint the placer walks
outward along the corridor, bending at the turn point of an L-shaped
corridor, and takes the first position that qualifies. If none of the first
few positions do, the layout is rejected and the generator starts over.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from delve import config
from delve.environment.generators.errors import DoorPlacementError
from delve.environment.generators.pipeline.layer import (
    GenerationLayer,
    GenerationState,
)
from delve.environment.map import Door, DoorOrientation
from delve.util.coordinates import DOWN, LEFT, RIGHT, UP, is_vertical, sign, step

if TYPE_CHECKING:
    from delve.environment.generators.pipeline.context import GenerationContext
    from delve.environment.map import Corridor
    from delve.types import Direction, WorldTilePos

logger = logging.getLogger(__name__)


def is_suitable_for_door(
    ctx: GenerationContext, pos: WorldTilePos, direction: Direction
) -> bool:
    """True when the tiles flanking pos across the corridor are solid.

    A vertical corridor is flanked left and right, a horizontal one above and
    below. Out-of-bounds flanks count as solid.
    """
    flanks = (LEFT, RIGHT) if is_vertical(direction) else (UP, DOWN)
    return not any(ctx.is_walkable(step(pos, flank)) for flank in flanks)


def is_suitable_for_door_with_next_check(
    ctx: GenerationContext, pos: WorldTilePos, direction: Direction
) -> bool:
    """is_suitable_for_door, plus the tile beyond pos along direction.

    The next tile must be on the map, and if it is corridor it must be
    flanked by solid tiles too, so a door never opens onto the exposed side
    of another corridor.
    """
    if not is_suitable_for_door(ctx, pos, direction):
        return False

    next_pos = step(pos, direction)
    if not ctx.in_bounds(next_pos):
        return False

    if next_pos in ctx.corridor_tiles:
        return is_suitable_for_door(ctx, next_pos, direction)
    return True


def direction_after_turn(
    origin: WorldTilePos, turn_point: WorldTilePos, destination: WorldTilePos
) -> Direction:
    """Direction to follow once a probe reaches the turn point.

    A probe that set out along the origin's row continues vertically toward
    the destination; one that set out along its column continues
    horizontally.
    """
    if origin[1] == turn_point[1]:
        return DOWN if destination[1] < origin[1] else UP
    return LEFT if destination[0] < origin[0] else RIGHT


def find_door_position(
    ctx: GenerationContext,
    origin: WorldTilePos,
    direction: Direction,
    turn_point: WorldTilePos | None,
    destination: WorldTilePos,
    probe_limit: int = config.DOOR_PROBE_LIMIT,
) -> tuple[WorldTilePos, Direction] | None:
    """Probe outward from a corridor endpoint for a valid door position.

    Args:
        ctx: Context holding the floor and corridor tiles.
        origin: The corridor endpoint (a room boundary tile).
        direction: Unit direction pointing from origin into the corridor.
        turn_point: Bend of an L-shaped corridor, or None if straight.
        destination: The corridor's other endpoint.
        probe_limit: Number of positions to try.

    Returns:
        (position, direction at that position), or None if every probe failed.
    """
    pos = origin
    current = direction

    for attempt in range(probe_limit):
        if (
            ctx.in_bounds(pos)
            and pos in ctx.corridor_tiles
            and is_suitable_for_door_with_next_check(ctx, pos, current)
        ):
            logger.debug(f"Door at {pos} facing {current} (probe {attempt + 1})")
            return pos, current

        if turn_point is not None and pos == turn_point:
            current = direction_after_turn(origin, turn_point, destination)

        pos = step(pos, current)

    return None


def endpoint_directions(corridor: Corridor) -> tuple[Direction, Direction]:
    """Outward directions for the start and end sides of a corridor.

    Straight corridors face each endpoint toward the other one; L-shaped
    corridors face each endpoint toward the turn point.
    """
    start, end = corridor.start, corridor.end
    if corridor.turn_point is None:
        toward_end = (sign(end[0] - start[0]), sign(end[1] - start[1]))
        toward_start = (-toward_end[0], -toward_end[1])
        return toward_end, toward_start

    tx, ty = corridor.turn_point
    return (
        (sign(tx - start[0]), sign(ty - start[1])),
        (sign(tx - end[0]), sign(ty - end[1])),
    )


class DoorPlacementLayer(GenerationLayer):
    """Places a door near each end of every corridor.

    Raises DoorPlacementError if any side of any corridor has no valid spot,
    which discards the attempt.
    """

    state = GenerationState.DOOR_PLACING

    def __init__(self, probe_limit: int = config.DOOR_PROBE_LIMIT) -> None:
        self.probe_limit = probe_limit

    def apply(self, ctx: GenerationContext) -> None:
        failures = []

        for corridor in ctx.corridors:
            start_dir, end_dir = endpoint_directions(corridor)
            sides = (
                (corridor.start, start_dir, corridor.end),
                (corridor.end, end_dir, corridor.start),
            )
            for origin, direction, destination in sides:
                found = find_door_position(
                    ctx,
                    origin,
                    direction,
                    corridor.turn_point,
                    destination,
                    self.probe_limit,
                )
                if found is None:
                    logger.warning(
                        f"No door position within {self.probe_limit} tiles of "
                        f"{origin} facing {direction}"
                    )
                    failures.append((origin, direction, corridor.rooms))
                    continue

                pos, final_direction = found
                ctx.doors.append(
                    Door(
                        position=pos,
                        orientation=DoorOrientation.from_direction(final_direction),
                        direction=final_direction,
                        rooms=corridor.rooms,
                    )
                )

        if failures:
            raise DoorPlacementError(failures)
