"""Organic room carving by biased random walks.

Each room partition is padded inward and then filled by a handful of random
walks that all start at the padded centre. Walks mostly wander in cardinal
steps; with probability `center_bias` a step heads back toward the centre,
which keeps the rooms blob-shaped instead of stringy. The union of all walks
is the room floor. Coverage is intentionally approximate.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from delve import config
from delve.environment.generators.pipeline.layer import (
    GenerationLayer,
    GenerationState,
)
from delve.util.coordinates import CARDINAL_DIRECTIONS, sign

if TYPE_CHECKING:
    from delve.environment.generators.pipeline.context import GenerationContext
    from delve.types import Direction, WorldTilePos
    from delve.util.coordinates import Rect
    from delve.util.rng import RNG

logger = logging.getLogger(__name__)


def walk_count(area: int) -> int:
    """One walk per CARVE_TILES_PER_WALK tiles, between 1 and CARVE_MAX_WALKS."""
    return max(1, min(area // config.CARVE_TILES_PER_WALK, config.CARVE_MAX_WALKS))


def direction_toward_center(
    pos: WorldTilePos, center: WorldTilePos, rng: RNG
) -> Direction:
    """Unit step toward center, with one axis occasionally randomized.

    The jitter keeps walks from running in straight lines back to the centre.
    The result may be diagonal or (0, 0).
    """
    dx = sign(center[0] - pos[0])
    dy = sign(center[1] - pos[1])

    if rng.random() < config.CARVE_CENTER_JITTER_CHANCE:
        if rng.random() < 0.5:
            dx = rng.randint(-1, 1)
        else:
            dy = rng.randint(-1, 1)

    return (dx, dy)


def carve_room(
    room: Rect, fill_ratio: float, center_bias: float, rng: RNG
) -> set[WorldTilePos]:
    """Carve an organic floor region inside room.

    Args:
        room: The padded rect to carve inside.
        fill_ratio: Target share of the rect's area to cover.
        center_bias: Probability of a centre-biased step.
        rng: Random source for the walks.

    Returns:
        The floor tiles, all inside room. Empty when room has no area.
    """
    area = room.area
    if area == 0:
        return set()

    center = room.center()
    target_tiles = round(area * fill_ratio)
    walks = walk_count(area)
    steps_per_walk = target_tiles // walks

    floor: set[WorldTilePos] = {center}

    for _walk in range(walks):
        x, y = center
        for _step in range(steps_per_walk):
            if len(floor) >= target_tiles:
                break

            moved = False
            for _attempt in range(config.CARVE_STEP_ATTEMPTS):
                if rng.random() < center_bias:
                    dx, dy = direction_toward_center((x, y), center, rng)
                else:
                    dx, dy = rng.choice(CARDINAL_DIRECTIONS)

                new_pos = (x + dx, y + dy)
                if not room.contains(new_pos):
                    continue

                if dx and dy:
                    # Diagonal step: carve the corner so floor stays 4-connected.
                    floor.add((x + dx, y))
                x, y = new_pos
                floor.add(new_pos)
                moved = True
                break

            if not moved:
                break

    return floor


class RoomCarvingLayer(GenerationLayer):
    """Carves the floor of every room partition."""

    state = GenerationState.CARVING

    def __init__(
        self,
        offset: int = config.DUNGEON_ROOM_OFFSET,
        fill_ratio: float = config.DUNGEON_FILL_RATIO,
        center_bias: float = config.DUNGEON_CENTER_BIAS,
    ) -> None:
        """Initialize the carving layer.

        Args:
            offset: Tiles trimmed from each side of a partition before carving.
            fill_ratio: Target floor coverage of each padded room.
            center_bias: Probability that a walk step heads toward the centre.
        """
        self.offset = offset
        self.fill_ratio = fill_ratio
        self.center_bias = center_bias

    def apply(self, ctx: GenerationContext) -> None:
        rng = ctx.rng.get("map.carve")

        for room in ctx.rooms:
            padded = room.rect.shrink(self.offset)
            tiles = carve_room(padded, self.fill_ratio, self.center_bias, rng)

            if not tiles:
                logger.warning(
                    f"Room {room.index}: padded area {padded} is empty, skipping carve"
                )
                ctx.room_floor_tiles[room.index] = set()
                ctx.room_coverage[room.index] = 0.0
                continue

            coverage = len(tiles) / padded.area
            ctx.room_floor_tiles[room.index] = tiles
            ctx.room_coverage[room.index] = coverage
            ctx.floor_tiles.update(tiles)

            logger.debug(
                f"Room {room.index}: coverage {coverage:.1%} "
                f"(target {self.fill_ratio:.1%}), tiles {len(tiles)}/{padded.area}"
            )
            if abs(coverage - self.fill_ratio) > config.CARVE_COVERAGE_TOLERANCE:
                logger.debug(
                    f"Room {room.index}: coverage outside the "
                    f"±{config.CARVE_COVERAGE_TOLERANCE:.0%} band"
                )
