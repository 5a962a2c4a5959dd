"""Wall derivation around the walkable area."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from delve.environment.generators.pipeline.layer import (
    GenerationLayer,
    GenerationState,
)
from delve.util.coordinates import NEIGHBOR_DIRECTIONS, is_valid_world_tile_pos, step

if TYPE_CHECKING:
    from collections.abc import Set

    from delve.environment.generators.pipeline.context import GenerationContext
    from delve.types import WorldTilePos

logger = logging.getLogger(__name__)


def derive_walls(
    walkable: Set[WorldTilePos], width: int, height: int
) -> set[WorldTilePos]:
    """Every in-bounds 8-neighbour of a walkable tile that is not walkable."""
    walls: set[WorldTilePos] = set()
    for pos in walkable:
        for direction in NEIGHBOR_DIRECTIONS:
            neighbor = step(pos, direction)
            if neighbor not in walkable and is_valid_world_tile_pos(
                neighbor, width, height
            ):
                walls.add(neighbor)
    return walls


class WallDerivationLayer(GenerationLayer):
    """Surrounds floor and corridor tiles with walls.

    Reads the floor and corridor sets and writes only the wall set. Doors are
    an overlay and do not change which tiles are walls.
    """

    state = GenerationState.WALL_DERIVING

    def apply(self, ctx: GenerationContext) -> None:
        ctx.wall_tiles = derive_walls(ctx.walkable_tiles(), ctx.width, ctx.height)
        logger.debug(f"Derived {len(ctx.wall_tiles)} wall tiles")
