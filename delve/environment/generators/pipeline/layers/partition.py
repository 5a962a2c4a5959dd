"""Binary space partitioning of the map into room-sized rectangles.

Rectangles are split breadth-first, always across their longer axis, until
the number of pieces reaches the target room count or nothing left in the
queue is large enough to split.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from delve import config
from delve.environment.generators.pipeline.layer import (
    GenerationLayer,
    GenerationState,
)
from delve.environment.map import Room
from delve.util.coordinates import Rect

if TYPE_CHECKING:
    from delve.environment.generators.pipeline.context import GenerationContext
    from delve.util.rng import RNG

logger = logging.getLogger(__name__)


def can_split(rect: Rect, min_room_size: int) -> bool:
    """A rect keeps splitting until both sides are below twice the minimum."""
    return rect.width >= min_room_size * 2 or rect.height >= min_room_size * 2


def split_rect(rect: Rect, min_room_size: int, rng: RNG) -> tuple[Rect, Rect]:
    """Cut a rect in two across its longer axis.

    Wider rects are cut by a vertical line, taller ones by a horizontal line,
    and squares vertically. Both halves are at least min_room_size deep along
    the cut axis.
    """
    if rect.width >= rect.height:
        split_x = rng.randint(min_room_size, rect.width - min_room_size)
        return (
            Rect(rect.x1, rect.y1, split_x, rect.height),
            Rect(rect.x1 + split_x, rect.y1, rect.width - split_x, rect.height),
        )

    split_y = rng.randint(min_room_size, rect.height - min_room_size)
    return (
        Rect(rect.x1, rect.y1 + split_y, rect.width, rect.height - split_y),
        Rect(rect.x1, rect.y1, rect.width, split_y),
    )


def partition_space(
    root: Rect, min_room_size: int, target_count: int, rng: RNG
) -> list[Rect]:
    """Recursively subdivide root into about target_count rectangles.

    Args:
        root: The area to divide.
        min_room_size: Smallest depth either half of a split may have.
        target_count: Desired number of rectangles.
        rng: Random source for split positions.

    Returns:
        Non-overlapping rectangles inside root. Never empty; shorter than
        target_count only when no rectangle could be split any further.
    """
    queue: deque[Rect] = deque([root])
    final: list[Rect] = []

    while queue and len(final) + len(queue) < target_count:
        rect = queue.popleft()
        if can_split(rect, min_room_size):
            queue.extend(split_rect(rect, min_room_size, rng))
        else:
            final.append(rect)

    # Target reached (or nothing splittable left): the rest are rooms as-is.
    final.extend(queue)
    return final


class SpacePartitionLayer(GenerationLayer):
    """Divides the whole map into room partitions."""

    state = GenerationState.PARTITIONING

    def __init__(
        self,
        min_room_size: int = config.DUNGEON_MIN_ROOM_SIZE,
        target_rooms: int = config.DUNGEON_TARGET_ROOMS,
    ) -> None:
        self.min_room_size = min_room_size
        self.target_rooms = target_rooms

    def apply(self, ctx: GenerationContext) -> None:
        root = Rect(0, 0, ctx.width, ctx.height)
        rects = partition_space(
            root, self.min_room_size, self.target_rooms, ctx.rng.get("map.partition")
        )
        ctx.rooms = [Room(rect=rect, index=i) for i, rect in enumerate(rects)]

        if len(rects) < self.target_rooms:
            logger.info(
                f"Partitioned {len(rects)} rooms (target {self.target_rooms}); "
                "no partition could be split further"
            )
        else:
            logger.debug(f"Partitioned {len(rects)} rooms on {ctx.width}x{ctx.height}")
