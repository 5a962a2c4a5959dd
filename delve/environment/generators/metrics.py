"""Layout statistics computed after a successful generation attempt."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from delve.environment.generators.pipeline.context import GenerationContext
    from delve.types import RoomIndex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutMetrics:
    """Size and density figures for a generated layout.

    Room areas are measured on the padded rects the floor was carved in.

    Attributes:
        room_count: Number of rooms.
        min_room_area: Smallest padded room area.
        max_room_area: Largest padded room area.
        mean_room_area: Mean padded room area.
        median_room_area: Median padded room area.
        expected_walkable: Sum over rooms of round(area * fill_ratio).
        floor_count: Carved floor tiles.
        corridor_count: Corridor tiles that are not floor.
        wall_count: Derived wall tiles.
        door_count: Placed doors.
        density: expected_walkable / map area.
        space_efficiency: Total padded room area / map area.
        room_coverage: Achieved floor coverage per room index.
    """

    room_count: int
    min_room_area: int
    max_room_area: int
    mean_room_area: float
    median_room_area: float
    expected_walkable: int
    floor_count: int
    corridor_count: int
    wall_count: int
    door_count: int
    density: float
    space_efficiency: float
    room_coverage: dict[RoomIndex, float] = field(default_factory=dict)


def compute_layout_metrics(
    ctx: GenerationContext, offset: int, fill_ratio: float
) -> LayoutMetrics:
    areas = np.array(
        [room.rect.shrink(offset).area for room in ctx.rooms], dtype=np.int64
    )
    map_area = ctx.width * ctx.height
    expected = int(sum(round(int(area) * fill_ratio) for area in areas))

    if areas.size == 0:
        min_area = max_area = 0
        mean_area = median_area = 0.0
    else:
        min_area = int(areas.min())
        max_area = int(areas.max())
        mean_area = float(areas.mean())
        median_area = float(np.median(areas))

    return LayoutMetrics(
        room_count=len(ctx.rooms),
        min_room_area=min_area,
        max_room_area=max_area,
        mean_room_area=mean_area,
        median_room_area=median_area,
        expected_walkable=expected,
        floor_count=len(ctx.floor_tiles),
        corridor_count=len(ctx.corridor_tiles),
        wall_count=len(ctx.wall_tiles),
        door_count=len(ctx.doors),
        density=expected / map_area if map_area else 0.0,
        space_efficiency=int(areas.sum()) / map_area if map_area else 0.0,
        room_coverage=dict(ctx.room_coverage),
    )


def log_layout_metrics(metrics: LayoutMetrics) -> None:
    logger.info(f"Rooms generated: {metrics.room_count}")
    logger.info(
        f"Room sizes - min: {metrics.min_room_area}, max: {metrics.max_room_area}, "
        f"avg: {metrics.mean_room_area:.1f}, median: {metrics.median_room_area:.1f}"
    )
    logger.info(
        f"Walkable: {metrics.floor_count} floor + {metrics.corridor_count} corridor "
        f"(expected {metrics.expected_walkable:,}), walls: {metrics.wall_count}, "
        f"doors: {metrics.door_count}"
    )
    logger.info(
        f"Dungeon density: {metrics.density:.1%}, "
        f"space efficiency: {metrics.space_efficiency:.1%}"
    )
