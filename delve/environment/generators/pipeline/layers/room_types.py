"""Room role assignment along the corridor path.

Runs after routing, because roles follow the connection order: the player
starts in the first room visited and the boss waits in the last one.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from delve import config
from delve.environment.generators.pipeline.layer import (
    GenerationLayer,
    GenerationState,
)
from delve.environment.map import RoomType

if TYPE_CHECKING:
    from delve.environment.generators.pipeline.context import GenerationContext

logger = logging.getLogger(__name__)


class RoomTypeLayer(GenerationLayer):
    """Tags rooms as starting, boss, shop or treasure rooms.

    - The first room in the connection order is the STARTING room.
    - The last room in the connection order is the BOSS room.
    - One random room in between becomes a SHOP once there are at least
      `shop_min_rooms` rooms.
    - Each remaining room becomes a TREASURE room with probability
      `treasure_room_chance`.

    Rooms with a single connection are flagged as dead ends.
    """

    state = GenerationState.ROUTING

    def __init__(
        self,
        shop_min_rooms: int = config.SHOP_MIN_ROOMS,
        treasure_room_chance: float = config.TREASURE_ROOM_CHANCE,
    ) -> None:
        self.shop_min_rooms = shop_min_rooms
        self.treasure_room_chance = treasure_room_chance

    def apply(self, ctx: GenerationContext) -> None:
        if not ctx.rooms:
            return

        rng = ctx.rng.get("map.room_types")
        rooms_by_index = {room.index: room for room in ctx.rooms}
        order = ctx.connection_order or [room.index for room in ctx.rooms]

        for room in ctx.rooms:
            room.room_type = RoomType.NORMAL
            room.is_dead_end = len(room.connected_rooms) == 1

        rooms_by_index[order[0]].room_type = RoomType.STARTING
        if len(order) < 2:
            return
        rooms_by_index[order[-1]].room_type = RoomType.BOSS

        middle = order[1:-1]
        if middle and len(order) >= self.shop_min_rooms:
            shop_index = rng.choice(middle)
            rooms_by_index[shop_index].room_type = RoomType.SHOP

        for index in middle:
            room = rooms_by_index[index]
            if room.room_type is RoomType.NORMAL and (
                rng.random() < self.treasure_room_chance
            ):
                room.room_type = RoomType.TREASURE

        logger.debug(
            "Room roles: "
            + ", ".join(f"{room.index}={room.room_type.name}" for room in ctx.rooms)
        )
