"""Grid traversal helpers shared by the generation tests."""

from __future__ import annotations

from collections import deque
from collections.abc import Set

from delve.types import WorldTilePos
from delve.util.coordinates import CARDINAL_DIRECTIONS, step


def reachable_tiles(
    start: WorldTilePos, walkable: Set[WorldTilePos]
) -> set[WorldTilePos]:
    """Breadth-first flood fill over 4-neighbour adjacency."""
    seen = {start}
    queue = deque([start])
    while queue:
        pos = queue.popleft()
        for direction in CARDINAL_DIRECTIONS:
            neighbor = step(pos, direction)
            if neighbor in walkable and neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)
    return seen
