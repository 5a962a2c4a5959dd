"""Rectangles, bounds checks and grid direction helpers in tile coordinates."""

from __future__ import annotations

from delve.types import Direction, TileCoord, WorldTilePos

# =============================================================================
# DIRECTIONS
# =============================================================================

UP: Direction = (0, 1)
DOWN: Direction = (0, -1)
LEFT: Direction = (-1, 0)
RIGHT: Direction = (1, 0)
ZERO: Direction = (0, 0)

CARDINAL_DIRECTIONS: tuple[Direction, ...] = (UP, DOWN, LEFT, RIGHT)
DIAGONAL_DIRECTIONS: tuple[Direction, ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
NEIGHBOR_DIRECTIONS: tuple[Direction, ...] = CARDINAL_DIRECTIONS + DIAGONAL_DIRECTIONS


def step(pos: WorldTilePos, direction: Direction) -> WorldTilePos:
    """Return the tile one step from pos along direction."""
    return (pos[0] + direction[0], pos[1] + direction[1])


def is_vertical(direction: Direction) -> bool:
    return direction in (UP, DOWN)


def sign(value: int) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


# =============================================================================
# RECT
# =============================================================================


class Rect:
    """Rectangle/bounding box in tile coordinates.

    Bounds are half-open: a tile (x, y) is inside when x1 <= x < x2 and
    y1 <= y < y2.
    """

    __slots__ = ("x1", "x2", "y1", "y2")

    def __init__(self, x: TileCoord, y: TileCoord, w: TileCoord, h: TileCoord) -> None:
        self.x1: TileCoord = x
        self.y1: TileCoord = y
        self.x2: TileCoord = x + w
        self.y2: TileCoord = y + h

    @classmethod
    def from_bounds(
        cls, x1: TileCoord, y1: TileCoord, x2: TileCoord, y2: TileCoord
    ) -> Rect:
        """Create a Rect from corner coordinates (x1, y1, x2, y2)."""
        width = x2 - x1
        height = y2 - y1
        return cls(x1, y1, width, height)

    @property
    def width(self) -> TileCoord:
        return self.x2 - self.x1

    @property
    def height(self) -> TileCoord:
        return self.y2 - self.y1

    @property
    def area(self) -> int:
        return max(0, self.width) * max(0, self.height)

    def center(self) -> WorldTilePos:
        return (self.x1 + self.width // 2, self.y1 + self.height // 2)

    def contains(self, pos: WorldTilePos) -> bool:
        x, y = pos
        return self.x1 <= x < self.x2 and self.y1 <= y < self.y2

    def intersects(self, other: Rect) -> bool:
        """True if the two rectangles share at least one tile."""
        return (
            self.x1 < other.x2
            and self.x2 > other.x1
            and self.y1 < other.y2
            and self.y2 > other.y1
        )

    def shrink(self, offset: int) -> Rect:
        """Return this rect padded inward by offset tiles on every side.

        The result never has a negative size; a rect too small for the
        padding collapses to zero width and/or height.
        """
        width = max(0, self.width - offset * 2)
        height = max(0, self.height - offset * 2)
        return Rect(self.x1 + offset, self.y1 + offset, width, height)

    def tiles(self) -> list[WorldTilePos]:
        return [
            (x, y) for x in range(self.x1, self.x2) for y in range(self.y1, self.y2)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.x1, self.y1, self.x2, self.y2) == (
            other.x1,
            other.y1,
            other.x2,
            other.y2,
        )

    def __hash__(self) -> int:
        return hash((self.x1, self.y1, self.x2, self.y2))

    def __repr__(self) -> str:
        return f"Rect(x1={self.x1}, y1={self.y1}, x2={self.x2}, y2={self.y2})"


# =============================================================================
# BOUNDS CHECKING HELPERS
# =============================================================================


def is_valid_world_tile_pos(
    pos: WorldTilePos, map_width: TileCoord, map_height: TileCoord
) -> bool:
    """Check if world tile position is within map bounds."""
    x, y = pos
    return 0 <= x < map_width and 0 <= y < map_height
