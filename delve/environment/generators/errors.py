"""Exceptions raised during dungeon generation.

Two tiers exist. `GenerationAttemptError` subclasses are raised inside layers
and only ever caught by the generator's retry loop: they discard the current
attempt. `GenerationFailedError` is what callers see once every attempt has
failed. Bad configuration is rejected up front with
`InvalidDungeonConfigError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from delve.types import Direction, RoomIndex, WorldTilePos


class InvalidDungeonConfigError(ValueError):
    """Raised when a DungeonConfig cannot produce a valid layout."""


class GenerationAttemptError(Exception):
    """Base class for failures that invalidate a single generation attempt."""


class DoorPlacementError(GenerationAttemptError):
    """Raised when no valid door position exists near a corridor endpoint.

    Attributes:
        failures: (endpoint, direction, rooms) for every side that failed.
    """

    def __init__(
        self,
        failures: list[tuple[WorldTilePos, Direction, tuple[RoomIndex, RoomIndex]]],
    ) -> None:
        self.failures = failures
        sides = ", ".join(
            f"{endpoint} facing {direction} (rooms {rooms[0]}-{rooms[1]})"
            for endpoint, direction, rooms in failures
        )
        super().__init__(f"Door placement failed for {len(failures)} side(s): {sides}")


class UnroutableRoomError(GenerationAttemptError):
    """Raised when a room that must be connected has no floor tiles."""

    def __init__(self, room_index: RoomIndex) -> None:
        self.room_index = room_index
        super().__init__(f"Room {room_index} has no floor tiles to route a corridor to")


class GenerationFailedError(RuntimeError):
    """Raised when every generation attempt failed.

    The last attempt's error is chained as ``__cause__``.
    """

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(f"Dungeon generation failed after {attempts} attempt(s)")
