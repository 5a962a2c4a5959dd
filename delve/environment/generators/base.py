"""Base classes for map generation."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from delve.environment.map import DungeonMap
    from delve.types import TileCoord


class BaseMapGenerator(abc.ABC):
    """Abstract base class for map generation algorithms."""

    def __init__(self, map_width: TileCoord, map_height: TileCoord) -> None:
        self.map_width = map_width
        self.map_height = map_height

    @abc.abstractmethod
    def generate(self) -> DungeonMap:
        """Generate the map layout and its structural data."""
        raise NotImplementedError
