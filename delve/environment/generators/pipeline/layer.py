"""Abstract base class for generation layers.

Each layer in the pipeline implements the GenerationLayer interface and
transforms the GenerationContext in some way - partitioning rooms, carving
floor, routing corridors, placing doors or deriving walls.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from .context import GenerationContext


class GenerationState(Enum):
    """Stages a generation run moves through.

    PARTITIONING -> CARVING -> ROUTING -> DOOR_PLACING -> WALL_DERIVING ->
    COMPLETE. A failed attempt passes through FAILED back to PARTITIONING;
    ABORTED is terminal once the attempt budget is spent.
    """

    IDLE = auto()
    PARTITIONING = auto()
    CARVING = auto()
    ROUTING = auto()
    DOOR_PLACING = auto()
    WALL_DERIVING = auto()
    COMPLETE = auto()
    FAILED = auto()
    ABORTED = auto()


class GenerationLayer(ABC):
    """Abstract base class for dungeon generation layers.

    Layers are applied sequentially by the PipelineGenerator. Each layer
    receives a GenerationContext and modifies it in place.

    Subclasses must implement the apply() method and declare the generation
    state they run under.
    """

    state: ClassVar[GenerationState]

    @abstractmethod
    def apply(self, ctx: GenerationContext) -> None:
        """Apply this layer's generation logic to the context.

        This method should modify the context in place. It may raise a
        GenerationAttemptError to discard the whole attempt.

        Args:
            ctx: The generation context to modify.
        """
        raise NotImplementedError
