"""Pipeline that runs the generation layers of a single attempt.

The PipelineGenerator applies a sequence of GenerationLayers to one shared
GenerationContext. It knows nothing about retries: a layer that raises
aborts the run, and the caller decides what happens next.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import GenerationContext
    from .layer import GenerationLayer


class PipelineGenerator:
    """Runs layers sequentially on a shared context.

    Example:
        pipeline = PipelineGenerator(
            layers=[
                SpacePartitionLayer(min_room_size=20, target_rooms=8),
                RoomCarvingLayer(offset=2),
                CorridorRoutingLayer(),
                DoorPlacementLayer(),
                WallDerivationLayer(),
            ]
        )
        ctx = GenerationContext.create_empty(width=80, height=80, seed=12345)
        pipeline.run(ctx)

    Attributes:
        layers: List of GenerationLayer instances to apply.
    """

    def __init__(self, layers: list[GenerationLayer]) -> None:
        self.layers = layers

    def run(
        self,
        ctx: GenerationContext,
        before_layer: Callable[[GenerationLayer], None] | None = None,
    ) -> GenerationContext:
        """Apply every layer to ctx in order.

        Args:
            ctx: The context to fill.
            before_layer: Called with each layer just before it is applied.

        Returns:
            The same context, for chaining.

        Raises:
            GenerationAttemptError: Propagated from any layer that rejects
                the attempt.
        """
        for layer in self.layers:
            if before_layer is not None:
                before_layer(layer)
            layer.apply(ctx)
        return ctx
