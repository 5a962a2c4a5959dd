"""Dungeon generation with whole-layout retries.

DungeonGenerator runs the dungeon pipeline once per attempt on a fresh
GenerationContext. When an attempt is rejected (a corridor end with no valid
door position, or a room with no floor to route to) the context is thrown
away and generation starts again from partitioning. After `max_attempts`
rejected attempts the run fails with GenerationFailedError.

Only a finished attempt is published: `DungeonGenerator.dungeon` is either
the previous complete map, a new complete map, or None.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from delve import config
from delve.environment.generators.base import BaseMapGenerator
from delve.environment.generators.errors import (
    GenerationAttemptError,
    GenerationFailedError,
    InvalidDungeonConfigError,
)
from delve.environment.generators.metrics import (
    compute_layout_metrics,
    log_layout_metrics,
)
from delve.environment.generators.pipeline.context import GenerationContext
from delve.environment.generators.pipeline.factory import create_dungeon_layers
from delve.environment.generators.pipeline.layer import (
    GenerationLayer,
    GenerationState,
)
from delve.environment.generators.pipeline.pipeline import PipelineGenerator
from delve.environment.map import DungeonMap
from delve.types import RandomSeed
from delve.util.rng import RNGProvider

logger = logging.getLogger(__name__)

type StateCallback = Callable[[GenerationState, int], None]


@dataclass(frozen=True)
class DungeonConfig:
    """Settings for one dungeon generator.

    Attributes:
        width: Map width in tiles.
        height: Map height in tiles.
        min_room_size: Smallest partition depth along a split axis.
        target_rooms: Desired number of rooms.
        offset: Tiles trimmed from every side of a partition before carving.
        fill_ratio: Target floor coverage of each padded room (0.3-1.0).
        center_bias: Probability of a centre-biased walk step (0.1-0.7).
        seed: Master seed; None draws from system entropy.
        max_attempts: Whole-layout attempts before giving up.
        door_probe_limit: Positions probed per corridor end for a door.
        shop_min_rooms: Minimum room count before a shop room is assigned.
        treasure_room_chance: Chance for a normal room to hold treasure.
    """

    width: int = config.DUNGEON_MAP_WIDTH
    height: int = config.DUNGEON_MAP_HEIGHT
    min_room_size: int = config.DUNGEON_MIN_ROOM_SIZE
    target_rooms: int = config.DUNGEON_TARGET_ROOMS
    offset: int = config.DUNGEON_ROOM_OFFSET
    fill_ratio: float = config.DUNGEON_FILL_RATIO
    center_bias: float = config.DUNGEON_CENTER_BIAS
    seed: RandomSeed = config.RANDOM_SEED
    max_attempts: int = config.MAX_GENERATION_ATTEMPTS
    door_probe_limit: int = config.DOOR_PROBE_LIMIT
    shop_min_rooms: int = config.SHOP_MIN_ROOMS
    treasure_room_chance: float = config.TREASURE_ROOM_CHANCE

    def validate(self) -> None:
        """Reject settings that cannot produce a valid layout.

        Raises:
            InvalidDungeonConfigError: Describing the first problem found.
        """
        if self.width <= 0 or self.height <= 0:
            raise InvalidDungeonConfigError(
                f"Map size must be positive, got {self.width}x{self.height}"
            )
        if self.min_room_size <= 0:
            raise InvalidDungeonConfigError(
                f"min_room_size must be positive, got {self.min_room_size}"
            )
        if self.min_room_size * 2 >= min(self.width, self.height):
            raise InvalidDungeonConfigError(
                f"min_room_size {self.min_room_size} must be less than half of "
                f"the map size {self.width}x{self.height}"
            )
        if self.offset < 0:
            raise InvalidDungeonConfigError(
                f"offset must not be negative, got {self.offset}"
            )
        if self.min_room_size <= self.offset * 2:
            raise InvalidDungeonConfigError(
                f"min_room_size {self.min_room_size} leaves no room to carve "
                f"inside an offset of {self.offset} on each side"
            )
        if self.target_rooms < 1:
            raise InvalidDungeonConfigError(
                f"target_rooms must be at least 1, got {self.target_rooms}"
            )
        low, high = config.DUNGEON_FILL_RATIO_RANGE
        if not low <= self.fill_ratio <= high:
            raise InvalidDungeonConfigError(
                f"fill_ratio must be within {low}-{high}, got {self.fill_ratio}"
            )
        low, high = config.DUNGEON_CENTER_BIAS_RANGE
        if not low <= self.center_bias <= high:
            raise InvalidDungeonConfigError(
                f"center_bias must be within {low}-{high}, got {self.center_bias}"
            )
        if self.max_attempts < 1:
            raise InvalidDungeonConfigError(
                f"max_attempts must be at least 1, got {self.max_attempts}"
            )
        if self.door_probe_limit < 1:
            raise InvalidDungeonConfigError(
                f"door_probe_limit must be at least 1, got {self.door_probe_limit}"
            )
        if not 0.0 <= self.treasure_room_chance <= 1.0:
            raise InvalidDungeonConfigError(
                "treasure_room_chance must be within 0-1, "
                f"got {self.treasure_room_chance}"
            )


class DungeonGenerator(BaseMapGenerator):
    """Generates dungeons, retrying whole layouts until one is valid.

    Example:
        generator = DungeonGenerator(DungeonConfig(seed=12345))
        dungeon = generator.generate()
        spawn = dungeon.start_position

    Attributes:
        config: The validated settings.
        pipeline: Layers run on every attempt.
        on_state_change: Callbacks invoked with (state, attempt) whenever the
            generator moves to a new state. Owned by this generator.
        state: The current GenerationState.
        dungeon: The last successfully generated map, if any.
        generation: How many times regenerate() has been called.
    """

    def __init__(
        self,
        dungeon_config: DungeonConfig | None = None,
        *,
        layers: list[GenerationLayer] | None = None,
        on_state_change: Iterable[StateCallback] = (),
    ) -> None:
        """Initialize the generator.

        Args:
            dungeon_config: Settings; defaults to DungeonConfig().
            layers: Replacement layer sequence. Defaults to the standard
                dungeon layers built from the config.
            on_state_change: Initial state-change callbacks.

        Raises:
            InvalidDungeonConfigError: If the config is invalid.
        """
        if dungeon_config is None:
            dungeon_config = DungeonConfig()
        dungeon_config.validate()

        super().__init__(dungeon_config.width, dungeon_config.height)
        self.config = dungeon_config
        if layers is None:
            layers = create_dungeon_layers(dungeon_config)
        self.pipeline = PipelineGenerator(layers=layers)
        self.on_state_change: list[StateCallback] = list(on_state_change)
        self.state = GenerationState.IDLE
        self.dungeon: DungeonMap | None = None
        self.generation = 0
        self._rng = RNGProvider(dungeon_config.seed)

    @property
    def seed(self) -> RandomSeed:
        """Master seed of the current generation.

        The configured seed for the first generation; each regenerate()
        derives a new one from it. None when unseeded.
        """
        if self.config.seed is None or self.generation == 0:
            return self.config.seed
        return f"{self.config.seed}:regen{self.generation}"

    def generate(self) -> DungeonMap:
        """Generate a complete dungeon.

        Repeated calls with a seeded config produce the same layout; use
        regenerate() for a new one.

        Returns:
            The published DungeonMap.

        Raises:
            GenerationFailedError: If every attempt was rejected. The
                previously published map, if any, is left in place.
        """
        seed = self.seed
        max_attempts = self.config.max_attempts
        self._rng.reset(seed)

        logger.info(
            f"Generating dungeon: {self.map_width}x{self.map_height}, "
            f"{self.config.target_rooms} target rooms, seed {seed!r}"
        )

        last_error: GenerationAttemptError | None = None
        for attempt in range(1, max_attempts + 1):
            ctx = GenerationContext.create_empty(
                self.map_width, self.map_height, rng=self._rng
            )

            def enter_layer(layer: GenerationLayer, attempt: int = attempt) -> None:
                self._set_state(layer.state, attempt)

            try:
                self.pipeline.run(ctx, before_layer=enter_layer)
            except GenerationAttemptError as e:
                last_error = e
                logger.warning(
                    f"Attempt {attempt}/{max_attempts} rejected, regenerating: {e}"
                )
                self._set_state(GenerationState.FAILED, attempt)
                continue

            metrics = compute_layout_metrics(
                ctx, self.config.offset, self.config.fill_ratio
            )
            self.dungeon = ctx.to_dungeon_map(
                room_offset=self.config.offset,
                seed=seed,
                attempts=attempt,
                metrics=metrics,
            )
            self._set_state(GenerationState.COMPLETE, attempt)
            log_layout_metrics(metrics)
            logger.info(f"Dungeon generation complete after {attempt} attempt(s)")
            return self.dungeon

        self._set_state(GenerationState.ABORTED, max_attempts)
        logger.error(f"Dungeon generation failed after {max_attempts} attempt(s)")
        raise GenerationFailedError(max_attempts) from last_error

    def regenerate(self) -> DungeonMap:
        """Discard the current dungeon and generate an independent new one."""
        logger.info("Regenerating dungeon")
        self.dungeon = None
        self.generation += 1
        return self.generate()

    def _set_state(self, state: GenerationState, attempt: int) -> None:
        if state is self.state:
            return
        self.state = state
        for callback in self.on_state_change:
            callback(state, attempt)
