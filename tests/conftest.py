from __future__ import annotations

import pytest

from delve.environment.generators import DungeonConfig, DungeonGenerator
from delve.environment.map import DungeonMap

# Attempt budget for tests that need a finished dungeon. Door placement
# rejects a share of layouts, so these runs get far more headroom than the
# default.
TEST_MAX_ATTEMPTS = 100


@pytest.fixture
def example_config() -> DungeonConfig:
    """The reference 80x80 layout with eight target rooms."""
    return DungeonConfig(
        width=80,
        height=80,
        min_room_size=20,
        target_rooms=8,
        offset=2,
        fill_ratio=0.9,
        center_bias=0.1,
        seed=12345,
        max_attempts=TEST_MAX_ATTEMPTS,
    )


@pytest.fixture
def small_config() -> DungeonConfig:
    return DungeonConfig(
        width=40,
        height=40,
        min_room_size=10,
        target_rooms=4,
        offset=2,
        fill_ratio=0.6,
        center_bias=0.3,
        seed="small",
        max_attempts=TEST_MAX_ATTEMPTS,
    )


@pytest.fixture(scope="session")
def example_dungeon() -> DungeonMap:
    """One finished reference dungeon, shared by the read-only property tests."""
    config = DungeonConfig(seed=12345, max_attempts=TEST_MAX_ATTEMPTS)
    return DungeonGenerator(config).generate()
