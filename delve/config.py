"""
Configuration constants.

Centralizes the default values used by dungeon generation. `DungeonConfig`
reads its defaults from here; callers override them per generator.
"""

from delve.types import RandomSeed

# =============================================================================
# GENERAL
# =============================================================================

# RANDOM_SEED = "burrito1"
RANDOM_SEED: RandomSeed = None

# =============================================================================
# MAP
# =============================================================================

DUNGEON_MAP_WIDTH = 80
DUNGEON_MAP_HEIGHT = 80

# Tiles trimmed from every side of a partition before carving, so that rooms
# in neighbouring partitions never touch.
DUNGEON_ROOM_OFFSET = 2

# =============================================================================
# PARTITIONING
# =============================================================================

DUNGEON_MIN_ROOM_SIZE = 20
DUNGEON_TARGET_ROOMS = 8

# =============================================================================
# CARVING
# =============================================================================

# Target share of a padded room that the random walks should cover.
DUNGEON_FILL_RATIO = 0.9
DUNGEON_FILL_RATIO_RANGE = (0.3, 1.0)

# Probability that a walk step heads back toward the room centre.
DUNGEON_CENTER_BIAS = 0.1
DUNGEON_CENTER_BIAS_RANGE = (0.1, 0.7)

# Chance that a centre-biased step randomizes one of its axes.
CARVE_CENTER_JITTER_CHANCE = 0.3

# One walk per this many tiles of room area, capped at CARVE_MAX_WALKS.
CARVE_TILES_PER_WALK = 200
CARVE_MAX_WALKS = 6

# Tries to find an in-bounds step before a walk gives up.
CARVE_STEP_ATTEMPTS = 5

# Accepted deviation of achieved coverage from the fill ratio.
CARVE_COVERAGE_TOLERANCE = 0.15

# =============================================================================
# DOORS
# =============================================================================

# Positions probed along a corridor before door placement gives up.
DOOR_PROBE_LIMIT = 5

# =============================================================================
# GENERATION
# =============================================================================

# Whole-layout attempts before generation is reported as failed.
MAX_GENERATION_ATTEMPTS = 10

# =============================================================================
# ROOM ROLES
# =============================================================================

# A shop room is only assigned when at least this many rooms exist.
SHOP_MIN_ROOMS = 4

# Chance for each remaining normal room to become a treasure room.
TREASURE_ROOM_CHANCE = 0.15
