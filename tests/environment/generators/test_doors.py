"""Tests for door validation and the probing door placer."""

from __future__ import annotations

import pytest

from delve.environment.generators.errors import DoorPlacementError
from delve.environment.generators.pipeline import GenerationContext
from delve.environment.generators.pipeline.layers import (
    CorridorRoutingLayer,
    DoorPlacementLayer,
)
from delve.environment.generators.pipeline.layers.doors import (
    direction_after_turn,
    endpoint_directions,
    find_door_position,
    is_suitable_for_door,
    is_suitable_for_door_with_next_check,
)
from delve.environment.map import Corridor, DoorOrientation, Room
from delve.util.coordinates import DOWN, LEFT, RIGHT, UP, Rect


def _block(x1: int, y1: int, x2: int, y2: int) -> set[tuple[int, int]]:
    return {(x, y) for x in range(x1, x2 + 1) for y in range(y1, y2 + 1)}


def _context(width: int = 30, height: int = 20) -> GenerationContext:
    return GenerationContext.create_empty(width=width, height=height)


# =============================================================================
# Validation rules
# =============================================================================


class TestIsSuitableForDoor:
    """Tests for the flanking-tile rule."""

    def test_clear_flanks_are_suitable(self) -> None:
        ctx = _context()
        ctx.corridor_tiles = {(x, 5) for x in range(10)}
        assert is_suitable_for_door(ctx, (3, 5), RIGHT)

    def test_walkable_flank_rejects_horizontal(self) -> None:
        ctx = _context()
        ctx.corridor_tiles = {(x, 5) for x in range(10)}
        ctx.floor_tiles = {(3, 6)}
        assert not is_suitable_for_door(ctx, (3, 5), RIGHT)
        assert is_suitable_for_door(ctx, (4, 5), RIGHT)

    def test_vertical_corridor_checks_left_and_right(self) -> None:
        ctx = _context()
        ctx.corridor_tiles = {(5, y) for y in range(10)}
        ctx.corridor_tiles.add((6, 4))
        assert not is_suitable_for_door(ctx, (5, 4), UP)
        assert is_suitable_for_door(ctx, (5, 7), DOWN)
        # Neighbours along the direction of travel are not flanks.
        assert is_suitable_for_door(ctx, (5, 5), UP)

    def test_out_of_bounds_flanks_count_as_solid(self) -> None:
        ctx = _context()
        ctx.corridor_tiles = {(x, 0) for x in range(10)}
        assert is_suitable_for_door(ctx, (3, 0), RIGHT)


class TestIsSuitableForDoorWithNextCheck:
    """Tests for the stricter rule that also inspects the next tile."""

    def test_next_corridor_tile_must_be_flanked_too(self) -> None:
        ctx = _context()
        ctx.corridor_tiles = {(x, 5) for x in range(10)}
        ctx.corridor_tiles.add((4, 6))

        assert is_suitable_for_door(ctx, (3, 5), RIGHT)
        assert not is_suitable_for_door_with_next_check(ctx, (3, 5), RIGHT)
        assert is_suitable_for_door_with_next_check(ctx, (3, 5), LEFT)

    def test_next_floor_tile_is_accepted(self) -> None:
        ctx = _context()
        ctx.corridor_tiles = {(x, 5) for x in range(4)}
        ctx.floor_tiles = _block(4, 3, 8, 7)
        assert is_suitable_for_door_with_next_check(ctx, (3, 5), RIGHT)

    def test_next_tile_off_map_is_rejected(self) -> None:
        ctx = _context(width=10)
        ctx.corridor_tiles = {(x, 5) for x in range(10)}
        assert not is_suitable_for_door_with_next_check(ctx, (9, 5), RIGHT)


# =============================================================================
# Probing
# =============================================================================


class TestDirectionAfterTurn:
    @pytest.mark.parametrize(
        ("origin", "turn", "destination", "expected"),
        [
            # Leaving along the origin's row: continue vertically.
            ((0, 0), (5, 0), (5, 8), UP),
            ((0, 9), (5, 9), (5, 2), DOWN),
            # Leaving along the origin's column: continue horizontally.
            ((5, 8), (5, 0), (0, 0), LEFT),
            ((5, 2), (5, 9), (12, 9), RIGHT),
        ],
    )
    def test_turns_toward_destination(self, origin, turn, destination, expected):
        assert direction_after_turn(origin, turn, destination) == expected


class TestEndpointDirections:
    def test_straight_corridor_ends_face_each_other(self) -> None:
        corridor = Corridor((0, 1), (2, 5), (9, 5), None, ())
        assert endpoint_directions(corridor) == (RIGHT, LEFT)

        corridor = Corridor((0, 1), (4, 9), (4, 1), None, ())
        assert endpoint_directions(corridor) == (DOWN, UP)

    def test_l_shaped_corridor_ends_face_the_turn(self) -> None:
        corridor = Corridor((0, 1), (4, 3), (15, 10), (15, 3), ())
        assert endpoint_directions(corridor) == (RIGHT, DOWN)


class TestFindDoorPosition:
    """Tests for the outward probe from a corridor endpoint."""

    def test_skips_floor_and_takes_first_corridor_tile(self) -> None:
        ctx = _context()
        ctx.floor_tiles = _block(2, 4, 4, 6) | _block(20, 4, 22, 6)
        ctx.corridor_tiles = {(x, 5) for x in range(5, 20)}

        assert find_door_position(ctx, (4, 5), RIGHT, None, (20, 5)) == (
            (5, 5),
            RIGHT,
        )
        assert find_door_position(ctx, (20, 5), LEFT, None, (4, 5)) == (
            (19, 5),
            LEFT,
        )

    def test_follows_turn_point(self) -> None:
        ctx = _context()
        # Vertical leg hugs floor on its left until the turn at (5, 8).
        ctx.floor_tiles = {(5, 5), (4, 6), (4, 7), (9, 8)}
        ctx.corridor_tiles = {(5, 6), (5, 7), (5, 8), (6, 8), (7, 8), (8, 8)}

        assert find_door_position(ctx, (5, 5), UP, (5, 8), (9, 8)) == ((6, 8), RIGHT)

    def test_gives_up_after_probe_limit(self) -> None:
        ctx = _context()
        ctx.floor_tiles = {(5, 5), (4, 6), (4, 7), (9, 8)}
        ctx.corridor_tiles = {(5, 6), (5, 7), (5, 8), (6, 8), (7, 8), (8, 8)}

        found = find_door_position(ctx, (5, 5), UP, (5, 8), (9, 8), probe_limit=4)
        assert found is None


# =============================================================================
# DoorPlacementLayer
# =============================================================================


class TestDoorPlacementLayer:
    """Tests for DoorPlacementLayer."""

    def _routed_context(self) -> GenerationContext:
        ctx = _context(width=20, height=20)
        ctx.rooms = [Room(Rect(0, 0, 8, 8), 0), Room(Rect(10, 8, 10, 12), 1)]
        ctx.room_floor_tiles = {0: _block(2, 2, 4, 4), 1: _block(14, 10, 16, 12)}
        ctx.floor_tiles = ctx.room_floor_tiles[0] | ctx.room_floor_tiles[1]
        CorridorRoutingLayer().apply(ctx)
        return ctx

    def test_places_two_doors_per_corridor(self) -> None:
        ctx = self._routed_context()
        DoorPlacementLayer().apply(ctx)

        assert len(ctx.corridors) == 1
        assert len(ctx.doors) == 2
        assert all(door.rooms == (0, 1) for door in ctx.doors)
        assert all(door.position in ctx.corridor_tiles for door in ctx.doors)

    def test_doors_are_flanked_by_solid_tiles(self) -> None:
        ctx = self._routed_context()
        DoorPlacementLayer().apply(ctx)

        for door in ctx.doors:
            assert is_suitable_for_door(ctx, door.position, door.direction)
            assert door.orientation is DoorOrientation.from_direction(door.direction)

    def test_l_shaped_corridor_door_orientations(self) -> None:
        ctx = self._routed_context()
        DoorPlacementLayer().apply(ctx)

        corridor = ctx.corridors[0]
        assert corridor.is_l_shaped
        orientations = {door.orientation for door in ctx.doors}
        assert orientations == {DoorOrientation.RIGHT, DoorOrientation.VERTICAL}

    def test_corridor_without_exposed_tiles_fails_both_sides(self) -> None:
        ctx = _context()
        ctx.floor_tiles = _block(0, 0, 29, 19)
        ctx.corridors = [
            Corridor((0, 1), (5, 5), (6, 5), None, ((5, 5), (6, 5))),
        ]

        with pytest.raises(DoorPlacementError) as exc_info:
            DoorPlacementLayer().apply(ctx)

        failures = exc_info.value.failures
        assert [(origin, direction) for origin, direction, _ in failures] == [
            ((5, 5), RIGHT),
            ((6, 5), LEFT),
        ]
        assert ctx.doors == []
