from delve.util.coordinates import (
    CARDINAL_DIRECTIONS,
    DOWN,
    LEFT,
    NEIGHBOR_DIRECTIONS,
    RIGHT,
    UP,
    Rect,
    is_valid_world_tile_pos,
    is_vertical,
    sign,
    step,
)


def test_rect_bounds_are_half_open():
    rect = Rect(2, 3, 4, 5)
    assert (rect.x1, rect.y1, rect.x2, rect.y2) == (2, 3, 6, 8)
    assert rect.width == 4
    assert rect.height == 5
    assert rect.area == 20
    assert rect.contains((2, 3))
    assert rect.contains((5, 7))
    assert not rect.contains((6, 7))
    assert not rect.contains((5, 8))


def test_rect_from_bounds_round_trips():
    assert Rect.from_bounds(1, 2, 11, 7) == Rect(1, 2, 10, 5)


def test_rect_center_uses_floor_division():
    assert Rect(0, 0, 5, 4).center() == (2, 2)
    assert Rect(10, 20, 20, 21).center() == (20, 30)


def test_rect_intersects_only_when_sharing_a_tile():
    a = Rect(0, 0, 10, 10)
    assert a.intersects(Rect(9, 9, 5, 5))
    # Touching edges share no tile.
    assert not a.intersects(Rect(10, 0, 5, 10))
    assert not a.intersects(Rect(0, 10, 10, 5))


def test_rect_shrink_pads_every_side():
    padded = Rect(0, 0, 20, 10).shrink(2)
    assert padded == Rect(2, 2, 16, 6)


def test_rect_shrink_never_goes_negative():
    padded = Rect(0, 0, 3, 8).shrink(2)
    assert padded.width == 0
    assert padded.height == 4
    assert padded.area == 0
    assert padded.tiles() == []


def test_rect_tiles_covers_area():
    rect = Rect(1, 1, 3, 2)
    tiles = rect.tiles()
    assert len(tiles) == rect.area
    assert all(rect.contains(pos) for pos in tiles)


def test_rect_is_hashable():
    assert len({Rect(0, 0, 4, 4), Rect(0, 0, 4, 4), Rect(1, 0, 4, 4)}) == 2


def test_direction_helpers():
    assert step((3, 3), UP) == (3, 4)
    assert step((3, 3), DOWN) == (3, 2)
    assert step((3, 3), LEFT) == (2, 3)
    assert is_vertical(UP) and is_vertical(DOWN)
    assert not is_vertical(RIGHT)
    assert [sign(v) for v in (-7, 0, 3)] == [-1, 0, 1]
    assert len(set(NEIGHBOR_DIRECTIONS)) == 8
    assert set(CARDINAL_DIRECTIONS) <= set(NEIGHBOR_DIRECTIONS)


def test_is_valid_world_tile_pos():
    assert is_valid_world_tile_pos((0, 0), 10, 5)
    assert is_valid_world_tile_pos((9, 4), 10, 5)
    assert not is_valid_world_tile_pos((10, 4), 10, 5)
    assert not is_valid_world_tile_pos((-1, 0), 10, 5)
