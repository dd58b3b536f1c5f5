"""Tests for item placement and redistribution."""

import pytest

from gallery_layout.generators.gallery import assign_items, room_capacity
from gallery_layout.generators.layout import CellCoord, PlacementTier, Room, Wall


SIZE = 20.0
SPACING = 40.0
ALL_WALLS = [Wall.NORTH, Wall.EAST, Wall.SOUTH, Wall.WEST]


def make_room(room_id, cx, cy, size=SIZE):
    return Room(
        id=room_id,
        position=(cx * SPACING, cy * SPACING),
        size=size,
        cell=CellCoord(cx, cy),
        is_entry=room_id == 0,
    )


@pytest.fixture
def plus_layout():
    """Entry room with a neighbour on every side: room 0 is a crossroads."""
    rooms = [
        make_room(0, 0, 0),
        make_room(1, 0, 1),
        make_room(2, 0, -1),
        make_room(3, 1, 0),
        make_room(4, -1, 0),
    ]
    doorways = {
        0: list(ALL_WALLS),
        1: [Wall.SOUTH],
        2: [Wall.NORTH],
        3: [Wall.WEST],
        4: [Wall.EAST],
    }
    return rooms, doorways


def assert_each_item_once(result, item_count):
    placed = [p.item_id for p in result.placements]
    assert len(placed) == len(set(placed))
    assert sorted(placed + result.unplaced_item_ids) == list(range(item_count))


class TestDirectPass:

    def test_single_room_one_item_per_wall(self):
        result = assign_items([make_room(0, 0, 0)], {0: []}, 4, 4)
        assert [p.item_id for p in result.placements] == [0, 1, 2, 3]
        assert [p.wall for p in result.placements] == ALL_WALLS
        assert all(p.tier == PlacementTier.DIRECT for p in result.placements)
        assert result.unplaced_item_ids == []

    def test_zero_items(self):
        result = assign_items([make_room(0, 0, 0)], {0: []}, 0, 4)
        assert result.placements == []
        assert result.unplaced_item_ids == []
        assert result.room_counts == {0: 0}

    def test_rooms_filled_in_id_order(self):
        rooms = [make_room(0, 0, 0), make_room(1, 0, 1)]
        doorways = {0: [Wall.NORTH], 1: [Wall.SOUTH]}
        result = assign_items(rooms, doorways, 6, 4)
        assert [p.room_id for p in result.placements] == [0, 0, 0, 0, 1, 1]
        assert result.room_counts == {0: 4, 1: 2}

    def test_crossroads_gets_no_direct_placements(self, plus_layout):
        rooms, doorways = plus_layout
        result = assign_items(rooms, doorways, 20, 4)
        assert result.crossroads_room_ids == [0]
        assert not [p for p in result.placements if p.room_id == 0]
        assert_each_item_once(result, 20)


class TestRedistribution:

    def test_crossroads_items_move_to_next_room(self, plus_layout):
        rooms, doorways = plus_layout
        result = assign_items(rooms, doorways, 8, 4)

        assert result.redistributed_item_ids == [0, 1, 2, 3]
        assert result.forced_item_ids == []
        assert result.unplaced_item_ids == []
        moved = [p for p in result.placements if p.item_id in (0, 1, 2, 3)]
        assert all(p.room_id == 1 for p in moved)
        assert all(p.tier == PlacementTier.REDISTRIBUTED for p in moved)
        assert result.room_counts[1] == 8
        assert_each_item_once(result, 8)

    def test_redistributed_slots_do_not_collide(self, plus_layout):
        rooms, doorways = plus_layout
        result = assign_items(rooms, doorways, 8, 4)
        in_room_1 = [p.position for p in result.placements if p.room_id == 1]
        assert len(in_room_1) == len(set(in_room_1))

    def test_capacity_heuristic(self):
        assert room_capacity(make_room(0, 0, 0, size=20.0)) == 8
        assert room_capacity(make_room(0, 0, 0, size=15.0)) == 6

    def test_forced_when_every_room_is_over_capacity(self, plus_layout):
        rooms, doorways = plus_layout
        result = assign_items(rooms, doorways, 8, 4, capacity_divisor=1000.0)

        assert result.redistributed_item_ids == []
        assert result.forced_item_ids == [0, 1, 2, 3]
        forced = [p for p in result.placements if p.tier == PlacementTier.FORCED]
        assert [p.room_id for p in forced] == [1, 1, 1, 1]
        assert_each_item_once(result, 8)

    def test_extra_items_beyond_room_count_are_redistributed(self):
        result = assign_items([make_room(0, 0, 0)], {0: []}, 12, 4)
        assert result.redistributed_item_ids == [4, 5, 6, 7]
        assert result.forced_item_ids == [8, 9, 10, 11]
        assert result.unplaced_item_ids == []
        assert_each_item_once(result, 12)


class TestUnplaced:

    def test_all_crossroads_leaves_everything_unplaced(self):
        result = assign_items([make_room(0, 0, 0)], {0: list(ALL_WALLS)}, 3, 4)
        assert result.placements == []
        assert result.unplaced_item_ids == [0, 1, 2]

    def test_full_walls_leave_items_unplaced(self):
        # Size 10 rooms hold 3 items per wall
        rooms = [make_room(0, 0, 0, size=10.0)]
        result = assign_items(rooms, {0: [Wall.NORTH]}, 20, 20)
        assert len(result.placements) == 9
        assert result.unplaced_item_ids == list(range(9, 20))
        assert_each_item_once(result, 20)

    def test_small_rooms_with_free_walls_place_everything(self):
        rooms = [make_room(0, 0, 0, size=4.0), make_room(1, 0, 1, size=4.0)]
        result = assign_items(rooms, {0: [Wall.NORTH], 1: [Wall.SOUTH]}, 6, 3)
        assert result.unplaced_item_ids == []
        assert result.crossroads_room_ids == []
        assert_each_item_once(result, 6)

    def test_never_on_doorway_wall(self, plus_layout):
        rooms, doorways = plus_layout
        result = assign_items(rooms, doorways, 60, 6)
        for p in result.placements:
            assert p.wall not in doorways[p.room_id]
