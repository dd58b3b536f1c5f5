"""Tests for wall slot computation."""

import math
from collections import Counter

import pytest

from gallery_layout.generators.gallery import (
    available_walls, compute_wall_slots, is_crossroads, wall_capacity,
)
from gallery_layout.generators.gallery.wall_slots import van_der_corput, WALL_ROTATIONS
from gallery_layout.generators.layout import CellCoord, Room, Wall


def make_room(x=0.0, z=0.0, size=20.0):
    return Room(id=0, position=(x, z), size=size, cell=CellCoord(0, 0), is_entry=True)


ALL_WALLS = [Wall.NORTH, Wall.EAST, Wall.SOUTH, Wall.WEST]


class TestAvailableWalls:

    def test_canonical_order(self):
        assert available_walls([]) == ALL_WALLS

    def test_doorways_removed(self):
        assert available_walls([Wall.WEST, Wall.NORTH]) == [Wall.EAST, Wall.SOUTH]

    def test_crossroads(self):
        assert is_crossroads(ALL_WALLS)
        assert not is_crossroads([Wall.NORTH])


class TestVanDerCorput:

    def test_first_terms(self):
        assert [van_der_corput(n) for n in range(1, 8)] == [
            0.5, 0.25, 0.75, 0.125, 0.625, 0.375, 0.875,
        ]


class TestComputeWallSlots:

    def test_crossroads_has_no_slots(self):
        assert compute_wall_slots(make_room(), 4, ALL_WALLS) == []

    def test_zero_count(self):
        assert compute_wall_slots(make_room(), 0) == []

    def test_one_per_wall(self):
        slots = compute_wall_slots(make_room(), 4)
        assert [s.wall for s in slots] == ALL_WALLS
        positions = {s.wall: s.position for s in slots}
        assert positions[Wall.NORTH] == pytest.approx((0.0, 2.5, 9.7))
        assert positions[Wall.EAST] == pytest.approx((9.7, 2.5, 0.0))
        assert positions[Wall.SOUTH] == pytest.approx((0.0, 2.5, -9.7))
        assert positions[Wall.WEST] == pytest.approx((-9.7, 2.5, 0.0))

    def test_never_on_doorway_wall(self):
        doors = [Wall.NORTH, Wall.SOUTH]
        slots = compute_wall_slots(make_room(), 10, doors)
        assert slots
        assert all(s.wall not in doors for s in slots)

    def test_even_distribution_with_remainder_on_first_walls(self):
        slots = compute_wall_slots(make_room(), 5, [Wall.NORTH])
        counts = Counter(s.wall for s in slots)
        assert counts == {Wall.EAST: 2, Wall.SOUTH: 2, Wall.WEST: 1}

    def test_three_on_a_wall_are_evenly_spaced(self):
        room = make_room()
        slots = compute_wall_slots(room, 3, [Wall.EAST, Wall.SOUTH, Wall.WEST])
        xs = sorted(s.position[0] for s in slots)
        spacing = room.size / 4
        assert xs == pytest.approx([-room.half_size + spacing * i for i in (1, 2, 3)])

    @pytest.mark.parametrize("doors", [[], [Wall.NORTH], [Wall.EAST, Wall.WEST],
                                       [Wall.NORTH, Wall.EAST, Wall.SOUTH]])
    def test_prefix_is_stable(self, doors):
        room = make_room(x=40.0, z=-80.0)
        full = compute_wall_slots(room, 40, doors)
        for n in range(len(full) + 1):
            assert compute_wall_slots(room, n, doors) == full[:n]

    def test_positions_are_distinct(self):
        slots = compute_wall_slots(make_room(), 28)
        assert len({s.position for s in slots}) == len(slots)

    def test_capacity_bounds_slot_count(self):
        room = make_room(size=20.0)
        assert wall_capacity(room.size) == 7
        assert len(compute_wall_slots(room, 100, [Wall.EAST, Wall.SOUTH, Wall.WEST])) == 7
        assert len(compute_wall_slots(room, 100)) == 28

    @pytest.mark.parametrize("size", [0.5, 2.0, 4.0, 4.99])
    def test_small_room_keeps_centre_slot_per_free_wall(self, size):
        assert wall_capacity(size) == 1
        slots = compute_wall_slots(make_room(size=size), 10, [Wall.NORTH])
        assert [s.wall for s in slots] == [Wall.EAST, Wall.SOUTH, Wall.WEST]
        assert slots[1].position == pytest.approx((0.0, 2.5, -size / 2 + 0.3))

    def test_rotation_faces_into_room(self):
        for slot in compute_wall_slots(make_room(), 4):
            assert slot.rotation == WALL_ROTATIONS[slot.wall]
        assert WALL_ROTATIONS[Wall.NORTH] == math.pi
        assert WALL_ROTATIONS[Wall.SOUTH] == 0.0

    def test_slots_stay_inside_room(self):
        room = make_room(x=40.0, z=40.0)
        min_x, min_z, max_x, max_z = room.bounds
        for slot in compute_wall_slots(room, 28):
            x, _, z = slot.position
            assert min_x < x < max_x
            assert min_z < z < max_z
