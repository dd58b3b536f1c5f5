"""Tests for spawn placement, hallway geometry and layout export."""

import json

import numpy as np
import pytest

from gallery_layout import generate
from gallery_layout.conversion import (
    build_tile_grid, corridor_for, corridors_for, export_layout_dot, export_layout_json,
    layout_to_dict, render_ascii, spawn_position_for, wall_segments_for,
)
from gallery_layout.conversion.layout_export import TileType
from gallery_layout.generators.layout import CellCoord, Hallway, HallwayDirection, Room, Wall


def make_room(room_id, x, z, size=20.0, is_entry=False):
    return Room(id=room_id, position=(x, z), size=size,
                cell=CellCoord(int(x // 40), int(z // 40)), is_entry=is_entry)


class TestSpawnPlacement:

    def test_entry_room_preferred(self):
        rooms = [make_room(0, 0.0, 0.0, is_entry=True), make_room(1, 40.0, 0.0, size=30.0)]
        assert spawn_position_for(rooms) == (0.0, 1.6, -5.0)

    def test_falls_back_to_largest_room(self):
        rooms = [make_room(0, 0.0, 0.0), make_room(1, 40.0, 0.0, size=30.0)]
        assert spawn_position_for(rooms, eye_height=2.0) == (40.0, 2.0, -7.5)

    def test_no_rooms(self):
        with pytest.raises(ValueError):
            spawn_position_for([])


class TestCorridors:

    def test_vertical_corridor_between_facing_walls(self):
        layout = generate(12, {'complexity': 'simple'})
        corridor = corridor_for(layout.hallways[0], layout.rooms, width=5.0)
        assert corridor.start == (0.0, 10.0)
        assert corridor.end == (0.0, 30.0)
        assert corridor.length == 20.0
        assert corridor.center == (0.0, 20.0)
        assert corridor.footprint == (5.0, 20.0)

    @pytest.mark.parametrize("other_x,start_x,end_x", [(40.0, 10.0, 30.0), (-40.0, -10.0, -30.0)])
    def test_horizontal_corridor(self, other_x, start_x, end_x):
        rooms = [make_room(0, 0.0, 0.0, is_entry=True), make_room(1, other_x, 0.0)]
        hallway = Hallway(0, 1, rooms[0].position, rooms[1].position, HallwayDirection.HORIZONTAL)
        corridor = corridor_for(hallway, rooms, width=4.0)
        assert corridor.start == (start_x, 0.0)
        assert corridor.end == (end_x, 0.0)
        assert corridor.footprint == (20.0, 4.0)

    def test_one_corridor_per_hallway(self):
        layout = generate(50, {'seed': 8})
        assert len(corridors_for(layout.hallways, layout.rooms)) == len(layout.hallways)


class TestWallSegments:

    def test_solid_room(self):
        segments = wall_segments_for(make_room(0, 0.0, 0.0), [])
        assert len(segments) == 4
        assert all(s.length == 20.0 for s in segments)

    def test_doorway_splits_wall(self):
        segments = wall_segments_for(make_room(0, 0.0, 0.0), [Wall.NORTH], doorway_width=5.0)
        north = [s for s in segments if s.wall == Wall.NORTH]
        assert len(segments) == 5
        assert sorted(s.center for s in north) == [(-6.25, 10.0), (6.25, 10.0)]
        assert all(s.length == 7.5 for s in north)

    def test_narrow_pieces_dropped(self):
        segments = wall_segments_for(make_room(0, 0.0, 0.0), [Wall.EAST], doorway_width=19.5)
        assert len(segments) == 3
        assert Wall.EAST not in {s.wall for s in segments}


class TestExport:

    def test_dict_round_trips_through_json(self):
        layout = generate(10, {'seed': 4})
        data = json.loads(json.dumps(layout_to_dict(layout)))
        assert len(data['rooms']) == len(layout.rooms)
        assert len(data['placements']) == 10
        assert data['report']['seed'] == 4

    def test_json_statistics(self):
        layout = generate(12, {'complexity': 'simple'})
        output = json.loads(export_layout_json(layout))
        assert output['statistics']['room_count'] == 3
        assert output['statistics']['hallway_count'] == 2
        assert output['statistics']['placement_count'] == 12
        assert output['statistics']['unplaced_count'] == 0

    def test_dot_has_nodes_and_edges(self):
        layout = generate(12, {'complexity': 'simple'})
        dot = export_layout_dot(layout)
        assert dot.startswith('graph GalleryLayout {')
        assert 'room_0 -- room_1' in dot
        assert 'room_1 -- room_2' in dot
        assert 'ENTRY' in dot

    def test_ascii_single_room(self):
        layout = generate(0, {'seed': 1})
        assert render_ascii(layout) == "\n".join([
            "#####",
            "#...#",
            "#.S.#",
            "#...#",
            "#####",
        ])

    def test_ascii_line(self):
        layout = generate(12, {'complexity': 'simple'})
        grid = build_tile_grid(layout)
        assert grid.shape == (21, 5)
        assert np.count_nonzero(grid == TileType.DOOR.value) == 4
        assert np.count_nonzero(grid == TileType.HALL_V.value) == 6
        assert np.count_nonzero(grid == TileType.SPAWN.value) == 1
        # Entry room is the southernmost, so it is drawn at the bottom
        assert grid[-3, 2] == TileType.SPAWN.value

        text = render_ascii(layout)
        assert text.count('S') == 1
        assert '*' in text
