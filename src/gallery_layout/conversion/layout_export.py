"""
Export utilities for generated gallery layouts.

Provides export functions to inspect a layout as:
- plain dict / JSON for programmatic analysis and reproducibility tracking
- DOT format (Graphviz) for visual graph inspection
- an ASCII floor plan for quick debugging in a terminal
"""

import json
from enum import Enum
from typing import Any, Dict

import numpy as np

from gallery_layout.generators.layout.layout_types import (
    GalleryLayout, HallwayDirection, Wall,
)


# Tiles per room edge and per hallway gap in the ASCII plan
ASCII_ROOM_TILES = 5
ASCII_GAP_TILES = 3


class TileType(Enum):
    """Types of tiles in the ASCII floor plan grid"""
    EMPTY = 0
    FLOOR = 1
    WALL = 2
    DOOR = 3
    HALL_H = 4
    HALL_V = 5
    SPAWN = 6
    ITEM = 7


CHAR_MAP = {
    TileType.EMPTY.value: ' ',
    TileType.FLOOR.value: '.',
    TileType.WALL.value: '#',
    TileType.DOOR.value: '+',
    TileType.HALL_H.value: '=',
    TileType.HALL_V.value: '|',
    TileType.SPAWN.value: 'S',
    TileType.ITEM.value: '*',
}


def layout_to_dict(layout: GalleryLayout) -> Dict[str, Any]:
    """Plain-data view of a layout, ready for JSON."""
    x, y, z = layout.spawn_position
    return {
        'rooms': [room.to_dict() for room in layout.rooms],
        'hallways': [hallway.to_dict() for hallway in layout.hallways],
        'placements': [placement.to_dict() for placement in layout.placements],
        'spawn_position': {'x': x, 'y': y, 'z': z},
        'room_size': layout.room_size,
        'spacing': layout.spacing,
        'report': layout.report.to_dict(),
        'metadata': dict(layout.metadata),
    }


def export_layout_json(layout: GalleryLayout) -> str:
    """Export layout as JSON with generation metadata.

    Args:
        layout: Result of GalleryGenerator.generate()

    Returns:
        JSON string with layout and statistics
    """
    report = layout.report
    output = {
        'metadata': {
            'seed': report.seed,
            'version': '1.0',
            'generator': 'gallery-layout',
        },
        'statistics': {
            'room_count': len(layout.rooms),
            'hallway_count': len(layout.hallways),
            'placement_count': len(layout.placements),
            'unplaced_count': report.unplaced_count,
            'crossroads_room_ids': list(report.crossroads_room_ids),
        },
        'layout': layout_to_dict(layout),
    }
    return json.dumps(output, indent=2)


def export_layout_dot(layout: GalleryLayout) -> str:
    """Export layout as Graphviz DOT format.

    Args:
        layout: Result of GalleryGenerator.generate()

    Returns:
        DOT format string for visualization with Graphviz or online viewers
    """
    lines = ['graph GalleryLayout {']
    lines.append('  node [shape=box, style=filled];')
    lines.append('')

    crossroads = set(layout.report.crossroads_room_ids)
    for room in layout.rooms:
        item_count = len(layout.placements_in_room(room.id))
        label_lines = [
            "ENTRY" if room.is_entry else "ROOM",
            f"id: {room.id}",
            f"pos: ({room.position[0]:g}, {room.position[1]:g})",
            f"items: {item_count}",
        ]
        label = '\\n'.join(label_lines)

        if room.is_entry:
            color = '#90EE90'   # Light green
        elif room.id in crossroads:
            color = '#87CEEB'   # Sky blue
        else:
            color = '#D3D3D3'   # Light gray

        # Pin nodes to their grid cell so neato keeps the floor plan shape
        lines.append(f'  room_{room.id} [label="{label}" fillcolor="{color}" '
                     f'pos="{room.cell.x},{room.cell.y}!"];')

    lines.append('')

    for hallway in layout.hallways:
        style = 'solid' if hallway.direction == HallwayDirection.HORIZONTAL else 'bold'
        lines.append(f'  room_{hallway.from_id} -- room_{hallway.to_id} [style={style}];')

    lines.append('}')
    return '\n'.join(lines)


def build_tile_grid(layout: GalleryLayout) -> np.ndarray:
    """Rasterize a layout into a grid of TileType values, north at the top."""
    stride = ASCII_ROOM_TILES + ASCII_GAP_TILES
    last = ASCII_ROOM_TILES - 1
    mid = ASCII_ROOM_TILES // 2

    xs = [room.cell.x for room in layout.rooms]
    ys = [room.cell.y for room in layout.rooms]
    min_x, max_y = min(xs), max(ys)
    width = (max(xs) - min_x) * stride + ASCII_ROOM_TILES
    height = (max_y - min(ys)) * stride + ASCII_ROOM_TILES

    grid = np.zeros((height, width), dtype=np.int8)

    def origin(room):
        return ((max_y - room.cell.y) * stride, (room.cell.x - min_x) * stride)

    for room in layout.rooms:
        r0, c0 = origin(room)
        grid[r0:r0 + ASCII_ROOM_TILES, c0:c0 + ASCII_ROOM_TILES] = TileType.WALL.value
        grid[r0 + 1:r0 + last, c0 + 1:c0 + last] = TileType.FLOOR.value
        if room.is_entry:
            grid[r0 + mid, c0 + mid] = TileType.SPAWN.value

        doors = {
            Wall.NORTH: (r0, c0 + mid),
            Wall.SOUTH: (r0 + last, c0 + mid),
            Wall.EAST: (r0 + mid, c0 + last),
            Wall.WEST: (r0 + mid, c0),
        }
        for wall in layout.doorway_walls(room.id):
            grid[doors[wall]] = TileType.DOOR.value

        for placement in layout.placements_in_room(room.id):
            grid[_item_tile(room, placement, r0, c0)] = TileType.ITEM.value

    for hallway in layout.hallways:
        a = layout.rooms[hallway.from_id]
        b = layout.rooms[hallway.to_id]
        ra, ca = origin(a)
        rb, cb = origin(b)
        if hallway.direction == HallwayDirection.HORIZONTAL:
            c_start = min(ca, cb) + ASCII_ROOM_TILES
            grid[ra + mid, c_start:c_start + ASCII_GAP_TILES] = TileType.HALL_H.value
        else:
            r_start = min(ra, rb) + ASCII_ROOM_TILES
            grid[r_start:r_start + ASCII_GAP_TILES, ca + mid] = TileType.HALL_V.value

    return grid


def _item_tile(room, placement, r0: int, c0: int):
    """Tile on the room's wall closest to where the item hangs."""
    x, _, z = placement.position
    inner = ASCII_ROOM_TILES - 2
    last = ASCII_ROOM_TILES - 1
    if placement.wall in (Wall.NORTH, Wall.SOUTH):
        fraction = (x - room.position[0] + room.half_size) / room.size
        col = c0 + 1 + min(inner - 1, max(0, int(fraction * inner)))
        row = r0 if placement.wall == Wall.NORTH else r0 + last
    else:
        # Rows grow southwards, so flip the z fraction
        fraction = (room.position[1] + room.half_size - z) / room.size
        row = r0 + 1 + min(inner - 1, max(0, int(fraction * inner)))
        col = c0 + last if placement.wall == Wall.EAST else c0
    return (row, col)


def render_ascii(layout: GalleryLayout) -> str:
    """
    Convert a layout to an ASCII floor plan for debugging.

    Returns:
        ASCII string, one line per tile row
    """
    grid = build_tile_grid(layout)
    lines = [''.join(CHAR_MAP.get(int(v), '?') for v in row).rstrip() for row in grid]
    return '\n'.join(lines)
