"""
Conversion Module

Turns a generated GalleryLayout into renderer-ready geometry and export
formats.
"""

from .spawn_placement import spawn_position_for
from .hallway_geometry import (
    CorridorSegment, WallSegment, corridor_for, corridors_for, wall_segments_for,
)
from .layout_export import (
    build_tile_grid, export_layout_dot, export_layout_json, layout_to_dict, render_ascii,
)

__all__ = [
    'spawn_position_for',
    'CorridorSegment',
    'WallSegment',
    'corridor_for',
    'corridors_for',
    'wall_segments_for',
    'build_tile_grid',
    'export_layout_dot',
    'export_layout_json',
    'layout_to_dict',
    'render_ascii',
]
