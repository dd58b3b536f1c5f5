"""
Layout Types Module for Gallery Generation

This module provides data structures for representing generated gallery
floor plans handed to a rendering layer.
"""

from .layout_types import (
    GalleryLayout,
    Room,
    Hallway,
    WallSlot,
    Placement,
    LayoutReport,
    CellCoord,
    Wall,
    HallwayDirection,
    PlacementTier,
    WALL_ORDER,
)

__all__ = [
    'GalleryLayout',
    'Room',
    'Hallway',
    'WallSlot',
    'Placement',
    'LayoutReport',
    'CellCoord',
    'Wall',
    'HallwayDirection',
    'PlacementTier',
    'WALL_ORDER',
]
