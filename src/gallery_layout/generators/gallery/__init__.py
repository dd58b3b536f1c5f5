"""
Gallery Generator Module

This module provides the room layout, hallway detection and item placement
algorithms for procedural gallery generation.
"""

from .settings import (
    GallerySettings,
    LayoutComplexity,
    LayoutConfigError,
    auto_room_size,
    # Constants
    ADJACENCY_EPSILON,
    ROOM_CAPACITY_DIVISOR,
    FORCED_SLOT_OVERSHOOT,
    ITEM_HANG_HEIGHT,
    ITEM_SPACING,
    ITEM_WALL_CLEARANCE,
    SPAWN_EYE_HEIGHT,
)
from .seeded_random import SeededRandom
from .wall_slots import available_walls, compute_wall_slots, is_crossroads, wall_capacity
from .placement import PlacementResult, assign_items, room_capacity
from .gallery_generator import GalleryGenerator, generate, rooms_needed

__all__ = [
    'GalleryGenerator',
    'GallerySettings',
    'LayoutComplexity',
    'LayoutConfigError',
    'SeededRandom',
    'PlacementResult',
    'generate',
    'rooms_needed',
    'auto_room_size',
    'assign_items',
    'room_capacity',
    'available_walls',
    'compute_wall_slots',
    'is_crossroads',
    'wall_capacity',
    'ADJACENCY_EPSILON',
    'ROOM_CAPACITY_DIVISOR',
    'FORCED_SLOT_OVERSHOOT',
    'ITEM_HANG_HEIGHT',
    'ITEM_SPACING',
    'ITEM_WALL_CLEARANCE',
    'SPAWN_EYE_HEIGHT',
]
