#!/usr/bin/env python3
"""
Layout Types for Gallery Generation

This module defines the core data structures for representing a generated
gallery floor plan. These types are the contract between the layout
generator and whatever renders it: rooms on a square grid, hallways between
grid-adjacent rooms, and per-item wall placements.

Coordinates follow the renderer convention: the floor plane is (x, z) with
+z pointing north, and y is height above the floor.

Author: Gallery Layout Generator
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]


class Wall(Enum):
    """Cardinal wall of a square room."""
    NORTH = "north"  # +Z direction
    SOUTH = "south"  # -Z direction
    EAST = "east"    # +X direction
    WEST = "west"    # -X direction

    def opposite(self) -> 'Wall':
        """Return the wall facing this one across the room."""
        opposites = {
            Wall.NORTH: Wall.SOUTH,
            Wall.SOUTH: Wall.NORTH,
            Wall.EAST: Wall.WEST,
            Wall.WEST: Wall.EAST,
        }
        return opposites[self]

    def __str__(self) -> str:
        return self.value


# Order in which slots are dealt out to available walls
WALL_ORDER: Tuple[Wall, ...] = (Wall.NORTH, Wall.EAST, Wall.SOUTH, Wall.WEST)


class HallwayDirection(Enum):
    """Dominant axis of a hallway."""
    HORIZONTAL = "horizontal"  # Runs along X (east-west)
    VERTICAL = "vertical"      # Runs along Z (north-south)

    def __str__(self) -> str:
        return self.value


class PlacementTier(Enum):
    """Which pass of the placement algorithm hung an item."""
    DIRECT = "direct"
    REDISTRIBUTED = "redistributed"
    FORCED = "forced"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CellCoord:
    """Integer grid key for a room position (one unit = one room spacing)."""
    x: int
    y: int

    def neighbor(self, wall: Wall) -> 'CellCoord':
        """Get the neighbouring cell beyond the given wall."""
        offsets = {
            Wall.NORTH: (0, 1),
            Wall.SOUTH: (0, -1),
            Wall.EAST: (1, 0),
            Wall.WEST: (-1, 0),
        }
        dx, dy = offsets[wall]
        return CellCoord(self.x + dx, self.y + dy)

    def to_world(self, spacing: float) -> Vec2:
        """Convert to world (x, z) of the room centre."""
        return (self.x * spacing, self.y * spacing)

    @staticmethod
    def from_world(x: float, z: float, spacing: float) -> 'CellCoord':
        """Snap a world position to the nearest grid cell."""
        return CellCoord(int(round(x / spacing)), int(round(z / spacing)))


@dataclass
class Room:
    """
    A square gallery room.

    Position is the room centre in world units. Connections hold the ids of
    rooms joined to this one by a hallway and are kept symmetric by the
    generator.
    """
    id: int
    position: Vec2
    size: float
    cell: CellCoord = field(default_factory=lambda: CellCoord(0, 0))
    is_entry: bool = False
    connections: List[int] = field(default_factory=list)

    @property
    def half_size(self) -> float:
        return self.size / 2

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Get room bounds as (min_x, min_z, max_x, max_z)"""
        x, z = self.position
        h = self.half_size
        return (x - h, z - h, x + h, z + h)

    def add_connection(self, other_id: int) -> None:
        if other_id not in self.connections:
            self.connections.append(other_id)
            self.connections.sort()

    def distance_to(self, other: 'Room') -> float:
        """Euclidean distance between room centres."""
        dx = self.position[0] - other.position[0]
        dz = self.position[1] - other.position[1]
        return (dx * dx + dz * dz) ** 0.5

    def wall_towards(self, other: 'Room') -> Wall:
        """Wall of this room that faces the other room (dominant axis)."""
        dx = other.position[0] - self.position[0]
        dz = other.position[1] - self.position[1]
        if abs(dx) > abs(dz):
            return Wall.EAST if dx > 0 else Wall.WEST
        return Wall.NORTH if dz > 0 else Wall.SOUTH

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'position': {'x': self.position[0], 'z': self.position[1]},
            'cell': {'x': self.cell.x, 'y': self.cell.y},
            'size': self.size,
            'is_entry': self.is_entry,
            'connections': list(self.connections),
        }


@dataclass(frozen=True)
class Hallway:
    """A corridor joining two grid-adjacent rooms (from_id < to_id)."""
    from_id: int
    to_id: int
    start_pos: Vec2
    end_pos: Vec2
    direction: HallwayDirection

    @property
    def length(self) -> float:
        """Centre-to-centre length"""
        dx = self.end_pos[0] - self.start_pos[0]
        dz = self.end_pos[1] - self.start_pos[1]
        return (dx * dx + dz * dz) ** 0.5

    def other_end(self, room_id: int) -> int:
        return self.to_id if room_id == self.from_id else self.from_id

    def to_dict(self) -> Dict[str, Any]:
        return {
            'from': self.from_id,
            'to': self.to_id,
            'start_pos': {'x': self.start_pos[0], 'z': self.start_pos[1]},
            'end_pos': {'x': self.end_pos[0], 'z': self.end_pos[1]},
            'direction': self.direction.value,
        }


@dataclass(frozen=True)
class WallSlot:
    """A candidate hanging position on one wall of a room."""
    position: Vec3
    rotation: float  # Yaw in radians, facing into the room
    wall: Wall


@dataclass(frozen=True)
class Placement:
    """An item hung on a wall slot."""
    item_id: int
    room_id: int
    position: Vec3
    rotation: float
    wall: Wall
    tier: PlacementTier = PlacementTier.DIRECT

    @classmethod
    def from_slot(cls, item_id: int, room_id: int, slot: WallSlot,
                  tier: PlacementTier = PlacementTier.DIRECT) -> 'Placement':
        return cls(
            item_id=item_id,
            room_id=room_id,
            position=slot.position,
            rotation=slot.rotation,
            wall=slot.wall,
            tier=tier,
        )

    def to_dict(self) -> Dict[str, Any]:
        x, y, z = self.position
        return {
            'item_id': self.item_id,
            'room_id': self.room_id,
            'position': {'x': x, 'y': y, 'z': z},
            'rotation': self.rotation,
            'wall': self.wall.value,
            'tier': self.tier.value,
        }


@dataclass
class LayoutReport:
    """
    What the generator actually achieved versus what was asked for.

    Callers use this to decide whether to retry with different options.
    """
    seed: float
    rooms_requested: int
    rooms_generated: int
    items_requested: int
    items_placed: int
    unplaced_item_ids: List[int] = field(default_factory=list)
    redistributed_item_ids: List[int] = field(default_factory=list)
    forced_item_ids: List[int] = field(default_factory=list)
    crossroads_room_ids: List[int] = field(default_factory=list)

    @property
    def unplaced_count(self) -> int:
        return len(self.unplaced_item_ids)

    @property
    def is_complete(self) -> bool:
        """True if every requested room was built and every item hung"""
        return (self.rooms_generated == self.rooms_requested and
                self.items_placed == self.items_requested)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'seed': self.seed,
            'rooms_requested': self.rooms_requested,
            'rooms_generated': self.rooms_generated,
            'items_requested': self.items_requested,
            'items_placed': self.items_placed,
            'unplaced_item_ids': list(self.unplaced_item_ids),
            'redistributed_item_ids': list(self.redistributed_item_ids),
            'forced_item_ids': list(self.forced_item_ids),
            'crossroads_room_ids': list(self.crossroads_room_ids),
        }


@dataclass
class GalleryLayout:
    """
    Complete output of one generation run.

    This is the structure handed to the rendering layer: it builds walls and
    floors from rooms, corridors from hallways, and hangs items from
    placements.
    """
    rooms: List[Room]
    hallways: List[Hallway]
    placements: List[Placement]
    spawn_position: Vec3
    report: LayoutReport
    room_size: float
    spacing: float
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def entry_room(self) -> Room:
        return self.rooms[0]

    def get_room(self, room_id: int) -> Optional[Room]:
        for room in self.rooms:
            if room.id == room_id:
                return room
        return None

    def placements_in_room(self, room_id: int) -> List[Placement]:
        return [p for p in self.placements if p.room_id == room_id]

    def doorway_walls(self, room_id: int) -> List[Wall]:
        """Walls of a room that open onto a hallway, in canonical order."""
        room = self.get_room(room_id)
        if room is None:
            return []
        facing = {room.wall_towards(self.rooms[other]) for other in room.connections}
        return [w for w in WALL_ORDER if w in facing]
