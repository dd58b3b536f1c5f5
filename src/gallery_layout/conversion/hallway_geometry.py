"""
Pure-data geometry for hallways and doorway walls.

A renderer needs two things the layout does not spell out: the corridor
segment between two rooms' facing walls, and each room wall split into
solid pieces around its doorway gap. Both are derived here so the renderer
only has to extrude boxes.
"""

import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from gallery_layout.generators.layout.layout_types import (
    Hallway, HallwayDirection, Room, Vec2, Wall, WALL_ORDER,
)
from gallery_layout.generators.gallery.settings import (
    GALLERY_DEFAULT_HALLWAY_WIDTH, GALLERY_DEFAULT_WALL_HEIGHT, GALLERY_WALL_THICKNESS,
)


# Wall pieces narrower than this are not worth building
MIN_WALL_SEGMENT = 0.5


@dataclass(frozen=True)
class CorridorSegment:
    """Floor strip of a hallway, from one room's wall to the other's."""
    from_id: int
    to_id: int
    start: Vec2
    end: Vec2
    width: float
    direction: HallwayDirection

    @property
    def length(self) -> float:
        if self.direction == HallwayDirection.HORIZONTAL:
            return abs(self.end[0] - self.start[0])
        return abs(self.end[1] - self.start[1])

    @property
    def center(self) -> Vec2:
        return ((self.start[0] + self.end[0]) / 2, (self.start[1] + self.end[1]) / 2)

    @property
    def footprint(self) -> Vec2:
        """(size along x, size along z) of the corridor floor"""
        if self.direction == HallwayDirection.HORIZONTAL:
            return (self.length, self.width)
        return (self.width, self.length)


@dataclass(frozen=True)
class WallSegment:
    """A solid box of wall; rotation is the yaw of its long side."""
    room_id: int
    wall: Wall
    center: Vec2
    length: float
    height: float
    thickness: float
    rotation: float


def corridor_for(hallway: Hallway, rooms: Sequence[Room],
                 width: float = GALLERY_DEFAULT_HALLWAY_WIDTH) -> CorridorSegment:
    """Corridor between the facing walls of a hallway's two rooms."""
    room1 = rooms[hallway.from_id]
    room2 = rooms[hallway.to_id]
    x1, z1 = room1.position
    x2, z2 = room2.position

    if hallway.direction == HallwayDirection.HORIZONTAL:
        if x2 > x1:
            start = (x1 + room1.half_size, z1)
            end = (x2 - room2.half_size, z1)
        else:
            start = (x1 - room1.half_size, z1)
            end = (x2 + room2.half_size, z1)
    else:
        if z2 > z1:
            start = (x1, z1 + room1.half_size)
            end = (x1, z2 - room2.half_size)
        else:
            start = (x1, z1 - room1.half_size)
            end = (x1, z2 + room2.half_size)

    return CorridorSegment(
        from_id=hallway.from_id,
        to_id=hallway.to_id,
        start=start,
        end=end,
        width=width,
        direction=hallway.direction,
    )


def corridors_for(hallways: Iterable[Hallway], rooms: Sequence[Room],
                  width: float = GALLERY_DEFAULT_HALLWAY_WIDTH,
                  min_length: float = MIN_WALL_SEGMENT) -> List[CorridorSegment]:
    """Corridors for all hallways, skipping rooms that touch wall to wall."""
    corridors = []
    for hallway in hallways:
        corridor = corridor_for(hallway, rooms, width)
        if corridor.length >= min_length:
            corridors.append(corridor)
    return corridors


def wall_segments_for(
    room: Room,
    doorway_walls: Iterable[Wall],
    doorway_width: float = GALLERY_DEFAULT_HALLWAY_WIDTH,
    wall_height: float = GALLERY_DEFAULT_WALL_HEIGHT,
    thickness: float = GALLERY_WALL_THICKNESS,
) -> List[WallSegment]:
    """
    Solid wall pieces for all four walls of a room.

    A wall without a doorway is one full-length piece. A doorway wall is
    two pieces either side of a centred gap of doorway_width; if those
    pieces would be narrower than MIN_WALL_SEGMENT the wall is left open.
    """
    doors = set(doorway_walls)
    x, z = room.position
    half = room.half_size
    segments = []

    for wall in WALL_ORDER:
        if wall in (Wall.NORTH, Wall.SOUTH):
            wall_center = (x, z + half if wall == Wall.NORTH else z - half)
            along = (1.0, 0.0)
            rotation = 0.0
        else:
            wall_center = (x + half if wall == Wall.EAST else x - half, z)
            along = (0.0, 1.0)
            rotation = math.pi / 2

        if wall not in doors:
            segments.append(WallSegment(room.id, wall, wall_center, room.size,
                                        wall_height, thickness, rotation))
            continue

        piece = (room.size - doorway_width) / 2
        if piece <= MIN_WALL_SEGMENT:
            continue
        offset = room.size / 2 - piece / 2
        for sign in (-1, 1):
            center = (wall_center[0] + sign * offset * along[0],
                      wall_center[1] + sign * offset * along[1])
            segments.append(WallSegment(room.id, wall, center, piece,
                                        wall_height, thickness, rotation))
    return segments
