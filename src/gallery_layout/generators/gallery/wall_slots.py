"""
Wall slot computation for hanging items in a room.

compute_wall_slots() is a pure function of (room, count, doorway walls).
Slot j is dealt to available wall j mod a, and the m-th slot on a wall sits
at the m-th point of the base-2 van der Corput sequence along it
(1/2, 1/4, 3/4, 1/8, ...). Asking for more slots therefore only appends:
the first n slots of a larger request are identical to a request for n.
With 1, 3 or 7 slots on a wall the spacing is exactly wall_length / (k + 1).
"""

import math
from typing import Iterable, List

from gallery_layout.generators.layout.layout_types import Room, Wall, WallSlot, WALL_ORDER
from .settings import ITEM_HANG_HEIGHT, ITEM_SPACING, ITEM_WALL_CLEARANCE


# Yaw that makes an item on each wall face into the room
WALL_ROTATIONS = {
    Wall.NORTH: math.pi,
    Wall.SOUTH: 0.0,
    Wall.EAST: -math.pi / 2,
    Wall.WEST: math.pi / 2,
}


def available_walls(doorway_walls: Iterable[Wall]) -> List[Wall]:
    """Walls without a doorway, in canonical order (N, E, S, W)."""
    blocked = set(doorway_walls)
    return [w for w in WALL_ORDER if w not in blocked]


def is_crossroads(doorway_walls: Iterable[Wall]) -> bool:
    return not available_walls(doorway_walls)


def wall_capacity(wall_length: float, item_spacing: float = ITEM_SPACING) -> int:
    """Most slots one wall can take while keeping item_spacing between them.

    A free wall always holds at least its centre slot.
    """
    return max(1, int(math.floor(wall_length / item_spacing + 1e-9)) - 1)


def van_der_corput(n: int) -> float:
    """n-th element (n >= 1) of the base-2 van der Corput sequence."""
    q = 0.0
    denom = 1.0
    while n:
        denom *= 2
        n, remainder = divmod(n, 2)
        q += remainder / denom
    return q


def _slot_on_wall(room: Room, wall: Wall, fraction: float,
                  hang_height: float, clearance: float) -> WallSlot:
    x, z = room.position
    half = room.half_size
    offset = fraction * room.size - half

    if wall == Wall.NORTH:
        position = (x + offset, hang_height, z + half - clearance)
    elif wall == Wall.SOUTH:
        position = (x + offset, hang_height, z - half + clearance)
    elif wall == Wall.EAST:
        position = (x + half - clearance, hang_height, z + offset)
    else:  # WEST
        position = (x - half + clearance, hang_height, z + offset)

    return WallSlot(position=position, rotation=WALL_ROTATIONS[wall], wall=wall)


def compute_wall_slots(
    room: Room,
    count: int,
    doorway_walls: Iterable[Wall] = (),
    hang_height: float = ITEM_HANG_HEIGHT,
    clearance: float = ITEM_WALL_CLEARANCE,
    item_spacing: float = ITEM_SPACING,
) -> List[WallSlot]:
    """
    Compute up to ``count`` hanging slots on the room's non-doorway walls.

    Args:
        room: Room to hang items in
        count: Number of slots wanted
        doorway_walls: Walls that open onto a hallway and cannot host items
        hang_height: Height of the slot above the floor
        clearance: Inward offset from the wall plane
        item_spacing: Minimum wall length per slot, bounds slots per wall

    Returns:
        List of WallSlot, shorter than ``count`` once every available wall
        is full. Empty for a crossroads room.
    """
    walls = available_walls(doorway_walls)
    if not walls or count <= 0:
        return []

    per_wall = wall_capacity(room.size, item_spacing)
    total = min(count, per_wall * len(walls))

    slots = []
    for j in range(total):
        wall = walls[j % len(walls)]
        nth_on_wall = j // len(walls) + 1
        slots.append(_slot_on_wall(room, wall, van_der_corput(nth_on_wall),
                                   hang_height, clearance))
    return slots
