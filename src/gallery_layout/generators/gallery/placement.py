"""
Item-to-wall assignment with redistribution fallback.

Items are dealt out room by room in id order (direct pass). Whatever a room
cannot take, usually because it is a crossroads with doorways on all four
walls, is queued and offered to other rooms: first to rooms still under
their density limit (redistribution), then to any room with a usable wall
(forced). Only items that no room can take end up unplaced.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from gallery_layout.generators.layout.layout_types import (
    Placement, PlacementTier, Room, Wall,
)
from .settings import FORCED_SLOT_OVERSHOOT, ROOM_CAPACITY_DIVISOR
from .wall_slots import available_walls, compute_wall_slots

logger = logging.getLogger(__name__)


@dataclass
class PlacementResult:
    placements: List[Placement] = field(default_factory=list)
    unplaced_item_ids: List[int] = field(default_factory=list)
    redistributed_item_ids: List[int] = field(default_factory=list)
    forced_item_ids: List[int] = field(default_factory=list)
    room_counts: Dict[int, int] = field(default_factory=dict)
    crossroads_room_ids: List[int] = field(default_factory=list)


def room_capacity(room: Room, divisor: float = ROOM_CAPACITY_DIVISOR) -> int:
    """Soft item limit used when redistributing."""
    return int(math.floor(room.size / divisor))


def assign_items(
    rooms: Sequence[Room],
    doorways: Dict[int, List[Wall]],
    item_count: int,
    items_per_room: int,
    capacity_divisor: float = ROOM_CAPACITY_DIVISOR,
) -> PlacementResult:
    """
    Hang items 0..item_count-1 on room walls.

    Args:
        rooms: Rooms in id order
        doorways: Doorway walls per room id
        item_count: Number of items to place
        items_per_room: Target per room for the direct pass
        capacity_divisor: Wall units per item for the redistribution limit

    Returns:
        PlacementResult; every item id appears in exactly one of
        ``placements`` or ``unplaced_item_ids``.
    """
    result = PlacementResult()
    counts = result.room_counts
    unplaced: List[int] = []
    item_index = 0

    for room in rooms:
        walls = doorways.get(room.id, [])
        if not available_walls(walls):
            result.crossroads_room_ids.append(room.id)

    # Direct pass
    for room in rooms:
        if item_index >= item_count:
            break
        wanted = min(items_per_room, item_count - item_index)
        slots = compute_wall_slots(room, wanted, doorways.get(room.id, []))

        if not slots:
            reason = "crossroads" if room.id in result.crossroads_room_ids else "walls full"
            logger.warning(f"Room {room.id} cannot hold items ({reason}); "
                           f"redistributing {wanted} item(s)")
            counts[room.id] = 0
            unplaced.extend(range(item_index, item_index + wanted))
            item_index += wanted
            continue

        for i in range(wanted):
            if i < len(slots):
                result.placements.append(Placement.from_slot(item_index, room.id, slots[i]))
            else:
                logger.debug(f"No slot for item {item_index} in room {room.id}")
                unplaced.append(item_index)
            item_index += 1
        counts[room.id] = min(wanted, len(slots))

    # Rooms never reached by the direct pass still count as empty
    for room in rooms:
        counts.setdefault(room.id, 0)

    # Items beyond what the rooms were asked to take (fewer rooms than needed)
    if item_index < item_count:
        unplaced.extend(range(item_index, item_count))

    if unplaced:
        logger.info(f"Redistributing {len(unplaced)} unplaced item(s)")

    for item_id in unplaced:
        if _redistribute(item_id, rooms, doorways, counts, capacity_divisor, result):
            continue
        if _force_place(item_id, rooms, doorways, counts, result):
            continue
        logger.warning(f"Item {item_id} could not be placed: no room has a free wall slot")
        result.unplaced_item_ids.append(item_id)

    return result


def _redistribute(item_id: int, rooms: Sequence[Room], doorways: Dict[int, List[Wall]],
                  counts: Dict[int, int], capacity_divisor: float,
                  result: PlacementResult) -> bool:
    for room in rooms:
        walls = doorways.get(room.id, [])
        if not available_walls(walls):
            continue
        current = counts[room.id]
        if current >= room_capacity(room, capacity_divisor):
            continue

        new_slots = compute_wall_slots(room, current + 1, walls)[current:]
        if not new_slots:
            continue

        result.placements.append(
            Placement.from_slot(item_id, room.id, new_slots[0], PlacementTier.REDISTRIBUTED)
        )
        result.redistributed_item_ids.append(item_id)
        counts[room.id] = current + 1
        logger.debug(f"Redistributed item {item_id} to room {room.id}")
        return True
    return False


def _force_place(item_id: int, rooms: Sequence[Room], doorways: Dict[int, List[Wall]],
                 counts: Dict[int, int], result: PlacementResult) -> bool:
    for room in rooms:
        walls = doorways.get(room.id, [])
        if not available_walls(walls):
            continue
        current = counts[room.id]
        slots = compute_wall_slots(room, current + FORCED_SLOT_OVERSHOOT, walls)
        if len(slots) <= current:
            continue

        result.placements.append(
            Placement.from_slot(item_id, room.id, slots[current], PlacementTier.FORCED)
        )
        result.forced_item_ids.append(item_id)
        counts[room.id] = current + 1
        logger.warning(f"Force-placed item {item_id} in room {room.id}")
        return True
    return False
