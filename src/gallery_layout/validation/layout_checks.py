"""
Invariant checks for generated gallery layouts.

FAIL issues mean the layout breaks a structural rule and should not be
rendered; WARN issues report graceful degradation the caller may want to
retry around.
"""

import logging
from collections import Counter

from gallery_layout.generators.layout.layout_types import CellCoord, GalleryLayout, PlacementTier
from .core import Severity, ValidationError, ValidationResult

logger = logging.getLogger(__name__)


def check_rooms(layout: GalleryLayout) -> ValidationResult:
    result = ValidationResult()

    entries = [room for room in layout.rooms if room.is_entry]
    if len(entries) != 1:
        result.add(Severity.FAIL, "LAYOUT-001", f"Expected exactly one entry room, found {len(entries)}")
    elif entries[0] is not layout.entry_room or entries[0].position != (0.0, 0.0):
        result.add(Severity.FAIL, "LAYOUT-001", "Entry room must be room 0 at the origin",
                   room_id=entries[0].id)

    for index, room in enumerate(layout.rooms):
        if room.id != index:
            result.add(Severity.FAIL, "LAYOUT-002", f"Room at index {index} has id {room.id}",
                       room_id=room.id)
        if CellCoord.from_world(*room.position, layout.spacing) != room.cell:
            result.add(Severity.FAIL, "LAYOUT-007",
                       f"Room {room.id} at {room.position} is off its grid cell ({room.cell.x}, {room.cell.y})",
                       room_id=room.id)

    cells = Counter(room.cell for room in layout.rooms)
    for cell, count in cells.items():
        if count > 1:
            result.add(Severity.FAIL, "LAYOUT-003",
                       f"{count} rooms share grid cell ({cell.x}, {cell.y})")

    return result


def check_connections(layout: GalleryLayout) -> ValidationResult:
    result = ValidationResult()

    for room in layout.rooms:
        for other_id in room.connections:
            other = layout.get_room(other_id)
            if other is None or room.id not in other.connections:
                result.add(Severity.FAIL, "LAYOUT-004",
                           f"Connection {room.id} -> {other_id} is not mirrored", room_id=room.id)

    from_hallways = {frozenset((h.from_id, h.to_id)) for h in layout.hallways}
    from_rooms = {frozenset((room.id, other)) for room in layout.rooms for other in room.connections}
    if from_hallways != from_rooms:
        result.add(Severity.FAIL, "LAYOUT-005",
                   "Room connections do not match the hallway set",
                   remediation="Rebuild connections from hallways")

    for hallway in layout.hallways:
        if hallway.from_id >= hallway.to_id:
            result.add(Severity.WARN, "LAYOUT-006",
                       f"Hallway {hallway.from_id}-{hallway.to_id} is not ordered")

    return result


def check_placements(layout: GalleryLayout) -> ValidationResult:
    result = ValidationResult()
    item_count = layout.report.items_requested

    if len(layout.placements) > item_count:
        result.add(Severity.FAIL, "PLACE-001",
                   f"{len(layout.placements)} placements for {item_count} items")

    ids = Counter(p.item_id for p in layout.placements)
    for item_id, count in ids.items():
        if count > 1:
            result.add(Severity.FAIL, "PLACE-002", f"Item placed {count} times", item_id=item_id)
        if not 0 <= item_id < item_count:
            result.add(Severity.FAIL, "PLACE-003", "Item id out of range", item_id=item_id)

    doorways = {room.id: set(layout.doorway_walls(room.id)) for room in layout.rooms}
    for p in layout.placements:
        if p.wall in doorways.get(p.room_id, set()):
            result.add(Severity.FAIL, "PLACE-004",
                       f"Item hangs on doorway wall {p.wall}", room_id=p.room_id, item_id=p.item_id)
        if len(doorways.get(p.room_id, ())) == 4 and p.tier == PlacementTier.DIRECT:
            result.add(Severity.FAIL, "PLACE-005", "Crossroads room received a direct placement",
                       room_id=p.room_id, item_id=p.item_id)

    return result


def check_report(layout: GalleryLayout) -> ValidationResult:
    result = ValidationResult()
    report = layout.report

    if report.rooms_generated != len(layout.rooms):
        result.add(Severity.FAIL, "REPORT-001",
                   f"Report says {report.rooms_generated} rooms, layout has {len(layout.rooms)}")
    if report.items_placed != len(layout.placements):
        result.add(Severity.FAIL, "REPORT-002",
                   f"Report says {report.items_placed} placements, layout has {len(layout.placements)}")

    if report.rooms_generated < report.rooms_requested:
        result.add(Severity.WARN, "REPORT-003",
                   f"Built {report.rooms_generated} of {report.rooms_requested} requested rooms",
                   remediation="Raise max_grid_radius or lower the item count")
    if report.unplaced_count:
        result.add(Severity.WARN, "REPORT-004",
                   f"{report.unplaced_count} item(s) could not be placed",
                   remediation="Use larger rooms or fewer items per room")
    for room_id in report.crossroads_room_ids:
        result.add(Severity.INFO, "REPORT-005", "Crossroads room has no hanging wall", room_id=room_id)

    return result


def validate_layout(layout: GalleryLayout, fail_fast: bool = False) -> ValidationResult:
    """
    Run every layout check.

    Args:
        layout: Generated layout
        fail_fast: Raise ValidationError if any FAIL issue is found

    Returns:
        Combined ValidationResult
    """
    result = ValidationResult()
    result.merge(check_rooms(layout))
    result.merge(check_connections(layout))
    result.merge(check_placements(layout))
    result.merge(check_report(layout))

    for issue in result.warnings:
        logger.warning(str(issue))

    if fail_fast and result.failed:
        logger.error(f"Layout validation failed: {len(result.errors)} errors")
        raise ValidationError(result)

    return result
