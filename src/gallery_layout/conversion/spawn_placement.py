"""
Minimal spawn point placement for generated galleries.

Places the viewer in the entry room, a quarter room in from its centre.
"""

from typing import Optional, Sequence

from gallery_layout.generators.layout.layout_types import Room, Vec3
from gallery_layout.generators.gallery.settings import SPAWN_EYE_HEIGHT


def spawn_position_for(
    rooms: Sequence[Room],
    eye_height: float = SPAWN_EYE_HEIGHT,
) -> Vec3:
    """Pick the viewer start position.

    Prefers the entry room, falls back to the largest room.

    Args:
        rooms: Rooms of the generated layout.
        eye_height: Camera height above the floor.

    Returns:
        (x, y, z) world position.

    Raises:
        ValueError: If there are no rooms.
    """
    if not rooms:
        raise ValueError("Cannot place a spawn point without rooms")

    # Pick candidate: entry first, then largest
    candidate: Optional[Room] = None
    for r in rooms:
        if r.is_entry:
            candidate = r
            break
    if candidate is None:
        candidate = max(rooms, key=lambda r: r.size)

    x, z = candidate.position
    return (x, eye_height, z - candidate.size / 4)
