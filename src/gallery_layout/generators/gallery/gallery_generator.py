#!/usr/bin/env python3
"""
Gallery Layout Generator

Lays out an explorable gallery building for a flat list of items:
how many rooms, where they sit on a square grid, which rooms are joined by
hallways, and which wall each item hangs on.

Pipeline:
1. Room count from item count and items per room; room size from a
   staircase on items per room
2. Room placement, either a straight line ("simple") or randomized growth
   from the entry room over free grid neighbours ("default")
3. Hallway detection between every grid-adjacent pair of rooms
4. Item assignment to wall slots with redistribution fallback

The output is pure data; rendering is left to the caller.

Author: Gallery Layout Generator
License: MIT
"""

import logging
import math
from typing import Any, Dict, List, Optional

from gallery_layout.generators.layout.layout_types import (
    CellCoord, GalleryLayout, Hallway, HallwayDirection, LayoutReport, Room, Wall,
    WALL_ORDER,
)
from gallery_layout.conversion.spawn_placement import spawn_position_for
from .placement import assign_items
from .seeded_random import SeededRandom
from .settings import GallerySettings, LayoutComplexity, LayoutConfigError

logger = logging.getLogger(__name__)


# Order in which the entry room's and every new room's neighbours are queued
GROWTH_ORDER = (Wall.NORTH, Wall.SOUTH, Wall.EAST, Wall.WEST)


def rooms_needed(item_count: int, items_per_room: int) -> int:
    """Rooms required to hold item_count items; the entry room always exists."""
    return max(1, math.ceil(item_count / items_per_room))


class GalleryGenerator:
    """
    Main gallery layout generator.

    One instance owns its random stream and room/hallway accumulators, so
    separate instances can generate independently. Every call to
    generate() starts from a clean state and re-seeds the stream.
    """

    def __init__(self, settings: Optional[GallerySettings] = None):
        self.settings = settings or GallerySettings()
        self.settings.validate()

        self.room_size = self.settings.effective_room_size
        self.spacing = self.settings.spacing

        # Generation state
        self.rng: Optional[SeededRandom] = None
        self.rooms: List[Room] = []
        self.hallways: List[Hallway] = []
        self.rooms_requested = 0

    def generate(self, item_count: int) -> GalleryLayout:
        """
        Generate a complete gallery layout.

        Args:
            item_count: Number of items to hang (>= 0)

        Returns:
            GalleryLayout with rooms, hallways, placements, spawn position
            and a report of what was achieved

        Raises:
            LayoutConfigError: If item_count is not a non-negative int
        """
        if not isinstance(item_count, int) or isinstance(item_count, bool):
            raise LayoutConfigError(f"item_count must be an int, got {item_count!r}")
        if item_count < 0:
            raise LayoutConfigError(f"item_count must be >= 0, got {item_count}")

        # Clear previous generation
        self.rng = SeededRandom(self.settings.seed)
        self.rooms = []
        self.hallways = []
        self.rooms_requested = rooms_needed(item_count, self.settings.items_per_room)

        logger.info(f"Generating {self.rooms_requested} room(s) for {item_count} item(s) "
                    f"(room size {self.room_size}, {self.settings.complexity}, seed {self.rng.seed})")

        self._place_entry_room()
        self._generate_room_layout()
        self._generate_hallways()

        doorways = {room.id: self.doorway_walls(room) for room in self.rooms}
        placed = assign_items(
            self.rooms,
            doorways,
            item_count,
            self.settings.items_per_room,
            capacity_divisor=self.settings.capacity_divisor,
        )

        report = LayoutReport(
            seed=self.rng.seed,
            rooms_requested=self.rooms_requested,
            rooms_generated=len(self.rooms),
            items_requested=item_count,
            items_placed=len(placed.placements),
            unplaced_item_ids=placed.unplaced_item_ids,
            redistributed_item_ids=placed.redistributed_item_ids,
            forced_item_ids=placed.forced_item_ids,
            crossroads_room_ids=placed.crossroads_room_ids,
        )

        if report.unplaced_count:
            logger.warning(f"{report.unplaced_count} of {item_count} item(s) left unplaced")

        logger.info(f"Generation complete: {len(self.rooms)} rooms, {len(self.hallways)} hallways, "
                    f"{report.items_placed} placements")

        return GalleryLayout(
            rooms=self.rooms,
            hallways=self.hallways,
            placements=placed.placements,
            spawn_position=spawn_position_for(self.rooms),
            report=report,
            room_size=self.room_size,
            spacing=self.spacing,
            metadata={
                'complexity': self.settings.complexity.value,
                'hallway_width': self.settings.hallway_width,
                'wall_height': self.settings.wall_height,
                'items_per_room': self.settings.items_per_room,
            },
        )

    # ------------------------------------------------------------------
    # Room layout
    # ------------------------------------------------------------------

    def _place_entry_room(self) -> None:
        self.rooms.append(Room(
            id=0,
            position=(0.0, 0.0),
            size=self.room_size,
            cell=CellCoord(0, 0),
            is_entry=True,
        ))

    def _add_room(self, cell: CellCoord) -> Room:
        room = Room(
            id=len(self.rooms),
            position=cell.to_world(self.spacing),
            size=self.room_size,
            cell=cell,
        )
        self.rooms.append(room)
        logger.debug(f"Room {room.id}: ({room.position[0]}, {room.position[1]})")
        return room

    def _generate_room_layout(self) -> None:
        if self.settings.complexity == LayoutComplexity.SIMPLE:
            self._grow_straight_line()
        else:
            self._grow_randomized()

        if len(self.rooms) < self.rooms_requested:
            logger.warning(f"Generator ran out of open positions: built {len(self.rooms)} "
                           f"of {self.rooms_requested} room(s)")

    def _within_bounds(self, cell: CellCoord) -> bool:
        radius = self.settings.max_grid_radius
        return radius is None or (abs(cell.x) <= radius and abs(cell.y) <= radius)

    def _grow_straight_line(self) -> None:
        for i in range(1, self.rooms_requested):
            cell = CellCoord(0, i)
            if not self._within_bounds(cell):
                break
            self._add_room(cell)

    def _grow_randomized(self) -> None:
        """
        Grow the layout one room at a time from a frontier of free cells.

        The frontier is a dict keyed by cell so insertion order is kept and
        the random pick is reproducible for a given seed.
        """
        used = {self.rooms[0].cell}
        open_cells: Dict[CellCoord, None] = {}
        self._enqueue_neighbors(self.rooms[0].cell, used, open_cells)

        while len(self.rooms) < self.rooms_requested:
            if not open_cells:
                break
            cell = self.rng.choice(list(open_cells))
            del open_cells[cell]
            used.add(cell)
            self._add_room(cell)
            self._enqueue_neighbors(cell, used, open_cells)

    def _enqueue_neighbors(self, cell: CellCoord, used: set,
                           open_cells: Dict[CellCoord, None]) -> None:
        for wall in GROWTH_ORDER:
            neighbor = cell.neighbor(wall)
            if neighbor in used or neighbor in open_cells:
                continue
            if not self._within_bounds(neighbor):
                continue
            open_cells[neighbor] = None

    # ------------------------------------------------------------------
    # Hallways
    # ------------------------------------------------------------------

    def _generate_hallways(self) -> None:
        eps = self.settings.adjacency_epsilon
        for i in range(len(self.rooms)):
            for j in range(i + 1, len(self.rooms)):
                room1 = self.rooms[i]
                room2 = self.rooms[j]
                if abs(room1.distance_to(room2) - self.spacing) >= eps:
                    continue
                dx = abs(room1.position[0] - room2.position[0])
                dz = abs(room1.position[1] - room2.position[1])
                if ((dx < eps and abs(dz - self.spacing) < eps) or
                        (dz < eps and abs(dx - self.spacing) < eps)):
                    self._connect_rooms(room1, room2)

    def _connect_rooms(self, room1: Room, room2: Room) -> Hallway:
        room1.add_connection(room2.id)
        room2.add_connection(room1.id)

        dx = room2.position[0] - room1.position[0]
        dz = room2.position[1] - room1.position[1]
        hallway = Hallway(
            from_id=room1.id,
            to_id=room2.id,
            start_pos=room1.position,
            end_pos=room2.position,
            direction=HallwayDirection.HORIZONTAL if abs(dx) > abs(dz) else HallwayDirection.VERTICAL,
        )
        self.hallways.append(hallway)
        logger.debug(f"Connecting adjacent rooms: {room1.id} <-> {room2.id}")
        return hallway

    def doorway_walls(self, room: Room) -> List[Wall]:
        """Walls of a room that open onto a hallway, in canonical order."""
        facing = set()
        for hallway in self.hallways:
            if room.id in (hallway.from_id, hallway.to_id):
                other = self.rooms[hallway.other_end(room.id)]
                facing.add(room.wall_towards(other))
        return [w for w in WALL_ORDER if w in facing]


def generate(item_count: int, options: Optional[Dict[str, Any]] = None,
             **overrides: Any) -> GalleryLayout:
    """
    Generate a gallery layout for item_count items.

    Args:
        item_count: Number of items to hang
        options: camelCase options (itemsPerRoom, roomSize, hallwayWidth,
            complexity, seed, wallHeight, maxGridRadius)
        **overrides: snake_case GallerySettings fields, applied last

    Returns:
        GalleryLayout
    """
    settings = GallerySettings.from_options(options, **overrides)
    return GalleryGenerator(settings).generate(item_count)
