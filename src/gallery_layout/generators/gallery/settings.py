"""
Generation settings and tuning constants for gallery layouts.

All units are renderer world units (roughly metres).
"""

import math
import numbers
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Dict, Optional


# Room sizing staircase: 1-2 items = 15, 3-4 = 20, 5-6 = 25, ...
GALLERY_MIN_ROOM_SIZE = 15.0
GALLERY_ROOM_SIZE_BASE = 10.0
GALLERY_ROOM_SIZE_STEP = 5.0

# Room centres sit this many room sizes apart, leaving a room-sized gap
# for the connecting hallway
GALLERY_SPACING_FACTOR = 2.0

GALLERY_DEFAULT_ITEMS_PER_ROOM = 4
GALLERY_DEFAULT_HALLWAY_WIDTH = 5.0
GALLERY_DEFAULT_WALL_HEIGHT = 5.0
GALLERY_WALL_THICKNESS = 0.2

# Hanging geometry
ITEM_HANG_HEIGHT = 2.5
ITEM_WALL_CLEARANCE = 0.3
ITEM_SPACING = 2.5  # Minimum wall length per hung item

# Empirical constants carried over from the first gallery prototype
ADJACENCY_EPSILON = 0.1
ROOM_CAPACITY_DIVISOR = 2.5  # ~1 item per 2.5 units of wall
FORCED_SLOT_OVERSHOOT = 10

# Viewer start
SPAWN_EYE_HEIGHT = 1.6


class LayoutComplexity(Enum):
    SIMPLE = "simple"    # Straight line of rooms
    DEFAULT = "default"  # Randomized spanning growth

    def __str__(self) -> str:
        return self.value


class LayoutConfigError(ValueError):
    """Raised when generation options are invalid."""
    pass


# camelCase option names accepted by from_options()
_OPTION_ALIASES = {
    'itemsPerRoom': 'items_per_room',
    'roomSize': 'room_size',
    'hallwayWidth': 'hallway_width',
    'wallHeight': 'wall_height',
    'complexity': 'complexity',
    'seed': 'seed',
    'maxGridRadius': 'max_grid_radius',
    'adjacencyEpsilon': 'adjacency_epsilon',
    'capacityDivisor': 'capacity_divisor',
}


def auto_room_size(items_per_room: int) -> float:
    """Room edge length for a given items-per-room target.

    Grows by GALLERY_ROOM_SIZE_STEP for every two extra items per room and
    never drops below GALLERY_MIN_ROOM_SIZE.
    """
    steps = math.ceil(items_per_room / 2)
    return max(GALLERY_MIN_ROOM_SIZE, steps * GALLERY_ROOM_SIZE_STEP + GALLERY_ROOM_SIZE_BASE)


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass
class GallerySettings:
    # Room policy
    items_per_room: int = GALLERY_DEFAULT_ITEMS_PER_ROOM
    room_size: Optional[float] = None  # None = auto from items_per_room

    # Geometry
    hallway_width: float = GALLERY_DEFAULT_HALLWAY_WIDTH
    wall_height: float = GALLERY_DEFAULT_WALL_HEIGHT

    # Layout strategy
    complexity: LayoutComplexity = LayoutComplexity.DEFAULT
    max_grid_radius: Optional[int] = None  # None = unbounded grid

    # Seeding for reproducible generation
    seed: Optional[float] = None  # None = random seed, otherwise deterministic

    # Tuning
    adjacency_epsilon: float = ADJACENCY_EPSILON
    capacity_divisor: float = ROOM_CAPACITY_DIVISOR

    def __post_init__(self):
        if isinstance(self.complexity, str):
            try:
                self.complexity = LayoutComplexity(self.complexity.lower())
            except ValueError:
                allowed = [c.value for c in LayoutComplexity]
                raise LayoutConfigError(
                    f"Unknown complexity '{self.complexity}'. Available: {allowed}"
                ) from None

        if isinstance(self.seed, float) and math.isfinite(self.seed) and self.seed.is_integer():
            self.seed = int(self.seed)

    @property
    def effective_room_size(self) -> float:
        if self.room_size is not None:
            return float(self.room_size)
        return auto_room_size(self.items_per_room)

    @property
    def spacing(self) -> float:
        return self.effective_room_size * GALLERY_SPACING_FACTOR

    def validate(self) -> None:
        """Fail fast on configurations the generator cannot honour.

        Raises:
            LayoutConfigError: describing the first invalid field
        """
        if not isinstance(self.items_per_room, numbers.Integral) or isinstance(self.items_per_room, bool):
            raise LayoutConfigError(f"items_per_room must be an int, got {self.items_per_room!r}")
        if self.items_per_room < 1:
            raise LayoutConfigError(f"items_per_room must be >= 1, got {self.items_per_room}")

        for name in ('room_size', 'hallway_width', 'wall_height',
                     'adjacency_epsilon', 'capacity_divisor'):
            value = getattr(self, name)
            if value is None and name == 'room_size':
                continue
            if not _is_real(value) or not math.isfinite(value) or value <= 0:
                raise LayoutConfigError(f"{name} must be a positive finite number, got {value!r}")

        if not isinstance(self.complexity, LayoutComplexity):
            raise LayoutConfigError(f"complexity must be a LayoutComplexity, got {self.complexity!r}")

        if self.max_grid_radius is not None:
            if (not isinstance(self.max_grid_radius, numbers.Integral)
                    or isinstance(self.max_grid_radius, bool)
                    or self.max_grid_radius < 0):
                raise LayoutConfigError(
                    f"max_grid_radius must be a non-negative int, got {self.max_grid_radius!r}"
                )

        if self.seed is not None:
            if not _is_real(self.seed) or not math.isfinite(self.seed):
                raise LayoutConfigError(f"seed must be a finite number, got {self.seed!r}")

    def with_overrides(self, **overrides: Any) -> 'GallerySettings':
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise LayoutConfigError(f"Unknown settings: {sorted(unknown)}")
        return replace(self, **overrides)

    @classmethod
    def from_options(cls, options: Optional[Dict[str, Any]] = None, **overrides: Any) -> 'GallerySettings':
        """Build settings from a camelCase options dict plus snake_case overrides.

        Missing options keep their defaults; ``None`` values are treated as
        missing except for ``roomSize`` where ``None`` means auto.
        """
        kwargs: Dict[str, Any] = {}
        for key, value in (options or {}).items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in _OPTION_ALIASES.values():
                raise LayoutConfigError(f"Unknown option '{key}'")
            if value is None and name not in ('room_size', 'seed', 'max_grid_radius'):
                continue
            kwargs[name] = value
        settings = cls(**kwargs)
        if overrides:
            settings = settings.with_overrides(**overrides)
        return settings
