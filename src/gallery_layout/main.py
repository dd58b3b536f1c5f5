#!/usr/bin/env python3
"""
Gallery Layout Generator - Command Line Entry Point

Generates a layout for a number of items and prints it as JSON, Graphviz
DOT, or an ASCII floor plan.

Example
-------
    gallery-layout 12 --items-per-room 4 --complexity simple --format ascii
    gallery-layout 40 --seed 42 --format dot | neato -n -Tpng > plan.png
"""

import argparse
import logging
import sys
from typing import List, Optional

from gallery_layout.conversion.layout_export import (
    export_layout_dot, export_layout_json, render_ascii,
)
from gallery_layout.generators.gallery import (
    GalleryGenerator, GallerySettings, LayoutComplexity, LayoutConfigError,
)
from gallery_layout.validation import validate_layout

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gallery-layout",
        description="Generate a procedural gallery floor plan.",
    )
    parser.add_argument("item_count", type=int, help="Number of items to hang")
    parser.add_argument("--items-per-room", type=int, default=4)
    parser.add_argument("--room-size", type=float, default=None,
                        help="Room edge length (default: derived from items per room)")
    parser.add_argument("--hallway-width", type=float, default=5.0)
    parser.add_argument("--wall-height", type=float, default=5.0)
    parser.add_argument("--complexity", choices=[c.value for c in LayoutComplexity],
                        default=LayoutComplexity.DEFAULT.value)
    parser.add_argument("--seed", type=float, default=None,
                        help="Seed for reproducible layouts (default: random)")
    parser.add_argument("--max-grid-radius", type=int, default=None,
                        help="Limit rooms to this many grid steps from the entry")
    parser.add_argument("--format", choices=["json", "dot", "ascii"], default="json")
    parser.add_argument("--validate", action="store_true",
                        help="Check layout invariants and exit non-zero on failure")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main command line entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = GallerySettings(
            items_per_room=args.items_per_room,
            room_size=args.room_size,
            hallway_width=args.hallway_width,
            wall_height=args.wall_height,
            complexity=args.complexity,
            seed=args.seed,
            max_grid_radius=args.max_grid_radius,
        )
        layout = GalleryGenerator(settings).generate(args.item_count)
    except LayoutConfigError as e:
        logger.error(str(e))
        return 2

    if args.format == "dot":
        print(export_layout_dot(layout))
    elif args.format == "ascii":
        print(render_ascii(layout))
    else:
        print(export_layout_json(layout))

    if args.validate:
        result = validate_layout(layout)
        print(result.report(), file=sys.stderr)
        if result.failed:
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
