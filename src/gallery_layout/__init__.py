"""
Gallery Layout Generator

Procedural floor plans for explorable galleries: rooms on a grid, hallways
between neighbours, and a wall slot for every item.
"""

from .generators.gallery import GalleryGenerator, GallerySettings, LayoutConfigError, generate
from .generators.layout import GalleryLayout

__all__ = [
    'GalleryGenerator',
    'GallerySettings',
    'GalleryLayout',
    'LayoutConfigError',
    'generate',
]

__version__ = '1.0.0'
