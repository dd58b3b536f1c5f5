"""
Validation package for generated gallery layouts.

Usage:
    from gallery_layout.validation import validate_layout

    result = validate_layout(layout)
    if result.failed:
        print(result.report())
"""

from .core import Severity, ValidationIssue, ValidationResult, ValidationError
from .layout_checks import (
    check_connections, check_placements, check_report, check_rooms, validate_layout,
)

__all__ = [
    'Severity',
    'ValidationIssue',
    'ValidationResult',
    'ValidationError',
    'check_connections',
    'check_placements',
    'check_report',
    'check_rooms',
    'validate_layout',
]
