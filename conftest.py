"""Pytest configuration for ensuring local package imports."""
from __future__ import annotations

import sys
from pathlib import Path


def _ensure_src_on_syspath() -> None:
    src_root = Path(__file__).resolve().parent / "src"
    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_src_on_syspath()
