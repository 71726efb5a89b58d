# palette_lut/constants.py
"""
Grid dimensions, channel range and file naming used across the project.

- LUT_WIDTH, LUT_HEIGHT: palette grid size (slots per row, rows)
- CHANNEL_LEVELS: distinct values of an 8-bit channel
- SENTINEL_RGBA: fill for unassigned LUT slots
- PNG_SUFFIX, PROCESSED_SUFFIX, LUT_SUFFIX: output naming
"""
from __future__ import annotations

from typing import Tuple

# =========================
# Palette grid
# =========================
LUT_WIDTH: int = 256
LUT_HEIGHT: int = 256

CHANNEL_LEVELS: int = 256

SENTINEL_RGBA: Tuple[int, int, int, int] = (0, 0, 0, 255)
LUT_ALPHA: int = 255

# =========================
# File naming
# =========================
PNG_SUFFIX: str = ".png"
PROCESSED_SUFFIX: str = "_processed"
LUT_SUFFIX: str = "_lut_default"

__all__ = [
    "LUT_WIDTH",
    "LUT_HEIGHT",
    "CHANNEL_LEVELS",
    "SENTINEL_RGBA",
    "LUT_ALPHA",
    "PNG_SUFFIX",
    "PROCESSED_SUFFIX",
    "LUT_SUFFIX",
]
