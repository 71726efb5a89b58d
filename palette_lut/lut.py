# palette_lut/lut.py
from __future__ import annotations

"""
LUT materializer.

Turns a finished PaletteRegistry into the lookup image:
  - (1, width, 4) when every assigned slot is in row 0
  - (height, width, 4) otherwise
Assigned slots hold their colour (alpha 255). Everything else is SENTINEL_RGBA.
"""

from typing import Tuple

import numpy as np

from .constants import LUT_ALPHA, SENTINEL_RGBA
from .core_types import U8RGBA
from .registry import PaletteRegistry


def lut_shape(registry: PaletteRegistry) -> Tuple[int, int]:
    """(rows, columns) of the LUT image the registry would produce."""
    rows = 1 if registry.is_single_row else registry.height
    return rows, registry.width


def materialize_lut(registry: PaletteRegistry) -> U8RGBA:
    """Build the uint8 RGBA LUT for the registry's current state. Pure read."""
    rows, columns = lut_shape(registry)
    lut = np.empty((rows, columns, 4), dtype=np.uint8)
    lut[...] = np.array(SENTINEL_RGBA, dtype=np.uint8)

    # Slots are contiguous from (0, 0), so row-major order is assignment order.
    count = registry.count
    if count:
        flat = lut.reshape(-1, 4)
        flat[:count, :3] = np.array(registry.colors(), dtype=np.uint8).reshape(-1, 3)
        flat[:count, 3] = LUT_ALPHA
    return lut


__all__ = ["lut_shape", "materialize_lut"]
