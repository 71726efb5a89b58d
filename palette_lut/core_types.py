# palette_lut/core_types.py
from __future__ import annotations

"""
Core type aliases, small value objects, and lightweight helpers.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

# Basic aliases

RGBTuple = Tuple[int, int, int]

U8Image = NDArray[np.uint8]  # (H, W, 3)
U8RGBA = NDArray[np.uint8]  # (H, W, 4)

# Value objects


@dataclass(frozen=True, order=True)
class PaletteSlot:
    """(column, row) coordinate of one colour in the LUT grid."""

    column: int
    row: int

    def index(self, width: int) -> int:
        """Row-major position of the slot in a grid `width` slots wide."""
        return self.row * width + self.column


# Small helpers


def assert_u8_rgba(image: np.ndarray) -> U8RGBA:
    """Validate a uint8 (H,W,4) image and return it typed as U8RGBA."""
    if image.dtype != np.uint8 or image.ndim != 3 or image.shape[-1] != 4:
        raise TypeError("expected uint8 (H,W,4) image")
    return image  # type: ignore[return-value]


__all__ = [
    # aliases / types
    "RGBTuple",
    "U8Image",
    "U8RGBA",
    # value objects
    "PaletteSlot",
    # helpers
    "assert_u8_rgba",
]
