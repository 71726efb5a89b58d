# palette_lut/decode.py
from __future__ import annotations

"""
Inverse of the encoder: read a slot back out of encoded R/G and sample the LUT.

Used to verify outputs after a run. Exact for grids up to 256x256; larger
grids lose precision in the 8-bit channels.
"""

import numpy as np

from .constants import CHANNEL_LEVELS
from .core_types import PaletteSlot, U8Image, U8RGBA, assert_u8_rgba


def decode_slot_channels(red: int, green: int, width: int, height: int) -> PaletteSlot:
    """Slot encoded by channel values (red, green) for a width x height grid."""
    column = -((-red * width) // CHANNEL_LEVELS)
    row = -((-green * height) // CHANNEL_LEVELS)
    return PaletteSlot(column, row)


def reconstruct_rgb(
    encoded: np.ndarray, lut: np.ndarray, width: int, height: int
) -> U8Image:
    """
    Look every encoded pixel up in the LUT.

    Args:
      encoded : uint8 [H,W,4] encoder output
      lut     : uint8 [1 or height, width, 4] materialized LUT
    Returns:
      uint8 [H,W,3] reconstructed colours
    """
    enc = assert_u8_rgba(encoded)
    table = assert_u8_rgba(lut)
    if table.shape[1] != width or table.shape[0] not in (1, height):
        raise ValueError(
            f"LUT shape {table.shape[:2]} does not match a {width}x{height} grid"
        )

    red = enc[..., 0].astype(np.int64)
    green = enc[..., 1].astype(np.int64)
    columns = -((-red * width) // CHANNEL_LEVELS)
    rows = -((-green * height) // CHANNEL_LEVELS)
    columns = np.clip(columns, 0, width - 1)
    rows = np.clip(rows, 0, table.shape[0] - 1)
    return table[rows, columns, :3]


def count_mismatches(
    source: np.ndarray, encoded: np.ndarray, lut: np.ndarray, width: int, height: int
) -> int:
    """Pixels whose LUT colour differs from the source RGB (alpha ignored)."""
    src = assert_u8_rgba(source)
    if src.shape != encoded.shape:
        raise ValueError(f"shape mismatch: {src.shape} vs {encoded.shape}")
    decoded = reconstruct_rgb(encoded, lut, width, height)
    return int(np.count_nonzero(np.any(decoded != src[..., :3], axis=-1)))


__all__ = ["decode_slot_channels", "reconstruct_rgb", "count_mismatches"]
