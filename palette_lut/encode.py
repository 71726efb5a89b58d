# palette_lut/encode.py
from __future__ import annotations

"""
Pixel encoder.

Rewrites every pixel of an RGBA image as the LUT coordinate of its colour:
  R = column / width mapped onto the 8-bit channel range
  G = row / height mapped onto the 8-bit channel range
  B = 0
  A = source alpha, unchanged

Colours are offered to the registry in row-major first-occurrence order, so
slot assignment matches a plain pixel-by-pixel scan.
"""

from typing import Tuple

import numpy as np

from .constants import CHANNEL_LEVELS
from .core_types import RGBTuple, U8RGBA, assert_u8_rgba
from .registry import PaletteRegistry


def encode_slot_channels(
    column: int, row: int, width: int, height: int
) -> Tuple[int, int]:
    """(R, G) channel values for slot (column, row) of a width x height grid."""
    return (column * CHANNEL_LEVELS) // width, (row * CHANNEL_LEVELS) // height


def _pack_rgb_keys(rgb: np.ndarray) -> np.ndarray:
    """Pack (N,3) uint8 rows into one int32 key per row."""
    rgb32 = rgb.astype(np.int32, copy=False)
    return (rgb32[:, 0] << 16) | (rgb32[:, 1] << 8) | rgb32[:, 2]


def _unique_colours_first_seen(
    rgba: U8RGBA,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Unique RGB rows in row-major first-occurrence order.

    Returns:
      unique_rgb: uint8 [U,3], ordered by first appearance
      inverse_idx: int64 [H*W], index into unique_rgb for every pixel
    """
    flat_rgb = rgba[..., :3].reshape(-1, 3)
    if flat_rgb.shape[0] == 0:
        return np.zeros((0, 3), dtype=np.uint8), np.zeros((0,), dtype=np.int64)

    keys = _pack_rgb_keys(flat_rgb)
    _uniq, first_idx, inverse_idx = np.unique(
        keys, return_index=True, return_inverse=True
    )
    order = np.argsort(first_idx, kind="stable")
    # rank[k] = position of sorted-unique k in first-seen order
    rank = np.empty_like(order)
    rank[order] = np.arange(order.shape[0])
    unique_rgb = flat_rgb[first_idx[order]]
    return (
        unique_rgb.astype(np.uint8, copy=False),
        rank[inverse_idx.reshape(-1)].astype(np.int64, copy=False),
    )


def encode_image(rgba: np.ndarray, registry: PaletteRegistry) -> U8RGBA:
    """
    Encode an RGBA image against the shared registry.

    Args:
      rgba     : uint8 [H,W,4] source pixels (left untouched)
      registry : run-wide PaletteRegistry, mutated for unseen colours
    Returns:
      uint8 [H,W,4] encoded image
    Raises:
      CapacityExceeded if the image brings the run past the grid capacity.
      Colours assigned before the overflow stay registered.
    """
    src = assert_u8_rgba(rgba)
    height, width = src.shape[0], src.shape[1]

    unique_rgb, inverse_idx = _unique_colours_first_seen(src)

    n_uniques = unique_rgb.shape[0]
    red_of = np.empty((n_uniques,), dtype=np.uint8)
    green_of = np.empty((n_uniques,), dtype=np.uint8)
    for i, (r, g, b) in enumerate(unique_rgb.tolist()):
        colour: RGBTuple = (r, g, b)
        slot = registry.lookup_or_assign(colour)
        red, green = encode_slot_channels(
            slot.column, slot.row, registry.width, registry.height
        )
        # Grids wider/taller than the channel range would wrap.
        red_of[i] = min(red, CHANNEL_LEVELS - 1)
        green_of[i] = min(green, CHANNEL_LEVELS - 1)

    out = np.zeros((height, width, 4), dtype=np.uint8)
    if n_uniques:
        out[..., 0] = red_of[inverse_idx].reshape(height, width)
        out[..., 1] = green_of[inverse_idx].reshape(height, width)
    out[..., 3] = src[..., 3]
    return out


def count_unique_colours(rgba: np.ndarray) -> int:
    """Number of distinct RGB values in an RGBA image, alpha ignored."""
    src = assert_u8_rgba(rgba)
    flat_rgb = src[..., :3].reshape(-1, 3)
    if flat_rgb.shape[0] == 0:
        return 0
    return int(np.unique(_pack_rgb_keys(flat_rgb)).shape[0])


__all__ = ["encode_slot_channels", "encode_image", "count_unique_colours"]
