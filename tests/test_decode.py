from __future__ import annotations

import numpy as np
import pytest

from palette_lut.core_types import PaletteSlot
from palette_lut.decode import count_mismatches, decode_slot_channels, reconstruct_rgb
from palette_lut.encode import encode_image, encode_slot_channels
from palette_lut.lut import materialize_lut
from palette_lut.registry import PaletteRegistry

from conftest import distinct_colours, strip_image


@pytest.mark.parametrize("size", [1, 3, 4, 7, 100, 256])
def test_decode_inverts_encode_for_every_slot(size):
    for i in range(size):
        r, g = encode_slot_channels(i, i, size, size)
        assert decode_slot_channels(r, g, size, size) == PaletteSlot(i, i)


def test_round_trip_single_row_lut():
    rng = np.random.default_rng(7)
    palette = np.array(distinct_colours(40, offset=1000), dtype=np.uint8)
    picks = rng.integers(0, palette.shape[0], size=(16, 16))
    src = np.zeros((16, 16, 4), dtype=np.uint8)
    src[..., :3] = palette[picks]
    src[..., 3] = rng.integers(0, 256, size=(16, 16), dtype=np.uint8)

    reg = PaletteRegistry()
    encoded = encode_image(src, reg)
    lut = materialize_lut(reg)
    assert lut.shape[0] == 1
    assert np.array_equal(reconstruct_rgb(encoded, lut, 256, 256), src[..., :3])
    assert count_mismatches(src, encoded, lut, 256, 256) == 0


def test_round_trip_two_dimensional_lut():
    src = strip_image(distinct_colours(1000, offset=5))
    reg = PaletteRegistry()
    encoded = encode_image(src, reg)
    lut = materialize_lut(reg)
    assert lut.shape[0] == 256
    assert np.array_equal(reconstruct_rgb(encoded, lut, 256, 256), src[..., :3])


def test_round_trip_on_small_grid():
    src = strip_image(distinct_colours(12, offset=1))
    reg = PaletteRegistry(width=5, height=3)
    encoded = encode_image(src, reg)
    lut = materialize_lut(reg)
    assert count_mismatches(src, encoded, lut, 5, 3) == 0


def test_tampered_lut_is_detected():
    src = strip_image(distinct_colours(3, offset=1))
    reg = PaletteRegistry()
    encoded = encode_image(src, reg)
    lut = materialize_lut(reg)
    lut[0, 1, :3] = (9, 9, 9)
    assert count_mismatches(src, encoded, lut, 256, 256) == 1


def test_rejects_lut_of_wrong_width():
    src = strip_image(distinct_colours(3))
    encoded = encode_image(src, PaletteRegistry())
    with pytest.raises(ValueError):
        reconstruct_rgb(encoded, np.zeros((1, 8, 4), dtype=np.uint8), 256, 256)
