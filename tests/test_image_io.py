from __future__ import annotations

import numpy as np
import pytest
from PIL import Image

from palette_lut.errors import ImageReadError
from palette_lut.image_io import load_png_rgba, save_png_rgba

from conftest import rgba_from_rows, write_png


def test_save_and_load_keep_exact_values(tmp_path):
    img = rgba_from_rows([[(12, 34, 56, 0), (255, 254, 253, 1)], [(0, 0, 0, 255), (7, 8, 9, 200)]])
    path = save_png_rgba(tmp_path / "x.png", img)
    assert np.array_equal(load_png_rgba(path), img)


def test_save_forces_png_suffix(tmp_path):
    path = save_png_rgba(tmp_path / "x.bin", rgba_from_rows([[(1, 2, 3)]]))
    assert path.name == "x.png"
    assert path.exists()


def test_palette_png_loads_as_rgba(tmp_path):
    path = tmp_path / "p.png"
    im = Image.new("P", (2, 1))
    im.putpalette([10, 20, 30, 40, 50, 60] + [0] * (256 * 3 - 6))
    im.putdata([0, 1])
    im.save(path)
    arr = load_png_rgba(path)
    assert arr.shape == (1, 2, 4)
    assert arr[0, 0].tolist() == [10, 20, 30, 255]
    assert arr[0, 1].tolist() == [40, 50, 60, 255]


def test_rejects_other_formats_even_with_png_suffix(tmp_path):
    path = tmp_path / "fake.png"
    Image.new("RGB", (2, 2), (1, 2, 3)).save(path, format="BMP")
    with pytest.raises(ImageReadError, match="not a PNG"):
        load_png_rgba(path)


def test_rejects_garbage(tmp_path):
    path = tmp_path / "junk.png"
    path.write_bytes(b"definitely not an image")
    with pytest.raises(ImageReadError):
        load_png_rgba(path)


def test_truncated_png_is_an_image_read_error(tmp_path):
    noise = np.random.default_rng(3).integers(0, 256, size=(64, 64, 4), dtype=np.uint8)
    path = write_png(tmp_path / "t.png", noise)
    data = path.read_bytes()
    path.write_bytes(data[: len(data) // 2])
    with pytest.raises(ImageReadError):
        load_png_rgba(path)


def test_missing_file(tmp_path):
    with pytest.raises(ImageReadError) as excinfo:
        load_png_rgba(tmp_path / "nope.png")
    assert isinstance(excinfo.value, OSError)
