from __future__ import annotations

import numpy as np
import pytest
from PIL import Image

import lut_encode

from conftest import RED, GREEN, read_png, rgba_from_rows, write_png


def test_no_target_prints_usage(capsys):
    lut_encode.main([])
    assert "usage: palette-lut" in capsys.readouterr().out


def test_missing_target_exits_2(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        lut_encode.main([str(tmp_path / "missing")])
    assert excinfo.value.code == 2
    assert "[error]" in capsys.readouterr().err


def test_bad_input_exits_1(tmp_path, capsys):
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"nope")
    with pytest.raises(SystemExit) as excinfo:
        lut_encode.main([str(bad)])
    assert excinfo.value.code == 1
    assert "bad.png" in capsys.readouterr().err


def test_directory_target_with_verify(tmp_path):
    root = tmp_path / "pack"
    write_png(root / "x.png", rgba_from_rows([[RED, GREEN, RED]]))
    lut_encode.main([str(root), "--verify"])

    out_root = tmp_path / "pack_processed"
    assert read_png(out_root / "x.png")[0, :, 0].tolist() == [0, 1, 0]
    assert read_png(out_root / "pack_lut_default.png").shape == (1, 256, 4)


def test_oversized_image_exits_1(tmp_path, capsys, monkeypatch):
    src = write_png(tmp_path / "big.png", np.full((40, 40, 4), 9, dtype=np.uint8))
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)
    with pytest.raises(SystemExit) as excinfo:
        lut_encode.main([str(src)])
    assert excinfo.value.code == 1
    assert "[error]" in capsys.readouterr().err
