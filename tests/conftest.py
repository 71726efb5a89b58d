from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple

import numpy as np
import pytest
from PIL import Image

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)


def rgba_from_rows(rows: Sequence[Sequence[Tuple[int, ...]]], alpha: int = 255) -> np.ndarray:
    """Build a uint8 (H,W,4) array from rows of RGB or RGBA tuples."""
    out = np.zeros((len(rows), len(rows[0]), 4), dtype=np.uint8)
    for y, row in enumerate(rows):
        for x, px in enumerate(row):
            out[y, x, :3] = px[:3]
            out[y, x, 3] = px[3] if len(px) > 3 else alpha
    return out


def distinct_colours(n: int, offset: int = 0) -> List[Tuple[int, int, int]]:
    """n distinct RGB tuples, counting up through the 24-bit space from offset."""
    return [((i >> 16) & 255, (i >> 8) & 255, i & 255) for i in range(offset, offset + n)]


def strip_image(colours: Sequence[Tuple[int, int, int]]) -> np.ndarray:
    """1 x N RGBA image, one colour per pixel."""
    return rgba_from_rows([list(colours)])


def write_png(path: Path, rgba: np.ndarray) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(np.ascontiguousarray(rgba)).save(path, format="PNG")
    return path


def read_png(path: Path) -> np.ndarray:
    with Image.open(path) as im:
        return np.array(im.convert("RGBA"), dtype=np.uint8)


@pytest.fixture
def scenario_rgba() -> np.ndarray:
    """2x2 image: red, red / green, blue."""
    return rgba_from_rows([[RED, RED], [GREEN, BLUE]])
