# palette_lut/image_io.py
from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from .constants import PNG_SUFFIX
from .core_types import U8RGBA, assert_u8_rgba
from .errors import ImageReadError

"""
PNG I/O helpers. Pixels travel as uint8 (H, W, 4) RGBA arrays.

No colour management or EXIF rotation: encoded colours must stay byte-exact.
"""


def is_png_path(path: Path) -> bool:
    return path.suffix.lower() == PNG_SUFFIX


def load_png_rgba(path: Path) -> U8RGBA:
    """
    Decode a PNG into a uint8 (H, W, 4) array.

    Raises ImageReadError for missing, unreadable, malformed or non-PNG files.
    """
    try:
        with Image.open(path) as im:
            if im.format != "PNG":
                raise ImageReadError(path, f"not a PNG (detected {im.format})")
            im.load()
            arr = np.array(im.convert("RGBA"), dtype=np.uint8)
    except UnidentifiedImageError as e:
        raise ImageReadError(path, "unrecognised image data") from e
    except ImageReadError:
        raise
    except Image.DecompressionBombError as e:
        raise ImageReadError(path, str(e)) from e
    except (OSError, ValueError, SyntaxError) as e:
        # Pillow reports truncated/corrupt chunks with any of these.
        raise ImageReadError(path, str(e) or type(e).__name__) from e
    return arr


def save_png_rgba(path: Path, rgba: np.ndarray) -> Path:
    """Write a uint8 (H, W, 4) array as an RGBA PNG. Forces a .png suffix."""
    if not is_png_path(path):
        path = path.with_suffix(PNG_SUFFIX)
    out = np.ascontiguousarray(assert_u8_rgba(rgba))
    Image.fromarray(out).save(path, format="PNG")
    return path


__all__ = ["is_png_path", "load_png_rgba", "save_png_rgba"]
