# palette_lut/__init__.py
"""
palette_lut package.

Purpose:
  Encode PNG images as LUT coordinates plus one shared colour lookup image,
  so a shader can rebuild (or swap) colours at runtime. See lut_encode.py for CLI.

Public API:
  PaletteRegistry  : bounded colour -> slot grid, filled row-major.
  encode_image     : rewrite an RGBA array as slot coordinates.
  materialize_lut  : registry -> LUT RGBA array (1 row when possible).
  reconstruct_rgb  : sample the LUT with encoded pixels.
  run_target       : full file/directory run with one registry.
  errors           : CapacityExceeded, ImageReadError, TargetError, VerifyError.

Quick start:
  from palette_lut import PaletteRegistry, encode_image, materialize_lut
  reg = PaletteRegistry()
  encoded = encode_image(rgba, reg)
  lut = materialize_lut(reg)
"""

__version__ = "0.1.0"

from . import constants
from . import core_types
from . import errors
from . import utils

from .core_types import PaletteSlot
from .errors import (
    CapacityExceeded,
    ImageReadError,
    PaletteLutError,
    TargetError,
    VerifyError,
)
from .registry import PaletteRegistry
from .encode import encode_image
from .lut import materialize_lut
from .decode import reconstruct_rgb
from .run import run_target

__all__ = [
    "__version__",
    "constants",
    "core_types",
    "errors",
    "utils",
    "PaletteSlot",
    "PaletteLutError",
    "CapacityExceeded",
    "ImageReadError",
    "TargetError",
    "VerifyError",
    "PaletteRegistry",
    "encode_image",
    "materialize_lut",
    "reconstruct_rgb",
    "run_target",
]
