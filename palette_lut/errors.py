# palette_lut/errors.py
from __future__ import annotations

"""
Exception types raised by the encoder, the registry and the run driver.
"""

from pathlib import Path
from typing import Optional


class PaletteLutError(Exception):
    """Base class for every error that aborts a run."""


class CapacityExceeded(PaletteLutError, RuntimeError):
    """More distinct colours than the palette grid can hold."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"more than {capacity:,} colours found")
        self.capacity = capacity


class ImageReadError(PaletteLutError, OSError):
    """Input file is missing, unreadable, malformed or not a PNG."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class TargetError(PaletteLutError, ValueError):
    """Command-line target is missing or is neither a file nor a directory."""

    def __init__(self, target: Optional[Path], reason: str) -> None:
        super().__init__(f"{target}: {reason}" if target is not None else reason)
        self.target = target
        self.reason = reason


class VerifyError(PaletteLutError):
    """Decoded output does not reproduce the source colours."""

    def __init__(self, path: Path, mismatches: int) -> None:
        super().__init__(f"{path}: {mismatches:,} pixels do not round-trip")
        self.path = path
        self.mismatches = mismatches


__all__ = [
    "PaletteLutError",
    "CapacityExceeded",
    "ImageReadError",
    "TargetError",
    "VerifyError",
]
