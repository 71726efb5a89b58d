# palette_lut/registry.py
from __future__ import annotations

"""
Palette registry.

Hands out LUT grid slots to colours in first-seen order:
  (0, 0), (1, 0), ... (width-1, 0), (0, 1), ...

One registry lives for exactly one run: construct, feed every pixel colour
through lookup_or_assign(), then hand it to materialize_lut().
"""

from typing import Dict, Iterator, List, Optional, Tuple

from .constants import LUT_HEIGHT, LUT_WIDTH
from .core_types import PaletteSlot, RGBTuple
from .errors import CapacityExceeded


class PaletteRegistry:
    """Bounded width x height grid of colour slots, filled row-major."""

    def __init__(self, width: int = LUT_WIDTH, height: int = LUT_HEIGHT) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"grid must be at least 1x1, got {width}x{height}")
        self._width = int(width)
        self._height = int(height)
        self._slots: Dict[RGBTuple, PaletteSlot] = {}
        self._next_column = 0
        self._next_row = 0

    # Read-only views

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def capacity(self) -> int:
        return self._width * self._height

    @property
    def count(self) -> int:
        """Number of assigned slots."""
        return len(self._slots)

    @property
    def cursor(self) -> Tuple[int, int]:
        """(next_column, next_row) of the next free slot."""
        return self._next_column, self._next_row

    @property
    def is_single_row(self) -> bool:
        """True while every assigned slot sits in row 0 (a full row included)."""
        return len(self._slots) <= self._width

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, color: object) -> bool:
        return color in self._slots

    def slot_of(self, color: RGBTuple) -> Optional[PaletteSlot]:
        """Slot for a registered colour, or None. Never assigns."""
        return self._slots.get(color)

    def colors(self) -> List[RGBTuple]:
        """Registered colours in assignment order."""
        return list(self._slots)

    def items(self) -> Iterator[Tuple[RGBTuple, PaletteSlot]]:
        return iter(self._slots.items())

    # Mutation

    def lookup_or_assign(self, color: RGBTuple) -> PaletteSlot:
        """
        Return the slot for `color`, assigning the next free one if unseen.

        Raises CapacityExceeded when every slot is already taken; the registry
        is left unchanged in that case.
        """
        slot = self._slots.get(color)
        if slot is not None:
            return slot

        if self._next_row >= self._height:
            raise CapacityExceeded(self.capacity)

        slot = PaletteSlot(self._next_column, self._next_row)
        self._slots[color] = slot

        self._next_column += 1
        if self._next_column >= self._width:
            self._next_column = 0
            self._next_row += 1
        return slot

    def __repr__(self) -> str:
        return (
            f"PaletteRegistry({self._width}x{self._height}, "
            f"count={self.count}, cursor={self.cursor})"
        )


__all__ = ["PaletteRegistry"]
