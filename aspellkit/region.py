"""Bounded views over a block of bytes."""

from __future__ import annotations

import sys

# Invalid character-set identifier (all bits of a 32-bit value set).
CSID_INVALID = 0xFFFFFFFF


class Region:
    """A read-only window onto a bytes-like object.

    Multi-byte values are read in the machine's native byte order.
    """

    __slots__ = ("_view",)

    def __init__(self, data) -> None:
        view = data if isinstance(data, memoryview) else memoryview(data)
        self._view = view.cast("B") if view.format != "B" or view.ndim != 1 else view

    @property
    def head(self) -> memoryview:
        """The whole region."""
        return self._view

    @property
    def size(self) -> int:
        return len(self._view)

    def __len__(self) -> int:
        return len(self._view)

    def __bytes__(self) -> bytes:
        return self._view.tobytes()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Region):
            return NotImplemented
        return self._view == other._view

    def __repr__(self) -> str:
        return f"Region(size={self.size})"

    def check(self, offset: int, size: int) -> bool:
        """Whether *size* bytes starting at *offset* lie inside the region."""
        if offset < 0 or size < 0:
            return False
        return self.size >= offset + size

    def offset(self, pos: int) -> memoryview:
        """The region's contents from *pos* to its end."""
        if not 0 <= pos <= self.size:
            raise IndexError(f"position {pos} outside region of size {self.size}")
        return self._view[pos:]

    def _read(self, pos: int, width: int) -> int:
        if not self.check(pos, width):
            raise IndexError(
                f"cannot read {width} byte(s) at {pos} from region of size {self.size}"
            )
        return int.from_bytes(self._view[pos:pos + width], sys.byteorder)

    def peek8(self, pos: int) -> int:
        return self._read(pos, 1)

    def peek16(self, pos: int) -> int:
        return self._read(pos, 2)

    def peek32(self, pos: int) -> int:
        return self._read(pos, 4)

    def subregion(self, offset: int, size: int) -> "Region":
        """A new region of *size* bytes at *offset*; ValueError if it does not fit."""
        if not self.check(offset, size):
            raise ValueError(
                f"subregion {offset}+{size} does not fit in region of size {self.size}"
            )
        return Region(self._view[offset:offset + size])