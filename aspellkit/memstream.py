"""A read cursor over a block of bytes, with line and token helpers."""

from __future__ import annotations

import os
from typing import Iterator, Optional, Tuple, Union

from . import bcs
from .region import Region

_COMMENT = ord("#")

Source = Union[bytes, bytearray, memoryview, Region]


def _skip(buf: bytes, index: int, space: bool) -> int:
    """Advance *index* over whitespace (or non-whitespace), stopping at NUL."""
    end = len(buf)
    while index < end and buf[index] and bcs.isspace(buf[index]) == space:
        index += 1
    return index


class MemoryStream:
    """A position within a region of bytes.

    Reads that find nothing left return ``None``; fixed-width integer
    reads that would run past the end raise :class:`EOFError`.
    """

    __slots__ = ("_region", "_pos")

    def __init__(self, data: Source) -> None:
        self._region = data if isinstance(data, Region) else Region(data)
        self._pos = 0

    @property
    def region(self) -> Region:
        return self._region

    @property
    def size(self) -> int:
        return self._region.size

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.getln()) is not None:
            yield line

    def __repr__(self) -> str:
        return f"MemoryStream(pos={self._pos}, size={self.size})"

    def _rest(self) -> bytes:
        return bytes(self._region.head[self._pos:])

    # -- lines ---------------------------------------------------------

    def getln(self) -> Optional[bytes]:
        """Return the next line, its end-of-line byte included, or None at the end."""
        if self._pos >= self.size:
            return None
        rest = self._rest()
        length = next(
            (i + 1 for i, byte in enumerate(rest) if bcs.iseol(byte)), len(rest)
        )
        self._pos += length
        return rest[:length]

    def getln_region(self) -> Optional[Region]:
        """Like :meth:`getln`, returning the line as a Region."""
        start = self._pos
        line = self.getln()
        if line is None:
            return None
        return self._region.subregion(start, len(line))

    def matchline(self, key, case_sensitive: bool = True) -> Optional[bytes]:
        """Find the next line whose first word is *key* and return what follows it.

        Text after ``#`` is a comment, blank lines are ignored, and the
        value returned has no leading or trailing whitespace. Returns None
        when no remaining line matches.
        """
        if isinstance(key, str):
            key = key.encode("utf-8")
        key = bytes(key)
        while (line := self.getln()) is not None:
            comment = line.find(_COMMENT)
            if comment >= 0:
                line = line[:comment]
            line = bcs.trunc_rws(line)
            if not line:
                continue
            start = _skip(line, 0, space=True)
            end = _skip(line, start, space=False)
            word = line[start:end]
            if len(word) != len(key):
                continue
            if case_sensitive:
                matched = word == key
            else:
                matched = bcs.strncasecmp(key, word, len(key)) == 0
            if matched:
                return line[_skip(line, end, space=True):]
        return None

    def chr(self, ch) -> Optional[Tuple[Region, bool]]:
        """Read up to the next *ch*.

        Returns ``(region, found)``: the bytes before *ch* and True, with the
        position moved past *ch*; or, if *ch* does not occur, the rest of the
        stream and False, with the position moved to the end. Returns None
        when the stream is already at its end.
        """
        if isinstance(ch, str):
            ch = ord(ch)
        if self._pos >= self.size:
            return None
        start = self._pos
        rest = self._rest()
        index = rest.find(bytes([ch]))
        if index < 0:
            self._pos = self.size
            return self._region.subregion(start, len(rest)), False
        self._pos += index + 1
        return self._region.subregion(start, index), True

    def skip_ws(self) -> None:
        """Move past any whitespace at the current position."""
        while (ch := self.peek()) is not None and bcs.isspace(ch):
            self.getc()

    # -- position ------------------------------------------------------

    def iseof(self) -> bool:
        return self._pos >= self.size

    def rewind(self) -> None:
        self._pos = 0

    def tell(self) -> int:
        return self._pos

    def remainder(self) -> int:
        """Number of bytes left after the current position."""
        return max(self.size - self._pos, 0)

    def seek(self, pos: int, whence: int = os.SEEK_SET) -> int:
        """Move the position; ValueError if the target lies outside the stream.

        With SEEK_SET and SEEK_CUR the target must be a byte inside the
        stream; with SEEK_END *pos* counts back from the end and may reach
        the very end. Returns the new position.
        """
        size = self.size
        if whence == os.SEEK_SET:
            target = pos
            if not 0 <= target < size:
                raise ValueError(f"seek to {target} outside stream of size {size}")
        elif whence == os.SEEK_CUR:
            target = self._pos + pos
            if not 0 <= target < size:
                raise ValueError(f"seek to {target} outside stream of size {size}")
        elif whence == os.SEEK_END:
            if not 0 <= pos <= size:
                raise ValueError(f"seek {pos} back from end of stream of size {size}")
            target = size - pos
        else:
            raise ValueError(f"invalid whence: {whence}")
        self._pos = target
        return target

    # -- bytes ---------------------------------------------------------

    def getc(self) -> Optional[int]:
        """Read one byte, or None at the end."""
        if self.iseof():
            return None
        value = self._region.peek8(self._pos)
        self._pos += 1
        return value

    def ungetc(self, ch: Optional[int]) -> None:
        """Step back one byte, unless *ch* is None or the stream is at its start."""
        if ch is not None and self._pos > 0:
            self._pos -= 1

    def peek(self) -> Optional[int]:
        """The byte at the current position, or None at the end."""
        if self.iseof():
            return None
        return self._region.peek8(self._pos)

    def getregion(self, size: int) -> Optional[Region]:
        """Read *size* bytes as a Region, or None if fewer remain."""
        if size < 0 or self._pos + size > self.size:
            return None
        region = self._region.subregion(self._pos, size)
        self._pos += size
        return region

    def _get(self, width: int, advance: int) -> int:
        if self._pos + width > self.size:
            raise EOFError(
                f"cannot read {width} byte(s) at {self._pos} from stream of size {self.size}"
            )
        value = self._region._read(self._pos, width)
        self._pos += advance
        return value

    def get8(self) -> int:
        """Read one byte; the position moves on by two bytes."""
        return self._get(1, 2)

    def get16(self) -> int:
        """Read a native-order 16-bit value."""
        return self._get(2, 2)

    def get32(self) -> int:
        """Read a native-order 32-bit value."""
        return self._get(4, 4)