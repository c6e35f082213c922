"""Directory listings read as a snapshot of typed entries."""

from __future__ import annotations

import enum
import errno
import os
import stat
from dataclasses import dataclass
from typing import Iterator, List, Optional, Union

PathArg = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]

# Longest path the listing accepts, in characters.
NTFS_MAX_PATH = 32768
# Size of the name field of a directory entry.
NAME_MAX = 260


class FileType(enum.IntEnum):
    """Kind of a directory entry."""

    UNKNOWN = 0
    FIFO = 1
    CHR = 2
    DIR = 4
    BLK = 6
    REG = 8
    LNK = 10
    SOCK = 12
    WHT = 14


@dataclass(frozen=True)
class DirEntry:
    """One name found in a directory."""

    name: str
    type: FileType
    off: int = 0

    @property
    def namelen(self) -> int:
        return len(self.name)


def _classify(path: str) -> FileType:
    """Symbolic link, character device, directory, or regular file."""
    try:
        info = os.lstat(path)
    except OSError:
        return FileType.REG
    if stat.S_ISLNK(info.st_mode):
        return FileType.LNK
    if stat.S_ISCHR(info.st_mode):
        return FileType.CHR
    if stat.S_ISDIR(info.st_mode):
        return FileType.DIR
    return FileType.REG


def _closed_error() -> OSError:
    return OSError(errno.EBADF, os.strerror(errno.EBADF))


class Directory:
    """An open directory listing.

    All entries, ``.`` and ``..`` included, are read when the directory is
    opened; later reads walk that snapshot. A path that cannot be listed
    raises :class:`FileNotFoundError`.
    """

    def __init__(self, path: PathArg) -> None:
        name = os.fsdecode(os.fspath(path))
        if len(name) > NTFS_MAX_PATH:
            raise FileNotFoundError(errno.ENOENT, "path too long", name)
        try:
            with os.scandir(name) as found:
                names = sorted(entry.name for entry in found)
        except OSError as exc:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), name) from exc
        self.path = name
        self._entries: List[DirEntry] = [
            DirEntry(".", FileType.DIR),
            DirEntry("..", FileType.DIR),
        ]
        self._entries.extend(
            DirEntry(entry, _classify(os.path.join(name, entry))) for entry in names
        )
        self._index = 0
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise _closed_error()

    def read(self) -> Optional[DirEntry]:
        """The next entry, or None once all have been read."""
        self._check_open()
        if self._index < len(self._entries):
            entry = self._entries[self._index]
            self._index += 1
            return entry
        return None

    def seek(self, offset: int) -> None:
        """Move to entry *offset*; an offset past the last entry is ignored."""
        self._check_open()
        if offset < 0:
            raise ValueError("offset must not be negative")
        if offset < len(self._entries):
            self._index = offset

    def rewind(self) -> None:
        self.seek(0)

    def tell(self) -> int:
        """The number of entries in the listing."""
        self._check_open()
        return len(self._entries)

    def close(self) -> None:
        self._check_open()
        self._closed = True
        self._entries = []
        self._index = 0

    def __iter__(self) -> Iterator[DirEntry]:
        while (entry := self.read()) is not None:
            yield entry

    def __enter__(self) -> "Directory":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._closed:
            self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else f"at {self._index}"
        return f"Directory({self.path!r}, {state})"


def opendir(path: PathArg) -> Directory:
    """Open *path* for listing."""
    return Directory(path)