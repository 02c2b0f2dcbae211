"""Reading fixed-size elements from files, optionally looping at the end."""

from __future__ import annotations

import operator
import os
from collections.abc import MutableSequence
from typing import Any, BinaryIO, Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


def _split(data: bytes, element_size: int) -> list[Any]:
    if element_size == 1:
        return list(data)
    return [data[start : start + element_size] for start in range(0, len(data), element_size)]


class FileReader:
    """Reads a binary file as a sequence of elements of ``element_size`` bytes.

    Positions and sizes are counted in elements. Only whole elements are
    returned by :meth:`read`.
    """

    def __init__(self, path: PathLike, element_size: int = 1) -> None:
        element_size = operator.index(element_size)
        if element_size <= 0:
            raise ValueError("element_size must be positive")
        self._path = os.fspath(path)
        self._element_size = element_size
        self._file: BinaryIO = open(self._path, "rb")

    def file_size(self) -> int:
        """Number of whole elements in the file."""
        return os.path.getsize(self._path) // self._element_size

    def tell(self) -> int:
        """Current position, in elements."""
        return self._file.tell() // self._element_size

    def seek(self, position: int) -> None:
        """Move to the given element position."""
        self._file.seek(operator.index(position) * self._element_size, os.SEEK_SET)

    def rewind(self) -> None:
        """Move back to the start of the file."""
        self._file.seek(0, os.SEEK_SET)

    def eof(self) -> bool:
        """True when the position is at the end of the file."""
        return self.tell() == self.file_size()

    def __bool__(self) -> bool:
        return not self._file.closed and not self.eof()

    def read(self, count: int) -> bytes:
        """Read up to ``count`` elements; return their bytes (whole elements only)."""
        count = operator.index(count)
        if count < 0:
            raise ValueError("count must be non-negative")
        data = self._file.read(count * self._element_size)
        whole = len(data) // self._element_size * self._element_size
        return data[:whole]

    def read_into(self, dest: MutableSequence[Any], count: Optional[int] = None) -> int:
        """Fill the front of ``dest`` with elements; return how many were read.

        Single-byte elements are stored as integers, wider ones as ``bytes``.
        At most ``len(dest)`` elements are read.
        """
        limit = len(dest) if count is None else min(operator.index(count), len(dest))
        elements = _split(self.read(limit), self._element_size)
        for position, element in enumerate(elements):
            dest[position] = element
        return len(elements)

    def close(self) -> None:
        """Close the underlying file."""
        self._file.close()

    def __enter__(self) -> FileReader:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class LoopingFileReader:
    """A :class:`FileReader` that starts over at the end of the file.

    The file appears infinitely long, which is handy for replaying
    captured streams.
    """

    def __init__(self, path: PathLike, element_size: int = 1) -> None:
        self._reader = FileReader(path, element_size)

    def file_size(self) -> int:
        """Number of whole elements in the file."""
        return self._reader.file_size()

    def tell(self) -> int:
        """Current position, in elements."""
        return self._reader.tell()

    def seek(self, position: int) -> None:
        """Move to the given element position."""
        self._reader.seek(position)

    def rewind(self) -> None:
        """Move back to the start of the file."""
        self._reader.rewind()

    def read(self, count: int) -> bytes:
        """Read up to ``count`` elements, rewinding once if already at the end."""
        data = self._reader.read(count)
        if not data and self._reader.eof():
            self.rewind()
            data = self._reader.read(count)
        return data

    def read_into(self, dest: MutableSequence[Any], count: Optional[int] = None) -> int:
        """Fill the front of ``dest``, rewinding once if already at the end."""
        elements_read = self._reader.read_into(dest, count)
        if elements_read == 0 and self._reader.eof():
            self.rewind()
            elements_read = self._reader.read_into(dest, count)
        return elements_read

    def close(self) -> None:
        """Close the underlying file."""
        self._reader.close()

    def __enter__(self) -> LoopingFileReader:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()