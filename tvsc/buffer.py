"""Fixed-size, bounds-checked buffer with bulk read and write operations."""

from __future__ import annotations

import operator
from collections.abc import Iterator, MutableSequence, Sequence
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_ROW_SIZE = 10


class Buffer(Generic[T]):
    """A fixed number of elements with bounds checking and bulk copies.

    Every slot starts out holding ``default``; :meth:`clear` restores it.
    Indices are checked on every access and negative indices are rejected.
    """

    __slots__ = ("_elements", "_default")

    def __init__(self, size: int, default: T = 0) -> None:  # type: ignore[assignment]
        size = operator.index(size)
        if size <= 0:
            raise ValueError("Number of elements in the buffer must be positive")
        self._default = default
        self._elements: list[T] = [default] * size

    def _validate_index(self, index: int) -> int:
        index = operator.index(index)
        if index < 0 or index >= len(self._elements):
            raise IndexError(
                f"Invalid index {index} (NUM_ELEMENTS: {len(self._elements)})"
            )
        return index

    def _validate_range(self, offset: int, count: int) -> tuple[int, int]:
        offset = self._validate_index(offset)
        count = operator.index(count)
        self._validate_index(offset + count - 1)
        return offset, count

    def size(self) -> int:
        """Number of elements the buffer holds."""
        return len(self._elements)

    def max_size(self) -> int:
        """Maximum number of elements; always equal to :meth:`size`."""
        return len(self._elements)

    def clear(self) -> None:
        """Reset every element to the default value."""
        self._elements = [self._default] * len(self._elements)

    def read(self, index: int) -> T:
        """Return the element at ``index``."""
        return self._elements[self._validate_index(index)]

    def read_into(self, offset: int, count: int, dest: MutableSequence[T]) -> None:
        """Copy ``count`` elements starting at ``offset`` into the front of ``dest``."""
        offset, count = self._validate_range(offset, count)
        if len(dest) < count:
            raise OverflowError(
                f"dest has insufficient space ({count} vs {len(dest)})"
            )
        dest[:count] = self._elements[offset : offset + count]

    def read_slice(self, offset: int, count: int) -> list[T]:
        """Return a list of ``count`` elements starting at ``offset``."""
        offset, count = self._validate_range(offset, count)
        return self._elements[offset : offset + count]

    def write(self, index: int, element: T) -> None:
        """Store ``element`` at ``index``."""
        self._elements[self._validate_index(index)] = element

    def write_from(self, offset: int, count: int, src: Sequence[T]) -> None:
        """Copy the first ``count`` elements of ``src`` into the buffer at ``offset``."""
        offset, count = self._validate_range(offset, count)
        if len(src) < count:
            raise OverflowError(
                f"src has insufficient space ({count} vs {len(src)})"
            )
        self._elements[offset : offset + count] = list(src[:count])

    def compare(self, other: Buffer[T], count: int | None = None) -> int:
        """Compare element by element over the common prefix.

        Returns -1, 0 or 1. At most ``count`` elements are compared, and never
        more than the shorter buffer holds.
        """
        limit = min(len(self._elements), len(other._elements))
        if count is not None:
            limit = min(limit, operator.index(count))
        for lhs, rhs in zip(self._elements[:limit], other._elements[:limit]):
            if lhs == rhs:
                continue
            return -1 if lhs < rhs else 1
        return 0

    def is_equal(self, other: Buffer[T], count: int | None = None) -> bool:
        """True if the compared prefix of both buffers is equal."""
        return self.compare(other, count) == 0

    def __getitem__(self, index: int) -> T:
        return self._elements[self._validate_index(index)]

    def __setitem__(self, index: int, element: T) -> None:
        self._elements[self._validate_index(index)] = element

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Buffer):
            return NotImplemented
        return self.compare(other) == 0

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Buffer(size={len(self._elements)}, elements={self._elements!r})"


def to_string(buffer: Buffer[Any]) -> str:
    """Render the buffer as rows of ten space-separated elements."""
    elements = list(buffer)
    rows = (
        "".join(f"{element} " for element in elements[start : start + _ROW_SIZE]) + "\n"
        for start in range(0, len(elements), _ROW_SIZE)
    )
    return "".join(rows)