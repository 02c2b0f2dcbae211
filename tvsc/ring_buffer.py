"""Paged ring buffer that notifies a data source and a data sink."""

from __future__ import annotations

import operator
import threading
from collections.abc import Callable, MutableSequence, Sequence
from typing import Any, Generic, Optional, TypeVar

from tvsc.buffer import Buffer

T = TypeVar("T")

RingCallback = Callable[["RingBuffer[Any]"], None]

_DEFAULT_ELEMENT = 0


class RingBuffer(Generic[T]):
    """Paged ring buffer with an optional source and sink callback.

    When at least a page (the MTU) of data is buffered, the data-available
    callback is called. When there is room for at least a page of new data,
    the data-needed callback is called. Both are optional.

    With ``prioritize_old_elements`` true, supplying more data than the ring
    can hold is refused (tail drop). With it false, the oldest elements are
    dropped to make room for the new ones.

    Transfers never cross a page boundary, so a single ``consume`` or
    ``supply`` call may move fewer elements than requested.
    """

    def __init__(
        self,
        page_size: int,
        num_pages: int,
        prioritize_old_elements: bool = True,
        data_needed_callback: Optional[RingCallback] = None,
        data_available_callback: Optional[RingCallback] = None,
    ) -> None:
        page_size = operator.index(page_size)
        num_pages = operator.index(num_pages)
        if page_size <= 0:
            raise ValueError("Page size must be positive")
        if num_pages <= 0:
            raise ValueError("Number of pages must be positive")
        self._page_size = page_size
        self._num_pages = num_pages
        self._prioritize_old_elements = bool(prioritize_old_elements)
        self._pages: list[Buffer[T]] = [
            Buffer(page_size, _DEFAULT_ELEMENT) for _ in range(num_pages)
        ]
        # Monotonically increasing counts of elements read and written. They
        # never wrap, which keeps "full" and "empty" distinguishable.
        self._read_pointer = 0
        self._write_pointer = 0
        self._lock = threading.Lock()
        self._data_needed_callback = data_needed_callback
        self._data_available_callback = data_available_callback
        self._check_data_available()
        self._check_data_needed()

    # Callback management -------------------------------------------------

    def set_data_needed_callback(self, callback: Optional[RingCallback]) -> None:
        """Install the source callback and signal it at once if room is free."""
        self._data_needed_callback = callback
        self._check_data_needed()

    def set_data_available_callback(self, callback: Optional[RingCallback]) -> None:
        """Install the sink callback and signal it at once if data is ready."""
        self._data_available_callback = callback
        self._check_data_available()

    def _check_data_available(self) -> None:
        callback = self._data_available_callback
        if callback is not None and self.elements_available() >= self.mtu():
            callback(self)

    def _check_data_needed(self) -> None:
        callback = self._data_needed_callback
        if (
            callback is not None
            and self.max_buffered_elements() - self.elements_available() >= self.mtu()
        ):
            callback(self)

    def _signal(self) -> None:
        self._check_data_available()
        self._check_data_needed()

    # Geometry ------------------------------------------------------------

    def mtu(self) -> int:
        """Largest number of elements moved in one transfer: one page."""
        return self._page_size

    def buffer_size(self) -> int:
        """Number of elements per page."""
        return self._page_size

    def num_buffers(self) -> int:
        """Number of pages."""
        return self._num_pages

    def max_buffered_elements(self) -> int:
        """Total capacity of the ring."""
        return self._page_size * self._num_pages

    def _locate(self, pointer: int) -> tuple[Buffer[T], int]:
        page_index, offset = divmod(pointer, self._page_size)
        return self._pages[page_index % self._num_pages], offset

    # Consuming -----------------------------------------------------------

    def consume(self, num_elements: int) -> list[T]:
        """Remove and return up to ``num_elements`` of the oldest elements.

        Fewer are returned when fewer are buffered or when the request would
        cross the end of the current page.
        """
        num_elements = operator.index(num_elements)
        with self._lock:
            page, offset = self._locate(self._read_pointer)
            count = min(
                self._write_pointer - self._read_pointer,
                self._page_size - offset,
                max(num_elements, 0),
            )
            elements: list[T] = []
            if count > 0:
                elements = page.read_slice(offset, count)
                self._read_pointer += count
        self._signal()
        return elements

    def consume_into(self, dest: MutableSequence[T] | Buffer[T]) -> int:
        """Fill the front of ``dest`` with consumed elements; return how many."""
        elements = self.consume(len(dest))
        for position, element in enumerate(elements):
            dest[position] = element
        return len(elements)

    def consume_one(self) -> T:
        """Remove and return the oldest element; IndexError if the ring is empty."""
        elements = self.consume(1)
        if not elements:
            raise IndexError("RingBuffer is empty")
        return elements[0]

    def peek(self) -> T:
        """Return the oldest element without removing it; IndexError if empty."""
        with self._lock:
            if self._write_pointer == self._read_pointer:
                raise IndexError("RingBuffer is empty")
            page, offset = self._locate(self._read_pointer)
            return page[offset]

    def pop(self) -> T:
        """Remove and return the oldest element; IndexError if empty."""
        with self._lock:
            if self._write_pointer == self._read_pointer:
                element = None
                empty = True
            else:
                page, offset = self._locate(self._read_pointer)
                element = page[offset]
                self._read_pointer += 1
                empty = False
        self._signal()
        if empty:
            raise IndexError("RingBuffer is empty")
        return element  # type: ignore[return-value]

    # Supplying -----------------------------------------------------------

    def supply(self, elements: Sequence[T] | Buffer[T]) -> int:
        """Copy elements into the ring; return how many were accepted.

        Fewer are accepted when the request would cross the end of the
        current page, or, when old elements are prioritized, when there is
        not enough room.
        """
        elements = list(elements)
        capacity = self.max_buffered_elements()
        with self._lock:
            available = self._write_pointer - self._read_pointer
            page, offset = self._locate(self._write_pointer)
            accepted = min(self._page_size - offset, len(elements))
            if self._prioritize_old_elements:
                accepted = min(capacity - available, accepted)
            else:
                accepted = min(capacity, accepted)
            if accepted > 0:
                overflow = available + accepted - capacity
                if overflow > 0:
                    if self._prioritize_old_elements:
                        raise RuntimeError(
                            "accepted element count exceeds the free space in the ring"
                        )
                    self._read_pointer += overflow
                page.write_from(offset, accepted, elements)
                self._write_pointer += accepted
        self._signal()
        return max(accepted, 0)

    def supply_one(self, element: T) -> bool:
        """Add a single element; True if it was accepted."""
        return self.supply([element]) == 1

    # State ---------------------------------------------------------------

    def elements_available(self) -> int:
        """Number of elements currently buffered."""
        with self._lock:
            return self._write_pointer - self._read_pointer

    def full(self) -> bool:
        """True when the ring holds its maximum number of elements."""
        return self.elements_available() == self.max_buffered_elements()

    def empty(self) -> bool:
        """True when no elements are buffered."""
        with self._lock:
            return self._read_pointer == self._write_pointer

    def __len__(self) -> int:
        return self.elements_available()

    def __repr__(self) -> str:
        return (
            f"RingBuffer(page_size={self._page_size}, num_pages={self._num_pages}, "
            f"prioritize_old_elements={self._prioritize_old_elements}, "
            f"elements_available={self.elements_available()})"
        )