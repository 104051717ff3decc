from __future__ import annotations
import ctypes
import sys
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class DynamicArray(Generic[T]):
    """Contiguous, growable backing store for the heap.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object` (not Python's built-in list).
    • Capacity doubles when full, so `append` is amortized O(1).
    • Capacity halves when a pop leaves the array quarter-full.
    • Only the tail is removable; there is no insertion in the middle.
    """

    __slots__ = ("_buf", "_size", "_capacity")

    _INITIAL_CAPACITY = 4

    def __init__(self) -> None:
        self._capacity = self._INITIAL_CAPACITY
        self._buf = self._make_array(self._capacity)
        self._size = 0

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(capacity: int):
        """Allocate a raw ctypes array of length `capacity` to hold py_object."""
        if capacity <= 0:
            capacity = 1
        return (capacity * ctypes.py_object)()

    def _resize(self, new_capacity: int) -> None:
        """Move live items into a buffer of `new_capacity` slots."""
        if new_capacity < self._size:
            raise ValueError("new capacity must be >= size")

        new_buf = self._make_array(new_capacity)
        for i in range(self._size):
            new_buf[i] = self._buf[i]

        self._buf = new_buf
        self._capacity = new_capacity

    def _check_index(self, idx: int) -> int:
        if idx < 0 or idx >= self._size:
            raise IndexError("array index out of range")
        return idx

    # --------------------------------- API -----------------------------------

    @property
    def capacity(self) -> int:
        """Number of allocated slots (always >= len)."""
        return self._capacity

    def buffer_nbytes(self) -> int:
        """Bytes held by the allocated buffer, counting unused slots."""
        return sys.getsizeof(self._buf)

    def append(self, value: T) -> None:
        """Store `value` after the last element. Amortized O(1)."""
        if self._size >= self._capacity:
            self._resize(self._capacity * 2)
        self._buf[self._size] = value
        self._size += 1

    def pop(self) -> T:
        """Remove and return the last element.

        Raises:
            IndexError: if the array is empty.
        """
        if self._size == 0:
            raise IndexError("pop from empty array")

        self._size -= 1
        val = self._buf[self._size]
        self._buf[self._size] = None

        if self._capacity > self._INITIAL_CAPACITY and self._size <= self._capacity // 4:
            self._resize(max(self._INITIAL_CAPACITY, self._capacity // 2))

        return val  # type: ignore[return-value]

    def swap(self, i: int, j: int) -> None:
        """Exchange the elements stored at `i` and `j`."""
        i = self._check_index(i)
        j = self._check_index(j)
        self._buf[i], self._buf[j] = self._buf[j], self._buf[i]

    def __getitem__(self, idx: int) -> T:
        return self._buf[self._check_index(idx)]  # type: ignore[return-value]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._buf[i]  # type: ignore[misc]

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"DynamicArray({list(self)!r})"
