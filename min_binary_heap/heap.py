"""Min-priority queue backed by a binary heap.

Elements live in a :class:`~min_binary_heap.storage.DynamicArray` laid out
as an implicit complete binary tree: the node at index ``i`` has children
at ``2i + 1`` and ``2i + 2``, and index 0 always holds a minimum.

Any element type with a total order works. Comparisons use ``<`` and ``>``
only, so ints, strings, tuples and ``dataclass(order=True)`` instances are
all fine. Mutating an element's ordering fields while it sits in the heap
breaks the heap property and is not detected.

Example::

    >>> queue = MinBinaryHeap()
    >>> queue.insert(10)
    >>> queue.insert(1)
    >>> queue.extract_min()
    1
    >>> queue.extract_min()
    10
    >>> queue.extract_min() is None
    True
"""

from __future__ import annotations

import logging
import sys
from typing import Generic, Iterable, Iterator, Optional, TypeVar

from .storage import DynamicArray

T = TypeVar("T")

logger = logging.getLogger(__name__)


class MinBinaryHeap(Generic[T]):
    """A min-priority queue with O(log n) insert and extract_min."""

    __slots__ = ("_tree",)

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        self._tree: DynamicArray[T] = DynamicArray()
        if it is not None:
            for item in it:
                self.insert(item)

    # -----------------------------
    # Index arithmetic
    # -----------------------------
    def _parent_index(self, of_index: int) -> int:
        """Return the index of the parent of node `of_index`.

        Raises:
            IndexError: if `of_index < 1` or `of_index >= size()`. Reaching
                this means sift-up itself is broken.
        """
        if of_index < 1 or of_index >= self.size():
            raise IndexError("MinBinaryHeap index out of bounds.")
        if of_index % 2 == 0:
            return (of_index - 2) // 2
        return (of_index - 1) // 2

    def _child_index_min(self, of_index: int) -> Optional[int]:
        """Return the index of the smaller child of `of_index`, or None if it is a leaf."""
        tree = self._tree
        n = len(tree)
        left = 2 * of_index + 1
        right = 2 * of_index + 2

        if left >= n:
            return None
        if right >= n:
            return left
        # Ties go to the right child.
        if tree[left] < tree[right]:
            return left
        return right

    # -----------------------------
    # Heap-order restoration
    # -----------------------------
    def _sift_up(self, idx: int) -> None:
        tree = self._tree
        while idx > 0:
            parent = self._parent_index(idx)
            if not tree[idx] < tree[parent]:
                break
            tree.swap(idx, parent)
            idx = parent

    def _sift_down(self, idx: int) -> None:
        tree = self._tree
        child = self._child_index_min(idx)
        while child is not None and tree[idx] > tree[child]:
            tree.swap(idx, child)
            idx = child
            child = self._child_index_min(idx)

    # -----------------------------
    # Public API
    # -----------------------------
    def insert(self, element: T) -> None:
        """Add `element` to the queue (O(log n))."""
        self._tree.append(element)
        self._sift_up(len(self._tree) - 1)
        logger.debug("insert %r (size=%d)", element, len(self._tree))

    def extract_min(self) -> Optional[T]:
        """Remove and return the smallest element, or None if the queue is empty (O(log n))."""
        tree = self._tree
        n = len(tree)
        if n == 0:
            logger.debug("extract_min on empty heap")
            return None
        if n == 1:
            minimum = tree.pop()
        else:
            # Last leaf takes the root's place, then trickles down.
            tree.swap(0, n - 1)
            minimum = tree.pop()
            self._sift_down(0)
        logger.debug("extract_min -> %r (size=%d)", minimum, len(tree))
        return minimum

    def size(self) -> int:
        """Number of stored elements (O(1))."""
        return len(self._tree)

    def peek(self) -> Optional[T]:
        """Return the smallest element without removing it, or None when empty."""
        return self._tree[0] if len(self._tree) else None

    def is_empty(self) -> bool:
        return len(self._tree) == 0

    def drain(self) -> Iterator[T]:
        """Extract every element, yielding them in non-decreasing order."""
        while len(self._tree):
            yield self.extract_min()  # type: ignore[misc]

    def storage_nbytes(self) -> int:
        """Bytes held by the backing array itself, not counting the elements."""
        return sys.getsizeof(self._tree) + self._tree.buffer_nbytes()

    def __len__(self) -> int:
        return len(self._tree)

    def __bool__(self) -> bool:
        return len(self._tree) != 0

    def __iter__(self) -> Iterator[T]:
        # Array (heap) order, not sorted order
        return iter(self._tree)

    def __repr__(self) -> str:
        return f"MinBinaryHeap({list(self._tree)!r})"
