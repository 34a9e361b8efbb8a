"""Binary-heap priority queue ordered by a caller-supplied predicate.

Items need not be comparable themselves; ordering comes entirely from the
``is_ordered_before`` callable given at construction. Items that neither
precede nor follow each other are popped in insertion order.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Callable, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class _HeapEntry(Generic[T]):
    """Heap slot pairing an item with its insertion sequence number."""

    __slots__ = ("item", "seq", "_before")

    def __init__(self, item: T, seq: int, before: Callable[[T, T], bool]) -> None:
        self.item = item
        self.seq = seq
        self._before = before

    def __lt__(self, other: _HeapEntry[T]) -> bool:
        if self._before(self.item, other.item):
            return True
        if self._before(other.item, self.item):
            return False
        return self.seq < other.seq


class PriorityQueue(Generic[T]):
    """Min-first queue where "min" is defined by ``is_ordered_before``.

    Example:
        >>> pq = PriorityQueue(lambda a, b: a < b)
        >>> for value in (3, 1, 2):
        ...     pq.push(value)
        >>> pq.pop(), pq.pop(), pq.pop(), pq.pop()
        (1, 2, 3, None)
    """

    def __init__(self, is_ordered_before: Callable[[T, T], bool]) -> None:
        """Initialize an empty queue.

        Args:
            is_ordered_before: Strict ordering predicate; ``f(a, b)`` is True
                when ``a`` must be popped before ``b``.
        """
        self._before = is_ordered_before
        self._heap: List[_HeapEntry[T]] = []
        self._counter: Iterator[int] = count()

    def push(self, item: T) -> None:
        """Add ``item`` to the queue. O(log n)."""
        heappush(self._heap, _HeapEntry(item, next(self._counter), self._before))

    def pop(self) -> Optional[T]:
        """Remove and return the first item, or None if the queue is empty. O(log n)."""
        if not self._heap:
            return None
        return heappop(self._heap).item

    def peek(self) -> Optional[T]:
        """Return the first item without removing it, or None if empty."""
        if not self._heap:
            return None
        return self._heap[0].item

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
