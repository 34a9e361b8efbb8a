"""Sequence helpers."""

from __future__ import annotations

from typing import Hashable, Iterable, List, TypeVar

T = TypeVar("T", bound=Hashable)


def distinct(items: Iterable[T]) -> List[T]:
    """Return items with duplicates removed, keeping first-occurrence order.

    Example:
        >>> distinct(["B", "C", "B", "A"])
        ['B', 'C', 'A']
    """
    return list(dict.fromkeys(items))
