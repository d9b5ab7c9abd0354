"""Abstract base class for ordered collections of valued items."""

from abc import ABC, abstractmethod
from decimal import Decimal
from enum import Enum
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class RankedCollection(ABC, Generic[T]):
    """An ordered collection supporting lookup, totals, filtering and ranking.

    Items are kept in insertion order. No query reorders the stored items.
    Not safe for concurrent mutation; callers sharing one instance across
    threads must lock around it.
    """

    def __init__(self) -> None:
        self._items: list[T] = []

    @abstractmethod
    def _key(self, item: T) -> str:
        """Identifier used for lookups (symbol, account number)."""

    @abstractmethod
    def _magnitude(self, item: T) -> Decimal:
        """Value used for totals and ranking."""

    @abstractmethod
    def _category(self, item: T) -> Enum:
        """Classification tag used for filtering."""

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def keys(self) -> list[str]:
        return [self._key(item) for item in self._items]

    def _append(self, item: T) -> None:
        self._items.append(item)

    def _find(self, key: str) -> Optional[T]:
        return next((item for item in self._items if self._key(item) == key), None)

    def _total(self) -> Decimal:
        return sum(
            (self._magnitude(item) for item in self._items),
            start=Decimal("0")
        )

    def _filter(self, category: Enum) -> list[T]:
        return [item for item in self._items if self._category(item) == category]

    def _top(self, n: int) -> list[T]:
        """Return the ``n`` highest-valued items, highest first.

        ``sorted`` is stable (also with ``reverse=True``), so items of equal
        value keep their insertion order. The stored order is untouched.

        Raises:
            ValueError: If ``n`` is not an integer.
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise ValueError(f"n must be an integer, got {n!r}")
        if n <= 0:
            return []
        ranked = sorted(self._items, key=self._magnitude, reverse=True)
        return ranked[:n]
