"""Backing stores for vector entries.

Every vector keeps its entries in a `Storage`. The operators are written once,
against this interface, and don't care which kind of storage they run on.
"""

from __future__ import annotations

import abc
from itertools import islice
from typing import Any, Iterable, Iterator, Literal
import warnings

from vectors.exceptions import CapacityError, TruncationWarning


class Storage(abc.ABC):
    """An ordered sequence of items whose contents are replaced wholesale."""

    def __init__(self) -> None:
        self._items: list = []

    @abc.abstractmethod
    def empty_like(self) -> Storage:
        """A new, empty storage configured the same way as this one."""

    @abc.abstractmethod
    def _accept(self, items: Iterable[Any]) -> list:
        """Materialize `items`, enforcing any size limit."""

    def replace(self, items: Iterable[Any]) -> None:
        """Replace the contents with `items`.

        If `items` is rejected, the current contents are left untouched.
        """
        self._items = self._accept(items)

    def copy(self) -> Storage:
        result = self.empty_like()
        # already validated, no need to go through _accept()
        result._items = self._items.copy()
        return result

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, i):
        return self._items[i]


class GrowableStorage(Storage):
    """A list-backed storage that grows without bound."""

    def empty_like(self) -> GrowableStorage:
        return GrowableStorage()

    def _accept(self, items: Iterable[Any]) -> list:
        return list(items)

    def __repr__(self) -> str:
        return "GrowableStorage()"


class FixedStorage(Storage):
    """A storage that holds at most `capacity` items.

    Parameters
    ----------
    capacity :
        The maximum number of items.
    overflow : {"raise", "truncate"}, default "raise"
        What to do when more than `capacity` items are stored.
        "raise" raises a `CapacityError` and keeps the previous contents.
        "truncate" keeps the first `capacity` items and emits a `TruncationWarning`.
        For sparse vectors, the first items are the ones with the lowest indices.

    Examples
    --------
    >>> s = FixedStorage(2)
    >>> s.replace([1, 2])
    >>> s.replace([1, 2, 3])
    Traceback (most recent call last):
    ...
    vectors.exceptions.CapacityError: Cannot store 3 entries in a storage of capacity 2
    >>> list(s)
    [1, 2]
    """

    def __init__(
        self, capacity: int, overflow: Literal["raise", "truncate"] = "raise"
    ) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        if overflow not in ("raise", "truncate"):
            raise ValueError(
                f"overflow must be one of 'raise' or 'truncate', got {overflow!r}"
            )
        super().__init__()
        self.capacity = capacity
        self.overflow = overflow

    def empty_like(self) -> FixedStorage:
        return FixedStorage(self.capacity, self.overflow)

    def _accept(self, items: Iterable[Any]) -> list:
        it = iter(items)
        # Pull at most one extra item before deciding.
        result = list(islice(it, self.capacity + 1))
        if len(result) <= self.capacity:
            return result
        if self.overflow == "raise":
            requested = len(result) + sum(1 for _ in it)
            raise CapacityError(self.capacity, requested)
        warnings.warn(
            f"Storage of capacity {self.capacity} is full, dropping extra entries",
            TruncationWarning,
            stacklevel=4,
        )
        return result[: self.capacity]

    def __repr__(self) -> str:
        return f"FixedStorage(capacity={self.capacity}, overflow={self.overflow!r})"


def resolve_storage(storage: Storage | None) -> Storage:
    """Get a fresh, empty storage for a new vector.

    `None` means the default, a `GrowableStorage`.
    Otherwise a storage with the same configuration as `storage` is returned,
    so passing one storage to many vectors never makes them share entries.
    """
    if storage is None:
        return GrowableStorage()
    if not isinstance(storage, Storage):
        raise TypeError(f"storage must be a Storage, got {type(storage).__name__}")
    return storage.empty_like()
