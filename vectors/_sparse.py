from __future__ import annotations

from bisect import bisect_left
import logging
import numbers
from typing import Any, Callable, Iterable, Iterator, Mapping

from vectors._base import Vector
from vectors._merge import MISSING, outer_join
from vectors._scalar import fma, is_zero
from vectors._storage import Storage, resolve_storage
from vectors._typing import Self
from vectors.exceptions import InvalidIndexError, UnsortedIndicesError

logger = logging.getLogger(__name__)


class SparseVector(Vector):
    """A vector that only stores its non-zero entries, each tagged with its index.

    Any index that is not stored is implicitly zero,
    so two sparse vectors can be combined no matter what indices they use.

    The entries are always strictly ascending by index, and never hold a zero value.
    Every operator re-establishes this, eg an addition where two entries cancel
    out drops that index from the result.

    Parameters
    ----------
    entries :
        (index, value) pairs, strictly ascending by index.
        Indices must be non-negative integers.
        Entries whose value is zero are dropped.
        Use `from_unsorted` if your entries are not sorted or contain duplicates.
    storage :
        The kind of storage to keep the entries in.
        Defaults to a `GrowableStorage`.
        Pass a `FixedStorage` to put a bound on the number of entries.

    Examples
    --------
    >>> from vectors import SparseVector
    >>> a = SparseVector([(0, 0.5), (3, 2.0)])
    >>> a
    SparseVector([(0, 0.5), (3, 2.0)])
    >>> a + SparseVector([(0, -0.5), (1, 1.0)])
    SparseVector([(1, 1.0), (3, 2.0)])
    >>> a * 2
    SparseVector([(0, 1.0), (3, 4.0)])
    >>> a[3], a[2]
    (2.0, 0)
    """

    def __init__(
        self,
        entries: Iterable[tuple[int, Any]] = (),
        *,
        storage: Storage | None = None,
    ) -> None:
        self._storage = resolve_storage(storage)
        self._storage.replace(_validated(entries))

    @classmethod
    def from_unsorted(
        cls,
        entries: Iterable[tuple[int, Any]],
        *,
        storage: Storage | None = None,
    ) -> Self:
        """Build a vector from (index, value) pairs in any order.

        Values at duplicate indices are summed.
        Entries that are zero, or that sum to zero, are dropped.

        Examples
        --------
        >>> SparseVector.from_unsorted([(4, 1), (0, 2), (4, 3), (1, 5), (1, -5)])
        SparseVector([(0, 2), (4, 4)])
        """
        totals: dict[int, Any] = {}
        n_duplicates = 0
        for index, value in entries:
            index = _check_index(index)
            if index in totals:
                totals[index] = totals[index] + value
                n_duplicates += 1
            else:
                totals[index] = value
        if n_duplicates:
            logger.debug(f"Summed {n_duplicates} entries with duplicate indices")
        return cls(sorted(totals.items(), key=_index_of), storage=storage)

    @classmethod
    def from_mapping(
        cls, mapping: Mapping[int, Any], *, storage: Storage | None = None
    ) -> Self:
        """Build a vector from a {index: value} mapping.

        >>> SparseVector.from_mapping({5: 1.0, 2: 0.0, 1: 3.0})
        SparseVector([(1, 3.0), (5, 1.0)])
        """
        return cls.from_unsorted(mapping.items(), storage=storage)

    @classmethod
    def from_dense(
        cls, values: Iterable[Any], *, storage: Storage | None = None
    ) -> Self:
        """Build a vector from positional values, dropping the zeros.

        Accepts a `DenseVector` too.

        >>> SparseVector.from_dense([0, 7, 0, 0, 3])
        SparseVector([(1, 7), (4, 3)])
        """
        if isinstance(values, Vector):
            entries = iter(values)
        else:
            entries = enumerate(values)
        return cls(entries, storage=storage)

    @property
    def nnz(self) -> int:
        """The number of stored (non-zero) entries. Same as `len(self)`."""
        return len(self._storage)

    def __iter__(self) -> Iterator[tuple[int, Any]]:
        return iter(self._storage)

    def __bool__(self) -> bool:
        return len(self._storage) > 0

    def __getitem__(self, index: int) -> Any:
        """The value at `index`, or 0 if nothing is stored there."""
        i = bisect_left(self._storage, (index,))
        if i < len(self._storage):
            found, value = self._storage[i]
            if found == index:
                return value
        return 0

    def indices(self) -> list[int]:
        """The stored indices, ascending."""
        return [index for index, _ in self._storage]

    def values(self) -> list[Any]:
        """The stored values, in ascending order of index."""
        return [value for _, value in self._storage]

    def to_dense(self, length: int | None = None):
        """Convert to a `DenseVector`, filling in the implicit zeros.

        Parameters
        ----------
        length :
            The length of the result.
            Defaults to one past the largest stored index.

        Examples
        --------
        >>> SparseVector([(1, 7), (3, 2)]).to_dense()
        DenseVector([0, 7, 0, 2])
        >>> SparseVector([(1, 7)]).to_dense(4)
        DenseVector([0, 7, 0, 0])
        """
        from vectors._dense import DenseVector

        dense_length = self._storage[-1][0] + 1 if self else 0
        if length is None:
            length = dense_length
        elif length < dense_length:
            raise ValueError(
                f"length must be at least {dense_length} to hold index {dense_length - 1}, got {length}"  # noqa: E501
            )
        values = [0] * length
        for index, value in self._storage:
            values[index] = value
        return DenseVector(values)

    # in-place operators

    def __iadd__(self, other: Vector) -> Self:
        if not isinstance(other, Vector):
            return NotImplemented
        self._merge_assign(other, lambda left, right: left + right)
        return self

    def __isub__(self, other: Vector) -> Self:
        if not isinstance(other, Vector):
            return NotImplemented
        self._merge_assign(other, lambda left, right: left - right)
        return self

    def __imul__(self, scalar: Any) -> Self:
        if isinstance(scalar, Vector):
            return NotImplemented
        self._map_assign(lambda value: value * scalar)
        return self

    def __itruediv__(self, scalar: Any) -> Self:
        if isinstance(scalar, Vector):
            return NotImplemented
        self._map_assign(lambda value: value / scalar)
        return self

    def mul_add_assign(self, scale: Any, other: Vector) -> None:
        """Set self to `self * scale + other`, in place.

        >>> v = SparseVector([(0, 1), (1, 2)])
        >>> v.mul_add_assign(3, SparseVector([(1, -6), (2, 1)]))
        >>> v
        SparseVector([(0, 3), (2, 1)])
        """
        if not isinstance(other, Vector):
            raise TypeError(f"Expected a vector, got {type(other).__name__}")
        self._merge_assign(other, lambda left, right: fma(left, scale, right))

    def add_scaled_assign(self, other: Vector, scale: Any) -> None:
        """Set self to `self + other * scale`, in place.

        >>> v = SparseVector([(0, 1), (1, 6)])
        >>> v.add_scaled_assign(SparseVector([(1, -2), (2, 1)]), 3)
        >>> v
        SparseVector([(0, 1), (2, 3)])
        """
        if not isinstance(other, Vector):
            raise TypeError(f"Expected a vector, got {type(other).__name__}")
        self._merge_assign(other, lambda left, right: fma(right, scale, left))

    def _merge_assign(self, other: Vector, combine: Callable[[Any, Any], Any]) -> None:
        """Union-merge with `other`, combine each pair, and drop the zeros.

        A side with no entry at an index is passed to `combine` as 0.
        """
        self._storage.replace(
            _nonzero(
                (index, combine(_or_zero(left), _or_zero(right)))
                for index, left, right in outer_join(self, other)
            )
        )

    def _map_assign(self, func: Callable[[Any], Any]) -> None:
        self._storage.replace(
            _nonzero((index, func(value)) for index, value in self._storage)
        )

    def __str__(self) -> str:
        return "[" + ", ".join(f"({i}, {v!r})" for i, v in self._storage) + "]"


def _or_zero(value):
    return 0 if value is MISSING else value


def _index_of(entry: tuple[int, Any]) -> int:
    return entry[0]


def _nonzero(entries: Iterable[tuple[int, Any]]) -> Iterator[tuple[int, Any]]:
    for index, value in entries:
        if not is_zero(value):
            yield index, value


def _check_index(index: Any) -> int:
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise InvalidIndexError(
            f"Indices must be integers, got {index!r} of type {type(index).__name__}"
        )
    if index < 0:
        raise InvalidIndexError(f"Indices must be non-negative, got {index}")
    return int(index)


def _validated(entries: Iterable[tuple[int, Any]]) -> Iterator[tuple[int, Any]]:
    previous = None
    n_dropped = 0
    for index, value in entries:
        index = _check_index(index)
        if previous is not None and index <= previous:
            raise UnsortedIndicesError(previous, index)
        previous = index
        if is_zero(value):
            n_dropped += 1
            continue
        yield index, value
    if n_dropped:
        logger.debug(f"Dropped {n_dropped} zero-valued entries")
