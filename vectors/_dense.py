from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator

from vectors._base import Vector
from vectors._merge import MISSING, outer_join
from vectors._scalar import fma
from vectors._storage import Storage, resolve_storage
from vectors._typing import Self
from vectors.exceptions import DimensionMismatchError


class DenseVector(Vector):
    """A fixed-length vector that stores every entry, zeros included.

    Iterating yields (position, value) pairs, just like a `SparseVector`,
    so dense and sparse vectors can be mixed in `dot` and `distance`.

    Arithmetic between two dense vectors requires them to have the same length.
    Arithmetic with a sparse operand requires all of its indices to be in range.
    Either way a `DimensionMismatchError` is raised otherwise,
    and the receiver is left unchanged.

    Examples
    --------
    >>> from vectors import DenseVector
    >>> a = DenseVector([1.0, 2.0, 0.0])
    >>> a + DenseVector([0.5, 0.5, 0.5])
    DenseVector([1.5, 2.5, 0.5])
    >>> a / 2
    DenseVector([0.5, 1.0, 0.0])
    >>> a.dot(DenseVector([3, 4, 5]))
    11.0
    """

    is_dense = True

    def __init__(
        self, values: Iterable[Any] = (), *, storage: Storage | None = None
    ) -> None:
        self._storage = resolve_storage(storage)
        self._storage.replace(values)

    @classmethod
    def zeros(cls, length: int, *, storage: Storage | None = None) -> Self:
        """A vector of `length` zeros.

        >>> DenseVector.zeros(3)
        DenseVector([0, 0, 0])
        """
        return cls([0] * length, storage=storage)

    def __iter__(self) -> Iterator[tuple[int, Any]]:
        return enumerate(self._storage)

    def __getitem__(self, index: int) -> Any:
        return self._storage[index]

    def indices(self) -> list[int]:
        """The positions, 0 to len(self) - 1."""
        return list(range(len(self._storage)))

    def values(self) -> list[Any]:
        """The values, in order."""
        return list(self._storage)

    def to_sparse(self):
        """Convert to a `SparseVector`, dropping the zeros.

        >>> DenseVector([0, 1.5, 0]).to_sparse()
        SparseVector([(1, 1.5)])
        """
        from vectors._sparse import SparseVector

        return SparseVector.from_dense(self)

    # in-place operators

    def __iadd__(self, other: Vector) -> Self:
        if not isinstance(other, Vector):
            return NotImplemented
        self._zip_assign(other, lambda left, right: left + right)
        return self

    def __isub__(self, other: Vector) -> Self:
        if not isinstance(other, Vector):
            return NotImplemented
        self._zip_assign(other, lambda left, right: left - right)
        return self

    def __imul__(self, scalar: Any) -> Self:
        if isinstance(scalar, Vector):
            return NotImplemented
        self._storage.replace([value * scalar for value in self._storage])
        return self

    def __itruediv__(self, scalar: Any) -> Self:
        if isinstance(scalar, Vector):
            return NotImplemented
        self._storage.replace([value / scalar for value in self._storage])
        return self

    def mul_add_assign(self, scale: Any, other: Vector) -> None:
        """Set self to `self * scale + other`, in place.

        >>> v = DenseVector([1, 2])
        >>> v.mul_add_assign(10, DenseVector([3, 4]))
        >>> v
        DenseVector([13, 24])
        """
        if not isinstance(other, Vector):
            raise TypeError(f"Expected a vector, got {type(other).__name__}")
        self._zip_assign(other, lambda left, right: fma(left, scale, right))

    def add_scaled_assign(self, other: Vector, scale: Any) -> None:
        """Set self to `self + other * scale`, in place."""
        if not isinstance(other, Vector):
            raise TypeError(f"Expected a vector, got {type(other).__name__}")
        self._zip_assign(other, lambda left, right: fma(right, scale, left))

    def _zip_assign(self, other: Vector, combine: Callable[[Any, Any], Any]) -> None:
        self._check_operand(other)
        # other may be sparse, in which case most positions are missing from it
        self._storage.replace(
            [
                combine(left, 0 if right is MISSING else right)
                for _, left, right in outer_join(self, other)
            ]
        )

    def _check_operand(self, other: Vector) -> None:
        if other.is_dense:
            if len(other) != len(self):
                raise DimensionMismatchError(len(self), len(other))
        elif len(other):
            needed = other.indices()[-1] + 1
            if needed > len(self):
                raise DimensionMismatchError(len(self), needed)

    def __str__(self) -> str:
        return "[" + ", ".join(repr(v) for v in self._storage) + "]"
