from __future__ import annotations

import abc
from typing import Any, Iterator, Literal

from vectors import _reduce
from vectors._storage import Storage
from vectors._typing import Self


class Vector(abc.ABC):
    """Base class for `SparseVector` and `DenseVector`.

    Subclasses implement the in-place operators (`+=`, `-=`, `*=`, `/=`,
    `mul_add_assign`, `add_scaled_assign`).
    The by-value operators are all defined here, once,
    by copying the receiver and delegating to the in-place version,
    so an operand is never mutated by `a + b` and friends.
    """

    is_dense: bool = False
    """Whether the vector is positional, with a fixed length."""

    _storage: Storage

    # mutable via the in-place operators
    __hash__ = None

    # numpy would otherwise treat a vector as a sequence in `np.float64(2) * v`
    # and never call __rmul__
    __array_ufunc__ = None

    @classmethod
    def _from_storage(cls, storage: Storage) -> Self:
        """Wrap already-valid entries without re-validating them."""
        result = cls.__new__(cls)
        result._storage = storage
        return result

    @property
    def storage(self) -> Storage:
        """The storage holding this vector's entries."""
        return self._storage

    def copy(self) -> Self:
        """An independent copy, with the same kind of storage."""
        return self._from_storage(self._storage.copy())

    def __copy__(self) -> Self:
        return self.copy()

    @abc.abstractmethod
    def __iter__(self) -> Iterator[tuple[int, Any]]:
        """Iterate over (index, value) pairs, in ascending order of index."""

    def __len__(self) -> int:
        return len(self._storage)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return list(self._storage) == list(other._storage)

    # by-value operators

    def __add__(self, other: Vector) -> Self:
        if not isinstance(other, Vector):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __sub__(self, other: Vector) -> Self:
        if not isinstance(other, Vector):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __mul__(self, scalar: Any) -> Self:
        if isinstance(scalar, Vector):
            return NotImplemented
        result = self.copy()
        result *= scalar
        return result

    def __rmul__(self, scalar: Any) -> Self:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: Any) -> Self:
        if isinstance(scalar, Vector):
            return NotImplemented
        result = self.copy()
        result /= scalar
        return result

    def __neg__(self) -> Self:
        return self * -1

    def __pos__(self) -> Self:
        return self.copy()

    def mul_add(self, scale: Any, other: Vector) -> Self:
        """Compute `self * scale + other`, fused where the scalar type allows.

        Returns a new vector, neither operand is modified.
        """
        result = self.copy()
        result.mul_add_assign(scale, other)
        return result

    def add_scaled(self, other: Vector, scale: Any) -> Self:
        """Compute `self + other * scale` (AXPY), fused where the scalar type allows.

        Returns a new vector, neither operand is modified.
        """
        result = self.copy()
        result.add_scaled_assign(other, scale)
        return result

    @abc.abstractmethod
    def mul_add_assign(self, scale: Any, other: Vector) -> None:
        """In-place version of `mul_add`."""

    @abc.abstractmethod
    def add_scaled_assign(self, other: Vector, scale: Any) -> None:
        """In-place version of `add_scaled`."""

    # reductions

    def dot(self, other: Vector) -> Any:
        """The dot product with `other`. See `vectors.dot`."""
        return _reduce.dot(self, other)

    def squared_distance(
        self, other: Vector, *, how: Literal["outer", "inner"] = "outer"
    ) -> Any:
        """The squared euclidean distance to `other`. See `vectors.squared_distance`."""
        return _reduce.squared_distance(self, other, how=how)

    def distance(
        self, other: Vector, *, how: Literal["outer", "inner"] = "outer"
    ) -> Any:
        """The euclidean distance to `other`. See `vectors.distance`."""
        return _reduce.distance(self, other, how=how)

    def norm(self, *, metric: Literal["l1", "l2"] = "l2") -> Any:
        """The norm of this vector. See `vectors.norm`."""
        return _reduce.norm(self, metric=metric)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"
