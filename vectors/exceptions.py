from __future__ import annotations


class VectorsError(Exception):
    """Base class for all vectors errors."""


class VectorsWarning(Warning):
    """Base class for all vectors warnings."""


class InvalidIndexError(ValueError, VectorsError):
    """An index is negative or not an integer."""


class UnsortedIndicesError(ValueError, VectorsError):
    """Entries are not strictly ascending by index.

    Duplicate indices are reported with this error too.
    Use `SparseVector.from_unsorted` if you want them sorted and summed.
    """

    def __init__(self, previous: int, current: int) -> None:
        self.previous: int = previous
        """The index that came first."""
        self.current: int = current
        """The offending index, which is <= `previous`."""
        super().__init__(
            f"Indices must be strictly ascending, but {current} follows {previous}"
        )


class DimensionMismatchError(ValueError, VectorsError):
    """Dense operands have different lengths."""

    def __init__(self, left: int, right: int) -> None:
        self.left: int = left
        self.right: int = right
        super().__init__(
            f"Dense vectors must have the same length, got {left} and {right}"
        )


class CapacityError(ValueError, VectorsError):
    """A fixed-capacity storage would overflow."""

    def __init__(self, capacity: int, requested: int) -> None:
        self.capacity: int = capacity
        """The maximum number of entries the storage can hold."""
        self.requested: int = requested
        """The number of entries that were going to be stored."""
        super().__init__(
            f"Cannot store {requested} entries in a storage of capacity {capacity}"
        )


class TruncationWarning(UserWarning, VectorsWarning):
    """A fixed-capacity storage dropped entries that did not fit."""
