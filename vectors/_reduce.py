"""Reductions of two vectors down to a single scalar."""

from __future__ import annotations

from typing import Any, Literal

from vectors._merge import MISSING, inner_join, outer_join
from vectors._scalar import abs_diff, sqrt
from vectors.exceptions import DimensionMismatchError


def dot(a, b) -> Any:
    """Compute the dot product of two vectors.

    Each vector can be a `SparseVector` or a `DenseVector`, in any combination.
    Only indices present in both vectors contribute,
    so vectors with disjoint supports have a dot product of 0.

    Parameters
    ----------
    a :
        The first vector.
    b :
        The second vector.

    Returns
    -------
    The dot product, in the scalar type of the vectors.
    0 if there are no shared indices.

    Examples
    --------
    >>> from vectors import SparseVector, DenseVector, dot
    >>> dot(SparseVector([(0, 1), (1, 2)]), SparseVector([(1, 3), (2, 4)]))  # 2*3
    6
    >>> dot(DenseVector([1, 2]), DenseVector([4, 5]))  # 1*4 + 2*5
    14
    >>> dot(SparseVector([(1, 3)]), DenseVector([4, 5]))  # 3*5
    15
    """
    _check_lengths(a, b)
    total = 0
    for _, left, right in inner_join(a, b):
        total = total + left * right
    return total


def squared_distance(a, b, *, how: Literal["outer", "inner"] = "outer") -> Any:
    """Compute the squared euclidean distance between two vectors.

    Parameters
    ----------
    a :
        The first vector.
    b :
        The second vector.
    how : {"outer", "inner"}, default "outer"
        Which indices contribute.
        "outer" is the true distance, where an index present in only one of
        the vectors contributes the square of its value.
        "inner" only sums over indices present in both vectors.

    Examples
    --------
    >>> from vectors import SparseVector, squared_distance
    >>> a = SparseVector([(0, 1), (1, 5)])
    >>> b = SparseVector([(1, 2), (2, 2)])
    >>> squared_distance(a, b)  # 1**2 + 3**2 + 2**2
    14
    >>> squared_distance(a, b, how="inner")  # 3**2
    9
    """
    _check_lengths(a, b)
    if how == "outer":
        triples = outer_join(a, b)
    elif how == "inner":
        triples = inner_join(a, b)
    else:
        raise ValueError(f"Unsupported how {how!r}")
    total = 0
    for _, left, right in triples:
        delta = abs_diff(_or_zero(left), _or_zero(right))
        total = total + delta * delta
    return total


def distance(a, b, *, how: Literal["outer", "inner"] = "outer") -> Any:
    """Compute the euclidean distance between two vectors.

    This is the square root of `squared_distance`, see it for details.

    Examples
    --------
    >>> from vectors import DenseVector, distance
    >>> distance(DenseVector([0, 0]), DenseVector([3, 4]))
    5.0
    """
    return sqrt(squared_distance(a, b, how=how))


def norm(vec, *, metric: Literal["l1", "l2"] = "l2") -> Any:
    """Compute the norm (length) of a vector.

    Parameters
    ----------
    vec :
        The vector to compute the norm of.
    metric : {"l1", "l2"}, default "l2"
        The metric to use. "l1" for Manhattan distance, "l2" for Euclidean distance.

    Returns
    -------
    The norm of the vector.

    Examples
    --------
    >>> from vectors import SparseVector, norm
    >>> v = SparseVector([(3, -3), (7, 4)])
    >>> norm(v)
    5.0
    >>> norm(v, metric="l1")
    7
    """
    if metric == "l1":
        total = 0
        for _, value in vec:
            total = total + abs(value)
        return total
    elif metric == "l2":
        return sqrt(dot(vec, vec))
    else:
        raise ValueError(f"Unsupported norm {metric}")


def cosine_similarity(a, b) -> Any:
    """Compute the cosine similarity of two vectors

    Returns NaN if either vector is all zeros.

    Examples
    --------
    >>> from vectors import DenseVector, cosine_similarity

    Opposite directions:

    >>> cosine_similarity(DenseVector([1, 0]), DenseVector([-3, 0]))
    -1.0

    Orthogonal vectors:

    >>> cosine_similarity(DenseVector([1, 0]), DenseVector([0, 1]))
    0.0
    """
    denom = norm(a) * norm(b)
    if denom == 0:
        return float("nan")
    return dot(a, b) / denom


def _or_zero(value):
    return 0 if value is MISSING else value


def _check_lengths(a, b) -> None:
    # Only positional vectors have a fixed dimension to disagree on.
    if getattr(a, "is_dense", False) and getattr(b, "is_dense", False):
        if len(a) != len(b):
            raise DimensionMismatchError(len(a), len(b))
