"""Conversions between vectors and numpy, pandas and ibis objects."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Literal

import ibis
import ibis.expr.types as ir
import numpy as np
import pandas as pd

from vectors._base import Vector
from vectors._dense import DenseVector
from vectors._sparse import SparseVector


def to_numpy(vec: Vector, *, length: int | None = None, dtype=None) -> np.ndarray:
    """Convert a vector to a 1D numpy array.

    Parameters
    ----------
    vec :
        The vector to convert.
    length :
        Only for sparse vectors: the length of the array.
        Defaults to one past the largest stored index.
    dtype :
        The dtype of the array. By default numpy infers it from the values.

    Examples
    --------
    >>> from vectors import SparseVector, to_numpy
    >>> to_numpy(SparseVector([(1, 2.5), (3, 1.0)])).tolist()
    [0.0, 2.5, 0.0, 1.0]
    """
    if isinstance(vec, SparseVector):
        vec = vec.to_dense(length)
    elif not isinstance(vec, DenseVector):
        raise ValueError(f"Unsupported type {type(vec)}")
    elif length is not None and length != len(vec):
        raise ValueError(f"length must be {len(vec)} for this dense vector")
    return np.asarray(vec.values(), dtype=dtype)


def from_numpy(
    arr: np.ndarray, *, sparse: bool = False
) -> DenseVector | SparseVector:
    """Convert a 1D numpy array to a vector.

    The values become python scalars.
    With `sparse=True` only the non-zero entries are kept.

    Examples
    --------
    >>> import numpy as np
    >>> from vectors import from_numpy
    >>> from_numpy(np.array([0.0, 1.5, 0.0]), sparse=True)
    SparseVector([(1, 1.5)])
    """
    arr = np.asarray(arr)
    if arr.ndim != 1:
        raise ValueError(f"Only 1D arrays can be vectors, got shape {arr.shape}")
    if not sparse:
        return DenseVector(arr.tolist())
    nonzero = np.flatnonzero(arr)
    return SparseVector(zip(nonzero.tolist(), arr[nonzero].tolist()))


def to_pandas(vec: Vector) -> pd.Series:
    """Convert a vector to a pandas Series.

    A sparse vector's stored indices become the index of the series.
    A dense vector gets the default RangeIndex.

    Examples
    --------
    >>> from vectors import SparseVector, to_pandas
    >>> to_pandas(SparseVector([(2, 1.0), (7, 4.0)])).to_dict()
    {2: 1.0, 7: 4.0}
    """
    if isinstance(vec, SparseVector):
        return pd.Series(vec.values(), index=pd.Index(vec.indices(), dtype="int64"))
    elif isinstance(vec, DenseVector):
        return pd.Series(vec.values())
    else:
        raise ValueError(f"Unsupported type {type(vec)}")


def from_pandas(
    series: pd.Series, *, sparse: bool = True
) -> DenseVector | SparseVector:
    """Convert a pandas Series to a vector.

    With `sparse=True` (the default), the index of the series gives the indices,
    which may be in any order, and the zeros are dropped.
    With `sparse=False` the index is ignored and the values are taken positionally.
    """
    values = series.tolist()
    if not sparse:
        return DenseVector(values)
    return SparseVector.from_unsorted(zip(series.index.tolist(), values))


def to_ibis(
    vec: Vector, *, value_type: Literal["int64", "float64"] | None = None
) -> ir.MapValue | ir.ArrayValue:
    """Convert a vector to an ibis literal.

    A sparse vector becomes a map<int64, numeric> and a dense vector becomes an
    array<numeric>, which are the usual sparse and dense vector encodings
    in SQL backends.

    Parameters
    ----------
    vec :
        The vector to convert.
    value_type : {"int64", "float64"}, optional
        The type of the values. By default int64 if every value is an int,
        otherwise float64.

    Examples
    --------
    >>> from vectors import DenseVector, from_ibis, to_ibis
    >>> from_ibis(to_ibis(DenseVector([1, 2.5])))
    DenseVector([1.0, 2.5])
    """
    if not isinstance(vec, (SparseVector, DenseVector)):
        raise ValueError(f"Unsupported type {type(vec)}")
    values = vec.values()
    if value_type is None:
        value_type = _infer_value_type(values)
    if value_type == "float64":
        values = [float(v) for v in values]
    if isinstance(vec, SparseVector):
        return ibis.literal(
            dict(zip(vec.indices(), values)), type=f"map<int64, {value_type}>"
        )
    return ibis.literal(values, type=f"array<{value_type}>")


def from_ibis(value: ir.MapValue | ir.ArrayValue) -> DenseVector | SparseVector:
    """Execute an ibis scalar expression and convert the result to a vector.

    A map<integer, numeric> becomes a `SparseVector`,
    an array<numeric> becomes a `DenseVector`.

    Examples
    --------
    >>> import ibis
    >>> from vectors import from_ibis
    >>> from_ibis(ibis.map({3: 1.0, 1: 2.0}))
    SparseVector([(1, 2.0), (3, 1.0)])
    """
    if isinstance(value, ir.MapValue):
        raw = value.execute()
        if _is_null(raw):
            raise ValueError("Cannot convert a NULL map to a vector")
        return SparseVector.from_unsorted(
            (_to_python(k), _to_python(v)) for k, v in dict(raw).items()
        )
    elif isinstance(value, ir.ArrayValue):
        raw = value.execute()
        if _is_null(raw):
            raise ValueError("Cannot convert a NULL array to a vector")
        return DenseVector(np.asarray(raw).tolist())
    else:
        raise ValueError(f"Unsupported type {type(value)}")


def _is_null(raw: Any) -> bool:
    # backends disagree on how a NULL comes back: None, NaN, pd.NA...
    return not isinstance(raw, (Mapping, Sequence, np.ndarray))


def _to_python(x: Any) -> Any:
    return x.item() if isinstance(x, np.generic) else x


def _infer_value_type(values: list[Any]) -> str:
    if all(isinstance(v, (int, np.integer)) for v in values) and values:
        return "int64"
    return "float64"
