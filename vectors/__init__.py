"""Dense and sparse numeric vectors, with merge-based sparse arithmetic."""

from __future__ import annotations

import importlib.metadata
import warnings

from vectors import exceptions as exceptions
from vectors._base import Vector as Vector
from vectors._dense import DenseVector as DenseVector
from vectors._interop import from_ibis as from_ibis
from vectors._interop import from_numpy as from_numpy
from vectors._interop import from_pandas as from_pandas
from vectors._interop import to_ibis as to_ibis
from vectors._interop import to_numpy as to_numpy
from vectors._interop import to_pandas as to_pandas
from vectors._merge import MISSING as MISSING
from vectors._merge import inner_join as inner_join
from vectors._merge import outer_join as outer_join
from vectors._reduce import cosine_similarity as cosine_similarity
from vectors._reduce import distance as distance
from vectors._reduce import dot as dot
from vectors._reduce import norm as norm
from vectors._reduce import squared_distance as squared_distance
from vectors._sparse import SparseVector as SparseVector
from vectors._storage import FixedStorage as FixedStorage
from vectors._storage import GrowableStorage as GrowableStorage
from vectors._storage import Storage as Storage

try:
    __version__ = importlib.metadata.version(__name__)
except importlib.metadata.PackageNotFoundError as e:
    warnings.warn(f"Could not determine version of {__name__}\n{e!s}", stacklevel=2)
    __version__ = "unknown"
