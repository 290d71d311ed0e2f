from __future__ import annotations

from hypothesis import strategies as st
import pytest

from vectors import DenseVector, SparseVector, Vector


def assert_vectors_equal(left: Vector, right: Vector, *, rel=None, abs=None) -> None:
    """Same type, same indices, and values equal up to float rounding."""
    assert type(left) is type(right)
    left_entries = list(left)
    right_entries = list(right)
    assert [i for i, _ in left_entries] == [i for i, _ in right_entries]
    left_values = [v for _, v in left_entries]
    right_values = [v for _, v in right_entries]
    assert left_values == pytest.approx(right_values, rel=rel, abs=abs)


def assert_invariants(vec: SparseVector) -> None:
    """Strictly ascending indices, and no stored zeros."""
    indices = vec.indices()
    assert indices == sorted(set(indices))
    assert all(i >= 0 for i in indices)
    assert all(v != 0 for v in vec.values())


small_ints = st.integers(min_value=-50, max_value=50)


@st.composite
def sparse_vectors(
    draw,
    values: st.SearchStrategy = small_ints,
    max_index: int = 40,
    max_size: int = 15,
) -> SparseVector:
    """Valid sparse vectors: ascending, unique indices and no zero values."""
    indices = draw(
        st.lists(
            st.integers(min_value=0, max_value=max_index),
            unique=True,
            max_size=max_size,
        )
    )
    nonzero = values.filter(lambda v: v != 0)
    return SparseVector([(i, draw(nonzero)) for i in sorted(indices)])


@st.composite
def dense_vectors(draw, length: int, values: st.SearchStrategy = small_ints):
    return DenseVector(draw(st.lists(values, min_size=length, max_size=length)))
