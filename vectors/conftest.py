from __future__ import annotations

import pytest

from vectors import FixedStorage, GrowableStorage, SparseVector, Storage

# we want to have pytest assert introspection in the helpers
pytest.register_assert_rewrite("vectors.tests.util")


@pytest.fixture(params=["growable", "fixed"])
def storage(request) -> Storage:
    """Fixture that allows you to test an operator against both kinds of storage.

    The fixed storage is roomy enough for everything in the tests,
    so results should be identical between the two.

    ```python
    def test_add(storage):
        a = SparseVector([(0, 1)], storage=storage)
        assert len(a + a) == 1
    ```
    """
    if request.param == "growable":
        return GrowableStorage()
    elif request.param == "fixed":
        return FixedStorage(64)
    else:
        assert False


@pytest.fixture
def a(storage) -> SparseVector:
    return SparseVector(
        [(0, 0.2), (1, 0.5), (2, 1.0), (4, 2.0), (5, 4.0)], storage=storage
    )


@pytest.fixture
def b(storage) -> SparseVector:
    return SparseVector(
        [(1, 0.1), (2, 0.2), (3, 0.3), (5, 0.4), (6, 0.5)], storage=storage
    )
