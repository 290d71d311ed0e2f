"""Merge-joins over ascending (index, value) sequences.

Both joins walk their inputs exactly once, in lockstep, like the merge step
of a merge sort. Neither one sorts: the inputs must already be strictly
ascending by index, which is what `SparseVector` and `DenseVector` iterate as.
"""

from __future__ import annotations

from typing import Iterable, Iterator, TypeVar

L = TypeVar("L")
R = TypeVar("R")


class Missing:
    """The value of the side that has no entry at an index in an outer join."""

    def __repr__(self):
        return "MISSING"

    def __str__(self):
        return "MISSING"

    def __bool__(self):
        return False


MISSING = Missing()


def outer_join(
    lhs: Iterable[tuple[int, L]], rhs: Iterable[tuple[int, R]]
) -> Iterator[tuple[int, L | Missing, R | Missing]]:
    """Visit every index present in either input, in ascending order.

    Parameters
    ----------
    lhs :
        Ascending, duplicate-free (index, value) pairs.
    rhs :
        Ascending, duplicate-free (index, value) pairs.

    Yields
    ------
    tuple
        (index, left_value, right_value), where a side with no entry at
        that index is `MISSING`.

    Examples
    --------
    >>> list(outer_join([(0, "a"), (2, "b")], [(1, "x"), (2, "y")]))
    [(0, 'a', MISSING), (1, MISSING, 'x'), (2, 'b', 'y')]
    """
    left = iter(lhs)
    right = iter(rhs)
    lpair = next(left, None)
    rpair = next(right, None)
    while lpair is not None and rpair is not None:
        li, lv = lpair
        ri, rv = rpair
        if li < ri:
            yield li, lv, MISSING
            lpair = next(left, None)
        elif ri < li:
            yield ri, MISSING, rv
            rpair = next(right, None)
        else:
            yield li, lv, rv
            lpair = next(left, None)
            rpair = next(right, None)
    # at most one of these loops runs
    while lpair is not None:
        yield lpair[0], lpair[1], MISSING
        lpair = next(left, None)
    while rpair is not None:
        yield rpair[0], MISSING, rpair[1]
        rpair = next(right, None)


def inner_join(
    lhs: Iterable[tuple[int, L]], rhs: Iterable[tuple[int, R]]
) -> Iterator[tuple[int, L, R]]:
    """Visit only the indices present in both inputs, in ascending order.

    Whichever side is behind is advanced without emitting anything.
    Iteration stops as soon as either side runs out, since no further
    index can be shared after that.
    If either input is sized and empty, the other is never iterated at all.

    Examples
    --------
    >>> list(inner_join([(0, 1), (2, 2), (5, 3)], [(2, 10), (3, 20), (5, 30)]))
    [(2, 2, 10), (5, 3, 30)]
    >>> list(inner_join([], iter([(0, 1)])))
    []
    """
    if _is_empty(lhs) or _is_empty(rhs):
        return
    left = iter(lhs)
    right = iter(rhs)
    lpair = next(left, None)
    rpair = next(right, None)
    while lpair is not None and rpair is not None:
        li = lpair[0]
        ri = rpair[0]
        if li < ri:
            lpair = next(left, None)
        elif ri < li:
            rpair = next(right, None)
        else:
            yield li, lpair[1], rpair[1]
            lpair = next(left, None)
            rpair = next(right, None)


def _is_empty(pairs: Iterable) -> bool:
    try:
        return len(pairs) == 0
    except TypeError:
        # a plain iterator, we can't know without consuming it
        return False
