# -*- coding: utf-8 -*-
import operator
from typing import Iterable, Iterator, Optional

import numpy as np

from bitree.data.errors import InvalidRangeError, OutOfRangeError
from bitree.data.types import DTypeLike, Scalar, to_numpy, to_scalar


class FenwickTree:
    """Fenwick tree (binary indexed tree) over a flat numpy buffer.

    The buffer has one slot per logical value. Slot ``k`` holds the sum of
    the logical values over ``[k & (k + 1), k]``, e.g. for 8 values:

        0, 0..1, 2, 0..3, 4, 4..5, 6, 0..7

    A prefix sum up to ``i`` adds slot ``i`` and then jumps to
    ``(i & (i + 1)) - 1`` until it runs past the front. The slots whose range
    contains ``i`` are ``i``, ``i | (i + 1)``, ... while below ``len(self)``.
    Both walks visit O(log n) slots. Indices are 0-based everywhere.

    The element dtype must be an integer or floating type and is fixed for the
    lifetime of the tree.
    """

    def __init__(self, values: Iterable = (), dtype: Optional[DTypeLike] = None) -> None:
        self._tree = np.zeros(0, dtype=float)
        self._build(to_numpy(values, dtype))

    def construct(self, values: Iterable, dtype: Optional[DTypeLike] = None) -> None:
        """Rebuild from ``values``, keeping the current dtype unless one is given."""

        self._build(to_numpy(values, self.dtype if dtype is None else dtype))

    def _build(self, tree: np.ndarray) -> None:
        # tree is a fresh array from to_numpy, summed in place
        n = len(tree)
        for k in range(n):
            parent = k | (k + 1)
            if parent < n:
                tree[parent] += tree[k]
        self._tree = tree

    @property
    def dtype(self) -> np.dtype:
        return self._tree.dtype

    @property
    def size(self) -> int:
        return len(self._tree)

    def __len__(self) -> int:
        return len(self._tree)

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._tree)

    def clear(self) -> None:
        self._tree = np.zeros(0, dtype=self.dtype)

    def prefix_sum(self, index: Optional[int] = None) -> Scalar:
        """Return the sum of the logical values over [0, index].

        Without an index, return the sum of all values (0 for an empty tree).
        """

        if index is None:
            if len(self) == 0:
                return self.dtype.type(0)
            index = len(self) - 1

        index = operator.index(index)
        if index < 0 or index >= len(self):
            raise OutOfRangeError(f"prefix_sum({index}) exceeds range [0, {len(self)})")

        result = self.dtype.type(0)
        while index >= 0:
            result += self._tree[index]
            index = (index & (index + 1)) - 1
        return result

    def range_sum(self, i: int, j: int) -> Scalar:
        """Return the sum of the logical values over [i, j].

        Only ``prefix_sum(j)`` and ``prefix_sum(i - 1)`` check their bounds,
        and any ``i <= 0`` simply drops the lower term.
        """

        i, j = operator.index(i), operator.index(j)
        if i > j:
            raise InvalidRangeError(f"range_sum({i}, {j}) has a negative range")

        upper = self.prefix_sum(j)
        if i - 1 < 0:
            return upper
        return upper - self.prefix_sum(i - 1)

    def update(self, i: int, j: int, delta: Scalar) -> bool:
        """Add ``delta`` to every logical value in [i, j].

        Return False without touching the tree when ``i < 0`` or
        ``j + 1 >= len(self)``; the last value can therefore not take part in
        an update.
        """

        i, j = operator.index(i), operator.index(j)
        if i > j:
            raise InvalidRangeError(f"update({i}, {j}) has a negative range")

        n = len(self)
        end = j + 1
        if i < 0 or end < 0 or i >= n or end >= n:
            return False

        delta = to_scalar(delta, self.dtype)

        # slots i..j, each by the size of its overlap with [i, j]
        slots = np.arange(i, end)
        lo = np.maximum(slots & (slots + 1), i)
        self._tree[i:end] += delta * (slots - lo + 1).astype(self.dtype)

        # slots past j whose range contains j
        k = j | end
        while k < n:
            beg = max(k & (k + 1), i)
            self._tree[k] += delta * self.dtype.type(end - beg)
            k |= k + 1

        return True

    def element_at(self, slot: int) -> Scalar:
        """Return the raw value stored in ``slot``, not the logical value."""

        slot = operator.index(slot)
        if slot < 0 or slot >= len(self):
            raise OutOfRangeError(f"slot {slot} exceeds range [0, {len(self)})")
        return self._tree[slot]

    def __getitem__(self, slot: int) -> Scalar:
        return self.element_at(slot)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FenwickTree):
            return NotImplemented
        return bool(np.array_equal(self._tree, other._tree))

    __hash__ = None

    def __str__(self) -> str:
        return " ".join(str(v) for v in self._tree)

    def __repr__(self) -> str:
        return f"FenwickTree(dtype={self.dtype}, tree=[{self}])"

