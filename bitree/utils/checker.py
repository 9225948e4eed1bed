# -*- coding: utf-8 -*-
from typing import Optional

import numpy as np
import tqdm

from bitree.data.fenwick import FenwickTree
from bitree.data.types import DTypeLike, Scalar, to_dtype
from bitree.utils.utils import process_cfg, random_values


class Checker:
    """Random consistency check of a FenwickTree.

    Every update is mirrored on a plain numpy array holding the logical
    values, and every query is answered from both. Rejected updates must be
    exactly the ones whose window runs off the tree.
    """

    def __init__(
        self,
        size: int,
        low: Scalar,
        high: Scalar,
        dtype: DTypeLike,
        init: Optional[np.ndarray] = None,
        update_ratio: float = 0.5,
    ):
        assert 0.0 <= update_ratio <= 1.0
        self.dtype = to_dtype(dtype)
        self.low = low
        self.high = high
        self.update_ratio = update_ratio

        if init is None:
            init = random_values(size, low, high, self.dtype)
        self.ref = np.array(init, dtype=self.dtype)
        self.tree = FenwickTree(self.ref, dtype=self.dtype)
        self.reset()

    def reset(self) -> None:
        self.steps = 0
        self.updates = 0
        self.rejected_updates = 0
        self.queries = 0
        self.mismatches = 0

    def close(self, got, expected) -> np.ndarray:
        if self.dtype.kind == "f":
            return np.isclose(got, expected, rtol=1e-4, atol=1e-4)
        return np.asarray(got) == np.asarray(expected)

    def step(self) -> dict:
        self.steps += 1
        n = len(self.ref)

        if np.random.rand() < self.update_ratio:
            # window may run off either end to exercise rejection
            i, j = sorted(np.random.randint(-1, n + 1, size=2).tolist())
            delta = random_values(1, self.low, self.high, self.dtype)[0]
            ok = self.tree.update(i, j, delta)
            if ok:
                self.ref[i : j + 1] += delta
                self.updates += 1
            else:
                assert i < 0 or j + 1 >= n
                self.rejected_updates += 1
            return dict(op="update", i=i, j=j, ok=ok)

        self.queries += 1
        if n == 0:
            got, expected = self.tree.prefix_sum(), 0
            i, j = 0, -1
        else:
            i, j = sorted(np.random.randint(0, n, size=2).tolist())
            got, expected = self.tree.range_sum(i, j), self.ref[i : j + 1].sum()
        ok = bool(self.close(got, expected))
        if not ok:
            self.mismatches += 1
        return dict(op="query", i=i, j=j, ok=ok)

    def verify(self) -> int:
        """Compare every prefix sum with the reference, return the mismatch count"""

        if len(self.ref) == 0:
            return int(self.tree.prefix_sum() != 0)
        expected = np.cumsum(self.ref, dtype=self.dtype)
        got = np.array([self.tree.prefix_sum(k) for k in range(len(self.ref))], dtype=self.dtype)
        return int(np.sum(~self.close(got, expected)))

    def run(self, steps: int, verify_every: int = 100) -> dict:
        self.reset()

        with tqdm.tqdm(total=steps, **self.tqdm_cfg()) as t:
            while t.n < t.total:
                t.update()
                self.step()

                if verify_every > 0 and t.n % verify_every == 0:
                    self.mismatches += self.verify()
                    t.set_postfix(self.info())

        self.mismatches += self.verify()
        return self.info()

    def info(self) -> dict:
        return dict(
            steps=self.steps,
            updates=self.updates,
            rejected_updates=self.rejected_updates,
            queries=self.queries,
            mismatches=self.mismatches,
        )

    def tqdm_cfg(self):
        return dict(
            ascii=True,
            dynamic_ncols=True,
            desc=f"FenwickTree[{len(self.ref)}, {self.dtype}]",
        )


def check(cfg: dict) -> dict:
    cfg = process_cfg(cfg)

    checker = Checker(**cfg["checker"])
    info = checker.run(**cfg["run"])
    print(
        f"{info['steps']} steps: {info['updates']} updates "
        f"({info['rejected_updates']} rejected), {info['queries']} queries, "
        f"{info['mismatches']} mismatches"
    )
    return info
