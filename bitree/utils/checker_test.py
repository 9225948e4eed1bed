# -*- coding: utf-8 -*-
import numpy as np

from bitree.utils.checker import Checker, check
from bitree.utils.utils import process_cfg, random_values


def get_cfg(**checker) -> dict:
    cfg = dict(
        seed=0,
        checker=dict(
            size=40,
            low=-10,
            high=10,
            dtype="int64",
            init=None,
            update_ratio=0.5,
        ),
        run=dict(
            steps=500,
            verify_every=50,
        ),
    )
    cfg["checker"].update(checker)
    return cfg


def test_process_cfg():
    cfg = process_cfg(get_cfg(dtype=float))
    assert cfg["checker"]["dtype"] == np.float64
    first = random_values(10, -1.0, 1.0, np.float64)

    process_cfg(get_cfg())
    second = random_values(10, -1.0, 1.0, np.float64)
    assert np.all(first == second)

    cfg = process_cfg(get_cfg(init=[1, 2, 3]))
    assert cfg["checker"]["size"] == 3


def test_random_values():
    ints = random_values(100, -5, 5, np.int32)
    assert ints.dtype == np.int32
    assert ints.min() >= -5 and ints.max() < 5

    floats = random_values(100, 0.0, 2.0, "float64")
    assert floats.dtype == np.float64
    assert floats.min() >= 0.0 and floats.max() < 2.0


def test_Checker():
    checker = Checker(30, -100, 100, np.int64)
    assert checker.verify() == 0

    for _ in range(300):
        info = checker.step()
        assert info["ok"] or (info["op"] == "update" and (info["i"] < 0 or info["j"] + 1 >= 30))
    assert checker.verify() == 0
    assert checker.mismatches == 0
    assert checker.steps == 300
    assert checker.updates + checker.rejected_updates + checker.queries == 300


def test_Checker_init():
    init = [1, 6, 2, 4, 3, 5]
    checker = Checker(0, 0, 10, int, init=init, update_ratio=0.0)
    assert len(checker.tree) == len(init)
    assert checker.tree.prefix_sum() == 21

    for _ in range(50):
        assert checker.step()["op"] == "query"
    assert checker.queries == 50
    assert checker.mismatches == 0


def test_Checker_empty():
    checker = Checker(0, 0, 10, np.float64)
    for _ in range(20):
        assert checker.step()["ok"] is not None
    assert checker.mismatches == 0
    assert checker.updates == 0
    assert checker.verify() == 0


def test_Checker_detects_mismatch():
    checker = Checker(16, 0, 10, np.int64)
    checker.ref[3] += 1
    assert checker.verify() == 16 - 3


def test_check():
    info = check(get_cfg())
    assert info["steps"] == 500
    assert info["mismatches"] == 0
    assert info["updates"] > 0 and info["rejected_updates"] > 0 and info["queries"] > 0

    info = check(get_cfg(dtype="float64", low=-1.0, high=1.0, size=25))
    assert info["mismatches"] == 0


if __name__ == "__main__":
    test_process_cfg()
    test_random_values()
    test_Checker()
    test_Checker_init()
    test_Checker_empty()
    test_Checker_detects_mismatch()
    test_check()
