# -*- coding: utf-8 -*-
import numpy as np

from bitree.data.types import DTypeLike, Scalar, to_dtype


def random_values(size: int, low: Scalar, high: Scalar, dtype: DTypeLike) -> np.ndarray:
    """Draw ``size`` values from [low, high) with numpy's global generator."""

    dtype = to_dtype(dtype)
    if dtype.kind == "f":
        return np.random.uniform(low, high, size=size).astype(dtype)
    return np.random.randint(low, high, size=size).astype(dtype)


def process_cfg(cfg: dict) -> dict:
    seed = cfg["seed"]
    if seed is not None:
        np.random.seed(seed)

    checker = cfg["checker"]
    checker["dtype"] = to_dtype(checker["dtype"])
    assert checker["size"] >= 0
    assert checker["low"] < checker["high"]
    if checker.get("init") is not None:
        checker["size"] = len(checker["init"])

    return cfg
