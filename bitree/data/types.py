# -*- coding: utf-8 -*-
from typing import Any, Iterable, Optional, Union

import numpy as np

DTypeLike = Union[np.dtype, type, str]
Scalar = Union[int, float, np.number]

# signed integer, unsigned integer, floating
ARITHMETIC_KINDS = "iuf"


def to_dtype(dtype: Any) -> np.dtype:
    """Return ``dtype`` as a numpy dtype, rejecting non-arithmetic ones."""

    if dtype is None:
        raise TypeError("dtype must not be None")
    try:
        dtype = np.dtype(dtype)
    except TypeError as e:
        raise TypeError(f"{dtype!r} is not a valid dtype") from e
    if dtype.kind not in ARITHMETIC_KINDS:
        raise TypeError(f"dtype {dtype} is not an arithmetic type")
    return dtype


def to_numpy(values: Iterable, dtype: Optional[DTypeLike] = None) -> np.ndarray:
    """Convert ``values`` to a new 1-D array of an arithmetic dtype.

    With an explicit dtype, non-array iterables are consumed in a single pass
    by ``np.fromiter``. Without one, the dtype is inferred by numpy and an
    empty input gives ``float64``.
    """

    if dtype is not None:
        dtype = to_dtype(dtype)
        if isinstance(values, np.ndarray):
            arr = np.array(values, dtype=dtype)
        else:
            arr = np.fromiter(values, dtype=dtype)
    else:
        if not isinstance(values, np.ndarray):
            values = list(values)
        arr = np.array(values)
        to_dtype(arr.dtype)

    if arr.ndim != 1:
        raise ValueError(f"expected a 1-D sequence, got shape {arr.shape}")
    return arr


def to_scalar(value: Scalar, dtype: np.dtype) -> np.number:
    """Cast ``value`` to a numpy scalar of ``dtype`` (integer types wrap)."""

    return np.asarray(value).astype(dtype)[()]
