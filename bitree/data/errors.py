# -*- coding: utf-8 -*-


class FenwickTreeError(Exception):
    """Base class of the errors raised by FenwickTree"""


class OutOfRangeError(FenwickTreeError, IndexError):
    """An index or slot lies outside [0, len(tree))"""


class InvalidRangeError(FenwickTreeError, ValueError):
    """A range [i, j] was given with i > j"""
