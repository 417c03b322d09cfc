# -*- coding: utf-8 -*-
"""
Miscellaneous Utilities - Float comparison and sign normalization.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

import numpy as np

from geocart.utils.constants import ABS_TOLERANCE


def approx_eq(a: float, b: float, abs_error: float = ABS_TOLERANCE) -> bool:
    """
    Check whether two floats are equal within an absolute error.

    Parameters
    ----------
    a : float
        First value.
    b : float
        Second value.
    abs_error : float
        Maximum accepted absolute difference. Default ``ABS_TOLERANCE``.

    Returns
    -------
    bool
        True if ``|a - b| <= abs_error``.
    """
    return bool(np.abs(a - b) <= abs_error)


def positive_float(value: float) -> float:
    """
    Discard the sign of a value.

    Quantities such as radii and altitudes are non-negative; a negative
    input is reinterpreted as its magnitude rather than rejected.

    Parameters
    ----------
    value : float
        Any float.

    Returns
    -------
    float
        ``abs(value)`` as a Python float.
    """
    return float(np.abs(value))


__all__ = [
    "approx_eq",
    "positive_float",
]
