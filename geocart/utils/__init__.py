# -*- coding: utf-8 -*-
"""
Utilities - Constants and helper functions.

Angular constants, tolerances, and float helpers shared by the geometry
and projection subpackages.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from geocart.utils.constants import (
    PI,
    TWO_PI,
    HALF_PI,
    ABS_TOLERANCE,
    DISTANCE_TOLERANCE,
    DEFAULT_RADIUS,
)

from geocart.utils.misc import (
    approx_eq,
    positive_float,
)

__all__ = [
    "PI",
    "TWO_PI",
    "HALF_PI",
    "ABS_TOLERANCE",
    "DISTANCE_TOLERANCE",
    "DEFAULT_RADIUS",
    "approx_eq",
    "positive_float",
]
