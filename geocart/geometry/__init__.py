# -*- coding: utf-8 -*-
"""
Geometry - Cartesian and geographic systems of coordinates on a sphere.

Provides:
- Cartesian points (x, y, z)
- Self-normalizing Longitude, Latitude and Altitude
- Cartesian <-> geographic conversion
- Great-circle distance

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from geocart.geometry.cartesian import Cartesian

from geocart.geometry.geographic import (
    wrap_longitude,
    fold_latitude,
    Longitude,
    Latitude,
    Altitude,
    Geographic,
    great_circle_distance,
)

__all__ = [
    # Cartesian
    "Cartesian",
    # Geographic
    "wrap_longitude",
    "fold_latitude",
    "Longitude",
    "Latitude",
    "Altitude",
    "Geographic",
    "great_circle_distance",
]
