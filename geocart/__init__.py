# -*- coding: utf-8 -*-
"""
geocart - Cartesian and geographic coordinates on a sphere.

Converts points between a Cartesian (x, y, z) system and a geographic
(longitude, latitude, altitude) system, computes great-circle distances,
and projects geographic coordinates onto a plane.

Modules
-------
geometry : Coordinate types, conversions and distance
projection : Map projections (equirectangular)
utils : Constants and helper functions

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

__version__ = "0.1.0"

from geocart import geometry, projection, utils

__all__ = ["geometry", "projection", "utils", "__version__"]
