# -*- coding: utf-8 -*-
"""
Map Projections - Geographic coordinates to and from a flat plane.

Provides:
- The abstract ``Projection`` capability (forward / reverse)
- The equirectangular projection
- Lookup of projections by name

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from geocart.projection.base import Projection

from geocart.projection.equirectangular import Equirectangular

from geocart.projection.registry import (
    register_projection,
    get_projection_list,
    get_projection,
)

__all__ = [
    "Projection",
    "Equirectangular",
    "register_projection",
    "get_projection_list",
    "get_projection",
]
