# -*- coding: utf-8 -*-
"""
Constants - Angular constants and numeric tolerances for spherical geometry.

Provides commonly used constants including:
- Angular boundaries of the geographic system (π, 2π, π/2)
- Floating-point tolerances used when comparing normalized angles
- Default sphere radius for projections

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

# ===================================================================
# Mathematical Constants
# ===================================================================

#: Pi (also available as math.pi or np.pi)
PI = 3.141592653589793

#: Two times Pi (2π), one full turn
TWO_PI = 2.0 * PI

#: Half Pi (π/2), one quarter turn
HALF_PI = PI / 2.0

# ===================================================================
# Geographic Boundaries
# ===================================================================

#: Lower (inclusive) bound of longitude in radians
LONGITUDE_MIN = -PI

#: Upper (exclusive) bound of longitude in radians
LONGITUDE_MAX = PI

#: Lower (inclusive) bound of latitude in radians
LATITUDE_MIN = -HALF_PI

#: Upper (inclusive) bound of latitude in radians
LATITUDE_MAX = HALF_PI

# ===================================================================
# Tolerances
# ===================================================================

#: Absolute error accepted when comparing folded latitudes.
#: asin(sin(v)) loses a couple of ULPs around π/4.
ABS_TOLERANCE = 3e-16

#: Absolute error accepted for distances and conversion round-trips
DISTANCE_TOLERANCE = 1e-12

# ===================================================================
# Projection Defaults
# ===================================================================

#: Default sphere radius (unit sphere)
DEFAULT_RADIUS = 1.0

# ===================================================================
# Constants Dictionary (for programmatic access)
# ===================================================================

CONSTANTS = {
    'PI': PI,
    'TWO_PI': TWO_PI,
    'HALF_PI': HALF_PI,
    'LONGITUDE_MIN': LONGITUDE_MIN,
    'LONGITUDE_MAX': LONGITUDE_MAX,
    'LATITUDE_MIN': LATITUDE_MIN,
    'LATITUDE_MAX': LATITUDE_MAX,
    'ABS_TOLERANCE': ABS_TOLERANCE,
    'DISTANCE_TOLERANCE': DISTANCE_TOLERANCE,
    'DEFAULT_RADIUS': DEFAULT_RADIUS,
}

__all__ = [
    # Mathematical
    'PI',
    'TWO_PI',
    'HALF_PI',
    # Boundaries
    'LONGITUDE_MIN',
    'LONGITUDE_MAX',
    'LATITUDE_MIN',
    'LATITUDE_MAX',
    # Tolerances
    'ABS_TOLERANCE',
    'DISTANCE_TOLERANCE',
    # Defaults
    'DEFAULT_RADIUS',
    # Dictionary
    'CONSTANTS',
]
