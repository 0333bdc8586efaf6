"""Coordinate transformations.

This sub-module provides the transformations between the astronomical
coordinate frames:

- **Heliocentric → geocentric**: ecliptic ``(L, B, R)`` to rectangular
  ``(X, Y, Z)``
- **Equatorial ↔ horizontal**: ``(ra, dec)`` ↔ ``(alt, az)`` for an observer
  at a given Julian Day
- **Ecliptical ↔ equatorial**: ``(lng, lat)`` ↔ ``(ra, dec)``

Angles are in degrees at the function boundaries.
"""

from .ecliptical import (
    ecliptical_from_equatorial,
    equatorial_from_ecliptical,
)
from .heliocentric import geocentric_from_heliocentric
from .horizontal import (
    equatorial_from_horizontal,
    horizontal_from_equatorial,
)

__all__ = [
    "geocentric_from_heliocentric",
    "horizontal_from_equatorial",
    "equatorial_from_horizontal",
    "equatorial_from_ecliptical",
    "ecliptical_from_equatorial",
]
