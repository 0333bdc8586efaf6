"""
astrotransform is a small library of astronomical coordinate transformations implemented in JAX.

Importing astrotransform enables JAX's process-wide ``jax_enable_x64`` flag,
since Julian Days need double precision.  See :mod:`astrotransform.config`.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    AS2DEG,
    HOURS2RAD,
    DEG2HOURS,
    JD2000,
    DAYS_PER_CENTURY,
    OBLIQUITY_J2000,
)

from .config import set_dtype, get_dtype

from .positions import (
    HeliocentricPosition,
    GeocentricPosition,
    EquatorialPosition,
    HorizontalPosition,
    EclipticalPosition,
    ObserverPosition,
)

from .nutation import Nutation, get_nutation, mean_obliquity
from .sidereal import get_mean_sidereal_time, get_apparent_sidereal_time

from .utils import (
    deg_to_rad,
    rad_to_deg,
    normalize_angle,
    normalize_signed_angle,
)

from .coordinates import (
    geocentric_from_heliocentric,
    horizontal_from_equatorial,
    equatorial_from_horizontal,
    equatorial_from_ecliptical,
    ecliptical_from_equatorial,
)

__all__ = [
    # Constants
    "DEG2RAD",
    "RAD2DEG",
    "AS2DEG",
    "HOURS2RAD",
    "DEG2HOURS",
    "JD2000",
    "DAYS_PER_CENTURY",
    "OBLIQUITY_J2000",
    # Config
    "set_dtype",
    "get_dtype",
    # Positions
    "HeliocentricPosition",
    "GeocentricPosition",
    "EquatorialPosition",
    "HorizontalPosition",
    "EclipticalPosition",
    "ObserverPosition",
    # Nutation and sidereal time
    "Nutation",
    "get_nutation",
    "mean_obliquity",
    "get_mean_sidereal_time",
    "get_apparent_sidereal_time",
    # Utilities
    "deg_to_rad",
    "rad_to_deg",
    "normalize_angle",
    "normalize_signed_angle",
    # Coordinates
    "geocentric_from_heliocentric",
    "horizontal_from_equatorial",
    "equatorial_from_horizontal",
    "equatorial_from_ecliptical",
    "ecliptical_from_equatorial",
]
