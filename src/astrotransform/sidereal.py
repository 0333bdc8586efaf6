"""Greenwich sidereal time.

Mean sidereal time follows Meeus eq. 12.4.  Apparent sidereal time adds
the equation of the equinoxes, ``Δψ·cos(ε) / 15``, from
:func:`~astrotransform.nutation.get_nutation`.

Both functions return hours in ``[0, 24)`` for the mean value; the apparent
value is the mean value plus a correction of a fraction of a second and is
not wrapped again.

References:
    1. J. Meeus, *Astronomical Algorithms (2nd Ed.)*, ch. 12, 1998.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from astrotransform.config import get_dtype
from astrotransform.constants import DAYS_PER_CENTURY, DEG2HOURS, JD2000
from astrotransform.nutation import get_nutation
from astrotransform.utils import deg_to_rad, normalize_angle


def get_mean_sidereal_time(jd: ArrayLike) -> Array:
    """Mean sidereal time at Greenwich.

    Args:
        jd: Julian Day (UT).

    Returns:
        Mean sidereal time in hours, ``[0, 24)``.

    Examples:
        ```python
        from astrotransform.sidereal import get_mean_sidereal_time
        get_mean_sidereal_time(2446895.5)  # ~13.1795463 h
        ```
    """
    jd = jnp.asarray(jd, dtype=get_dtype())
    d = jd - JD2000
    t = d / DAYS_PER_CENTURY

    theta = (
        280.46061837
        + 360.98564736629 * d
        + 0.000387933 * t * t
        - t * t * t / 38710000.0
    )
    return normalize_angle(theta) * DEG2HOURS


def get_apparent_sidereal_time(jd: ArrayLike) -> Array:
    """Apparent sidereal time at Greenwich.

    Args:
        jd: Julian Day (UT).

    Returns:
        Apparent sidereal time in hours.
    """
    nut = get_nutation(jd)
    correction = nut.longitude * jnp.cos(deg_to_rad(nut.ecliptic)) * DEG2HOURS
    return get_mean_sidereal_time(jd) + correction
