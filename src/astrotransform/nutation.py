"""Nutation and obliquity of the ecliptic.

Implements the abridged nutation series of Meeus, good to 0.5" in
longitude and 0.1" in obliquity, together with the IAU 1980 polynomial for
the mean obliquity.  The coordinate transforms only need the true
obliquity (``Nutation.ecliptic``); the sidereal-time module uses the
nutation in longitude for the equation of the equinoxes.

All angles are returned in degrees.

References:
    1. J. Meeus, *Astronomical Algorithms (2nd Ed.)*, ch. 22, 1998.
"""

from __future__ import annotations

from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from astrotransform.config import get_dtype
from astrotransform.constants import AS2DEG, DAYS_PER_CENTURY, JD2000, OBLIQUITY_J2000
from astrotransform.utils import deg_to_rad


class Nutation(NamedTuple):
    """Nutation quantities at a given Julian Day.

    Attributes:
        longitude: Nutation in longitude, Δψ. Units: *deg*
        obliquity: Nutation in obliquity, Δε. Units: *deg*
        ecliptic: True obliquity of the ecliptic, ε0 + Δε. Units: *deg*
    """

    longitude: Array
    obliquity: Array
    ecliptic: Array


def _julian_centuries(jd: ArrayLike) -> Array:
    jd = jnp.asarray(jd, dtype=get_dtype())
    return (jd - JD2000) / DAYS_PER_CENTURY


def mean_obliquity(jd: ArrayLike) -> Array:
    """Mean obliquity of the ecliptic (Meeus eq. 22.2).

    Args:
        jd: Julian Day.

    Returns:
        Mean obliquity ε0 in degrees.
    """
    t = _julian_centuries(jd)
    eps0 = OBLIQUITY_J2000 + t * (-46.8150 + t * (-0.00059 + t * 0.001813))
    return eps0 * AS2DEG


def get_nutation(jd: ArrayLike) -> Nutation:
    """Compute nutation in longitude and obliquity, and the true obliquity.

    Args:
        jd: Julian Day.

    Returns:
        Nutation: ``(longitude, obliquity, ecliptic)`` in degrees.

    Examples:
        ```python
        from astrotransform.nutation import get_nutation
        nut = get_nutation(2446895.5)  # 1987 April 10, 0h TD
        float(nut.longitude) * 3600.0  # ~ -3.8 arcsec
        ```
    """
    t = _julian_centuries(jd)

    # Longitude of the ascending node of the Moon's mean orbit
    omega = deg_to_rad(
        125.04452 + t * (-1934.136261 + t * (0.0020708 + t / 450000.0))
    )
    # Mean longitudes of the Sun and the Moon
    l_sun = deg_to_rad(280.4665 + 36000.7698 * t)
    l_moon = deg_to_rad(218.3165 + 481267.8813 * t)

    d_psi = (
        -17.20 * jnp.sin(omega)
        - 1.32 * jnp.sin(2.0 * l_sun)
        - 0.23 * jnp.sin(2.0 * l_moon)
        + 0.21 * jnp.sin(2.0 * omega)
    )
    d_eps = (
        9.20 * jnp.cos(omega)
        + 0.57 * jnp.cos(2.0 * l_sun)
        + 0.10 * jnp.cos(2.0 * l_moon)
        - 0.09 * jnp.cos(2.0 * omega)
    )

    longitude = d_psi * AS2DEG
    obliquity = d_eps * AS2DEG
    ecliptic = mean_obliquity(jd) + obliquity

    return Nutation(longitude, obliquity, ecliptic)
