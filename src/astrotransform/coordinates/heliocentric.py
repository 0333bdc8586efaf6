"""Heliocentric to geocentric rectangular coordinates.

Rotates a heliocentric ecliptic position ``(L, B, R)`` about the x-axis by
the true obliquity of the ecliptic, giving rectangular coordinates
``(X, Y, Z)`` in AU.

References:
    1. J. Meeus, *Astronomical Algorithms*, eq. 37.1, p. 264.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax.typing import ArrayLike

from astrotransform.config import get_dtype
from astrotransform.nutation import get_nutation
from astrotransform.positions import GeocentricPosition, HeliocentricPosition
from astrotransform.utils import deg_to_rad


def geocentric_from_heliocentric(
    helio: HeliocentricPosition,
    jd: ArrayLike,
) -> GeocentricPosition:
    """Transform heliocentric coordinates into rectangular geocentric coordinates.

    Args:
        helio: Heliocentric position. ``L`` and ``B`` in *deg*, ``R`` in *AU*.
        jd: Julian Day.

    Returns:
        GeocentricPosition: ``(X, Y, Z)`` in *AU*.  ``R = 0`` gives the origin.

    Examples:
        ```python
        from astrotransform.coordinates import geocentric_from_heliocentric
        from astrotransform.positions import HeliocentricPosition
        pos = geocentric_from_heliocentric(
            HeliocentricPosition(L=26.11428, B=-2.62070, R=0.724603),
            2448976.5,
        )
        ```
    """
    dtype = get_dtype()
    L = deg_to_rad(jnp.asarray(helio.L, dtype=dtype))
    B = deg_to_rad(jnp.asarray(helio.B, dtype=dtype))
    R = jnp.asarray(helio.R, dtype=dtype)

    ecliptic = deg_to_rad(get_nutation(jd).ecliptic)
    sin_e = jnp.sin(ecliptic)
    cos_e = jnp.cos(ecliptic)

    sin_B = jnp.sin(B)
    cos_B = jnp.cos(B)
    sin_L = jnp.sin(L)
    cos_L = jnp.cos(L)

    # eq. 37.1
    X = R * cos_L * cos_B
    Y = R * (sin_L * cos_B * cos_e - sin_B * sin_e)
    Z = R * (sin_L * cos_B * sin_e + sin_B * cos_e)

    return GeocentricPosition(X, Y, Z)
