"""Equatorial <-> horizontal coordinate transformations.

The hour angle of an object is ``H = θ - L - α`` where θ is the Greenwich
sidereal time, ``L`` the observer longitude (positive west) and α the
right ascension.  Azimuth is measured westward from the south point.

By default both directions resolve the azimuth or hour angle with a
single-argument arctangent, so results near the quadrant boundaries can
be off by 180°.  Existing outputs depend on this, so it is kept as the
default; pass ``quadrant_correct=True`` for the two-argument variant.

The forward transform uses the *mean* sidereal time and the inverse the
*apparent* sidereal time, so a round trip differs in right ascension by
the equation of the equinoxes.

References:
    1. J. Meeus, *Astronomical Algorithms*, eq. 12.5, 12.6, pp. 88-89.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax.typing import ArrayLike

from astrotransform.config import get_dtype
from astrotransform.constants import HOURS2RAD
from astrotransform.positions import (
    EquatorialPosition,
    HorizontalPosition,
    ObserverPosition,
)
from astrotransform.sidereal import get_apparent_sidereal_time, get_mean_sidereal_time
from astrotransform.utils import deg_to_rad, rad_to_deg


def horizontal_from_equatorial(
    equ: EquatorialPosition,
    observer: ObserverPosition,
    jd: ArrayLike,
    quadrant_correct: bool = False,
) -> HorizontalPosition:
    """Transform equatorial coordinates to horizontal coordinates.

    Args:
        equ: Object right ascension and declination in *deg*.
        observer: Observer longitude and latitude in *deg*.
        jd: Julian Day.
        quadrant_correct: If ``True``, resolve the azimuth with ``arctan2``
            instead of the single-argument ``arctan``.

    Returns:
        HorizontalPosition: Altitude and azimuth in *deg*.  Azimuth is not
            normalized.

    Examples:
        ```python
        from astrotransform.coordinates import horizontal_from_equatorial
        from astrotransform.positions import EquatorialPosition, ObserverPosition
        hrz = horizontal_from_equatorial(
            EquatorialPosition(ra=347.3193, dec=-6.7199),
            ObserverPosition(lng=77.0656, lat=38.9214),
            2446896.30625,
        )
        ```
    """
    dtype = get_dtype()

    sidereal = get_mean_sidereal_time(jd) * HOURS2RAD

    ra = deg_to_rad(jnp.asarray(equ.ra, dtype=dtype))
    longitude = deg_to_rad(jnp.asarray(observer.lng, dtype=dtype))
    H = sidereal - longitude - ra

    latitude = deg_to_rad(jnp.asarray(observer.lat, dtype=dtype))
    declination = deg_to_rad(jnp.asarray(equ.dec, dtype=dtype))

    # eq. 12.5
    num = jnp.sin(H)
    den = jnp.cos(H) * jnp.sin(latitude) - jnp.tan(declination) * jnp.cos(latitude)
    if quadrant_correct:
        A = jnp.arctan2(num, den)
    else:
        A = jnp.arctan(num / den)

    # eq. 12.6
    h = jnp.arcsin(
        jnp.sin(latitude) * jnp.sin(declination)
        + jnp.cos(latitude) * jnp.cos(declination) * jnp.cos(H)
    )

    return HorizontalPosition(alt=rad_to_deg(h), az=rad_to_deg(A))


def equatorial_from_horizontal(
    horiz: HorizontalPosition,
    observer: ObserverPosition,
    jd: ArrayLike,
    quadrant_correct: bool = False,
) -> EquatorialPosition:
    """Transform horizontal coordinates to equatorial coordinates.

    Args:
        horiz: Object altitude and azimuth in *deg*.
        observer: Observer longitude and latitude in *deg*.
        jd: Julian Day.
        quadrant_correct: If ``True``, resolve the hour angle with
            ``arctan2`` instead of the single-argument ``arctan``.

    Returns:
        EquatorialPosition: Right ascension and declination in *deg*.
            Right ascension is not normalized.
    """
    dtype = get_dtype()

    A = deg_to_rad(jnp.asarray(horiz.az, dtype=dtype))
    h = deg_to_rad(jnp.asarray(horiz.alt, dtype=dtype))

    longitude = deg_to_rad(jnp.asarray(observer.lng, dtype=dtype))
    latitude = deg_to_rad(jnp.asarray(observer.lat, dtype=dtype))

    # p. 89
    num = jnp.sin(A)
    den = jnp.cos(A) * jnp.sin(latitude) + jnp.tan(h) * jnp.cos(latitude)
    if quadrant_correct:
        H = jnp.arctan2(num, den)
    else:
        H = jnp.arctan(num / den)

    declination = jnp.arcsin(
        jnp.sin(latitude) * jnp.sin(h)
        - jnp.cos(latitude) * jnp.cos(h) * jnp.cos(A)
    )

    sidereal = get_apparent_sidereal_time(jd) * HOURS2RAD

    return EquatorialPosition(
        ra=rad_to_deg(sidereal - H - longitude),
        dec=rad_to_deg(declination),
    )
