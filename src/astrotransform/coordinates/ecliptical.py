"""Ecliptical <-> equatorial coordinate transformations.

Both directions rotate about the vernal-equinox axis by the true obliquity
of the ecliptic ε from :func:`~astrotransform.nutation.get_nutation`.

The right ascension / longitude is found with a single-argument arctangent
followed by a partial quadrant correction:

- ecliptical -> equatorial adds π when the arctangent is negative, and a
  further π when the input longitude exceeds π radians.
- equatorial -> ecliptical only adds π when the arctangent is negative.

The two corrections are not symmetric and neither is a full four-quadrant
resolution.  Existing outputs depend on them, so they stay the default;
``quadrant_correct=True`` switches to ``arctan2`` with no further
correction.

References:
    1. J. Meeus, *Astronomical Algorithms*, eq. 12.1-12.4, pp. 88-89.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax.typing import ArrayLike

from astrotransform.config import get_dtype
from astrotransform.nutation import get_nutation
from astrotransform.positions import EclipticalPosition, EquatorialPosition
from astrotransform.utils import deg_to_rad, rad_to_deg


def equatorial_from_ecliptical(
    ecl: EclipticalPosition,
    jd: ArrayLike,
    quadrant_correct: bool = False,
) -> EquatorialPosition:
    """Transform ecliptical coordinates to equatorial coordinates.

    Args:
        ecl: Ecliptic longitude and latitude in *deg*.
        jd: Julian Day.
        quadrant_correct: If ``True``, use ``arctan2`` for the right
            ascension instead of the legacy arctangent and corrections.

    Returns:
        EquatorialPosition: Right ascension and declination in *deg*.

    Examples:
        ```python
        from astrotransform.coordinates import equatorial_from_ecliptical
        from astrotransform.positions import EclipticalPosition
        equ = equatorial_from_ecliptical(
            EclipticalPosition(lng=113.215630, lat=6.684170),  # Pollux
            2451545.0,
        )
        ```
    """
    dtype = get_dtype()

    ecliptic = deg_to_rad(get_nutation(jd).ecliptic)

    longitude = deg_to_rad(jnp.asarray(ecl.lng, dtype=dtype))
    latitude = deg_to_rad(jnp.asarray(ecl.lat, dtype=dtype))

    # eq. 12.3
    num = jnp.sin(longitude) * jnp.cos(ecliptic) - jnp.tan(latitude) * jnp.sin(ecliptic)
    den = jnp.cos(longitude)
    if quadrant_correct:
        ra = jnp.arctan2(num, den)
    else:
        ra = jnp.arctan(num / den)
        ra = jnp.where(ra < 0.0, ra + jnp.pi, ra)
        ra = jnp.where(longitude > jnp.pi, ra + jnp.pi, ra)

    # eq. 12.4
    declination = jnp.arcsin(
        jnp.sin(latitude) * jnp.cos(ecliptic)
        + jnp.cos(latitude) * jnp.sin(ecliptic) * jnp.sin(longitude)
    )

    return EquatorialPosition(ra=rad_to_deg(ra), dec=rad_to_deg(declination))


def ecliptical_from_equatorial(
    equ: EquatorialPosition,
    jd: ArrayLike,
    quadrant_correct: bool = False,
) -> EclipticalPosition:
    """Transform equatorial coordinates to ecliptical coordinates.

    Args:
        equ: Right ascension and declination in *deg*.
        jd: Julian Day.
        quadrant_correct: If ``True``, use ``arctan2`` for the longitude
            instead of the legacy arctangent and correction.

    Returns:
        EclipticalPosition: Ecliptic longitude and latitude in *deg*.
    """
    dtype = get_dtype()

    ra = deg_to_rad(jnp.asarray(equ.ra, dtype=dtype))
    declination = deg_to_rad(jnp.asarray(equ.dec, dtype=dtype))

    ecliptic = deg_to_rad(get_nutation(jd).ecliptic)

    # eq. 12.1
    num = jnp.sin(ra) * jnp.cos(ecliptic) + jnp.tan(declination) * jnp.sin(ecliptic)
    den = jnp.cos(ra)
    if quadrant_correct:
        longitude = jnp.arctan2(num, den)
    else:
        longitude = jnp.arctan(num / den)
        longitude = jnp.where(longitude < 0.0, longitude + jnp.pi, longitude)

    # eq. 12.2
    latitude = jnp.arcsin(
        jnp.sin(declination) * jnp.cos(ecliptic)
        - jnp.cos(declination) * jnp.sin(ecliptic) * jnp.sin(ra)
    )

    return EclipticalPosition(lng=rad_to_deg(longitude), lat=rad_to_deg(latitude))
