"""Position value types for the coordinate transformations.

Every frame has its own :class:`~typing.NamedTuple`, which JAX treats as a
pytree.  Fields may be Python floats, scalar arrays, or equally-shaped
arrays; a batch of positions is a single tuple of arrays, so the transforms
work unchanged under ``jax.vmap``.

Angles are in degrees and distances in astronomical units (AU).
"""

from __future__ import annotations

from typing import NamedTuple

from jax.typing import ArrayLike


class HeliocentricPosition(NamedTuple):
    """Sun-centred ecliptic position.

    Attributes:
        L: Heliocentric ecliptic longitude. Units: *deg*
        B: Heliocentric ecliptic latitude. Units: *deg*
        R: Distance from the Sun. Units: *AU*
    """

    L: ArrayLike
    B: ArrayLike
    R: ArrayLike


class GeocentricPosition(NamedTuple):
    """Earth-centred rectangular position.

    Attributes:
        X: Units: *AU*
        Y: Units: *AU*
        Z: Units: *AU*
    """

    X: ArrayLike
    Y: ArrayLike
    Z: ArrayLike


class EquatorialPosition(NamedTuple):
    """Position on the celestial equator frame.

    Attributes:
        ra: Right ascension. Units: *deg*
        dec: Declination. Units: *deg*
    """

    ra: ArrayLike
    dec: ArrayLike


class HorizontalPosition(NamedTuple):
    """Observer-local position.

    Azimuth follows the convention of the horizontal transforms: measured
    westward from the south point.

    Attributes:
        alt: Altitude above the horizon. Units: *deg*
        az: Azimuth. Units: *deg*
    """

    alt: ArrayLike
    az: ArrayLike


class EclipticalPosition(NamedTuple):
    """Position on the ecliptic frame.

    Attributes:
        lng: Ecliptic longitude. Units: *deg*
        lat: Ecliptic latitude. Units: *deg*
    """

    lng: ArrayLike
    lat: ArrayLike


class ObserverPosition(NamedTuple):
    """Geographic location of an observer.

    Attributes:
        lng: Geographic longitude, positive west of Greenwich as used in the
            hour-angle relation ``H = sidereal - lng - ra``. Units: *deg*
        lat: Geographic latitude. Units: *deg*
    """

    lng: ArrayLike
    lat: ArrayLike
