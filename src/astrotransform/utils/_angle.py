"""Angle and unit conversion helpers.

The transforms work in radians internally and in degrees at their
boundaries.  Normalization is never applied by the transforms themselves;
callers that need wrapped angles apply :func:`normalize_angle` or
:func:`normalize_signed_angle` explicitly.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from astrotransform.constants import DEG2RAD, RAD2DEG


def deg_to_rad(angle: ArrayLike) -> Array:
    """Convert an angle from degrees to radians.

    Args:
        angle (ArrayLike): Angle in degrees.

    Returns:
        Angle in radians.
    """
    return jnp.asarray(angle) * DEG2RAD


def rad_to_deg(angle: ArrayLike) -> Array:
    """Convert an angle from radians to degrees.

    Args:
        angle (ArrayLike): Angle in radians.

    Returns:
        Angle in degrees.
    """
    return jnp.asarray(angle) * RAD2DEG


def normalize_angle(angle: ArrayLike) -> Array:
    """Wrap an angle in degrees into ``[0, 360)``.

    Args:
        angle (ArrayLike): Angle in degrees.

    Returns:
        Equivalent angle in ``[0, 360)`` degrees.

    Examples:
        ```python
        from astrotransform.utils import normalize_angle
        normalize_angle(-90.0)   # 270.0
        normalize_angle(725.0)   # 5.0
        ```
    """
    wrapped = jnp.mod(angle, 360.0)
    # mod of a tiny negative value can round up to exactly 360
    return jnp.where(wrapped >= 360.0, 0.0, wrapped)


def normalize_signed_angle(angle: ArrayLike) -> Array:
    """Wrap an angle in degrees into ``[-180, 180)``.

    Args:
        angle (ArrayLike): Angle in degrees.

    Returns:
        Equivalent angle in ``[-180, 180)`` degrees.
    """
    return normalize_angle(jnp.asarray(angle) + 180.0) - 180.0
