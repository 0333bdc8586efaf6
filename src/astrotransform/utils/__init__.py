"""Shared utility functions for astrotransform.

Provides degree/radian conversion and explicit angle normalization.
"""

from astrotransform.utils._angle import (
    deg_to_rad,
    normalize_angle,
    normalize_signed_angle,
    rad_to_deg,
)

__all__ = [
    "deg_to_rad",
    "normalize_angle",
    "normalize_signed_angle",
    "rad_to_deg",
]
