"""
The `constants` module defines the unit-conversion and epoch constants used by the
coordinate transformations.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * PI / 360.0

"""
Constant to convert radians to degrees. Equal to 360/2pi. Units: *deg/rad*
"""
RAD2DEG = 360.0 / (PI * 2.0)

"""
Constant to convert arcseconds to degrees. Units: *deg/as*
"""
AS2DEG = 1.0 / 3600.0

"""
Constant to convert sidereal hours to radians. Equal to 2pi/24. Units: *rad/h*
"""
HOURS2RAD = 2.0 * PI / 24.0

"""
Constant to convert degrees to sidereal hours. Equal to 24/360. Units: *h/deg*
"""
DEG2HOURS = 1.0 / 15.0

# Time Constants

"""
Julian Date of the J2000.0 epoch (2000-01-01 12:00:00 TT). Units: *days*
"""
JD2000 = 2451545.0

"""
Days per Julian century. Units: *days*
"""
DAYS_PER_CENTURY = 36525.0

# Earth orientation

"""
Mean obliquity of the ecliptic at J2000. Units: *arcseconds*

References:

1. J. Meeus, *Astronomical Algorithms (2nd Ed.)*, eq. 22.2, 1998
"""
OBLIQUITY_J2000 = 84381.448  # 23° 26' 21.448"
