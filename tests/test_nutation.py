"""Tests for nutation and sidereal time.

Reference values are Meeus, *Astronomical Algorithms*, examples 12.a, 12.b
and 22.a (1987 April 10).
"""

import jax
import jax.numpy as jnp
import pytest

from astrotransform.nutation import Nutation, get_nutation, mean_obliquity
from astrotransform.sidereal import get_apparent_sidereal_time, get_mean_sidereal_time

# 1987 April 10, 0h
_JD_1987 = 2446895.5
# 1987 April 10, 19h21m00s UT
_JD_1987_EVENING = 2446896.30625


def _hms(h, m, s):
    return h + m / 60.0 + s / 3600.0


# ---------------------------------------------------------------------------
# Nutation
# ---------------------------------------------------------------------------


class TestNutation:
    def test_returns_named_tuple(self):
        nut = get_nutation(_JD_1987)
        assert isinstance(nut, Nutation)

    def test_nutation_in_longitude(self):
        """Abridged series is good to 0.5 arcsec; Meeus gives -3.788"."""
        nut = get_nutation(_JD_1987)
        assert float(nut.longitude) * 3600.0 == pytest.approx(-3.788, abs=0.5)

    def test_nutation_in_obliquity(self):
        """Abridged series is good to 0.1 arcsec; Meeus gives +9.443"."""
        nut = get_nutation(_JD_1987)
        assert float(nut.obliquity) * 3600.0 == pytest.approx(9.443, abs=0.1)

    def test_mean_obliquity(self):
        """Meeus eq. 22.2 gives 23°26'27.407"."""
        assert mean_obliquity(_JD_1987) == pytest.approx(_hms(23, 26, 27.407), abs=1e-6)

    def test_true_obliquity(self):
        """True obliquity is 23°26'36.850" to within the series accuracy."""
        nut = get_nutation(_JD_1987)
        assert nut.ecliptic == pytest.approx(_hms(23, 26, 36.850), abs=0.1 / 3600.0)

    def test_ecliptic_is_mean_plus_nutation(self):
        nut = get_nutation(_JD_1987)
        assert nut.ecliptic == pytest.approx(
            float(mean_obliquity(_JD_1987) + nut.obliquity), abs=1e-12
        )

    def test_mean_obliquity_at_j2000(self):
        assert mean_obliquity(2451545.0) == pytest.approx(84381.448 / 3600.0, abs=1e-12)


# ---------------------------------------------------------------------------
# Sidereal time
# ---------------------------------------------------------------------------


class TestSiderealTime:
    def test_mean_sidereal_time_midnight(self):
        """Meeus example 12.a: 13h10m46.3668s."""
        gmst = get_mean_sidereal_time(_JD_1987)
        assert gmst == pytest.approx(_hms(13, 10, 46.3668), abs=1e-3 / 3600.0)

    def test_mean_sidereal_time_evening(self):
        """Meeus example 12.b: 128.7378734 degrees."""
        gmst = get_mean_sidereal_time(_JD_1987_EVENING)
        assert float(gmst) * 15.0 == pytest.approx(128.7378734, abs=1e-6)

    def test_apparent_sidereal_time(self):
        """Meeus example 12.a: 13h10m46.1351s, within the nutation accuracy."""
        gast = get_apparent_sidereal_time(_JD_1987)
        assert gast == pytest.approx(_hms(13, 10, 46.1351), abs=0.05 / 3600.0)

    def test_mean_sidereal_time_range(self):
        jds = jnp.linspace(2440000.0, 2470000.0, 101)
        gmst = get_mean_sidereal_time(jds)
        assert jnp.all(gmst >= 0.0)
        assert jnp.all(gmst < 24.0)

    def test_equation_of_equinoxes_is_small(self):
        diff = get_apparent_sidereal_time(_JD_1987) - get_mean_sidereal_time(_JD_1987)
        # Never more than about 1.2 seconds of time
        assert abs(float(diff)) < 1.2 / 3600.0


class TestJAXCompatibility:
    def test_get_nutation_jit(self):
        nut = jax.jit(get_nutation)(_JD_1987)
        assert nut.ecliptic == pytest.approx(float(get_nutation(_JD_1987).ecliptic), abs=1e-12)

    def test_sidereal_vmap(self):
        jds = jnp.array([_JD_1987, _JD_1987_EVENING])
        gast = jax.vmap(get_apparent_sidereal_time)(jds)
        assert gast.shape == (2,)
