"""Tests for the astrotransform.config module."""

import logging

import jax
import jax.numpy as jnp
import pytest

from astrotransform.config import get_angle_tolerance, get_dtype, set_dtype
from astrotransform.coordinates import (
    ecliptical_from_equatorial,
    horizontal_from_equatorial,
)
from astrotransform.nutation import get_nutation
from astrotransform.positions import EquatorialPosition, ObserverPosition


@pytest.fixture(autouse=True)
def reset_dtype():
    """Reset dtype to the float64 default before and after each test."""
    set_dtype(jnp.float64)
    yield
    set_dtype(jnp.float64)


class TestGetSetDtype:
    def test_default_dtype(self):
        assert get_dtype() == jnp.float64

    def test_set_float32(self):
        set_dtype(jnp.float32)
        assert get_dtype() == jnp.float32

    def test_set_float16(self):
        set_dtype(jnp.float16)
        assert get_dtype() == jnp.float16

    def test_set_bfloat16(self):
        set_dtype(jnp.bfloat16)
        assert get_dtype() == jnp.bfloat16

    def test_roundtrip(self):
        for dtype in (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64):
            set_dtype(dtype)
            assert get_dtype() == dtype

    def test_invalid_dtype_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype(jnp.int32)

    def test_invalid_dtype_string_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype("float64")

    def test_float64_enables_x64(self):
        set_dtype(jnp.float64)
        assert jax.config.jax_enable_x64 is True

    def test_import_enables_x64_by_default(self):
        import astrotransform  # noqa: F401

        assert jax.config.jax_enable_x64 is True
        assert jnp.asarray(1.0, dtype=get_dtype()).dtype == jnp.float64

    def test_float32_leaves_x64_enabled(self):
        set_dtype(jnp.float32)
        assert jax.config.jax_enable_x64 is True

    def test_dtype_change_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="astrotransform.config"):
            set_dtype(jnp.float32)
        assert "dtype changed" in caplog.text


class TestAngleTolerance:
    def test_float64_tolerance(self):
        assert get_angle_tolerance() == 1e-9

    def test_float32_tolerance(self):
        set_dtype(jnp.float32)
        assert get_angle_tolerance() == 1e-3

    def test_float16_tolerance(self):
        set_dtype(jnp.float16)
        assert get_angle_tolerance() == 1.0


class TestDtypeSwitchingOutputs:
    """Verify that output dtypes match the configured dtype."""

    def test_nutation_dtype_float32(self):
        set_dtype(jnp.float32)
        nut = get_nutation(2451545.0)
        assert nut.ecliptic.dtype == jnp.float32

    def test_ecliptical_dtype_float64(self):
        ecl = ecliptical_from_equatorial(EquatorialPosition(45.0, 10.0), 2451545.0)
        assert ecl.lng.dtype == jnp.float64
        assert ecl.lat.dtype == jnp.float64

    def test_horizontal_dtype_float32(self):
        set_dtype(jnp.float32)
        hrz = horizontal_from_equatorial(
            EquatorialPosition(45.0, 10.0),
            ObserverPosition(0.0, 45.0),
            2451545.0,
        )
        assert hrz.alt.dtype == jnp.float32
        assert hrz.az.dtype == jnp.float32
