# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "astrotransform"]
#
# [tool.uv.sources]
# astrotransform = { path = ".." }
# ///
"""Transform a star's position between coordinate frames.

Takes an equatorial position, reports its ecliptical coordinates, and, for
an observer, its altitude and azimuth.  Then runs a batch of positions
through the vmap'd transforms to show batched use.

Requires astrotransform to be installed (``uv pip install -e .`` from the
repo root).

Usage:
    uv run examples/transform_positions.py [OPTIONS]

Examples:
    # Pollux seen from the US Naval Observatory at J2000
    uv run examples/transform_positions.py --ra 116.328942 --dec 28.026183

    # Another observer and epoch, using arctan2 quadrant resolution
    uv run examples/transform_positions.py --lng -2.3 --lat 51.5 --jd 2460676.5 \\
        --quadrant-correct
"""

import time
from typing import Annotated

import jax
import jax.numpy as jnp
import typer

from astrotransform import (
    EquatorialPosition,
    ObserverPosition,
    ecliptical_from_equatorial,
    equatorial_from_ecliptical,
    get_apparent_sidereal_time,
    get_nutation,
    horizontal_from_equatorial,
    normalize_angle,
    set_dtype,
)

set_dtype(jnp.float64)  # Must be before any JIT compilation


def main(
    ra: Annotated[float, typer.Option(help="Right ascension in degrees")] = 116.328942,
    dec: Annotated[float, typer.Option(help="Declination in degrees")] = 28.026183,
    lng: Annotated[
        float, typer.Option(help="Observer longitude in degrees, positive west")
    ] = 77.065556,
    lat: Annotated[float, typer.Option(help="Observer latitude in degrees")] = 38.921389,
    jd: Annotated[float, typer.Option(help="Julian Day")] = 2451545.0,
    quadrant_correct: Annotated[
        bool, typer.Option(help="Resolve quadrants with arctan2")
    ] = False,
    batch_size: Annotated[int, typer.Option(help="Positions in the vmap'd batch")] = 100000,
) -> None:
    """Transform an equatorial position to ecliptical and horizontal frames."""
    equ = EquatorialPosition(ra, dec)
    observer = ObserverPosition(lng, lat)

    nut = get_nutation(jd)
    print(f"JD {jd}")
    print(f"  True obliquity:           {float(nut.ecliptic):.6f} deg")
    print(f"  Apparent sidereal time:   {float(get_apparent_sidereal_time(jd)):.6f} h")

    ecl = ecliptical_from_equatorial(equ, jd, quadrant_correct=quadrant_correct)
    print("\n── Ecliptical ──")
    print(f"  lng = {float(ecl.lng):.6f} deg, lat = {float(ecl.lat):.6f} deg")

    hrz = horizontal_from_equatorial(equ, observer, jd, quadrant_correct=quadrant_correct)
    print("\n── Horizontal (azimuth from south, westward) ──")
    print(f"  alt = {float(hrz.alt):.6f} deg, az = {float(normalize_angle(hrz.az)):.6f} deg")

    # ── Batched round trip ───────────────────────────────────────────────
    roundtrip = jax.jit(
        jax.vmap(
            lambda e: equatorial_from_ecliptical(
                ecliptical_from_equatorial(e, jd, quadrant_correct=True),
                jd,
                quadrant_correct=True,
            )
        )
    )
    key_ra, key_dec = jax.random.split(jax.random.PRNGKey(0))
    batch = EquatorialPosition(
        jax.random.uniform(key_ra, (batch_size,), minval=0.0, maxval=360.0),
        jax.random.uniform(key_dec, (batch_size,), minval=-80.0, maxval=80.0),
    )
    roundtrip(batch).ra.block_until_ready()  # compile

    t0 = time.perf_counter()
    back = roundtrip(batch)
    back.ra.block_until_ready()
    elapsed = time.perf_counter() - t0

    err = jnp.abs(normalize_angle(back.ra - batch.ra + 180.0) - 180.0)
    print(f"\n── Batched round trip ({batch_size} positions) ──")
    print(f"  Max ra error: {float(jnp.max(err)):.3e} deg in {elapsed * 1e3:.1f} ms")


if __name__ == "__main__":
    typer.run(main)
