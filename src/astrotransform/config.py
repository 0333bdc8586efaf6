"""Module-wide floating-point precision configuration.

Provides ``set_dtype`` and ``get_dtype`` to control the float dtype used
throughout astrotransform.  The default is ``jnp.float64``: Julian Days are
of order 2.4e6, and single precision cannot resolve fractions of a day at
that magnitude.  Selecting ``jnp.float64`` enables JAX's 64-bit mode
(``jax_enable_x64``).

Because float64 is the default, importing this module calls
``jax.config.update("jax_enable_x64", True)``.  The flag is process-wide:
other JAX code in the same interpreter also gets 64-bit defaults, and
``set_dtype(jnp.float32)`` does not turn it back off.

Call ``set_dtype`` **before** any JIT compilation.  Under JIT, ``get_dtype()``
runs during tracing and its result is baked into the compiled program.
"""

from __future__ import annotations

import logging

import jax
import jax.numpy as jnp

logger = logging.getLogger(__name__)

_VALID_DTYPES = (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64)

jax.config.update("jax_enable_x64", True)
_dtype = jnp.float64


def set_dtype(dtype) -> None:
    """Set the module-wide float dtype for astrotransform.

    If *dtype* is ``jnp.float64``, JAX's 64-bit mode is enabled via
    ``jax.config.update("jax_enable_x64", True)``.

    Args:
        dtype: One of ``jnp.float16``, ``jnp.bfloat16``, ``jnp.float32``,
            or ``jnp.float64``.

    Raises:
        ValueError: If *dtype* is not a supported float type.
    """
    global _dtype
    if dtype not in _VALID_DTYPES:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: "
            f"jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    if dtype != _dtype:
        logger.debug("astrotransform dtype changed from %s to %s", _dtype, dtype)
    _dtype = dtype


def get_dtype():
    """Return the current module-wide float dtype.

    Returns:
        The active float dtype (default ``jnp.float64``).
    """
    return _dtype


def get_angle_tolerance() -> float:
    """Return a dtype-adaptive tolerance for comparing angles in degrees.

    - ``float16``:  1.0 deg
    - ``bfloat16``: 1.0 deg
    - ``float32``:  1e-3 deg
    - ``float64``:  1e-9 deg

    Returns:
        float: Tolerance in degrees.
    """
    if _dtype == jnp.float64:
        return 1e-9
    if _dtype == jnp.float32:
        return 1e-3
    # float16 and bfloat16
    return 1.0
