## scalar tolerances and environment configuration for geomkit

## Copyright (c) 2026 geomkit contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Scalar tolerances and runtime configuration.

Tolerances are read from the environment the first time they are
needed and cached afterwards.  Call :func:`clear_cache` after changing
the environment to pick up new values.

Environment Variables:
    GEOMKIT_EPSILON: tolerance used by ``close()`` and the ``is_close()``
                     methods of the value types.  Defaults to 5E-6.
    GEOMKIT_UNIT_TOLERANCE: allowed deviation of a direction's norm from
                            one.  Defaults to 1E-9.
    GEOMKIT_VALIDATE_FRAMES: when set to ``1``, ``true`` or ``yes``,
                             frames and planes are checked for
                             orthonormality on construction.

Example:
    export GEOMKIT_VALIDATE_FRAMES=1
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

__all__ = [
    "GEOMKIT_EPSILON",
    "GEOMKIT_UNIT_TOLERANCE",
    "GEOMKIT_VALIDATE_FRAMES",
    "DEFAULT_EPSILON",
    "DEFAULT_UNIT_TOLERANCE",
    "epsilon",
    "unit_tolerance",
    "validate_frames",
    "clear_cache",
    "isgoodnum",
    "close",
]

logger = logging.getLogger(__name__)

# Environment variable names
GEOMKIT_EPSILON = "GEOMKIT_EPSILON"
GEOMKIT_UNIT_TOLERANCE = "GEOMKIT_UNIT_TOLERANCE"
GEOMKIT_VALIDATE_FRAMES = "GEOMKIT_VALIDATE_FRAMES"

## defaults
DEFAULT_EPSILON = 5e-6
DEFAULT_UNIT_TOLERANCE = 1e-9

_TRUTHY = ("1", "true", "yes", "on")


def _read_positive_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if not value > 0.0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    logger.debug("using %s=%g from environment", name, value)
    return value


@lru_cache(maxsize=None)
def epsilon() -> float:
    """Tolerance for approximate scalar and coordinate comparisons."""
    return _read_positive_float(GEOMKIT_EPSILON, DEFAULT_EPSILON)


@lru_cache(maxsize=None)
def unit_tolerance() -> float:
    """Allowed deviation of a direction's Euclidean norm from one."""
    return _read_positive_float(GEOMKIT_UNIT_TOLERANCE, DEFAULT_UNIT_TOLERANCE)


@lru_cache(maxsize=None)
def validate_frames() -> bool:
    """Whether frames and planes are checked for orthonormality on construction."""
    raw = os.environ.get(GEOMKIT_VALIDATE_FRAMES, "")
    enabled = raw.strip().lower() in _TRUTHY
    if enabled:
        logger.debug("frame and plane validation enabled")
    return enabled


def clear_cache() -> None:
    """Forget cached configuration so the environment is read again."""
    epsilon.cache_clear()
    unit_tolerance.cache_clear()
    validate_frames.cache_clear()


## utility function to determine if argument is a "real" python
## number, since booleans are considered ints
def isgoodnum(n) -> bool:
    """Determine if an argument is actually a scalar number, and not boolean."""
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


def close(a: float, b: float, tol: float | None = None) -> bool:
    """Are two scalars the same within ``tol`` (default ``epsilon()``)?"""
    if tol is None:
        tol = epsilon()
    return abs(a - b) < tol
