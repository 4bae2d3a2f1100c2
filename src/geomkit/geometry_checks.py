"""Validation helpers for geomkit geometry.

Frames and planes are not checked on construction; these helpers let
callers verify the orthonormality obligation explicitly, and are run
automatically when ``GEOMKIT_VALIDATE_FRAMES`` is enabled.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from geomkit.tolerance import epsilon

logger = logging.getLogger(__name__)


class FrameValidationError(ValueError):
    """Exception raised when a frame or plane basis is not orthonormal."""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.details = details or {}


@dataclass
class CheckResult:
    ok: bool
    warnings: List[str]

    def __bool__(self) -> bool:
        return self.ok


def _check_basis(basis, tol: float, handed: Optional[float]) -> List[str]:
    warnings: List[str] = []

    for name, d in basis:
        n2 = d.dot(d)
        if abs(n2 - 1.0) > tol:
            warnings.append(f'{name} is not unit length (squared norm {n2!r})')

    for i in range(len(basis)):
        for j in range(i + 1, len(basis)):
            (name_a, a), (name_b, b) = basis[i], basis[j]
            d = a.dot(b)
            if abs(d) > tol:
                warnings.append(f'{name_a} and {name_b} are not perpendicular (dot {d!r})')

    if handed is not None and handed <= 0.0:
        warnings.append('basis is not right-handed')
    return warnings


def check_frame(frame, tol: Optional[float] = None, right_handed: bool = True) -> CheckResult:
    """Check that a ``Frame2d`` or ``Frame3d`` basis is orthonormal and,
    unless ``right_handed`` is false, right-handed."""
    from geomkit.frame import Frame2d, Frame3d

    if tol is None:
        tol = epsilon()
    if isinstance(frame, Frame2d):
        basis = [('x_direction', frame.x_direction), ('y_direction', frame.y_direction)]
        handed = frame.x_direction.cross(frame.y_direction)
    elif isinstance(frame, Frame3d):
        basis = [('x_direction', frame.x_direction), ('y_direction', frame.y_direction),
                 ('z_direction', frame.z_direction)]
        handed = frame.x_direction.cross(frame.y_direction).dot(frame.z_direction)
    else:
        raise ValueError('check_frame expects a frame')
    warnings = _check_basis(basis, tol, handed if right_handed else None)
    return CheckResult(not warnings, warnings)


def check_plane(plane, tol: Optional[float] = None) -> CheckResult:
    """Check that a ``Plane3d`` has perpendicular unit in-plane directions."""
    from geomkit.plane import Plane3d

    if tol is None:
        tol = epsilon()
    if not isinstance(plane, Plane3d):
        raise ValueError('check_plane expects a plane')
    ## the normal is derived from the cross product, so handedness holds
    basis = [('x_direction', plane.x_direction), ('y_direction', plane.y_direction)]
    warnings = _check_basis(basis, tol, None)
    return CheckResult(not warnings, warnings)


def check_bounding_box(extrema: Sequence[float]) -> CheckResult:
    """Check raw ``[min_x, max_x, min_y, max_y, ...]`` extrema for ordering."""
    if len(extrema) not in (4, 6):
        return CheckResult(False, [f'expected 4 or 6 extrema, got {len(extrema)}'])
    warnings = []
    for axis, i in zip("xyz", range(0, len(extrema), 2)):
        lo, hi = extrema[i], extrema[i + 1]
        if lo > hi:
            warnings.append(f'min_{axis} {lo!r} exceeds max_{axis} {hi!r}')
    return CheckResult(not warnings, warnings)


def ensure_orthonormal(entity, tol: Optional[float] = None) -> None:
    """Raise ``FrameValidationError`` unless ``entity``'s basis is orthonormal."""
    from geomkit.plane import Plane3d

    if isinstance(entity, Plane3d):
        result = check_plane(entity, tol)
    else:
        ## mirrored and flipped frames are legitimately left-handed
        result = check_frame(entity, tol, right_handed=False)
    if not result:
        logger.debug("validation failed for %r: %s", entity, result.warnings)
        raise FrameValidationError(
            f'{type(entity).__name__} basis is not orthonormal',
            details={'entity': entity, 'warnings': result.warnings},
        )


__all__ = [
    'CheckResult',
    'FrameValidationError',
    'check_frame',
    'check_plane',
    'check_bounding_box',
    'ensure_orthonormal',
]
