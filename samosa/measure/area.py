# Copyright (c) 2026 Samosa
# SPDX-License-Identifier: MIT

"""
Area arithmetic.

Pure functions that turn pixel counts into coverage and physical area,
plus general shape-area formulas. Every function returns an AreaResult:
valid with a value, or invalid with a reason. Nothing here raises on bad
numeric input, so calculations can be chained without try/except.

All positivity checks are strict: zero is invalid.
"""

from __future__ import annotations

import math
import numbers
from typing import Callable, Optional

from samosa.schema import AreaResult


def _check_positive(**values) -> Optional[str]:
    """Return a rejection reason for the first non-positive value, or None."""
    for name, value in values.items():
        if value is None:
            return f"{name} is missing"
        if not isinstance(value, numbers.Real):
            return f"{name} must be a number, got {type(value).__name__}"
        # Ints are exact at any size; only floats can be nan/inf
        if not isinstance(value, numbers.Integral) and not math.isfinite(value):
            return f"{name} must be finite, got {value}"
        if value <= 0:
            return f"{name} must be > 0, got {value}"
    return None


def _finite(compute: Callable[[], float]) -> AreaResult:
    """Run a formula, rejecting results outside the float range."""
    try:
        value = float(compute())
    except OverflowError:
        value = math.inf
    if math.isinf(value):
        return AreaResult.invalid("result is too large to represent")
    return AreaResult.ok(value)


# =============================================================================
# Pixel-count measurements
# =============================================================================


def coverage_percentage(
    classified: Optional[int],
    total: Optional[int],
) -> AreaResult:
    """
    Percentage of pixels classified as samosa.

    Args:
        classified: Classified pixel count (>= 0)
        total: Total pixel count (> 0)

    Returns:
        AreaResult with ``classified / total * 100.0``; invalid if
        total <= 0, classified < 0, or either count is missing
    """
    if classified is None or total is None:
        return AreaResult.invalid("pixel counts are missing")
    if not isinstance(classified, numbers.Real) or not classified >= 0:
        return AreaResult.invalid(f"classified must be >= 0, got {classified!r}")
    reason = _check_positive(total=total)
    if reason:
        return AreaResult.invalid(reason)

    return _finite(lambda: classified / total * 100.0)


def estimated_physical_area(
    classified: int,
    width: int,
    height: int,
    pixels_per_unit: float,
) -> AreaResult:
    """
    Convert a classified pixel count to physical area.

    One pixel covers ``1 / pixels_per_unit**2`` square units. The image
    width and height are validated but do not enter the formula.

    Args:
        classified: Classified pixel count (> 0)
        width: Image width in pixels (> 0)
        height: Image height in pixels (> 0)
        pixels_per_unit: Calibration factor, pixels per unit length (> 0)

    Returns:
        AreaResult with the area in square units
    """
    reason = _check_positive(
        classified=classified,
        width=width,
        height=height,
        pixels_per_unit=pixels_per_unit,
    )
    if reason:
        return AreaResult.invalid(reason)

    # A factor whose square underflows to 0 or overflows to inf has no
    # usable pixel area
    try:
        squared = float(pixels_per_unit) * float(pixels_per_unit)
    except OverflowError:
        squared = math.inf
    if squared == 0 or math.isinf(squared):
        return AreaResult.invalid(
            f"pixels_per_unit is out of range, got {pixels_per_unit}"
        )

    pixel_area = 1.0 / squared
    return _finite(lambda: classified * pixel_area)


# =============================================================================
# Shape formulas
# =============================================================================


def triangle_area(base: float, height: float) -> AreaResult:
    """Area of a triangle: 0.5 * base * height."""
    reason = _check_positive(base=base, height=height)
    if reason:
        return AreaResult.invalid(reason)
    return _finite(lambda: 0.5 * base * height)


def rectangle_area(length: float, width: float) -> AreaResult:
    """Area of a rectangle: length * width."""
    reason = _check_positive(length=length, width=width)
    if reason:
        return AreaResult.invalid(reason)
    return _finite(lambda: length * width)


def circle_area(radius: float) -> AreaResult:
    """Area of a circle: pi * radius^2."""
    reason = _check_positive(radius=radius)
    if reason:
        return AreaResult.invalid(reason)
    return _finite(lambda: math.pi * radius * radius)


def square_area(side: float) -> AreaResult:
    """Area of a square: side^2."""
    reason = _check_positive(side=side)
    if reason:
        return AreaResult.invalid(reason)
    return _finite(lambda: side * side)


def parallelogram_area(base: float, height: float) -> AreaResult:
    """Area of a parallelogram: base * height."""
    reason = _check_positive(base=base, height=height)
    if reason:
        return AreaResult.invalid(reason)
    return _finite(lambda: base * height)
