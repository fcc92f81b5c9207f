# Copyright (c) 2026 Samosa
# SPDX-License-Identifier: MIT

"""
Samosa -- Samosa area measurement from image pixels.

Classifies samosa-colored pixels with fixed RGB range rules, then reports
the pixel count, the coverage of the image and, given a calibration, the
estimated physical area.

Quick start::

    from samosa import measure, Calibration

    m = measure("plate.jpg", calibration=Calibration(5.0, 100.0))
    m.coverage.value         # Percentage of samosa pixels
    m.physical_area.value    # Square centimeters
    m.to_report()            # Human-readable summary
"""

from __future__ import annotations

__version__ = "1.0.0"

from samosa.errors import InvalidInputError
from samosa.measure import measure, measure_with_visualization
from samosa.schema import (
    AreaResult,
    Calibration,
    ClassificationResult,
    SamosaMeasurement,
)

__all__ = [
    # Core API
    "measure",
    "measure_with_visualization",
    "SamosaMeasurement",
    # Types (commonly needed)
    "AreaResult",
    "Calibration",
    "ClassificationResult",
    "InvalidInputError",
    # Version
    "__version__",
]
