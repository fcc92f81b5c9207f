# Copyright (c) 2026 Samosa
# SPDX-License-Identifier: MIT

"""
Schema definitions for samosa measurements.

All types in this module are immutable (frozen dataclasses).
Once a measurement is produced, it is a fact and cannot be altered.
"""

from samosa.schema.measurement import (
    SCHEMA_VERSION,
    AreaResult,
    Calibration,
    ClassificationResult,
    SamosaMeasurement,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Tagged arithmetic result
    "AreaResult",
    # Scan counts
    "ClassificationResult",
    # Pixel-to-length calibration
    "Calibration",
    # Top-level container
    "SamosaMeasurement",
]
