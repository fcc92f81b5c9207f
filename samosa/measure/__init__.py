# Copyright (c) 2026 Samosa
# SPDX-License-Identifier: MIT

"""
Measurement core for samosa.

This module provides deterministic pixel classification and area
arithmetic. All operations are pure and pixel-based.
"""

from samosa.measure.area import (
    circle_area,
    coverage_percentage,
    estimated_physical_area,
    parallelogram_area,
    rectangle_area,
    square_area,
    triangle_area,
)
from samosa.measure.classify import SAMOSA_RULES, ColorRule, classify_pixels, is_samosa_color
from samosa.measure.extract import measure, measure_with_visualization
from samosa.measure.scan import DEFAULT_HIGHLIGHT, ScanConfig, scan, visualize

__all__ = [
    # Pipeline
    "measure",
    "measure_with_visualization",
    # Classification
    "ColorRule",
    "SAMOSA_RULES",
    "is_samosa_color",
    "classify_pixels",
    # Scanning
    "ScanConfig",
    "DEFAULT_HIGHLIGHT",
    "scan",
    "visualize",
    # Area arithmetic
    "coverage_percentage",
    "estimated_physical_area",
    "triangle_area",
    "rectangle_area",
    "circle_area",
    "square_area",
    "parallelogram_area",
]
