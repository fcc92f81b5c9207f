# Copyright (c) 2026 Samosa
# SPDX-License-Identifier: MIT

"""
Main measurement API.

This is the primary entry point for samosa's measurement core.
"""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from samosa.measure.area import estimated_physical_area
from samosa.measure.io import load_image
from samosa.measure.scan import DEFAULT_HIGHLIGHT, ScanConfig, as_raster, scan, visualize
from samosa.schema import Calibration, ClassificationResult, SamosaMeasurement

logger = logging.getLogger(__name__)

ImageInput = Union[str, Path, NDArray[np.uint8]]


def measure(
    image: ImageInput,
    *,
    calibration: Optional[Calibration] = None,
    include_hash: bool = True,
) -> SamosaMeasurement:
    """
    Measure the samosa-colored area of an image.

    Produces a SamosaMeasurement containing:
    - Classified and total pixel counts
    - Coverage percentage
    - Estimated physical area (only when a calibration is given)

    Args:
        image: One of:
            - Path to image file (str or Path), decoded with Pillow
            - NumPy array of shape (H, W, 3) with uint8 RGB values
            - PIL image (converted to RGB)
        calibration: Pixel-to-length calibration. When None, the
            physical area is left out.
        include_hash: Include SHA256 hash of image data (default: True)

    Returns:
        SamosaMeasurement with all derived values

    Raises:
        InvalidInputError: If the image is missing, unreadable or malformed

    Example:
        >>> from samosa import measure, Calibration
        >>> m = measure("plate.jpg", calibration=Calibration(5.0, 100.0))
        >>> m.coverage.value
        12.5
        >>> m.physical_area.value
        8.0
    """
    pixels = _load_image(image)
    config = ScanConfig()
    result = scan(pixels, config)
    return _build_measurement(pixels, result, config, calibration, include_hash)


def measure_with_visualization(
    image: ImageInput,
    *,
    calibration: Optional[Calibration] = None,
    highlight: tuple[int, int, int] = DEFAULT_HIGHLIGHT,
    include_hash: bool = True,
) -> tuple[SamosaMeasurement, NDArray[np.uint8]]:
    """
    Measure an image and render matched pixels in the highlight color.

    Same arguments as ``measure``, plus:

    Args:
        highlight: RGB color painted over matched pixels (default: red)

    Returns:
        (measurement, visualization) where visualization is a new
        (H, W, 3) uint8 array
    """
    pixels = _load_image(image)
    config = ScanConfig(highlight=highlight)
    output, result = visualize(pixels, config)
    measurement = _build_measurement(pixels, result, config, calibration, include_hash)
    return measurement, output


def _load_image(image: ImageInput) -> NDArray[np.uint8]:
    """Load image from file or validate array."""
    if isinstance(image, (str, Path)):
        return load_image(image)
    return as_raster(image)


def _build_measurement(
    pixels: NDArray[np.uint8],
    result: ClassificationResult,
    config: ScanConfig,
    calibration: Optional[Calibration],
    include_hash: bool,
) -> SamosaMeasurement:
    height, width = pixels.shape[:2]

    physical_area = None
    if calibration is not None:
        physical_area = estimated_physical_area(
            result.classified,
            width,
            height,
            calibration.pixels_per_unit,
        )

    image_hash: Optional[str] = None
    if include_hash:
        image_hash = f"sha256:{hashlib.sha256(pixels.tobytes()).hexdigest()[:16]}"

    measurement = SamosaMeasurement(
        width=int(width),
        height=int(height),
        classification=result,
        coverage=result.coverage,
        physical_area=physical_area,
        calibration=calibration,
        highlight=config.highlight,
        image_hash=image_hash,
    )
    logger.info(
        "Measured %dx%d image: %d samosa pixels",
        width,
        height,
        result.classified,
    )
    return measurement
