# Copyright (c) 2026 Samosa
# SPDX-License-Identifier: MIT

"""
Full-image scan.

Classifies every pixel of a decoded raster, counts the matches, and
optionally renders a visualization where matched pixels are recolored.

A raster is a NumPy array of shape (H, W, 3) with uint8 RGB values. PIL
images are accepted and converted to RGB. The input raster is never
modified; each visualization gets a freshly allocated output array, so
scans are safe to run concurrently on separate rasters.
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from samosa.errors import InvalidInputError
from samosa.measure.classify import SAMOSA_RULES, ColorRule, classify_pixels
from samosa.schema import ClassificationResult

logger = logging.getLogger(__name__)

# Color painted over matched pixels in visualizations
DEFAULT_HIGHLIGHT: tuple[int, int, int] = (255, 0, 0)


@dataclass(frozen=True)
class ScanConfig:
    """Configuration for a scan."""

    # Range rules OR-ed together per pixel
    rules: tuple[ColorRule, ...] = SAMOSA_RULES

    # RGB color for matched pixels in the visualization
    highlight: tuple[int, int, int] = DEFAULT_HIGHLIGHT

    def __post_init__(self) -> None:
        # Normalize to plain ints, e.g. when read from a numpy array
        object.__setattr__(self, "highlight", validate_highlight(self.highlight))
        if not self.rules:
            raise InvalidInputError("At least one color rule is required")


def validate_highlight(highlight: Any) -> tuple[int, int, int]:
    """Check that a highlight color is an RGB triple of integers in 0-255."""
    if isinstance(highlight, (str, bytes)):
        raise InvalidInputError(
            f"Highlight must be an RGB triple, got {highlight!r}"
        )
    try:
        raw = tuple(highlight)
    except TypeError as e:
        raise InvalidInputError(
            f"Highlight must be an RGB triple, got {highlight!r}"
        ) from e
    # Floats are rejected, not truncated
    if not all(
        isinstance(c, numbers.Integral) and not isinstance(c, bool) for c in raw
    ):
        raise InvalidInputError(
            f"Highlight channels must be integers, got {highlight!r}"
        )
    channels = tuple(int(c) for c in raw)
    if len(channels) != 3 or not all(0 <= c <= 255 for c in channels):
        raise InvalidInputError(
            f"Highlight must be an RGB triple in 0-255, got {highlight!r}"
        )
    return channels


def as_raster(raster: Any) -> NDArray[np.uint8]:
    """
    Validate a raster and return it as an (H, W, 3) uint8 array.

    Zero-area rasters are valid.

    Raises:
        InvalidInputError: If the raster is missing or malformed
    """
    if raster is None:
        raise InvalidInputError("Raster cannot be None")

    if not isinstance(raster, np.ndarray):
        from PIL import Image

        if not isinstance(raster, Image.Image):
            raise InvalidInputError(
                f"Expected numpy array or PIL image, got {type(raster).__name__}"
            )
        if raster.mode != "RGB":
            raster = raster.convert("RGB")
        raster = np.asarray(raster, dtype=np.uint8)

    if raster.ndim != 3 or raster.shape[2] != 3:
        raise InvalidInputError(
            f"Expected (H, W, 3) array, got shape {raster.shape}"
        )
    if raster.dtype != np.uint8:
        raise InvalidInputError(f"Expected uint8 array, got {raster.dtype}")

    return raster


def _count(pixels: NDArray[np.uint8], mask: NDArray[np.bool_]) -> ClassificationResult:
    height, width = pixels.shape[:2]
    # Python ints: no overflow for very large rasters
    total = int(width) * int(height)
    classified = int(np.count_nonzero(mask))
    logger.debug(
        "Samosa detection completed: %d of %d pixels matched", classified, total
    )
    return ClassificationResult(classified=classified, total=total)


def scan(
    raster: Any,
    config: ScanConfig | None = None,
) -> ClassificationResult:
    """
    Count samosa-colored pixels in a raster.

    Args:
        raster: (H, W, 3) uint8 array or PIL image
        config: Scan settings (uses defaults if None)

    Returns:
        ClassificationResult with classified and total pixel counts

    Raises:
        InvalidInputError: If the raster is missing or malformed
    """
    cfg = config or ScanConfig()
    pixels = as_raster(raster)
    mask = classify_pixels(pixels, cfg.rules)
    return _count(pixels, mask)


def visualize(
    raster: Any,
    config: ScanConfig | None = None,
) -> tuple[NDArray[np.uint8], ClassificationResult]:
    """
    Count samosa-colored pixels and render them in the highlight color.

    Args:
        raster: (H, W, 3) uint8 array or PIL image
        config: Scan settings (uses defaults if None)

    Returns:
        (visualization, result) where visualization is a new (H, W, 3)
        uint8 array: highlight color for matched pixels, original color
        elsewhere

    Raises:
        InvalidInputError: If the raster is missing or malformed
    """
    cfg = config or ScanConfig()
    pixels = as_raster(raster)
    mask = classify_pixels(pixels, cfg.rules)

    output = np.array(pixels, dtype=np.uint8, copy=True)
    output[mask] = cfg.highlight

    return output, _count(pixels, mask)
