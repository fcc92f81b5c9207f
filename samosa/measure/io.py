# Copyright (c) 2026 Samosa
# SPDX-License-Identifier: MIT

"""
Raster file I/O.

Thin Pillow wrappers that decode image files into (H, W, 3) uint8 arrays
and encode visualization rasters back to disk. All I/O problems are
reported as InvalidInputError with the offending path in the message.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import numpy as np
from numpy.typing import NDArray
from PIL import Image, UnidentifiedImageError

from samosa.errors import InvalidInputError

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = frozenset(
    {".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tiff", ".tif"}
)

PathLike = Union[str, Path]


def _check_path(path: PathLike | None) -> Path:
    if path is None:
        raise InvalidInputError("Image path cannot be None")
    path = Path(path)
    if not path.exists():
        raise InvalidInputError(f"Image file does not exist: {path}")
    if not path.is_file():
        raise InvalidInputError(f"Path is not a file: {path}")
    return path


def is_supported(path: PathLike) -> bool:
    """True if the file extension is one of SUPPORTED_EXTENSIONS."""
    return Path(path).suffix.lower() in SUPPORTED_EXTENSIONS


def load_image(path: PathLike) -> NDArray[np.uint8]:
    """
    Decode an image file into an RGB array.

    Args:
        path: Path to the image file

    Returns:
        Array of shape (H, W, 3) with uint8 RGB values

    Raises:
        InvalidInputError: If the file is missing, not a file, or cannot
            be decoded
    """
    path = _check_path(path)
    try:
        with Image.open(path) as img:
            if img.mode != "RGB":
                img = img.convert("RGB")
            pixels = np.array(img, dtype=np.uint8)
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidInputError(
            f"Could not read image file: {path} ({e})"
        ) from e

    logger.info("Loaded %s (%dx%d)", path.name, pixels.shape[1], pixels.shape[0])
    return pixels


def image_dimensions(path: PathLike) -> tuple[int, int]:
    """
    Read the pixel dimensions of an image file without decoding pixels.

    Returns:
        (width, height)

    Raises:
        InvalidInputError: If the file is missing or not an image
    """
    path = _check_path(path)
    try:
        with Image.open(path) as img:
            return img.size
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidInputError(
            f"Could not read image file: {path} ({e})"
        ) from e


def pixel_area(path: PathLike) -> int:
    """Total number of pixels (width * height) in an image file."""
    width, height = image_dimensions(path)
    return int(width) * int(height)


def save_image(pixels: NDArray[np.uint8], path: PathLike) -> Path:
    """
    Encode an RGB array to an image file.

    The format is chosen from the file extension.

    Raises:
        InvalidInputError: If the extension is unsupported or the write fails
    """
    path = Path(path)
    if not is_supported(path):
        raise InvalidInputError(
            f"Unsupported image extension {path.suffix!r}: "
            f"use one of {', '.join(sorted(SUPPORTED_EXTENSIONS))}"
        )
    if pixels.ndim != 3 or pixels.shape[2] != 3 or pixels.dtype != np.uint8:
        raise InvalidInputError(
            f"Expected (H, W, 3) uint8 array, got {pixels.dtype} {pixels.shape}"
        )
    try:
        Image.fromarray(np.ascontiguousarray(pixels)).save(path)
    except (OSError, ValueError) as e:
        raise InvalidInputError(f"Could not write image file: {path} ({e})") from e

    logger.info("Wrote visualization to %s", path)
    return path
