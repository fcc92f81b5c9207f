# Copyright (c) 2026 Samosa
# SPDX-License-Identifier: MIT

"""
Samosa color classification.

A pixel is samosa-colored when its raw RGB channels fall inside any of
three brown/orange ranges. No color space conversion is applied; the
ranges were tuned against raw channel values and must stay exactly as
they are.

Red and green bounds are exclusive at both ends. The blue bound is an
exclusive upper limit only.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True, slots=True)
class ColorRule:
    """
    One RGB range rule.

    Attributes:
        name: Short label for the rule (e.g. "golden")
        red: Exclusive (low, high) bounds for the red channel
        green: Exclusive (low, high) bounds for the green channel
        blue_max: Exclusive upper bound for the blue channel
    """
    name: str
    red: tuple[int, int]
    green: tuple[int, int]
    blue_max: int

    def matches(self, r: int, g: int, b: int) -> bool:
        """True if a single RGB triple falls inside this rule."""
        return (
            self.red[0] < r < self.red[1]
            and self.green[0] < g < self.green[1]
            and b < self.blue_max
        )

    def mask(
        self,
        r: NDArray[np.int16],
        g: NDArray[np.int16],
        b: NDArray[np.int16],
    ) -> NDArray[np.bool_]:
        """Vectorized form of ``matches`` over channel arrays."""
        return (
            (r > self.red[0]) & (r < self.red[1])
            & (g > self.green[0]) & (g < self.green[1])
            & (b < self.blue_max)
        )


SAMOSA_RULES: tuple[ColorRule, ...] = (
    ColorRule(name="mid_brown", red=(100, 200), green=(50, 150), blue_max=100),
    ColorRule(name="golden", red=(150, 220), green=(100, 180), blue_max=80),
    ColorRule(name="dark_brown", red=(80, 140), green=(40, 100), blue_max=60),
)


def is_samosa_color(
    r: int,
    g: int,
    b: int,
    rules: tuple[ColorRule, ...] = SAMOSA_RULES,
) -> bool:
    """
    Decide whether one RGB triple is samosa-colored.

    Total over the full [0, 255] domain; never raises.

    Args:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
        rules: Range rules to OR together (default: SAMOSA_RULES)

    Returns:
        True if any rule matches
    """
    return any(rule.matches(r, g, b) for rule in rules)


def classify_pixels(
    pixels: NDArray[np.uint8],
    rules: tuple[ColorRule, ...] = SAMOSA_RULES,
) -> NDArray[np.bool_]:
    """
    Classify every pixel of an RGB array at once.

    Agrees with ``is_samosa_color`` pixel by pixel.

    Args:
        pixels: Array of shape (..., 3) with uint8 RGB values
        rules: Range rules to OR together (default: SAMOSA_RULES)

    Returns:
        Boolean mask with the leading shape of ``pixels``
    """
    # Widen so comparisons never wrap around
    rgb = np.asarray(pixels).astype(np.int16, copy=False)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    result = np.zeros(rgb.shape[:-1], dtype=bool)
    for rule in rules:
        result |= rule.mask(r, g, b)
    return result
