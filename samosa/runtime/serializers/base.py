# Copyright (c) 2026 Samosa
# SPDX-License-Identifier: MIT

"""Base types and display helpers shared by the serializers."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from samosa.schema import AreaResult

INVALID_TEXT = "Invalid input"


class SerializerFormat(Enum):
    """Output format for serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"
    NATURAL = "natural"


def format_area(result: Optional[AreaResult], precision: int = 2) -> str:
    """Format an area for display, e.g. ``"7.50"`` or ``"Invalid input"``."""
    if result is None or not result.valid:
        return INVALID_TEXT
    return f"{result.value:.{precision}f}"


def format_percentage(result: Optional[AreaResult]) -> str:
    """Format a coverage percentage for display, e.g. ``"12.5%"``."""
    if result is None or not result.valid:
        return INVALID_TEXT
    return f"{result.value:.1f}%"


def format_count(count: Optional[int]) -> str:
    """Format a pixel count for display."""
    if count is None or count < 0:
        return INVALID_TEXT
    return f"{count:d}"
