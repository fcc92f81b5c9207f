# Copyright (c) 2026 Samosa
# SPDX-License-Identifier: MIT

"""
Presentation runtime for samosa.

Turns SamosaMeasurement data into text for people and documents:

1. Report -- Results summary, or JSON
2. Block -- XML / JSON / Markdown block for embedding

The presentation layer never modifies measurement content.
"""

from samosa.runtime.serializers import (
    BlockFormat,
    SerializerFormat,
    format_area,
    format_count,
    format_percentage,
    to_block,
    to_report,
)

__all__ = [
    "to_report",
    "to_block",
    "SerializerFormat",
    "BlockFormat",
    "format_area",
    "format_count",
    "format_percentage",
]
