# Copyright (c) 2026 Samosa
# SPDX-License-Identifier: MIT

"""
Report serializer for people.

Formats a SamosaMeasurement as a short results summary (dimensions,
pixel counts, coverage, calibration and real area), or as a JSON block.
"""

from __future__ import annotations

import json

from samosa.runtime.serializers.base import (
    SerializerFormat,
    format_area,
    format_count,
    format_percentage,
)
from samosa.schema import SamosaMeasurement


def to_report(
    measurement: SamosaMeasurement,
    *,
    format: SerializerFormat = SerializerFormat.NATURAL,
    preamble: bool = True,
) -> str:
    """Serialize a SamosaMeasurement as a results summary.

    Args:
        measurement: The SamosaMeasurement to serialize.
        format: NATURAL (human-readable), JSON or JSON_PRETTY.
        preamble: Include the heading line (NATURAL only).

    Returns:
        Report string.

    Example (NATURAL)::

        ## Samosa Measurement

        **Dimensions:** 640 x 480 pixels
        **Total Pixels:** 307200
        **Samosa Pixels:** 12034
        **Coverage:** 3.9%
        **Calibration:** 20.00 pixels/cm
        **Real Area:** 30.09 cm²
    """
    if format == SerializerFormat.NATURAL:
        return _to_natural(measurement, preamble)
    elif format == SerializerFormat.JSON_PRETTY:
        return json.dumps(measurement.to_dict(), indent=2)
    else:
        return json.dumps(measurement.to_dict(), separators=(",", ":"))


def _to_natural(measurement: SamosaMeasurement, preamble: bool) -> str:
    """Generate natural language representation."""
    lines: list[str] = []

    if preamble:
        lines.extend([
            "## Samosa Measurement",
            "",
        ])

    counts = measurement.classification
    lines.append(
        f"**Dimensions:** {measurement.width} x {measurement.height} pixels"
    )
    lines.append(f"**Total Pixels:** {format_count(counts.total)}")
    lines.append(f"**Samosa Pixels:** {format_count(counts.classified)}")
    lines.append(f"**Coverage:** {format_percentage(measurement.coverage)}")

    calibration = measurement.calibration
    if calibration is None:
        lines.append("**Real Area:** Not calibrated")
    else:
        lines.append(
            f"**Calibration:** {calibration.pixels_per_unit:.2f} "
            f"pixels/{calibration.unit}"
        )
        area = format_area(measurement.physical_area)
        if measurement.physical_area is not None and measurement.physical_area.valid:
            area = f"{area} {calibration.unit}²"
        lines.append(f"**Real Area:** {area}")

    return "\n".join(lines)
