# Copyright (c) 2026 Samosa
# SPDX-License-Identifier: MIT

"""
Block serializer for embedding measurements in documents.

Formats SamosaMeasurement as a structured block (XML, JSON, or Markdown)
that can be pasted into a report or log next to the image it describes.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Optional

from samosa.schema import AreaResult, SamosaMeasurement


class BlockFormat(Enum):
    """Block format options."""

    XML = "xml"
    JSON = "json"
    MARKDOWN = "markdown"


def to_block(
    measurement: SamosaMeasurement,
    *,
    format: BlockFormat = BlockFormat.XML,
    tag_name: str = "samosa_measurement",
) -> str:
    """Serialize a SamosaMeasurement as a structured block.

    Args:
        measurement: The SamosaMeasurement to serialize.
        format: Block format (XML, JSON, or MARKDOWN).
        tag_name: XML/markdown tag name for the block.

    Returns:
        Formatted block string.

    Example (XML)::

        <samosa_measurement version="1.0" source="samosa">
          <image width="20" height="20"/>
          <pixels classified="400" total="400"/>
          <coverage valid="true" value="100.000"/>
          <calibration pixels_per_unit="20.000" unit="cm"/>
          <physical_area valid="true" value="1.000" unit="cm"/>
        </samosa_measurement>
    """
    if format == BlockFormat.XML:
        return _to_xml(measurement, tag_name)
    elif format == BlockFormat.JSON:
        return _to_json(measurement, tag_name)
    else:
        return _to_markdown(measurement, tag_name)


def _result_attrs(result: AreaResult, unit: Optional[str] = None) -> str:
    if not result.valid:
        reason = (result.reason or "").replace('"', "&quot;")
        return f'valid="false" reason="{reason}"'
    unit_attr = f' unit="{unit}"' if unit else ""
    return f'valid="true" value="{result.value:.3f}"{unit_attr}'


def _to_xml(measurement: SamosaMeasurement, tag_name: str) -> str:
    """Generate XML block."""
    lines = [f'<{tag_name} version="{measurement.version}" source="samosa">']

    lines.append(
        f'  <image width="{measurement.width}" height="{measurement.height}"/>'
    )
    counts = measurement.classification
    lines.append(
        f'  <pixels classified="{counts.classified}" total="{counts.total}"/>'
    )
    lines.append(f"  <coverage {_result_attrs(measurement.coverage)}/>")

    # Calibration (if present)
    if measurement.calibration is not None:
        cal = measurement.calibration
        lines.append(
            f'  <calibration pixels_per_unit="{cal.pixels_per_unit:.3f}" '
            f'unit="{cal.unit}"/>'
        )
        lines.append(
            f"  <physical_area "
            f"{_result_attrs(measurement.physical_area, cal.unit)}/>"
        )

    lines.append(f"</{tag_name}>")
    return "\n".join(lines)


def _to_json(measurement: SamosaMeasurement, tag_name: str) -> str:
    """Generate JSON block with wrapper."""
    wrapped = {tag_name: measurement.to_dict()}
    return json.dumps(wrapped, indent=2)


def _to_markdown(measurement: SamosaMeasurement, tag_name: str) -> str:
    """Generate markdown block with code fence."""
    lines = [
        f"<!-- {tag_name} -->",
        "```json",
        json.dumps(measurement.to_dict(), indent=2),
        "```",
        f"<!-- /{tag_name} -->",
    ]
    return "\n".join(lines)
