# Copyright (c) 2026 Samosa
# SPDX-License-Identifier: MIT

"""
Serializers for SamosaMeasurement output.

Each serializer formats a SamosaMeasurement for a specific audience.
All serializers preserve the measurement exactly -- no modification.
"""

from samosa.runtime.serializers.base import (
    SerializerFormat,
    format_area,
    format_count,
    format_percentage,
)
from samosa.runtime.serializers.block import BlockFormat, to_block
from samosa.runtime.serializers.report import to_report

__all__ = [
    "SerializerFormat",
    "BlockFormat",
    "to_report",
    "to_block",
    "format_area",
    "format_count",
    "format_percentage",
]
