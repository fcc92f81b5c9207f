# Copyright (c) 2026 Samosa
# SPDX-License-Identifier: MIT

"""
SamosaMeasurement v1.0 -- Canonical schema for samosa area measurement.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same raster → same measurement
- Explicit validity: Invalid arithmetic is a tagged result, never a
  magic number
- Serializable: JSON-ready

A measurement is produced in three steps: classify every pixel, derive
coverage from the counts, and (when a calibration is known) convert the
classified pixel count into a physical area.
"""

from __future__ import annotations

import json
import math
import numbers
from dataclasses import dataclass, field
from typing import Optional

from samosa.errors import InvalidInputError


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0"


# =============================================================================
# Tagged Arithmetic Result
# =============================================================================


@dataclass(frozen=True, slots=True)
class AreaResult:
    """
    Outcome of an area or percentage calculation.

    Either valid with a numeric value, or invalid with a reason. Callers
    check ``valid`` (or use ``unwrap``/``value_or``) instead of comparing
    against a sentinel.

    Attributes:
        value: Computed value, None when invalid
        reason: Why the input was rejected, None when valid
    """
    value: Optional[float] = None
    reason: Optional[str] = None

    def __post_init__(self) -> None:
        """Exactly one of value/reason must be set."""
        if (self.value is None) == (self.reason is None):
            raise InvalidInputError(
                "AreaResult needs exactly one of value or reason"
            )

    @classmethod
    def ok(cls, value: float) -> AreaResult:
        """Build a valid result."""
        return cls(value=float(value))

    @classmethod
    def invalid(cls, reason: str) -> AreaResult:
        """Build an invalid result."""
        return cls(reason=reason)

    @property
    def valid(self) -> bool:
        """True if the calculation produced a value."""
        return self.value is not None

    def unwrap(self) -> float:
        """
        Return the value, raising if the result is invalid.

        Raises:
            InvalidInputError: If the calculation rejected its input
        """
        if self.value is None:
            raise InvalidInputError(self.reason or "invalid input")
        return self.value

    def value_or(self, default: float) -> float:
        """Return the value, or ``default`` if invalid."""
        return self.value if self.value is not None else default

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        if self.valid:
            return {"valid": True, "value": self.value}
        return {"valid": False, "reason": self.reason}

    @classmethod
    def from_dict(cls, data: dict) -> AreaResult:
        """Deserialize from dictionary."""
        if data.get("valid"):
            return cls.ok(data["value"])
        return cls.invalid(data.get("reason") or "invalid input")


# =============================================================================
# Classification
# =============================================================================


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """
    Pixel counts from a single scan.

    Attributes:
        classified: Number of samosa-colored pixels
        total: Total pixels in the raster (width * height)
    """
    classified: int
    total: int

    def __post_init__(self) -> None:
        """Validate counts."""
        if self.total < 0:
            raise InvalidInputError(
                f"Total pixel count must be >= 0, got {self.total}"
            )
        if not 0 <= self.classified <= self.total:
            raise InvalidInputError(
                f"Classified count must be 0-{self.total}, got {self.classified}"
            )

    @property
    def coverage(self) -> AreaResult:
        """Percentage of the raster classified as samosa (0-100)."""
        from samosa.measure.area import coverage_percentage
        return coverage_percentage(self.classified, self.total)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"classified": self.classified, "total": self.total}

    @classmethod
    def from_dict(cls, data: dict) -> ClassificationResult:
        """Deserialize from dictionary."""
        return cls(classified=data["classified"], total=data["total"])


# =============================================================================
# Calibration
# =============================================================================


def _require_positive(name: str, value: float) -> None:
    if (
        not isinstance(value, numbers.Real)
        or not math.isfinite(value)
        or value <= 0
    ):
        raise InvalidInputError(f"{name} must be a positive number, got {value!r}")


@dataclass(frozen=True, slots=True)
class Calibration:
    """
    Pixel-to-length calibration for one measurement session.

    Built from a reference object of known physical size and its measured
    length in pixels. Non-positive values are rejected, never clamped.

    Attributes:
        reference_length: Physical length of the reference object
        pixel_length: Length of the same object in pixels
        unit: Physical unit of reference_length (e.g. "cm")
    """
    reference_length: float
    pixel_length: float
    unit: str = "cm"

    def __post_init__(self) -> None:
        """Validate calibration inputs."""
        _require_positive("Reference length", self.reference_length)
        _require_positive("Pixel length", self.pixel_length)
        if not self.unit:
            raise InvalidInputError("Calibration unit cannot be empty")

    @property
    def pixels_per_unit(self) -> float:
        """Calibration factor: pixels per unit length."""
        return self.pixel_length / self.reference_length

    @classmethod
    def from_ratio(cls, pixels_per_unit: float, unit: str = "cm") -> Calibration:
        """Build a calibration from an already-divided pixels-per-unit ratio."""
        return cls(reference_length=1.0, pixel_length=pixels_per_unit, unit=unit)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "reference_length": self.reference_length,
            "pixel_length": self.pixel_length,
            "unit": self.unit,
            "pixels_per_unit": self.pixels_per_unit,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Calibration:
        """Deserialize from dictionary."""
        return cls(
            reference_length=data["reference_length"],
            pixel_length=data["pixel_length"],
            unit=data.get("unit", "cm"),
        )


# =============================================================================
# Top-Level Measurement Container
# =============================================================================


@dataclass(frozen=True, slots=True)
class SamosaMeasurement:
    """
    Complete samosa measurement for one image.

    Required fields:
        - width, height: Raster dimensions in pixels
        - classification: Classified and total pixel counts
        - coverage: Coverage percentage (tagged result)

    Optional fields:
        - physical_area: Estimated area in square units (None if uncalibrated)
        - calibration: Calibration used for physical_area
        - image_hash: Hash of source pixels for verification

    Attributes:
        width: Raster width in pixels
        height: Raster height in pixels
        classification: Pixel counts from the scan
        coverage: Percentage of pixels classified as samosa
        physical_area: Estimated physical area, None when uncalibrated
        calibration: Calibration used, None when uncalibrated
        highlight: RGB color used to mark matched pixels in visualizations
        version: Schema version
        image_hash: Optional hash of the source raster
    """
    width: int
    height: int
    classification: ClassificationResult
    coverage: AreaResult
    physical_area: Optional[AreaResult] = None
    calibration: Optional[Calibration] = None
    highlight: tuple[int, int, int] = (255, 0, 0)
    version: str = field(default=SCHEMA_VERSION)
    image_hash: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate measurement structure."""
        if self.width < 0 or self.height < 0:
            raise InvalidInputError(
                f"Dimensions must be >= 0, got {self.width}x{self.height}"
            )
        if self.classification.total != self.width * self.height:
            raise InvalidInputError(
                f"Total pixel count {self.classification.total} does not match "
                f"{self.width}x{self.height}"
            )
        if (self.physical_area is None) != (self.calibration is None):
            raise InvalidInputError(
                "physical_area and calibration must be set together"
            )

    @property
    def is_calibrated(self) -> bool:
        """True if a physical area estimate is available."""
        return self.calibration is not None

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON output."""
        result = {
            "version": self.version,
            "width": self.width,
            "height": self.height,
            "classification": self.classification.to_dict(),
            "coverage": self.coverage.to_dict(),
            "highlight": list(self.highlight),
        }
        if self.calibration is not None:
            result["calibration"] = self.calibration.to_dict()
        if self.physical_area is not None:
            result["physical_area"] = self.physical_area.to_dict()
        if self.image_hash is not None:
            result["image_hash"] = self.image_hash
        return result

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def to_report(self) -> str:
        """
        Serialize to a human-readable summary.

        Example output:
            ## Samosa Measurement

            **Dimensions:** 640 x 480 pixels
            **Samosa Pixels:** 12034
            **Coverage:** 3.9%
            **Real Area:** Not calibrated
        """
        # Import here to avoid circular imports
        from samosa.runtime.serializers.report import to_report
        from samosa.runtime.serializers.base import SerializerFormat
        return to_report(self, format=SerializerFormat.NATURAL)

    @classmethod
    def from_dict(cls, data: dict) -> SamosaMeasurement:
        """Deserialize from dictionary."""
        return cls(
            version=data.get("version", SCHEMA_VERSION),
            width=data["width"],
            height=data["height"],
            classification=ClassificationResult.from_dict(data["classification"]),
            coverage=AreaResult.from_dict(data["coverage"]),
            physical_area=(
                AreaResult.from_dict(data["physical_area"])
                if data.get("physical_area") else None
            ),
            calibration=(
                Calibration.from_dict(data["calibration"])
                if data.get("calibration") else None
            ),
            highlight=tuple(data.get("highlight", (255, 0, 0))),
            image_hash=data.get("image_hash"),
        )

    @classmethod
    def from_json(cls, json_str: str) -> SamosaMeasurement:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
