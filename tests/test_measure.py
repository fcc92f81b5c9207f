# Copyright (c) 2026 Samosa
# SPDX-License-Identifier: MIT

"""Integration tests for the measure() entry point."""

import numpy as np
import pytest
from PIL import Image

from samosa import (
    Calibration,
    InvalidInputError,
    SamosaMeasurement,
    measure,
    measure_with_visualization,
)

SAMOSA = (150, 90, 40)


def _solid_image(r, g, b, height=20, width=20):
    """Create a solid-color image."""
    return np.full((height, width, 3), [r, g, b], dtype=np.uint8)


def _samosa_on_plate(height=40, width=40, size=20):
    """White plate with a square samosa in the top-left corner."""
    img = np.full((height, width, 3), 245, dtype=np.uint8)
    img[:size, :size] = SAMOSA
    return img


class TestMeasureBasic:

    def test_returns_measurement(self):
        m = measure(_solid_image(*SAMOSA))
        assert isinstance(m, SamosaMeasurement)
        assert m.width == 20
        assert m.height == 20

    def test_counts_and_coverage(self):
        m = measure(_samosa_on_plate())
        assert m.classification.classified == 400
        assert m.classification.total == 1600
        assert m.coverage.value == pytest.approx(25.0)

    def test_uncalibrated_has_no_area(self):
        m = measure(_samosa_on_plate())
        assert m.physical_area is None
        assert m.calibration is None

    def test_no_samosa(self):
        m = measure(_solid_image(255, 0, 0))
        assert m.classification.classified == 0
        assert m.coverage.value == 0.0

    def test_single_pixel(self):
        m = measure(_solid_image(0, 0, 0, height=1, width=1))
        assert m.classification.classified == 0
        assert m.coverage.value == 0.0

    def test_none_rejected(self):
        with pytest.raises(InvalidInputError):
            measure(None)

    def test_pil_input(self):
        m = measure(Image.new("RGB", (5, 4), SAMOSA))
        assert m.classification.classified == 20

    def test_records_default_highlight(self):
        assert measure(_solid_image(*SAMOSA)).highlight == (255, 0, 0)

    def test_highlight_only_on_visualization(self):
        with pytest.raises(TypeError):
            measure(_solid_image(*SAMOSA), highlight=(0, 0, 255))


class TestMeasureCalibrated:

    def test_physical_area(self):
        cal = Calibration(reference_length=1.0, pixel_length=20.0)
        m = measure(_solid_image(*SAMOSA), calibration=cal)
        assert m.calibration == cal
        assert m.physical_area.valid
        assert m.physical_area.value == pytest.approx(1.0)

    def test_physical_area_from_reference(self):
        # A 5 cm reference spans 50 px: 10 px/cm, 400 px = 4 cm²
        cal = Calibration(reference_length=5.0, pixel_length=50.0)
        m = measure(_samosa_on_plate(), calibration=cal)
        assert m.physical_area.value == pytest.approx(4.0)

    def test_no_samosa_area_invalid(self):
        cal = Calibration.from_ratio(20.0)
        m = measure(_solid_image(255, 0, 0), calibration=cal)
        assert m.physical_area is not None
        assert not m.physical_area.valid


class TestMeasureHash:

    def test_hash_included(self):
        m = measure(_solid_image(128, 128, 128), include_hash=True)
        assert m.image_hash is not None
        assert m.image_hash.startswith("sha256:")

    def test_hash_excluded(self):
        m = measure(_solid_image(128, 128, 128), include_hash=False)
        assert m.image_hash is None

    def test_hash_differs_by_content(self):
        a = measure(_solid_image(1, 2, 3))
        b = measure(_solid_image(3, 2, 1))
        assert a.image_hash != b.image_hash


class TestMeasureDeterminism:

    def test_same_input_same_output(self):
        img = _samosa_on_plate()
        assert measure(img) == measure(img)


class TestMeasureFromFile:

    def test_path_input(self, tmp_path):
        path = tmp_path / "plate.png"
        Image.fromarray(_samosa_on_plate()).save(path)
        m = measure(path)
        assert m.classification.classified == 400

    def test_str_path_input(self, tmp_path):
        path = tmp_path / "plate.png"
        Image.fromarray(_samosa_on_plate()).save(path)
        m = measure(str(path))
        assert m.width == 40

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidInputError, match="does not exist"):
            measure(tmp_path / "missing.png")


class TestMeasureWithVisualization:

    def test_returns_both(self):
        m, vis = measure_with_visualization(_samosa_on_plate())
        assert m.classification.classified == 400
        assert vis.shape == (40, 40, 3)
        assert (vis[:20, :20] == (255, 0, 0)).all()
        assert (vis[20:, 20:] == 245).all()

    def test_custom_highlight(self):
        m, vis = measure_with_visualization(
            _solid_image(*SAMOSA), highlight=(0, 0, 255)
        )
        assert m.highlight == (0, 0, 255)
        assert (vis.reshape(-1, 3) == (0, 0, 255)).all()

    def test_matches_measure(self):
        img = _samosa_on_plate()
        m, _ = measure_with_visualization(img)
        assert m == measure(img)
