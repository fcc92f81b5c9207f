# Copyright (c) 2026 Samosa
# SPDX-License-Identifier: MIT

"""Tests for the samosa color predicate."""

import numpy as np
import pytest

from samosa.measure.classify import (
    SAMOSA_RULES,
    ColorRule,
    classify_pixels,
    is_samosa_color,
)


def _rule(name):
    return next(r for r in SAMOSA_RULES if r.name == name)


class TestRules:

    def test_three_rules(self):
        assert [r.name for r in SAMOSA_RULES] == ["mid_brown", "golden", "dark_brown"]

    def test_mid_brown_bounds(self):
        rule = _rule("mid_brown")
        assert rule.red == (100, 200)
        assert rule.green == (50, 150)
        assert rule.blue_max == 100

    def test_golden_bounds(self):
        rule = _rule("golden")
        assert rule.red == (150, 220)
        assert rule.green == (100, 180)
        assert rule.blue_max == 80

    def test_dark_brown_bounds(self):
        rule = _rule("dark_brown")
        assert rule.red == (80, 140)
        assert rule.green == (40, 100)
        assert rule.blue_max == 60

    def test_frozen(self):
        with pytest.raises(AttributeError):
            _rule("golden").blue_max = 90


class TestKnownColors:

    def test_pure_red_not_samosa(self):
        assert is_samosa_color(255, 0, 0) is False

    def test_black_not_samosa(self):
        assert is_samosa_color(0, 0, 0) is False

    def test_white_not_samosa(self):
        assert is_samosa_color(255, 255, 255) is False

    def test_mid_brown_sample(self):
        assert is_samosa_color(150, 90, 40) is True

    def test_golden_sample(self):
        assert is_samosa_color(210, 140, 50) is True

    def test_dark_brown_sample(self):
        assert is_samosa_color(90, 70, 30) is True

    def test_r100_fails_mid_brown_but_matches_dark_brown(self):
        """(100, 75, 50) sits on the mid-brown red boundary but inside dark brown."""
        assert _rule("mid_brown").matches(100, 75, 50) is False
        assert _rule("dark_brown").matches(100, 75, 50) is True
        assert is_samosa_color(100, 75, 50) is True


class TestMidBrownBoundaries:
    """Points chosen so only the mid-brown rule can match."""

    @pytest.mark.parametrize("r,expected", [
        (99, False), (100, False), (101, True),
        (199, True), (200, False), (201, False),
    ])
    def test_red(self, r, expected):
        # g=120 rules out dark brown, b=90 rules out golden
        assert is_samosa_color(r, 120, 90) is expected

    @pytest.mark.parametrize("g,expected", [
        (49, False), (50, False), (51, True),
        (149, True), (150, False), (151, False),
    ])
    def test_green(self, g, expected):
        assert is_samosa_color(190, g, 90) is expected

    @pytest.mark.parametrize("b,expected", [
        (98, True), (99, True), (100, False), (101, False),
    ])
    def test_blue(self, b, expected):
        assert is_samosa_color(120, 120, b) is expected


class TestGoldenBoundaries:
    """Points chosen so only the golden rule can match."""

    @pytest.mark.parametrize("r,expected", [
        (149, False), (150, False), (151, True),
        (219, True), (220, False), (221, False),
    ])
    def test_red(self, r, expected):
        # g=160 rules out mid brown and dark brown
        assert is_samosa_color(r, 160, 50) is expected

    @pytest.mark.parametrize("g,expected", [
        (99, False), (100, False), (101, True),
        (179, True), (180, False), (181, False),
    ])
    def test_green(self, g, expected):
        # r=210 rules out mid brown and dark brown
        assert is_samosa_color(210, g, 50) is expected

    @pytest.mark.parametrize("b,expected", [
        (78, True), (79, True), (80, False), (81, False),
    ])
    def test_blue(self, b, expected):
        assert is_samosa_color(210, 140, b) is expected


class TestDarkBrownBoundaries:
    """Points chosen so only the dark-brown rule can match."""

    @pytest.mark.parametrize("r,expected", [
        (79, False), (80, False), (81, True),
        (139, True), (140, False), (141, False),
    ])
    def test_red(self, r, expected):
        # g=45 rules out mid brown (needs g > 50) and golden
        assert is_samosa_color(r, 45, 30) is expected

    @pytest.mark.parametrize("g,expected", [
        (39, False), (40, False), (41, True),
        (99, True), (100, False), (101, False),
    ])
    def test_green(self, g, expected):
        # r=90 rules out mid brown and golden
        assert is_samosa_color(90, g, 30) is expected

    @pytest.mark.parametrize("b,expected", [
        (58, True), (59, True), (60, False), (61, False),
    ])
    def test_blue(self, b, expected):
        assert is_samosa_color(90, 70, b) is expected


class TestTotality:

    def test_extreme_channels(self):
        for r in (0, 255):
            for g in (0, 255):
                for b in (0, 255):
                    assert isinstance(is_samosa_color(r, g, b), bool)

    def test_deterministic(self):
        results = {is_samosa_color(150, 90, 40) for _ in range(10)}
        assert results == {True}

    def test_custom_rules(self):
        only_gray = (ColorRule(name="gray", red=(100, 140), green=(100, 140), blue_max=256),)
        assert is_samosa_color(120, 120, 120, rules=only_gray) is True
        assert is_samosa_color(150, 90, 40, rules=only_gray) is False

    def test_no_rules_never_matches(self):
        assert is_samosa_color(150, 90, 40, rules=()) is False


class TestClassifyPixels:

    def test_shape_preserved(self):
        pixels = np.zeros((4, 7, 3), dtype=np.uint8)
        mask = classify_pixels(pixels)
        assert mask.shape == (4, 7)
        assert mask.dtype == bool

    def test_matches_scalar_predicate(self):
        pixels = np.random.RandomState(42).randint(0, 256, size=(5000, 3)).astype(np.uint8)
        mask = classify_pixels(pixels)
        expected = [is_samosa_color(int(r), int(g), int(b)) for r, g, b in pixels]
        assert mask.tolist() == expected

    def test_matches_scalar_on_lattice(self):
        values = np.arange(0, 256, 15, dtype=np.uint8)
        grid = np.stack(np.meshgrid(values, values, values, indexing="ij"), axis=-1)
        mask = classify_pixels(grid)
        for idx in np.ndindex(mask.shape):
            r, g, b = (int(c) for c in grid[idx])
            assert mask[idx] == is_samosa_color(r, g, b)

    def test_no_uint8_wraparound(self):
        # 255 must not wrap to a small value when compared
        pixels = np.array([[255, 255, 255], [0, 0, 0]], dtype=np.uint8)
        assert not classify_pixels(pixels).any()

    def test_empty(self):
        pixels = np.zeros((0, 0, 3), dtype=np.uint8)
        assert classify_pixels(pixels).shape == (0, 0)
