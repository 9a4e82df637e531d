"""Tests for Layer 0 measurement transforms."""

import numpy as np
import pytest

from pixelsight.engine.config import AnalysisConfig
from pixelsight.engine.layer0.t0_01_color_statistics import compute_color_stats, dominant_color
from pixelsight.engine.layer0.t0_02_complexity import estimate_complexity
from pixelsight.engine.layer0.t0_03_rectangular_shapes import (
    count_straight_lines,
    has_rectangular_shapes,
)
from pixelsight.engine.layer0.t0_04_circular_shapes import (
    count_radial_matches,
    has_circular_shapes,
)
from pixelsight.engine.results import DominantColor
from tests.conftest import (
    BLUE,
    RED,
    checkerboard,
    mirrored_noise,
    rgb_buffer,
    solid,
    split_vertical,
)


# --- T0.01 color statistics ---


def test_mid_gray_is_grayscale():
    stats = compute_color_stats(solid(10, 10))
    assert stats.is_grayscale is True
    assert stats.is_colorful is False
    assert stats.dominant_color == DominantColor.GRAY
    assert stats.average.r == stats.average.g == stats.average.b == 128.0


def test_pure_red_is_colorful():
    stats = compute_color_stats(solid(8, 8, RED))
    assert stats.is_colorful is True
    assert stats.is_grayscale is False
    assert stats.dominant_color == DominantColor.RED


def test_averages_stay_in_channel_range():
    stats = compute_color_stats(mirrored_noise(31, 17))
    for value in (stats.average.r, stats.average.g, stats.average.b):
        assert 0.0 <= value <= 255.0


def test_half_gray_half_color_sets_neither_flag():
    stats = compute_color_stats(split_vertical(20, 10, left=(128, 128, 128), right=RED))
    assert stats.is_grayscale is False
    assert stats.is_colorful is False


def test_red_blue_tie_is_mixed():
    stats = compute_color_stats(split_vertical(20, 10, left=RED, right=BLUE))
    assert stats.average.r == stats.average.b == 127.5
    assert stats.dominant_color == DominantColor.MIXED


def test_gray_pixel_tolerance_is_strict():
    # |R-G| == 10 is not below the tolerance
    stats = compute_color_stats(solid(4, 4, (110, 100, 100)))
    assert stats.is_grayscale is False
    stats = compute_color_stats(solid(4, 4, (109, 100, 100)))
    assert stats.is_grayscale is True


@pytest.mark.parametrize(
    ("rgb", "expected"),
    [
        ((200, 10, 10), DominantColor.RED),
        ((10, 200, 10), DominantColor.GREEN),
        ((10, 10, 200), DominantColor.BLUE),
        ((100, 100, 90), DominantColor.GRAY),
        ((100, 100, 50), DominantColor.MIXED),
    ],
)
def test_dominant_color(rgb, expected):
    assert dominant_color(*rgb) == expected


# --- T0.02 complexity ---


def test_uniform_complexity_is_exactly_zero():
    assert estimate_complexity(solid(50, 40, (37, 90, 211))) == 0.0


def test_checkerboard_is_complex():
    value = estimate_complexity(checkerboard(50, 50))
    assert value == pytest.approx(48 * 48 / 2500)
    assert value > 0.7


def test_complexity_without_interior_is_zero():
    assert estimate_complexity(checkerboard(2, 50)) == 0.0
    assert estimate_complexity(checkerboard(1, 1)) == 0.0


def test_complexity_is_bounded():
    assert 0.0 <= estimate_complexity(mirrored_noise(64, 48)) <= 1.0


# --- T0.03 rectangular shapes ---


def test_flat_landscape_has_straight_lines():
    buffer = solid(200, 100)
    # 10 sampled rows x 19 sampled columns, every run continuous
    assert count_straight_lines(buffer) == 190
    assert has_rectangular_shapes(buffer) is True


def test_checkerboard_has_no_straight_lines():
    assert count_straight_lines(checkerboard(200, 100)) == 0
    assert has_rectangular_shapes(checkerboard(200, 100)) is False


def _ramp(width: int, height: int, step: int) -> np.ndarray:
    """Gray rows rising by ``step`` per column, restarting every 10 columns."""
    values = 50 + step * (np.arange(width) % 10)
    return np.repeat(np.tile(values, (height, 1))[:, :, None], 3, axis=2)


def test_gradual_ramp_is_measured_against_anchor():
    # Neighbours differ by 5, but the run drifts 20+ from its first pixel after 4 columns
    assert count_straight_lines(rgb_buffer(_ramp(200, 100, 5))) == 0


def test_shallow_ramp_stays_within_anchor_tolerance():
    # Largest drift from the anchor is 18
    assert count_straight_lines(rgb_buffer(_ramp(200, 100, 2))) == 190


def test_narrow_image_has_no_line_samples():
    assert count_straight_lines(solid(10, 100)) == 0
    assert has_rectangular_shapes(solid(10, 100)) is False


def test_line_threshold_is_configurable():
    config = AnalysisConfig(line_density_divisor=10)
    # 190 hits vs. 200*100/10 = 2000 required
    assert has_rectangular_shapes(solid(200, 100), config) is False


# --- T0.04 circular shapes ---


def test_uniform_image_is_radially_symmetric():
    assert count_radial_matches(solid(100, 100)) == 36
    assert has_circular_shapes(solid(100, 100)) is True


def test_split_image_is_not_radially_symmetric():
    buffer = split_vertical(100, 100)
    assert count_radial_matches(buffer) <= 2
    assert has_circular_shapes(buffer) is False


def test_single_pixel_compares_pixel_with_itself():
    # Radius 0.25 around (0.5, 0.5) keeps every sample on the one pixel
    assert count_radial_matches(solid(1, 1)) == 36


def test_radial_points_outside_image_are_skipped():
    config = AnalysisConfig(radial_radius_divisor=0.5)  # radius = 2 * min side
    assert count_radial_matches(solid(40, 40), config) == 0


def test_ring_is_detected():
    size = 120
    ys, xs = np.indices((size, size))
    dist = np.hypot(xs - size / 2, ys - size / 2)
    level = np.where(np.abs(dist - size / 4) < 3, 255, 0).astype(np.uint8)
    buffer = rgb_buffer(np.repeat(level[:, :, None], 3, axis=2))
    assert has_circular_shapes(buffer) is True
