"""Analysis configuration — every heuristic threshold in one place."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AnalysisConfig:
    """Tunable thresholds. Defaults reproduce the reference heuristics exactly."""

    # Color statistics
    gray_pixel_tolerance: int = 10  # max |R-G|, |G-B|, |R-B| for a gray pixel
    grayscale_ratio: float = 0.8
    colorful_ratio: float = 0.6
    gray_dominance_tolerance: float = 20.0  # averages closer than this read as gray

    # Complexity estimator
    complexity_high: float = 0.7
    complexity_low: float = 0.3

    # Rectangular-shape detector
    line_sample_step: int = 10  # grid spacing and run length, in pixels
    line_brightness_tolerance: float = 20.0
    line_min_continuity: int = 7  # hits needed out of line_sample_step checks
    line_density_divisor: int = 1000  # hits must exceed width*height / divisor

    # Circular-shape detector
    radial_angle_step: int = 10  # degrees
    radial_radius_divisor: float = 4.0  # radius = min(width, height) / divisor
    radial_brightness_tolerance: float = 30.0
    radial_min_hits: int = 18  # of 36 samples at the default step

    # Composition
    center_focus_margin: float = 20.0
    symmetry_tolerance: float = 30.0

    # Label classifier
    landscape_aspect: float = 1.5
    portrait_aspect: float = 0.8
    person_max_aspect: float = 1.0
    architecture_min_aspect: float = 1.2
    label_score: float = 0.8
    object_score: float = 0.7

    # Entry-point guard against unbounded latency
    max_dimension: int = 4096
