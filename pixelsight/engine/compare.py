"""Compatibility check and label-overlap similarity between two analyses.

Runs outside the transform pipeline: it consumes two finished results.
Both functions are total: a missing analysis is simply incompatible.
"""

from __future__ import annotations

import math

from pixelsight.engine.results import AnalysisResult, ComparisonResult, LabelName

# Mutually exclusive label pairs, matched in either direction.
INCOMPATIBLE_PAIRS: tuple[tuple[LabelName, LabelName], ...] = (
    (LabelName.PERSON, LabelName.ARCHITECTURE),
    (LabelName.PERSON, LabelName.LANDSCAPE),
    (LabelName.PORTRAIT, LabelName.BUILDING),
    (LabelName.MONOCHROME, LabelName.COLORFUL),
)

INCOMPATIBLE_SCORE = 5
INCOMPATIBLE_REASON = "images incompatible"


def are_compatible(first: AnalysisResult | None, second: AnalysisResult | None) -> bool:
    if first is None or second is None:
        return False

    labels_a = first.label_names
    labels_b = second.label_names
    for type_a, type_b in INCOMPATIBLE_PAIRS:
        a, b = type_a.value, type_b.value
        if (a in labels_a and b in labels_b) or (b in labels_a and a in labels_b):
            return False
    return True


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compare(first: AnalysisResult | None, second: AnalysisResult | None) -> ComparisonResult:
    """Score two analyses 0-100 by shared labels, or 5 when incompatible."""
    if not are_compatible(first, second):
        return ComparisonResult(score=INCOMPATIBLE_SCORE, reason=INCOMPATIBLE_REASON)

    labels_a = first.label_names
    labels_b = second.label_names
    common = labels_a & labels_b
    largest = max(len(labels_a), len(labels_b))
    score = _round_half_up(100 * len(common) / largest) if largest else 0

    return ComparisonResult(
        score=score,
        reason=f"similarity based on {len(common)} common labels",
    )
