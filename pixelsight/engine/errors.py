"""Exception hierarchy for the analysis engine."""

from __future__ import annotations


class PixelSightError(Exception):
    """Base class for every error raised by PixelSight."""


class InvalidBufferError(PixelSightError, ValueError):
    """Pixel buffer violates its size invariant (zero dimension or length mismatch)."""


class ImageTooLargeError(InvalidBufferError):
    """Image side exceeds the configured maximum dimension."""


class ImageDecodeError(PixelSightError, ValueError):
    """Source bytes could not be decoded into RGBA pixels."""


class AnalysisError(PixelSightError):
    """One or more transforms failed; no partial result is returned."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        failed = ", ".join(f"{tid}: {msg}" for tid, msg in sorted(self.errors.items()))
        super().__init__(f"Analysis failed ({failed})")
