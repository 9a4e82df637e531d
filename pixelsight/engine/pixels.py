"""PixelBuffer — the immutable RGBA input every stage reads from.

Row-major, 4 bytes per pixel (R, G, B, A). Alpha is carried but never read:
every heuristic works on the unweighted brightness proxy (R + G + B) / 3.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import cached_property

import numpy as np
from numpy.typing import NDArray

from pixelsight.engine.errors import ImageTooLargeError, InvalidBufferError

_CHANNELS = 4


@dataclass(frozen=True)
class PixelBuffer:
    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.width, int) or not isinstance(self.height, int):
            raise InvalidBufferError(
                f"Dimensions must be integers, got {self.width!r}x{self.height!r}"
            )
        if self.width <= 0 or self.height <= 0:
            raise InvalidBufferError(f"Zero-area image: {self.width}x{self.height}")
        if isinstance(self.data, (bytearray, memoryview)):
            object.__setattr__(self, "data", bytes(self.data))
        if not isinstance(self.data, bytes):
            raise InvalidBufferError(f"Pixel data must be bytes, got {type(self.data).__name__}")
        expected = self.width * self.height * _CHANNELS
        if len(self.data) != expected:
            raise InvalidBufferError(
                f"Buffer length {len(self.data)} does not match "
                f"{self.width}x{self.height}x{_CHANNELS} = {expected}"
            )

    @classmethod
    def from_array(cls, array: NDArray[np.uint8]) -> PixelBuffer:
        """Build a buffer from an (H, W, 4) uint8 array."""
        arr = np.asarray(array)
        if arr.ndim != 3 or arr.shape[2] != _CHANNELS:
            raise InvalidBufferError(f"Expected an (H, W, 4) array, got shape {arr.shape}")
        if arr.dtype != np.uint8:
            raise InvalidBufferError(f"Expected uint8 pixels, got {arr.dtype}")
        height, width = int(arr.shape[0]), int(arr.shape[1])
        return cls(width=width, height=height, data=np.ascontiguousarray(arr).tobytes())

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @cached_property
    def pixels(self) -> NDArray[np.uint8]:
        """Read-only (H, W, 4) view over ``data``."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(self.height, self.width, _CHANNELS)

    @cached_property
    def brightness(self) -> NDArray[np.float64]:
        """(H, W) unweighted mean of R, G, B."""
        arr = self.pixels[:, :, :3].sum(axis=2, dtype=np.float64) / 3.0
        arr.setflags(write=False)
        return arr

    def brightness_at(self, x: float, y: float) -> float:
        """Brightness at a (possibly fractional) coordinate, floored to the pixel grid."""
        return float(self.brightness[math.floor(y), math.floor(x)])

    def ensure_within(self, max_dimension: int) -> None:
        if self.width > max_dimension or self.height > max_dimension:
            raise ImageTooLargeError(
                f"Image {self.width}x{self.height} exceeds the {max_dimension}px limit"
            )
