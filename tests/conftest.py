"""Shared test fixtures and pixel-buffer builders."""

from __future__ import annotations

import base64
import io

import numpy as np
import pytest
from PIL import Image

from pixelsight.engine.pixels import PixelBuffer

MID_GRAY = (128, 128, 128)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
BLUE = (0, 0, 255)


def rgb_buffer(rgb: np.ndarray) -> PixelBuffer:
    """Build an opaque PixelBuffer from an (H, W, 3) array."""
    rgb = np.asarray(rgb, dtype=np.uint8)
    alpha = np.full(rgb.shape[:2] + (1,), 255, dtype=np.uint8)
    return PixelBuffer.from_array(np.concatenate([rgb, alpha], axis=2))


def solid(width: int, height: int, color: tuple[int, int, int] = MID_GRAY) -> PixelBuffer:
    rgb = np.empty((height, width, 3), dtype=np.uint8)
    rgb[:, :] = color
    return rgb_buffer(rgb)


def checkerboard(width: int, height: int) -> PixelBuffer:
    """1-pixel black/white checkerboard; white where x + y is even."""
    ys, xs = np.indices((height, width))
    level = np.where((xs + ys) % 2 == 0, 255, 0).astype(np.uint8)
    return rgb_buffer(np.repeat(level[:, :, None], 3, axis=2))


def split_vertical(width: int, height: int, left=BLACK, right=WHITE) -> PixelBuffer:
    """Left half (x < width // 2) one color, the rest another."""
    rgb = np.empty((height, width, 3), dtype=np.uint8)
    rgb[:, : width // 2] = left
    rgb[:, width // 2 :] = right
    return rgb_buffer(rgb)


def mirrored_noise(width: int, height: int, seed: int = 7) -> PixelBuffer:
    """Random gray levels whose right half mirrors the left exactly."""
    rng = np.random.default_rng(seed)
    levels = rng.integers(0, 256, size=(height, width), dtype=np.uint8)
    levels = np.where(
        np.arange(width)[None, :] < width / 2, levels, levels[:, ::-1]
    ).astype(np.uint8)
    return rgb_buffer(np.repeat(levels[:, :, None], 3, axis=2))


def decorrelated_halves(width: int, height: int, seed: int = 11) -> PixelBuffer:
    """Random left half in [0, 100); the right half is the mirror shifted by 150."""
    rng = np.random.default_rng(seed)
    left = rng.integers(0, 100, size=(height, width // 2), dtype=np.uint8)
    right = (left[:, ::-1] + 150).astype(np.uint8)
    levels = np.concatenate([left, right], axis=1)
    return rgb_buffer(np.repeat(levels[:, :, None], 3, axis=2))


def bright_center(width: int, height: int, half_w: int = 10, half_h: int = 20) -> PixelBuffer:
    """Black frame with a white block around the image center."""
    rgb = np.zeros((height, width, 3), dtype=np.uint8)
    cx, cy = width // 2, height // 2
    rgb[cy - half_h : cy + half_h, cx - half_w : cx + half_w] = WHITE
    return rgb_buffer(rgb)


def png_bytes(buffer: PixelBuffer) -> bytes:
    out = io.BytesIO()
    Image.fromarray(np.array(buffer.pixels)).save(out, format="PNG")
    return out.getvalue()


def data_url(buffer: PixelBuffer) -> str:
    return "data:image/png;base64," + base64.b64encode(png_bytes(buffer)).decode("ascii")


@pytest.fixture
def gray_square() -> PixelBuffer:
    return solid(10, 10)


@pytest.fixture
def gray_landscape() -> PixelBuffer:
    return solid(200, 100)


@pytest.fixture
def gray_portrait() -> PixelBuffer:
    return solid(100, 200)


@pytest.fixture
def person_like() -> PixelBuffer:
    return bright_center(100, 200)
