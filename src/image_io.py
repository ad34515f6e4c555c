from __future__ import annotations

import contextlib
import os
from typing import TYPE_CHECKING

import numpy as np
from PIL import Image, UnidentifiedImageError

if TYPE_CHECKING:
    from pathlib import Path


class ImageDecodeError(RuntimeError):
    """Input image could not be decoded or is empty."""


def load_rgba(path: Path | str) -> np.ndarray:
    """Decode an image file into an (H, W, 4) uint8 RGBA grid."""
    try:
        with Image.open(path) as img:
            rgba = np.asarray(img.convert('RGBA'))
    except (OSError, UnidentifiedImageError) as e:
        msg = f'Failed to decode image {path}: {e}'
        raise ImageDecodeError(msg) from e
    h, w = rgba.shape[:2]
    if h == 0 or w == 0:
        msg = f'Image {path} has zero area ({w}x{h})'
        raise ImageDecodeError(msg)
    return rgba


def save_gray_png(grid: np.ndarray, out_path: Path | str) -> None:
    """Save a uint8 (H, W) grid as an 8-bit grayscale PNG and fsync it."""
    img = Image.fromarray(np.ascontiguousarray(grid, dtype=np.uint8))
    try:
        img.save(out_path, format='PNG')
    finally:
        with contextlib.suppress(Exception):
            img.close()
    # Ensure data is written to disk
    fd = os.open(out_path, os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)
