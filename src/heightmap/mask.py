"""Relief color extraction: RGBA image -> two-valued contour mask."""

from __future__ import annotations

import numpy as np
from PIL import Image

from shared.constants import (
    ALLOWED_ERROR,
    MASK_BACKGROUND,
    MASK_LINE,
    RELIEF_COLOR,
)

RGB_CHANNELS = 3


def as_rgba_array(image: Image.Image | np.ndarray) -> np.ndarray:
    """Return the image as an (H, W, C) array with at least RGB channels."""
    if isinstance(image, Image.Image):
        return np.asarray(image.convert('RGBA'))
    arr = np.asarray(image)
    if arr.ndim != 3 or arr.shape[2] < RGB_CHANNELS:
        msg = f'Expected an (H, W, 3|4) pixel grid, got shape {arr.shape}'
        raise ValueError(msg)
    return arr


def extract_color(
    image: Image.Image | np.ndarray,
    *,
    relief_color: tuple[int, int, int] = RELIEF_COLOR,
    allowed_error: int = ALLOWED_ERROR,
) -> np.ndarray:
    """
    Classify every pixel as relief line or background.

    Args:
        image: RGBA (or RGB) pixel grid, alpha is ignored.
        relief_color: Reference line color.
        allowed_error: Squared RGB distance threshold, inclusive.

    Returns:
        uint8 mask of shape (H, W) holding MASK_LINE or MASK_BACKGROUND.

    """
    rgb = as_rgba_array(image)[..., :RGB_CHANNELS].astype(np.int64)
    ref = np.asarray(relief_color, dtype=np.int64)
    dist = ((rgb - ref) ** 2).sum(axis=-1)
    return np.where(dist <= allowed_error, MASK_LINE, MASK_BACKGROUND).astype(
        np.uint8
    )


def mask_to_image(mask: np.ndarray) -> np.ndarray:
    """Contrast rendering of a mask for viewing: lines black on white."""
    return np.where(mask == MASK_LINE, 0, 255).astype(np.uint8)
