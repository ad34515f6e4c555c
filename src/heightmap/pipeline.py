"""Map image -> elevation model: classify, label, connect, infer heights."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np
from PIL import Image

from domain.models import HeightmapSettings
from heightmap.adjacency import build_adjacency
from heightmap.heights import infer_heights
from heightmap.labeling import separate_regions
from heightmap.mask import as_rgba_array, extract_color
from heightmap.types import IntegrityWarning, Region, ReliefLine
from shared.constants import LABEL_NONE

logger = logging.getLogger(__name__)


@dataclass
class ElevationModel:
    mask: np.ndarray
    labels: np.ndarray
    regions: dict[int, Region]
    lines: dict[int, ReliefLine]
    region_heights: dict[int, int]
    warnings: list[IntegrityWarning] = field(default_factory=list)
    islands: int = 0

    @property
    def warning_count(self) -> int:
        return len(self.warnings)


def build_elevation_model(
    image: Image.Image | np.ndarray,
    settings: HeightmapSettings | None = None,
) -> ElevationModel:
    """
    Run the whole pipeline on an in-memory RGBA pixel grid.

    Raises:
        ValueError: zero-area or malformed pixel grid.
        HeightmapError: fatal integrity violation (label space, line contact).

    """
    if settings is None:
        settings = HeightmapSettings()

    rgba = as_rgba_array(image)
    h, w = rgba.shape[:2]
    if h == 0 or w == 0:
        msg = f'Zero-area image: {w}x{h}'
        raise ValueError(msg)
    logger.info('Building elevation model for %dx%d image', w, h)

    mask = extract_color(
        rgba,
        relief_color=settings.relief_color,
        allowed_error=settings.allowed_error,
    )
    labels, regions, lines = separate_regions(mask)
    warnings = build_adjacency(regions, lines)
    inference = infer_heights(regions, lines, settings.elevation_step)

    return ElevationModel(
        mask=mask,
        labels=labels,
        regions=regions,
        lines=lines,
        region_heights=inference.region_heights,
        warnings=[*warnings, *inference.warnings],
        islands=inference.islands,
    )


def render_heightmap(model: ElevationModel) -> np.ndarray:
    """
    Grayscale uint8 heightmap: every pixel takes the height of its component.

    Heights are stretched linearly over 0..255; a flat model renders black.
    Islands are not comparable, they share one scale only for viewing.
    """
    heights: dict[int, int] = dict(model.region_heights)
    for label, line in model.lines.items():
        if line.height is not None:
            heights[label] = line.height

    out = np.zeros(model.labels.shape, dtype=np.uint8)
    if not heights:
        return out

    lut = np.zeros(256, dtype=np.float64)
    known = np.zeros(256, dtype=bool)
    for label, height in heights.items():
        lut[label] = height
        known[label] = True
    known[LABEL_NONE] = False

    lo = min(heights.values())
    hi = max(heights.values())
    span = hi - lo
    if span == 0:
        return out
    scaled = np.round((lut - lo) * 255.0 / span).clip(0, 255).astype(np.uint8)
    scaled[~known] = 0
    return scaled[model.labels]
