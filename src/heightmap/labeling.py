"""
Connected-component labeling of the relief mask.

Two column-major raster scans share one label counter: the first floods
every relief line with 8-connectivity (KING moves), the second floods every
remaining background pixel with 4-connectivity (TOWER moves). Regions record
the labels of the relief lines they run into while being filled.
"""

from __future__ import annotations

import logging

import numpy as np

from heightmap.errors import LabelSpaceExhaustedError
from heightmap.types import Region, ReliefLine
from shared.constants import (
    LABEL_MAX,
    LABEL_NONE,
    MASK_BACKGROUND,
    MASK_CONSUMED,
    MASK_LINE,
)

logger = logging.getLogger(__name__)

# (dx, dy) neighbor offsets
TOWER_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
KING_OFFSETS: tuple[tuple[int, int], ...] = (
    *TOWER_OFFSETS,
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
)

GRID_NDIM = 2


def _next_label(n: int, kind: str, seed: tuple[int, int]) -> int:
    if n >= LABEL_MAX:
        raise LabelSpaceExhaustedError(kind, seed, LABEL_MAX)
    return n + 1


def bucket_into(
    work: list[list[int]],
    labels: list[list[int]],
    seed: tuple[int, int],
    label: int,
    *,
    count_diagonal: bool,
) -> list[int]:
    """
    Flood-fill the component containing ``seed`` with ``label``.

    Pixels are claimed when pushed: labeled and marked MASK_CONSUMED in
    ``work`` so neither this fill nor a later scan visits them twice. The
    explicit stack holds each pixel at most once.

    Returns:
        Labels of already-labeled foreign pixels touching the component, in
        discovery order, without duplicates.

    """
    h = len(work)
    w = len(work[0]) if h else 0
    x0, y0 = seed
    col = work[y0][x0]
    offsets = KING_OFFSETS if count_diagonal else TOWER_OFFSETS

    labels[y0][x0] = label
    work[y0][x0] = MASK_CONSUMED
    stack = [seed]
    # insertion-ordered set
    touching: dict[int, None] = {}

    while stack:
        x, y = stack.pop()
        for dx, dy in offsets:
            nx = x + dx
            ny = y + dy
            if not (0 <= nx < w and 0 <= ny < h):
                continue
            px = labels[ny][nx]
            if px == label:
                continue
            if work[ny][nx] == col:
                labels[ny][nx] = label
                work[ny][nx] = MASK_CONSUMED
                stack.append((nx, ny))
            elif px != LABEL_NONE:
                # border reached: remember whom we touched
                touching[px] = None

    return list(touching)


def separate_regions(
    mask: np.ndarray,
) -> tuple[np.ndarray, dict[int, Region], dict[int, ReliefLine]]:
    """
    Label relief lines and the regions between them.

    Args:
        mask: uint8 (H, W) grid of MASK_LINE / MASK_BACKGROUND cells. Not modified.

    Returns:
        (labels, regions, lines): uint8 label grid of the same shape, region
        map and relief line map keyed by label.

    Raises:
        LabelSpaceExhaustedError: more components than LABEL_MAX.

    """
    mask = np.asarray(mask)
    if mask.ndim != GRID_NDIM:
        msg = f'Expected a 2D mask, got shape {mask.shape}'
        raise ValueError(msg)

    h, w = mask.shape
    # private working copy, consumed pixels get cleared
    work: list[list[int]] = mask.astype(np.uint8).tolist()
    label_rows: list[list[int]] = [[LABEL_NONE] * w for _ in range(h)]

    lines: dict[int, ReliefLine] = {}
    regions: dict[int, Region] = {}
    n = 0

    for x in range(w):
        for y in range(h):
            if work[y][x] == MASK_LINE:
                n = _next_label(n, 'line', (x, y))
                lines[n] = ReliefLine()
                bucket_into(work, label_rows, (x, y), n, count_diagonal=True)
                logger.debug('Relief line %d seeded at (%d, %d)', n, x, y)

    for x in range(w):
        for y in range(h):
            if work[y][x] == MASK_BACKGROUND:
                n = _next_label(n, 'region', (x, y))
                touching = bucket_into(
                    work, label_rows, (x, y), n, count_diagonal=False
                )
                regions[n] = Region(relief_lines=touching)
                logger.debug(
                    'Region %d seeded at (%d, %d), borders lines %s', n, x, y, touching
                )

    labels = np.zeros((h, w), dtype=np.uint8)
    if h and w:
        labels[:, :] = np.asarray(label_rows, dtype=np.uint8)

    logger.info('Labeled %d relief lines and %d regions', len(lines), len(regions))
    return labels, regions, lines
