"""Spatial queries over a label grid."""

from __future__ import annotations

import math

import numpy as np


def nearest_distance(
    labels: np.ndarray, origin: tuple[int, int], target_label: int
) -> float | None:
    """
    Euclidean distance from ``origin`` (x, y) to the closest pixel carrying ``target_label``.

    Returns None when no pixel carries the label.
    """
    ys, xs = np.nonzero(np.asarray(labels) == target_label)
    if xs.size == 0:
        return None
    ox, oy = origin
    dx = xs.astype(np.int64) - ox
    dy = ys.astype(np.int64) - oy
    return math.sqrt(int((dx * dx + dy * dy).min()))
