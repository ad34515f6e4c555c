"""Pytest configuration and fixtures for map2heightmap tests."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from shared.constants import MASK_BACKGROUND, MASK_LINE  # noqa: E402


def mask_from_rows(rows: list[str]) -> np.ndarray:
    """Build a mask from strings: '#' is a relief line pixel, anything else background."""
    return np.array(
        [[MASK_LINE if ch == '#' else MASK_BACKGROUND for ch in row] for row in rows],
        dtype=np.uint8,
    )


@pytest.fixture
def ring_mask() -> np.ndarray:
    """5x5 image with a 3x3 relief ring centered at (2, 2)."""
    return mask_from_rows([
        '.....',
        '.###.',
        '.#.#.',
        '.###.',
        '.....',
    ])


@pytest.fixture
def nested_rings_mask() -> np.ndarray:
    """9x9 image with two concentric relief rings around (4, 4)."""
    return mask_from_rows([
        '.........',
        '.#######.',
        '.#.....#.',
        '.#.###.#.',
        '.#.#.#.#.',
        '.#.###.#.',
        '.#.....#.',
        '.#######.',
        '.........',
    ])


@pytest.fixture
def make_mask():
    return mask_from_rows
