"""Contour map -> relative heightmap."""
from heightmap.adjacency import build_adjacency
from heightmap.errors import (
    HeightmapError,
    LabelSpaceExhaustedError,
    LineContactError,
)
from heightmap.heights import HeightInference, infer_heights
from heightmap.labeling import separate_regions
from heightmap.mask import extract_color, mask_to_image
from heightmap.pipeline import ElevationModel, build_elevation_model, render_heightmap
from heightmap.query import nearest_distance
from heightmap.types import IntegrityWarning, Region, ReliefLine, WarningKind

__all__ = [
    'ElevationModel',
    'HeightInference',
    'HeightmapError',
    'IntegrityWarning',
    'LabelSpaceExhaustedError',
    'LineContactError',
    'Region',
    'ReliefLine',
    'WarningKind',
    'build_adjacency',
    'build_elevation_model',
    'extract_color',
    'infer_heights',
    'mask_to_image',
    'nearest_distance',
    'render_heightmap',
    'separate_regions',
]
