"""Tests for heightmap.adjacency module."""

import logging

import pytest

from heightmap.adjacency import build_adjacency
from heightmap.errors import LineContactError
from heightmap.labeling import separate_regions
from heightmap.types import Region, ReliefLine, WarningKind


class TestBuildAdjacency:
    """Tests for build_adjacency function."""

    def test_ring_slots(self, ring_mask):
        """Outside region takes the up slot, the hollow the down slot."""
        _, regions, lines = separate_regions(ring_mask)
        warnings = build_adjacency(regions, lines)
        assert warnings == []
        assert lines[1].up_region == 2
        assert lines[1].down_region == 3

    def test_symmetry(self, nested_rings_mask):
        """Every region/line border is recorded on both sides."""
        _, regions, lines = separate_regions(nested_rings_mask)
        build_adjacency(regions, lines)
        for region_label, region in regions.items():
            for line_label in region.relief_lines:
                assert region_label in lines[line_label].regions
        for line_label, line in lines.items():
            for region_label in line.regions:
                assert line_label in regions[region_label].relief_lines

    def test_third_region_is_fatal(self):
        """A line touching three regions aborts with the offending labels."""
        regions = {10: Region([1]), 11: Region([1]), 12: Region([1])}
        lines = {1: ReliefLine()}
        with pytest.raises(LineContactError) as exc_info:
            build_adjacency(regions, lines)
        assert exc_info.value.line_label == 1
        assert exc_info.value.regions == (10, 11, 12)

    def test_missing_line_is_warning(self, caplog):
        """Unknown line labels are logged, counted and skipped."""
        regions = {5: Region([1, 9])}
        lines = {1: ReliefLine()}
        with caplog.at_level(logging.WARNING):
            warnings = build_adjacency(regions, lines)
        assert len(warnings) == 1
        assert warnings[0].kind == WarningKind.MISSING_LINE
        assert warnings[0].line == 9
        assert warnings[0].region == 5
        assert lines[1].up_region == 5
        assert 'unknown relief line 9' in caplog.text

    def test_repeated_build_is_stable(self, ring_mask):
        """Registering the same regions again does not add contacts."""
        _, regions, lines = separate_regions(ring_mask)
        build_adjacency(regions, lines)
        build_adjacency(regions, lines)
        assert lines[1].regions == (2, 3)


class TestReliefLine:
    """Tests for ReliefLine slot helpers."""

    def test_try_add_region_fills_in_order(self):
        line = ReliefLine()
        line.try_add_region(1, 4)
        line.try_add_region(1, 6)
        assert (line.up_region, line.down_region) == (4, 6)

    def test_side_and_other(self):
        line = ReliefLine(up_region=4, down_region=6)
        assert line.side_of(4) == 'up'
        assert line.side_of(6) == 'down'
        assert line.side_of(9) is None
        assert line.other_region(4) == 6
        assert line.other_region(6) == 4
        assert line.other_region(9) is None

    def test_boundary_line_has_one_region(self):
        line = ReliefLine(up_region=4)
        assert line.regions == (4,)
        assert line.other_region(4) is None
