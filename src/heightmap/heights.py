"""
Relative height inference over the region <-> relief line graph.

Convention: a relief line carries the height of its ``up_region``; its
``down_region`` lies one elevation step lower. Every connected island of the
graph is walked breadth-first from its lowest-labeled unprocessed line, which
gets the baseline height unless it already has one. Heights are comparable
only inside one island.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field

from heightmap.types import IntegrityWarning, Region, ReliefLine, WarningKind
from shared.constants import ELEVATION_STEP, HEIGHT_BASELINE

logger = logging.getLogger(__name__)


@dataclass
class HeightInference:
    region_heights: dict[int, int] = field(default_factory=dict)
    warnings: list[IntegrityWarning] = field(default_factory=list)
    islands: int = 0

    @property
    def warning_count(self) -> int:
        return len(self.warnings)


def region_height_via(line: ReliefLine, region: int, step: int) -> int | None:
    """Height the line implies for one of its bordering regions."""
    side = line.side_of(region)
    if side is None or line.height is None:
        return None
    return line.height if side == 'up' else line.height - step


def line_height_from(side: str, region_height: int, step: int) -> int:
    """Height of a line seen from a region on the given side of it."""
    return region_height if side == 'up' else region_height + step


class _Walker:
    def __init__(
        self,
        regions: dict[int, Region],
        lines: dict[int, ReliefLine],
        step: int,
    ) -> None:
        self.regions = regions
        self.lines = lines
        self.step = step
        self.result = HeightInference()
        self.visited: set[int] = set()

    def warn(
        self, kind: WarningKind, msg: str, region: int | None, line: int | None
    ) -> None:
        logger.warning(msg)
        self.result.warnings.append(
            IntegrityWarning(kind, msg, region=region, line=line)
        )

    def set_region(self, region: int, candidate: int, via_line: int) -> bool:
        """Assign a region height; returns True only for a fresh assignment."""
        current = self.result.region_heights.get(region)
        if current is None:
            self.result.region_heights[region] = candidate
            return True
        if current != candidate:
            self.warn(
                WarningKind.HEIGHT_CONFLICT,
                f'Region {region} reached with height {candidate} via relief line '
                f'{via_line}, keeping {current}',
                region,
                via_line,
            )
        return False

    def cross(
        self, line_label: int, line: ReliefLine, region: int, side: str
    ) -> int | None:
        """Fix the line height from ``region`` and step over to its other side."""
        self.visited.add(line_label)
        height = self.result.region_heights[region]
        if line.height is None:
            line.height = line_height_from(side, height, self.step)
        elif region_height_via(line, region, self.step) != height:
            self.warn(
                WarningKind.HEIGHT_CONFLICT,
                f'Relief line {line_label} at height {line.height} disagrees with '
                f'region {region} at height {height}',
                region,
                line_label,
            )

        other = line.other_region(region)
        if other is None:
            return None
        candidate = region_height_via(line, other, self.step)
        if candidate is not None and self.set_region(other, candidate, line_label):
            return other
        return None

    def walk(self, queue: deque[int]) -> None:
        while queue:
            region_label = queue.popleft()
            region = self.regions.get(region_label)
            if region is None:
                continue
            for line_label in region.relief_lines:
                line = self.lines.get(line_label)
                if line is None:
                    logger.debug(
                        'Region %d: skipping unknown relief line %d',
                        region_label,
                        line_label,
                    )
                    continue
                side = line.side_of(region_label)
                if side is None:
                    self.warn(
                        WarningKind.UNLINKED_REGION,
                        f'Region {region_label} lists relief line {line_label}, '
                        'but the line does not list the region',
                        region_label,
                        line_label,
                    )
                    continue
                if line_label in self.visited:
                    continue
                other = self.cross(line_label, line, region_label, side)
                if other is not None:
                    queue.append(other)

    def seed_line(self, line_label: int) -> None:
        line = self.lines[line_label]
        self.result.islands += 1
        if line.height is None:
            line.height = HEIGHT_BASELINE
        if not line.regions:
            self.visited.add(line_label)
            logger.debug('Relief line %d borders no region', line_label)
            return

        seed = line.regions[0]
        queue: deque[int] = deque()
        if self.set_region(
            seed, region_height_via(line, seed, self.step), line_label
        ):
            queue.append(seed)
        other = self.cross(line_label, line, seed, line.side_of(seed))
        if other is not None:
            queue.append(other)
        self.walk(queue)


def infer_heights(
    regions: dict[int, Region],
    lines: dict[int, ReliefLine],
    step: int = ELEVATION_STEP,
) -> HeightInference:
    """
    Assign a relative height to every relief line and region.

    Lines that already carry a height keep it, so a second run over the same
    graph reproduces the first. Conflicting paths keep the first height and
    are reported as warnings.

    Args:
        regions: Region map from the labeler.
        lines: Relief line map after build_adjacency; heights are set in place.
        step: Elevation step between neighboring regions.

    Returns:
        HeightInference with region heights, warnings and island count.

    """
    walker = _Walker(regions, lines, step)

    for line_label in sorted(lines):
        if line_label not in walker.visited:
            walker.seed_line(line_label)

    # regions without any relief line form islands of their own
    for region_label in sorted(regions):
        if region_label not in walker.result.region_heights:
            walker.result.islands += 1
            walker.result.region_heights[region_label] = HEIGHT_BASELINE
            walker.walk(deque([region_label]))

    result = walker.result
    logger.info(
        'Heights inferred for %d regions in %d islands (%d warnings)',
        len(result.region_heights),
        result.islands,
        result.warning_count,
    )
    return result
