"""Bipartite region <-> relief line adjacency."""

from __future__ import annotations

import logging

from heightmap.types import IntegrityWarning, Region, ReliefLine, WarningKind

logger = logging.getLogger(__name__)


def build_adjacency(
    regions: dict[int, Region], lines: dict[int, ReliefLine]
) -> list[IntegrityWarning]:
    """
    Register every region on the relief lines listed in its border set.

    Slots are filled first come, first served: ``up_region`` then
    ``down_region``. Regions are visited in ascending label order.

    Returns:
        Warnings for border references to unknown relief lines.

    Raises:
        LineContactError: a relief line would get a third distinct region.

    """
    warnings: list[IntegrityWarning] = []
    for region_label in sorted(regions):
        for line_label in regions[region_label].relief_lines:
            line = lines.get(line_label)
            if line is None:
                msg = f'Region {region_label} borders unknown relief line {line_label}'
                logger.warning(msg)
                warnings.append(
                    IntegrityWarning(
                        WarningKind.MISSING_LINE,
                        msg,
                        region=region_label,
                        line=line_label,
                    )
                )
                continue
            line.try_add_region(line_label, region_label)
    logger.info(
        'Adjacency built for %d relief lines (%d warnings)', len(lines), len(warnings)
    )
    return warnings
