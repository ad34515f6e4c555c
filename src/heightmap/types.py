"""Data model of the elevation graph: regions, relief lines and integrity warnings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from heightmap.errors import LineContactError


@dataclass
class Region:
    """Interior connected component and the relief lines found on its boundary."""

    relief_lines: list[int] = field(default_factory=list)


@dataclass
class ReliefLine:
    """
    Relief (contour) line component.

    ``up_region``/``down_region`` are filled in discovery order; crossing the
    line from ``down_region`` into ``up_region`` climbs one elevation step.
    """

    up_region: int | None = None
    down_region: int | None = None
    height: int | None = None

    @property
    def regions(self) -> tuple[int, ...]:
        return tuple(r for r in (self.up_region, self.down_region) if r is not None)

    def try_add_region(self, line_label: int, region: int) -> None:
        """Register a bordering region; a third distinct region is fatal."""
        if region in self.regions:
            return
        if self.up_region is None:
            self.up_region = region
            return
        if self.down_region is None:
            self.down_region = region
            return
        raise LineContactError(line_label, (*self.regions, region))

    def side_of(self, region: int) -> str | None:
        if region == self.up_region:
            return 'up'
        if region == self.down_region:
            return 'down'
        return None

    def other_region(self, region: int) -> int | None:
        if region == self.up_region:
            return self.down_region
        if region == self.down_region:
            return self.up_region
        return None


class WarningKind(str, Enum):
    """Recoverable integrity problems."""

    MISSING_LINE = 'missing_line'
    HEIGHT_CONFLICT = 'height_conflict'
    UNLINKED_REGION = 'unlinked_region'


@dataclass(frozen=True)
class IntegrityWarning:
    kind: WarningKind
    message: str
    region: int | None = None
    line: int | None = None
