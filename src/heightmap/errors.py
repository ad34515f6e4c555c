"""Fatal integrity errors raised by the heightmap pipeline."""

from __future__ import annotations


class HeightmapError(RuntimeError):
    """Base class: the input breaks a structural assumption and the run is aborted."""


class LabelSpaceExhaustedError(HeightmapError):
    """More connected components than the label grid can represent."""

    def __init__(self, kind: str, seed: tuple[int, int], label_max: int) -> None:
        self.kind = kind
        self.seed = seed
        self.label_max = label_max
        x, y = seed
        msg = (
            f'Label space exhausted: {kind} component seeded at ({x}, {y}) '
            f'needs label {label_max + 1}, maximum is {label_max}'
        )
        super().__init__(msg)


class LineContactError(HeightmapError):
    """A relief line touches a third distinct region."""

    def __init__(self, line_label: int, regions: tuple[int, ...]) -> None:
        self.line_label = line_label
        self.regions = regions
        msg = (
            f'Relief line {line_label} borders more than two regions: '
            f'{", ".join(str(r) for r in regions)}'
        )
        super().__init__(msg)
