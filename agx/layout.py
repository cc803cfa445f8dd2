"""Screen layout: panes split evenly above a one-row status bar."""

from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from math import floor

from agx.split import SplitDirection


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int
    y: int
    width: int
    height: int

    def inner(self, margin: int = 1) -> Rect:
        """The area inside a border of ``margin`` cells on every side."""
        return Rect(
            x=self.x + min(margin, self.width),
            y=self.y + min(margin, self.height),
            width=max(0, self.width - 2 * margin),
            height=max(0, self.height - 2 * margin),
        )


@dataclass
class LayoutState:
    """Where each pane, its contents and the status bar go."""

    pane_areas: list[Rect] = field(default_factory=list)
    pane_inners: list[Rect] = field(default_factory=list)
    status_area: Rect = Rect(0, 0, 0, 0)


def _even_cuts(length: int, count: int) -> list[tuple[int, int]]:
    """Offsets and sizes of ``count`` near-equal parts of ``length``."""
    edges = [floor(Fraction(length * i, count) + Fraction(1, 2)) for i in range(count + 1)]
    return [(start, end - start) for start, end in zip(edges, edges[1:])]


def compute_layout(area: Rect, pane_count: int, split: SplitDirection) -> LayoutState:
    """Lay out ``pane_count`` panes in ``area`` with a status bar below them."""
    pane_height = max(min(1, area.height), area.height - 1)
    pane_area = Rect(area.x, area.y, area.width, pane_height)
    status_area = Rect(area.x, area.y + pane_height, area.width, area.height - pane_height)

    if pane_count <= 0:
        pane_areas: list[Rect] = []
    elif split is SplitDirection.VERTICAL:
        pane_areas = [
            Rect(pane_area.x + offset, pane_area.y, size, pane_area.height)
            for offset, size in _even_cuts(pane_area.width, pane_count)
        ]
    else:
        pane_areas = [
            Rect(pane_area.x, pane_area.y + offset, pane_area.width, size)
            for offset, size in _even_cuts(pane_area.height, pane_count)
        ]

    return LayoutState(
        pane_areas=pane_areas,
        pane_inners=[rect.inner() for rect in pane_areas],
        status_area=status_area,
    )