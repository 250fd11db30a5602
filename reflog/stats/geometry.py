"""
Chart Geometry
--------------

Maps small series (at most twelve points) onto a plot rectangle.

Coordinates use screen orientation: the origin is the top-left corner of
the plot and y grows downwards. The y-domain is fixed to 0-20; larger
values are clamped to the top edge. Angles are in degrees, with -90 at
the top of the circle and positive sweeps running clockwise.

Functions:
    - scale_y: Value to y coordinate
    - bar_geometry: One rectangle per value in equal slots
    - line_geometry: One point per value at slot centres
    - donut_geometry: Arcs proportional to slice counts
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .aggregation import Slice

Y_MAX = 20
Y_TICKS: Tuple[int, ...] = (5, 10, 15, 20)
DONUT_START = -90.0
DONUT_INNER_RATIO = 0.6


@dataclass(frozen=True)
class Bar:
    """Rectangle for one bar, in plot coordinates."""
    x:      float
    y:      float
    width:  float
    height: float
    value:  int


@dataclass(frozen=True)
class Point:
    """Marker position for one line-chart value."""
    x:     float
    y:     float
    value: int


@dataclass(frozen=True)
class Arc:
    """
    One donut segment.

    Fields:
    - label:       Slice label
    - color:       Slice colour name
    - start_angle: Degrees, -90 is the top
    - sweep:       Clockwise extent in degrees
    - count:       Slice count
    """
    label:       str
    color:       str
    start_angle: float
    sweep:       float
    count:       int

    @property
    def end_angle(self) -> float:
        return self.start_angle + self.sweep


def scale_y(value: float, height: float) -> float:
    """y coordinate of ``value`` in a plot of the given height."""
    clamped = min(max(value, 0), Y_MAX)
    return (1 - clamped / Y_MAX) * height


def bar_geometry(
    values: Sequence[int], width: float, height: float, gap: float = 8.0
) -> List[Bar]:
    """
    Bars in equal-width slots across the plot.

    Args:
        values: Series values
        width: Plot width
        height: Plot height
        gap: Horizontal space between neighbouring bars

    Returns:
        One Bar per value, left to right
    """
    if not values:
        return []

    slot = width / len(values)
    bar_width = max(slot - gap, 1.0)
    bars = []
    for i, value in enumerate(values):
        top = scale_y(value, height)
        bars.append(
            Bar(
                x=i * slot + (slot - bar_width) / 2,
                y=top,
                width=bar_width,
                height=height - top,
                value=value,
            )
        )
    return bars


def line_geometry(values: Sequence[int], width: float, height: float) -> List[Point]:
    """Points at the centre of each equal-width slot; consecutive points are joined."""
    if not values:
        return []

    slot = width / len(values)
    return [
        Point(x=(i + 0.5) * slot, y=scale_y(value, height), value=value)
        for i, value in enumerate(values)
    ]


def donut_geometry(slices: Sequence[Slice]) -> List[Arc]:
    """
    Arcs proportional to slice counts, clockwise from the top.

    The sweeps add up to 360 degrees; a zero total yields no arcs.
    """
    total = sum(s.count for s in slices)
    if total <= 0:
        return []

    arcs = []
    angle = DONUT_START
    for s in slices:
        sweep = s.count / total * 360.0
        arcs.append(Arc(s.label, s.color, angle, sweep, s.count))
        angle += sweep
    return arcs
