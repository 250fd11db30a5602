"""
test_geometry.py
----------------
Unit tests for chart geometry.
"""
import pytest

from reflog.stats.aggregation import Slice
from reflog.stats.geometry import (
    DONUT_START,
    bar_geometry,
    donut_geometry,
    line_geometry,
    scale_y,
)


class TestScaleY:
    @pytest.mark.parametrize(
        "value,expected", [(0, 200.0), (10, 100.0), (20, 0.0), (35, 0.0), (-3, 200.0)]
    )
    def test_fixed_domain_with_clamping(self, value, expected):
        assert scale_y(value, 200) == pytest.approx(expected)


class TestBarGeometry:
    def test_equal_slots(self):
        bars = bar_geometry([5, 20], width=100, height=100, gap=10)

        assert bars[0].x == pytest.approx(5)
        assert bars[0].width == pytest.approx(40)
        assert bars[1].x == pytest.approx(55)

    def test_heights_reach_baseline(self):
        bars = bar_geometry([5, 20], width=100, height=100)
        assert bars[0].y + bars[0].height == pytest.approx(100)
        assert bars[1].y == pytest.approx(0)

    def test_empty(self):
        assert bar_geometry([], 100, 100) == []


class TestLineGeometry:
    def test_points_at_slot_centres(self):
        points = line_geometry([0, 10, 20, 30], width=400, height=100)

        assert [p.x for p in points] == pytest.approx([50, 150, 250, 350])
        assert [p.y for p in points] == pytest.approx([100, 50, 0, 0])
        assert points[3].value == 30

    def test_empty(self):
        assert line_geometry([], 100, 100) == []


class TestDonutGeometry:
    def test_sweeps_cover_circle(self):
        slices = [Slice("a", 3, "red"), Slice("b", 1, "yellow")]
        arcs = donut_geometry(slices)

        assert arcs[0].start_angle == DONUT_START
        assert arcs[0].sweep == pytest.approx(270)
        assert arcs[1].start_angle == pytest.approx(180)
        assert arcs[-1].end_angle == pytest.approx(DONUT_START + 360)

    def test_zero_total(self):
        assert donut_geometry([Slice("a", 0, "red")]) == []
        assert donut_geometry([]) == []
