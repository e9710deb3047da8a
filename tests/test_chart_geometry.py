import math

import pytest

from app.models import CATEGORY_ORDER, Category
from app.services.chart_geometry import bar_percentages, bar_widths, pie_geometry
from app.services.statistics_service import aggregate
from conftest import make_course


def test_no_pie_for_empty_statistics():
    assert pie_geometry(aggregate([]), 80) is None


def test_arcs_cover_circumference():
    stats = aggregate([make_course('A', [95, 92, 85, 71, 40, 30, 20])])
    geometry = pie_geometry(stats, 80)

    assert geometry.circumference == pytest.approx(2 * math.pi * 80)
    assert sum(geometry.arc_length.values()) == pytest.approx(geometry.circumference, abs=1e-6)


def test_offsets_are_cumulative_and_include_empty_slices():
    # no 'good' faculty at all
    stats = aggregate([make_course('A', [95, 75, 60, 50])])
    geometry = pie_geometry(stats, 10)
    quarter = geometry.circumference / 4

    assert geometry.arc_length[Category.EXCELLENT] == pytest.approx(quarter)
    assert geometry.arc_length[Category.GOOD] == 0
    assert geometry.arc_offset[Category.EXCELLENT] == 0
    assert geometry.arc_offset[Category.GOOD] == pytest.approx(quarter)
    assert geometry.arc_offset[Category.AVERAGE] == pytest.approx(quarter)
    assert geometry.arc_offset[Category.NEEDS_IMPROVEMENT] == pytest.approx(2 * quarter)


def test_single_category_takes_whole_circle():
    stats = aggregate([make_course('A', [91, 99])])
    geometry = pie_geometry(stats, 1)
    assert geometry.arc_length[Category.EXCELLENT] == pytest.approx(2 * math.pi)
    assert all(geometry.arc_length[c] == 0 for c in CATEGORY_ORDER[1:])


def test_pie_geometry_to_dict():
    geometry = pie_geometry(aggregate([make_course('A', [95])]), 80)
    data = geometry.to_dict()
    assert list(data['arcLength']) == ['excellent', 'good', 'average', 'needsImprovement']
    assert data['arcOffset']['needsImprovement'] == pytest.approx(geometry.circumference)


def test_bar_percentages_round_half_up():
    # 1/8 -> 12.5%, 3/8 -> 37.5%
    stats = aggregate([make_course('A', [95, 85, 85, 85, 75, 75, 75, 75])])
    assert bar_percentages(stats) == {
        Category.EXCELLENT: 13,
        Category.GOOD: 38,
        Category.AVERAGE: 50,
        Category.NEEDS_IMPROVEMENT: 0,
    }


def test_bar_widths_are_unrounded():
    stats = aggregate([make_course('A', [95, 85, 60])])
    widths = bar_widths(stats)
    assert widths[Category.EXCELLENT] == pytest.approx(100 / 3)
    assert widths[Category.AVERAGE] == 0


def test_bars_for_empty_statistics():
    stats = aggregate([])
    assert set(bar_percentages(stats).values()) == {0}
    assert set(bar_widths(stats).values()) == {0}
