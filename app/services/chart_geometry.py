"""
Chart geometry for the performance distribution pie and breakdown bars.

The pie is drawn as one stroked circle per category: each arc is a dash of
`arc_length` starting `arc_offset` along the circumference, in CATEGORY_ORDER.
"""

import math
from typing import Dict, Optional

from app.models.feedback import CATEGORY_ORDER, Category, PieGeometry, Statistics
from config import PIE_RADIUS
from utils import round_half_up


def pie_geometry(stats: Statistics, radius: float = PIE_RADIUS) -> Optional[PieGeometry]:
    """Arc lengths/offsets per category, or None when there is nothing to draw."""
    total = stats.total_faculty
    if total == 0:
        return None

    circumference = 2 * math.pi * radius
    arc_length = {}
    arc_offset = {}
    cumulative = 0.0
    for category in CATEGORY_ORDER:
        # zero-length arcs still get an offset so later slices stay aligned
        arc_offset[category] = cumulative
        arc_length[category] = (stats.count_by_category[category] / total) * circumference
        cumulative += arc_length[category]

    return PieGeometry(arc_length=arc_length, arc_offset=arc_offset, circumference=circumference)


def bar_widths(stats: Statistics) -> Dict[Category, float]:
    """Unrounded share of each category in percent, used as the bar fill width."""
    total = stats.total_faculty
    return {
        c: (stats.count_by_category[c] / total) * 100 if total > 0 else 0
        for c in CATEGORY_ORDER
    }


def bar_percentages(stats: Statistics) -> Dict[Category, int]:
    """Rounded percentage labels shown on the bars."""
    return {c: round_half_up(width) for c, width in bar_widths(stats).items()}
