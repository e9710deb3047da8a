"""
Service that assembles the render-ready dashboard view model.

Pipeline: normalize -> filter -> aggregate (over the filtered dataset) ->
chart geometry. Everything is recomputed from scratch on every call.
"""

import logging
from typing import List, Optional

from app.models.feedback import CourseGroup, DashboardView, FilterMode
from app.services.chart_geometry import bar_percentages, bar_widths, pie_geometry
from app.services.filter_engine import apply_filter
from app.services.normalizer import normalize_payload
from app.services.statistics_service import aggregate, course_summaries
from config import PIE_RADIUS

logger = logging.getLogger(__name__)


def build_view(dataset: List[CourseGroup], mode=FilterMode.ALL,
               radius: float = PIE_RADIUS) -> DashboardView:
    """Derive the view model for an already normalized dataset."""
    mode = FilterMode.parse(mode)
    filtered = apply_filter(dataset, mode)
    stats = aggregate(filtered)

    return DashboardView(
        mode=mode,
        filtered_dataset=filtered,
        statistics=stats,
        pie_geometry=pie_geometry(stats, radius),
        bar_percentages=bar_percentages(stats),
        bar_widths=bar_widths(stats),
        course_summaries=course_summaries(filtered),
    )


def build_dashboard(payload, mode=FilterMode.ALL, radius: Optional[float] = None) -> DashboardView:
    """
    Normalize a raw query API payload and derive its view model.

    Raises MalformedPayload before any statistics are computed when the
    payload reports failure or lacks a courses list.
    """
    dataset = normalize_payload(payload)
    view = build_view(dataset, mode, PIE_RADIUS if radius is None else radius)
    logger.info(f"Dashboard built: filter={view.mode.value}, "
                f"faculty={view.statistics.total_faculty}, courses={len(view.filtered_dataset)}")
    return view
