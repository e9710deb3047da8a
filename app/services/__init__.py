from .classifier import classify, score_tier
from .normalizer import normalize_payload
from .filter_engine import apply_filter, rank_faculty, regroup_ranked
from .statistics_service import aggregate, course_summaries
from .chart_geometry import pie_geometry, bar_percentages, bar_widths
from .dashboard_service import build_view, build_dashboard

__all__ = [
    'classify', 'score_tier', 'normalize_payload',
    'apply_filter', 'rank_faculty', 'regroup_ranked',
    'aggregate', 'course_summaries',
    'pie_geometry', 'bar_percentages', 'bar_widths',
    'build_view', 'build_dashboard',
]
