from .errors import AnalyticsError, MalformedPayload, InvalidFilterMode
from .feedback import (
    Category, CATEGORY_ORDER, FilterMode, FacultyRecord, CourseGroup,
    Statistics, PieGeometry, FacultyRow, CourseSummary, DashboardView,
)

__all__ = [
    'AnalyticsError', 'MalformedPayload', 'InvalidFilterMode',
    'Category', 'CATEGORY_ORDER', 'FilterMode', 'FacultyRecord', 'CourseGroup',
    'Statistics', 'PieGeometry', 'FacultyRow', 'CourseSummary', 'DashboardView',
]
