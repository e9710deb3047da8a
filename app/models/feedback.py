"""
Data model for the faculty performance dashboard.

A dataset is a plain list of CourseGroup objects in the order the query API
returned them. Records are immutable; every service returns new objects.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from config import CATEGORY_LABELS, FILTER_LABELS
from .errors import InvalidFilterMode


class Category(str, Enum):
    EXCELLENT = 'excellent'
    GOOD = 'good'
    AVERAGE = 'average'
    NEEDS_IMPROVEMENT = 'needsImprovement'

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self.value]


# Fixed draw order for legends, pie slices and bars
CATEGORY_ORDER: Tuple[Category, ...] = (
    Category.EXCELLENT,
    Category.GOOD,
    Category.AVERAGE,
    Category.NEEDS_IMPROVEMENT,
)


class FilterMode(str, Enum):
    ALL = 'all'
    EXCELLENT = 'excellent'
    GOOD = 'good'
    AVERAGE = 'average'
    NEEDS_IMPROVEMENT = 'needsImprovement'
    HIGHEST = 'highest'
    LOWEST = 'lowest'

    @property
    def label(self) -> str:
        return FILTER_LABELS[self.value]

    @property
    def category(self) -> Optional[Category]:
        """The category a bucket filter keeps, None for all/highest/lowest."""
        try:
            return Category(self.value)
        except ValueError:
            return None

    @classmethod
    def parse(cls, value) -> 'FilterMode':
        """Accept a FilterMode or its wire name; anything else is a programming error."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise InvalidFilterMode(value)


@dataclass(frozen=True)
class FacultyRecord:
    faculty_name: str
    staff_id: str
    overall_score: float
    total_responses: int = 0

    def to_dict(self) -> dict:
        return {
            'faculty_name': self.faculty_name,
            'staff_id': self.staff_id,
            'overall_score': self.overall_score,
            'total_responses': self.total_responses,
        }


@dataclass(frozen=True)
class CourseGroup:
    course_code: str
    course_name: str
    faculties: Tuple[FacultyRecord, ...] = ()

    def to_dict(self) -> dict:
        return {
            'course_code': self.course_code,
            'course_name': self.course_name,
            'faculties': [f.to_dict() for f in self.faculties],
        }


@dataclass(frozen=True)
class Statistics:
    total_faculty: int
    average_score: int
    max_score: float
    min_score: float
    count_by_category: Dict[Category, int]

    def to_dict(self) -> dict:
        return {
            'totalFaculty': self.total_faculty,
            'averageScore': self.average_score,
            'maxScore': self.max_score,
            'minScore': self.min_score,
            'facultyByScore': {c.value: self.count_by_category[c] for c in CATEGORY_ORDER},
        }


@dataclass(frozen=True)
class PieGeometry:
    arc_length: Dict[Category, float]
    arc_offset: Dict[Category, float]
    circumference: float

    def to_dict(self) -> dict:
        return {
            'arcLength': {c.value: self.arc_length[c] for c in CATEGORY_ORDER},
            'arcOffset': {c.value: self.arc_offset[c] for c in CATEGORY_ORDER},
            'circumference': self.circumference,
        }


@dataclass(frozen=True)
class FacultyRow:
    faculty_name: str
    staff_id: str
    overall_score: float
    total_responses: int
    tier: str
    initials: str

    def to_dict(self) -> dict:
        return {
            'faculty_name': self.faculty_name,
            'staff_id': self.staff_id,
            'overall_score': self.overall_score,
            'total_responses': self.total_responses,
            'tier': self.tier,
            'initials': self.initials,
        }


@dataclass(frozen=True)
class CourseSummary:
    course_code: str
    course_name: str
    faculty_count: int
    average_score: int
    rows: Tuple[FacultyRow, ...] = ()

    def to_dict(self) -> dict:
        return {
            'course_code': self.course_code,
            'course_name': self.course_name,
            'faculty_count': self.faculty_count,
            'average_score': self.average_score,
            'faculties': [r.to_dict() for r in self.rows],
        }


@dataclass(frozen=True)
class DashboardView:
    """Render-ready output for one (dataset, filter) pair."""
    mode: FilterMode
    filtered_dataset: List[CourseGroup]
    statistics: Statistics
    pie_geometry: Optional[PieGeometry]
    bar_percentages: Dict[Category, int]
    bar_widths: Dict[Category, float]
    course_summaries: List[CourseSummary] = field(default_factory=list)

    @property
    def showing(self) -> Optional[int]:
        """Count for the 'Showing N faculty' badge, only while a filter is active."""
        if self.mode is FilterMode.ALL:
            return None
        return self.statistics.total_faculty

    def to_dict(self) -> dict:
        return {
            'filter': self.mode.value,
            'legend': [{'value': c.value, 'label': c.label} for c in CATEGORY_ORDER],
            'showing': self.showing,
            'filteredDataset': [g.to_dict() for g in self.filtered_dataset],
            'statistics': self.statistics.to_dict(),
            'pieGeometry': self.pie_geometry.to_dict() if self.pie_geometry else None,
            'barPercentages': {c.value: self.bar_percentages[c] for c in CATEGORY_ORDER},
            'barWidths': {c.value: self.bar_widths[c] for c in CATEGORY_ORDER},
            'courses': [s.to_dict() for s in self.course_summaries],
        }
