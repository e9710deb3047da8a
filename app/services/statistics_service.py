"""
Service for summary statistics over a (possibly filtered) dataset.
"""

from typing import List

from app.models.feedback import CATEGORY_ORDER, CourseGroup, CourseSummary, FacultyRow, Statistics
from app.services.classifier import classify, score_tier
from utils import get_initials, round_half_up


def aggregate(dataset: List[CourseGroup]) -> Statistics:
    """
    Count, rounded average, raw max/min and per-category counts over every
    faculty record in `dataset`. An empty dataset yields all zeros.
    """
    scores = [f.overall_score for g in dataset for f in g.faculties]

    count_by_category = {c: 0 for c in CATEGORY_ORDER}
    for score in scores:
        count_by_category[classify(score)] += 1

    if not scores:
        return Statistics(
            total_faculty=0,
            average_score=0,
            max_score=0,
            min_score=0,
            count_by_category=count_by_category,
        )

    return Statistics(
        total_faculty=len(scores),
        average_score=round_half_up(sum(scores) / len(scores)),
        max_score=max(scores),
        min_score=min(scores),
        count_by_category=count_by_category,
    )


def course_summaries(dataset: List[CourseGroup]) -> List[CourseSummary]:
    """Per-course cards: rounded course average and rows sorted by score, highest first."""
    summaries = []
    for group in dataset:
        faculties = group.faculties
        average = round_half_up(sum(f.overall_score for f in faculties) / len(faculties)) if faculties else 0

        # sorted() is stable, equal scores keep their course order
        ordered = sorted(faculties, key=lambda f: f.overall_score, reverse=True)
        rows = tuple(
            FacultyRow(
                faculty_name=f.faculty_name,
                staff_id=f.staff_id,
                overall_score=f.overall_score,
                total_responses=f.total_responses,
                tier=score_tier(f.overall_score),
                initials=get_initials(f.faculty_name),
            )
            for f in ordered
        )
        summaries.append(CourseSummary(
            course_code=group.course_code,
            course_name=group.course_name,
            faculty_count=len(faculties),
            average_score=average,
            rows=rows,
        ))
    return summaries
