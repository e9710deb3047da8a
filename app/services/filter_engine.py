"""
Service for applying the dashboard performance filter to a dataset.

Bucket filters keep the matching faculty of every course in place. The
highest/lowest filters build a leaderboard across all courses and regroup it
by course in ranked order.
"""

import logging
from typing import Dict, List, Tuple

import pandas as pd

from app.models.feedback import CourseGroup, FacultyRecord, FilterMode
from app.services.classifier import classify
from config import RANKING_LIMIT

logger = logging.getLogger(__name__)

# (course_code, course_name, record)
RankedEntry = Tuple[str, str, FacultyRecord]


def _filter_by_category(dataset: List[CourseGroup], mode: FilterMode) -> List[CourseGroup]:
    category = mode.category
    filtered = []
    for group in dataset:
        kept = tuple(f for f in group.faculties if classify(f.overall_score) == category)
        if kept:
            filtered.append(CourseGroup(group.course_code, group.course_name, kept))
    return filtered


def rank_faculty(dataset: List[CourseGroup], descending: bool = True,
                 limit: int = RANKING_LIMIT) -> List[RankedEntry]:
    """
    Flatten every faculty record (course order, then in-course order) and
    return the first `limit` by overall score. Equal scores keep flatten order.
    """
    entries = [(g.course_code, g.course_name, f) for g in dataset for f in g.faculties]
    if not entries:
        return []

    frame = pd.DataFrame({
        'position': range(len(entries)),
        'overall_score': [e[2].overall_score for e in entries],
    })
    ranked = frame.sort_values(
        ['overall_score', 'position'],
        ascending=[not descending, True],
    ).head(limit)

    return [entries[int(p)] for p in ranked['position']]


def regroup_ranked(ranked: List[RankedEntry]) -> List[CourseGroup]:
    """
    Regroup a ranked list by course code. A group is created the first time
    its code is seen and keeps that position; members stay in ranked order.
    """
    groups: Dict[str, Tuple[str, List[FacultyRecord]]] = {}
    order: List[str] = []
    for course_code, course_name, record in ranked:
        if course_code not in groups:
            groups[course_code] = (course_name, [])
            order.append(course_code)
        groups[course_code][1].append(record)

    return [
        CourseGroup(code, groups[code][0], tuple(groups[code][1]))
        for code in order
    ]


def apply_filter(dataset: List[CourseGroup], mode) -> List[CourseGroup]:
    """Return the view of `dataset` selected by `mode`. The input is never mutated."""
    mode = FilterMode.parse(mode)

    if mode is FilterMode.ALL:
        result = list(dataset)
    elif mode in (FilterMode.HIGHEST, FilterMode.LOWEST):
        ranked = rank_faculty(dataset, descending=mode is FilterMode.HIGHEST)
        result = regroup_ranked(ranked)
    else:
        result = _filter_by_category(dataset, mode)

    logger.debug(f"Filter '{mode.value}' kept {len(result)} courses, "
                 f"{sum(len(g.faculties) for g in result)} faculty")
    return result
