"""
Service for turning the raw visualization payload into a typed dataset.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import List

from app.models.errors import MalformedPayload
from app.models.feedback import CourseGroup, FacultyRecord
from utils import to_count, to_score, to_text

logger = logging.getLogger(__name__)


def _is_sequence(value) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _normalize_faculty(entry) -> FacultyRecord:
    if not isinstance(entry, Mapping):
        logger.warning(f"Faculty entry is not an object, using defaults: {entry!r}")
        entry = {}

    name = entry.get('faculty_name') or entry.get('name')
    staff_id = entry.get('staffid') or entry.get('staff_id')

    return FacultyRecord(
        faculty_name=to_text(name),
        staff_id=to_text(staff_id),
        overall_score=to_score(entry.get('overall_score')),
        total_responses=to_count(entry.get('total_responses')),
    )


def _normalize_course(entry) -> CourseGroup:
    if not isinstance(entry, Mapping):
        logger.warning(f"Course entry is not an object, using defaults: {entry!r}")
        entry = {}

    faculties = entry.get('faculties')
    if not _is_sequence(faculties):
        faculties = []

    return CourseGroup(
        course_code=to_text(entry.get('course_code')),
        course_name=to_text(entry.get('course_name')),
        faculties=tuple(_normalize_faculty(f) for f in faculties),
    )


def normalize_payload(payload) -> List[CourseGroup]:
    """
    Validate the envelope of a query API response and default its leaves.

    Raises MalformedPayload when the payload is not an object, reports
    success=false (the upstream 'error' text is kept verbatim) or has no
    courses list. Leaf fields never raise; no record is dropped.
    """
    if not isinstance(payload, Mapping):
        raise MalformedPayload("Visualization payload must be a JSON object")

    if not payload.get('success'):
        error = payload.get('error')
        raise MalformedPayload(error if error else "Failed to fetch visualization data")

    courses = payload.get('courses')
    if not _is_sequence(courses):
        raise MalformedPayload("Visualization payload has no courses list")

    dataset = [_normalize_course(c) for c in courses]
    logger.debug(f"Normalized {len(dataset)} courses, "
                 f"{sum(len(g.faculties) for g in dataset)} faculty records")
    return dataset
