import pytest

from app.models import CourseGroup, FacultyRecord
from main import create_app


def make_course(code, scores, name=None):
    """CourseGroup whose faculty are named '<code>-<index>'."""
    return CourseGroup(
        course_code=code,
        course_name=name if name is not None else f"{code} name",
        faculties=tuple(
            FacultyRecord(f"{code}-{i}", f"S{code}{i}", score, 10)
            for i, score in enumerate(scores)
        ),
    )


def names(dataset):
    return [f.faculty_name for g in dataset for f in g.faculties]


@pytest.fixture
def raw_payload():
    return {
        'success': True,
        'courses': [
            {
                'course_code': 'CS101',
                'course_name': 'Programming Fundamentals',
                'faculties': [
                    {'faculty_name': 'Anita Rao', 'staffid': 'KARE001', 'overall_score': 92, 'total_responses': 40},
                    {'faculty_name': 'Bala Murugan', 'staff_id': 'KARE002', 'overall_score': 78.5, 'total_responses': 35},
                    {'faculty_name': 'Chitra Devi', 'staffid': 'KARE003', 'overall_score': 65, 'total_responses': 22},
                ],
            },
            {
                'course_code': 'CS202',
                'course_name': 'Data Structures',
                'faculties': [
                    {'faculty_name': 'Dinesh Kumar', 'staffid': 'KARE004', 'overall_score': 88, 'total_responses': 31},
                    {'faculty_name': 'Esther Paul', 'staffid': 'KARE005', 'overall_score': 92, 'total_responses': 28},
                    {'faculty_name': 'Farhan Ali', 'staffid': 'KARE006', 'overall_score': 71, 'total_responses': 19},
                ],
            },
        ],
    }


@pytest.fixture
def app():
    return create_app({'TESTING': True, 'ANALYTICS_API_TOKEN': None})


@pytest.fixture
def client(app):
    return app.test_client()
