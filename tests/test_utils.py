import pytest

from utils import get_initials, round_half_up, to_count, to_text


@pytest.mark.parametrize("value, expected", [
    (79.5, 80),
    (79.49, 79),
    (0.5, 1),
    (-2.5, -2),
    (-2.51, -3),
    (100, 100),
])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_to_count():
    assert to_count(12) == 12
    assert to_count('7') == 7
    assert to_count(3.9) == 3
    assert to_count(-4) == 0
    assert to_count(None) == 0
    assert to_count('many') == 0


def test_to_text():
    assert to_text('  CS101 ') == 'CS101'
    assert to_text(2024) == '2024'
    assert to_text(None) == ''


@pytest.mark.parametrize("name, expected", [
    ('Anita Rao', 'AR'),
    ('  priya   k  s ', 'PS'),
    ('Madonna', 'M'),
    ('', '?'),
    ('   ', '?'),
    (None, '?'),
])
def test_get_initials(name, expected):
    assert get_initials(name) == expected
