import pytest

from app.models import Category
from app.services.classifier import classify, score_tier


@pytest.mark.parametrize("score, expected", [
    (100, Category.EXCELLENT),
    (90, Category.EXCELLENT),
    (89.999, Category.GOOD),
    (80, Category.GOOD),
    (79.99, Category.AVERAGE),
    (70, Category.AVERAGE),
    (69.5, Category.NEEDS_IMPROVEMENT),
    (0, Category.NEEDS_IMPROVEMENT),
])
def test_boundaries_belong_to_higher_category(score, expected):
    assert classify(score) is expected


def test_out_of_range_scores_use_same_rule():
    assert classify(-50) is Category.NEEDS_IMPROVEMENT
    assert classify(150) is Category.EXCELLENT


def test_every_score_gets_exactly_one_category():
    for tenth in range(-500, 1501):
        assert classify(tenth / 10) in set(Category)


def test_score_tier():
    assert score_tier(95) == 'high'
    assert score_tier(80) == 'high'
    assert score_tier(79.9) == 'medium'
    assert score_tier(70) == 'medium'
    assert score_tier(69) == 'low'
