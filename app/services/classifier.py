from app.models.feedback import Category
from config import AVERAGE_THRESHOLD, EXCELLENT_THRESHOLD, GOOD_THRESHOLD, HIGH_TIER_THRESHOLD, MEDIUM_TIER_THRESHOLD


def classify(score) -> Category:
    """Map an overall score to its performance category. Boundaries go to the higher bucket."""
    if score >= EXCELLENT_THRESHOLD:
        return Category.EXCELLENT
    if score >= GOOD_THRESHOLD:
        return Category.GOOD
    if score >= AVERAGE_THRESHOLD:
        return Category.AVERAGE
    return Category.NEEDS_IMPROVEMENT


def score_tier(score) -> str:
    """Colour tier of the per-faculty score bar: high, medium or low."""
    if score >= HIGH_TIER_THRESHOLD:
        return 'high'
    if score >= MEDIUM_TIER_THRESHOLD:
        return 'medium'
    return 'low'
