"""
Utils module - small helpers shared by the analytics services and routes.
"""
import math


def round_half_up(value):
    """Round to the nearest integer, halves go up (79.5 -> 80, -2.5 -> -2)."""
    floor = math.floor(value)
    if value - floor >= 0.5:
        return int(floor) + 1
    return int(floor)


def to_score(value):
    """
    Coerce a raw overall_score into a float.
    Missing, boolean, non-numeric and non-finite values become 0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if not isinstance(value, (int, float, str)):
        return 0.0
    try:
        score = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        return 0.0
    if not math.isfinite(score):
        return 0.0
    return score


def to_count(value):
    """Coerce a raw total_responses into a non-negative integer (default 0)."""
    if value is None or isinstance(value, bool):
        return 0
    try:
        count = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(count, 0)


def to_text(value):
    """Strings pass through stripped, numbers are stringified, anything else is ''."""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ''


def get_initials(full_name):
    """Initials of the first and last word of a name, '?' when there are none."""
    if not full_name or not isinstance(full_name, str):
        return '?'
    parts = full_name.split()
    if not parts:
        return '?'
    first = parts[0][0]
    last = parts[-1][0] if len(parts) > 1 else ''
    return (first + last).upper() or '?'
