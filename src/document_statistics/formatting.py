from __future__ import annotations

LESS_THAN_ONE_MINUTE = "< 1m"

VERY_EASY_READING_EASE = "Very Easy"
EASY_READING_EASE = "Easy"
MEDIUM_READING_EASE = "Medium"
DIFFICULT_READING_EASE = "Difficult"
VERY_DIFFICULT_READING_EASE = "Very Difficult"

# Upper LIX bounds (exclusive) for each reading ease band.
_LIX_BANDS = (
    (25, VERY_EASY_READING_EASE),
    (35, EASY_READING_EASE),
    (45, MEDIUM_READING_EASE),
    (55, DIFFICULT_READING_EASE),
)


def format_reading_time(minutes: int) -> str:
    """Render a reading time such as ``< 1m``, ``12m`` or ``1h 05m``."""
    if minutes <= 0:
        return LESS_THAN_ONE_MINUTE
    hours, remainder = divmod(minutes, 60)
    if hours == 0:
        return f"{remainder}m"
    return f"{hours}h {remainder:02d}m"


def lix_reading_ease(lix: int) -> str:
    """Map a LIX score to its reading ease label."""
    for upper, label in _LIX_BANDS:
        if lix < upper:
            return label
    return VERY_DIFFICULT_READING_EASE
