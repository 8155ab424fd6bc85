"""Priority weight for a note: grows with time since review, shrinks with review count.

The curve is somewhat arbitrary. Everything else only relies on ``weight()``,
so it can be swapped here without touching selection or storage.
"""

import math
from datetime import date

from memo.models import Record

BASIC_WEIGHT = 10.0
MINIMUM_WEIGHT = 1.0
DECAY_RATE = 0.96
# Reviewed notes approach BASIC_WEIGHT + 100 and reach it in float after ~900 days.
NEVER_REVIEWED_WEIGHT = BASIC_WEIGHT + 101.0


def retention(days: int) -> float:
    """Fraction of a note assumed remembered ``days`` after reviewing it."""
    return DECAY_RATE ** max(days, 0)


def weight(record: Record, today: date) -> float:
    if record.last_reviewed is None:
        return NEVER_REVIEWED_WEIGHT

    days = max((today - record.last_reviewed).days, 0)
    priority = (1.0 - retention(days)) * 100.0
    penalty = math.log(record.review_count) * 5.0 if record.review_count > 0 else 0.0
    return max(BASIC_WEIGHT + priority - penalty, MINIMUM_WEIGHT)
