from __future__ import annotations

from collections.abc import Sequence


def average_rating(ratings: Sequence[float]) -> float | None:
    if not ratings:
        return None
    return sum(ratings) / len(ratings)
