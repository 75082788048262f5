from __future__ import annotations

import math

from .errors import RatingValidationError

VALID_RATING_MIN = 0.5
VALID_RATING_MAX = 5.0
RATING_STEP = 0.5


def fmt_number(value: float) -> str:
    # shortest round-trip form; 5.0 -> "5", 5.0000001 -> "5.0000001"
    s = repr(float(value))
    return s[:-2] if s.endswith(".0") else s


def range_text() -> str:
    return f"{fmt_number(VALID_RATING_MIN)}-{fmt_number(VALID_RATING_MAX)}"


def is_valid_rating(rating: float, flexible: bool = False) -> bool:
    """
    Range check always applies; the step check only outside flexible mode.

    The step check rounds to tenths first (half away from zero) so that
    values like 2.5000000000000004 still count as 0.5 steps.
    """
    if not (VALID_RATING_MIN <= rating <= VALID_RATING_MAX):
        return False
    if flexible:
        return True
    tenths = math.floor(rating * 10 + 0.5)
    return tenths % round(RATING_STEP * 10) == 0


def validate_rating(value: float, flexible: bool = False) -> float:
    v = float(value)
    if not is_valid_rating(v, flexible):
        step = "" if flexible else f" in {fmt_number(RATING_STEP)} steps"
        raise RatingValidationError(
            v,
            f"Invalid rating: {fmt_number(v)}. Ratings must be between "
            f"{fmt_number(VALID_RATING_MIN)} and {fmt_number(VALID_RATING_MAX)}{step}",
        )
    return v
