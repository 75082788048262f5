from __future__ import annotations

import math

FULL_STAR = "★"
HALF_STAR = "½"


def _fractional_glyph(frac: float) -> str:
    # Bands are checked in order, so a tie at 0.39 lands in the first one.
    if 0.0 <= frac <= 0.39:
        return ""
    if 0.39 < frac <= 0.74:
        return HALF_STAR
    if 0.74 < frac <= 1.0:
        return FULL_STAR
    return ""


def star_rating(average: float) -> str:
    """
    Whole stars for the integer part, then at most one glyph for the rest:
      frac <= 0.39        -> nothing
      0.39 < frac <= 0.74 -> half star
      frac > 0.74         -> one more full star
    """
    whole = max(math.floor(average), 0)
    frac = average - whole
    return FULL_STAR * whole + _fractional_glyph(frac)


def format_result(average: float) -> str:
    return f"⌀: {star_rating(average)} ({average:.2f})"
