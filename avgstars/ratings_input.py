import logging
import re
from pathlib import Path

from .errors import RatingParseError, RatingsFileNotFound, RatingsFileReadError
from .validation import fmt_number, is_valid_rating, range_text, validate_rating

log = logging.getLogger(__name__)

# ASCII digits only; no digit-group underscores
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?|inf|infinity|nan)",
    re.ASCII | re.IGNORECASE,
)


def parse_rating(token: str, *, source: str = "rating") -> float:
    text = token.strip()
    if not _FLOAT_RE.fullmatch(text):
        raise RatingParseError(token, source=source)
    return float(text)


def ratings_from_manual_input(text: str, flexible: bool = False) -> list[float]:
    """
    Strict: the first unparsable or invalid entry aborts the whole input.
    """
    ratings: list[float] = []
    for token in text.split(","):
        ratings.append(validate_rating(parse_rating(token), flexible))

    log.debug("Read %d ratings from command line", len(ratings))
    return ratings


def ratings_from_file(path: str, flexible: bool = False) -> list[float]:
    """
    One number per line. Unparsable lines (blank ones included) abort the read;
    parsed values outside the valid range/step are skipped with a warning.
    """
    p = Path(path)
    # Path("") means ".", which exists
    if not path or not p.exists():
        raise RatingsFileNotFound(path)

    ratings: list[float] = []
    skipped = 0
    try:
        with p.open(encoding="utf-8") as f:
            for raw in f:
                line = raw.rstrip("\r\n")
                rating = parse_rating(line, source="line")
                if is_valid_rating(rating, flexible):
                    ratings.append(rating)
                else:
                    skipped += 1
                    log.warning(
                        "Rating %s outside of valid range (%s) or invalid step",
                        fmt_number(rating),
                        range_text(),
                    )
    except (OSError, UnicodeDecodeError) as e:
        raise RatingsFileReadError(path, str(e)) from e

    log.debug("Read %d ratings from %s (%d skipped)", len(ratings), path, skipped)
    return ratings
