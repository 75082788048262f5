from __future__ import annotations


class RatingsError(Exception):
    """Base for every failure that stops a run with a non-zero exit."""


class RatingsFileNotFound(RatingsError):
    def __init__(self, path: str) -> None:
        super().__init__(f"File '{path}' not found!")
        self.path = path


class RatingsFileReadError(RatingsError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to read file {path}: {reason}")
        self.path = path


class RatingParseError(RatingsError, ValueError):
    def __init__(self, token: str, *, source: str = "rating") -> None:
        if source == "line":
            msg = f"Failed to parse line as a number: {token!r}"
        else:
            msg = f"Failed to parse rating: {token!r}"
        super().__init__(msg)
        self.token = token


class RatingValidationError(RatingsError, ValueError):
    def __init__(self, rating: float, message: str) -> None:
        super().__init__(message)
        self.rating = rating
