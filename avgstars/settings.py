from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import os

DEFAULT_RATINGS_FILE = "ratings.txt"


@dataclass(frozen=True)
class Settings:
    ratings: str | None
    file_path: str
    file_given: bool
    flexible: bool
    log_level: str


def default_ratings_path() -> str:
    return str(Path.cwd() / DEFAULT_RATINGS_FILE)


def load_settings(
    *,
    ratings: str | None = None,
    file: str | None = None,
    flexible: bool = False,
    log_level: str | None = None,
) -> Settings:
    def pick(env_key: str, cli_val: str | None, default: str) -> str:
        return cli_val or os.getenv(env_key) or default

    return Settings(
        ratings=ratings,
        file_path=file if file is not None else default_ratings_path(),
        file_given=file is not None,
        flexible=bool(flexible),
        log_level=pick("AVGSTARS_LOG_LEVEL", log_level, "INFO").upper(),
    )
