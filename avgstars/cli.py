import argparse
import logging
import sys

from .errors import RatingsError, RatingsFileNotFound
from .logging_config import setup_logging
from .ratings_input import ratings_from_file, ratings_from_manual_input
from .render import format_result
from .settings import Settings, load_settings
from .stats import average_rating

VERSION = "0.1.0"

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="avgstars",
        description="Average a list of ratings and show it as stars.",
    )
    p.add_argument("-f", "--file", help="File containing the ratings (default: ./ratings.txt)")
    p.add_argument("-r", "--ratings", help="Ratings provided manually, comma separated")
    p.add_argument(
        "-x",
        "--flexible",
        action="store_true",
        help="Allow arbitrary rating steps (not restricted to 0.5 steps)",
    )
    p.add_argument("--log-level")
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {VERSION}")
    return p


def parse_args(argv: list[str] | None = None, parser: argparse.ArgumentParser | None = None) -> argparse.Namespace:
    return (parser or build_parser()).parse_args(argv)


def run(settings: Settings, parser: argparse.ArgumentParser) -> int:
    try:
        if settings.ratings is not None:
            ratings = ratings_from_manual_input(settings.ratings, settings.flexible)
        else:
            log.debug(
                "Reading ratings from %s%s",
                settings.file_path,
                "" if settings.file_given else " (default)",
            )
            ratings = ratings_from_file(settings.file_path, settings.flexible)
    except RatingsError as e:
        print(f"Error: {e}", file=sys.stderr)
        if isinstance(e, RatingsFileNotFound):
            parser.print_help()
        return 1

    average = average_rating(ratings)
    if average is None:
        print("No valid ratings found.")
        parser.print_help()
        return 0

    print(format_result(average))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parse_args(argv, parser)

    settings = load_settings(
        ratings=args.ratings,
        file=args.file,
        flexible=args.flexible,
        log_level=args.log_level,
    )
    setup_logging(settings.log_level)
    log.debug("Settings: %s", settings)

    return run(settings, parser)


if __name__ == "__main__":
    sys.exit(main())
