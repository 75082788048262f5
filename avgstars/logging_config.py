import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    # main() may run more than once per process (tests)
    for h in list(root.handlers):
        if getattr(h, "_avgstars", False):
            root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    handler._avgstars = True  # type: ignore[attr-defined]
    root.addHandler(handler)
