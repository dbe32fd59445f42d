# logger_utils.py - logging setup and block timing for the dsutils tools

import logging
import time
from typing import Optional

LOG_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("dsutils")


def setup_logging(level: str = "WARNING", path: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger: console handler plus an optional log file.
    Calling it again replaces the handlers instead of stacking them.
    """
    pkg = logging.getLogger("dsutils")
    pkg.setLevel(level.upper())
    for h in list(pkg.handlers):
        pkg.removeHandler(h)
        h.close()

    fmt = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if path:
        handlers.append(logging.FileHandler(path, encoding="utf-8"))
    for h in handlers:
        h.setFormatter(fmt)
        pkg.addHandler(h)
    return pkg


def time_block(label: str, log: Optional[logging.Logger] = None):
    """
    Helper for measuring execution time of a code block.
    To use:
        with time_block("load words") as t:
            do_some_work()
        t.elapsed  # seconds
    """
    return _Timer(label, log or logger)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, label, log):
        self.label = label
        self.log = log
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        self.log.info("%s done in %.3fs", self.label, self.elapsed)
        return False
