"""
Logging setup for the application process.
"""
import functools
import logging
import sys

from trip_planner.core.errors import AppError, StoreError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Install a single stdout handler on the root logger."""
    root = logging.getLogger()
    root.setLevel(level.upper())
    # Replace our own handler on repeated calls, leave foreign ones alone
    for existing in [h for h in root.handlers if getattr(h, "_trip_planner", False)]:
        root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._trip_planner = True
    root.addHandler(handler)


def log_failures(operation: str):
    """Log an operation's structured failures before they propagate."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except StoreError as e:
                logging.getLogger(func.__module__).error(f"{operation} failed: {e.message}")
                raise
            except AppError as e:
                logging.getLogger(func.__module__).warning(f"{operation} rejected: {e.message}")
                raise
        return wrapper
    return decorator
