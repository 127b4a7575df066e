"""Console (and optional file) logging for everything under `mappoints`."""
from __future__ import annotations
import logging
import sys
from typing import List, Optional, Union

LOGGER_NAME = "mappoints"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach handlers to the `mappoints` logger. `level` is a logging constant
    or its name ("DEBUG"). Calling it again replaces the earlier handlers.
    """
    if isinstance(level, str):
        name, level = level, logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"unknown log level: {name!r}")

    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for h in handlers:
        h.setLevel(level)
        h.setFormatter(fmt)
        root.addHandler(h)

    root.debug("Logging to %s", log_file or "stdout")
    return root
