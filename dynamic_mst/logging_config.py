import logging
import sys

from typing import Union

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s:%(funcName)s:%(lineno)d] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Union[int, str] = logging.WARNING) -> None:
    """Routes all records to stderr, away from the menu output. Calling it again replaces the previous handlers."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.setLevel(level)
    for old_handler in list(root.handlers):
        root.removeHandler(old_handler)
    root.addHandler(handler)

    logging.getLogger("dynamic_mst").setLevel(level)
    logging.getLogger("numba").setLevel(logging.WARNING)
